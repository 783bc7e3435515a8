"""
Typed value decoding (booleans, fixed-width integers, IEEE-754 floats).

Every function reads through BitReader.read_bits(), so the reader's
bit_order governs both the per-byte bit order and the assembly order of
the value. Signed integers use two's-complement truncation to the
requested width; floats reinterpret the raw bit pattern without rounding.

All functions raise EndOfStreamError or InvalidArgumentError on failure.
Wrap a call in errors.unwrap() to turn those into ReaderAbort instead.
"""

import struct

# Import for type hints only
if False:  # noqa: SIM108
    from bitdecoder.bitreader import BitReader


def read_uint(reader: "BitReader", num_bits: int) -> int:
    """
    Read an unsigned integer of any width.

    Args:
        reader: BitReader to read from
        num_bits: Width in bits, 1 to 64

    Returns:
        Value in [0, 2**num_bits)
    """
    return reader.read_bits(num_bits)


def read_int(reader: "BitReader", num_bits: int) -> int:
    """
    Read a two's-complement signed integer of any width.

    Args:
        reader: BitReader to read from
        num_bits: Width in bits, 1 to 64

    Returns:
        Value in [-2**(num_bits-1), 2**(num_bits-1))
    """
    value = reader.read_bits(num_bits)
    if value & (1 << (num_bits - 1)):
        value -= 1 << num_bits
    return value


def read_bool(reader: "BitReader") -> bool:
    """Read one bit; True iff it is 1."""
    return reader.read_bit() == 1


def read_u8(reader: "BitReader") -> int:
    return read_uint(reader, 8)


def read_i8(reader: "BitReader") -> int:
    return read_int(reader, 8)


def read_u16(reader: "BitReader") -> int:
    return read_uint(reader, 16)


def read_i16(reader: "BitReader") -> int:
    return read_int(reader, 16)


def read_u32(reader: "BitReader") -> int:
    return read_uint(reader, 32)


def read_i32(reader: "BitReader") -> int:
    return read_int(reader, 32)


def read_u64(reader: "BitReader") -> int:
    return read_uint(reader, 64)


def read_i64(reader: "BitReader") -> int:
    return read_int(reader, 64)


def read_f32(reader: "BitReader") -> float:
    """
    Read 32 bits as an IEEE-754 single precision float.

    The assembled integer is the bit pattern of the float, so the result
    depends on bit_order exactly as read_u32() does.
    """
    bits = reader.read_bits(32)
    return struct.unpack(">f", bits.to_bytes(4, "big"))[0]


def read_f64(reader: "BitReader") -> float:
    """Read 64 bits as an IEEE-754 double precision float."""
    bits = reader.read_bits(64)
    return struct.unpack(">d", bits.to_bytes(8, "big"))[0]
