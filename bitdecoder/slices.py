"""
Raw byte slices read through the bit cursor.

Bytes are produced with 8-bit reads, so the reader's bit_order applies to
each of them. A failed read discards the partial slice.
"""

from bitdecoder.errors import InvalidArgumentError

# Import for type hints only
if False:  # noqa: SIM108
    from bitdecoder.bitreader import BitReader


def read_bits_to_slice(reader: "BitReader", num_bits: int) -> bytes:
    """
    Read num_bits into ceil(num_bits / 8) bytes.

    Every byte but the last is a full 8-bit read. When num_bits is not a
    multiple of 8, the last byte holds read_bits(num_bits % 8) in its
    low-order bits.

    Args:
        reader: BitReader to read from
        num_bits: Number of bits to read (0 returns b"")

    Returns:
        Bytes read

    Raises:
        InvalidArgumentError: If num_bits is negative
        EndOfStreamError: If not enough bits available
    """
    if num_bits < 0:
        raise InvalidArgumentError(f"Bit count must be >= 0, got {num_bits}")

    full_bytes, extra_bits = divmod(num_bits, 8)
    out = bytearray()
    for _ in range(full_bytes):
        out.append(reader.read_bits(8))

    # Not enough left to fill a whole byte
    if extra_bits:
        out.append(reader.read_bits(extra_bits))

    return bytes(out)


def read_bytes_to_slice(reader: "BitReader", num_bytes: int) -> bytes:
    """
    Read num_bytes sequential bytes.

    Args:
        reader: BitReader to read from
        num_bytes: Number of bytes to read (0 returns b"")

    Returns:
        Bytes read, in order

    Raises:
        InvalidArgumentError: If num_bytes is negative
        EndOfStreamError: If not enough bytes available
    """
    if num_bytes < 0:
        raise InvalidArgumentError(f"Byte count must be >= 0, got {num_bytes}")

    return bytes(reader.read_bytes(1) for _ in range(num_bytes))
