"""
bitdecoder: sequential bit-level decoding

Extracts arbitrary-width integers, floats, booleans, strings and raw byte
slices from a byte source, one bit or one byte at a time, reading bits
either MSB-first or LSB-first.
"""

__version__ = "1.0.0"

from bitdecoder.bitreader import LSB_FIRST, MSB_FIRST, BitReader
from bitdecoder.errors import (
    BitReaderError,
    EndOfStreamError,
    InvalidArgumentError,
    ReaderAbort,
    unwrap,
)
from bitdecoder.lookahead import peek_bit, peek_bits, read_remaining_bits
from bitdecoder.slices import read_bits_to_slice, read_bytes_to_slice
from bitdecoder.strings import read_string, read_string_length
from bitdecoder.values import (
    read_bool,
    read_f32,
    read_f64,
    read_i8,
    read_i16,
    read_i32,
    read_i64,
    read_int,
    read_u8,
    read_u16,
    read_u32,
    read_u64,
    read_uint,
)

__all__ = [
    "BitReader",
    "MSB_FIRST",
    "LSB_FIRST",
    "BitReaderError",
    "EndOfStreamError",
    "InvalidArgumentError",
    "ReaderAbort",
    "unwrap",
    "read_bool",
    "read_u8",
    "read_i8",
    "read_u16",
    "read_i16",
    "read_u32",
    "read_i32",
    "read_u64",
    "read_i64",
    "read_uint",
    "read_int",
    "read_f32",
    "read_f64",
    "read_string",
    "read_string_length",
    "read_bits_to_slice",
    "read_bytes_to_slice",
    "peek_bit",
    "peek_bits",
    "read_remaining_bits",
    "__version__",
]
