"""
Record layouts: a textual description of a sequence of reads.

A layout is a comma-separated list of fields, decoded in order:

    bool                  one bit
    u8 i8 u16 i16         fixed-width integers
    u32 i32 u64 i64
    f32 f64               IEEE-754 floats
    bits:N  bytes:N       unsigned integer of N bits / N bytes
    str                   null-terminated string
    str:N                 fixed-length string field of N bytes
    raw:N                 N bytes as a byte slice
    rawbits:N             N bits as a byte slice
    skip:N  skipbytes:N   discard N bits / N bytes
    align                 discard the rest of the current byte

Example: "u8,bits:12,bool,skip:3,str:4,f32"
"""

import logging
from collections import namedtuple

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
    read_u8,
    read_u16,
    read_u32,
    read_u64,
)

# Import for type hints only
if False:  # noqa: SIM108
    from bitdecoder.bitreader import BitReader

_logger = logging.getLogger(__name__)


class Field(namedtuple("Field", ["kind", "count"])):
    """One layout entry; count is None for fields without one."""

    __slots__ = ()

    def __str__(self) -> str:
        if self.count is None:
            return self.kind
        return f"{self.kind}:{self.count}"


# Fields without an argument
SCALAR_READERS = {
    "bool": read_bool,
    "u8": read_u8,
    "i8": read_i8,
    "u16": read_u16,
    "i16": read_i16,
    "u32": read_u32,
    "i32": read_i32,
    "u64": read_u64,
    "i64": read_i64,
    "f32": read_f32,
    "f64": read_f64,
}

# Fields that require a count
COUNTED_KINDS = ("bits", "bytes", "raw", "rawbits", "skip", "skipbytes")

# Fields where the count is optional
OPTIONAL_COUNT_KINDS = ("str",)


class LayoutError(ValueError):
    """Malformed layout description."""


def parse_field(text: str) -> Field:
    """
    Parse a single field spec such as "u16" or "bits:12".

    Raises:
        LayoutError: If the kind is unknown or the count is missing or invalid
    """
    kind, sep, count_text = text.strip().partition(":")
    kind = kind.strip().lower()

    if kind in SCALAR_READERS or kind == "align":
        if sep:
            raise LayoutError(f"Field '{kind}' takes no count: {text!r}")
        return Field(kind, None)

    if kind not in COUNTED_KINDS and kind not in OPTIONAL_COUNT_KINDS:
        raise LayoutError(f"Unknown field kind: {kind!r}")

    if not sep:
        if kind in OPTIONAL_COUNT_KINDS:
            return Field(kind, None)
        raise LayoutError(f"Field '{kind}' requires a count, e.g. '{kind}:8'")

    try:
        count = int(count_text)
    except ValueError:
        raise LayoutError(f"Invalid count in field {text!r}") from None

    if count < 0:
        raise LayoutError(f"Count must be >= 0 in field {text!r}")

    return Field(kind, count)


def parse_layout(text: str) -> list:
    """
    Parse a comma-separated layout description.

    Args:
        text: Layout string, e.g. "u8,bits:12,str"

    Returns:
        List of Field tuples in read order

    Raises:
        LayoutError: If the layout is empty or a field is malformed
    """
    parts = [part for part in text.split(",") if part.strip()]
    if not parts:
        raise LayoutError("Layout is empty")
    return [parse_field(part) for part in parts]


def decode_field(reader: "BitReader", field: Field):
    """
    Decode one field from the reader.

    Returns:
        Decoded value, or None for skip and align fields
    """
    kind, count = field

    if kind in SCALAR_READERS:
        return SCALAR_READERS[kind](reader)
    if kind == "bits":
        return reader.read_bits(count)
    if kind == "bytes":
        return reader.read_bytes(count)
    if kind == "str":
        if count is None:
            return read_string(reader)
        return read_string_length(reader, count)
    if kind == "raw":
        return read_bytes_to_slice(reader, count)
    if kind == "rawbits":
        return read_bits_to_slice(reader, count)
    if kind == "skip":
        reader.skip_bits(count)
        return None
    if kind == "skipbytes":
        reader.skip_bytes(count)
        return None
    if kind == "align":
        reader.align()
        return None

    raise LayoutError(f"Unknown field kind: {kind!r}")


def decode_layout(reader: "BitReader", fields: list) -> list:
    """
    Decode a sequence of fields in order.

    Args:
        reader: BitReader positioned at the start of the record
        fields: Fields from parse_layout()

    Returns:
        List of (field, value) pairs

    Raises:
        EndOfStreamError: If the input ends inside a field
        InvalidArgumentError: If a count is out of range for its field
    """
    _logger.debug("Decoding %d fields", len(fields))
    return [(field, decode_field(reader, field)) for field in fields]
