"""
String decoding: null-terminated and fixed-length.

Strings are read one 8-bit value at a time through BitReader.read_bytes(1),
so they work at any bit position. The default latin-1 encoding maps each
byte to the character with the same code point.
"""

from bitdecoder.errors import InvalidArgumentError

# Import for type hints only
if False:  # noqa: SIM108
    from bitdecoder.bitreader import BitReader

TERMINATOR = 0
DEFAULT_ENCODING = "latin-1"


def read_string(reader: "BitReader", encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a null-terminated string.

    The terminator is consumed but not part of the result.

    Args:
        reader: BitReader to read from
        encoding: Codec used to turn the collected bytes into text

    Returns:
        Decoded string

    Raises:
        EndOfStreamError: If the source ends before a terminator
    """
    data = bytearray()
    while True:
        value = reader.read_bytes(1)
        if value == TERMINATOR:
            break
        data.append(value)

    return data.decode(encoding)


def read_string_length(
    reader: "BitReader", length: int, encoding: str = DEFAULT_ENCODING
) -> str:
    """
    Read a fixed-length string field.

    Exactly length bytes are consumed. If a zero byte appears first, the
    result is the text before it and the rest of the field is skipped.

    Args:
        reader: BitReader to read from
        length: Field size in bytes
        encoding: Codec used to turn the collected bytes into text

    Returns:
        Decoded string (at most length characters for single-byte codecs)

    Raises:
        InvalidArgumentError: If length is negative
        EndOfStreamError: If fewer than length bytes remain
    """
    if length < 0:
        raise InvalidArgumentError(f"String length must be >= 0, got {length}")

    data = bytearray()
    for i in range(length):
        value = reader.read_bytes(1)
        if value == TERMINATOR:
            # Padding after the terminator still belongs to the field
            reader.skip_bytes(length - 1 - i)
            break
        data.append(value)

    return data.decode(encoding)
