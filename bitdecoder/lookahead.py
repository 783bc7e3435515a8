"""
Non-destructive reads built on BitReader.fork().

A fork copies the whole remaining input into memory, so every function
here costs time and memory proportional to what is left in the source.
Use them for diagnostics and small inputs, not in decoding loops.
"""

import logging

from bitdecoder.errors import EndOfStreamError

# Import for type hints only
if False:  # noqa: SIM108
    from bitdecoder.bitreader import BitReader

_logger = logging.getLogger(__name__)


def peek_bit(reader: "BitReader") -> int:
    """
    Peek at the next bit without consuming it.

    Returns:
        Next bit value (0 or 1)

    Raises:
        EndOfStreamError: If no more bits available
    """
    return reader.fork().read_bit()


def peek_bits(reader: "BitReader", num_bits: int) -> int:
    """
    Peek at the next num_bits without consuming them.

    Args:
        reader: BitReader to peek into
        num_bits: Number of bits, 1 to 64

    Returns:
        The value read_bits(num_bits) would return

    Raises:
        InvalidArgumentError: If num_bits is outside [1, 64]
        EndOfStreamError: If not enough bits available
    """
    return reader.fork().read_bits(num_bits)


def read_remaining_bits(reader: "BitReader") -> int:
    """
    Count the bits left in the reader without consuming them.

    Skips one bit at a time on a fork until the end of the stream.

    Returns:
        Number of unread bits
    """
    forked = reader.fork()
    count = 0
    while True:
        try:
            forked.skip_bits(1)
        except EndOfStreamError:
            break
        count += 1

    _logger.debug("%d bits remaining", count)
    return count
