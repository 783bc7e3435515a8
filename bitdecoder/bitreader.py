"""
Sequential bit reader over a byte source.

This module provides the cursor over the input bytes and the bit
extraction on top of it. Everything else in the package is built from
read_bit(), read_bits() and the skip methods defined here.

Bit Ordering:
Two independent orderings apply, both selected by the reader's bit_order.

Within each byte:
- MSB_FIRST: first bit read is bit position 7, last is bit position 0
- LSB_FIRST: first bit read is bit position 0, last is bit position 7

When assembling a multi-bit value from n single bits:
- MSB_FIRST: first bit read becomes the most significant bit of the result
- LSB_FIRST: first bit read becomes the least significant bit of the result

With bytes [0b11110000, 0b01010101] and read_bits(12):
- MSB_FIRST gives 0b111100000101
- LSB_FIRST gives 0b010111110000
"""

import io
import logging

from bitdecoder.errors import EndOfStreamError, InvalidArgumentError

_logger = logging.getLogger(__name__)

# Bit order selectors
MSB_FIRST = "msb"
LSB_FIRST = "lsb"

MAX_READ_BITS = 64
MAX_READ_BYTES = 8

# Chunk size used when draining a source into memory
DRAIN_CHUNK_SIZE = 64 * 1024


class BitReader:
    """Sequential bit reader from a byte source."""

    def __init__(self, source, bit_order: str = MSB_FIRST) -> None:
        """
        Initialize a bit reader.

        Args:
            source: Bytes-like object, or a binary stream with read(size)
            bit_order: MSB_FIRST or LSB_FIRST, fixed for the reader's lifetime

        Raises:
            InvalidArgumentError: If bit_order is not a known ordering
            TypeError: If source is neither bytes-like nor readable
        """
        if bit_order not in (MSB_FIRST, LSB_FIRST):
            raise InvalidArgumentError(f"Unknown bit order: {bit_order!r}")

        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        elif not hasattr(source, "read"):
            raise TypeError(
                f"source must be bytes-like or a binary stream, "
                f"not {type(source).__name__}"
            )

        self._source = source
        self._bit_order = bit_order
        self._bit_position = 0
        # Only meaningful once bit_position has moved past 0 for it
        self._cached_byte = 0

    @property
    def bit_order(self) -> str:
        """Bit ordering chosen at construction."""
        return self._bit_order

    @property
    def bit_position(self) -> int:
        """Offset [0, 8) of the next unread bit within the cached byte."""
        return self._bit_position

    @property
    def cached_byte(self) -> int:
        """Most recently pulled byte."""
        return self._cached_byte

    @property
    def is_aligned(self) -> bool:
        """True when the next read starts on a byte boundary."""
        return self._bit_position == 0

    def _pull(self, num_bytes: int) -> bytes:
        """
        Pull exactly num_bytes from the source.

        Short reads from the stream are retried until the source reports
        exhaustion with an empty read.

        Raises:
            EndOfStreamError: If the source runs out first. Bytes pulled
                before that point are lost.
        """
        data = bytearray()
        while len(data) < num_bytes:
            chunk = self._source.read(num_bytes - len(data))
            if not chunk:
                raise EndOfStreamError(
                    f"Source exhausted: needed {num_bytes} bytes, got {len(data)}"
                )
            data += chunk
        return bytes(data)

    def _drain(self) -> bytes:
        """Pull everything left in the source."""
        chunks = []
        while True:
            chunk = self._source.read(DRAIN_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(bytes(chunk))
        return b"".join(chunks)

    def read_bit(self) -> int:
        """
        Read and consume a single bit.

        A new byte is pulled from the source only when bit_position is 0.

        Returns:
            Bit value (0 or 1)

        Raises:
            EndOfStreamError: If no more bits available
        """
        if self._bit_position == 0:
            self._cached_byte = self._pull(1)[0]

        if self._bit_order == LSB_FIRST:
            bit = (self._cached_byte >> self._bit_position) & 1
        else:
            bit = (self._cached_byte >> (7 - self._bit_position)) & 1

        self._bit_position = (self._bit_position + 1) % 8
        return bit

    def read_bits(self, num_bits: int) -> int:
        """
        Read and consume multiple bits as an unsigned integer.

        Args:
            num_bits: Number of bits to read, 1 to 64

        Returns:
            Integer value of bits, assembled according to bit_order

        Raises:
            InvalidArgumentError: If num_bits is outside [1, 64]
            EndOfStreamError: If not enough bits available. Bits read
                before the failure remain consumed.
        """
        if num_bits < 1 or num_bits > MAX_READ_BITS:
            raise InvalidArgumentError(
                f"Bit count must be between 1 and {MAX_READ_BITS}, got {num_bits}"
            )

        lsb_first = self._bit_order == LSB_FIRST
        result = 0
        for i in range(num_bits):
            bit = self.read_bit()
            if lsb_first:
                result |= bit << i
            else:
                result |= bit << (num_bits - 1 - i)

        return result

    def read_bytes(self, num_bytes: int) -> int:
        """
        Read and consume whole bytes as an unsigned integer.

        Equivalent to read_bits(8 * num_bytes).

        Args:
            num_bytes: Number of bytes to read, 1 to 8

        Returns:
            Integer value of the bytes

        Raises:
            InvalidArgumentError: If num_bytes is outside [1, 8]
            EndOfStreamError: If not enough bits available
        """
        if num_bytes < 1 or num_bytes > MAX_READ_BYTES:
            raise InvalidArgumentError(
                f"Byte count must be between 1 and {MAX_READ_BYTES}, got {num_bytes}"
            )
        return self.read_bits(num_bytes * 8)

    def skip_bits(self, num_bits: int) -> None:
        """
        Advance the cursor without producing a value.

        Leading bits are read one at a time up to the next byte boundary,
        whole bytes are then pulled from the source in one go, and the
        trailing bits are read one at a time.

        Args:
            num_bits: Number of bits to skip (0 is a no-op)

        Raises:
            InvalidArgumentError: If num_bits is negative
            EndOfStreamError: If the source runs out. Bits and bytes
                consumed before that point are not restored.
        """
        if num_bits < 0:
            raise InvalidArgumentError(f"Cannot skip {num_bits} bits")

        while num_bits > 0 and self._bit_position != 0:
            self.read_bit()
            num_bits -= 1

        whole_bytes = num_bits // 8
        if whole_bytes > 0:
            skipped = self._pull(whole_bytes)
            self._cached_byte = skipped[-1]

        for _ in range(num_bits % 8):
            self.read_bit()

    def skip_bytes(self, num_bytes: int) -> None:
        """
        Advance the cursor by whole bytes.

        Args:
            num_bytes: Number of bytes to skip

        Raises:
            InvalidArgumentError: If num_bytes is negative
            EndOfStreamError: If the source runs out
        """
        if num_bytes < 0:
            raise InvalidArgumentError(f"Cannot skip {num_bytes} bytes")
        self.skip_bits(num_bytes * 8)

    def align(self) -> None:
        """Discard the unread bits of the cached byte."""
        self._bit_position = 0

    def fork(self) -> "BitReader":
        """
        Duplicate this reader onto an independent copy of its remaining input.

        All unread bytes are pulled from the source into memory. This reader
        continues over its own buffer of those bytes and the returned reader
        gets another, so the two share no mutable state afterwards and may
        be advanced independently, including from different threads.

        Cost is proportional to the remaining input. A source that never
        ends (a live socket, a pipe that is never closed) makes this block
        forever.

        Returns:
            New BitReader with the same bit_position, cached_byte and
            bit_order
        """
        remaining = self._drain()
        _logger.debug(
            "Forking reader: %d bytes materialized at bit position %d",
            len(remaining),
            self._bit_position,
        )
        self._source = io.BytesIO(remaining)

        forked = BitReader(remaining, self._bit_order)
        forked._bit_position = self._bit_position
        forked._cached_byte = self._cached_byte
        return forked
