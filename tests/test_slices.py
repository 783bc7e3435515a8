"""Tests for slice readers."""

import pytest

from bitdecoder.bitreader import LSB_FIRST, MSB_FIRST, BitReader
from bitdecoder.errors import EndOfStreamError, InvalidArgumentError
from bitdecoder.slices import read_bits_to_slice, read_bytes_to_slice

DATA = bytes([0b11110010, 0b00001111])


class TestReadBitsToSlice:
    """Test read_bits_to_slice."""

    def test_partial_last_byte_msb(self) -> None:
        """Test the last byte holds only the leftover bits, MSB-first."""
        br = BitReader(DATA, MSB_FIRST)
        assert read_bits_to_slice(br, 12) == bytes([0b11110010, 0b0000])

    def test_partial_last_byte_lsb(self) -> None:
        """Test the last byte holds only the leftover bits, LSB-first."""
        br = BitReader(DATA, LSB_FIRST)
        assert read_bits_to_slice(br, 12) == bytes([0b11110010, 0b1111])

    def test_whole_bytes(self, bit_order: str) -> None:
        """Test a multiple of 8 bits yields the input bytes."""
        br = BitReader(DATA, bit_order)
        assert read_bits_to_slice(br, 16) == DATA

    def test_last_byte_not_shifted(self) -> None:
        """Test leftover bits are not moved into the high end of the byte."""
        br = BitReader(bytes([0b10100000]), MSB_FIRST)
        assert read_bits_to_slice(br, 3) == bytes([0b101])

    def test_matches_read_bits(self, bit_order: str) -> None:
        """Test the last byte equals read_bits(n % 8)."""
        data = bytes([0x3C, 0xA5, 0x7E])
        expected = BitReader(data, bit_order)
        expected.read_bits(16)
        tail = expected.read_bits(5)

        out = read_bits_to_slice(BitReader(data, bit_order), 21)
        assert len(out) == 3
        assert out[:2] == data[:2]
        assert out[2] == tail

    def test_zero_bits(self) -> None:
        """Test reading no bits returns an empty slice."""
        br = BitReader(DATA)
        assert read_bits_to_slice(br, 0) == b""
        assert br.bit_position == 0

    def test_negative(self) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            read_bits_to_slice(BitReader(DATA), -1)

    def test_underflow(self) -> None:
        """Test reading past the end raises."""
        with pytest.raises(EndOfStreamError):
            read_bits_to_slice(BitReader(DATA), 17)


class TestReadBytesToSlice:
    """Test read_bytes_to_slice."""

    def test_read_bytes(self, bit_order: str) -> None:
        """Test bytes come back in order."""
        br = BitReader(DATA, bit_order)
        assert read_bytes_to_slice(br, 2) == DATA

    def test_unaligned(self) -> None:
        """Test bytes read from a mid-byte position."""
        br = BitReader(bytes([0x0A, 0xBC, 0xD0]), MSB_FIRST)
        br.skip_bits(4)
        assert read_bytes_to_slice(br, 2) == bytes([0xAB, 0xCD])

    def test_zero_bytes(self) -> None:
        """Test reading no bytes returns an empty slice."""
        assert read_bytes_to_slice(BitReader(DATA), 0) == b""

    def test_negative(self) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            read_bytes_to_slice(BitReader(DATA), -3)

    def test_underflow(self) -> None:
        """Test reading past the end raises."""
        with pytest.raises(EndOfStreamError):
            read_bytes_to_slice(BitReader(DATA), 3)
