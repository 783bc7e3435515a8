"""Tests for record layouts."""

import struct

import pytest

from bitdecoder.bitreader import LSB_FIRST, BitReader
from bitdecoder.errors import EndOfStreamError, InvalidArgumentError
from bitdecoder.layout import (
    Field,
    LayoutError,
    decode_field,
    decode_layout,
    parse_field,
    parse_layout,
)

# u8=0xAB, bits:12=0xF05, bool=1, skip:3, str:4="Hi", f32=2.5 (MSB-first)
RECORD = bytes([0xAB, 0xF0, 0b01011000]) + b"Hi\x00\x00" + struct.pack(">f", 2.5)


class TestParseField:
    """Test parse_field."""

    def test_scalar(self) -> None:
        """Test a field without a count."""
        assert parse_field("u16") == Field("u16", None)

    def test_counted(self) -> None:
        """Test a field with a count."""
        assert parse_field("bits:12") == Field("bits", 12)

    def test_whitespace_and_case(self) -> None:
        """Test surrounding whitespace and upper case are accepted."""
        assert parse_field("  RAW:4 ") == Field("raw", 4)

    def test_optional_count(self) -> None:
        """Test str with and without a count."""
        assert parse_field("str") == Field("str", None)
        assert parse_field("str:8") == Field("str", 8)

    def test_align(self) -> None:
        """Test align takes no count."""
        assert parse_field("align") == Field("align", None)

    def test_str_rendering(self) -> None:
        """Test fields render back to their spec."""
        assert str(Field("bits", 12)) == "bits:12"
        assert str(Field("f64", None)) == "f64"

    @pytest.mark.parametrize(
        "text",
        ["u17", "bits", "skip:", "bits:x", "u8:2", "raw:-1", "align:1", ""],
    )
    def test_invalid(self, text: str) -> None:
        """Test malformed fields are rejected."""
        with pytest.raises(LayoutError):
            parse_field(text)

    def test_layout_error_is_value_error(self) -> None:
        """Test LayoutError is catchable as ValueError."""
        with pytest.raises(ValueError):
            parse_field("nope")


class TestParseLayout:
    """Test parse_layout."""

    def test_parse(self) -> None:
        """Test a full layout."""
        fields = parse_layout("u8, bits:12,bool ,skip:3,str:4,f32")
        assert [str(f) for f in fields] == [
            "u8",
            "bits:12",
            "bool",
            "skip:3",
            "str:4",
            "f32",
        ]

    def test_trailing_comma(self) -> None:
        """Test empty entries are ignored."""
        assert parse_layout("u8,,u8,") == [Field("u8", None), Field("u8", None)]

    def test_empty(self) -> None:
        """Test an empty layout is rejected."""
        with pytest.raises(LayoutError):
            parse_layout(" , ")


class TestDecodeLayout:
    """Test decode_field and decode_layout."""

    def test_decode_record(self) -> None:
        """Test decoding a mixed record."""
        fields = parse_layout("u8,bits:12,bool,skip:3,str:4,f32")
        results = decode_layout(BitReader(RECORD), fields)

        assert [value for _, value in results] == [0xAB, 0xF05, True, None, "Hi", 2.5]
        assert [field for field, _ in results] == fields

    def test_decode_lsb(self) -> None:
        """Test the reader's bit order applies."""
        br = BitReader(bytes([0b11110000, 0b01010101]), LSB_FIRST)
        results = decode_layout(br, parse_layout("bits:12,bits:4"))
        assert [value for _, value in results] == [0b010111110000, 0b0101]

    def test_decode_slices_and_align(self) -> None:
        """Test slice, align and skipbytes fields."""
        br = BitReader(bytes([0xA0, 0x12, 0x34, 0xFF, 0x56]))
        fields = parse_layout("rawbits:3,align,raw:2,skipbytes:1,bytes:1")
        values = [value for _, value in decode_layout(br, fields)]
        assert values == [bytes([0b101]), None, b"\x12\x34", None, 0x56]

    def test_decode_signed_and_string(self) -> None:
        """Test signed integers and null-terminated strings."""
        br = BitReader(bytes([202]) + b"ok\x00" + struct.pack(">h", -2))
        values = [value for _, value in decode_layout(br, parse_layout("i8,str,i16"))]
        assert values == [-54, "ok", -2]

    def test_decode_field_out_of_range(self) -> None:
        """Test counts out of range for the field surface at decode time."""
        with pytest.raises(InvalidArgumentError):
            decode_field(BitReader(b"\x00" * 16), Field("bytes", 9))

    def test_decode_unknown_kind(self) -> None:
        """Test hand-built fields with unknown kinds are rejected."""
        with pytest.raises(LayoutError):
            decode_field(BitReader(b"\x00"), Field("u7", None))

    def test_decode_short_input(self) -> None:
        """Test a record longer than the input raises."""
        fields = parse_layout("u8,bits:12,bool,skip:3,str:4")
        with pytest.raises(EndOfStreamError):
            decode_layout(BitReader(RECORD[:5]), fields)
