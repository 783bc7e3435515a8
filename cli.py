#!/usr/bin/env python3
"""
bitdecoder command line interface.

Decodes a binary file through a record layout and prints each field.

Usage:
    python cli.py [-l] [--debug] <input> <layout>

Examples:
    python cli.py header.bin u8,u8,u16,str:8           # MSB-first
    python cli.py -l frame.bin bits:12,bool,skip:3,f32  # LSB-first
"""

import logging
import sys

from bitdecoder import (
    LSB_FIRST,
    MSB_FIRST,
    BitReader,
    BitReaderError,
    __version__,
    read_remaining_bits,
)
from bitdecoder.layout import LayoutError, decode_layout, parse_layout

ORDER_NAMES = {MSB_FIRST: "MSB-first", LSB_FIRST: "LSB-first"}


def print_version() -> None:
    """Print version information."""
    print(f"bitdecoder {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"bitdecoder - sequential bit-level decoder (v{__version__})")
    print("=" * 49)
    print()
    print("Usage:")
    print(f"  {prog_name} [-l] [--debug] <input> <layout>")
    print()
    print("Options:")
    print("  -l, --lsb      Read bits LSB-first (default is MSB-first)")
    print("  --debug        Enable debug logging")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Arguments:")
    print("  input          Binary file to decode")
    print("  layout         Comma-separated fields, read in order")
    print()
    print("Fields:")
    print("  bool                    one bit")
    print("  u8 i8 u16 i16 u32 i32   fixed-width integers")
    print("  u64 i64 f32 f64         64-bit integers, IEEE-754 floats")
    print("  bits:N bytes:N          unsigned integer of N bits / N bytes")
    print("  str str:N               null-terminated / fixed-length string")
    print("  raw:N rawbits:N         byte slice of N bytes / N bits")
    print("  skip:N skipbytes:N      discard N bits / N bytes")
    print("  align                   discard the rest of the current byte")
    print()
    print("Examples:")
    print(f"  {prog_name} header.bin u8,u8,u16,str:8")
    print(f"  {prog_name} -l frame.bin bits:12,bool,skip:3,f32")
    print()


def format_value(value) -> str:
    """Render a decoded value for the report."""
    if value is None:
        return "(skipped)"
    if isinstance(value, bytes):
        return value.hex() if value else "(empty)"
    if isinstance(value, str):
        return repr(value)
    return str(value)


def do_decode(input_path: str, layout_text: str, bit_order: str) -> int:
    """Decode a file through a layout.

    Args:
        input_path: Input file path.
        layout_text: Layout description.
        bit_order: MSB_FIRST or LSB_FIRST.

    Returns:
        0 on success, 1 on error.
    """
    try:
        fields = parse_layout(layout_text)
    except LayoutError as e:
        print(f"Error: Invalid layout: {e}", file=sys.stderr)
        return 1

    try:
        with open(input_path, "rb") as f:
            reader = BitReader(f, bit_order)
            try:
                results = decode_layout(reader, fields)
                remaining = read_remaining_bits(reader)
            except BitReaderError as e:
                print(f"Error: Decoding failed: {e}", file=sys.stderr)
                return 1
    except OSError as e:
        print(f"Error: Cannot open input file: {input_path} ({e})", file=sys.stderr)
        return 1

    print(f"Input:       {input_path}")
    print(f"Bit order:   {ORDER_NAMES[bit_order]}")
    print(f"Fields:      {len(fields)}")
    print()
    width = max(len(str(field)) for field in fields)
    for index, (field, value) in enumerate(results):
        print(f"  [{index}] {str(field):<{width}} = {format_value(value)}")
    print()
    print(f"Remaining:   {remaining} bits")

    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    # Check for help flag or no arguments
    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    bit_order = MSB_FIRST
    log_level = logging.WARNING
    positional = []
    for arg in args[1:]:
        if arg in ("-l", "--lsb"):
            bit_order = LSB_FIRST
        elif arg == "--debug":
            log_level = logging.DEBUG
        elif arg.startswith("-") and len(arg) > 1:
            print(f"Error: Unknown option: {arg}", file=sys.stderr)
            return 1
        else:
            positional.append(arg)

    if len(positional) != 2:
        print("Error: Decoding requires 2 arguments", file=sys.stderr)
        print(f"Usage: {prog_name} [-l] [--debug] <input> <layout>", file=sys.stderr)
        return 1

    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    return do_decode(positional[0], positional[1], bit_order)


if __name__ == "__main__":
    sys.exit(main())
