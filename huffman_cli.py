#!/usr/bin/env python3
"""
Command-line front end for the Huffman text coder.

The code is always built from a source text (a file or an inline string),
then used to encode a message, decode a bit-string, or print the table.

Run with:
    huffman-coder table -t "abracadabra"
    huffman-coder encode -t "abracadabra" --message "cab"
    huffman-coder decode -s notes.txt 0110100
"""
import argparse
import logging
import sys

from huffman_config import DEFAULT_ALPHABET, CoderConfig
from huffman_errors import HuffmanError
from huffman_service import construct


def read_source(args):
    if args.text is not None:
        return args.text
    if args.source == "-":
        return sys.stdin.read()
    with open(args.source, encoding="utf-8") as f:
        return f.read()


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffman-coder",
        description="Build a Huffman code from a source text and use it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    source = common.add_mutually_exclusive_group(required=True)
    source.add_argument("-s", "--source", help="File the code is built from ('-' for stdin)")
    source.add_argument("-t", "--text", help="Inline text the code is built from")
    common.add_argument(
        "--alphabet",
        default=DEFAULT_ALPHABET,
        help="Accepted characters, in order (default: letters, digits, whitespace, '!.?')",
    )
    common.add_argument("--strict-encode", action="store_true",
                        help="Fail on characters without a code instead of dropping them")
    common.add_argument("--strict-decode", action="store_true",
                        help="Fail on characters other than '0' and '1'")

    sub = parser.add_subparsers(dest="command", required=True)
    enc = sub.add_parser("encode", parents=[common], help="Encode a message")
    enc.add_argument("--message", default=None,
                     help="Message to encode (default: the source text itself)")
    dec = sub.add_parser("decode", parents=[common], help="Decode a bit-string")
    dec.add_argument("bits", help="String of '0'/'1' characters")
    sub.add_parser("table", parents=[common], help="Print the code table")
    return parser


def print_table(coder):
    codes = coder.code_table
    rows = sorted(coder.frequencies, key=lambda s: (len(codes[s.symbol]), codes[s.symbol]))
    print(f"{'symbol':<8} {'weight':>8}  code")
    for item in rows:
        print(f"{item.symbol!r:<8} {item.weight:>8}  {codes[item.symbol] or '(empty)'}")
    print(f"\nWeighted path length: {coder.weighted_path_length()} bits")
    print(f"Average code length: {coder.average_code_length():.4f} bits/symbol")


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = CoderConfig(
            alphabet=args.alphabet,
            strict_encode=args.strict_encode,
            strict_decode=args.strict_decode,
        )
        source = read_source(args)
        coder = construct(source, config)

        if args.command == "encode":
            message = source if args.message is None else args.message
            print(coder.encode(message))
        elif args.command == "decode":
            print(coder.decode(args.bits))
        else:
            print_table(coder)
    except (HuffmanError, ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
