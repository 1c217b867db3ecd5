#!/usr/bin/env python3
"""
Decode a hex transmission and print its version sum and value.

Reads one line of hex digits, decodes the outermost packet, and prints:

    Part 1: <sum of all version numbers>
    Part 2: <value of the expression>

Usage:
    python decode_packets.py [input.txt] \
        [--max-depth N] \
        [--show-tree] \
        [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

from bitstream.errors import PacketError
from packets.config import DEFAULT_MAX_DEPTH, DecoderOptions
from packets.decoder import decode_transmission
from packets.evaluator import evaluate, render, sum_of_versions

logger = logging.getLogger("decode_packets")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Decode a hex packet transmission and evaluate it'
    )
    parser.add_argument(
        'input',
        type=Path,
        nargs='?',
        default=Path('input.txt'),
        help='File holding one line of hex digits (default: input.txt)'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f'Deepest operator nesting accepted (default: {DEFAULT_MAX_DEPTH})'
    )
    parser.add_argument(
        '--show-tree',
        action='store_true',
        help='Also print the decoded expression'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log decoder details'
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        text = args.input.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    try:
        options = DecoderOptions(max_depth=args.max_depth)
        result = decode_transmission(text, options)
        value = evaluate(result.packet)
    except PacketError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 1

    print(f"Part 1: {sum_of_versions(result.packet)}")
    print(f"Part 2: {value}")
    if args.show_tree:
        print(render(result.packet))
    return 0


if __name__ == '__main__':
    sys.exit(main())
