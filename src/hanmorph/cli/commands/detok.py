"""
Join morphemes into naturally spaced text.
"""

import sys

from hanmorph.core.processor import KoreanProcessor


def add_subparser(subparsers):
    parser = subparsers.add_parser("detok", help="Detokenize morphemes")
    parser.add_argument("morphemes", nargs="+", help="Morphemes in order")
    parser.set_defaults(func=run)


def run(args):
    try:
        print(KoreanProcessor().detokenize(args.morphemes))
    except ValueError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
