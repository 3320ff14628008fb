"""
Normalize informal Korean text.
"""

import sys

from hanmorph.core.processor import KoreanProcessor


def add_subparser(subparsers):
    parser = subparsers.add_parser("normalize", help="Normalize informal spelling")
    parser.add_argument("text", help="Text to normalize")
    parser.set_defaults(func=run)


def run(args):
    try:
        print(KoreanProcessor().normalize(args.text))
    except ValueError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
