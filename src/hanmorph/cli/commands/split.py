"""
Split text into sentences.
"""

import sys

from hanmorph.core.processor import KoreanProcessor


def add_subparser(subparsers):
    parser = subparsers.add_parser("split", help="Split text into sentences")
    parser.add_argument("text", help="Text to split")
    parser.set_defaults(func=run)


def run(args):
    try:
        sentences = KoreanProcessor().split_sentences(args.text)
    except ValueError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    for s in sentences:
        print(f"[{s.offset:3d}, {s.end:3d}) {s.text}")
