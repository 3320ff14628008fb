"""
Tokenize text into POS-tagged morphemes.
"""

import sys

from rich import print_json

from hanmorph.core.pos import Pos
from hanmorph.core.processor import KoreanProcessor


def add_subparser(subparsers):
    parser = subparsers.add_parser("tokenize", help="Tokenize text")
    parser.add_argument("text", help="Text to tokenize")
    parser.add_argument("--normalize", action="store_true", help="Normalize before tokenizing")
    parser.add_argument("--keep-space", action="store_true", help="Show Space tokens")
    parser.add_argument("--json", action="store_true", help="Print tokens as JSON")
    parser.set_defaults(func=run)


def run(args):
    processor = KoreanProcessor()
    try:
        text = processor.normalize(args.text) if args.normalize else args.text
        tokens = processor.tokenize(text)
    except ValueError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if not args.keep_space:
        tokens = [t for t in tokens if t.pos is not Pos.Space]

    if args.json:
        print_json(data=[t.to_dict() for t in tokens])
        return
    for t in tokens:
        print(f"{t.offset:3d}: {t}")
