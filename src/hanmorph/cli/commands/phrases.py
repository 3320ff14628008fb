"""
Extract noun phrases.
"""

import sys

from rich import print_json

from hanmorph.core.processor import KoreanProcessor


def add_subparser(subparsers):
    parser = subparsers.add_parser("phrases", help="Extract noun phrases")
    parser.add_argument("text", help="Text to analyze")
    parser.add_argument("--filter-spam", action="store_true", help="Drop phrases with spam words")
    parser.add_argument("--no-hashtags", action="store_true", help="Leave out hashtags")
    parser.add_argument("--json", action="store_true", help="Print phrases as JSON")
    parser.set_defaults(func=run)


def run(args):
    processor = KoreanProcessor()
    try:
        tokens = processor.tokenize(args.text)
        phrases = processor.extract_phrases(tokens, args.filter_spam, not args.no_hashtags)
    except ValueError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=[p.to_dict() for p in phrases])
        return
    if not phrases:
        print("No phrases.")
        return
    for p in phrases:
        print(p)
