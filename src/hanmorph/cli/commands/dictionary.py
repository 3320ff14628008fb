"""
Dictionary commands, run against a live server.
"""

import sys

from hanmorph.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("dict", help="Edit the server's dictionary")
    dict_sub = parser.add_subparsers(dest="dict_command", required=True)

    # add
    add_p = dict_sub.add_parser("add", help="Add words to a category")
    add_p.add_argument("category", help="POS category, e.g. Noun")
    add_p.add_argument("words", nargs="+", help="Words to add")
    add_p.set_defaults(func=dict_add)

    # remove
    remove_p = dict_sub.add_parser("remove", help="Remove words from a category")
    remove_p.add_argument("category", help="POS category, e.g. Noun")
    remove_p.add_argument("words", nargs="+", help="Words to remove")
    remove_p.set_defaults(func=dict_remove)

    # lookup
    lookup_p = dict_sub.add_parser("lookup", help="Check whether a word is in a category")
    lookup_p.add_argument("category", help="POS category, e.g. Noun")
    lookup_p.add_argument("word", help="Word to look up")
    lookup_p.set_defaults(func=dict_lookup)


def dict_add(args):
    try:
        result = client.add_words(args.category, args.words)
        print(f"✓ Added to {result['category']}: {', '.join(result['added'])}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_remove(args):
    try:
        result = client.remove_words(args.category, args.words)
        print(f"✓ Removed from {result['category']}: {', '.join(result['removed'])}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_lookup(args):
    try:
        result = client.lookup_word(args.category, args.word)
        mark = "✓" if result["present"] else "✗"
        print(f"{mark} {result['word']} ({result['category']})")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
