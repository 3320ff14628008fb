"""
hanmorph CLI.
"""

import argparse
import logging

from hanmorph.cli.commands import detok, dictionary, normalize, phrases, serve, split, tokenize
from hanmorph.core.config import get_settings


def main(argv=None):
    parser = argparse.ArgumentParser(prog="hanmorph", description="Korean morphological analysis")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    normalize.add_subparser(subparsers)
    tokenize.add_subparser(subparsers)
    split.add_subparser(subparsers)
    phrases.add_subparser(subparsers)
    detok.add_subparser(subparsers)
    dictionary.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level="DEBUG" if args.verbose else get_settings().log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
