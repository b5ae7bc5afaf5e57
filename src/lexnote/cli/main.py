"""
Lexnote CLI.
"""

import argparse
from lexnote.cli.commands import collection, decode, notebook, serve


def main():
    parser = argparse.ArgumentParser(prog="lexnote", description="Lexnote CLI")
    subparsers = parser.add_subparsers(dest="command")

    decode.add_subparser(subparsers)
    notebook.add_subparser(subparsers)
    serve.add_subparser(subparsers)
    collection.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
