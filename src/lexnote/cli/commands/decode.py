"""Decode a notebook stream locally."""

import sys
from pathlib import Path

from rich import print_json
from rich.console import Console

from lexnote.cli.commands.cards import print_rows
from lexnote.core.errors import ParseError
from lexnote.core.layout import batch_rows
from lexnote.core.sample import SAMPLE_NOTEBOOK
from lexnote.core.store import EntryStore

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("decode", help="Decode a notebook file")
    parser.add_argument("path", nargs="?", help="Path to notebook file (default: bundled sample)")
    parser.add_argument("--full", action="store_true", help="Show every definition")
    parser.add_argument("--json", action="store_true", dest="as_json", help="Print entries as JSON")
    parser.add_argument("-w", "--word", help="Only entries whose headword contains this")
    parser.set_defaults(func=run_decode)


def run_decode(args):
    if args.path:
        path = Path(args.path)
        if not path.exists():
            console.print(f"[red]✗ File not found: {args.path}[/red]")
            sys.exit(1)
        text = path.read_text(encoding="utf-8").strip("\n")
    else:
        text = SAMPLE_NOTEBOOK

    store = EntryStore()
    try:
        store.decode(text)
    except ParseError as e:
        console.print(f"[red]✗ {e.kind}: {e}[/red]")
        sys.exit(1)

    entries = store.search(args.word) if args.word else list(store.visible_entries())

    data = [e.to_dict() for e in entries]
    if args.as_json:
        print_json(data=data)
        return

    rows = [[e.id for e in row] for row in batch_rows(entries)]
    print_rows(console, data, rows, full=args.full)
