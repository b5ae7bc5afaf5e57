"""
Notebook commands - via API.
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console

from lexnote.cli import client
from lexnote.cli.commands.cards import print_rows
from lexnote.core.sample import SAMPLE_NOTEBOOK

console = Console()


def add_subparser(subparsers):
    collection_parent = argparse.ArgumentParser(add_help=False)
    collection_parent.add_argument("-c", "--collection", help="Collection (default: active)")

    parser = subparsers.add_parser("notebook", help="Notebook management")
    nb_sub = parser.add_subparsers(dest="notebook_command", required=True)

    # add
    add_p = nb_sub.add_parser("add", parents=[collection_parent], help="Store a notebook")
    add_p.add_argument("name", help="Notebook name")
    add_p.add_argument("path", nargs="?", help="Notebook file (default: bundled sample)")
    add_p.set_defaults(func=notebook_add)

    # list
    list_p = nb_sub.add_parser("list", parents=[collection_parent], help="List notebooks")
    list_p.add_argument("-q", "--query", help="Filter by name")
    list_p.set_defaults(func=notebook_list)

    # show
    show_p = nb_sub.add_parser("show", parents=[collection_parent], help="Show visible entries of a notebook")
    show_p.add_argument("notebook_id", help="Notebook ID")
    show_p.add_argument("--full", action="store_true", help="Show every definition")
    show_p.set_defaults(func=notebook_show)

    # open
    open_p = nb_sub.add_parser("open", parents=[collection_parent], help="Open a notebook session")
    open_p.add_argument("notebook_id", help="Notebook ID")
    open_p.add_argument("--full", action="store_true", help="Show every definition")
    open_p.set_defaults(func=notebook_open)

    # hide
    hide_p = nb_sub.add_parser("hide", parents=[collection_parent], help="Dismiss an entry")
    hide_p.add_argument("notebook_id", help="Notebook ID")
    hide_p.add_argument("entry_id", type=int, help="Entry ID")
    hide_p.set_defaults(func=notebook_hide)

    # close
    close_p = nb_sub.add_parser("close", parents=[collection_parent], help="Close a notebook session")
    close_p.add_argument("notebook_id", help="Notebook ID")
    close_p.set_defaults(func=notebook_close)

    # delete
    delete_p = nb_sub.add_parser("delete", parents=[collection_parent], help="Delete a notebook")
    delete_p.add_argument("notebook_id", help="Notebook ID")
    delete_p.set_defaults(func=notebook_delete)


def notebook_add(args):
    try:
        text = Path(args.path).read_text(encoding="utf-8").strip("\n") if args.path else SAMPLE_NOTEBOOK
        result = client.create_notebook(args.name, text, args.collection)
        print(f"✓ Created: {result['id']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def notebook_list(args):
    try:
        notebooks = client.list_notebooks(args.query, args.collection)
        if not notebooks:
            print("No notebooks.")
            return
        for n in notebooks:
            icon = "●" if n["open"] else "○"
            print(f"{icon} {n['id'][:12]}  {n['name']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def notebook_show(args):
    try:
        result = client.list_entries(args.notebook_id, args.collection)
        if not result["open"]:
            print("Notebook is closed.")
            return
        print_rows(console, result["entries"], result["rows"], full=args.full)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def notebook_open(args):
    try:
        result = client.open_notebook(args.notebook_id, args.collection)
        print_rows(console, result["entries"], result["rows"], full=args.full)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def notebook_hide(args):
    try:
        result = client.hide_entry(args.notebook_id, args.entry_id, args.collection)
        if result["success"]:
            print(f"✓ Hidden: {args.entry_id}")
        else:
            print("Notebook is closed.")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def notebook_close(args):
    try:
        client.close_notebook(args.notebook_id, args.collection)
        print(f"✓ Closed: {args.notebook_id}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def notebook_delete(args):
    try:
        client.delete_notebook(args.notebook_id, args.collection)
        print(f"✓ Deleted: {args.notebook_id}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
