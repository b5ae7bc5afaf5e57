"""
Collection commands - straight to Redis.
"""

import argparse
import sys

import redis

from lexnote.core.collection import get_active, list_collections, set_active


def add_subparser(subparsers):
    db_parent = argparse.ArgumentParser(add_help=False)
    db_parent.add_argument("--db", type=int, default=0)

    parser = subparsers.add_parser("collection", help="Notebook collections")
    col_sub = parser.add_subparsers(dest="collection_command", required=True)

    list_p = col_sub.add_parser("list", parents=[db_parent], help="List collections")
    list_p.set_defaults(func=collection_list)

    use_p = col_sub.add_parser("use", parents=[db_parent], help="Set the active collection")
    use_p.add_argument("name", help="Collection name")
    use_p.set_defaults(func=collection_use)


def collection_list(args):
    client = redis.Redis(host="localhost", port=6379, db=args.db)
    active = get_active(client)
    names = list_collections(client)
    if active not in names:
        names.append(active)
    for name in sorted(names):
        marker = "*" if name == active else " "
        print(f"{marker} {name}")


def collection_use(args):
    client = redis.Redis(host="localhost", port=6379, db=args.db)
    try:
        name = set_active(client, args.name)
    except ValueError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    print(f"Active collection: {name}")
