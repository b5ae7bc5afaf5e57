# src/lexnote/core/collection.py
"""
Notebook collections.

Notebooks are grouped into named collections (one per course, book or
reading list). Every notebook key lives under its collection's prefix,
and the collection used when none is given is remembered in Redis.
"""

import re

import redis


KEY_PREFIX = "lexnote:collection"
ACTIVE_KEY = "lexnote:active_collection"
DEFAULT_COLLECTION = "default"

# Lowercase so names are stable inside redis keys; no ':' so a name can't split a key.
NAME_PATTERN = re.compile(r"[a-z0-9][a-z0-9_-]{0,31}")


def validate_name(name: str) -> str:
    """Normalize a collection name, raising ValueError if it can't be used."""
    normalized = name.strip().lower()
    if not NAME_PATTERN.fullmatch(normalized):
        raise ValueError(
            f"Invalid collection name {name!r}: use 1-32 letters, digits, '-' or '_', "
            "starting with a letter or digit"
        )
    return normalized


def collection_prefix(name: str) -> str:
    return f"{KEY_PREFIX}:{name}"


def get_active(client: redis.Redis) -> str:
    value = client.get(ACTIVE_KEY)
    if value is None:
        return DEFAULT_COLLECTION
    return value.decode()


def set_active(client: redis.Redis, name: str) -> str:
    name = validate_name(name)
    client.set(ACTIVE_KEY, name)
    return name


def list_collections(client: redis.Redis) -> list[str]:
    """Collections holding at least one notebook."""
    names = set()
    for key in client.scan_iter(f"{KEY_PREFIX}:*:notebook_index"):
        names.add(key.decode()[len(KEY_PREFIX) + 1:].split(":", 1)[0])
    return sorted(names)
