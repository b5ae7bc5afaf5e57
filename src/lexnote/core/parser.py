# src/lexnote/core/parser.py
"""
Decoder for the compact notebook format.

Syntax:
  Stream     = Entry*
  Entry      = <2-char prefix> Headword '&' Sense+ 'E'
  Sense      = <code> Definition ('$$' Definition)* ('&' | 'E')

Example:
  01cat&4a small animal&9Unused codeE

A sense keeps at most 38 definitions. When a 39th follows, the parser
skips ahead to the next digit (next sense) or 'E' (entry end) and the
skipped text is dropped.
"""

from lexnote.core.entry import Entry, Sense, MAX_DEFINITIONS, SUMMARY_DEFINITIONS
from lexnote.core.errors import MalformedEntry
from lexnote.core.stream import (
    Cursor, SENSE_SEP, DEFINITION_SEP, ENTRY_END,
)


PREFIX_LENGTH = 2
DEFAULT_PREFIX = "01"


class EntryParser:
    def __init__(self, max_definitions: int = MAX_DEFINITIONS,
                 summary_definitions: int = SUMMARY_DEFINITIONS):
        self.max_definitions = max_definitions
        self.summary_definitions = summary_definitions

    def parse(self, text: str) -> list[Entry]:
        cursor = Cursor(text)
        entries = []
        while not cursor.at_end:
            entries.append(self.parse_entry(cursor, len(entries)))
        return entries

    def parse_entry(self, cursor: Cursor, entry_id: int) -> Entry:
        start = cursor.position
        raw, _ = cursor.read_until([SENSE_SEP])
        headword = raw[PREFIX_LENGTH:]
        if not headword:
            raise MalformedEntry("empty headword", start)

        senses = []
        summary = [headword + "\n"]
        full = [headword + "\n"]

        terminator = SENSE_SEP
        while terminator != ENTRY_END:
            sense, terminator = self.parse_sense(cursor)
            senses.append(sense)
            summary.append(sense.render(self.summary_definitions))
            full.append(sense.render())

        return Entry(
            id=entry_id,
            headword=headword,
            senses=tuple(senses),
            summary="".join(summary),
            full="".join(full),
        )

    def parse_sense(self, cursor: Cursor) -> tuple[Sense, str]:
        """Returns the sense and the token that closed it ('&' or 'E')."""
        # Any character is accepted as a code; unrecognized ones read as UNKNOWN.
        code = cursor.take()

        definitions = []
        while True:
            start = cursor.position
            definition, terminator = cursor.read_until([DEFINITION_SEP, SENSE_SEP, ENTRY_END])
            if not definition:
                raise MalformedEntry("empty definition", start)
            definitions.append(definition)

            if terminator != DEFINITION_SEP:
                break
            if len(definitions) == self.max_definitions:
                terminator = cursor.resync()
                break

        return Sense(code=code, definitions=tuple(definitions)), terminator


def decode_entries(text: str) -> list[Entry]:
    parser = EntryParser()
    return parser.parse(text)


def format_sense(sense: Sense) -> str:
    return sense.code + DEFINITION_SEP.join(sense.definitions)


def format_entry(entry: Entry, prefix: str = DEFAULT_PREFIX) -> str:
    senses = SENSE_SEP.join(format_sense(s) for s in entry.senses)
    return f"{prefix}{entry.headword}{SENSE_SEP}{senses}{ENTRY_END}"


def format_entries(entries: list[Entry], prefix: str = DEFAULT_PREFIX) -> str:
    return "".join(format_entry(e, prefix) for e in entries)
