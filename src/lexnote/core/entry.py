# src/lexnote/core/entry.py
"""
Dictionary entries decoded from a notebook stream.

An entry is a headword plus one or more senses; each sense groups the
definitions for one part of speech.
"""

from dataclasses import dataclass
from enum import Enum


MAX_DEFINITIONS = 38
SUMMARY_DEFINITIONS = 4


class PartOfSpeech(Enum):
    PRONOUN_MARKER = "prop."
    INTERJECTION = "int."
    ABBREVIATION = "abbr."
    NOUN = "n."
    VERB = "v."
    ADJECTIVE = "adj."
    PRONOUN = "pron."
    ARTICLE = "art."
    NOT_APPLICABLE = "na."
    UNKNOWN = "more."

    @classmethod
    def from_code(cls, code: str) -> "PartOfSpeech":
        return POS_CODES.get(code, cls.UNKNOWN)

    @property
    def label(self) -> str:
        return self.value


POS_CODES = {
    "1": PartOfSpeech.PRONOUN_MARKER,
    "2": PartOfSpeech.INTERJECTION,
    "3": PartOfSpeech.ABBREVIATION,
    "4": PartOfSpeech.NOUN,
    "5": PartOfSpeech.VERB,
    "6": PartOfSpeech.ADJECTIVE,
    "7": PartOfSpeech.PRONOUN,
    "8": PartOfSpeech.ARTICLE,
    "9": PartOfSpeech.NOT_APPLICABLE,
}


@dataclass(frozen=True)
class Sense:
    code: str                      # raw POS character as it appeared in the stream
    definitions: tuple[str, ...]

    @property
    def part_of_speech(self) -> PartOfSpeech:
        return PartOfSpeech.from_code(self.code)

    def render(self, limit: int | None = None) -> str:
        """One display line: label, then each kept definition followed by ';'."""
        definitions = self.definitions if limit is None else self.definitions[:limit]
        return f"{self.part_of_speech.label} " + "".join(f"{d};" for d in definitions) + "\n"

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "part_of_speech": self.part_of_speech.label,
            "definitions": list(self.definitions),
        }


@dataclass(frozen=True)
class Entry:
    id: int
    headword: str
    senses: tuple[Sense, ...]
    summary: str
    full: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "headword": self.headword,
            "senses": [s.to_dict() for s in self.senses],
            "summary": self.summary,
            "full": self.full,
        }
