# src/lexnote/core/stream.py
"""
Tokenizer for the notebook entry stream.

A single forward cursor over the raw string. There is no escaping:
'&', '$$' and 'E' always act as control tokens.
"""

from lexnote.core.errors import UnterminatedField, TruncatedStream


SENSE_SEP = "&"
DEFINITION_SEP = "$$"
ENTRY_END = "E"


class Cursor:
    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek_is(self, char: str) -> bool:
        return self.text.startswith(char, self.position)

    def take(self) -> str:
        """Consume and return one character."""
        if self.at_end:
            raise UnterminatedField("expected a part-of-speech code", self.position)
        char = self.text[self.position]
        self.position += 1
        return char

    def read_until(self, terminators) -> tuple[str, str]:
        """
        Read up to the next terminator and step past it.

        Returns (field, terminator). Multi-character markers are matched
        before single characters at each scan point.
        """
        markers = sorted(terminators, key=len, reverse=True)
        start = self.position
        for i in range(start, len(self.text)):
            for marker in markers:
                if self.text.startswith(marker, i):
                    self.position = i + len(marker)
                    return self.text[start:i], marker
        expected = " or ".join(repr(m) for m in markers)
        raise UnterminatedField(f"expected {expected} before end of input", start)

    def resync(self) -> str:
        """
        Skip forward to the next digit or entry end.

        A digit is left unconsumed and starts the next sense; an 'E' is
        consumed. Returns the SenseEnd token that applies.
        """
        start = self.position
        for i in range(start, len(self.text)):
            char = self.text[i]
            if char == ENTRY_END:
                self.position = i + 1
                return ENTRY_END
            if "0" <= char <= "9":
                self.position = i
                return SENSE_SEP
        raise TruncatedStream("no digit or entry end after capped sense", start)
