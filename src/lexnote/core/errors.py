# src/lexnote/core/errors.py
"""
Errors raised while decoding an entry stream.

Every kind is fatal for the decode call that raised it.
"""


class ParseError(Exception):
    kind = "parse_error"

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Position {position}: {message}")

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "position": self.position,
        }


class UnterminatedField(ParseError):
    """Input ended while looking for a mandatory terminator."""
    kind = "unterminated_field"


class MalformedEntry(ParseError):
    """Empty headword or empty definition."""
    kind = "malformed_entry"


class TruncatedStream(ParseError):
    """The skip-forward after a capped sense hit end of input."""
    kind = "truncated_stream"
