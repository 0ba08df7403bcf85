"""Positioned parse errors and their taxonomy."""

from enum import Enum

from jtree._utf8_mapper import UTF8PositionMapper

type Position = int


class ErrorKind(Enum):
    """
    Classifies why a parse was rejected.

    Every kind is terminal: the parser never recovers from any of them.
    """

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_END = "unexpected_end"
    MALFORMED_LITERAL = "malformed_literal"
    UNTERMINATED_STRING = "unterminated_string"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_NUMBER = "invalid_number"
    STRUCTURAL = "structural"
    TRAILING_INPUT = "trailing_input"
    DEPTH_EXCEEDED = "depth_exceeded"
    DUPLICATE_KEY = "duplicate_key"
    INVALID_ENCODING = "invalid_encoding"


class ParseError(ValueError):
    """
    Handles JSON parsing failures with precise position information.

    ``offset`` is the zero-based character index at which the failure was
    detected; line and column numbers are derived from it for display.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        offset: Position = 0,
        kind: ErrorKind = ErrorKind.STRUCTURAL,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(offset, int) or offset < 0:
            raise ValueError("offset must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.offset = offset
        self.kind = kind

        self.lineno = doc.count("\n", 0, offset) + 1 if doc else 1
        self.colno = offset - doc.rfind("\n", 0, offset) if doc else offset + 1

        super().__init__(
            f"{msg} at line {self.lineno}, column {self.colno} (char {offset})"
        )

    @property
    def byte_offset(self) -> Position:
        """UTF-8 byte offset of the failure within ``doc``."""
        if not self.doc:
            return self.offset
        return UTF8PositionMapper(self.doc).char_to_byte(self.offset)

    def __reduce__(self) -> tuple[type, tuple[str, str, Position, ErrorKind]]:
        return self.__class__, (self.msg, self.doc, self.offset, self.kind)


class ValueTypeError(TypeError):
    """Raised when a value accessor is used on the wrong variant."""
