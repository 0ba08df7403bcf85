"""
Recursive-descent JSON parser over an in-memory string.

``JsonScanner`` owns the cursor and reads scalars character by character;
``JsonParser`` drives the descent through arrays and objects. Both are
created per parse call and never shared.
"""

from types import MappingProxyType

from jtree._config import ParseConfig
from jtree._errors import ErrorKind
from jtree._errors import ParseError
from jtree._errors import Position
from jtree._profile import ProfileContext
from jtree._value import Array
from jtree._value import Bool
from jtree._value import JsonValue
from jtree._value import Null
from jtree._value import Number
from jtree._value import Object
from jtree._value import String

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


class JsonScanner:
    """
    Cursor over the input text with one character of lookahead.

    Scalar productions (literals, strings, numbers) are consumed here and
    returned as finished values.
    """

    def __init__(self, text: str, config: ParseConfig):
        self.text = text
        self.config = config
        self.pos = 0
        self.length = len(text)

    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek(self) -> str:
        """Returns current character without advancing, or "" at the end."""
        return self.text[self.pos] if self.pos < self.length else ""

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def error(
        self, msg: str, kind: ErrorKind, pos: Position | None = None
    ) -> ParseError:
        return ParseError(msg, self.text, self.pos if pos is None else pos, kind)

    def skip_whitespace(self) -> None:
        """Skips space, tab, newline and carriage return."""
        text, pos, length = self.text, self.pos, self.length
        while pos < length and text[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def scan_literal(self, word: str) -> None:
        """Consumes ``word`` exactly, failing at the first mismatch."""
        with ProfileContext("scan_literal", len(word)):
            start = self.pos
            for i, expected in enumerate(word):
                if self.text[start + i : start + i + 1] != expected:
                    raise self.error(
                        f"Invalid literal, expected '{word}'",
                        ErrorKind.MALFORMED_LITERAL,
                        start + i,
                    )
            self.pos = start + len(word)

    def scan_string(self) -> str:
        """Scans a quoted string and returns its decoded contents."""
        with ProfileContext("scan_string"):
            text, length = self.text, self.length
            if self.advance() != '"':
                raise self.error(
                    "Expected string", ErrorKind.STRUCTURAL, self.pos - 1
                )

            chunks: list[str] = []
            run_start = self.pos
            while self.pos < length:
                char = text[self.pos]
                if char == '"':
                    chunks.append(text[run_start : self.pos])
                    self.pos += 1
                    return "".join(chunks)
                if char == "\\":
                    chunks.append(text[run_start : self.pos])
                    chunks.append(self._scan_escape())
                    run_start = self.pos
                else:
                    self.pos += 1

            raise self.error(
                "Unterminated string", ErrorKind.UNTERMINATED_STRING
            )

    def _scan_escape(self) -> str:
        """Decodes the escape sequence whose backslash is at the cursor."""
        esc_pos = self.pos + 1
        if esc_pos >= self.length:
            raise self.error(
                "Unterminated string",
                ErrorKind.UNTERMINATED_STRING,
                self.length,
            )

        esc = self.text[esc_pos]
        if esc in ESCAPES:
            self.pos = esc_pos + 1
            return ESCAPES[esc]
        if esc == "u" and self.config.unicode_escapes:
            return self._scan_unicode_escape()
        raise self.error(
            f"Invalid escape sequence '\\{esc}'",
            ErrorKind.INVALID_ESCAPE,
            esc_pos,
        )

    def _read_hex4(self, backslash_pos: Position) -> int:
        digits = self.text[backslash_pos + 2 : backslash_pos + 6]
        if len(digits) < 4 or not HEX_DIGITS.issuperset(digits):
            raise self.error(
                f"Invalid unicode escape sequence '\\u{digits}'",
                ErrorKind.INVALID_ESCAPE,
                backslash_pos + 1,
            )
        return int(digits, 16)

    def _scan_unicode_escape(self) -> str:
        start = self.pos
        code = self._read_hex4(start)
        self.pos = start + 6

        if code in _HIGH_SURROGATES:
            if self.text[self.pos : self.pos + 2] == "\\u":
                low = self._read_hex4(self.pos)
                if low in _LOW_SURROGATES:
                    self.pos += 6
                    return chr(
                        0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                    )
            raise self.error(
                "Unpaired surrogate in unicode escape",
                ErrorKind.INVALID_ESCAPE,
                start + 1,
            )
        if code in _LOW_SURROGATES:
            raise self.error(
                "Unpaired surrogate in unicode escape",
                ErrorKind.INVALID_ESCAPE,
                start + 1,
            )
        return chr(code)

    def _skip_digits(self) -> None:
        text, pos, length = self.text, self.pos, self.length
        while pos < length and text[pos] in DIGITS:
            pos += 1
        self.pos = pos

    def scan_number(self) -> float:
        """
        Scans a number run and converts it to a float.

        The run is captured permissively (optional sign, digits, one
        fraction, one exponent); only the float conversion can reject it.
        """
        with ProfileContext("scan_number"):
            start = self.pos
            if self.peek() == "-":
                self.pos += 1
            self._skip_digits()

            if self.peek() == ".":
                self.pos += 1
                self._skip_digits()

            if self.peek() in ("e", "E"):
                self.pos += 1
                if self.peek() in ("+", "-"):
                    self.pos += 1
                self._skip_digits()

            literal = self.text[start : self.pos]
            try:
                return float(literal)
            except ValueError:
                raise self.error(
                    f"Invalid number '{literal}'",
                    ErrorKind.INVALID_NUMBER,
                    start,
                ) from None


class JsonParser:
    """
    Recursive-descent parser producing an immutable value tree.

    One method per grammar production; nesting depth is tracked so the
    configured limit is enforced before Python's own recursion limit.
    """

    def __init__(self, scanner: JsonScanner, config: ParseConfig):
        self.scanner = scanner
        self.config = config
        self.depth = 0

    def parse(self) -> JsonValue:
        """Parses the whole input as a single value."""
        scanner = self.scanner
        scanner.skip_whitespace()
        try:
            value = self.parse_value()
        except RecursionError:
            raise scanner.error(
                "Maximum recursion depth exceeded", ErrorKind.DEPTH_EXCEEDED
            ) from None

        scanner.skip_whitespace()
        if not scanner.at_end():
            raise scanner.error(
                "Trailing characters after value", ErrorKind.TRAILING_INPUT
            )
        return value

    def parse_value(self) -> JsonValue:
        """Dispatches on the next character to the matching production."""
        scanner = self.scanner
        char = scanner.peek()

        if char == '"':
            return String(scanner.scan_string())
        elif char == "{":
            return self.parse_object()
        elif char == "[":
            return self.parse_array()
        elif char == "-" or char in DIGITS:
            return Number(scanner.scan_number())
        elif char == "n":
            scanner.scan_literal("null")
            return Null()
        elif char == "t":
            scanner.scan_literal("true")
            return Bool(True)
        elif char == "f":
            scanner.scan_literal("false")
            return Bool(False)
        elif not char:
            raise scanner.error(
                "Unexpected end of input", ErrorKind.UNEXPECTED_END
            )
        else:
            raise scanner.error(
                f"Unexpected character {char!r}",
                ErrorKind.UNEXPECTED_CHARACTER,
            )

    def _enter(self) -> None:
        self.depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise self.scanner.error(
                f"Maximum nesting depth of {max_depth} exceeded",
                ErrorKind.DEPTH_EXCEEDED,
            )

    def parse_array(self) -> Array:
        """Parses ``[ value (, value)* ]``; trailing commas are rejected."""
        with ProfileContext("parse_array"):
            scanner = self.scanner
            self._enter()
            scanner.advance()
            scanner.skip_whitespace()

            items: list[JsonValue] = []
            if scanner.peek() == "]":
                scanner.advance()
                self.depth -= 1
                return Array(())

            while True:
                items.append(self.parse_value())
                scanner.skip_whitespace()

                char = scanner.peek()
                if char == "]":
                    scanner.advance()
                    break
                if char != ",":
                    raise scanner.error(
                        "Expecting ',' or ']'", ErrorKind.STRUCTURAL
                    )
                scanner.advance()
                scanner.skip_whitespace()
                if scanner.peek() == "]":
                    raise scanner.error(
                        "Illegal trailing comma before end of array",
                        ErrorKind.STRUCTURAL,
                    )

            self.depth -= 1
            return Array(tuple(items))

    def _parse_object_key(self) -> tuple[Position, str]:
        scanner = self.scanner
        if scanner.peek() != '"':
            raise scanner.error(
                "Expecting property name enclosed in double quotes",
                ErrorKind.STRUCTURAL,
            )
        return scanner.pos, scanner.scan_string()

    def parse_object(self) -> Object:
        """Parses ``{ key : value (, key : value)* }``."""
        with ProfileContext("parse_object"):
            scanner = self.scanner
            self._enter()
            scanner.advance()
            scanner.skip_whitespace()

            members: dict[str, JsonValue] = {}
            if scanner.peek() == "}":
                scanner.advance()
                self.depth -= 1
                return Object(MappingProxyType(members))

            while True:
                key_pos, key = self._parse_object_key()
                if self.config.reject_duplicate_keys and key in members:
                    raise scanner.error(
                        f"Duplicate key {key!r}",
                        ErrorKind.DUPLICATE_KEY,
                        key_pos,
                    )
                scanner.skip_whitespace()
                if scanner.peek() != ":":
                    raise scanner.error(
                        "Expecting ':' delimiter", ErrorKind.STRUCTURAL
                    )
                scanner.advance()
                scanner.skip_whitespace()

                members[key] = self.parse_value()
                scanner.skip_whitespace()

                char = scanner.peek()
                if char == "}":
                    scanner.advance()
                    break
                if char != ",":
                    raise scanner.error(
                        "Expecting ',' or '}'", ErrorKind.STRUCTURAL
                    )
                scanner.advance()
                scanner.skip_whitespace()
                if scanner.peek() == "}":
                    raise scanner.error(
                        "Illegal trailing comma before end of object",
                        ErrorKind.STRUCTURAL,
                    )

            self.depth -= 1
            return Object(MappingProxyType(members))
