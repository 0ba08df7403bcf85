"""
Recursive-descent JSON parser producing an immutable, typed value tree.

``parse`` turns JSON text into one of six ``Value`` variants or raises a
``ParseError`` carrying the character offset of the first failure.
"""

from typing import IO
from typing import Any

from jtree._config import DEFAULT_MAX_DEPTH
from jtree._config import ParseConfig
from jtree._errors import ErrorKind
from jtree._errors import ParseError
from jtree._errors import ValueTypeError
from jtree._parser import JsonParser
from jtree._parser import JsonScanner
from jtree._profile import HotPathStats
from jtree._profile import ProfileContext
from jtree._profile import clear_hot_path_stats
from jtree._profile import get_hot_path_stats
from jtree._value import Array
from jtree._value import Bool
from jtree._value import JsonValue
from jtree._value import Null
from jtree._value import Number
from jtree._value import Object
from jtree._value import PythonValue
from jtree._value import String
from jtree._value import Value
from jtree._value import ValueKind
from jtree._value import extract_keys

__version__ = "0.1.0"


def _parse_text(s: str, config: ParseConfig) -> JsonValue:
    with ProfileContext("parse", len(s)):
        scanner = JsonScanner(s, config)
        return JsonParser(scanner, config).parse()


def parse(s: str, **kwargs: Any) -> JsonValue:
    """
    Parses JSON text into a value tree.

    Keyword arguments build a ``ParseConfig``. Raises ``ParseError`` at the
    first position where the grammar cannot be satisfied.

    Nesting deeper than ``DEFAULT_MAX_DEPTH`` (400) is rejected with a
    ``DEPTH_EXCEEDED`` error even when the document is valid. Pass a larger
    ``max_depth``, or ``None``, for deeper input; beyond what the
    interpreter stack allows the parse still fails with ``DEPTH_EXCEEDED``
    rather than a ``RecursionError``.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON document must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    return _parse_text(s, config)


def parse_bytes(data: bytes, **kwargs: Any) -> JsonValue:
    """
    Parses a UTF-8 encoded JSON document.

    Undecodable input is reported as an ``INVALID_ENCODING`` error at the
    character offset where the first bad byte sits. The error's ``doc`` is
    the whole input decoded with U+FFFD replacements, so line and column
    context past the bad byte is kept.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"the JSON document must be bytes, not {type(data).__name__}"
        )

    config = ParseConfig(**kwargs)
    raw = bytes(data)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        offset = len(raw[: exc.start].decode("utf-8"))
        doc = raw.decode("utf-8", errors="replace")
        raise ParseError(
            "Invalid UTF-8 input", doc, offset, ErrorKind.INVALID_ENCODING
        ) from exc
    return _parse_text(text, config)


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Parses JSON from a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Array",
    "Bool",
    "ErrorKind",
    "HotPathStats",
    "JsonParser",
    "JsonScanner",
    "JsonValue",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "ParseError",
    "PythonValue",
    "String",
    "Value",
    "ValueKind",
    "ValueTypeError",
    "clear_hot_path_stats",
    "extract_keys",
    "get_hot_path_stats",
    "load",
    "parse",
    "parse_bytes",
]
