"""
Immutable value tree produced by the parser.

A parsed document is one of six variants deriving from ``Value``. Variants
are frozen dataclasses, so they compare structurally and support ``match``
statements; containers hold tuples and read-only mappings.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from collections.abc import ItemsView
from collections.abc import Iterator
from collections.abc import KeysView
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import Any
from typing import ClassVar

from jtree._errors import ValueTypeError


class ValueKind(Enum):
    """Discriminates the six value variants."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class Value(ABC):
    """
    Base of the closed value union.

    Typed accessors raise ``ValueTypeError`` unless the variant matches,
    so consumers can pull a payload without an isinstance ladder.
    """

    __slots__ = ()

    kind: ClassVar[ValueKind]

    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def as_bool(self) -> bool:
        raise self._mismatch(ValueKind.BOOL)

    def as_number(self) -> float:
        raise self._mismatch(ValueKind.NUMBER)

    def as_str(self) -> str:
        raise self._mismatch(ValueKind.STRING)

    def as_array(self) -> tuple[JsonValue, ...]:
        raise self._mismatch(ValueKind.ARRAY)

    def as_object(self) -> Mapping[str, JsonValue]:
        raise self._mismatch(ValueKind.OBJECT)

    @abstractmethod
    def to_python(self) -> PythonValue:
        """Projects the tree onto plain ``None/bool/float/str/list/dict``."""

    def _mismatch(self, expected: ValueKind) -> ValueTypeError:
        return ValueTypeError(
            f"expected {expected.value} value, got {self.kind.value}"
        )


@dataclass(frozen=True, slots=True)
class Null(Value):
    kind = ValueKind.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Bool(Value):
    value: bool

    kind = ValueKind.BOOL

    def as_bool(self) -> bool:
        return self.value

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class Number(Value):
    """Any JSON number, integral or not, held as a double."""

    value: float

    kind = ValueKind.NUMBER

    def as_number(self) -> float:
        return self.value

    def to_python(self) -> float:
        return float(self.value)


@dataclass(frozen=True, slots=True)
class String(Value):
    value: str

    kind = ValueKind.STRING

    def as_str(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Array(Value):
    """Ordered sequence of values, in document order."""

    items: tuple[JsonValue, ...] = ()

    kind = ValueKind.ARRAY

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]

    def as_array(self) -> tuple[JsonValue, ...]:
        return self.items

    def to_python(self) -> list[PythonValue]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True, eq=False)
class Object(Value):
    """
    String-keyed mapping of values.

    Equality ignores member order. Members are exposed through a read-only
    proxy, so an ``Object`` cannot be changed after construction.
    """

    members: Mapping[str, JsonValue] = field(
        default_factory=lambda: MappingProxyType({})
    )

    kind = ValueKind.OBJECT

    def __post_init__(self) -> None:
        if not isinstance(self.members, MappingProxyType):
            object.__setattr__(
                self, "members", MappingProxyType(dict(self.members))
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return self.members.items() == other.members.items()

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def get(self, key: str, default: Any = None) -> JsonValue | Any:
        return self.members.get(key, default)

    def keys(self) -> KeysView[str]:
        return self.members.keys()

    def items(self) -> ItemsView[str, JsonValue]:
        return self.members.items()

    def as_object(self) -> Mapping[str, JsonValue]:
        return self.members

    def to_python(self) -> dict[str, PythonValue]:
        return {key: value.to_python() for key, value in self.members.items()}


type JsonValue = Null | Bool | Number | String | Array | Object
type PythonValue = (
    None | bool | float | str | list[PythonValue] | dict[str, PythonValue]
)


def extract_keys(value: Value) -> list[str]:
    """
    Collects every object key in the tree, depth first.

    Keys appear once per occurrence, so a key used by several objects is
    listed several times.
    """
    keys: list[str] = []
    # Keys are queued as plain strings between their values.
    stack: list[Value | str] = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            keys.append(node)
        elif isinstance(node, Object):
            pending: list[Value | str] = []
            for key, child in node.members.items():
                pending.append(key)
                pending.append(child)
            stack.extend(reversed(pending))
        elif isinstance(node, Array):
            stack.extend(reversed(node.items))
    return keys
