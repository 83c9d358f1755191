"""
Value tree produced by the parser.

Each JSON kind has its own class; ``Value`` is the union of all of them.
Containers own their children, so a tree is always finite and acyclic.
Numbers are always floats, whatever the literal looked like.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union


class ValueKind(Enum):
    """Discriminator for the value variants."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class JsonValue:
    """Common base for all value variants."""

    kind: ClassVar[ValueKind]

    def to_python(self) -> Any:
        """Convert to plain Python data (None, bool, float, str, list, dict)."""
        raise NotImplementedError


@dataclass(frozen=True)
class Null(JsonValue):
    kind: ClassVar[ValueKind] = ValueKind.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Boolean(JsonValue):
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number(JsonValue):
    value: float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class String(JsonValue):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def to_python(self) -> str:
        return self.value


@dataclass
class Array(JsonValue):
    """Ordered sequence of values."""

    items: list["Value"] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass
class Object(JsonValue):
    """Mapping from string keys to values.

    Key order carries no meaning; two objects are equal when they hold the
    same key/value pairs.
    """

    members: dict[str, "Value"] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> "Value":
        return self.members[key]

    def get(self, key: str, default: Optional["Value"] = None) -> Optional["Value"]:
        return self.members.get(key, default)

    def keys(self):
        return self.members.keys()

    def values(self):
        return self.members.values()

    def items(self):
        return self.members.items()

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members.items()}


Value = Union[Null, Boolean, Number, String, Array, Object]


def from_python(obj: Any) -> Value:
    """Build a value tree from plain Python data.

    Integers become floats. Raises TypeError for anything that has no
    JSON counterpart, including non-string dictionary keys.
    """
    if isinstance(obj, JsonValue):
        return obj  # type: ignore[return-value]
    if obj is None:
        return Null()
    # bool subclasses int
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, (int, float)):
        return Number(float(obj))
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, (list, tuple)):
        return Array([from_python(item) for item in obj])
    if isinstance(obj, dict):
        members = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, not {type(key).__name__}")
            members[key] = from_python(value)
        return Object(members)
    raise TypeError(f"Object of type {type(obj).__name__} has no JSON value")
