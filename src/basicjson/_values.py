"""Value variants produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import ClassVar


class ValueKind(Enum):
    """Tag identifying which variant a parsed value is."""

    OBJECT = "object"
    ARRAY = "array"
    STR = "str"
    INT = "int"
    FLOAT = "float"
    RAW = "raw"


@dataclass(frozen=True)
class JsonObject:
    """
    Ordered mapping from field name to value.

    Assigning an existing key replaces its value but keeps the position it
    was first inserted at.
    """

    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    members: dict[str, Value] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> list[str]:
        return list(self.members)

    def to_python(self) -> dict[str, Any]:
        """Converts the tree into plain dicts, lists, strings and numbers."""
        return {key: value.to_python() for key, value in self.members.items()}


@dataclass(frozen=True)
class JsonArray:
    """Ordered sequence of values."""

    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    items: list[Value] = field(default_factory=list)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JsonStr:
    """Quoted string with its outer quotes removed; escapes are not decoded."""

    kind: ClassVar[ValueKind] = ValueKind.STR

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonInt:
    """Integer within the signed 64-bit range."""

    kind: ClassVar[ValueKind] = ValueKind.INT

    value: int

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class JsonFloat:
    kind: ClassVar[ValueKind] = ValueKind.FLOAT

    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class JsonRaw:
    """
    Token that is neither a container, a string nor a number.

    Literals such as ``true``, ``false`` and ``null`` end up here unchanged.
    """

    kind: ClassVar[ValueKind] = ValueKind.RAW

    text: str

    def to_python(self) -> str:
        return self.text


Value = JsonObject | JsonArray | JsonStr | JsonInt | JsonFloat | JsonRaw

VALUE_TYPES = (JsonObject, JsonArray, JsonStr, JsonInt, JsonFloat, JsonRaw)


__all__ = [
    "VALUE_TYPES",
    "JsonArray",
    "JsonFloat",
    "JsonInt",
    "JsonObject",
    "JsonRaw",
    "JsonStr",
    "Value",
    "ValueKind",
]
