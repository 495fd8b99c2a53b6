"""
Basic JSON-subset parsing for environments without a full JSON library.

Parses objects and arrays of quoted strings, 64-bit integers and floats into
an ordered tree of value variants. Anything else is kept as raw text, and
backslash escapes are passed through rather than decoded.
"""

import logging
import math
import os
import re
import time
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from basicjson._tokenizer import tokenize
from basicjson._tokenizer import trim_leading_character
from basicjson._tokenizer import trim_trailing_character
from basicjson._tokenizer import trim_whitespace
from basicjson._values import VALUE_TYPES
from basicjson._values import JsonArray
from basicjson._values import JsonFloat
from basicjson._values import JsonInt
from basicjson._values import JsonObject
from basicjson._values import JsonRaw
from basicjson._values import JsonStr
from basicjson._values import Value
from basicjson._values import ValueKind

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

MAX_DEPTH = 1000

# Type aliases for domain concepts
Depth = int
Container = JsonObject | JsonArray
# (field name or None for array elements, raw fragment, depth to classify at)
Member = tuple[str | None, str, Depth]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"""
    [+-]?
    (?:
        NaN
        | Infinity
        | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?
    )
    """,
    re.VERBOSE,
)

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "BASICJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class BasicJsonError(ValueError):
    """Base class for the conditions that abort a parse."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(msg)


class NestingTooDeepError(BasicJsonError):
    """Raised when a value is classified beyond the maximum nesting depth."""

    def __init__(self, depth: Depth, max_depth: Depth = MAX_DEPTH) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"JSON is too deeply nested (depth {depth} exceeds {max_depth})"
        )


class FieldNameNotQuotedError(BasicJsonError):
    """Raised when an object field name is not enclosed in double quotes."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"Expecting double-quotes around field names: {field_name!r}"
        )


class MalformedPairError(BasicJsonError):
    """Raised when an object member has no ':' between name and value."""

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(f"Expecting ':' delimiter in member {fragment!r}")


class JSONParseError(ValueError):
    """
    Uniform failure raised by the public entry points.

    Whatever went wrong during the descent is kept in ``cause`` (and as the
    exception's ``__cause__``) so callers can still tell the conditions
    apart.
    """

    def __init__(self, cause: BaseException | None = None) -> None:
        self.msg = "Cannot parse JSON"
        self.cause = cause
        if cause is None:
            super().__init__(self.msg)
        else:
            super().__init__(f"{self.msg}: {cause}")


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.
    """

    max_depth: Depth = MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or isinstance(
            self.max_depth, bool
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 0:
            raise ValueError("max_depth must be a non-negative integer")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures encoding behavior with immutable settings.

    ``separators`` is an ``(item_separator, key_separator)`` pair.
    """

    indent: str | int | None = None
    separators: tuple[str, str] | None = None

    def __post_init__(self) -> None:
        if self.indent is not None and not isinstance(self.indent, str | int):
            raise TypeError("indent must be a string, an integer or None")
        if self.separators is not None and len(self.separators) != 2:  # noqa: PLR2004
            raise ValueError("separators must be an (item, key) pair")


_DEFAULT_CONFIG = ParseConfig()


def _check_depth(depth: Depth, config: ParseConfig) -> None:
    """Aborts the parse once the nesting counter passes the ceiling."""
    if depth > config.max_depth:
        raise NestingTooDeepError(depth, config.max_depth)


def _parse_int64(fragment: str) -> int | None:
    """Returns the fragment as an integer if it is one in the signed 64-bit range."""
    if not _INTEGER_PATTERN.fullmatch(fragment):
        return None
    value = int(fragment)
    if _INT64_MIN <= value <= _INT64_MAX:
        return value
    return None


def _parse_double(fragment: str) -> float | None:
    """Returns the fragment as a float if it is a decimal floating point literal."""
    stripped = trim_whitespace(fragment)
    if not _FLOAT_PATTERN.fullmatch(stripped):
        return None
    return float(stripped.rstrip("fFdD"))


def _classify_scalar(fragment: str) -> Value:
    """Classifies a fragment that does not open a nested structure."""
    with ProfileContext("classify_scalar", len(fragment)):
        if fragment.startswith('"'):
            return JsonStr(
                trim_trailing_character(
                    trim_leading_character(fragment, '"'), '"'
                )
            )

        integer = _parse_int64(fragment)
        if integer is not None:
            return JsonInt(integer)

        number = _parse_double(fragment)
        if number is not None:
            return JsonFloat(number)

        return JsonRaw(fragment)


def _split_member(pair: str) -> tuple[str, str]:
    """Splits an object member on its first ':' into field name and value."""
    name, separator, value = pair.partition(":")
    if not separator:
        raise MalformedPairError(pair)

    name = trim_whitespace(name)
    if not (name.startswith('"') and name.endswith('"')):
        raise FieldNameNotQuotedError(name)

    key = trim_leading_character(trim_trailing_character(name, '"'), '"')
    return key, trim_whitespace(value)


def _object_members(text: str, depth: Depth) -> Iterator[Member]:
    """
    Yields the members of an object; values are classified at ``depth``.
    """
    body = trim_whitespace(
        trim_leading_character(trim_trailing_character(text, "}"), "{")
    )
    with ProfileContext("tokenize", len(body)):
        pairs = tokenize(body)

    for pair in pairs:
        key, value = _split_member(pair)
        yield key, value, depth


def _array_elements(text: str, depth: Depth) -> Iterator[Member]:
    """
    Yields the elements of an array; each is classified one level deeper.
    """
    body = trim_whitespace(
        trim_leading_character(trim_trailing_character(text, "]"), "[")
    )
    with ProfileContext("tokenize", len(body)):
        fragments = tokenize(body)

    for fragment in fragments:
        yield None, trim_whitespace(fragment), depth + 1


@dataclass
class _Frame:
    """A container being filled together with the members still to classify."""

    container: Container
    members: Iterator[Member]

    def add(self, key: str | None, value: Value) -> None:
        if isinstance(self.container, JsonArray):
            self.container.items.append(value)
        elif key is not None:
            self.container.members[key] = value


def _open(fragment: str, depth: Depth) -> _Frame:
    """Starts a nested structure that the classifier found at ``depth``."""
    if fragment.startswith("["):
        array = JsonArray()
        return _Frame(array, _array_elements(fragment, depth + 1))

    obj = JsonObject()
    return _Frame(obj, _object_members(fragment, depth + 1))


def _opens_structure(fragment: str) -> bool:
    return fragment.startswith(("[", "{"))


def _fill(root: _Frame, config: ParseConfig) -> None:
    """
    Classifies every member below ``root`` until the whole tree is built.

    Nested structures are pushed onto an explicit frame stack instead of
    recursing, so the depth ceiling is the only limit on nesting.
    """
    stack = [root]
    while stack:
        frame = stack[-1]
        member = next(frame.members, None)
        if member is None:
            stack.pop()
            continue

        key, fragment, depth = member
        _check_depth(depth, config)
        if _opens_structure(fragment):
            child = _open(fragment, depth)
            frame.add(key, child.container)
            stack.append(child)
        else:
            frame.add(key, _classify_scalar(fragment))


def classify(
    fragment: str, depth: Depth = 0, config: ParseConfig | None = None
) -> Value:
    """
    Classifies a single value fragment found at the given nesting depth.

    Nested arrays and objects are parsed completely. Failures are raised as
    the underlying ``BasicJsonError`` subclasses rather than being wrapped.
    """
    config = config or _DEFAULT_CONFIG
    _check_depth(depth, config)
    if not _opens_structure(fragment):
        return _classify_scalar(fragment)

    root = _open(fragment, depth)
    _fill(root, config)
    return root.container


def _parse_document(
    text: str, opening: str, start: _Frame, config: ParseConfig
) -> Container:
    """Runs a full parse, collapsing every failure into JSONParseError."""
    if not text.startswith(opening):
        logger.debug("Cannot parse JSON: input does not start with %r", opening)
        raise JSONParseError()

    try:
        with ProfileContext("parse_document", len(text)):
            _fill(start, config)
    except (ValueError, IndexError) as exc:
        logger.debug("Cannot parse JSON: %s", exc)
        raise JSONParseError(exc) from exc

    return start.container


def _check_input(text: Any) -> str:
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )
    return trim_whitespace(text)


def parse_map(text: str, **kwargs: Any) -> JsonObject:
    """
    Parses a JSON object into an ordered ``JsonObject``.

    Raises JSONParseError for any malformed input; no partial result is
    returned.
    """
    trimmed = _check_input(text)
    config = ParseConfig(**kwargs)
    obj = JsonObject()
    _parse_document(
        trimmed, "{", _Frame(obj, _object_members(trimmed, 0)), config
    )
    return obj


def parse_list(text: str, **kwargs: Any) -> JsonArray:
    """
    Parses a JSON array into an ordered ``JsonArray``.

    Raises JSONParseError for any malformed input; no partial result is
    returned.
    """
    trimmed = _check_input(text)
    config = ParseConfig(**kwargs)
    array = JsonArray()
    _parse_document(
        trimmed, "[", _Frame(array, _array_elements(trimmed, 0)), config
    )
    return array


_ESCAPED_CHARACTERS = frozenset('"\\{}[]')


def _escape(s: str) -> str:
    """Prefixes quotes, backslashes and brackets with a backslash."""
    result = []
    for char in s:
        if char in _ESCAPED_CHARACTERS:
            result.append("\\")
        result.append(char)
    return "".join(result)


def _encode_string(s: str, level: int) -> str:
    """
    Quotes a string found inside ``level`` enclosing containers.

    Every enclosing body is tokenized once on the way down and each pass
    consumes one layer of backslashes, so the content is escaped once per
    level.
    """
    for _ in range(level):
        s = _escape(s)
    return f'"{s}"'


def _encode_key(key: str, level: int) -> str:
    if ":" in key:
        msg = f"field names containing ':' cannot be encoded: {key!r}"
        raise ValueError(msg)
    return _encode_string(key, level)


def _encode_number(n: int | float) -> str:
    """Encode numeric values so they classify back to the same variant."""
    if isinstance(n, float):
        if math.isnan(n):
            return "NaN"
        if math.isinf(n):
            return "Infinity" if n > 0 else "-Infinity"
        return repr(n)
    if not _INT64_MIN <= n <= _INT64_MAX:
        msg = f"integer {n} is outside the signed 64-bit range"
        raise ValueError(msg)
    return str(n)


def _get_indent_string(indent: str | int | None, level: int) -> str:
    """Generate indentation string for given level."""
    if indent is None:
        return ""
    elif isinstance(indent, int):
        return " " * (indent * level)
    else:
        return indent * level


def _encode_array(array: JsonArray, config: EncodeConfig, level: int) -> str:
    """Encode array with optional formatting."""
    if not array.items:
        return "[]"

    encoded_items = [
        _encode_value(item, config, level + 1) for item in array.items
    ]

    if config.indent is not None:
        return _format_array_indented(encoded_items, config, level)

    separator = config.separators[0] if config.separators else ", "
    return "[" + separator.join(encoded_items) + "]"


def _encode_object(obj: JsonObject, config: EncodeConfig, level: int) -> str:
    """Encode object members in insertion order."""
    if not obj.members:
        return "{}"

    items = [
        (
            _encode_key(key, level + 1),
            _encode_value(value, config, level + 1),
        )
        for key, value in obj.members.items()
    ]

    if config.indent is not None:
        return _format_object_indented(items, config, level)

    separator = config.separators[1] if config.separators else ": "
    item_separator = config.separators[0] if config.separators else ", "
    formatted_items = [f"{key}{separator}{value}" for key, value in items]
    return "{" + item_separator.join(formatted_items) + "}"


def _format_array_indented(
    items: list[str], config: EncodeConfig, level: int
) -> str:
    """Format array with proper indentation."""
    indent_str = _get_indent_string(config.indent, level)
    inner_indent = _get_indent_string(config.indent, level + 1)

    lines = ["["]
    for i, item in enumerate(items):
        line = f"{inner_indent}{item}"
        if i < len(items) - 1:
            line += ","
        lines.append(line)

    lines.append(f"{indent_str}]")
    return "\n".join(lines)


def _format_object_indented(
    items: list[tuple[str, str]], config: EncodeConfig, level: int
) -> str:
    """Format object with proper indentation."""
    indent_str = _get_indent_string(config.indent, level)
    inner_indent = _get_indent_string(config.indent, level + 1)
    separator = config.separators[1] if config.separators else ": "

    lines = ["{"]
    for i, (key, value) in enumerate(items):
        line = f"{inner_indent}{key}{separator}{value}"
        if i < len(items) - 1:
            line += ","
        lines.append(line)

    lines.append(f"{indent_str}}}")
    return "\n".join(lines)


def _encode_value(value: Value, config: EncodeConfig, level: int = 0) -> str:  # noqa: PLR0911
    """Encode any value variant."""
    if isinstance(value, JsonObject):
        return _encode_object(value, config, level)
    elif isinstance(value, JsonArray):
        return _encode_array(value, config, level)
    elif isinstance(value, JsonStr):
        return _encode_string(value.value, level)
    elif isinstance(value, JsonInt | JsonFloat):
        return _encode_number(value.value)
    elif isinstance(value, JsonRaw):
        return value.text
    else:
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)


def dumps(value: Value, **kwargs: Any) -> str:
    """
    Serializes a value tree into text that parses back to an equal tree.

    Raw values are written verbatim, so only trees without them are
    guaranteed to round-trip.
    """
    if not isinstance(value, VALUE_TYPES):
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)

    config = EncodeConfig(**kwargs)
    return _encode_value(value, config)


__all__ = [
    "MAX_DEPTH",
    "BasicJsonError",
    "EncodeConfig",
    "FieldNameNotQuotedError",
    "HotPathStats",
    "JSONParseError",
    "JsonArray",
    "JsonFloat",
    "JsonInt",
    "JsonObject",
    "JsonRaw",
    "JsonStr",
    "MalformedPairError",
    "NestingTooDeepError",
    "ParseConfig",
    "ProfileContext",
    "Value",
    "ValueKind",
    "classify",
    "clear_hot_path_stats",
    "dumps",
    "get_hot_path_stats",
    "parse_list",
    "parse_map",
]
