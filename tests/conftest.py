"""
Pytest configuration and shared fixtures for basicjson tests.

Provides immutable test data fixtures shared across the parsing, failure
and encoding tests.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import basicjson


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_cause: type[Exception] | None = None


def nested_objects(levels: int) -> str:
    """Builds ``levels`` objects nested through the field ``a``."""
    return '{"a":' * levels + "1" + "}" * levels


def nested_arrays(levels: int) -> str:
    """Builds ``levels`` arrays nested inside each other."""
    return "[" * levels + "1" + "]" * levels


@pytest.fixture
def map_fail_cases() -> list[JsonTestCase]:
    """
    Provides object documents that parse_map must reject.

    Each case names the condition expected as the failure's cause.
    """
    return [
        JsonTestCase(
            "unquoted field name",
            "{a:1}",
            True,
            expected_cause=basicjson.FieldNameNotQuotedError,
        ),
        JsonTestCase(
            "single-quoted field name",
            "{'a':1}",
            True,
            expected_cause=basicjson.FieldNameNotQuotedError,
        ),
        JsonTestCase(
            "colon inside field name",
            '{"a:b":1}',
            True,
            expected_cause=basicjson.FieldNameNotQuotedError,
        ),
        JsonTestCase(
            "unquoted field name in nested object",
            '{"a":{b:1}}',
            True,
            expected_cause=basicjson.FieldNameNotQuotedError,
        ),
        JsonTestCase(
            "member without colon",
            '{"a"}',
            True,
            expected_cause=basicjson.MalformedPairError,
        ),
        JsonTestCase(
            "second member without colon",
            '{"a":1,"b"}',
            True,
            expected_cause=basicjson.MalformedPairError,
        ),
        JsonTestCase(
            "empty member between commas",
            '{"a":1,,"b":2}',
            True,
            expected_cause=basicjson.MalformedPairError,
        ),
        JsonTestCase(
            "member without colon inside array",
            '{"a":[{"b"}]}',
            True,
            expected_cause=basicjson.MalformedPairError,
        ),
        JsonTestCase(
            "objects nested past the depth limit",
            nested_objects(1002),
            True,
            expected_cause=basicjson.NestingTooDeepError,
        ),
    ]


@pytest.fixture
def map_pass_cases() -> list[JsonTestCase]:
    """
    Provides object documents with the plain Python value they convert to.
    """
    return [
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("string value", '{"a":"b"}', False, {"a": "b"}),
        JsonTestCase("integer value", '{"a":1}', False, {"a": 1}),
        JsonTestCase("float value", '{"a":1.5}', False, {"a": 1.5}),
        JsonTestCase(
            "nested containers",
            '{"a":{"b":[1,{"c":"d"}]}}',
            False,
            {"a": {"b": [1, {"c": "d"}]}},
        ),
        JsonTestCase(
            "colon inside string value",
            '{"url":"https://example.com:8080/"}',
            False,
            {"url": "https://example.com:8080/"},
        ),
        JsonTestCase(
            "surrounding whitespace",
            '  {   "key"    :    "value"    ,  "k":"v"    }  ',
            False,
            {"key": "value", "k": "v"},
        ),
        JsonTestCase("empty field name", '{"":1}', False, {"": 1}),
        JsonTestCase(
            "non-ascii content",
            '{"名前":"値"}',
            False,
            {"名前": "値"},
        ),
    ]


@pytest.fixture
def scalar_cases() -> list[JsonTestCase]:
    """
    Provides single fragments with the value variant they classify to.
    """
    return [
        JsonTestCase("quoted string", '"hello"', False, basicjson.JsonStr("hello")),
        JsonTestCase("empty string", '""', False, basicjson.JsonStr("")),
        JsonTestCase("lone quote", '"', False, basicjson.JsonStr("")),
        JsonTestCase("integer", "42", False, basicjson.JsonInt(42)),
        JsonTestCase("negative integer", "-17", False, basicjson.JsonInt(-17)),
        JsonTestCase("signed integer", "+7", False, basicjson.JsonInt(7)),
        JsonTestCase(
            "largest 64-bit integer",
            "9223372036854775807",
            False,
            basicjson.JsonInt(9223372036854775807),
        ),
        JsonTestCase(
            "smallest 64-bit integer",
            "-9223372036854775808",
            False,
            basicjson.JsonInt(-9223372036854775808),
        ),
        JsonTestCase(
            "integer beyond 64 bits",
            "9223372036854775808",
            False,
            basicjson.JsonFloat(9223372036854775808.0),
        ),
        JsonTestCase("float", "3.14", False, basicjson.JsonFloat(3.14)),
        JsonTestCase("exponent", "1e3", False, basicjson.JsonFloat(1000.0)),
        JsonTestCase("trailing dot", "1.", False, basicjson.JsonFloat(1.0)),
        JsonTestCase("leading dot", ".5", False, basicjson.JsonFloat(0.5)),
        JsonTestCase("float suffix", "2.5f", False, basicjson.JsonFloat(2.5)),
        JsonTestCase("double suffix", "2d", False, basicjson.JsonFloat(2.0)),
        JsonTestCase(
            "infinity", "-Infinity", False, basicjson.JsonFloat(float("-inf"))
        ),
        JsonTestCase("true literal", "true", False, basicjson.JsonRaw("true")),
        JsonTestCase("false literal", "false", False, basicjson.JsonRaw("false")),
        JsonTestCase("null literal", "null", False, basicjson.JsonRaw("null")),
        JsonTestCase("hex number", "0x14", False, basicjson.JsonRaw("0x14")),
        JsonTestCase("lowercase infinity", "inf", False, basicjson.JsonRaw("inf")),
        JsonTestCase("underscored digits", "1_000", False, basicjson.JsonRaw("1_000")),
        JsonTestCase("empty fragment", "", False, basicjson.JsonRaw("")),
    ]
