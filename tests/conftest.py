"""
Pytest configuration and shared fixtures for jtree tests.

Provides immutable test documents: JSON_checker pass and fail files,
documents the permissive grammar accepts, and basic scalar cases.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from jtree import Array
from jtree import Bool
from jtree import Null
from jtree import Number
from jtree import Object
from jtree import String


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None


PASS1 = """[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]"""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that must be rejected.

    Documents the permissive grammar accepts (string payloads, leading
    zeroes, raw control characters, deep nesting) live in
    ``permissive_cases`` instead.
    """
    fail_docs = {
        "fail2.json": '["Unclosed array"',
        "fail3.json": '{unquoted_key: "keys must be quoted"}',
        "fail4.json": '["extra comma",]',
        "fail5.json": '["double extra comma",,]',
        "fail6.json": '[   , "<-- missing value"]',
        "fail7.json": '["Comma after the close"],',
        "fail8.json": '["Extra close"]]',
        "fail9.json": '{"Extra comma": true,}',
        "fail10.json": '{"Extra value after close": true} "misplaced quoted value"',
        "fail11.json": '{"Illegal expression": 1 + 2}',
        "fail12.json": '{"Illegal invocation": alert()}',
        "fail14.json": '{"Numbers cannot be hex": 0x14}',
        "fail15.json": '["Illegal backslash escape: \\x15"]',
        "fail16.json": "[\\naked]",
        "fail17.json": '["Illegal backslash escape: \\017"]',
        "fail19.json": '{"Missing colon" null}',
        "fail20.json": '{"Double colon":: null}',
        "fail21.json": '{"Comma instead of colon", null}',
        "fail22.json": '["Colon instead of comma": false]',
        "fail23.json": '["Bad value", truth]',
        "fail24.json": "['single quote']",
        "fail26.json": '["tab\\   character\\   in\\  string\\  "]',
        "fail28.json": '["line\\\nbreak"]',
        "fail29.json": "[0e]",
        "fail30.json": "[0e+]",
        "fail31.json": "[0e+-1]",
        "fail32.json": '{"Comma instead if closing brace": true,',
        "fail33.json": '["mismatch"}',
    }
    return [
        JsonTestCase(description=name, input_data=doc, should_fail=True)
        for name, doc in fail_docs.items()
    ]


@pytest.fixture
def permissive_cases() -> list[JsonTestCase]:
    """
    Provides documents strict JSON rejects but this parser accepts.
    """
    return [
        JsonTestCase(
            "fail1.json - string payload",
            '"A JSON payload should be an object or array, not a string."',
            False,
            String("A JSON payload should be an object or array, not a string."),
        ),
        JsonTestCase(
            "fail13.json - leading zeroes",
            '{"Numbers cannot have leading zeroes": 013}',
            False,
            Object({"Numbers cannot have leading zeroes": Number(13.0)}),
        ),
        JsonTestCase(
            "fail18.json - nesting depth 20",
            '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "fail25.json - raw tabs in string",
            '["\ttab\tcharacter\tin\tstring\t"]',
            False,
            Array((String("\ttab\tcharacter\tin\tstring\t"),)),
        ),
        JsonTestCase(
            "fail27.json - raw newline in string",
            '["line\nbreak"]',
            False,
            Array((String("line\nbreak"),)),
        ),
        JsonTestCase(
            "raw control character in string",
            '["A\u001fZ"]',
            False,
            Array((String("A\u001fZ"),)),
        ),
        JsonTestCase("trailing dot", "1.", False, Number(1.0)),
        JsonTestCase("bare fraction", "-.5", False, Number(-0.5)),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that must parse successfully.
    """
    return [
        JsonTestCase("pass1.json - complex nested structure", PASS1),
        JsonTestCase(
            "pass2.json - deep nesting",
            '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "pass3.json - simple object",
            '{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers every variant and the simple container shapes.
    """
    return [
        JsonTestCase("null value", "null", False, Null()),
        JsonTestCase("true boolean", "true", False, Bool(True)),
        JsonTestCase("false boolean", "false", False, Bool(False)),
        JsonTestCase("integer", "42", False, Number(42.0)),
        JsonTestCase("negative integer", "-17", False, Number(-17.0)),
        JsonTestCase("float", "-3.14", False, Number(-3.14)),
        JsonTestCase("exponent", "1.23e4", False, Number(12300.0)),
        JsonTestCase("empty string", '""', False, String("")),
        JsonTestCase("simple string", '"hello"', False, String("hello")),
        JsonTestCase("escaped quote", '"a\\"b"', False, String('a"b')),
        JsonTestCase("empty array", "[]", False, Array(())),
        JsonTestCase("empty object", "{}", False, Object({})),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            False,
            Array((Number(1.0), Number(2.0), Number(3.0))),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            Object({"key": String("value")}),
        ),
    ]
