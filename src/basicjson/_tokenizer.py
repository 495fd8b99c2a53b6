"""Top-level comma tokenizer and trim helpers for object and array bodies."""

from __future__ import annotations

from typing import Final

# Characters removed by whitespace trimming: everything up to and including
# the space character, control characters included.
_TRIMMABLE: Final = "".join(chr(code) for code in range(0x21))


def trim_whitespace(text: str) -> str:
    """Strips leading and trailing whitespace and control characters."""
    return text.strip(_TRIMMABLE)


def trim_leading_character(text: str, char: str) -> str:
    """Removes a single leading ``char`` if present."""
    if text and text[0] == char:
        return text[1:]
    return text


def trim_trailing_character(text: str, char: str) -> str:
    """Removes a single trailing ``char`` if present."""
    if text and text[-1] == char:
        return text[:-1]
    return text


def tokenize(body: str) -> list[str]:
    """
    Splits a bracket-stripped body into its top-level fragments.

    Commas separate fragments only when they sit outside every nested
    object or array and outside a quoted string. A backslash is dropped and
    the character after it is copied verbatim without affecting the nesting
    counters or the quote flag.

    Only the final fragment is trimmed; earlier fragments are returned as
    scanned and left for the caller to trim.
    """
    fragments: list[str] = []
    buffer: list[str] = []
    in_object = 0
    in_array = 0
    in_string = False
    in_escape = False

    for char in body:
        if in_escape:
            buffer.append(char)
            in_escape = False
            continue

        if char == "{":
            in_object += 1
        elif char == "}":
            in_object -= 1
        elif char == "[":
            in_array += 1
        elif char == "]":
            in_array -= 1
        elif char == '"':
            in_string = not in_string

        if char == "," and in_object == 0 and in_array == 0 and not in_string:
            fragments.append("".join(buffer))
            buffer.clear()
        elif char == "\\":
            in_escape = True
        else:
            buffer.append(char)

    if buffer:
        fragments.append(trim_whitespace("".join(buffer)))

    return fragments


__all__ = [
    "tokenize",
    "trim_leading_character",
    "trim_trailing_character",
    "trim_whitespace",
]
