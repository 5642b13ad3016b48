# Area: Core
"""Parsing of the player's submitted count."""

from __future__ import annotations

import re
from typing import Any

from ..errors import InvalidAnswerError

_DIGITS_RE = re.compile(r"[0-9]+")
_INTEGER_RE = re.compile(r"\+?[0-9]+")


def parse_answer(raw_input: Any) -> int:
    """
    Turn a submitted value into a non-negative integer.

    Accepts ints and strings of decimal digits (surrounding whitespace
    and a leading ``+`` are allowed).

    Raises:
        InvalidAnswerError: If the value is empty, negative, fractional,
            too long to convert or not a number at all
    """
    if isinstance(raw_input, bool):
        raise InvalidAnswerError(raw_input, "not a number")
    if isinstance(raw_input, int):
        if raw_input < 0:
            raise InvalidAnswerError(raw_input, "negative")
        return raw_input
    if raw_input is None:
        raise InvalidAnswerError(raw_input, "empty")

    text = str(raw_input).strip()
    if not text:
        raise InvalidAnswerError(raw_input, "empty")
    if text.startswith("-") and _DIGITS_RE.fullmatch(text[1:]):
        raise InvalidAnswerError(raw_input, "negative")
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidAnswerError(raw_input, "not a whole number")
    try:
        return int(text)
    except ValueError as e:
        # More digits than int() will convert
        raise InvalidAnswerError(raw_input, "too large") from e
