"""Input validation, conversion and interactive questions on standard streams."""

from __future__ import annotations

import math
import re
import struct
import sys
from typing import Any, Callable, Iterable, Optional

_C_SPACE = " \t\n\v\f\r"
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_NUMBER = re.compile(r"[+-]?[0-9]+")
_SHELF = re.compile(r"[A-Za-z][0-9]+")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<num>[+-]?(?:"
    r"0[xX](?:[0-9A-Fa-f]+\.?[0-9A-Fa-f]*|\.[0-9A-Fa-f]+)(?:[pP][+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN](?:\([0-9A-Za-z_]*\))?"
    r"))"
)
_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

BAD_FORMAT = "Felaktigt format, försök igen!"
SHELF_QUESTION = "Enter shelf place (Format: Letter followed by number(s))"
BAD_SHELF = "Shelf must start with a letter followed by numbers (e.g., A25). Try again!"


def read_string() -> Optional[str]:
    """Read one line from standard input without its newline; None at end of input."""
    line = sys.stdin.readline()
    if not line:
        return None
    return line.split("\n", 1)[0]


def is_number(text: str) -> bool:
    """Return True if ``text`` is an optionally signed run of decimal digits."""
    return _NUMBER.fullmatch(text) is not None


def is_float(text: str) -> bool:
    """Return True if the whole of ``text`` reads as a floating-point number."""
    match = _FLOAT_PREFIX.match(text)
    return match is not None and match.end() == len(text)


def not_empty(text: str) -> bool:
    """Return True if ``text`` has at least one character."""
    return len(text) > 0


def is_string(text: str) -> bool:
    """Return True if ``text`` is non-empty and not an integer."""
    return not_empty(text) and not is_number(text)


def is_in_list(text: str, options: Iterable[str]) -> bool:
    """Return True if ``text`` matches one of ``options`` ignoring ASCII case."""
    if not not_empty(text):
        return False
    folded = text.translate(_ASCII_FOLD)
    return any(folded == option.translate(_ASCII_FOLD) for option in options)


def is_shelf(text: str) -> bool:
    """Return True if ``text`` is a letter followed by one or more digits."""
    return _SHELF.fullmatch(text) is not None


def make_int(text: str) -> int:
    """Convert the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def make_float(text: str) -> float:
    """Convert the leading number of ``text`` at single precision; 0.0 when none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    literal = match.group("num")
    body = literal.lstrip("+-")
    sign = -1.0 if literal.startswith("-") else 1.0
    if body[:2] in ("0x", "0X"):
        mantissa = body if "p" in body.lower() else body + "p0"
        if mantissa[2] in "pP.":
            mantissa = "0x0" + mantissa[2:]
        value = float.fromhex(mantissa)
    elif body[:1] in "nN":
        value = math.nan
    else:
        value = float(body)
    return _to_single(sign * value)


def make_string(text: str) -> str:
    """Return ``text`` as the answer string."""
    return str(text)


def trim(text: str) -> str:
    """Remove whitespace from both ends of ``text``."""
    return text.strip(_C_SPACE)


def ask_question(
    question: str,
    check: Callable[[str], bool],
    convert: Callable[[str], Any],
) -> Any:
    """Ask until an answer passes ``check``; return ``convert`` of it.

    Raises EOFError when input runs out before a valid answer.
    """
    while True:
        print(f"{question} ", end="", flush=True)
        answer = read_string()
        if answer is None:
            raise EOFError("input ended before a valid answer was given")
        if check(answer):
            return convert(answer)
        print(BAD_FORMAT)


def ask_question_int(question: str) -> int:
    """Ask for an integer."""
    return ask_question(question, is_number, make_int)


def ask_question_float(question: str) -> float:
    """Ask for a floating-point number."""
    return ask_question(question, is_float, make_float)


def ask_question_string(question: str) -> str:
    """Ask for a non-empty answer that is not an integer."""
    return ask_question(question, is_string, make_string)


def ask_question_shelf() -> str:
    """Ask for a shelf name such as A25 until a valid one is given."""
    while True:
        answer = ask_question_string(SHELF_QUESTION)
        if is_shelf(answer):
            return answer
        print(BAD_SHELF)