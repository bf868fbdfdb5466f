# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/10/12 22:16:50
# @Author : Kariko Lin

"""Textual encodings of the four value types.

Every codec turns a stored value (already trimmed by the parser)
into a Python value and back. Both `Config.get_*`/`Config.set_*`
and the dataclass binding go through these, so a value written by
one side is always readable by the other.

Parsing errors are plain `ValueError`s here, and formatting a value
of the wrong Python type is a `TypeError` (no silent `int(3.7)`).
`Config` is the one who knows the key and wraps them into `InvalidValue`.
"""

from dataclasses import dataclass
from decimal import Decimal
from re import IGNORECASE
from re import compile as regex
from typing import Any, Callable

from .consts import ESCAPED_NEWLINE, ValueKind

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# ascii digits only, `int()` and `float()` would accept `1_000` and `٤٢`.
_INT_LITERAL = regex(r'[+-]?[0-9]+')
_FLOAT_LITERAL = regex(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|inf|infinity|nan)',
    IGNORECASE)

TRUE_LITERALS = frozenset(('1', 't', 'T', 'true', 'True', 'TRUE'))
FALSE_LITERALS = frozenset(('0', 'f', 'F', 'false', 'False', 'FALSE'))


@dataclass(frozen=True)
class ValueCodec:
    kind: ValueKind
    pytype: type
    parse: Callable[[str], Any]
    format: Callable[[Any], str]


def parse_int(text: str) -> int:
    if not _INT_LITERAL.fullmatch(text):
        raise ValueError(f'not a decimal integer: {text!r}')
    ret = int(text)
    if not INT64_MIN <= ret <= INT64_MAX:
        raise ValueError(f'value out of range: {text!r}')
    return ret


def _expect(value: object, *pytypes: type) -> None:
    # `bool` is an `int`, but `True` is not a number here.
    if isinstance(value, bool) and bool not in pytypes:
        raise TypeError(f'expected {pytypes[0].__name__}, got bool')
    if not isinstance(value, pytypes):
        raise TypeError(
            f'expected {pytypes[0].__name__}, got {type(value).__name__}')


def format_int(value: int) -> str:
    _expect(value, int)
    return str(int(value))


def parse_float(text: str) -> float:
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ValueError(f'not a decimal float: {text!r}')
    ret = float(text)
    # `float('1e400')` silently gives inf.
    if ret in (float('inf'), float('-inf')) and 'inf' not in text.lower():
        raise ValueError(f'value out of range: {text!r}')
    return ret


def format_float(value: float) -> str:
    """Shortest text that reads back the same float, never in exponent form.

    `repr()` already gives the shortest round-trip digits,
    `Decimal` only helps to lay them out positionally:
    `1e+16 -> 10000000000000000`, `3.0 -> 3`, `1.5e-07 -> 0.00000015`.
    """
    _expect(value, float, int)
    return format(Decimal(repr(float(value))).normalize(), 'f')


def parse_bool(text: str) -> bool:
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ValueError(f'not a boolean: {text!r}')


def format_bool(value: bool) -> str:
    _expect(value, bool)
    return 'true' if value else 'false'


def unescape_string(text: str) -> str:
    return text.replace(ESCAPED_NEWLINE, '\n')


def escape_string(value: str) -> str:
    _expect(value, str)
    return value.replace('\n', ESCAPED_NEWLINE)


INT = ValueCodec(ValueKind.INT, int, parse_int, format_int)
FLOAT = ValueCodec(ValueKind.FLOAT, float, parse_float, format_float)
BOOL = ValueCodec(ValueKind.BOOL, bool, parse_bool, format_bool)
STRING = ValueCodec(ValueKind.STRING, str, unescape_string, escape_string)

_BY_TYPE: dict[type, ValueCodec] = {
    i.pytype: i for i in (INT, FLOAT, BOOL, STRING)
}


def codec_for(pytype: object) -> ValueCodec | None:
    """Look up the codec of *exactly* `pytype`.

    No `issubclass()` here: `bool` is an `int` subclass,
    and subclasses of `str` (enums, etc) are not something we could rebuild.
    """
    if not isinstance(pytype, type):
        return None
    return _BY_TYPE.get(pytype)
