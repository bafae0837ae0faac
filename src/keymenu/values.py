"""Typed values captured by value leaves."""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import ValueParseError

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
UINT_MAX = 2 ** 64 - 1

TRUE_WORDS = frozenset({'true', 't', 'yes', 'y', '1'})
FALSE_WORDS = frozenset({'false', 'f', 'no', 'n', '0'})

_FLOAT_RE = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')
_SPECIAL_FLOAT_RE = re.compile(r'[+-]?(nan|inf|infinity)', re.IGNORECASE)
_SIGNED_RE = re.compile(r'[+-]?[0-9]+')
_UNSIGNED_RE = re.compile(r'\+?[0-9]+')


class ValueKind(Enum):
    BOOL = 'bool'
    CHAR = 'char'
    STRING = 'string'
    FLOAT = 'float'
    SIGNED_INT = 'int'
    UNSIGNED_INT = 'uint'

    @property
    def label(self):
        return _LABELS[self]

    @classmethod
    def from_name(cls, name):
        """Look up a kind by its YAML spelling, e.g. ``uint`` or ``unsigned_int``."""
        key = str(name).strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        return cls(key)


_LABELS = {
    ValueKind.BOOL: 'yes/no value',
    ValueKind.CHAR: 'single character',
    ValueKind.STRING: 'text',
    ValueKind.FLOAT: 'number',
    ValueKind.SIGNED_INT: 'integer',
    ValueKind.UNSIGNED_INT: 'non-negative integer',
}

_ALIASES = {
    'str': ValueKind.STRING,
    'signed_int': ValueKind.SIGNED_INT,
    'unsigned_int': ValueKind.UNSIGNED_INT,
    'boolean': ValueKind.BOOL,
}


@dataclass(frozen=True)
class Value:
    """A parsed value tagged with the kind of leaf that produced it."""
    kind: ValueKind
    data: Union[bool, str, float, int]

    def to_dict(self):
        return {'kind': self.kind.value, 'data': self.data}


def describe_kind(kind):
    return kind.label


def _parse_bool(raw):
    word = raw.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return None


def _parse_char(raw):
    stripped = raw.strip()
    if len(stripped) == 1:
        return stripped
    return None


def _parse_float(raw):
    text = raw.strip()
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        return None
    number = float(text)
    if math.isinf(number):
        return None
    return number


def _parse_int(raw, pattern, low, high):
    text = raw.strip()
    if not pattern.fullmatch(text):
        return None
    number = int(text, 10)
    if number < low or number > high:
        return None
    return number


def parse_value(kind, raw):
    """Convert one line of user input into a :class:`Value`.

    Raises:
        ValueParseError: when ``raw`` is not a valid value of ``kind``.
    """
    raw = raw.rstrip('\r\n')
    if kind is ValueKind.BOOL:
        data = _parse_bool(raw)
    elif kind is ValueKind.CHAR:
        data = _parse_char(raw)
    elif kind is ValueKind.STRING:
        data = raw if raw else None
    elif kind is ValueKind.FLOAT:
        data = _parse_float(raw)
    elif kind is ValueKind.SIGNED_INT:
        data = _parse_int(raw, _SIGNED_RE, INT_MIN, INT_MAX)
    elif kind is ValueKind.UNSIGNED_INT:
        data = _parse_int(raw, _UNSIGNED_RE, 0, UINT_MAX)
    else:
        raise TypeError(f"Unknown value kind: {kind!r}")

    if data is None:
        raise ValueParseError(kind, raw)
    return Value(kind, data)
