## bracefmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math
import enum
from typing import Any
from numbers import Number, Real
from dataclasses import dataclass


class ValueKind(enum.Enum):
    STRING_LIKE = 'string'
    WHOLE_NUMBER = 'whole'
    FRACTIONAL_NUMBER = 'fractional'
    OTHER = 'other'


class AddressMode(enum.Enum):
    ANONYMOUS = 'anonymous'
    POSITIONAL = 'positional'
    KEYED = 'keyed'


def is_number(x: Any) -> bool:
    """Numbers in the formatting sense; booleans are excluded even though they subclass `int`."""
    return isinstance(x, Number) and not isinstance(x, bool)

def is_whole(x: Any) -> bool:
    if isinstance(x, bool) or not isinstance(x, Real): return False
    if isinstance(x, int): return True
    # Infinities count as whole so they render through the integer codes by default.
    return math.isinf(x) or (not math.isnan(x) and float(x).is_integer())

def describe(value: Any) -> ValueKind:
    if isinstance(value, (str, bool)): return ValueKind.STRING_LIKE
    if is_whole(value): return ValueKind.WHOLE_NUMBER
    if isinstance(value, Real): return ValueKind.FRACTIONAL_NUMBER
    return ValueKind.OTHER


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    raw: str                      # full token including braces, e.g. `{0:04x}`
    address: str                  # text before the first `:`
    spec: str | None              # text after the first `:`, None when absent
    line: int = 1
    column: int = 0               # 1-based column of `{` in its line


@dataclass(frozen=True)
class Bound:
    """Placeholder linked to the argument value it will render."""
    placeholder: Placeholder
    value: Any


Segment = Literal | Placeholder
