## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math
import decimal
from typing import Any
from numbers import Real

from .types import is_number
from .errors import FormatSyntaxError, FormatTypeError, FormatValueError, FormatSignError
from .formatting import pad_left, pad_right, number_text, stringify
from .validating import is_padding_ok, split_padding


DEFAULT_FIXEDPOINT_DIGITS = 6

# Above this magnitude, fixed-point text switches to the exponential form.
FIXEDPOINT_LIMIT = 1e21

BASE_DIGITS = {2: 'b', 8: 'o', 10: 'd', 16: 'x'}


def _check_padding(padding: str, code: str | None):
    if not is_padding_ok(padding):
        detail = f" for '{code}' format code" if code else ""
        raise FormatSyntaxError(f"Invalid specification '{padding}'{detail}", fmt_code=code, fmt_spec=padding)

def _expect_integer(x: Any, code: str | None) -> int:
    if isinstance(x, bool): return int(x)
    if isinstance(x, Real) and is_number(x) and (isinstance(x, int) or float(x).is_integer()):
        return int(x)
    detail = f" for code '{code}'" if code else ""
    raise FormatTypeError(f"Got '{stringify(x)}' of type '{type(x).__name__}' but expected an integer{detail}", fmt_code=code)

def _apply_sign(digits: str, negative: bool, flag: str, width: int, padding: str) -> str:
    fill = '0' if flag == '0' else ' '
    if negative:
        if flag == '+':
            raise FormatSignError(f"Invalid specification '{padding}' for negative number", fmt_spec=padding)
        if fill == '0':
            return '-' + pad_left(digits, width - 1, fill)
        return pad_left('-' + digits, width, fill)
    if flag == '+':
        digits = '+' + digits
    return pad_left(digits, width, fill)


## INTEGERS
def render_integer(x: Any, padding: str, base: int, code: str | None = None) -> str:
    _check_padding(padding, code)
    flag, width = split_padding(padding)

    # Non-finite values keep their names, only the width applies to them.
    if isinstance(x, float) and not math.isfinite(x):
        return pad_left(number_text(x), width)

    i = _expect_integer(x, code)
    digits = format(abs(i), BASE_DIGITS[base])
    return _apply_sign(digits, i < 0, flag, width, padding)


## FIXED-POINT
def parse_fixed_padding(padding: str) -> tuple[str, int, int]:
    """Split `[flag][width][.precision]` into flag, total width and fractional digits."""
    str_int, _, str_fract = padding.partition('.')
    if not is_padding_ok(str_int) or not (str_fract == '' or (str_fract.isascii() and str_fract.isdigit())):
        raise FormatSyntaxError(f"Invalid specification '{padding}'", fmt_spec=padding)
    flag, width = split_padding(str_int)
    return flag, width, int(str_fract) if str_fract else DEFAULT_FIXEDPOINT_DIGITS

def fixed_digits(x: float, digits: int) -> str:
    """Exact decimal expansion of `x` rounded to `digits` places, ties away from zero."""
    exact = decimal.Decimal(x)
    # Magnitudes stay below FIXEDPOINT_LIMIT, so 22 integer digits always fit.
    context = decimal.Context(prec=22 + digits, rounding=decimal.ROUND_HALF_UP)
    return f"{exact.quantize(decimal.Decimal(1).scaleb(-digits), context=context):f}"

def render_fixed(f: Any, padding: str, percentage: bool = False) -> str:
    flag, width, digits = parse_fixed_padding(padding)
    if not (is_number(f) and isinstance(f, Real)):
        raise FormatTypeError(f"Can only format numbers as fixed-point, got '{stringify(f)}' of type '{type(f).__name__}'")

    try:
        f = float(f)
    except OverflowError:
        f = math.inf if f > 0 else -math.inf
    if not math.isfinite(f) or abs(f) >= FIXEDPOINT_LIMIT:
        return number_text(f)

    text = fixed_digits(abs(f), digits)
    if flag == ' ' and f >= 0:
        text = ' ' + text
    if percentage:
        width -= 1
    return _apply_sign(text, f < 0, flag, width, padding)

def render_percentage(p: Any, padding: str) -> str:
    if not is_number(p):
        raise FormatTypeError(f"Can only format numbers with '%' code, got '{stringify(p)}' of type '{type(p).__name__}'", fmt_code='%')
    return render_fixed(p * 100, padding, percentage=True) + '%'


## TEXT
def render_string(s: Any, padding: str) -> str:
    _check_padding(padding, 's')
    _, width = split_padding(padding)
    return pad_right(stringify(s), width)

def render_char(c: Any, padding: str) -> str:
    _check_padding(padding, 'c')
    if isinstance(c, bool):
        raise FormatTypeError(f"Got '{stringify(c)}' of type 'bool' but expected an integer for code 'c'", fmt_code='c')
    point = _expect_integer(c, 'c')
    if not 0 <= point <= 0x10FFFF:
        raise FormatValueError(f"Character code {point} out of range for code 'c'", fmt_code='c')
    _, width = split_padding(padding)
    return pad_left(chr(point), width)
