## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import math
from typing import Any
from collections.abc import Mapping

from .types import Placeholder


def pad_left(text: str, width: int, fill: str = ' ') -> str:
    return text.rjust(width, fill)

def pad_right(text: str, width: int, fill: str = ' ') -> str:
    return text.ljust(width, fill)


def number_text(x: float | int) -> str:
    """Natural text of a number, spelling non-finite floats out in full."""
    if isinstance(x, float):
        if math.isnan(x): return 'NaN'
        if math.isinf(x): return 'Infinity' if x > 0 else '-Infinity'
        return repr(x)
    return str(x)

def stringify(it: Any) -> str:
    """Default text of a value, used for placeholders without a specification and by the `s` code."""
    if isinstance(it, str): return it
    if isinstance(it, bool): return str(it).lower()
    if it is None: return 'null'
    if isinstance(it, (int, float)): return number_text(it)
    if isinstance(it, (list, tuple)):
        return ','.join('' if i is None else stringify(i) for i in it)
    if isinstance(it, Mapping): return f'[object {type(it).__name__}]'
    if callable(it) and hasattr(it, '__name__') and not isinstance(it, type):
        return f'function {it.__name__}'
    return str(it)


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def show_step(step: int, placeholder: Placeholder, rendered: str, file=None):
    print(f"\033[90m{step:>3} :\033[0m  {placeholder.raw} \033[36m <=> \033[0m {rendered!r}", file=file)
