## bracefmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import AddressMode, ValueKind, describe
from .errors import *
from .runtime import Formatter

_FORMATTER = Formatter()

def __getattr__(name):
    return getattr(_FORMATTER, name)
