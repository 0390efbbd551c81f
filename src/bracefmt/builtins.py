## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

from .library import CodeTable
from .renderers import render_string, render_char, render_integer, render_fixed, render_percentage


## TEXT
def code_s(x: Any, padding: str) -> str: return render_string(x, padding)
def code_c(x: Any, padding: str) -> str: return render_char(x, padding)
## INTEGERS
def code_d(x: Any, padding: str) -> str: return render_integer(x, padding, 10, 'd')
def code_o(x: Any, padding: str) -> str: return render_integer(x, padding, 8, 'o')
def code_x(x: Any, padding: str) -> str: return render_integer(x, padding, 16, 'x')
def code_X(x: Any, padding: str) -> str: return render_integer(x, padding, 16, 'X').upper()
def code_b(x: Any, padding: str) -> str: return render_integer(x, padding, 2, 'b')
## FIXED-POINT
def code_f(x: Any, padding: str) -> str: return render_fixed(x, padding)
def code_percent(x: Any, padding: str) -> str: return render_percentage(x, padding)


def get_code_name(py_name: str) -> str:
    """Map a renderer function name like `code_percent` to its format code `%`."""
    assert py_name.startswith('code_'), f"Renderer function `{py_name}` requires prefix `code_` by convention."
    return {'percent': '%'}.get(name := py_name[5:], name)


def load_builtin_codes() -> CodeTable:
    renderers = {get_code_name(k): fn for k, fn in globals().items() if k.startswith('code_') and callable(fn)}
    aliases = {'F': 'f'}

    table = CodeTable(renderers=renderers, aliases=aliases)
    table.ensure_consistent()
    return table


BUILTIN_CODES = load_builtin_codes()
