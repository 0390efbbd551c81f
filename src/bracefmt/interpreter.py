## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

from .types import Literal, Bound
from .errors import FormatError
from .library import CodeTable
from .formatting import stringify, show_step


def render_value(value: Any, spec: str | None, table: CodeTable) -> str:
    """Render one value through its specification; without one, the value is used verbatim."""
    if not spec:
        return stringify(value)

    code = spec[-1]
    if code.isascii() and code.isdigit():
        padding, code = spec, table.default_code(value)
    else:
        padding = spec[:-1]
    return table.get_renderer(code, spec=spec)(value, padding)


def interpret(linked: list[Literal | Bound], table: CodeTable, verbosity: int = 0, stats: dict | None = None) -> str:
    parts, step = [], 0
    for item in linked:
        if isinstance(item, Literal):
            parts.append(item.text)
            continue

        p = item.placeholder
        try:
            text = render_value(item.value, p.spec, table)
        except FormatError as exc:
            exc.fmt_token = exc.fmt_token or p.raw
            exc.line = exc.line or p.line
            exc.column = exc.column or p.column
            raise

        if verbosity > 0:
            show_step(step, p, text)
        parts.append(text)
        step += 1

    if stats is not None:
        stats['placeholders'] = stats.get('placeholders', 0) + step
    return ''.join(parts)
