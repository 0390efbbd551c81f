## bracefmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any
from collections.abc import Mapping

from .types import Segment, AddressMode
from .parser import scan, placeholders
from .linker import link, determine_mode
from .library import CodeTable, Renderer
from .builtins import BUILTIN_CODES
from .interpreter import interpret, render_value


class Formatter:
    """Minimal facade over scanning, linking and rendering of brace templates."""

    def __init__(self, codes: CodeTable | None = None):
        self.codes = codes or BUILTIN_CODES

    # Formatting ──────────────────────────────────────────────────────────────────────────────
    def format(self, template: str, /, *args: Any, **kwargs: Any) -> str:
        return self.run(template, args, kwargs)

    def run(self, template: str, args: tuple = (), kwargs: Mapping | None = None,
            verbosity: int = 0, stats: dict | None = None) -> str:
        if not isinstance(template, str):
            raise TypeError(f"Template must be a string, got `{type(template).__name__}`.")
        segments = scan(template)
        if not args and not kwargs and not placeholders(segments):
            return template
        return interpret(link(segments, tuple(args), kwargs), self.codes, verbosity=verbosity, stats=stats)

    def render(self, value: Any, spec: str | None = None) -> str:
        return render_value(value, spec, self.codes)

    # Extension ───────────────────────────────────────────────────────────────────────────────
    def extend(self, codes: Mapping[str, Renderer]) -> "Formatter":
        """New formatter with extra codes layered over this one's; this formatter is unchanged."""
        return Formatter(self.codes.with_overlay(codes))

    # Introspection ───────────────────────────────────────────────────────────────────────────
    def scan(self, template: str) -> list[Segment]:
        return scan(template)

    def addressing(self, template: str) -> AddressMode | None:
        return determine_mode(placeholders(scan(template)))

    def default_code(self, value: Any) -> str:
        return self.codes.default_code(value)

    def list_codes(self) -> list[str]:
        return self.codes.codes()
