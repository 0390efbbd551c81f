## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from types import MappingProxyType
from typing import Any, Callable
from collections import ChainMap
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from .types import ValueKind, describe
from .errors import FormatCodeError


Renderer = Callable[[Any, str], str]

DEFAULT_CODES: Mapping[ValueKind, str] = MappingProxyType({
    ValueKind.STRING_LIKE: 's',
    ValueKind.WHOLE_NUMBER: 'd',
    ValueKind.FRACTIONAL_NUMBER: 'f',
    ValueKind.OTHER: 's',
})


def is_code_name(x) -> bool:
    return isinstance(x, str) and len(x) == 1 and not x.isdigit() and x not in '{}:.'


@dataclass(frozen=True)
class CodeTable:
    """Read-only mapping from a format code to the renderer that produces its text."""
    renderers: Mapping[str, Renderer]
    aliases: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[ValueKind, str] = field(default_factory=lambda: DEFAULT_CODES)

    def __post_init__(self):
        object.__setattr__(self, 'renderers', MappingProxyType(self.renderers))
        object.__setattr__(self, 'aliases', MappingProxyType(self.aliases))

    def ensure_consistent(self) -> None:
        for code, fn in self.renderers.items():
            assert is_code_name(code), f"Format code `{code}` must be a single non-digit character."
            assert callable(fn)
        for alias, code in self.aliases.items():
            assert is_code_name(alias) and code in self.renderers, f"Alias `{alias}` must name a known format code."
        for code in self.defaults.values():
            assert code in self.renderers

    def default_code(self, value: Any) -> str:
        return self.defaults[describe(value)]

    def get_renderer(self, code: str, *, spec: str | None = None) -> Renderer:
        resolved = self.aliases.get(code, code)
        if (renderer := self.renderers.get(resolved)) is not None:
            return renderer
        raise FormatCodeError(f"Unknown format specification '{spec if spec is not None else code}'", fmt_code=code, fmt_spec=spec)

    def with_overlay(self, codes: Mapping[str, Renderer]) -> "CodeTable":
        """Create new table sharing all builtin renderers, with extra codes layered on top."""
        for code, fn in codes.items():
            if not is_code_name(code):
                raise FormatCodeError(f"Format code `{code}` must be a single non-digit character.", fmt_code=code)
            if not callable(fn):
                raise FormatCodeError(f"Renderer for format code `{code}` is not callable.", fmt_code=code)
        table = replace(self, renderers=ChainMap(dict(codes), self.renderers), aliases={a: c for a, c in self.aliases.items() if a not in codes})
        table.ensure_consistent()
        return table

    def __contains__(self, code: str) -> bool:
        return self.aliases.get(code, code) in self.renderers

    def codes(self) -> list[str]:
        return sorted(set(self.renderers) | set(self.aliases))
