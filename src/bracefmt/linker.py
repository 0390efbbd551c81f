## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from typing import Any
from collections.abc import Mapping

from .types import AddressMode, Literal, Placeholder, Bound, Segment
from .errors import FormatAddressError, FormatMissingArguments, FormatExtraArguments


def classify_address(address: str) -> AddressMode:
    if address == '': return AddressMode.ANONYMOUS
    if address.isascii() and address.isdigit(): return AddressMode.POSITIONAL
    return AddressMode.KEYED


def split_path(path: str) -> list[str]:
    """Turn `a.b[1]` or `a[b][1]` into `['a', 'b', '1']`; both spellings are equivalent."""
    return re.sub(r'[\[\]]+', '.', re.sub(r'\]$', '', path)).split('.')

def _lookup(obj: Any, key: str) -> tuple[bool, Any]:
    if isinstance(obj, Mapping):
        if key in obj: return True, obj[key]
        if key.isascii() and key.isdigit() and int(key) in obj: return True, obj[int(key)]
        return False, None
    if isinstance(obj, (list, tuple)):
        if key.isascii() and key.isdigit() and int(key) < len(obj): return True, obj[int(key)]
        return False, None
    # Plain objects expose their own instance attributes only, nothing inherited.
    if key in (attrs := getattr(obj, '__dict__', {})): return True, attrs[key]
    return False, None

def resolve_path(root: Any, path: str, *, placeholder: Placeholder | None = None) -> Any:
    obj = root
    for key in split_path(path):
        found, obj = _lookup(obj, key)
        if not found:
            raise FormatAddressError(f"Key/path '{path}' not in dict", **_where(placeholder))
    return obj


def _where(p: Placeholder | None) -> dict:
    return {"fmt_token": p.raw, "line": p.line, "column": p.column} if p is not None else {}


def determine_mode(fields: list[Placeholder]) -> AddressMode | None:
    """All placeholders of a template must share the addressing mode of the first one."""
    if not fields: return None
    mode = classify_address(fields[0].address)
    for p in fields[1:]:
        if (other := classify_address(p.address)) != mode:
            raise FormatAddressError(
                f"Cannot mix {mode.value} and {other.value} placeholders in one template, found `{p.raw}`.",
                **_where(p))
    return mode


def link(segments: list[Segment], args: tuple, kwargs: Mapping | None = None) -> list[Literal | Bound]:
    """Pair every placeholder with the argument it addresses; literal text passes through."""
    fields = [s for s in segments if isinstance(s, Placeholder)]
    mode = determine_mode(fields)

    if kwargs:
        if args:
            raise FormatAddressError("Cannot mix positional and keyword arguments in one call.")
        if mode not in (AddressMode.KEYED, None):
            raise FormatAddressError(f"Keyword arguments require keyed placeholders, found `{fields[0].raw}`.",
                                     **_where(fields[0]))
        args = (kwargs,)

    if mode is None:
        if args:
            raise FormatExtraArguments(f"Template has no placeholders but {len(args)} argument(s) were given.",
                                       placeholders=0, arguments=len(args))
        return list(segments)

    if mode == AddressMode.KEYED and (len(args) != 1 or not isinstance(args[0], Mapping)):
        raise FormatAddressError("Using keyword formatting, expected only one argument of type mapping.",
                                 **_where(fields[0]))

    if mode == AddressMode.ANONYMOUS and len(fields) != len(args):
        error_class = FormatMissingArguments if len(fields) > len(args) else FormatExtraArguments
        raise error_class(f"Number of placeholders and arguments differ -> placeholders {len(fields)}, arguments {len(args)}",
                          placeholders=len(fields), arguments=len(args))

    output, index = [], 0
    for segment in segments:
        if not isinstance(segment, Placeholder):
            output.append(segment)
            continue
        match mode:
            case AddressMode.ANONYMOUS:
                value = args[index]
                index += 1
            case AddressMode.POSITIONAL:
                if (pos := int(segment.address)) >= len(args):
                    raise FormatAddressError(f"Positional index {pos} out of range for {len(args)} argument(s).",
                                             **_where(segment))
                value = args[pos]
            case AddressMode.KEYED:
                value = resolve_path(args[0], segment.address, placeholder=segment)
        output.append(Bound(segment, value))
    return output
