## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Literal, Placeholder, Segment
from .errors import FormatSyntaxError


# A `{` only opens a placeholder when a `}` follows it; otherwise it stays literal text,
# as does any stray `}`. Placeholders never nest.
GRAMMAR = r"""start: (TEXT | field)*
field: LBRACE ADDRESS? (COLON SPEC?)? RBRACE

// TOKENS
LBRACE: /\{(?=[^}]*\})/
RBRACE: "}"
COLON: ":"
ADDRESS: /[^:}]+/
SPEC: /[^}]+/
TEXT: /[^{]+/ | /\{(?![^}]*\})/
"""

_PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)


def _field_to_placeholder(tree: lark.Tree) -> Placeholder:
    tokens = {tok.type: tok for tok in tree.children if isinstance(tok, lark.Token)}
    address = tokens['ADDRESS'].value if 'ADDRESS' in tokens else ''
    spec = (tokens['SPEC'].value if 'SPEC' in tokens else '') if 'COLON' in tokens else None
    brace = tokens['LBRACE']
    raw = ''.join(tok.value for tok in tree.children)
    return Placeholder(raw=raw, address=address, spec=spec, line=brace.line, column=brace.column)


def scan(template: str) -> list[Segment]:
    """Split a template into literal text and placeholders, in order of appearance."""
    try:
        tree = _PARSER.parse(template)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedInput) as exc:
        def attr(k): return getattr(exc, k, None)
        raise FormatSyntaxError(f"Malformed template: {exc}", column=attr('column')) from None

    segments: list[Segment] = []
    for child in tree.children:
        if isinstance(child, lark.Token):
            # Adjacent text tokens (e.g. around a lone `{`) are merged into one literal.
            if segments and isinstance(segments[-1], Literal):
                segments[-1] = Literal(segments[-1].text + child.value)
            else:
                segments.append(Literal(child.value))
        else:
            segments.append(_field_to_placeholder(child))
    return segments


def placeholders(segments: list[Segment]) -> list[Placeholder]:
    return [s for s in segments if isinstance(s, Placeholder)]


def format_template_context(template: str, line: int | None, column: int | None, token_value: str = '') -> str:
    lines = template.splitlines() or ['']
    line = min(max(line or 1, 1), len(lines))
    start_line, end_line = max(0, line - 3), min(len(lines), line + 2)
    result = [f"\033[97m  Template, line {line}\033[0m"]

    for i in range(start_line, end_line):
        line_content = lines[i]
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if column and 0 < column <= len(line_content):
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1:column+len(token_value)-1]}\033[0m" +
                    line_content[column+len(token_value)-1:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'
