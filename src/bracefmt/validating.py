## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# bracefmt — Python-inspired brace templates with a small format-specification language.
#

FLAG_CHARS = ('0', ' ', '+')


def is_padding_ok(padding: str) -> bool:
    """Check the `[flag][width]` part of a specification, as in `04`, `+5`, ` 3` or `12`.

    A single character must be a digit; longer strings may lead with one flag
    character, and everything else must be digits.
    """
    if padding == '': return True
    if len(padding) > 1 and padding[0] in FLAG_CHARS:
        padding = padding[1:]
    return padding.isascii() and padding.isdigit()

def split_padding(padding: str) -> tuple[str, int]:
    """Split an already validated padding into its flag character (or '') and total width."""
    flag = padding[0] if len(padding) > 1 and padding[0] in FLAG_CHARS else ''
    digits = padding[len(flag):]
    return flag, int(digits) if digits else 0
