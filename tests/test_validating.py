## bracefmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from bracefmt.validating import is_padding_ok, split_padding


@pytest.mark.parametrize("padding", ["", "5", "0", "12", "04", "+5", " 5", "00", "+12"])
def test_valid_paddings(padding):
    assert is_padding_ok(padding)


@pytest.mark.parametrize("padding", ["+", " ", "x", "x5", "5x", "-5", "+-5", "++5", "1.2", "٣"])
def test_invalid_paddings(padding):
    assert not is_padding_ok(padding)


def test_split_padding():
    assert split_padding("") == ("", 0)
    assert split_padding("5") == ("", 5)
    assert split_padding("0") == ("", 0)
    assert split_padding("05") == ("0", 5)
    assert split_padding("+12") == ("+", 12)
    assert split_padding(" 3") == (" ", 3)
    assert split_padding("00") == ("0", 0)
