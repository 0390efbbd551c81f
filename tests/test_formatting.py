## bracefmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math

from bracefmt.formatting import stringify, number_text, write_without_ansi


def test_stringify_basic_values():
    assert stringify("text") == "text"
    assert stringify(None) == "null"
    assert stringify(True) == "true"
    assert stringify(0) == "0"
    assert stringify(-42) == "-42"
    assert stringify(1.5) == "1.5"


def test_stringify_containers():
    assert stringify([]) == ""
    assert stringify([1, 2, 3]) == "1,2,3"
    assert stringify((1, None, "x")) == "1,,x"
    assert stringify([[1, 2], [3]]) == "1,2,3"
    assert stringify({}) == "[object dict]"


def test_stringify_functions_and_objects():
    def greet(): pass
    assert "function" in stringify(greet)
    assert "function" in stringify(lambda: None)

    class Point:
        def __str__(self): return "P(1, 2)"
    assert stringify(Point()) == "P(1, 2)"


def test_number_text_spells_non_finite_values():
    assert number_text(math.inf) == "Infinity"
    assert number_text(-math.inf) == "-Infinity"
    assert number_text(math.nan) == "NaN"
    assert number_text(1e30) == "1e+30"
    assert number_text(7) == "7"


def test_write_without_ansi():
    written = []
    write = write_without_ansi(written.append)
    write("\033[97mhello\033[0m")
    assert written == ["hello"]
