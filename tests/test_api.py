## bracefmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math

import pytest

import bracefmt.api as F
from bracefmt.errors import (FormatError, FormatAddressError, FormatArityError, FormatMissingArguments,
                             FormatExtraArguments, FormatSignError, FormatTypeError, FormatSyntaxError, FormatCodeError)


def test_template_without_placeholders_is_unchanged():
    assert F.format("Hello") == "Hello"
    assert F.format("") == ""
    assert F.format("a } b { c") == "a } b { c"


def test_anonymous_placeholders():
    assert F.format("{} {}", "a", "b") == "a b"
    assert F.format("Hello, {}!", "world") == "Hello, world!"
    assert F.format("Hello, {} {} {}!", "to", "the", "world") == "Hello, to the world!"


def test_anonymous_arity_mismatch_both_directions():
    with pytest.raises(FormatMissingArguments) as exc:
        F.format("{}{}{}", "x")
    assert (exc.value.placeholders, exc.value.arguments) == (3, 1)
    with pytest.raises(FormatExtraArguments) as exc:
        F.format("{}", "a", "b", "c")
    assert (exc.value.placeholders, exc.value.arguments) == (1, 3)
    with pytest.raises(FormatArityError):
        F.format("{} {}", "a")


def test_positional_repetition():
    assert F.format("{0},{0},{1}", "x", "y") == "x,x,y"
    assert F.format("Sommartider, {1}, {0}, sommartider!", "da", "hej") == "Sommartider, hej, da, sommartider!"


def test_mixed_addressing_is_rejected():
    with pytest.raises(FormatAddressError):
        F.format("{0} {}", "a", "b")
    with pytest.raises(FormatAddressError):
        F.format("{1}, {}", "hej", "hello")


def test_positional_index_out_of_range():
    with pytest.raises(FormatAddressError):
        F.format("{0} {2}", "a", "b")


def test_integer_codes():
    assert F.format("{:04X}", 255) == "00FF"
    assert F.format("{:+5x}", 254) == "  +fe"
    assert F.format("{:5x}", -254) == "  -fe"
    assert F.format("{:05x}", -254) == "-00fe"
    assert F.format("{:+2x}", 65535) == "+ffff"
    assert F.format("{:o}", 16) == "20"
    assert F.format("{:08b}", 3) == "00000011"
    assert F.format("{:5d}", True) == "    1"


def test_integer_code_errors():
    with pytest.raises(FormatSignError):
        F.format("{:+5x}", -254)
    with pytest.raises(FormatTypeError):
        F.format("{:x}", 15.2)
    with pytest.raises(FormatSyntaxError):
        F.format("{:x5x}", 4)
    with pytest.raises(FormatCodeError):
        F.format("{:n}", 15.2)


def test_fixed_point_and_percentage():
    assert F.format("{:.2f}", 1.232) == "1.23"
    assert F.format("{:10.4f}", -1.232) == "   -1.2320"
    assert F.format("{:8.1%}", 12) == " 1200.0%"
    assert F.format("{: 1.4f}", math.inf) == "Infinity"
    assert F.format("{:.2F}", 2.5) == "2.50"
    assert F.format("{:.1f}", 1.25) == "1.3"
    assert F.format("{:.0f}", 2.5) == "3"
    assert F.format("{:.0%}", 0.125) == "13%"


def test_default_code_selection():
    assert F.format("{:4}", 33) == "  33"
    assert F.format("{:4}", "33") == "33  "
    assert F.format("{:5}", 1.23) == "1.230000"
    assert F.format("{:5}", True) == "true "
    assert F.format("{:5}", False) == "false"


def test_keyed_placeholders():
    assert F.format("{b}-{a}-{b}", {'a': 1, 'b': 2}) == "2-1-2"
    assert F.format("{a.x}", {'a': {'x': 2}}) == "2"
    assert F.format("{a[x]}", {'a': {'x': 2}}) == "2"
    assert F.format("{a.b[1]}", {'a': {'b': [1, 2, 3]}}) == "2"
    assert F.format("{a.b.1}", {'a': {'b': [1, 2, 3]}}) == "2"


def test_keyed_placeholders_from_keyword_arguments():
    assert F.format("{name}:{n:03d}", name="x", n=7) == "x:007"


def test_keyed_placeholders_require_one_mapping():
    with pytest.raises(FormatAddressError):
        F.format("{a}", {'a': 1}, {'a': 2})
    with pytest.raises(FormatAddressError):
        F.format("{a}", 1)
    with pytest.raises(FormatAddressError):
        F.format("{a.y}", {'a': {'x': 2}})


def test_substituted_text_is_never_rescanned():
    assert F.format("{}, {}!", "Hello, {}", "world") == "Hello, {}, world!"
    assert F.format("{1}{1}{0}", "{2}", "{1}") == "{1}{1}{2}"
    assert F.format("{1}{0}", "{0}{1}", "{0}{1}") == "{0}{1}{0}{1}"
    assert F.format("{a}{b}", {'a': "{b}", 'b': "c"}) == "{b}c"


def test_errors_share_base_class():
    with pytest.raises(FormatError):
        F.format("{:q}", 1)
    with pytest.raises(ValueError):
        F.format("{:q}", 1)


def test_module_helpers():
    assert F.default_code(1.5) == 'f'
    assert '%' in F.list_codes()
    assert F.addressing("{a} {b}") == F.AddressMode.KEYED
