"""
Tests for assignment and print in scopelang.
"""
import pytest

from scopelang.interpreter import parse_integer
from scopelang.tests.utils import run_source


@pytest.mark.parametrize("literal", ["0", "42", "-7", "2147483647", "-2147483648", "007"])
def test_integer_literal_round_trips_through_print(literal, capsys):
    run_source(f"x = {literal}\nprint x\n")
    assert capsys.readouterr().out.splitlines() == [str(int(literal))]


def test_print_unset_outputs_null(capsys):
    run_source("print never_written")
    assert capsys.readouterr().out.splitlines() == ['null']


def test_copy_is_by_value(capsys):
    """
    Test that a copied value does not follow later writes to the source.
    """
    run_source("x = 1 y = x x = 2 print y")
    assert capsys.readouterr().out.splitlines() == ['1']


def test_copy_from_unset_is_a_noop(capsys):
    run_source("y = z print y")
    assert capsys.readouterr().out.splitlines() == ['null']


def test_copy_from_unset_keeps_existing_value(capsys):
    run_source("y = 3 y = z print y")
    assert capsys.readouterr().out.splitlines() == ['3']


def test_out_of_range_literal_is_read_as_variable(capsys):
    """
    Test that a literal beyond the 32-bit range is treated as a name.
    """
    run_source("2147483648 = 9 y = 2147483648 print y")
    assert capsys.readouterr().out.splitlines() == ['9']


def test_keyword_on_right_hand_side_is_a_name(capsys):
    run_source("x = print print x")
    assert capsys.readouterr().out.splitlines() == ['null']


@pytest.mark.parametrize("text, expected", [
    ("15", 15),
    ("-15", -15),
    ("+15", None),
    ("1_000", None),
    ("-", None),
    ("x1", None),
    ("٣", None),
    ("-2147483649", None),
])
def test_parse_integer(text, expected):
    assert parse_integer(text) == expected
