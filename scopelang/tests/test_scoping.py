"""
Tests for scoping rules in scopelang
"""
from scopelang.tests.utils import run_source


def test_inner_scope_shadows_and_restores(capsys):
    """
    Test that the outer value is visible again once the inner scope closes.
    """
    run_source("x = 1 scope { x = 2 print x } print x")
    assert capsys.readouterr().out.splitlines() == ['2', '1']


def test_outer_variables_visible_inside(capsys):
    run_source("g = 5 scope { scope { print g } }")
    assert capsys.readouterr().out.splitlines() == ['5']


def test_inner_variables_do_not_leak(capsys):
    run_source("scope { y = 4 print y } print y")
    assert capsys.readouterr().out.splitlines() == ['4', 'null']


def test_copy_from_outer_into_inner(capsys):
    """
    Test that copying an outer variable creates an inner binding only.
    """
    run_source(
        "x = 1\n"
        "scope {\n"
        "  y = x\n"
        "  x = 8\n"
        "  print y\n"
        "}\n"
        "print x\n"
        "print y\n"
    )
    assert capsys.readouterr().out.splitlines() == ['1', '1', 'null']


def test_all_frames_closed_after_run():
    interpreter = run_source("scope { scope { } }")
    assert not interpreter.memory.has_open_scope()
