import io

import pytest

from minesweep.cli import choose_grid_size, main, parse_grid_size

RETRY = "Please, choose a valid number (9-16):"
INTRO_START = "Introduce a number (9-16) to choose grid size."


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12\n", 12),
        ("\n", 9),
        (" 13xyz\n", 13),
        ("+10\n", 10),
        ("abc\n", 0),
        ("-4\n", -4),
    ],
)
def test_parse_grid_size(text, expected):
    assert parse_grid_size(text) == expected


def test_argument_in_range_needs_no_input():
    out = io.StringIO()
    assert choose_grid_size("12", io.StringIO(""), out) == 12
    assert out.getvalue() == ""


@pytest.mark.parametrize("arg", ["9", "16"])
def test_argument_bounds_accepted(arg):
    assert choose_grid_size(arg, io.StringIO(""), io.StringIO()) == int(arg)


def test_bad_argument_asks_again():
    out = io.StringIO()
    assert choose_grid_size("20", io.StringIO("10\n"), out) == 10
    assert out.getvalue().count(RETRY) == 1


def test_bad_argument_then_end_of_input():
    with pytest.raises(EOFError):
        choose_grid_size("20", io.StringIO(""), io.StringIO())


def test_bad_argument_then_negative_number():
    with pytest.raises(ValueError):
        choose_grid_size("3", io.StringIO("-5\n"), io.StringIO())


def test_bad_argument_then_blank_line_gives_default():
    assert choose_grid_size("8", io.StringIO("\n"), io.StringIO()) == 9


def test_no_argument_blank_line_gives_default():
    out = io.StringIO()
    assert choose_grid_size(None, io.StringIO("\n"), out) == 9
    assert out.getvalue().startswith(INTRO_START)


def test_no_argument_retries_until_valid():
    out = io.StringIO()
    assert choose_grid_size(None, io.StringIO("30\n5\n11\n"), out) == 11
    assert out.getvalue().count(RETRY) == 2


def test_no_argument_end_of_input():
    with pytest.raises(EOFError):
        choose_grid_size(None, io.StringIO("30\n"), io.StringIO())


def test_main_fails_without_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert INTRO_START in capsys.readouterr().out


def test_main_fails_on_bad_argument_and_no_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["42"]) == 1
    assert RETRY in capsys.readouterr().out


def test_main_fails_on_negative_reply(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("-2\n"))
    assert main(["1"]) == 1