import io

from arcomcraft.game import Game, GameMode
from arcomcraft.menu import MENU_TEXT, show_menu


def _reader(*lines):
    pending = list(lines)

    def read_line():
        return pending.pop(0) if pending else ""

    read_line.pending = pending
    return read_line


def test_creative_then_exit():
    buffer = io.StringIO()
    game = Game(buffer)
    show_menu(game, _reader("1\n", "2\n"), buffer)
    output = buffer.getvalue()
    assert game.mode == GameMode.CREATIVE
    assert "Entrant al mode Creative+...\n" in output
    assert "Mode Creative+ activat!\n" in output
    assert output.count(MENU_TEXT) == 2


def test_exit_immediately():
    buffer = io.StringIO()
    game = Game(buffer)
    show_menu(game, _reader("2\n"), buffer)
    assert game.mode == GameMode.NORMAL
    assert buffer.getvalue() == MENU_TEXT


def test_invalid_choice_reprompts():
    buffer = io.StringIO()
    show_menu(Game(buffer), _reader("abc\n", "9\n", "2\n"), buffer)
    output = buffer.getvalue()
    assert output.count("Opcio invalida.\n") == 2
    assert output.count(MENU_TEXT) == 3


def test_three_is_invalid_but_ends_menu():
    buffer = io.StringIO()
    reader = _reader("3\n", "1\n")
    game = Game(buffer)
    show_menu(game, reader, buffer)
    assert buffer.getvalue() == MENU_TEXT + "Opcio invalida.\n"
    assert reader.pending == ["1\n"]
    assert game.mode == GameMode.NORMAL


def test_end_of_input_stops():
    buffer = io.StringIO()
    show_menu(Game(buffer), _reader(), buffer)
    assert buffer.getvalue() == MENU_TEXT


def test_leading_number_is_read():
    buffer = io.StringIO()
    game = Game(buffer)
    show_menu(game, _reader("  1abc\n", "2\n"), buffer)
    assert game.mode == GameMode.CREATIVE