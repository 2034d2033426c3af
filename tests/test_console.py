import io
from unittest import mock

import pytest

from treemenus.console import Console, render_menu


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out, clear_screen=False), out


def test_render_menu_with_quit():
    text = render_menu("X", ["a", "b"], True)
    assert text == (
        "MENU : X\n"
        "========\n"
        "[ 1 ] - a\n"
        "[ 2 ] - b\n"
        "[ 0 ] - Sair\n"
        "========\n"
        "Escolha uma opção: "
    )


def test_render_menu_with_back():
    text = render_menu("T", [], False)
    assert "[ 0 ] - Voltar" in text
    assert "Sair" not in text


def test_render_menu_separator_matches_header():
    lines = render_menu("Gerenciamento de Usuarios - AVL Tree", ["x"], True).split("\n")
    assert lines[0] == "MENU : Gerenciamento de Usuarios - AVL Tree"
    assert lines[1] == "=" * len(lines[0])
    assert lines[-2] == lines[1]


def test_render_menu_header_truncated():
    lines = render_menu("y" * 200, [], True).split("\n")
    assert len(lines[0]) == 99
    assert len(lines[1]) == 99


def test_read_word_skips_blank_lines():
    console, out = make_console("\n   \n  hello world\nnext\n")
    assert console.read_word("Nome: ") == "hello"
    assert out.getvalue() == "Nome: "
    assert console.read_line() == "next"


def test_read_int_parses_leading_number():
    console, _ = make_console("  42abc\n-7\n")
    assert console.read_int() == 42
    assert console.read_int() == -7


def test_read_int_rejects_text():
    console, _ = make_console("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_read_line_at_end_raises():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_line()


def test_wait_enter_consumes_one_line():
    console, out = make_console("\nafter\n")
    console.wait_enter()
    assert "Pressione Enter para continuar..." in out.getvalue()
    assert console.read_line() == "after"


def test_wait_enter_at_end_of_input():
    console, out = make_console("")
    console.wait_enter()
    assert out.getvalue() == "\nPressione Enter para continuar...\n"


def test_menu_returns_choice():
    console, out = make_console("3\n")
    assert console.menu("T", ["a"], True) == 3
    assert out.getvalue() == render_menu("T", ["a"], True)


def test_menu_invalid_choice():
    console, _ = make_console("zzz\n")
    assert console.menu("T", ["a"], True) == -1


def test_clear_disabled_runs_nothing():
    console, out = make_console()
    with mock.patch("subprocess.run") as run:
        console.clear()
    assert run.call_count == 0
    assert out.getvalue() == ""


def test_clear_enabled_runs_command():
    out = io.StringIO()
    console = Console(io.StringIO(), out, clear_screen=True)
    with mock.patch("subprocess.run") as run:
        console.clear()
    assert run.call_count == 1
    called_with = repr(run.call_args)
    assert "clear" in called_with or "cls" in called_with
    assert out.getvalue() == ""