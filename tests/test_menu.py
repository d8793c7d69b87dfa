import io

import pytest

from shelfkeeper.menu import Menu


@pytest.fixture
def lunch():
    m = Menu("Lunch Menu")
    m << "Omelet" << "Tuna Sandwich" << "California Roll"
    return m


def test_empty_menu_is_false():
    m = Menu()
    assert not m
    assert len(m) == 0
    assert str(m) == ""
    assert m[0] is None


def test_filled_menu(lunch):
    assert lunch
    assert len(lunch) == 3
    assert str(lunch) == "Lunch Menu"


def test_indexing_wraps(lunch):
    assert lunch[0] == "Omelet"
    assert lunch[2] == "California Roll"
    assert lunch[3] == lunch[0]
    assert lunch[7] == lunch[1]
    assert lunch[-1] == lunch[2]
    assert lunch[-4] == lunch[2]


def test_item_limit():
    m = Menu("Big")
    for i in range(25):
        m.add(f"item {i}")
    assert len(m) == 20
    assert m[19] == "item 19"


def test_add_returns_menu():
    m = Menu("T")
    assert m.add("a") is m


def test_display(lunch):
    out = io.StringIO()
    lunch.display(out)
    assert out.getvalue() == (
        "Lunch Menu\n"
        " 1- Omelet\n"
        " 2- Tuna Sandwich\n"
        " 3- California Roll\n"
        " 0- Exit\n"
        "> "
    )


def test_display_without_title():
    out = io.StringIO()
    Menu().display(out)
    assert out.getvalue() == "\n 0- Exit\n> "


def test_run_valid_choice(lunch):
    out = io.StringIO()
    assert lunch.run(io.StringIO("2\n"), out) == 2
    assert "Invalid Selection" not in out.getvalue()


def test_run_exit(lunch):
    assert lunch.run(io.StringIO("0\n"), io.StringIO()) == 0


def test_run_retries_invalid_entries(lunch):
    out = io.StringIO()
    assert lunch.run(io.StringIO("4\n-1\nabc\n3\n"), out) == 3
    assert out.getvalue().count("Invalid Selection, try again: ") == 3


def test_run_leaves_rest_of_input(lunch):
    stream = io.StringIO("1\nSeneca Weekly\n")
    assert lunch.run(stream, io.StringIO()) == 1
    assert stream.read() == "\nSeneca Weekly\n"


def test_run_eof_raises(lunch):
    with pytest.raises(EOFError):
        lunch.run(io.StringIO("9\n"), io.StringIO())


def test_run_eof_after_garbage_raises(lunch):
    with pytest.raises(EOFError):
        lunch.run(io.StringIO("abc"), io.StringIO())