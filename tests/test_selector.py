import io

import pytest

from shelfkeeper.date import clear_test_date, set_test_date
from shelfkeeper.publication import Publication
from shelfkeeper.selector import PublicationSelector


@pytest.fixture(autouse=True)
def fixed_today():
    set_test_date(2024, 12, 25)
    yield
    clear_test_date()


def make(ref, title, date="2024/05/01"):
    pub = Publication()
    pub.read(io.StringIO(f"{ref}\tS{ref:03d}\t{title}\t0\t{date}\n"))
    return pub


def run(selector, entry):
    out = io.StringIO()
    ref = selector.run(io.StringIO(entry), out)
    return ref, out.getvalue()


def test_empty_selector():
    selector = PublicationSelector("Pick")
    assert not selector
    assert len(selector) == 0


def test_add_and_reset():
    selector = PublicationSelector("Pick")
    selector << make(1, "Alpha") << make(2, "Beta")
    assert selector
    assert len(selector) == 2
    selector.reset()
    assert not selector


def test_title_limited():
    selector = PublicationSelector("T" * 100)
    assert len(selector.title) == 80


def test_sort_by_title_then_date():
    selector = PublicationSelector("Pick")
    selector.add(make(1, "Harry", "2024/06/01"))
    selector.add(make(2, "Alpha", "2024/01/01"))
    selector.add(make(3, "Harry", "2024/02/01"))
    selector.sort()
    ref, _ = run(selector, "1\n")
    assert ref == 2
    selector2 = PublicationSelector("Pick")
    for pub in (make(1, "Harry", "2024/06/01"), make(2, "Alpha", "2024/01/01"),
                make(3, "Harry", "2024/02/01")):
        selector2 << pub
    selector2.sort()
    refs = [run(selector2, f"{row}\n")[0] for row in (1, 2, 3)]
    assert refs == [2, 3, 1]


def test_select_row_and_display():
    selector = PublicationSelector("Select one", 15)
    first = make(10, "Alpha")
    selector << first << make(11, "Beta")
    ref, out = run(selector, "2\n")
    assert ref == 11
    assert out.startswith("Select one\n Row  |LocID |")
    assert "   1- " + format(first, "console") + "\n" in out
    assert "> X (to Exit)\n> Row Number(select publication)\n> " in out
    assert "> N (Next page)" not in out


def test_exit_returns_zero():
    selector = PublicationSelector("Pick")
    selector << make(5, "Alpha")
    assert run(selector, "x\n")[0] == 0


def test_invalid_entries_retry():
    selector = PublicationSelector("Pick")
    selector << make(5, "Alpha") << make(6, "Beta")
    ref, out = run(selector, "abc\n9\n3x\n1\n")
    assert ref == 5
    assert out.count("Invalid selection, retry") == 3


def test_paging():
    selector = PublicationSelector("Pick", 2)
    selector << make(1, "Alpha") << make(2, "Beta") << make(3, "Gamma")
    ref, out = run(selector, "p\nn\n3\n")
    assert ref == 3
    assert out.count("Invalid selection, retry") == 1
    assert "> N (Next page)" in out
    assert "> P (Previous Page)" in out
    assert out.count("Pick\n") == 2


def test_previous_page_then_select():
    selector = PublicationSelector("Pick", 2)
    selector << make(1, "Alpha") << make(2, "Beta") << make(3, "Gamma")
    ref, out = run(selector, "N\nP\n1\n")
    assert ref == 1
    assert out.count("Pick\n") == 3


def test_end_of_input():
    selector = PublicationSelector("Pick")
    selector << make(1, "Alpha")
    out = io.StringIO()
    with pytest.raises(EOFError):
        selector.run(io.StringIO(""), out)
    assert out.getvalue().startswith("Pick\n")