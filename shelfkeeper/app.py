"""The interactive library application and its command-line entry point."""

from __future__ import annotations

import argparse
import io
import shutil
import sys
from pathlib import Path
from typing import TextIO

from .book import Book
from .date import Date, clear_test_date, set_test_date
from .limits import LIBRARY_CAPACITY, MAX_LOAN_DAYS
from .menu import Menu
from .publication import Publication, write_item
from .selector import PublicationSelector
from .utils import _read_int, _skip_line

APP_NAME = "Seneca Library Application"
PENALTY_CENTS_PER_DAY = 50
MIN_MEMBER_ID = 10000
MAX_MEMBER_ID = 99999

_FAREWELL = f"\n-------------------------------------------\nThanks for using {APP_NAME}\n"


class _Search:
    """Which publications a search offers for selection."""

    ALL = 1
    ON_LOAN = 2
    AVAILABLE = 3


class LibApp:
    """Loads a publication data file, lets the user edit it, and saves it back."""

    def __init__(self, filename: str | Path, instream: TextIO | None = None,
                 outstream: TextIO | None = None) -> None:
        self.filename = Path(filename)
        self._in = sys.stdin if instream is None else instream
        self._out = sys.stdout if outstream is None else outstream
        self._pubs: list[Publication] = []
        self._last_ref = 0
        self.changed = False
        self._main_menu = (Menu(APP_NAME) << "Add New Publication" << "Remove Publication"
                           << "Checkout publication from library"
                           << "Return publication to library")
        self._exit_menu = (Menu("Changes have been made to the data, what would you like to do?")
                           << "Save changes and exit" << "Cancel and go back to the main menu")
        self._type_menu = Menu("Choose the type of publication:") << "Book" << "Publication"
        self._load()

    def __len__(self) -> int:
        return len(self._pubs)

    def __iter__(self):
        return iter(self._pubs)

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _show(self, pub: Publication) -> None:
        write_item(self._out, pub)
        self._write("\n")

    def _read_number(self) -> int:
        """Read an integer entry; a non-numeric entry counts as 0."""
        value = _read_int(self._in)
        return 0 if value is None else value

    def _confirm(self, message: str) -> bool:
        if (Menu(message) << "Yes").run(self._in, self._out) == 1:
            return True
        self._write("\n")
        return False

    def _load(self) -> None:
        try:
            handle = self.filename.open(encoding="utf-8")
        except OSError:
            print(f"Failed to open file: {self.filename}", file=sys.stderr)
            return
        self._write("Loading Data\n")
        with handle:
            for line in handle:
                record = line.lstrip()
                if not record:
                    continue
                if len(self._pubs) >= LIBRARY_CAPACITY:
                    print("Library capacity exceeded", file=sys.stderr)
                    break
                kind = record[0]
                if kind == "P":
                    pub: Publication = Publication()
                elif kind == "B":
                    pub = Book()
                else:
                    print(f"Invalid publication type: {kind}", file=sys.stderr)
                    continue
                try:
                    pub.read(io.StringIO(record[2:]))
                except ValueError:
                    break
                self._pubs.append(pub)
                self._last_ref = pub.lib_ref

    def _save(self) -> None:
        self._write("Saving Data\n")
        try:
            handle = self.filename.open("w", encoding="utf-8")
        except OSError:
            print(f"Failed to open file for writing: {self.filename}", file=sys.stderr)
            return
        with handle:
            for pub in self._pubs:
                if pub.lib_ref != 0:
                    write_item(handle, pub)
                    handle.write("\n")
        self.changed = False

    def _search(self, mode: int) -> int:
        """Let the user pick a matching publication; return its reference or 0."""
        kind = self._type_menu.run(self._in, self._out)
        self._in.read(1)
        if kind == 0:
            self._write("Aborted!\n\n")
            return 0
        self._write("Publication Title: ")
        text = self._in.readline().rstrip("\n")
        wanted = "B" if kind == 1 else "P"
        if mode == _Search.ALL:
            accept = lambda pub: True  # noqa: E731
        elif mode == _Search.ON_LOAN:
            accept = Publication.on_loan
        elif mode == _Search.AVAILABLE:
            accept = lambda pub: not pub.on_loan()  # noqa: E731
        else:
            raise ValueError(f"invalid search mode {mode}")
        selector = PublicationSelector("Select one of the following found matches:", 15)
        for pub in self._pubs:
            if pub.type_code() == wanted and pub.contains_title(text) and accept(pub):
                selector << pub
        if not selector:
            self._write("No matches found!\n\n")
            return 0
        selector.sort()
        ref = selector.run(self._in, self._out)
        if ref > 0:
            return ref
        self._write("Aborted!\n\n")
        return 0

    def get_publication(self, lib_ref: int) -> Publication | None:
        """The publication with library reference ``lib_ref``, if any."""
        return next((pub for pub in self._pubs if pub.lib_ref == lib_ref), None)

    def _return_publication(self) -> None:
        self._write("Return publication to the library\n")
        ref = self._search(_Search.ON_LOAN)
        if not ref:
            return
        pub = self.get_publication(ref)
        if pub is None:
            self._write("Publication not found!\n")
            return
        self._show(pub)
        if self._confirm("Return Publication?"):
            late = (Date() - pub.checkout_date()) - MAX_LOAN_DAYS
            if late > 0:
                penalty = late * PENALTY_CENTS_PER_DAY / 100
                self._write(f"Please pay ${penalty:.2f} penalty for being {late} days late!\n")
            pub.set_member(0)
            self.changed = True
            self._write("Publication returned\n\n")

    def _new_publication(self) -> None:
        if len(self._pubs) >= LIBRARY_CAPACITY:
            self._write("Library is at its maximum capacity!\n\n")
            return
        self._write("Adding new publication to the library\n")
        kind = self._type_menu.run(self._in, self._out)
        if kind == 1:
            pub: Publication = Book()
        elif kind == 2:
            pub = Publication()
        else:
            self._write("Aborted!\n\n")
            return
        _skip_line(self._in)
        try:
            pub.read(self._in)
        except ValueError:
            self._write("Aborted!\n")
            return
        self._write("Add this publication to the library?\n 1- Yes\n 0- Exit\n> ")
        answer = self._read_number()
        _skip_line(self._in)
        if answer != 1:
            self._write("Aborted!\n")
            return
        if pub:
            self._last_ref += 1
            pub.lib_ref = self._last_ref
            self._pubs.append(pub)
            self.changed = True
            self._write("Publication added\n\n")
        else:
            self._write("Failed to add publication!\n")

    def _remove_publication(self) -> None:
        self._write("Removing publication from the library\n")
        ref = self._search(_Search.ALL)
        if not ref:
            return
        pub = self.get_publication(ref)
        if pub is None:
            self._write("Publication not found!\n")
            return
        self._show(pub)
        self._write("Remove this publication from the library?\n 1- Yes\n 0- Exit\n> ")
        answer = self._read_number()
        self._in.read(1)
        if answer == 1:
            self._pubs.remove(pub)
            self.changed = True
            self._write("Publication removed\n\n")
        else:
            self._write("Removal cancelled\n")

    def _read_member_id(self) -> int:
        self._write("Enter Membership number: ")
        while True:
            member = _read_int(self._in)
            if member is None:
                if not _skip_line(self._in):
                    raise EOFError("end of input while reading a membership number")
            elif MIN_MEMBER_ID <= member <= MAX_MEMBER_ID:
                return member
            self._write("Invalid membership number, try again: ")

    def _check_out(self) -> None:
        self._write("Checkout publication from the library\n")
        ref = self._search(_Search.AVAILABLE)
        if not ref:
            return
        pub = self.get_publication(ref)
        if pub is None:
            self._write("Publication not found!\n")
            return
        self._show(pub)
        if self._confirm("Check out publication?"):
            pub.set_member(self._read_member_id())
            self.changed = True
            self._write("Publication checked out\n\n")

    def run(self) -> int:
        """Run the main menu until the user exits; returns 0."""
        actions = {
            1: self._new_publication,
            2: self._remove_publication,
            3: self._check_out,
            4: self._return_publication,
        }
        while True:
            choice = self._main_menu.run(self._in, self._out)
            if choice in actions:
                actions[choice]()
                continue
            if self.changed:
                exit_choice = self._exit_menu.run(self._in, self._out)
                if exit_choice == 1:
                    self._save()
                elif exit_choice == 2:
                    self._write("\n")
                    continue
                else:
                    self._confirm("This will discard all the changes are you sure?")
            self._write(_FAREWELL)
            return 0


def _run_with_sample(filename: str) -> None:
    """Restore ``filename`` from its "orig" copy, run the app with a fixed date, and show the result."""
    original = Path("orig" + filename)
    if original.exists():
        shutil.copyfile(original, filename)
    set_test_date(2024, 8, 13)
    try:
        LibApp(filename).run()
    finally:
        clear_test_date()
    sys.stdout.write(f"Content of {filename}\n=========>\n")
    path = Path(filename)
    if path.exists():
        sys.stdout.write(path.read_text(encoding="utf-8"))
    sys.stdout.write("<=========\n")


def main(argv: list[str] | None = None) -> int:
    """Run the library application on a data file, or choose a sample file."""
    parser = argparse.ArgumentParser(prog="shelfkeeper", description="Library publication manager")
    parser.add_argument("datafile", nargs="?", help="publication data file to open")
    args = parser.parse_args(argv)
    if args.datafile:
        return LibApp(args.datafile).run()
    menu = Menu("Select Data File") << "LibRecsSmall.txt" << "LibRecs.txt"
    choice = menu.run()
    if choice == 1:
        print("Test started using small data: ")
        _run_with_sample("LibRecsSmall.txt")
    elif choice == 2:
        print("Test started using big data: ")
        _run_with_sample("LibRecs.txt")
    else:
        print("Aborted by user! ")
    return 0