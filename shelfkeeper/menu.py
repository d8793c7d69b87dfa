"""Numbered console menus."""

from __future__ import annotations

import sys
from typing import TextIO

from .utils import _read_int, _skip_line

MAX_MENU_ITEMS = 20

_INVALID = "Invalid Selection, try again: "


class Menu:
    """A titled list of up to twenty numbered options plus "0- Exit"."""

    def __init__(self, title: str | None = None) -> None:
        self.title = title
        self._items: list[str | None] = []

    def add(self, item: str | None) -> "Menu":
        """Append an option; options past the limit are ignored."""
        if len(self._items) < MAX_MENU_ITEMS:
            self._items.append(item)
        return self

    def __lshift__(self, item: str | None) -> "Menu":
        return self.add(item)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str | None:
        """The option at ``index``, wrapping around in both directions."""
        if not self._items:
            return None
        return self._items[index % len(self._items)]

    def __str__(self) -> str:
        return self.title or ""

    def display(self, out: TextIO | None = None) -> None:
        """Write the title, the numbered options and the prompt."""
        if out is None:
            out = sys.stdout
        out.write(f"{self}\n")
        for number, item in enumerate(self._items, start=1):
            out.write(f"{number:>2}- {item or ''}\n")
        out.write(" 0- Exit\n> ")

    def run(self, instream: TextIO | None = None,
            outstream: TextIO | None = None) -> int:
        """Show the menu and read a selection between 0 and the option count.

        Invalid entries are reported and retried. Raises EOFError if the
        input ends before a valid selection.
        """
        if instream is None:
            instream = sys.stdin
        if outstream is None:
            outstream = sys.stdout
        self.display(outstream)
        while True:
            choice = _read_int(instream)
            if choice is None:
                outstream.write(_INVALID)
                if not _skip_line(instream):
                    raise EOFError("end of input while reading a selection")
            elif not 0 <= choice <= len(self._items):
                outstream.write(_INVALID)
            else:
                return choice