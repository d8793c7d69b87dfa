"""Paged console selection among publications."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .publication import Publication

_TITLE_LIMIT = 80
_HEADER = (" Row  |LocID | Title                          |Mem ID | Date       | Author          |\n"
           "------+------+--------------------------------+-------+------------+-----------------|\n")
_ROW = re.compile(r"\s*([+-]?\d+)\n")


class PublicationSelector:
    """Shows publications a page at a time and lets the user pick one."""

    def __init__(self, title: str = "Select a publication: ", page_size: int = 15) -> None:
        self.title = title[:_TITLE_LIMIT]
        self._page_size = page_size
        self._pubs: list[Publication] = []
        self._page = 1

    def add(self, publication: Publication) -> "PublicationSelector":
        """Offer ``publication`` for selection."""
        self._pubs.append(publication)
        return self

    def __lshift__(self, publication: Publication) -> "PublicationSelector":
        return self.add(publication)

    def __bool__(self) -> bool:
        return bool(self._pubs)

    def __len__(self) -> int:
        return len(self._pubs)

    def reset(self) -> None:
        """Remove all publications."""
        self._pubs.clear()

    def sort(self) -> None:
        """Order by title, and by checkout date among equal titles."""
        self._pubs.sort(key=lambda pub: pub.checkout_date())
        self._pubs.sort(key=lambda pub: pub.title or "")

    def _display(self, out: TextIO) -> None:
        out.write(f"{self.title}\n{_HEADER}")
        start = (self._page - 1) * self._page_size
        page = self._pubs[start:start + self._page_size]
        for number, pub in enumerate(page, start=start + 1):
            out.write(f"{number:>4}- ")
            if pub:
                out.write(format(pub, "console"))
            out.write("\n")

    @staticmethod
    def _parse_row(line: str, instream: TextIO) -> int | None:
        while line.isspace():
            line = instream.readline()
            if not line:
                raise EOFError("end of input while reading a selection")
        match = _ROW.fullmatch(line)
        return int(match.group(1)) if match else None

    def _select(self, instream: TextIO, out: TextIO) -> tuple[int, int]:
        """Return (page step, library reference) for the user's choice."""
        count = len(self._pubs)
        has_prev = self._page > 1
        has_next = self._page * self._page_size < count
        if count > self._page_size:
            if has_prev:
                out.write("> P (Previous Page)\n")
            if has_next:
                out.write("> N (Next page)\n")
        out.write("> X (to Exit)\n> Row Number(select publication)\n> ")
        while True:
            line = instream.readline()
            if not line:
                raise EOFError("end of input while reading a selection")
            key = line[0].upper()
            if key == "X":
                return 0, 0
            if key == "P":
                if has_prev:
                    return -1, 0
            elif key == "N":
                if has_next:
                    return 1, 0
            else:
                row = self._parse_row(line, instream)
                if row is not None and 1 <= row <= count:
                    return 0, self._pubs[row - 1].lib_ref
            out.write("Invalid selection, retry\n> ")

    def run(self, instream: TextIO | None = None, outstream: TextIO | None = None) -> int:
        """Let the user page and pick; return the library reference, or 0 on exit."""
        if instream is None:
            instream = sys.stdin
        if outstream is None:
            outstream = sys.stdout
        while True:
            self._display(outstream)
            step, ref = self._select(instream, outstream)
            if not step:
                return ref
            self._page += step