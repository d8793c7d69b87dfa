"""Library publications and the streaming protocol they share."""

from __future__ import annotations

import io
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .date import Date
from .limits import SHELF_ID_LEN, TITLE_WIDTH

_MAX_FIELD = 255


def is_console(stream: object) -> bool:
    """True when ``stream`` is the process's standard input or output."""
    return stream is sys.stdin or stream is sys.stdout


class Streamable(ABC):
    """Something that can be written to and read from a text stream."""

    @abstractmethod
    def write(self, stream: TextIO | None = None) -> None:
        """Write the object to ``stream``."""

    @abstractmethod
    def read(self, stream: TextIO | None = None) -> "Streamable":
        """Read the object from ``stream``."""

    @abstractmethod
    def __bool__(self) -> bool:
        """True when the object holds valid data."""


def write_item(stream: TextIO, item: Streamable) -> TextIO:
    """Write ``item`` to ``stream`` only if it is valid; return the stream."""
    if item:
        item.write(stream)
    return stream


def _read_line(stream: TextIO) -> str | None:
    """One line without its newline, or None at the end of the stream."""
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def _check_field(text: str | None, what: str) -> str:
    if text is None:
        raise ValueError(f"end of input while reading the {what}")
    if len(text) > _MAX_FIELD:
        raise ValueError(f"the {what} is longer than {_MAX_FIELD} characters")
    return text


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"bad {what}: {text!r}") from None


def _parse_date(text: str) -> Date:
    date = Date().read(io.StringIO(text))
    if not date:
        raise ValueError(f"bad date: {date.status()}")
    return date


class Publication(Streamable):
    """A periodical held by the library, possibly on loan to a member."""

    def __init__(self) -> None:
        self._title: str | None = None
        self._shelf_id = ""
        self._membership = 0
        self.lib_ref = -1
        self._date = Date()

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def shelf_id(self) -> str:
        return self._shelf_id

    @property
    def membership(self) -> int:
        return self._membership

    def type_code(self) -> str:
        """The one-letter record type."""
        return "P"

    def on_loan(self) -> bool:
        """True when a member has the publication checked out."""
        return self._membership != 0

    def checkout_date(self) -> Date:
        """The date of the last checkout (or of the record)."""
        return self._date

    def contains_title(self, text: str) -> bool:
        """True when ``text`` occurs in the title."""
        return self._title is not None and text in self._title

    def set_member(self, member_id: int) -> None:
        """Lend to ``member_id``; zero marks the publication as returned."""
        self._membership = member_id

    def reset_date(self) -> None:
        """Set the checkout date to today."""
        self._date = Date()

    def _console_text(self) -> str:
        title = (self._title or "")[:TITLE_WIDTH]
        member = f"{self._membership:<5}" if self.on_loan() else " N/A "
        return (f"| {self._shelf_id:>{SHELF_ID_LEN}} | {title:.<{TITLE_WIDTH}} "
                f"| {member} | {self._date} |")

    def _record_text(self) -> str:
        return (f"{self.type_code()}\t{self.lib_ref}\t{self._shelf_id}\t"
                f"{self._title or ''}\t{self._membership}\t{self._date}")

    def __format__(self, spec: str) -> str:
        """``"console"`` gives the table row; an empty spec gives the file record."""
        if spec == "console":
            return self._console_text()
        if spec == "":
            return self._record_text()
        raise ValueError(f"unknown format spec {spec!r}")

    def __str__(self) -> str:
        return format(self, "")

    def write(self, stream: TextIO | None = None) -> None:
        """Write a table row to the console, or a tab-separated record elsewhere."""
        if stream is None:
            stream = sys.stdout
        stream.write(Publication.__format__(self, "console" if is_console(stream) else ""))

    def read(self, stream: TextIO | None = None) -> "Publication":
        """Read interactively from the console, or one record line elsewhere.

        A record line holds the fields after the type letter. Raises
        ValueError when the entry is invalid; the publication is then invalid.
        """
        if stream is None:
            stream = sys.stdin
        self._title = None
        if is_console(stream):
            self._read_console(stream)
        else:
            line = _read_line(stream)
            if line is None:
                raise ValueError("end of input while reading a publication")
            self._load_fields(line.split("\t"))
        return self

    def _read_console(self, stream: TextIO) -> None:
        out = sys.stdout
        out.write("Shelf No: ")
        shelf = _read_line(stream)
        if shelf is None or len(shelf) != SHELF_ID_LEN:
            out.write("Title: Date: ")
            raise ValueError(f"the shelf number must be {SHELF_ID_LEN} characters")
        out.write("Title: ")
        try:
            title = _check_field(_read_line(stream), "title")
        except ValueError:
            out.write("Date: ")
            raise
        out.write("Date: ")
        date = _parse_date(_read_line(stream) or "")
        self._title, self._shelf_id = title, shelf
        self._membership, self.lib_ref, self._date = 0, 0, date

    def _load_fields(self, fields: list[str]) -> None:
        if len(fields) < 5:
            raise ValueError("incomplete publication record")
        ref_text, shelf, title, member_text, date_text = fields[:5]
        lib_ref = _parse_int(ref_text, "library reference")
        if len(shelf) > SHELF_ID_LEN:
            raise ValueError(f"shelf number {shelf!r} is too long")
        title = _check_field(title, "title")
        membership = _parse_int(member_text, "membership number")
        date = _parse_date(date_text)
        self._title, self._shelf_id = title, shelf
        self._membership, self.lib_ref, self._date = membership, lib_ref, date

    def __bool__(self) -> bool:
        return self._title is not None and self._shelf_id != ""