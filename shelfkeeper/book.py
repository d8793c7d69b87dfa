"""Books: publications with an author."""

from __future__ import annotations

import sys
from typing import TextIO

from .limits import AUTHOR_WIDTH
from .publication import Publication, _check_field, _read_line, is_console
from .utils import truncate


class Book(Publication):
    """A publication that also records its author."""

    def __init__(self) -> None:
        super().__init__()
        self._author: str | None = None

    @property
    def author(self) -> str | None:
        return self._author

    def type_code(self) -> str:
        return "B"

    def _author_part(self, console: bool) -> str:
        if console:
            return f" {truncate(self._author, AUTHOR_WIDTH):<{AUTHOR_WIDTH}} |"
        return f"\t{self._author or ''}"

    def __format__(self, spec: str) -> str:
        return super().__format__(spec) + self._author_part(spec == "console")

    def write(self, stream: TextIO | None = None) -> None:
        """Write the publication fields followed by the author."""
        if stream is None:
            stream = sys.stdout
        console = is_console(stream)
        stream.write(Publication.__format__(self, "console" if console else ""))
        stream.write(self._author_part(console))

    def read(self, stream: TextIO | None = None) -> "Book":
        """Read the publication fields and then the author.

        Raises ValueError when the entry is invalid.
        """
        if stream is None:
            stream = sys.stdin
        self._author = None
        console = is_console(stream)
        try:
            super().read(stream)
        except ValueError:
            if console:
                sys.stdout.write("Author: ")
            raise
        if console:
            sys.stdout.write("Author: ")
            self._author = _check_field(_read_line(stream), "author")
        return self

    def _load_fields(self, fields: list[str]) -> None:
        if len(fields) < 6:
            raise ValueError("book record has no author")
        author = _check_field("\t".join(fields[5:]), "author")
        super()._load_fields(fields[:5])
        self._author = author

    def set_member(self, member_id: int) -> None:
        """Lend or return the book; the checkout date becomes today."""
        super().set_member(member_id)
        self.reset_date()

    def __bool__(self) -> bool:
        return bool(self._author) and super().__bool__()