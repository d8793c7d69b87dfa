"""Small text helpers and character-level stream scanning."""

from __future__ import annotations

from typing import TextIO

_DIGITS = "0123456789"


def truncate(text: str | None, length: int) -> str:
    """Return at most ``length`` leading characters of ``text``.

    A missing text or a non-positive length gives an empty string.
    """
    if text is None or length <= 0:
        return ""
    return text[:length]


def _getc(stream: TextIO) -> tuple[str, int | None]:
    """Read one character, with the position to step back to if possible."""
    pos = stream.tell() if stream.seekable() else None
    return stream.read(1), pos


def _ungetc(stream: TextIO, pos: int | None) -> None:
    """Step back to ``pos`` on a seekable stream; otherwise the character is lost."""
    if pos is not None:
        stream.seek(pos)


def _skip_space(stream: TextIO) -> tuple[str, int | None]:
    ch, pos = _getc(stream)
    while ch and ch.isspace():
        ch, pos = _getc(stream)
    return ch, pos


def _read_int(stream: TextIO) -> int | None:
    """Skip whitespace and read a signed decimal integer.

    Returns None when no number starts there; the offending character is put
    back on seekable streams. Raises EOFError when the stream ends first.
    """
    ch, pos = _skip_space(stream)
    if not ch:
        raise EOFError("end of input while reading a number")
    digits = ""
    if ch in "+-":
        digits = ch
        ch, pos = _getc(stream)
    while ch and ch in _DIGITS:
        digits += ch
        ch, pos = _getc(stream)
    if ch:
        _ungetc(stream, pos)
    if digits in ("", "+", "-"):
        return None
    return int(digits)


def _read_char(stream: TextIO) -> str:
    """Skip whitespace and return the next character; EOFError at the end."""
    ch, _ = _skip_space(stream)
    if not ch:
        raise EOFError("end of input while reading a character")
    return ch


def _skip_line(stream: TextIO) -> bool:
    """Discard input up to and including the next newline.

    Returns False if the stream ended before a newline was found.
    """
    while True:
        ch = stream.read(1)
        if not ch:
            return False
        if ch == "\n":
            return True