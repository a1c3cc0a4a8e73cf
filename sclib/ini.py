"""Minimal INI parser yielding one item per key/value line.

Sections are written ``[name]``; keys and values are separated by ``=`` or
``:``. A line starting with ``;`` or ``#`` is a comment, and so is anything
after a space followed by ``;`` or ``#``. An indented line following a key
is a continuation: it yields another value for the same key. A UTF-8 byte
order mark on the first line is ignored. Lines longer than 1023 characters
are truncated silently.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

_SPACE = " \t\n\v\f\r"
_MAX_LINE_LEN = 1024
_MAX_NAME_LEN = 255
_BOM = "\ufeff"


@dataclass(frozen=True)
class IniItem:
    """A value found on ``line`` for ``key`` within ``section``."""

    line: int
    section: str
    key: str
    value: str


class IniSyntaxError(ValueError):
    """Raised for a line that is neither a section, a key nor a continuation."""

    def __init__(self, line: int, text: str) -> None:
        super().__init__(f"line {line}: cannot parse {text!r}")
        self.line = line
        self.text = text


def _trim_comment(text: str) -> str:
    if not text or text[0] in ";#":
        return ""
    pos = text.find(" ")
    while pos != -1:
        nxt = pos + 1
        if nxt < len(text) and text[nxt] in ";#":
            return text[:nxt]
        pos = text.find(" ", nxt)
    return text


def parse_lines(lines: Iterable[str]) -> Iterator[IniItem]:
    """Parse INI lines, yielding an :class:`IniItem` for every value.

    Stop iterating to stop parsing. Raises :class:`IniSyntaxError` on the
    first line that cannot be parsed.
    """
    section = ""
    key = ""
    for lineno, raw in enumerate(lines, start=1):
        if raw.endswith("\n"):
            raw = raw[:-1]
        raw = raw[: _MAX_LINE_LEN - 1]
        if lineno == 1 and raw.startswith(_BOM):
            raw = raw[len(_BOM):]

        text = _trim_comment(raw)
        head = text.lstrip(_SPACE)
        indented = len(head) != len(text)
        head = head.rstrip(_SPACE)
        if not head:
            continue

        if indented and key:
            yield IniItem(lineno, section, key, head)
        elif head[0] == "[":
            end = head.find("]")
            if end == -1:
                raise IniSyntaxError(lineno, head)
            key = ""
            section = head[1:end][:_MAX_NAME_LEN]
        else:
            end = next((i for i, ch in enumerate(head) if ch in "=:"), -1)
            if end == -1:
                raise IniSyntaxError(lineno, head)
            name = head[:end].strip(_SPACE)
            key = name[:_MAX_NAME_LEN]
            yield IniItem(lineno, section, name, head[end + 1:].strip(_SPACE))


def parse_string(text: Optional[str]) -> Iterator[IniItem]:
    """Parse INI text; an empty or missing text yields nothing."""
    if not text:
        return
    text = text.split("\0", 1)[0]
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    yield from parse_lines(pieces)


def parse_file(path: Union[str, "os.PathLike[str]"]) -> Iterator[IniItem]:
    """Parse an INI file; I/O errors propagate as :class:`OSError`."""
    with open(path, "rb") as fp:
        yield from parse_lines(
            line.decode("utf-8", "surrogateescape") for line in fp
        )