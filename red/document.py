"""Document storage: an ordered list of rows loaded from a file."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def split_lines(contents: str) -> list[str]:
    r"""Split on "\n" only, dropping one trailing "\r" per line.

    A final line terminator does not start a new, empty line.
    """
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Row:
    """One line of a document."""

    __slots__ = ('_text',)

    def __init__(self, text: str = ""):
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"Row({self._text!r})"

    @property
    def text(self) -> str:
        return self._text

    def render(self, start: int, end: int) -> str:
        """Return the visible text for columns [start, end).

        Out-of-range bounds are clamped. Tabs render as a single space so
        that rendered width equals len(row).
        """
        end = min(end, len(self._text))
        start = min(start, end)
        return self._text[start:end].replace('\t', ' ')


class Document:
    """Ordered rows plus the name of the file they came from."""

    def __init__(self, rows: Iterable[Row] = (), file_name: Optional[str] = None):
        self._rows: list[Row] = list(rows)
        self.file_name = file_name

    @classmethod
    def from_lines(cls, lines: Iterable[str], file_name: Optional[str] = None) -> "Document":
        return cls((Row(line) for line in lines), file_name=file_name)

    @classmethod
    def open(cls, path: str) -> "Document":
        """Load a document from path.

        Raises:
            OSError: the file is missing or unreadable.
            UnicodeDecodeError: the file is not valid UTF-8.
        """
        # newline='' keeps lone \r and other separators inside their line
        with open(path, 'r', encoding='utf-8', newline='') as f:
            contents = f.read()
        document = cls.from_lines(split_lines(contents), file_name=path)
        logger.debug(f"Opened {path}: {document.line_count} lines")
        return document

    @property
    def line_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def line_at(self, index: int) -> Optional[Row]:
        """Return the row at index, or None if there is none."""
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None
