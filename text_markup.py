# text_markup.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

BOLD_DELIMITER = "__"


@dataclass(frozen=True)
class TextRun:
    text: str
    bold: bool = False


def iter_toggled_parts(text: str, delimiter: str = BOLD_DELIMITER) -> Iterator[Tuple[str, bool]]:
    """
    Yields (part, bold) for every part between delimiters.

    The delimiter is a toggle, not a pair: bold starts off and flips at every
    occurrence, so an unmatched delimiter leaves the rest of the string bold.
    """
    bold = False
    for part in text.split(delimiter):
        yield part, bold
        bold = not bold


def parse(text: str) -> List[TextRun]:
    """Split ``text`` into ordered runs on the ``__`` bold toggle, dropping empty parts."""
    return [TextRun(part, bold) for part, bold in iter_toggled_parts(text or "") if part]
