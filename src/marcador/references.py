"""Reference link table.

Holds ``[label]: url "title"`` definitions for one Parser. The block
segmenter fills the table in a pass over the document before any line is
rendered, so the inline engine resolves a reference no matter whether its
definition comes before or after the use site.

Entries are never mutated: the table only grows or is cleared as a whole.
When a label is defined more than once, the most recent definition wins.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from marcador.errors import NullArgumentError
from marcador.utils.text import ascii_fold


def normalize_label(label: str) -> str:
    """Normalize a label for matching: trim whitespace, ASCII case fold."""
    return ascii_fold(label.strip())


@dataclass(frozen=True, slots=True)
class ReferenceLink:
    """A single reference definition."""

    label: str
    url: str
    title: str | None = None


class ReferenceTable:
    """Label -> (url, title) lookup with most-recent-wins shadowing.

    Usage:
        >>> table = ReferenceTable()
        >>> table.add("Docs", "https://example.com", "Manual")
        >>> table.find("docs").url
        'https://example.com'

    """

    __slots__ = ("_entries", "_index")

    def __init__(self) -> None:
        # Insertion order; the newest entry is last
        self._entries: list[ReferenceLink] = []
        self._index: dict[str, ReferenceLink] = {}

    def add(self, label: str, url: str, title: str | None = None) -> ReferenceLink:
        """Insert a definition, shadowing any earlier one with the same label.

        Args:
            label: Reference label (matched case-insensitively)
            url: Link destination
            title: Optional link title

        Returns:
            The stored entry

        Raises:
            NullArgumentError: If label or url is missing
        """
        if label is None or url is None:
            raise NullArgumentError("Reference link requires a label and a url")
        key = normalize_label(label)
        if not key:
            raise NullArgumentError("Reference link label is empty")

        entry = ReferenceLink(label=str(label), url=str(url), title=None if title is None else str(title))
        self._entries.append(entry)
        self._index[key] = entry
        return entry

    def find(self, label: str) -> ReferenceLink | None:
        """Return the most recent definition for label, if any."""
        if not label:
            return None
        return self._index.get(normalize_label(label))

    def clear(self) -> None:
        """Drop every definition."""
        self._entries.clear()
        self._index.clear()

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.find(label) is not None

    def __iter__(self) -> Iterator[ReferenceLink]:
        """Iterate newest first (lookup order)."""
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
