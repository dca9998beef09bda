"""Markdown file discovery.

Walks a directory tree and records every Markdown file together with the
HTML path it converts to. Results go into a list owned by the caller;
nothing is kept at module level, so independent scans never interfere.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from marcador.errors import IOFailedError, NullArgumentError
from marcador.utils.logger import get_logger

logger = get_logger(__name__)

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


@dataclass(frozen=True, slots=True)
class MarkdownEntry:
    """A Markdown file and its HTML output, relative to the scanned root."""

    md_path: str
    html_path: str


def is_markdown_path(path: str | os.PathLike[str]) -> bool:
    return Path(path).suffix == MARKDOWN_SUFFIX


def html_path_for(md_path: str | os.PathLike[str]) -> str:
    """Map ``notes/a.md`` to ``notes/a.html``.

    Raises:
        ValueError: If md_path is not a Markdown path
    """
    path = Path(md_path)
    if path.suffix != MARKDOWN_SUFFIX:
        raise ValueError(f"Not a markdown path: {md_path}")
    return path.with_suffix(HTML_SUFFIX).as_posix()


def scan_markdown_files(base_dir: str | os.PathLike[str], entries: list[MarkdownEntry]) -> int:
    """Append every Markdown file under base_dir to entries.

    Directories are walked depth-first with names sorted, so the order is
    stable. Paths are relative to base_dir and use ``/`` separators.

    Args:
        base_dir: Root directory to scan
        entries: Caller-owned list receiving the entries

    Returns:
        Number of entries appended

    Raises:
        NullArgumentError: If base_dir or entries is None
        IOFailedError: If base_dir is not a readable directory
    """
    if base_dir is None or entries is None:
        raise NullArgumentError("scan_markdown_files() requires a directory and a list")

    root = Path(base_dir)
    if not root.is_dir():
        raise IOFailedError(os.fspath(base_dir), "not a directory")

    added = 0
    try:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for name in sorted(filenames):
                if not is_markdown_path(name):
                    continue
                relative = (Path(dirpath) / name).relative_to(root).as_posix()
                entries.append(MarkdownEntry(relative, html_path_for(relative)))
                added += 1
    except OSError as exc:
        raise IOFailedError(os.fspath(base_dir), str(exc)) from exc

    logger.debug("Found %d markdown files under %s", added, base_dir)
    return added


__all__ = [
    "MarkdownEntry",
    "html_path_for",
    "is_markdown_path",
    "scan_markdown_files",
]
