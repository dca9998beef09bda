"""Shallow syntax check for Markdown documents.

Only fence balance is checked: every ```` ``` ```` marker in the document
is counted, wherever it appears, and an odd count means a fence was left
open. This is not a parse; a document that validates can still render
with literal fallbacks.
"""

from __future__ import annotations

FENCE = "```"


def count_fence_markers(markdown: str) -> int:
    """Count non-overlapping ```` ``` ```` occurrences."""
    count = 0
    pos = markdown.find(FENCE)
    while pos != -1:
        count += 1
        pos = markdown.find(FENCE, pos + len(FENCE))
    return count


def validate(markdown: str | None) -> tuple[bool, str]:
    """Check a document for unbalanced code fences.

    Returns:
        ``(True, "")`` when valid, otherwise ``(False, diagnostic)``

    Example:
        >>> validate("```\\ncode\\n")
        (False, 'Unclosed code fence')

    """
    if markdown is None:
        return False, "Null markdown input"
    if count_fence_markers(markdown) % 2:
        return False, "Unclosed code fence"
    return True, ""
