"""List item classifier mixin."""

from __future__ import annotations

from marcador.parsing.charsets import DIGITS, TASK_MARKS, UNORDERED_LIST_MARKERS
from marcador.tokens import Token, TokenType


class ListClassifierMixin:
    """Mixin providing list item classification."""

    # Set by the Lexer class
    _task_lists_enabled: bool

    def _try_classify_list_item(self, content: str, lineno: int) -> Token | None:
        """Try to classify content as a list item.

        Unordered items start with ``-``, ``*`` or ``+`` followed by a space.
        Ordered items start with a digit run followed by ``. ``.

        With task lists enabled, ``[ ]``, ``[x]`` or ``[X]`` right after the
        marker (followed by a space or the end of the line) makes the item a
        task; ``checked`` on the token records its state.

        Args:
            content: Line content with surrounding whitespace stripped
            lineno: Line number in source

        Returns:
            Token if list item, None otherwise.
        """
        if len(content) >= 2 and content[0] in UNORDERED_LIST_MARKERS and content[1] == " ":
            ordered = False
            start = 2
        else:
            digits = 0
            while digits < len(content) and content[digits] in DIGITS:
                digits += 1
            if digits == 0 or content[digits : digits + 2] != ". ":
                return None
            ordered = True
            start = digits + 2

        checked: bool | None = None
        if self._task_lists_enabled:
            box = content[start : start + 3]
            after = content[start + 3 : start + 4]
            if len(box) == 3 and box[0] == "[" and box[2] == "]" and box[1] in TASK_MARKS:
                if after in ("", " "):
                    checked = box[1] != " "
                    start += 4 if after else 3

        return Token(
            TokenType.LIST_ITEM,
            content[start:],
            lineno,
            ordered=ordered,
            checked=checked,
        )
