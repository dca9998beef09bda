"""Output buffer for O(n) HTML accumulation.

Appends to a list, joins on demand: O(n) total vs O(n²) for repeated
string concatenation. The buffer also keeps the bookkeeping of a classic
growable text buffer: a logical length and a capacity that only grows, by
doubling, and always leaves room for a terminator
(``size < capacity`` at all times).

Thread Safety:
    OutputBuffer instances belong to one parse at a time.
    No shared mutable state.

"""

from __future__ import annotations

from marcador.config import DEFAULT_BUFFER_SIZE
from marcador.errors import AllocationError, InvalidSizeError, NullArgumentError


class OutputBuffer:
    """Append-only growable text accumulator.

    Usage:
            >>> out = OutputBuffer()
            >>> out.append("<h1>").append("Hello").append("</h1>")
            <OutputBuffer size=14 capacity=4096>
            >>> out.getvalue()
            '<h1>Hello</h1>'

    """

    __slots__ = ("_capacity", "_parts", "_size")

    def __init__(self, capacity: int = 0) -> None:
        """Initialize an empty buffer.

        Args:
            capacity: Initial capacity (0 selects the default capacity)

        Raises:
            InvalidSizeError: If capacity is negative
        """
        if capacity < 0:
            raise InvalidSizeError(f"Invalid buffer capacity: {capacity}")
        self._parts: list[str] = []
        self._size = 0
        self._capacity = capacity or DEFAULT_BUFFER_SIZE

    def _ensure_capacity(self, needed: int) -> None:
        capacity = self._capacity
        while capacity < needed:
            capacity *= 2
        self._capacity = capacity

    def append(self, text: str) -> OutputBuffer:
        """Append text to the buffer.

        Args:
            text: String to append (empty strings are skipped)

        Returns:
            self for method chaining

        Raises:
            NullArgumentError: If text is None
            AllocationError: If the underlying storage cannot grow
        """
        if text is None:
            raise NullArgumentError("Cannot append None to output buffer")
        if not text:
            return self

        # Room for the text plus a terminator
        self._ensure_capacity(self._size + len(text) + 1)
        try:
            self._parts.append(text)
        except MemoryError as exc:
            raise AllocationError(f"Failed to grow output buffer to {self._capacity}") from exc
        self._size += len(text)
        return self

    def extend(self, strings: list[str]) -> OutputBuffer:
        """Append multiple strings at once."""
        for s in strings:
            self.append(s)
        return self

    def getvalue(self) -> str:
        """Join all parts into the accumulated text."""
        if len(self._parts) > 1:
            # Collapse so repeated reads stay O(n)
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    @property
    def data(self) -> str:
        """Accumulated text."""
        return self.getvalue()

    @property
    def size(self) -> int:
        """Logical length in characters."""
        return self._size

    @property
    def capacity(self) -> int:
        """Current capacity; always greater than size."""
        return self._capacity

    def clear(self) -> OutputBuffer:
        """Drop accumulated text. Capacity is kept."""
        self._parts.clear()
        self._size = 0
        return self

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"<OutputBuffer size={self._size} capacity={self._capacity}>"
