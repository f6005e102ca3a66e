"""
Buffered character source with one step of pushback.

The control-word lexer has to look one character past the end of a keyword
to know where it stops, and sometimes give that character back to the main
loop. The cursor keeps a small window over the underlying text stream and
supports rewinding exactly one position, including right after a refill.
"""

from typing import Callable, Protocol

DEFAULT_BUFFER_SIZE = 100


class TextSource(Protocol):
    def read(self, size: int = -1, /) -> str: ...


class Cursor:
    """Reads characters from a text stream through a refillable window."""

    def __init__(
        self,
        stream: TextSource,
        on_warning: Callable[[str], None],
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        if buffer_size < 2:
            raise ValueError("buffer_size must leave room for the carried character")
        self._stream = stream
        self._on_warning = on_warning
        self._buffer_size = buffer_size
        self._window = ""
        self._index = 0
        self._started = False
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _fill(self) -> bool:
        # the last character of the old window moves to slot zero so that
        # an unread issued right after the refill still finds it
        carried = self._window[-1:]
        self._started = True
        try:
            chunk = self._stream.read(self._buffer_size - len(carried))
        except (OSError, ValueError) as exc:
            # UnicodeDecodeError from a text stream ends the input as well
            self._on_warning(f"cursor read failed: {exc}")
            chunk = ""
        if not chunk:
            self._exhausted = True
            self._window = ""
            self._index = 0
            return False
        self._window = carried + chunk
        self._index = len(carried)
        return True

    def read(self) -> str | None:
        """Return the next character, or None once the input is exhausted."""
        if self._exhausted:
            return None
        if self._index >= len(self._window) and not self._fill():
            return None
        ch = self._window[self._index]
        self._index += 1
        return ch

    def unread(self) -> bool:
        """Step back one character. Only valid directly after a read."""
        if self._index > 0:
            self._index -= 1
            return True
        self._on_warning(
            f"cursor unread with nothing to unread (index {self._index}, "
            f"window {len(self._window)})"
        )
        return False

    def peek(self, count: int) -> str:
        """Return up to ``count`` upcoming characters without consuming them."""
        if not self._started:
            self._fill()
        return self._window[self._index : self._index + count]
