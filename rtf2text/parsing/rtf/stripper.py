"""
RTF Text Stripper
=================

Streams an RTF document and writes only its visible text.

The stripper makes a single pass over a text stream. Group delimiters push and
pop a visibility flag, control words are read by
:class:`~rtf2text.parsing.rtf.lexer.ControlWordReader` and mapped to one of six
actions, and every other character is written to the output when the current
destination is visible. Problems found along the way never raise: they are
reported through the diagnostics sink and turn the return code into
``CORRUPTED_RTF``.

Usage
-----
    >>> from rtf2text.parsing.rtf.stripper import strip_text
    >>> result = strip_text(r"{\\rtf1\\ansi Hello\\par World}")
    >>> result.text
    'Hello\\nWorld'
    >>> int(result.return_code)
    0
"""

import io
import logging
from dataclasses import dataclass, field
from typing import Protocol

from rtf2text.parsing.rtf.cursor import DEFAULT_BUFFER_SIZE, Cursor, TextSource
from rtf2text.parsing.rtf.lexer import ControlWordReader
from rtf2text.parsing.rtf.state import (
    Diagnostic,
    DiagnosticReporter,
    LoggingReporter,
    ParserState,
    ReturnCode,
)

logger = logging.getLogger(__name__)

RTF_MAGIC = "{\\rtf"
# the first block must hold more than this many characters to be taken for RTF
_MAGIC_PEEK_LENGTH = 6


class TextSink(Protocol):
    def write(self, text: str, /) -> int | None: ...


def check_rtf(source: str) -> bool:
    """Check whether a source (or its first block) starts with the RTF prefix."""
    return source.startswith(RTF_MAGIC)


def delete_final_eol(text: str | None) -> str | None:
    """Remove exactly one trailing newline, if there is one."""
    if text is None or not text.endswith("\n"):
        return text
    return text[:-1]


class RtfStripper:
    """Extracts visible text from RTF read from a stream.

    An instance keeps no state between calls to :meth:`strip_source`; it can
    be reused sequentially but must not be shared between threads while a
    call is running.
    """

    def __init__(
        self,
        reporter: DiagnosticReporter | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        if buffer_size <= _MAGIC_PEEK_LENGTH:
            raise ValueError(
                f"buffer_size must be larger than {_MAGIC_PEEK_LENGTH} characters"
            )
        self.reporter = reporter if reporter is not None else LoggingReporter()
        self.buffer_size = buffer_size
        self.warnings: list[Diagnostic] = []

    def strip_source(
        self,
        reader: TextSource,
        writer: TextSink,
        copy_if_not_rtf: bool = False,
    ) -> ReturnCode:
        """
        Strip RTF read from ``reader`` and write the text to ``writer``.

        Args:
            reader: Text stream with the RTF source. Closed on completion.
            writer: Receives the extracted text character by character. Left
                open for the caller to flush or close.
            copy_if_not_rtf: Copy the input verbatim when it does not start
                with the RTF prefix.

        Returns:
            ``RTF_OK``, ``CORRUPTED_RTF`` when anomalies were found, or
            ``NO_RTF`` when the input is not RTF.
        """
        state = ParserState(reporter=self.reporter)
        cursor = Cursor(reader, state.warning, self.buffer_size)
        self._state = state
        self._writer = writer

        try:
            head = cursor.peek(_MAGIC_PEEK_LENGTH + 1)
            if len(head) > _MAGIC_PEEK_LENGTH and check_rtf(head):
                self._parse(cursor)
            else:
                state.return_code = ReturnCode.NO_RTF
                if copy_if_not_rtf:
                    while (ch := cursor.read()) is not None:
                        self._emit(ch)
        finally:
            self._close(reader, state)
            self.warnings = state.warnings
            self._writer = None
        return state.return_code

    @staticmethod
    def _close(reader: TextSource, state: ParserState) -> None:
        close = getattr(reader, "close", None)
        if close is None:
            return
        try:
            close()
        except OSError as exc:
            state.warning(f"closing the source failed: {exc}")

    def _emit(self, ch: str) -> None:
        state = self._state
        if state.pending_surrogate is not None:
            state.pending_surrogate = None
            state.warning("unpaired high surrogate in unicode escape")
        if not state.is_for_text:
            return
        try:
            self._writer.write(ch)
        except (OSError, ValueError) as exc:
            # UnicodeEncodeError when the writer's encoding lacks the character
            state.warning(f"writing extracted text failed: {exc}")

    def _parse(self, cursor: Cursor) -> None:
        state = self._state
        command_reader = ControlWordReader(cursor, state, self._emit)
        while (ch := cursor.read()) is not None:
            if ch == "{":
                state.push_destination()
            elif ch == "}":
                state.pop_destination()
            elif ch == "\\":
                command_reader.start()
            elif ch in "\r\n":
                # line breaks in the source are not content
                continue
            else:
                self._emit(ch)
        if state.pending_surrogate is not None:
            state.warning("unpaired high surrogate at end of input")
        if state.depth:
            state.warning(f"{state.depth} group(s) left open at end of input")


@dataclass
class StripResult:
    text: str = ""
    return_code: ReturnCode = ReturnCode.RTF_OK
    warnings: list[Diagnostic] = field(default_factory=list)


def strip_text(
    source: str,
    copy_if_not_rtf: bool = False,
    reporter: DiagnosticReporter | None = None,
) -> StripResult:
    """Strip an in-memory RTF string and return the text with its status."""
    stripper = RtfStripper(reporter=reporter)
    writer = io.StringIO()
    return_code = stripper.strip_source(io.StringIO(source), writer, copy_if_not_rtf)
    return StripResult(
        text=writer.getvalue(),
        return_code=return_code,
        warnings=stripper.warnings,
    )


# Legacy convenience API. The last return code is process-wide state shared
# by every caller: it is not safe to use from concurrent threads.
_last_return_code = ReturnCode.RTF_OK


def strip_limited_source(source: str, return_anyway: bool = False) -> str | None:
    """
    Strip a source small enough to be held in memory.

    The return code is kept for :func:`get_last_return_code` (last call wins).

    Args:
        source: The RTF source.
        return_anyway: Return the text even when the source is not RTF or is
            corrupted. Non-RTF input is then copied verbatim.

    Returns:
        The extracted text without its final newline, or None when the return
        code is not ``RTF_OK`` and ``return_anyway`` is false.
    """
    global _last_return_code
    result = strip_text(source, copy_if_not_rtf=return_anyway)
    _last_return_code = result.return_code
    if return_anyway or result.return_code == ReturnCode.RTF_OK:
        return delete_final_eol(result.text)
    return None


def get_last_return_code() -> ReturnCode:
    """Return code of the last :func:`strip_limited_source` call."""
    return _last_return_code
