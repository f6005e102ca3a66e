"""
Control-word reader, entered right after a backslash.

Handles the three shapes that follow a backslash: a keyword with an optional
numeric parameter (``\\par``, ``\\ansicpg1252``, ``\\u8364``), a one-character
symbol (``\\{``, ``\\~``) and a hexadecimal byte escape (``\\'e9``).
"""

from typing import Callable

from rtf2text.parsing.rtf import commands
from rtf2text.parsing.rtf.commands import ActionKind
from rtf2text.parsing.rtf.cursor import Cursor
from rtf2text.parsing.rtf.state import ParserState

MAX_KEYWORD_LENGTH = 30
MAX_PARAMETER_LENGTH = 20
MAX_UNICODE_CODE = 0xFFFF

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
# UTF-16 halves: a pair written as two escapes makes one character
_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


class ControlWordReader:
    """Reads one control word from the cursor and applies its action."""

    def __init__(
        self,
        cursor: Cursor,
        state: ParserState,
        emit: Callable[[str], None],
    ):
        self.cursor = cursor
        self.state = state
        self.emit = emit

    def start(self) -> None:
        cursor = self.cursor
        ch = cursor.read()
        if ch is None:
            return
        if not ch.isalpha():
            if ch == "'":
                self._read_hex()
                return
            self.dispatch(ch, "")
            return

        keyword = [ch]
        keyword_overflow = False
        while True:
            ch = cursor.read()
            if ch is None:
                return
            if not ch.isalpha():
                break
            if len(keyword) < MAX_KEYWORD_LENGTH:
                keyword.append(ch)
            else:
                keyword_overflow = True

        # no retained control word takes a negative parameter
        if ch == "-":
            ch = cursor.read()
            if ch is None:
                return

        parameter: list[str] = []
        parameter_overflow = False
        if ch.isdecimal():
            parameter.append(ch)
            while True:
                ch = cursor.read()
                if ch is None:
                    return
                if not ch.isdecimal():
                    break
                if len(parameter) < MAX_PARAMETER_LENGTH:
                    parameter.append(ch)
                else:
                    parameter_overflow = True

        name = "".join(keyword)
        if self._keeps_delimiter(name, ch):
            cursor.unread()

        if keyword_overflow or parameter_overflow:
            self.state.warning(
                f"control word too long: {name}{''.join(parameter)}"
            )
            return
        self.dispatch(name, "".join(parameter))

    @staticmethod
    def _keeps_delimiter(keyword: str, ch: str) -> bool:
        """True when the character ending a control word goes back to the loop.

        A Unicode escape is followed by its fallback character, which is
        dropped unless it is a letter, a group brace or starts another
        control word (``\\uc0`` documents have no fallback at all).
        """
        if ch == "\\":
            return True
        if commands.is_unicode_escape(keyword):
            return ch.isalpha() or ch in "{}"
        return ch != " "

    def _read_hex(self) -> None:
        digits = ""
        while len(digits) < 2:
            ch = self.cursor.read()
            if ch is None:
                return
            if ch == "\\":
                self.cursor.unread()
                break
            digits += ch
        if not digits:
            return
        if any(d not in _HEX_DIGITS for d in digits):
            self.state.warning(f"invalid hex escape: \\'{digits}")
            return
        self.emit(self.state.charset.translate(int(digits, 16)))

    def dispatch(self, keyword: str, parameter: str) -> None:
        """Apply the action registered for ``keyword``; unknown ones are ignored."""
        action = commands.lookup(keyword)
        if action is None:
            return
        state = self.state

        if action.kind is ActionKind.TEXT_DESTINATION:
            state.is_for_text = True
        elif action.kind is ActionKind.NO_TEXT_DESTINATION:
            state.is_for_text = False
        elif action.kind is ActionKind.INSERTION_CHAR:
            self.emit(action.char)
        elif action.kind is ActionKind.UNICODE_ESCAPE:
            self._emit_unicode(parameter)
        elif action.kind is ActionKind.CHARSET:
            if not state.charset.set_named(action.charset):
                state.warning(f"unsupported charset: {action.charset}")
            state.log(f"{keyword}: active charset {state.charset.codec}")
        elif action.kind is ActionKind.CHARSET_FROM_CODEPAGE:
            if not parameter:
                return
            if not state.charset.set_from_codepage(parameter):
                state.warning(f"unsupported code page: {parameter}")
            state.log(f"{keyword}{parameter}: active charset {state.charset.codec}")

    def _emit_unicode(self, parameter: str) -> None:
        state = self.state
        if not parameter:
            state.warning("unicode escape without a code point")
            return
        code = int(parameter)
        if code > MAX_UNICODE_CODE:
            state.warning(f"unicode escape out of range: {code}")
            return
        if code in _HIGH_SURROGATES:
            if state.pending_surrogate is not None:
                state.warning("unpaired high surrogate in unicode escape")
            state.pending_surrogate = code
            return
        if code in _LOW_SURROGATES:
            high = state.pending_surrogate
            if high is None:
                state.warning("unpaired low surrogate in unicode escape")
                return
            state.pending_surrogate = None
            code = 0x10000 + ((high - 0xD800) << 10) + (code - 0xDC00)
        self.emit(chr(code))
