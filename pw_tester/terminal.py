import logging
import os
import sys
from contextlib import contextmanager
from typing import Callable, Optional, TextIO

from .const import MASK_CHAR, ERASE_SEQUENCE
from .errors import TerminalError

log = logging.getLogger(__name__)

CTRL_C = "\x03"
CTRL_D = "\x04"
ESC = "\x1b"


class MaskedLineReader:
    """
    Reads one line of input without echoing it, writing a mask glyph for
    every accepted character and erasing one for every accepted backspace.

    Subclasses provide the platform primitives: raw_mode() switches the
    terminal to unechoed, unbuffered input for the duration of a 'with'
    block, and read_char() returns a single character, or '' once the
    input is exhausted.
    """

    enter_keys = frozenset()
    backspace_keys = frozenset()

    def __init__(self, output: Optional[TextIO] = None, mask: str = MASK_CHAR) -> None:
        self._output = output
        self.mask = mask
        self.at_eof = False
        self._active = False

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    @contextmanager
    def raw_mode(self):
        raise NotImplementedError

    def read_char(self) -> str:
        raise NotImplementedError

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def read_line(self) -> str:
        """Reads characters until Enter and returns them without the line ending."""
        if self._active:
            raise TerminalError("A masked read is already in progress.")
        self._active = True
        self.at_eof = False
        buffer = []
        try:
            with self.raw_mode():
                while True:
                    ch = self.read_char()
                    if ch == "":
                        self.at_eof = True
                        break
                    if ch in self.enter_keys:
                        break
                    if ch == CTRL_C:
                        raise KeyboardInterrupt
                    if ch in self.backspace_keys:
                        if buffer:
                            buffer.pop()
                            self._write(ERASE_SEQUENCE)
                        continue
                    buffer.append(ch)
                    self._write(self.mask)
        finally:
            self._active = False
        return "".join(buffer)


class StreamMaskedReader(MaskedLineReader):
    """Masked reader for a plain text stream, such as a pipe."""

    enter_keys = frozenset(("\n", "\r"))
    backspace_keys = frozenset(("\x7f", "\b"))

    def __init__(self, stream: Optional[TextIO] = None, output: Optional[TextIO] = None,
                 mask: str = MASK_CHAR) -> None:
        super().__init__(output, mask)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    @contextmanager
    def raw_mode(self):
        # Nothing echoes on a stream that is not a terminal.
        yield

    def read_char(self) -> str:
        return self.stream.read(1)


class PosixMaskedReader(StreamMaskedReader):
    """Masked reader for a POSIX terminal, using termios to turn off ECHO and ICANON."""

    @contextmanager
    def raw_mode(self):
        import termios
        import tty

        try:
            fd = self.stream.fileno()
            saved = termios.tcgetattr(fd)
            mode = termios.tcgetattr(fd)
            mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON)
            mode[tty.CC][termios.VMIN] = 1
            mode[tty.CC][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSANOW, mode)
        except (termios.error, OSError, ValueError) as e:
            raise TerminalError(f"Could not switch terminal to raw mode: {e}") from e
        log.debug("Raw mode enabled on fd %d.", fd)

        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            log.debug("Terminal mode restored on fd %d.", fd)

    def read_char(self) -> str:
        while True:
            ch = self.stream.read(1)
            if ch == CTRL_D:
                # VEOF is inactive without ICANON, so Ctrl-D arrives as a character.
                return ""
            if ch != ESC:
                return ch
            # Arrow and function keys arrive as ESC '[' or ESC 'O' plus a
            # sequence ending in a character from '@' to '~'.
            ch = self.stream.read(1)
            if ch in ("[", "O"):
                ch = self.stream.read(1)
                while ch and not "@" <= ch <= "~":
                    ch = self.stream.read(1)
            if ch == "":
                return ""


class WindowsMaskedReader(MaskedLineReader):
    """Masked reader for the Windows console, using msvcrt.getwch."""

    enter_keys = frozenset(("\r", "\n"))
    backspace_keys = frozenset(("\b",))
    special_key_prefixes = frozenset(("\x00", "\xe0"))

    def __init__(self, getwch: Optional[Callable[[], str]] = None,
                 output: Optional[TextIO] = None, mask: str = MASK_CHAR) -> None:
        super().__init__(output, mask)
        if getwch is None:
            import msvcrt
            getwch = msvcrt.getwch
        self._getwch = getwch

    @contextmanager
    def raw_mode(self):
        # getwch never echoes and never waits for a full line.
        yield

    def read_char(self) -> str:
        while True:
            ch = self._getwch()
            if ch not in self.special_key_prefixes:
                return ch
            # Arrow and function keys arrive as a prefix plus a scan code.
            self._getwch()


def get_masked_reader(stream: Optional[TextIO] = None,
                      output: Optional[TextIO] = None) -> MaskedLineReader:
    """Returns the masked reader suited to the current platform and input."""
    source = stream if stream is not None else sys.stdin
    try:
        is_tty = source.isatty()
    except (AttributeError, ValueError):
        is_tty = False
    if is_tty:
        # getwch reads the console itself, so it only stands in for a TTY stdin.
        if os.name == "nt":
            return WindowsMaskedReader(output=output)
        return PosixMaskedReader(stream, output)
    log.debug("Input is not a terminal, reading it as a plain stream.")
    return StreamMaskedReader(stream, output)
