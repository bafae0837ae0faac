"""Keyboard input and console output used by the navigator."""
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import readchar
from rich.console import Console

logger = logging.getLogger(__name__)

if sys.platform == 'win32':
    _DEVICE_ERRORS = (EOFError,)
else:
    import termios
    _DEVICE_ERRORS = (EOFError, termios.error)

DEFAULT_CANCEL_TOKEN = '\x1b'


class KeyKind(Enum):
    CHAR = 'char'
    BACK = 'back'
    ESCAPE = 'escape'
    ENTER = 'enter'
    UP = 'up'
    DOWN = 'down'
    HOME = 'home'
    OTHER = 'other'


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def key(cls, char):
        return cls(KeyKind.CHAR, char)


KeyEvent.BACK = KeyEvent(KeyKind.BACK)
KeyEvent.ESCAPE = KeyEvent(KeyKind.ESCAPE)
KeyEvent.ENTER = KeyEvent(KeyKind.ENTER)
KeyEvent.UP = KeyEvent(KeyKind.UP)
KeyEvent.DOWN = KeyEvent(KeyKind.DOWN)
KeyEvent.HOME = KeyEvent(KeyKind.HOME)
KeyEvent.OTHER = KeyEvent(KeyKind.OTHER)


class InputReader(ABC):
    """Blocking source of keystrokes and lines."""

    @abstractmethod
    def read_key(self):
        """Return the next KeyEvent."""

    @abstractmethod
    def read_line(self):
        """Return one line of text without its terminator."""


class OutputWriter(ABC):
    """Sink for rendered lines."""

    @abstractmethod
    def write_lines(self, lines):
        pass

    def clear(self):
        pass


_CTRL_C = getattr(readchar.key, 'CTRL_C', '\x03')

_GESTURES = {
    readchar.key.BACKSPACE: KeyEvent.BACK,
    '\x08': KeyEvent.BACK,
    getattr(readchar.key, 'DELETE', '\x1b[3~'): KeyEvent.BACK,
    readchar.key.ESC: KeyEvent.ESCAPE,
    _CTRL_C: KeyEvent.ESCAPE,
    readchar.key.ENTER: KeyEvent.ENTER,
    '\r': KeyEvent.ENTER,
    '\n': KeyEvent.ENTER,
    readchar.key.UP: KeyEvent.UP,
    readchar.key.DOWN: KeyEvent.DOWN,
    readchar.key.HOME: KeyEvent.HOME,
}


def decode_key(raw):
    """Map a raw key string from readchar to a KeyEvent."""
    if raw in _GESTURES:
        return _GESTURES[raw]
    # readchar on POSIX returns Esc together with the key pressed after it;
    # CSI and SS3 prefixes are unknown function keys, not Esc.
    if raw.startswith(readchar.key.ESC) and raw[1:2] not in ('[', 'O'):
        return KeyEvent.ESCAPE
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent.key(raw)
    return KeyEvent.OTHER


class KeyboardReader(InputReader):
    """Reads the real keyboard one keystroke at a time via readchar.

    Args:
        writer: optional OutputWriter used to echo typed text in read_line
        cancel_token: returned by read_line when Esc or Ctrl+C is pressed
    """

    def __init__(self, writer=None, cancel_token=DEFAULT_CANCEL_TOKEN):
        self.writer = writer
        self.cancel_token = cancel_token

    def _readkey(self):
        try:
            return readchar.readkey()
        except KeyboardInterrupt:
            return _CTRL_C
        except _DEVICE_ERRORS as e:
            raise OSError(f"Cannot read from the terminal: {e}") from e

    def read_key(self):
        return decode_key(self._readkey())

    def read_line(self):
        buffer = []
        while True:
            event = decode_key(self._readkey())
            if event.kind is KeyKind.ENTER:
                return ''.join(buffer)
            if event.kind is KeyKind.ESCAPE:
                return self.cancel_token
            if event.kind is KeyKind.BACK:
                if buffer:
                    buffer.pop()
            elif event.kind is KeyKind.CHAR:
                buffer.append(event.char)
            else:
                continue
            self._echo(''.join(buffer))

    def _echo(self, text):
        if self.writer is not None and hasattr(self.writer, 'echo'):
            self.writer.echo(text)


class ConsoleWriter(OutputWriter):
    """Writes lines to the terminal through a rich Console."""

    def __init__(self, console=None, clear_screen=True):
        self.console = console if console is not None else Console(highlight=False)
        self.clear_screen = clear_screen

    def write_lines(self, lines):
        for line in lines:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def clear(self):
        if self.clear_screen:
            self.console.clear()

    def echo(self, text):
        """Redraw the line being typed in place."""
        self.console.file.write(f"\r\x1b[2K> {text}")
        self.console.file.flush()
