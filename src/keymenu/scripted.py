"""In-memory reader and writer for driving menus without a terminal."""
from collections import deque

from .terminal import InputReader, KeyEvent, OutputWriter

_NAMED_KEYS = {
    '<back>': KeyEvent.BACK,
    '<esc>': KeyEvent.ESCAPE,
    '<enter>': KeyEvent.ENTER,
    '<up>': KeyEvent.UP,
    '<down>': KeyEvent.DOWN,
    '<home>': KeyEvent.HOME,
    '<other>': KeyEvent.OTHER,
}


def to_key_event(key):
    """Accept a KeyEvent, a single character, or a name like ``'<back>'``."""
    if isinstance(key, KeyEvent):
        return key
    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if isinstance(key, str) and len(key) == 1:
        return KeyEvent.key(key)
    raise ValueError(f"Cannot script key {key!r}")


class ScriptedReader(InputReader):
    """Feeds predetermined keys and lines. Raises EOFError once a queue runs dry."""

    def __init__(self, keys=(), lines=()):
        self.keys = deque(to_key_event(k) for k in keys)
        self.lines = deque(lines)

    def read_key(self):
        if not self.keys:
            raise EOFError("No scripted keys left")
        return self.keys.popleft()

    def read_line(self):
        if not self.lines:
            raise EOFError("No scripted lines left")
        return self.lines.popleft()


class RecordingWriter(OutputWriter):
    """Keeps every batch passed to write_lines in ``frames``."""

    def __init__(self):
        self.frames = []
        self.clears = 0

    def write_lines(self, lines):
        self.frames.append(list(lines))

    def clear(self):
        self.clears += 1

    @property
    def last(self):
        return self.frames[-1] if self.frames else []
