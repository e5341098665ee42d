"""Shared fixtures: an in-memory terminal and a controllable clock."""

import pytest

from red.editor import Editor
from red.document import Document
from red.keyboard import KeyEvent, KeyType
from red.model import Size


class FakeTerminal:
    """Records everything the editor does to the terminal."""

    def __init__(self, width=80, height=24, keys=()):
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.calls = []
        self.output = []
        self.setup_called = False
        self.cleanup_called = False

    def setup(self):
        self.setup_called = True

    def cleanup(self):
        self.cleanup_called = True

    def read_key(self):
        self.calls.append(('read_key',))
        if not self.keys:
            raise OSError("input closed")
        key = self.keys.pop(0)
        if isinstance(key, Exception):
            raise key
        return key

    def size(self):
        return Size(self.width, self.height)

    def write(self, text):
        self.output.append(text)

    def flush(self):
        self.calls.append(('flush',))

    def clear_screen(self):
        self.calls.append(('clear_screen',))

    def clear_current_line(self):
        self.calls.append(('clear_current_line',))

    def cursor_hide(self):
        self.calls.append(('cursor_hide',))

    def cursor_show(self):
        self.calls.append(('cursor_show',))

    def set_cursor_position(self, position):
        self.calls.append(('set_cursor_position', position))

    def set_foreground_color(self, rgb):
        self.calls.append(('set_foreground_color', rgb))

    def set_background_color(self, rgb):
        self.calls.append(('set_background_color', rgb))

    def reset_foreground_color(self):
        self.calls.append(('reset_foreground_color',))

    def reset_background_color(self):
        self.calls.append(('reset_background_color',))

    def reset_output(self):
        self.calls = []
        self.output = []

    @property
    def screen_lines(self):
        """Output split into screen rows (body rows, status bar, message bar)."""
        return ''.join(self.output).split('\r\n')

    @property
    def cursor_positions(self):
        return [call[1] for call in self.calls if call[0] == 'set_cursor_position']


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def special(value):
    return KeyEvent(key_type=KeyType.SPECIAL, value=value, raw=f'<{value.upper()}>')


def ctrl(value):
    return KeyEvent(key_type=KeyType.CTRL, value=value, raw=f'<Ctrl-{value}>', is_ctrl=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_editor(clock):
    """Build an editor over a FakeTerminal and an in-memory document."""
    def factory(lines=None, width=80, height=24, keys=(), file_name=None):
        terminal = FakeTerminal(width=width, height=height, keys=keys)
        editor = Editor(terminal=terminal, clock=clock)
        if lines is not None:
            editor.document = Document.from_lines(lines, file_name=file_name)
        return editor
    return factory
