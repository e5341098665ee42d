"""Terminal interface using Blessed for display and Curtsies for input."""

import sys
import termios
from typing import Optional, TextIO, Tuple

import blessed
from curtsies import Input

from .constants import EditorConstants
from .keyboard import KeyEvent, parse_key
from .model import Position, Size


class FatalTerminalError(RuntimeError):
    """The terminal can no longer be read from or written to."""


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Output is written straight to the stream; nothing is shown until
    flush() is called. The normal screen is used (no alternate screen), so
    whatever is printed last stays visible after the program exits.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None, stream: Optional[TextIO] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self._stream = stream or sys.stdout
        self.is_active = False
        self._input: Optional[Input] = None

    def setup(self):
        """Clear the screen and enter raw input mode.

        Raises:
            OSError: the terminal could not be switched to raw mode.
        """
        self.is_active = True
        self.clear_screen()
        self.flush()
        if self._input is None:
            # Flow control off so Ctrl-Q/Ctrl-S reach us instead of the tty driver
            try:
                terminal_input = Input(keynames='curtsies', disable_terminal_start_stop=True)
                terminal_input.__enter__()
            except termios.error as e:
                raise OSError(*e.args) from e
            self._input = terminal_input

    def cleanup(self):
        """Leave raw input mode and restore the cursor."""
        try:
            if self._input is not None:
                self._input.__exit__(None, None, None)
        finally:
            self._input = None
            if self.is_active:
                self.is_active = False
                self.write(self.term.normal + self.term.normal_cursor)
                self.flush()

    def read_key(self) -> KeyEvent:
        """Block until one key arrives and return it parsed.

        Raises:
            OSError: input is not available or the read failed.
        """
        if self._input is None:
            raise OSError("terminal input is not set up")
        event = next(self._input)
        return parse_key(str(event))

    def size(self) -> Size:
        """Current viewport size; excludes the status and message bars."""
        height = max(self.term.height - EditorConstants.RESERVED_BOTTOM_ROWS, 0)
        return Size(width=self.term.width, height=height)

    def write(self, text: str):
        print(text, end='', file=self._stream)

    def flush(self):
        self._stream.flush()

    def clear_screen(self):
        """Clear the entire screen."""
        self.write(self.term.home + self.term.clear)

    def clear_current_line(self):
        self.write(self.term.clear_eol)

    def cursor_hide(self):
        self.write(self.term.hide_cursor)

    def cursor_show(self):
        self.write(self.term.normal_cursor)

    def set_cursor_position(self, position: Position):
        self.write(self.term.move(position.y, position.x))

    def set_foreground_color(self, rgb: Tuple[int, int, int]):
        self.write(self.term.color_rgb(*rgb))

    def set_background_color(self, rgb: Tuple[int, int, int]):
        self.write(self.term.on_color_rgb(*rgb))

    def reset_foreground_color(self):
        # Blessed only exposes a full attribute reset
        self.write(self.term.normal)

    def reset_background_color(self):
        self.write(self.term.normal)
