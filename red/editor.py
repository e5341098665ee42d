"""Main viewer controller: cursor, viewport offset and the redraw cycle."""

import logging
import time
from typing import Callable, Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .document import Document, Row
from .keyboard import KeyEvent, describe
from .model import Position, Size, StatusMessage
from .settings import Settings
from .terminal import FatalTerminalError, TerminalInterface
from .version import __version__

logger = logging.getLogger(__name__)


def scroll_offset(cursor: Position, offset: Position, size: Size) -> Position:
    """Return the viewport offset that shows cursor with the least movement.

    Each axis is handled independently. The result depends only on the
    arguments, so applying it twice changes nothing the second time.
    """
    # A zero-sized viewport still shows one row and column
    height = max(size.height, 1)
    width = max(size.width, 1)

    y = offset.y
    if cursor.y < y:
        y = cursor.y
    elif cursor.y >= y + height:
        y = cursor.y - height + 1

    x = offset.x
    if cursor.x < x:
        x = cursor.x
    elif cursor.x >= x + width:
        x = cursor.x - width + 1

    return Position(x=max(x, 0), y=max(y, 0))


class Editor:
    """Terminal text viewer."""

    def __init__(
        self,
        terminal: Optional[TerminalInterface] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize with an empty document and the help message."""
        self.terminal = terminal or TerminalInterface()
        self.settings = settings or Settings()
        self.clock = clock
        self.command_registry = CommandRegistry()
        self.document = Document()
        self.should_quit = False
        self.cursor = Position()
        self.offset = Position()
        self.status_message = StatusMessage(EditorConstants.HELP_MESSAGE, self.clock())

    def load_file(self, filename: str):
        """Open filename, falling back to an empty document on failure."""
        try:
            self.document = Document.open(filename)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not open {filename}: {e}")
            self.document = Document()
            self.set_status_message(EditorConstants.OPEN_ERROR_MESSAGE.format(filename))

    def set_status_message(self, text: str):
        self.status_message = StatusMessage(text, self.clock())

    def run(self):
        """Run the main loop until quit.

        Raises:
            FatalTerminalError: reading from or writing to the terminal failed.
        """
        try:
            try:
                self.terminal.setup()
                while True:
                    self.refresh_screen()
                    if self.should_quit:
                        break
                    self.process_keypress()
            except OSError as e:
                self._die(e)
        finally:
            self.terminal.cleanup()

    def _die(self, error: OSError):
        logger.debug(f"Fatal terminal error: {error}")
        try:
            self.terminal.clear_screen()
            self.terminal.flush()
        except OSError as cleanup_error:
            logger.debug(f"Could not clear screen: {cleanup_error}")
        raise FatalTerminalError(str(error)) from error

    def process_keypress(self):
        """Read one key, dispatch it and bring the cursor into view."""
        key_event = self.terminal.read_key()
        self.handle_key_event(key_event)

    def handle_key_event(self, key_event: KeyEvent):
        handled = self.command_registry.execute(self, key_event)
        logger.debug(f"Key {describe(key_event)} {'handled' if handled else 'ignored'}")
        self.scroll()

    # Cursor movement

    def _row_width(self, y: int) -> int:
        row = self.document.line_at(y)
        return len(row) if row is not None else 0

    def move_cursor(self, key: str):
        """Move the cursor for one of the movement keys.

        Unknown keys leave the cursor unchanged. The column is clamped to the
        length of the row the cursor ends up on.
        """
        x, y = self.cursor.x, self.cursor.y
        height = self.terminal.size().height
        doc_len = self.document.line_count
        width = self._row_width(y)

        if key == 'up':
            y = max(y - 1, 0)
        elif key == 'down':
            y = min(y + 1, doc_len)
        elif key == 'left':
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = self._row_width(y)
        elif key == 'right':
            if x < width:
                x += 1
            elif y < doc_len:
                y += 1
                x = 0
        elif key == 'home':
            x = 0
        elif key == 'end':
            x = width
        elif key == 'page_up':
            y = y - height if y > height else 0
        elif key == 'page_down':
            y = y + height if y + height < doc_len else doc_len

        x = min(x, self._row_width(y))
        self.cursor = Position(x=x, y=y)

    def scroll(self):
        self.offset = scroll_offset(self.cursor, self.offset, self.terminal.size())

    # Rendering

    def refresh_screen(self):
        """Redraw the whole screen from the current state."""
        terminal = self.terminal
        terminal.cursor_hide()
        terminal.set_cursor_position(Position())
        if self.should_quit:
            terminal.clear_screen()
            terminal.write(EditorConstants.GOODBYE_MESSAGE + EditorConstants.ROW_TERMINATOR)
        else:
            size = terminal.size()
            self.draw_rows(size)
            self.draw_status_bar(size)
            self.draw_message_bar(size)
            terminal.set_cursor_position(self.cursor - self.offset)
        terminal.cursor_show()
        terminal.flush()

    def welcome_message(self, width: int) -> str:
        message = f"{EditorConstants.PRODUCT_NAME} | v{__version__}"
        padding = max(width - len(message), 0) // 2
        spaces = " " * max(padding - 1, 0)
        return f"{EditorConstants.EMPTY_ROW_MARKER}{spaces}{message}"[:width]

    def draw_row(self, row: Row, width: int):
        start = self.offset.x
        self.terminal.write(row.render(start, start + width) + EditorConstants.ROW_TERMINATOR)

    def draw_rows(self, size: Size):
        for row_index in range(size.height):
            self.terminal.clear_current_line()
            row = self.document.line_at(self.offset.y + row_index)
            if row is not None:
                self.draw_row(row, size.width)
            elif self.document.is_empty() and row_index == size.height // EditorConstants.WELCOME_ROW_DIVISOR:
                self.terminal.write(self.welcome_message(size.width) + EditorConstants.ROW_TERMINATOR)
            else:
                self.terminal.write(EditorConstants.EMPTY_ROW_MARKER + EditorConstants.ROW_TERMINATOR)

    def status_bar_text(self, width: int) -> str:
        """Compose the status bar; the result is exactly width characters."""
        file_name = EditorConstants.NO_NAME
        if self.document.file_name:
            file_name = self.document.file_name[:EditorConstants.FILE_NAME_MAX_WIDTH]
        line_count = self.document.line_count
        status = f"{file_name} - {line_count} lines"
        line_indicator = f"{self.cursor.y + 1}/{line_count}"
        fill = width - len(status) - len(line_indicator)
        status = status + " " * max(fill, 0) + line_indicator
        return status[:width].ljust(width)

    def draw_status_bar(self, size: Size):
        self.terminal.set_background_color(self.settings.status_bg)
        self.terminal.set_foreground_color(self.settings.status_fg)
        self.terminal.write(self.status_bar_text(size.width) + EditorConstants.ROW_TERMINATOR)
        self.terminal.reset_foreground_color()
        self.terminal.reset_background_color()

    def message_bar_text(self, width: int) -> str:
        message = self.status_message
        if message.is_visible(self.clock(), self.settings.message_timeout):
            return message.text[:width]
        return ""

    def draw_message_bar(self, size: Size):
        self.terminal.clear_current_line()
        self.terminal.write(self.message_bar_text(size.width))
