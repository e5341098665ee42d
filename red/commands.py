"""Command pattern implementation for viewer actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """


class MoveCursorCommand(EditorCommand):
    """Moves the cursor in one of the directions Editor.move_cursor knows."""

    def __init__(self, movement: str):
        self.movement = movement

    def execute(self, editor, key_event):
        editor.move_cursor(self.movement)

    def __repr__(self):
        return f"MoveCursorCommand({self.movement!r})"


class QuitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.should_quit = True


MOVEMENT_KEYS = ('up', 'down', 'left', 'right', 'home', 'end', 'page_up', 'page_down')


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        for movement in MOVEMENT_KEYS:
            self.register((KeyType.SPECIAL, movement), MoveCursorCommand(movement))

        self.register((KeyType.CTRL, 'q'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command was bound to the key
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(editor, key_event)
        return True
