"""red - a terminal text viewer."""

from .document import Document, Row
from .editor import Editor, scroll_offset
from .model import Position, Size, StatusMessage
from .version import __version__

__all__ = [
    'Document',
    'Row',
    'Editor',
    'scroll_offset',
    'Position',
    'Size',
    'StatusMessage',
    '__version__',
]
