"""Keyboard input parsing for curtsies-style key tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass(frozen=True)
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'page_up')
    raw: str  # The raw key token as read from the terminal
    is_alt: bool = False
    is_ctrl: bool = False


_ALIASES = {
    'pageup': 'page_up',
    'pgup': 'page_up',
    'pagedown': 'page_down',
    'pgdn': 'page_down',
    'esc': 'escape',
    'return': 'enter',
}


def parse_key(key_str: str) -> KeyEvent:
    """Parse a raw key string into a KeyEvent.

    Handles curtsies names such as ``<UP>``, ``<Ctrl-q>``, ``<Esc+b>`` and
    ``<PAGEDOWN>``, as well as single characters and ASCII control bytes.
    """
    # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Alt-left>'
    if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
        lower = key_str[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = _ALIASES.get(parts[-1], parts[-1])
        mods = set(parts[:-1])
        if mods & {'meta', 'esc'}:
            mods.add('alt')

        if base == 'space' and not mods:
            return KeyEvent(KeyType.REGULAR, ' ', key_str)
        if base == 'tab' and not mods:
            return KeyEvent(KeyType.REGULAR, '\t', key_str)
        if 'ctrl' in mods and len(base) == 1:
            return KeyEvent(KeyType.CTRL, base, key_str, is_ctrl=True)
        if 'alt' in mods:
            return KeyEvent(KeyType.ALT, base, key_str, is_alt=True)
        return KeyEvent(KeyType.SPECIAL, base, key_str)

    if len(key_str) == 1:
        o = ord(key_str)
        if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
            ch = chr(ord('a') + o - 1)
            if ch in ('j', 'm'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            return KeyEvent(KeyType.CTRL, ch, key_str, is_ctrl=True)
        if key_str == '\x1b':
            return KeyEvent(KeyType.SPECIAL, 'escape', key_str)

    return KeyEvent(KeyType.REGULAR, key_str, key_str)


def describe(event: Optional[KeyEvent]) -> str:
    """Human-readable form of a key event, for debug logging."""
    if event is None:
        return "<none>"
    prefix = "Ctrl-" if event.is_ctrl else "Alt-" if event.is_alt else ""
    return f"{prefix}{event.value}"
