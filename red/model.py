from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Zero-based column (x) and row (y) coordinates."""
    x: int = 0
    y: int = 0

    def __sub__(self, other: "Position") -> "Position":
        return Position(max(self.x - other.x, 0), max(self.y - other.y, 0))


@dataclass(frozen=True)
class Size:
    """Viewport dimensions in columns and rows."""
    width: int
    height: int


@dataclass(frozen=True)
class StatusMessage:
    text: str
    created_at: float

    def is_visible(self, now: float, timeout: float) -> bool:
        return now - self.created_at < timeout
