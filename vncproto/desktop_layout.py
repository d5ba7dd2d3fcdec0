"""Desktop layouts requested by clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vncproto.rfbproto import Screen

MAX_DISPLAYS = 255


@dataclass
class DisplayLayout:
    """Placement of one display within the desktop."""

    id: int
    x_pos: int
    y_pos: int
    width: int
    height: int
    display: Any = None

    @classmethod
    def from_screen(cls, screen: Screen) -> DisplayLayout:
        return cls(id=screen.id, x_pos=screen.x, y_pos=screen.y,
                   width=screen.width, height=screen.height)


@dataclass
class DesktopLayout:
    """The full desktop size and the displays laid out on it."""

    width: int
    height: int
    displays: list[DisplayLayout] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.displays) > MAX_DISPLAYS:
            raise ValueError(
                f"a desktop layout holds at most {MAX_DISPLAYS} displays")

    def display_count(self) -> int:
        return len(self.displays)

    def display_at(self, index: int) -> DisplayLayout | None:
        """The display layout at index, or None when out of range."""
        if 0 <= index < len(self.displays):
            return self.displays[index]
        return None