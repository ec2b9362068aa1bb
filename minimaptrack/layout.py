"""Screen layout of the game window: frame size and regions of interest."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

_BASE_WIDTH = 1920
_BASE_HEIGHT = 1080
_REFRESH_TICKS = 30


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle."""

    x: int
    y: int
    width: int
    height: int

    def tl(self) -> Tuple[int, int]:
        """Top-left corner."""
        return self.x, self.y

    def br(self) -> Tuple[int, int]:
        """Bottom-right corner (exclusive)."""
        return self.x + self.width, self.y + self.height

    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies inside, right and bottom edges excluded."""
        px, py = point[0], point[1]
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def is_empty(self) -> bool:
        """Whether the rectangle has no area."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class WindowLayout:
    """Normalised frame size and the regions searched in it."""

    frame_size: Tuple[int, int]
    paimon_maybe: Rect
    minimap_cailb_maybe: Rect
    minimap_maybe: Rect
    uid_maybe: Rect
    uid: Rect
    left_give_items_maybe: Rect
    right_pick_items_maybe: Rect


def frame_size(client_width: int, client_height: int) -> Tuple[int, int]:
    """Size the client area is scaled to, keeping one side at 1920x1080 scale."""
    if client_width <= 0 or client_height <= 0:
        raise ValueError("client area must have positive width and height")
    ratio = client_width / client_height
    target = 16.0 / 9.0
    if ratio == target:
        return _BASE_WIDTH, _BASE_HEIGHT
    if ratio > target:
        f = client_height / 1080.0
        return int(client_width / f), _BASE_HEIGHT
    f = client_width / 1920.0
    return _BASE_WIDTH, int(client_height / f)


def compute_layout(client_width: int, client_height: int) -> WindowLayout:
    """Compute every region of interest for a client area of the given size."""
    x, y = frame_size(client_width, client_height)

    paimon = Rect(0, 0, int(x * 0.10), int(y * 0.10))
    cailb = Rect(int(x * 0.08), 0, int(x * 0.10), int(y * 0.10))
    minimap = Rect(0, 0, int(x * 0.18), int(y * 0.22))

    uid_left = int(x * 0.88)
    uid_top = int(y * 0.97)
    uid_maybe = Rect(uid_left, uid_top, x - uid_left, y - uid_top)

    uid = Rect(
        math.ceil(x - x * (1.0 - 0.865)),
        math.ceil(y - 1080.0 * (1.0 - 0.9755)),
        math.ceil(1920 * 0.11),
        math.ceil(1920 * 0.0938 * 0.11),
    )

    left_items = Rect(int(x * 0.570), int(y * 0.250), int(x * 0.225), int(y * 0.500))
    right_items = Rect(int(x * 0.050), int(y * 0.460), int(x * 0.160), int(y * 0.480))

    return WindowLayout(
        frame_size=(x, y),
        paimon_maybe=paimon,
        minimap_cailb_maybe=cailb,
        minimap_maybe=minimap,
        uid_maybe=uid_maybe,
        uid=uid,
        left_give_items_maybe=left_items,
        right_pick_items_maybe=right_items,
    )


class RefreshTicker:
    """Decides when the window information must be looked up again.

    A visible window is refreshed once every 31 calls; a hidden one every call.
    """

    def __init__(self) -> None:
        self._ticks = 0

    def should_refresh(self, visible: bool) -> bool:
        if not visible:
            return True
        if self._ticks < _REFRESH_TICKS:
            self._ticks += 1
            return False
        self._ticks = 0
        return True