"""Locating the avatar on the world map from the minimap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple

import numpy as np

from .filters import Filter
from .layout import Rect
from .matching import match_template, min_max_loc, resize

Point = Tuple[float, float]

_YELLOW_RECT = Rect(0, 18, 22, 38)
_COLOR_MAP_CELL = 100


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one minimap against the world map."""

    position: Point
    is_continuity: bool
    is_coveying: bool
    is_success: bool


class MinimapMatcher(Protocol):
    """Anything that can locate a minimap image on the world map."""

    def match(self, minimap: np.ndarray) -> MatchResult:
        ...


def to_color(image: np.ndarray) -> np.ndarray:
    """Reduce an RGBA image to one 1x1 pixel: the mean colour of its corners.

    The alpha of the result is set to 255.
    """
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("to_color expects an RGBA image")
    rows, cols = arr.shape[:2]
    s_len = int((cols + rows) * 0.25 * 0.8)
    if s_len <= 0 or s_len > rows or s_len > cols:
        raise ValueError("image is too small or too narrow to sample its corners")
    corners = [
        arr[:s_len, :s_len],
        arr[:s_len, cols - s_len :],
        arr[rows - s_len :, :s_len],
        arr[rows - s_len :, cols - s_len :],
    ]
    tl, tr, bl, br = (resize(corner, (3, 3)) for corner in corners)
    grid = np.zeros((6, 6, 4), dtype=arr.dtype)
    grid[:3, :3] = tl
    grid[:3, 3:] = tr
    grid[3:, :3] = bl
    grid[3:, 3:] = br
    color = resize(grid, (1, 1))
    color[0, 0, 3] = 255
    return color


def _match_color(image: np.ndarray, template: np.ndarray) -> np.ndarray:
    img = np.asarray(image)
    tpl = np.asarray(template)
    if img.ndim == 2 and tpl.ndim == 2:
        return match_template(img, tpl)
    if img.ndim != 3 or tpl.ndim != 3 or img.shape[2] != tpl.shape[2]:
        raise ValueError("image and template must have the same number of channels")
    channels = img.shape[2]
    flat = match_template(
        img.reshape(img.shape[0], -1), tpl.reshape(tpl.shape[0], -1)
    )
    return flat[:, ::channels]


def find_direction_in_all(color_map: np.ndarray, minimap: np.ndarray) -> Tuple[int, int]:
    """Rough position of the avatar from the minimap's colour.

    ``color_map`` is the world map scaled down by 100; each of its pixels stands
    for a 100x100 block, and the centre of the best-matching block is returned.
    """
    mini = np.asarray(minimap)
    rows, cols = mini.shape[:2]
    border = int((rows + cols) * 0.5 * 0.15)
    if cols - 2 * border <= 0 or rows - 2 * border <= 0:
        raise ValueError("minimap is too small")
    inner = mini[border : rows - border, border : cols - border]
    color = to_color(inner)
    _, _, _, (mx, my) = min_max_loc(_match_color(color_map, color))
    half = _COLOR_MAP_CELL // 2
    return mx * _COLOR_MAP_CELL + half, my * _COLOR_MAP_CELL + half


def find_block_in_direction(pos: Sequence[float]) -> Tuple[int, int]:
    """Block the rough position falls in: (-1, 0) inside the yellow area, else (0, 0)."""
    if _YELLOW_RECT.contains(pos):
        return -1, 0
    return 0, 0


def apply_filter(
    position: Sequence[float], pos_filter: Filter, is_coveying: bool, is_continuity: bool
) -> Point:
    """Filter a position, restarting the filter after a jump or a lost track."""
    if is_coveying or not is_continuity:
        return pos_filter.reinit(position)
    return pos_filter.filter(position)


class PositionTracker:
    """Tracks the avatar position from successive minimap images."""

    def __init__(
        self,
        matcher: MinimapMatcher,
        pos_filter: Optional[Filter] = None,
        use_filter: bool = True,
    ) -> None:
        self.matcher = matcher
        self.pos_filter = pos_filter
        self.use_filter = use_filter
        self.position: Point = (0.0, 0.0)
        self.is_continuity = False
        self.is_coveying = False
        self.last_match_minimap: Optional[np.ndarray] = None

    def update(self, minimap: np.ndarray, paimon_found: bool) -> Optional[Point]:
        """Match one minimap; None when the icon is missing or the minimap empty."""
        if not paimon_found:
            return None
        arr = np.asarray(minimap)
        if arr.size == 0:
            return None
        result = self.matcher.match(arr)
        self.is_continuity = result.is_continuity
        self.is_coveying = result.is_coveying
        position = (float(result.position[0]), float(result.position[1]))
        if self.use_filter and self.pos_filter is not None:
            position = apply_filter(
                position, self.pos_filter, self.is_coveying, self.is_continuity
            )
        self.position = position
        self.last_match_minimap = arr.copy() if result.is_success else None
        return position