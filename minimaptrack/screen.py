"""Grabbing the game frame and cutting out the regions the detectors look at."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from .layout import Rect, WindowLayout
from .matching import resize

_CAPTURE_INTERVAL = 0.020
_NO_RECT = Rect(0, 0, 0, 0)


def _empty() -> np.ndarray:
    return np.zeros((0, 0), dtype=np.uint8)


@dataclass(eq=False)
class Screen:
    """A normalised frame, its regions of interest and the detection settings."""

    img_screen: np.ndarray = field(default_factory=_empty)
    img_paimon_maybe: np.ndarray = field(default_factory=_empty)
    img_minimap_cailb_maybe: np.ndarray = field(default_factory=_empty)
    img_minimap_maybe: np.ndarray = field(default_factory=_empty)
    img_uid_maybe: np.ndarray = field(default_factory=_empty)
    img_left_give_items_maybe: np.ndarray = field(default_factory=_empty)
    img_right_pick_items_maybe: np.ndarray = field(default_factory=_empty)
    img_uid: np.ndarray = field(default_factory=_empty)
    rect_client: Rect = _NO_RECT
    rect_paimon_maybe: Rect = _NO_RECT
    rect_minimap_cailb_maybe: Rect = _NO_RECT
    rect_minimap_maybe: Rect = _NO_RECT
    rect_paimon: Rect = _NO_RECT
    rect_minimap: Rect = _NO_RECT
    rect_minimap_handle: Rect = _NO_RECT
    is_used_alpha: bool = True
    is_handle_mode: bool = False
    is_search_mode: bool = False


def _crop(image: np.ndarray, rect: Rect) -> np.ndarray:
    height, width = image.shape[:2]
    if rect.x < 0 or rect.y < 0 or rect.x + rect.width > width or rect.y + rect.height > height:
        raise ValueError(f"region {rect} lies outside a {width}x{height} frame")
    return image[rect.y : rect.y + rect.height, rect.x : rect.x + rect.width]


def crop_screen(
    frame: np.ndarray,
    layout: WindowLayout,
    window_rect: Sequence[int],
    client_rect: Sequence[int],
) -> Screen:
    """Scale ``frame`` to the layout's frame size and cut out every region.

    ``window_rect`` and ``client_rect`` are ``(left, top, right, bottom)``.
    """
    arr = np.asarray(frame)
    if arr.size == 0 or arr.ndim not in (2, 3):
        raise ValueError("frame is empty")
    scaled = resize(arr, layout.frame_size)
    left, top = int(window_rect[0]), int(window_rect[1])
    c_left, c_top, c_right, c_bottom = (int(v) for v in client_rect)
    return Screen(
        img_screen=scaled,
        img_paimon_maybe=_crop(scaled, layout.paimon_maybe),
        img_minimap_cailb_maybe=_crop(scaled, layout.minimap_cailb_maybe),
        img_minimap_maybe=_crop(scaled, layout.minimap_maybe),
        img_uid_maybe=_crop(scaled, layout.uid_maybe),
        img_left_give_items_maybe=_crop(scaled, layout.left_give_items_maybe),
        img_right_pick_items_maybe=_crop(scaled, layout.right_pick_items_maybe),
        img_uid=_crop(scaled, layout.uid),
        rect_client=Rect(left, top, c_right - c_left, c_bottom - c_top),
        rect_paimon_maybe=layout.paimon_maybe,
        rect_minimap_cailb_maybe=layout.minimap_cailb_maybe,
        rect_minimap_maybe=layout.minimap_maybe,
        is_used_alpha=arr.ndim == 3 and arr.shape[2] == 4,
    )


@dataclass
class ScreenGrabber:
    """Captures frames at most once every 20 ms and crops them into a Screen."""

    window_rect: Tuple[int, int, int, int] = (0, 0, 0, 0)
    client_rect: Tuple[int, int, int, int] = (0, 0, 0, 0)
    _frame: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _last_time: Optional[float] = field(default=None, init=False, repr=False)

    def grab(
        self,
        layout: WindowLayout,
        capture: Callable[[], Optional[np.ndarray]],
        now: Optional[float] = None,
    ) -> Optional[Screen]:
        """Return the current screen, or None when nothing could be captured."""
        if now is None:
            now = time.monotonic()
        stale = self._last_time is None or now - self._last_time > _CAPTURE_INTERVAL
        if stale or self._frame is None:
            self._last_time = now
            captured = capture()
            if captured is None or np.asarray(captured).size == 0:
                self._frame = None
            else:
                self._frame = np.asarray(captured)
        if self._frame is None:
            return None
        screen = crop_screen(self._frame, layout, self.window_rect, self.client_rect)
        self._frame = screen.img_screen
        return screen