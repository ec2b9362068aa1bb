"""Locating the minimap from the Paimon icon and the minimap calibration mark."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .layout import Rect
from .matching import match_template, min_max_loc, resize, to_gray
from .screen import Screen

_TEMPLATE_SCALE = 0.8
_HANDLE_SCALE = 1.0 / 1.2
_NO_RECT = Rect(0, 0, 0, 0)


def _empty() -> np.ndarray:
    return np.zeros((0, 0), dtype=np.uint8)


@dataclass(frozen=True, eq=False)
class CailbTemplates:
    """Templates of the calibration mark at normal and controller scale.

    ``alpha`` and ``alpha_handle`` come from the alpha channel; ``no_alpha`` is
    the first colour channel. The controller-scale template used for frames
    without alpha is taken from the alpha channel as well.
    """

    alpha: np.ndarray
    alpha_handle: np.ndarray
    no_alpha: np.ndarray
    no_alpha_handle: np.ndarray

    @classmethod
    def from_rgba(cls, image: np.ndarray) -> "CailbTemplates":
        """Build the templates from an RGBA picture of the calibration mark."""
        arr = np.asarray(image)
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError("the calibration picture must have four channels")
        scaled = resize(arr, None, _TEMPLATE_SCALE, _TEMPLATE_SCALE)
        alpha = scaled[..., 3].copy()
        handle = resize(alpha, None, _HANDLE_SCALE, _HANDLE_SCALE)
        return cls(
            alpha=alpha,
            alpha_handle=handle,
            no_alpha=scaled[..., 0].copy(),
            no_alpha_handle=handle.copy(),
        )


@dataclass
class CailbState:
    """Thresholds and the result of the last calibration-mark match."""

    check_match_minimap_cailb_params: float
    check_match_minimap_cailb_params_no_alpha: float
    is_visible: bool = False
    rect_minimap_cailb: Rect = _NO_RECT


@dataclass(eq=False)
class Minimap:
    """The minimap image and the sub-regions cut out of it."""

    img_minimap: np.ndarray = field(default_factory=_empty)
    rect_minimap: Rect = _NO_RECT
    point_minimap_center: Tuple[int, int] = (0, 0)
    rect_avatar: Rect = _NO_RECT
    img_avatar: np.ndarray = field(default_factory=_empty)
    rect_viewer: Rect = _NO_RECT
    img_viewer: np.ndarray = field(default_factory=_empty)
    rect_stars: Rect = _NO_RECT
    img_stars: np.ndarray = field(default_factory=_empty)


def _crop(image: np.ndarray, rect: Rect) -> np.ndarray:
    height, width = image.shape[:2]
    if rect.x < 0 or rect.y < 0 or rect.x + rect.width > width or rect.y + rect.height > height:
        raise ValueError(f"region {rect} lies outside a {width}x{height} image")
    return image[rect.y : rect.y + rect.height, rect.x : rect.x + rect.width]


def _rect_from_points(a: Tuple[int, int], b: Tuple[int, int]) -> Rect:
    x, y = min(a[0], b[0]), min(a[1], b[1])
    return Rect(x, y, abs(a[0] - b[0]), abs(a[1] - b[1]))


def match_minimap_cailb(screen: Screen, state: CailbState, templates: CailbTemplates) -> bool:
    """Search the calibration mark; False when the search could not run.

    When the search runs, ``state.is_visible`` tells whether the mark was seen.
    """
    ref = np.asarray(screen.img_minimap_cailb_maybe)
    if ref.size == 0 or templates.alpha_handle.size == 0:
        return False
    t_height, t_width = templates.alpha.shape
    if ref.shape[1] < t_width or ref.shape[0] < t_height:
        return False

    template, template_handle = templates.alpha, templates.alpha_handle
    threshold = state.check_match_minimap_cailb_params
    if not screen.is_used_alpha:
        ref = to_gray(ref)
        template, template_handle = templates.no_alpha, templates.no_alpha_handle
        threshold = state.check_match_minimap_cailb_params_no_alpha

    channel = ref if ref.ndim == 2 else ref[..., -1]
    used = template_handle if screen.is_handle_mode else template
    _, max_val, _, (lx, ly) = min_max_loc(match_template(channel, used))

    if max_val < threshold or max_val == 1:
        state.is_visible = False
        return True
    origin_x, origin_y = screen.rect_minimap_cailb_maybe.tl()
    u_height, u_width = used.shape
    state.is_visible = True
    state.rect_minimap_cailb = Rect(origin_x + lx, origin_y + ly, u_width, u_height)
    return True


def minimap_regions(screen: Screen, minimap_rect: Rect) -> Minimap:
    """Cut the minimap and its avatar, viewer and star regions out of the frame."""
    img = _crop(np.asarray(screen.img_screen), minimap_rect)
    w, h = minimap_rect.width, minimap_rect.height
    center = (minimap_rect.x + w // 2, minimap_rect.y + h // 2)

    def sub(offset: float, size: float) -> Rect:
        return Rect(round(w * offset), round(h * offset), round(w * size), round(h * size))

    avatar = sub(0.4, 0.2)
    viewer = sub(0.2, 0.6)
    stars = sub(0.165, 0.67)
    return Minimap(
        img_minimap=img,
        rect_minimap=minimap_rect,
        point_minimap_center=center,
        rect_avatar=avatar,
        img_avatar=_crop(img, avatar),
        rect_viewer=viewer,
        img_viewer=_crop(img, viewer),
        rect_stars=stars,
        img_stars=_crop(img, stars),
    )


def calibrate_minimap(
    screen: Screen, state: CailbState, templates: CailbTemplates
) -> Optional[Minimap]:
    """Find the minimap; None when the Paimon icon or the calibration mark is missing.

    In search mode the minimap spans from the middle of the Paimon icon to the
    middle of the calibration mark; otherwise the known rectangle is used.
    """
    paimon = screen.rect_paimon
    if paimon.is_empty():
        return None
    minimap_rect = screen.rect_minimap_handle if screen.is_handle_mode else screen.rect_minimap
    if screen.is_search_mode:
        if not match_minimap_cailb(screen, state, templates) or not state.is_visible:
            return None
        cailb = state.rect_minimap_cailb
        left = paimon.x + paimon.width // 2
        right = cailb.x + cailb.width // 2
        top = (paimon.y + cailb.y) // 2
        size = right - left
        minimap_rect = _rect_from_points((left, top), (right, top + size))
    return minimap_regions(screen, minimap_rect)