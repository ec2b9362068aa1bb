"""Detection of the Paimon menu icon in the top-left corner of the frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from .layout import Rect
from .matching import match_template, min_max_loc, resize, to_gray
from .screen import Screen

_TEMPLATE_SIZE = (68, 77)
_HANDLE_SCALE = 1.0 / 1.20
_MIN_SEARCH_SCORE = 0.2
_NO_RECT = Rect(0, 0, 0, 0)

KeyPoint = Tuple[Tuple[int, int], Tuple[int, int, int]]


@dataclass(frozen=True, eq=False)
class PaimonTemplates:
    """Alpha and grey templates of the icon at normal and controller scale."""

    alpha: np.ndarray
    alpha_handle: np.ndarray
    gray: np.ndarray
    gray_handle: np.ndarray

    @classmethod
    def from_rgba(cls, image: np.ndarray) -> "PaimonTemplates":
        """Build the templates from an RGBA picture of the icon."""
        arr = np.asarray(image)
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError("the icon picture must have four channels")
        paimon = resize(arr, _TEMPLATE_SIZE)
        gray = to_gray(paimon)
        alpha = paimon[..., 3].copy()
        return cls(
            alpha=alpha,
            alpha_handle=resize(alpha, None, _HANDLE_SCALE, _HANDLE_SCALE),
            gray=gray,
            gray_handle=resize(gray, None, _HANDLE_SCALE, _HANDLE_SCALE),
        )


@dataclass
class PaimonConfig:
    """Thresholds and key points used to recognise the icon."""

    check_match_paimon_params: float
    check_match_paimon_params_no_alpha: float
    check_match_paimon_keypoint_params: float
    paimon_check_vec: List[KeyPoint] = field(default_factory=list)
    paimon_handle_check_vec: List[KeyPoint] = field(default_factory=list)
    rect_paimon_keypoint: Rect = _NO_RECT
    rect_paimon_keypoint_handle: Rect = _NO_RECT


@dataclass
class PaimonState:
    """Result of the last detection, carried from frame to frame."""

    config: PaimonConfig
    is_visible: bool = False
    is_handle_mode: bool = False
    is_search_mode: bool = False
    rect_paimon: Rect = _NO_RECT


def keypoint_diff(image: np.ndarray, roi: Rect, keys: Sequence[KeyPoint]) -> float:
    """Mean colour distance between ``image`` and the expected key-point colours.

    Key points are offsets from the top-left corner of ``roi``.
    """
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("key points are checked on a colour image")
    if not keys:
        return 0.0
    height, width = arr.shape[:2]
    ox, oy = roi.tl()
    distances = []
    for (px, py), color in keys:
        x, y = ox + px, oy + py
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"key point ({x}, {y}) lies outside the image")
        pixel = arr[y, x, :3].astype(np.float64)
        distances.append(float(np.linalg.norm(pixel - np.asarray(color, dtype=np.float64))))
    return sum(distances) / len(keys)


def _found(state: PaimonState, rect: Rect, handle: bool) -> bool:
    state.is_handle_mode = handle
    state.is_visible = True
    state.rect_paimon = rect
    state.is_search_mode = True
    if handle:
        state.config.rect_paimon_keypoint_handle = rect
    else:
        state.config.rect_paimon_keypoint = rect
    return True


def search_paimon(screen: Screen, state: PaimonState, templates: PaimonTemplates) -> bool:
    """Look for the icon by template matching over the whole candidate region."""
    ref = np.asarray(screen.img_paimon_maybe)
    origin_x, origin_y = screen.rect_paimon_maybe.tl()
    if ref.size == 0 or templates.alpha_handle.size == 0:
        return False
    t_height, t_width = templates.alpha.shape
    if ref.shape[1] < t_width or ref.shape[0] < t_height:
        return False

    config = state.config
    template, template_handle = templates.alpha, templates.alpha_handle
    mask = mask_handle = None
    threshold = config.check_match_paimon_params
    if not screen.is_used_alpha:
        ref = to_gray(ref)
        template, template_handle = templates.gray, templates.gray_handle
        mask, mask_handle = templates.alpha, templates.alpha_handle
        threshold = config.check_match_paimon_params_no_alpha

    channel = ref if ref.ndim == 2 else ref[..., -1]

    _, max_val, _, (lx, ly) = min_max_loc(match_template(channel, template, mask))
    if max_val >= threshold and max_val != 1:
        return _found(state, Rect(origin_x + lx, origin_y + ly, t_width, t_height), False)
    if max_val <= _MIN_SEARCH_SCORE:
        state.is_visible = False
        return False

    _, max_val, _, (lx, ly) = min_max_loc(match_template(channel, template_handle, mask_handle))
    if max_val > threshold:
        h_height, h_width = templates.alpha_handle.shape
        return _found(state, Rect(origin_x + lx, origin_y + ly, h_width, h_height), True)
    state.is_visible = False
    return False


def check_paimon(screen: Screen, state: PaimonState, templates: PaimonTemplates) -> bool:
    """Check the icon at its known positions first, then fall back to searching."""
    ref = np.asarray(screen.img_paimon_maybe)
    if ref.size == 0:
        return False
    config = state.config

    diff = keypoint_diff(ref, config.rect_paimon_keypoint, config.paimon_check_vec)
    if diff < config.check_match_paimon_keypoint_params:
        state.is_handle_mode = False
        state.is_visible = True
        state.rect_paimon = config.rect_paimon_keypoint
        return True

    diff = keypoint_diff(ref, config.rect_paimon_keypoint_handle, config.paimon_handle_check_vec)
    if diff < config.check_match_paimon_keypoint_params:
        state.is_handle_mode = True
        state.is_visible = True
        state.rect_paimon = config.rect_paimon_keypoint_handle
        return True

    return search_paimon(screen, state, templates)