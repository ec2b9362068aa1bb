"""Image helpers used by the detectors: resizing, grey conversion and template matching."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from PIL import Image

_GRAY_WEIGHTS = np.array([0.299, 0.587, 0.114])
# Windows whose weighted variance per unit weight falls below this count as flat.
_VAR_EPS = 1e-9


def _cast_like(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.clip(np.rint(values), info.min, info.max).astype(dtype)
    return values.astype(dtype)


def resize(
    image: np.ndarray,
    size: Optional[Sequence[int]] = None,
    fx: float = 0.0,
    fy: float = 0.0,
) -> np.ndarray:
    """Resize with bilinear interpolation.

    ``size`` is ``(width, height)``; when it is missing or ``(0, 0)`` the
    scale factors ``fx`` and ``fy`` give the new size instead.
    """
    arr = np.asarray(image)
    if arr.ndim not in (2, 3) or arr.size == 0:
        raise ValueError("cannot resize an empty image")
    height, width = arr.shape[:2]
    if size is None or (int(size[0]) == 0 and int(size[1]) == 0):
        if fx <= 0 or fy <= 0:
            raise ValueError("either a size or positive scale factors are required")
        new_width, new_height = int(round(width * fx)), int(round(height * fy))
    else:
        new_width, new_height = int(size[0]), int(size[1])
    if new_width <= 0 or new_height <= 0:
        raise ValueError("target size must be positive")
    if (new_width, new_height) == (width, height):
        return arr.copy()

    planes = [arr] if arr.ndim == 2 else list(np.moveaxis(arr, -1, 0))
    resized = [
        np.asarray(
            Image.fromarray(np.ascontiguousarray(plane, dtype=np.float32)).resize(
                (new_width, new_height), Image.Resampling.BILINEAR
            )
        )
        for plane in planes
    ]
    out = resized[0] if arr.ndim == 2 else np.stack(resized, axis=-1)
    return _cast_like(out, arr.dtype)


def to_gray(image: np.ndarray) -> np.ndarray:
    """Convert an RGB or RGBA image to one grey channel; grey images are copied."""
    arr = np.asarray(image)
    if arr.ndim == 2:
        return arr.copy()
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("expected a grey, RGB or RGBA image")
    gray = arr[..., :3].astype(np.float64) @ _GRAY_WEIGHTS
    return _cast_like(gray, arr.dtype)


def match_template(
    image: np.ndarray,
    template: np.ndarray,
    mask: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Normalised correlation coefficient of ``template`` at every offset in ``image``.

    The result has shape ``(H - h + 1, W - w + 1)``. An optional ``mask`` of the
    template's shape weights each template pixel. Flat windows score 0.
    """
    img = np.asarray(image, dtype=np.float64)
    tpl = np.asarray(template, dtype=np.float64)
    if img.ndim != 2 or tpl.ndim != 2:
        raise ValueError("match_template expects single-channel images")
    th, tw = tpl.shape
    if th == 0 or tw == 0:
        raise ValueError("template is empty")
    if img.shape[0] < th or img.shape[1] < tw:
        raise ValueError("template is larger than the image")
    weights = np.ones_like(tpl) if mask is None else np.asarray(mask, dtype=np.float64)
    if weights.shape != tpl.shape:
        raise ValueError("mask must have the template's shape")

    result = np.zeros((img.shape[0] - th + 1, img.shape[1] - tw + 1))
    total = weights.sum()
    if total <= 0:
        return result

    weights_sq = weights * weights
    t_centred = weights * (tpl - (weights * tpl).sum() / total)
    t_weighted = t_centred * weights
    t_var = float((t_centred * t_centred).sum())
    tolerance = _VAR_EPS * weights_sq.sum()
    if t_var <= tolerance:
        return result

    windows = sliding_window_view(img, tpl.shape)
    for out_row, rows in zip(result, windows):
        means = np.einsum("jkl,kl->j", rows, weights) / total
        centred = rows - means[:, None, None]
        numerator = np.einsum("jkl,kl->j", centred, t_weighted)
        variance = np.einsum("jkl,kl->j", centred * centred, weights_sq)
        valid = variance > tolerance
        out_row[valid] = numerator[valid] / np.sqrt(variance[valid] * t_var)
    np.clip(result, -1.0, 1.0, out=result)
    return result


def min_max_loc(
    result: np.ndarray,
) -> Tuple[float, float, Tuple[int, int], Tuple[int, int]]:
    """Return ``(min_value, max_value, min_location, max_location)``; locations are ``(x, y)``."""
    arr = np.asarray(result)
    if arr.ndim != 2 or arr.size == 0:
        raise ValueError("expected a non-empty two-dimensional array")
    min_y, min_x = np.unravel_index(int(np.argmin(arr)), arr.shape)
    max_y, max_x = np.unravel_index(int(np.argmax(arr)), arr.shape)
    return (
        float(arr[min_y, min_x]),
        float(arr[max_y, max_x]),
        (int(min_x), int(min_y)),
        (int(max_x), int(max_y)),
    )