"""Decoding of uncompressed Windows bitmaps into numpy arrays."""

from __future__ import annotations

import struct

import numpy as np

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_MIN_INFO_SIZE = 40
_BI_RGB = 0


class BmpError(ValueError):
    """The data is not a bitmap this decoder understands."""


def decode_bmp(data: bytes) -> np.ndarray:
    """Decode a 24- or 32-bit uncompressed bitmap.

    Returns a ``(height, width, channels)`` uint8 array, top row first, in RGB
    order for 24-bit data and RGBA order for 32-bit data.
    """
    buf = bytes(data)
    if len(buf) < _FILE_HEADER.size + _MIN_INFO_SIZE:
        raise BmpError("data is too short for a bitmap header")
    magic, _file_size, _reserved1, _reserved2, offset = _FILE_HEADER.unpack_from(buf, 0)
    if magic != b"BM":
        raise BmpError("missing 'BM' signature")
    (
        header_size,
        width,
        height,
        planes,
        bpp,
        compression,
        *_rest,
    ) = _INFO_HEADER.unpack_from(buf, _FILE_HEADER.size)
    if header_size < _MIN_INFO_SIZE:
        raise BmpError(f"unsupported info header of {header_size} bytes")
    if planes != 1:
        raise BmpError(f"expected one colour plane, found {planes}")
    if compression != _BI_RGB:
        raise BmpError(f"unsupported compression {compression}")
    if bpp not in (24, 32):
        raise BmpError(f"unsupported bit depth {bpp}")
    if width <= 0 or height == 0:
        raise BmpError("bitmap has no pixels")

    rows = abs(height)
    channels = bpp // 8
    stride = (width * bpp + 31) // 32 * 4
    if offset < _FILE_HEADER.size + header_size:
        raise BmpError("pixel data overlaps the headers")
    if offset + stride * rows > len(buf):
        raise BmpError("pixel data is truncated")

    raw = np.frombuffer(buf, dtype=np.uint8, count=stride * rows, offset=offset)
    pixels = raw.reshape(rows, stride)[:, : width * channels].reshape(rows, width, channels)
    if height > 0:
        pixels = pixels[::-1]
    order = [2, 1, 0] + ([3] if channels == 4 else [])
    return np.ascontiguousarray(pixels[..., order])