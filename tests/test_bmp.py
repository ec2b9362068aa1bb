import struct

import numpy as np
import pytest

from minimaptrack.bmp import BmpError, decode_bmp


def _encode(image, top_down=False, bpp=None, compression=0, planes=1, magic=b"BM"):
    height, width, channels = image.shape
    bits = bpp if bpp is not None else channels * 8
    stride = (width * channels * 8 + 31) // 32 * 4
    order = [2, 1, 0] + ([3] if channels == 4 else [])
    swapped = image[..., order].astype(np.uint8)
    sequence = swapped if top_down else swapped[::-1]
    rows = []
    for row in sequence:
        raw = row.tobytes()
        rows.append(raw + b"\0" * (stride - len(raw)))
    pixel_data = b"".join(rows)
    info = struct.pack(
        "<IiiHHIIiiII",
        40,
        width,
        -height if top_down else height,
        planes,
        bits,
        compression,
        len(pixel_data),
        2835,
        2835,
        0,
        0,
    )
    header = struct.pack("<2sIHHI", magic, 54 + len(pixel_data), 0, 0, 54)
    return header + info + pixel_data


def _random_image(height, width, channels, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)


def test_round_trip_24_bit_with_row_padding():
    image = _random_image(4, 3, 3)
    decoded = decode_bmp(_encode(image))
    assert decoded.shape == (4, 3, 3)
    assert np.array_equal(decoded, image)


def test_round_trip_32_bit_bottom_up():
    image = _random_image(5, 7, 4, seed=1)
    assert np.array_equal(decode_bmp(_encode(image)), image)


def test_round_trip_32_bit_top_down():
    image = _random_image(6, 2, 4, seed=2)
    assert np.array_equal(decode_bmp(_encode(image, top_down=True)), image)


def test_channels_are_returned_in_rgb_order():
    image = np.array([[[10, 20, 30, 40]]], dtype=np.uint8)
    data = _encode(image)
    assert data[54:58] == bytes([30, 20, 10, 40])
    assert decode_bmp(data)[0, 0].tolist() == [10, 20, 30, 40]


def test_bad_signature_is_rejected():
    with pytest.raises(BmpError):
        decode_bmp(_encode(_random_image(2, 2, 3), magic=b"XX"))


def test_short_data_is_rejected():
    with pytest.raises(BmpError):
        decode_bmp(b"BM" + b"\0" * 10)


def test_truncated_pixels_are_rejected():
    data = _encode(_random_image(3, 3, 4))
    with pytest.raises(BmpError):
        decode_bmp(data[:-5])


def test_compression_is_rejected():
    with pytest.raises(BmpError):
        decode_bmp(_encode(_random_image(2, 2, 3), compression=1))


def test_unsupported_bit_depth_is_rejected():
    with pytest.raises(BmpError):
        decode_bmp(_encode(_random_image(2, 2, 3), bpp=8))


def test_wrong_plane_count_is_rejected():
    with pytest.raises(BmpError):
        decode_bmp(_encode(_random_image(2, 2, 3), planes=2))


def test_bmp_error_is_a_value_error():
    with pytest.raises(ValueError):
        decode_bmp(b"")