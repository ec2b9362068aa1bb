import struct

import numpy as np

from minimaptrack.bmp import decode_bmp
from minimaptrack.uid_label import uid_label_bmp, uid_label_image


def test_bmp_has_signature():
    assert uid_label_bmp()[:2] == b"BM"


def test_header_dimensions_match_image_shape():
    data = uid_label_bmp()
    width, height = struct.unpack_from("<ii", data, 18)
    assert uid_label_image().shape == (abs(height), width, 4)


def test_image_size_is_46_by_18():
    assert uid_label_image().shape == (18, 46, 4)


def test_bmp_holds_all_pixel_rows():
    data = uid_label_bmp()
    offset = struct.unpack_from("<I", data, 10)[0]
    assert len(data) >= offset + 46 * 18 * 4


def test_image_matches_decoded_bytes():
    np.testing.assert_array_equal(uid_label_image(), decode_bmp(uid_label_bmp()))


def test_bottom_left_pixel_from_first_stored_bytes():
    image = uid_label_image()
    assert image.dtype == np.uint8
    assert tuple(int(v) for v in image[-1, 0]) == (128, 128, 128, 0)


def test_first_stored_row_is_bottom_row():
    data = uid_label_bmp()
    offset = struct.unpack_from("<I", data, 10)[0]
    raw = np.frombuffer(data, dtype=np.uint8, count=46 * 4, offset=offset).reshape(46, 4)
    expected = raw[:, [2, 1, 0, 3]]
    np.testing.assert_array_equal(uid_label_image()[-1], expected)


def test_image_is_a_fresh_copy():
    first = uid_label_image()
    first[:] = 0
    second = uid_label_image()
    assert int(second.max()) == 255


def test_label_contains_opaque_white_pixels():
    image = uid_label_image()
    opaque = image[..., 3] == 255
    assert opaque.any()
    assert (image[opaque][:, :3] == 255).all()