import numpy as np
import pytest

from minimaptrack.layout import Rect, compute_layout
from minimaptrack.paimon import (
    PaimonConfig,
    PaimonState,
    PaimonTemplates,
    check_paimon,
    keypoint_diff,
    search_paimon,
)
from minimaptrack.screen import Screen, crop_screen

LAYOUT = compute_layout(1920, 1080)
WHITE_KEYS = [((2, 3), (255, 255, 255)), ((5, 1), (255, 255, 255))]


def _paimon_rgba():
    yy, xx = np.mgrid[0:90, 0:80]
    img = np.zeros((90, 80, 4), np.uint8)
    blob = ((xx - 40) ** 2 / 30**2 + (yy - 45) ** 2 / 38**2) <= 1
    hole = ((xx - 40) ** 2 + (yy - 35) ** 2) <= 64
    img[..., :3] = 200
    img[..., 3] = np.where(blob & ~hole, 255, 0)
    return img


@pytest.fixture(scope="module")
def templates():
    return PaimonTemplates.from_rgba(_paimon_rgba())


def _config(**kwargs):
    return PaimonConfig(
        check_match_paimon_params=0.9,
        check_match_paimon_params_no_alpha=0.85,
        check_match_paimon_keypoint_params=10.0,
        **kwargs,
    )


def _screen(frame):
    return crop_screen(frame, LAYOUT, (0, 0, 1920, 1080), (0, 0, 1920, 1080))


def _frame_with(pattern, offset, seed=0):
    frame = np.zeros((1080, 1920, 4), np.uint8)
    ox, oy = offset
    h, w = pattern.shape
    noise = np.random.default_rng(seed).integers(-4, 5, size=(h, w))
    frame[oy : oy + h, ox : ox + w, 3] = np.clip(pattern.astype(int) + noise, 0, 255)
    return frame


def test_templates_have_fixed_size_and_smaller_handle_versions(templates):
    assert templates.alpha.shape == (77, 68)
    assert templates.gray.shape == templates.alpha.shape
    assert templates.alpha_handle.shape == templates.gray_handle.shape
    assert templates.alpha_handle.shape[0] < 77
    assert templates.alpha_handle.shape[1] < 68


def test_templates_require_alpha_channel():
    with pytest.raises(ValueError):
        PaimonTemplates.from_rgba(np.zeros((10, 10, 3), np.uint8))


def test_keypoint_diff_exact_colours_is_zero():
    img = np.zeros((6, 6, 4), np.uint8)
    img[1, 2, :3] = (10, 20, 30)
    assert keypoint_diff(img, Rect(0, 0, 6, 6), [((2, 1), (10, 20, 30))]) == 0.0


def test_keypoint_diff_is_euclidean_distance():
    img = np.zeros((4, 4, 3), np.uint8)
    assert keypoint_diff(img, Rect(0, 0, 4, 4), [((1, 1), (3, 4, 0))]) == pytest.approx(5.0)


def test_keypoint_diff_averages_over_keys():
    img = np.zeros((4, 4, 3), np.uint8)
    one = keypoint_diff(img, Rect(0, 0, 4, 4), [((1, 1), (30, 40, 0))])
    two = keypoint_diff(img, Rect(0, 0, 4, 4), [((1, 1), (30, 40, 0)), ((2, 2), (0, 0, 0))])
    assert two == pytest.approx(one / 2)


def test_keypoint_diff_roi_offset_equals_shifted_keys():
    img = np.random.default_rng(1).integers(0, 256, size=(10, 10, 3)).astype(np.uint8)
    keys = [((1, 2), (50, 60, 70)), ((3, 0), (5, 6, 7))]
    shifted = [((x + 4, y + 3), c) for (x, y), c in keys]
    assert keypoint_diff(img, Rect(4, 3, 5, 5), keys) == keypoint_diff(img, Rect(0, 0, 5, 5), shifted)


def test_keypoint_diff_out_of_image_raises():
    with pytest.raises(ValueError):
        keypoint_diff(np.zeros((4, 4, 3), np.uint8), Rect(3, 3, 2, 2), [((2, 2), (0, 0, 0))])


def test_keypoint_diff_requires_colour_image():
    with pytest.raises(ValueError):
        keypoint_diff(np.zeros((4, 4), np.uint8), Rect(0, 0, 4, 4), [((0, 0), (0, 0, 0))])


def test_check_paimon_by_normal_keypoints(templates):
    frame = np.zeros((1080, 1920, 4), np.uint8)
    frame[13, 12] = (10, 20, 30, 255)
    frame[11, 15] = (40, 50, 60, 255)
    keypoint_rect = Rect(10, 10, 68, 77)
    state = PaimonState(
        config=_config(
            paimon_check_vec=[((2, 3), (10, 20, 30)), ((5, 1), (40, 50, 60))],
            rect_paimon_keypoint=keypoint_rect,
        )
    )
    assert check_paimon(_screen(frame), state, templates) is True
    assert state.is_visible is True
    assert state.is_handle_mode is False
    assert state.rect_paimon == keypoint_rect


def test_check_paimon_by_handle_keypoints(templates):
    frame = np.zeros((1080, 1920, 4), np.uint8)
    frame[23, 52] = (10, 20, 30, 255)
    handle_rect = Rect(50, 20, 57, 64)
    state = PaimonState(
        config=_config(
            paimon_check_vec=WHITE_KEYS,
            paimon_handle_check_vec=[((2, 3), (10, 20, 30))],
            rect_paimon_keypoint_handle=handle_rect,
        )
    )
    assert check_paimon(_screen(frame), state, templates) is True
    assert state.is_handle_mode is True
    assert state.rect_paimon == handle_rect


def test_search_paimon_finds_icon_and_remembers_position(templates):
    screen = _screen(_frame_with(templates.alpha, (30, 15)))
    state = PaimonState(config=_config())
    assert search_paimon(screen, state, templates) is True
    expected = Rect(30, 15, templates.alpha.shape[1], templates.alpha.shape[0])
    assert state.rect_paimon == expected
    assert state.config.rect_paimon_keypoint == expected
    assert state.is_search_mode is True
    assert state.is_handle_mode is False


def test_search_paimon_finds_controller_scale_icon(templates):
    screen = _screen(_frame_with(templates.alpha_handle, (40, 20)))
    state = PaimonState(config=_config())
    assert search_paimon(screen, state, templates) is True
    h, w = templates.alpha_handle.shape
    assert state.is_handle_mode is True
    assert state.rect_paimon == Rect(40, 20, w, h)
    assert state.config.rect_paimon_keypoint_handle == state.rect_paimon


def test_check_paimon_falls_back_to_search(templates):
    screen = _screen(_frame_with(templates.alpha, (30, 15)))
    state = PaimonState(config=_config(paimon_check_vec=WHITE_KEYS, paimon_handle_check_vec=WHITE_KEYS))
    assert check_paimon(screen, state, templates) is True
    assert state.rect_paimon.tl() == (30, 15)


def test_search_paimon_blank_screen_not_visible(templates):
    state = PaimonState(config=_config(), is_visible=True)
    assert search_paimon(_screen(np.zeros((1080, 1920, 4), np.uint8)), state, templates) is False
    assert state.is_visible is False


def test_search_paimon_without_alpha_on_blank_screen(templates):
    screen = _screen(np.zeros((1080, 1920, 3), np.uint8))
    assert screen.is_used_alpha is False
    state = PaimonState(config=_config(), is_visible=True)
    assert search_paimon(screen, state, templates) is False
    assert state.is_visible is False


def test_search_paimon_region_smaller_than_template(templates):
    screen = Screen(img_paimon_maybe=np.zeros((10, 10, 4), np.uint8))
    state = PaimonState(config=_config())
    assert search_paimon(screen, state, templates) is False
    assert state.rect_paimon.is_empty()


def test_check_paimon_empty_region_returns_false(templates):
    state = PaimonState(config=_config())
    assert check_paimon(Screen(), state, templates) is False
    assert state.is_visible is False