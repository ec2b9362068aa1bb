import numpy as np
import pytest

from minimaptrack.cailb import (
    CailbState,
    CailbTemplates,
    calibrate_minimap,
    match_minimap_cailb,
    minimap_regions,
)
from minimaptrack.layout import Rect
from minimaptrack.screen import Screen

ORIGIN = Rect(100, 0, 40, 40)


@pytest.fixture
def templates():
    rng = np.random.default_rng(7)
    image = rng.integers(0, 256, size=(20, 20, 4), dtype=np.uint8)
    return CailbTemplates.from_rgba(image)


def _state(threshold=0.8):
    return CailbState(
        check_match_minimap_cailb_params=threshold,
        check_match_minimap_cailb_params_no_alpha=threshold,
    )


def _embed(background, patch, x, y):
    altered = patch.astype(np.int64)
    altered[0, 0] = (altered[0, 0] + 60) % 256
    background[y : y + patch.shape[0], x : x + patch.shape[1]] = altered.astype(np.uint8)


def _rgba_ref(patch, x=5, y=7):
    rng = np.random.default_rng(3)
    ref = rng.integers(0, 256, size=(40, 40, 4), dtype=np.uint8)
    channel = ref[..., 3].copy()
    _embed(channel, patch, x, y)
    ref[..., 3] = channel
    return ref


def test_templates_shapes(templates):
    assert templates.alpha.shape == (16, 16)
    assert templates.no_alpha.shape == templates.alpha.shape
    assert templates.alpha_handle.shape == templates.no_alpha_handle.shape
    assert templates.alpha_handle.shape[0] < templates.alpha.shape[0]


def test_templates_require_four_channels():
    with pytest.raises(ValueError):
        CailbTemplates.from_rgba(np.zeros((20, 20, 3), dtype=np.uint8))


def test_match_finds_mark(templates):
    screen = Screen(img_minimap_cailb_maybe=_rgba_ref(templates.alpha), rect_minimap_cailb_maybe=ORIGIN)
    state = _state()
    assert match_minimap_cailb(screen, state, templates) is True
    assert state.is_visible is True
    assert state.rect_minimap_cailb == Rect(105, 7, 16, 16)


def test_match_handle_mode(templates):
    screen = Screen(
        img_minimap_cailb_maybe=_rgba_ref(templates.alpha_handle, 9, 4),
        rect_minimap_cailb_maybe=ORIGIN,
        is_handle_mode=True,
    )
    state = _state()
    assert match_minimap_cailb(screen, state, templates) is True
    h, w = templates.alpha_handle.shape
    assert state.rect_minimap_cailb == Rect(ORIGIN.x + 9, ORIGIN.y + 4, w, h)


def test_match_without_alpha(templates):
    rng = np.random.default_rng(11)
    ref = rng.integers(0, 256, size=(40, 40), dtype=np.uint8)
    _embed(ref, templates.no_alpha, 12, 3)
    screen = Screen(img_minimap_cailb_maybe=ref, rect_minimap_cailb_maybe=ORIGIN, is_used_alpha=False)
    state = _state()
    assert match_minimap_cailb(screen, state, templates) is True
    assert state.is_visible is True
    assert state.rect_minimap_cailb.tl() == (ORIGIN.x + 12, ORIGIN.y + 3)


def test_match_below_threshold_not_visible(templates):
    screen = Screen(img_minimap_cailb_maybe=_rgba_ref(templates.alpha), rect_minimap_cailb_maybe=ORIGIN)
    state = _state(threshold=1.01)
    state.is_visible = True
    assert match_minimap_cailb(screen, state, templates) is True
    assert state.is_visible is False


def test_match_empty_or_small_region(templates):
    state = _state()
    assert match_minimap_cailb(Screen(), state, templates) is False
    small = Screen(img_minimap_cailb_maybe=np.zeros((8, 8, 4), dtype=np.uint8))
    assert match_minimap_cailb(small, state, templates) is False


def test_calibrate_needs_paimon(templates):
    screen = Screen(img_screen=np.zeros((200, 200, 4), dtype=np.uint8), rect_minimap=Rect(10, 20, 100, 100))
    assert calibrate_minimap(screen, _state(), templates) is None


def test_calibrate_fixed_rect(templates):
    frame = np.arange(300 * 300, dtype=np.int64).reshape(300, 300) % 251
    screen = Screen(
        img_screen=frame.astype(np.uint8),
        rect_paimon=Rect(0, 0, 10, 10),
        rect_minimap=Rect(10, 20, 100, 100),
        rect_minimap_handle=Rect(0, 0, 50, 50),
    )
    minimap = calibrate_minimap(screen, _state(), templates)
    assert minimap.rect_minimap == Rect(10, 20, 100, 100)
    assert minimap.point_minimap_center == (60, 70)
    assert np.array_equal(minimap.img_minimap, screen.img_screen[20:120, 10:110])
    assert minimap.img_avatar.shape == (20, 20)
    assert minimap.img_viewer.shape == (60, 60)


def test_calibrate_handle_rect(templates):
    screen = Screen(
        img_screen=np.zeros((300, 300), dtype=np.uint8),
        rect_paimon=Rect(0, 0, 10, 10),
        rect_minimap=Rect(10, 20, 100, 100),
        rect_minimap_handle=Rect(5, 5, 50, 50),
        is_handle_mode=True,
    )
    minimap = calibrate_minimap(screen, _state(), templates)
    assert minimap.rect_minimap == Rect(5, 5, 50, 50)


def test_calibrate_search_mode(templates):
    paimon = Rect(0, 0, 10, 10)
    screen = Screen(
        img_screen=np.zeros((250, 250, 4), dtype=np.uint8),
        img_minimap_cailb_maybe=_rgba_ref(templates.alpha),
        rect_minimap_cailb_maybe=ORIGIN,
        rect_paimon=paimon,
        is_search_mode=True,
    )
    state = _state()
    minimap = calibrate_minimap(screen, state, templates)
    rect = minimap.rect_minimap
    cailb = state.rect_minimap_cailb
    assert rect.x == paimon.x + paimon.width // 2
    assert rect.x + rect.width == cailb.x + cailb.width // 2
    assert rect.width == rect.height
    assert minimap.img_minimap.shape[:2] == (rect.height, rect.width)


def test_calibrate_search_mode_without_mark(templates):
    screen = Screen(
        img_screen=np.zeros((250, 250, 4), dtype=np.uint8),
        img_minimap_cailb_maybe=_rgba_ref(templates.alpha),
        rect_minimap_cailb_maybe=ORIGIN,
        rect_paimon=Rect(0, 0, 10, 10),
        is_search_mode=True,
    )
    assert calibrate_minimap(screen, _state(threshold=1.01), templates) is None


def test_regions_outside_frame():
    screen = Screen(img_screen=np.zeros((50, 50), dtype=np.uint8))
    with pytest.raises(ValueError):
        minimap_regions(screen, Rect(10, 10, 100, 100))