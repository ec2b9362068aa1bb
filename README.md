# minimaptrack

Tools for reading the heads-up display of a game window from screenshots:
finding the companion icon in the top-left corner, working out where the
minimap sits, cropping the regions of interest, and smoothing a tracked
position over time.

Images are NumPy arrays (height × width × channels, RGBA or grey), so any
capture source that yields arrays can feed the package.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `minimaptrack.layout` – `frame_size(client_width, client_height)` scales a
  client area so that one side matches a 1920×1080 reference frame;
  `compute_layout(client_width, client_height)` returns a `WindowLayout`
  holding that `frame_size` and the `Rect` of every region worth searching
  (`paimon_maybe`, `minimap_cailb_maybe`, `minimap_maybe`, `uid_maybe`, `uid`,
  `left_give_items_maybe`, `right_pick_items_maybe`). `Rect` offers `tl()`,
  `br()`, `contains(point)` and `is_empty()`. `RefreshTicker.should_refresh(visible)`
  says when the window geometry should be read again: every call while the
  window is hidden, once every 31 calls while it is visible.
- `minimaptrack.screen` – `crop_screen(frame, layout, window_rect, client_rect)`
  scales a frame to the layout's size and cuts it into a `Screen` of named
  regions; frames with four channels are marked as carrying alpha.
  `ScreenGrabber.grab(layout, capture, now=None)` calls `capture()` at most
  once every 20 ms and returns `None` when nothing was captured.
- `minimaptrack.matching` – `resize` (bilinear, by size or scale factors),
  `to_gray`, `match_template` (normalised correlation coefficient with an
  optional weighting mask) and `min_max_loc`.
- `minimaptrack.paimon` – `PaimonTemplates.from_rgba(image)` builds the icon
  templates; `check_paimon(screen, state, templates)` first compares the
  remembered key-point colours (`keypoint_diff`) at normal and controller
  scale and falls back to `search_paimon`, which template-matches the candidate
  region and records whether controller mode is in use in the `PaimonState`.
- `minimaptrack.cailb` – `CailbTemplates.from_rgba(image)` builds the
  calibration-mark templates; `calibrate_minimap(screen, state, templates)`
  returns a `Minimap` with the minimap image and its avatar, viewer and star
  sub-regions, or `None` when the icon or the mark is missing.
  `match_minimap_cailb` and `minimap_regions` are the two steps on their own.
- `minimaptrack.position` – `to_color`, `find_direction_in_all` and
  `find_block_in_direction` give a rough position from the minimap's colour;
  `apply_filter` passes a position through a filter, restarting it after a
  jump or a lost track; `PositionTracker(matcher, pos_filter=None, use_filter=True)`
  runs a `MinimapMatcher` on each minimap and filters the result.
- `minimaptrack.filters` – `Kalman(seed=None)`, `Smooth` and `Untouched`
  position filters, each with `filter(pos)` and `reinit(pos)`, tagged with a
  `FilterType`.
- `minimaptrack.bmp` – `decode_bmp(data)` decodes uncompressed 24- and 32-bit
  bitmaps, raising `BmpError` for anything else.
- `minimaptrack.resources` – `ResourceId`, plus `uid_digit_bmp(digit)` and
  `uid_digit_image(digit)` for the bundled UID digit glyphs.
- `minimaptrack.uid_label` – `uid_label_bmp()` and `uid_label_image()` for
  the bundled "UID" label glyph.
- `minimaptrack.api` – `AutoTrackApi(tracker)`, a facade over any object
  satisfying the `Tracker` protocol; position, direction, star and UID queries
  raise `NotInitializedError` until `init()` has been called. It can also be
  used as a context manager that calls `init()` and `uninit()`.

## Example

```python
from minimaptrack.filters import Smooth
from minimaptrack.layout import compute_layout

layout = compute_layout(2560, 1440)
print(layout.frame_size, layout.minimap_maybe)

smooth = Smooth()
smooth.reinit((100.0, 200.0))
print(smooth.filter((110.0, 200.0)))
```

## What it does not do

- It does not capture the screen or find the game window; `ScreenGrabber`
  takes a `capture` callable that you supply.
- It does not match a minimap against the world map. `PositionTracker` needs
  a `MinimapMatcher` from you, and `AutoTrackApi` needs a `Tracker`
  implementation; neither is included.
- It bundles no icon, calibration-mark or world-map pictures; the templates
  are built from images you pass in.
- Of the UID digit glyphs only 4 and 7 are bundled; `uid_digit_bmp` raises
  `LookupError` for the other digits and `ValueError` for non-digits. No UID
  reading is done from them.
- There is no command-line tool.