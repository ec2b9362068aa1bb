"""Guarded front end over a tracker: calls that need initialisation check for it."""

from __future__ import annotations

from typing import Protocol, Tuple


class NotInitializedError(RuntimeError):
    """A tracking call was made before ``init``."""


class Tracker(Protocol):
    """The tracking engine behind the API.

    Methods raise on failure and return their results directly.
    """

    def init(self) -> None: ...

    def uninit(self) -> None: ...

    def version(self) -> str: ...

    def set_handle(self, handle: int) -> None: ...

    def set_world_center(self, x: float, y: float) -> None: ...

    def set_world_scale(self, scale: float) -> None: ...

    def get_transform_of_map(self) -> Tuple[float, float, float, int]: ...

    def get_position_of_map(self) -> Tuple[float, float, int]: ...

    def get_direction(self) -> float: ...

    def get_rotation(self) -> float: ...

    def get_star(self) -> Tuple[float, float, bool]: ...

    def get_star_json(self) -> str: ...

    def get_uid(self) -> int: ...

    def get_all_info(self) -> Tuple[float, float, int, float, float, int]: ...

    def get_info_load_picture(self, path: str) -> Tuple[int, float, float, float]: ...

    def get_info_load_video(self, path: str, out_path: str) -> None: ...

    def last_error(self) -> int: ...

    def last_error_message(self) -> str: ...

    def last_error_json(self) -> str: ...


class AutoTrackApi:
    """Entry point for tracking; queries fail until ``init`` has succeeded."""

    def __init__(self, tracker: Tracker) -> None:
        self._tracker = tracker
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def __enter__(self) -> "AutoTrackApi":
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.uninit()

    def _require_init(self) -> Tracker:
        if not self._initialized:
            raise NotInitializedError("call init() before querying the tracker")
        return self._tracker

    def init(self) -> None:
        self._tracker.init()
        self._initialized = True

    def uninit(self) -> None:
        self._initialized = False
        self._tracker.uninit()

    def version(self) -> str:
        return self._tracker.version()

    def set_handle(self, handle: int = 0) -> None:
        """Select the game window; 0 means find it automatically."""
        self._tracker.set_handle(handle)

    def set_world_center(self, x: float, y: float) -> None:
        self._tracker.set_world_center(x, y)

    def set_world_scale(self, scale: float) -> None:
        self._tracker.set_world_scale(scale)

    def get_transform_of_map(self) -> Tuple[float, float, float, int]:
        """Return ``(x, y, angle, map_id)``."""
        return self._require_init().get_transform_of_map()

    def get_position_of_map(self) -> Tuple[float, float, int]:
        """Return ``(x, y, map_id)``."""
        return self._require_init().get_position_of_map()

    def get_direction(self) -> float:
        return self._require_init().get_direction()

    def get_rotation(self) -> float:
        return self._require_init().get_rotation()

    def get_star(self) -> Tuple[float, float, bool]:
        """Return ``(x, y, is_end)``."""
        return self._require_init().get_star()

    def get_star_json(self) -> str:
        return self._require_init().get_star_json()

    def get_uid(self) -> int:
        return self._require_init().get_uid()

    def get_all_info(self) -> Tuple[float, float, int, float, float, int]:
        """Return ``(x, y, map_id, angle, rotation, uid)``."""
        return self._require_init().get_all_info()

    def get_info_load_picture(self, path: str) -> Tuple[int, float, float, float]:
        """Return ``(uid, x, y, angle)`` read from a picture file."""
        return self._require_init().get_info_load_picture(path)

    def get_info_load_video(self, path: str, out_path: str) -> None:
        self._require_init().get_info_load_video(path, out_path)

    def last_error(self) -> int:
        return self._tracker.last_error()

    def last_error_message(self) -> str:
        return self._tracker.last_error_message()

    def last_error_json(self) -> str:
        return self._tracker.last_error_json()