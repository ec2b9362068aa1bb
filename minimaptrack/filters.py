"""Position filters used to stabilise the tracked avatar position."""

from __future__ import annotations

import abc
import enum
from typing import Optional, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]

_STATE_SIZE = 4
_MEASURE_SIZE = 2


class FilterType(enum.Enum):
    """Kind of a position filter."""

    KALMAN = "kalman"
    SMOOTH = "smooth"
    UNTOUCHED = "untouched"
    UNKNOWN = "unknown"


class Filter(abc.ABC):
    """A filter that turns a stream of raw positions into smoothed ones."""

    type: FilterType = FilterType.UNKNOWN

    @abc.abstractmethod
    def filter(self, pos: Sequence[float]) -> Point:
        """Feed one measured position and return the filtered position."""

    @abc.abstractmethod
    def reinit(self, pos: Sequence[float]) -> Point:
        """Reset the filter around ``pos`` and return the filtered position."""


class Kalman(Filter):
    """Constant-velocity Kalman filter over (x, y, dx, dy)."""

    type = FilterType.KALMAN

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)
        self._reset()

    def _reset(self) -> None:
        self._transition = np.array(
            [
                [1.0, 0.0, 1.0, 0.0],
                [0.0, 1.0, 0.0, 1.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        self._measurement_matrix = np.eye(_MEASURE_SIZE, _STATE_SIZE)
        self._process_noise = np.eye(_STATE_SIZE) * 1e-5
        self._measurement_noise = np.eye(_MEASURE_SIZE) * 1e-1
        self._error_cov = np.eye(_STATE_SIZE)
        self._state = self._rng.normal(0.0, 0.1, _STATE_SIZE)

    def _predict(self) -> None:
        a = self._transition
        self._state = a @ self._state
        self._error_cov = a @ self._error_cov @ a.T + self._process_noise

    def _correct(self, pos: Sequence[float]) -> None:
        h = self._measurement_matrix
        measurement = np.array([float(pos[0]), float(pos[1])])
        hp = h @ self._error_cov
        innovation_cov = hp @ h.T + self._measurement_noise
        gain = np.linalg.solve(innovation_cov, hp).T
        residual = measurement - h @ self._state
        self._state = self._state + gain @ residual
        self._error_cov = self._error_cov - gain @ hp

    def _step(self, pos: Sequence[float]) -> Point:
        self._predict()
        self._correct(pos)
        return float(self._state[0]), float(self._state[1])

    def filter(self, pos: Sequence[float]) -> Point:
        return self._step(pos)

    def reinit(self, pos: Sequence[float]) -> Point:
        self._reset()
        self._state[0] = float(pos[0])
        self._state[1] = float(pos[1])
        return self._step(pos)


class Smooth(Filter):
    """Exponential moving average with weight 0.1 on the new position."""

    type = FilterType.SMOOTH

    def __init__(self) -> None:
        self._mean: Point = (0.0, 0.0)

    def filter(self, pos: Sequence[float]) -> Point:
        mx, my = self._mean
        self._mean = (float(pos[0]) * 0.1 + mx * 0.9, float(pos[1]) * 0.1 + my * 0.9)
        return self._mean

    def reinit(self, pos: Sequence[float]) -> Point:
        self._mean = (float(pos[0]), float(pos[1]))
        return self.filter(pos)


class Untouched(Filter):
    """Filter that passes positions through unchanged."""

    type = FilterType.UNTOUCHED

    def filter(self, pos: Sequence[float]) -> Point:
        return float(pos[0]), float(pos[1])

    def reinit(self, pos: Sequence[float]) -> Point:
        return float(pos[0]), float(pos[1])