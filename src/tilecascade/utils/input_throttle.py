from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict, Tuple


@dataclass(slots=True)
class MouseThrottle:
	"""Filters rapid repeated presses before they reach the board.

	A press is dropped when it repeats the same button within ``min_interval``
	seconds and lands within ``min_distance`` units of the previous press.
	"""

	min_interval: float = 0.2
	min_distance: float = 0.5
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_last_press: Dict[int, Tuple[float, float, float]] = field(init=False, repr=False)
	_min_distance_sq: float = field(init=False, repr=False)
	_min_interval: float = field(init=False, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self._last_press = {}
		dist = max(0.0, float(self.min_distance))
		self._min_distance_sq = dist * dist
		self._min_interval = max(0.0, float(self.min_interval))

	def allow(self, x: float, y: float, button: int) -> bool:
		now = self._clock()
		last = self._last_press.get(button)
		if last is not None and self._min_interval > 0.0:
			last_time, last_x, last_y = last
			if (now - last_time) < self._min_interval:
				if self._min_distance_sq == 0.0:
					return False
				dx = x - last_x
				dy = y - last_y
				if (dx * dx + dy * dy) <= self._min_distance_sq:
					return False

		self._last_press[button] = (now, x, y)
		return True
