import time
from typing import Callable, Optional


class SessionClock:
    """
    Wall-clock source for node and evidence timestamps.

    Timestamps are integer epoch milliseconds. Within one session the
    clock never runs backwards: if the wall clock steps back (NTP
    adjustment, injected test time), the last issued value is repeated.
    """

    def __init__(
        self,
        time_source: Optional[Callable[[], float]] = None,
        start: int = 0,
    ) -> None:
        self._time_source = time_source or time.time
        self._last = start

    def now(self) -> int:
        wall = int(round(self._time_source() * 1000))

        if wall < self._last:
            wall = self._last

        self._last = wall
        return wall

    @property
    def last(self) -> int:
        return self._last
