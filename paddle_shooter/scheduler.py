"""
Frame and timer scheduling
"""

import heapq
import itertools
from typing import Callable, List, Optional, Tuple

import pygame

from paddle_shooter.utils import logger


class Scheduler:
    """
    Single-threaded scheduler for frame callbacks and delayed callbacks.

    The runtime calls :meth:`run_due_timers` and :meth:`run_frame` once per
    display refresh. Timers are fire-once and run on the clock whether or not
    a frame is pending.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        :param clock: Returns the current time in milliseconds
        :type clock: Callable
        """
        self._clock = clock or pygame.time.get_ticks
        self._counter = itertools.count()
        self._timers: List[Tuple[int, int, Callable[[], None]]] = []
        self._frames: List[Tuple[int, Callable[[], None]]] = []

    def now(self) -> int:
        """
        Current clock time in milliseconds
        """
        return self._clock()

    def after(self, milliseconds: int, callback: Callable[[], None]) -> int:
        """
        Run ``callback`` once, ``milliseconds`` from now

        :return: Handle of the timer
        :rtype: int
        """
        handle = next(self._counter)
        heapq.heappush(self._timers, (self.now() + milliseconds, handle, callback))
        return handle

    def request_frame(self, callback: Callable[[], None]) -> int:
        """
        Run ``callback`` on the next frame.

        Requesting a callback that is already pending returns the pending
        handle instead of queueing it twice.

        :return: Handle of the frame request
        :rtype: int
        """
        for handle, pending in self._frames:
            if pending == callback:
                return handle

        handle = next(self._counter)
        self._frames.append((handle, callback))
        return handle

    def frame_pending(self) -> bool:
        """
        Whether a frame callback is waiting to run

        :rtype: bool
        """
        return bool(self._frames)

    @property
    def pending_timers(self) -> int:
        """
        Number of timers that have not fired yet

        :rtype: int
        """
        return len(self._timers)

    def run_due_timers(self) -> int:
        """
        Fire every timer whose deadline has passed, earliest first

        :return: Number of timers fired
        :rtype: int
        """
        now = self.now()
        fired = 0
        while self._timers and self._timers[0][0] <= now:
            _, handle, callback = heapq.heappop(self._timers)
            logger.debug(f"Firing timer {handle}")
            callback()
            fired += 1
        return fired

    def run_frame(self) -> int:
        """
        Run the callbacks requested for this frame.

        Callbacks requested while running are kept for the next frame.

        :return: Number of callbacks run
        :rtype: int
        """
        frames, self._frames = self._frames, []
        for _, callback in frames:
            callback()
        return len(frames)
