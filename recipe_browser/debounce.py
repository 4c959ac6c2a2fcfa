"""
Debounce utility.

Wraps a callback so it runs only after calls stop arriving for a quiet
window. Each new call cancels the pending one, so at most one invocation is
ever pending and it receives the arguments of the most recent call.

Usage:
    debounced = Debouncer(store.set_search, wait_ms=300)
    debounced("pas")
    debounced("pasta")   # only set_search("pasta") runs, 300ms later
    debounced.cancel()   # on teardown

Timers come from timer_factory (threading.Timer by default) so tests can
drive time by hand.
"""

import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_WAIT_MS = 300


class Debouncer:
    """
    Debounced wrapper around a callback.

    Args:
        callback: Function to call once input pauses
        wait_ms: Quiet window in milliseconds (default: 300)
        timer_factory: Callable(seconds, function) returning an object with
            start() and cancel(); defaults to threading.Timer
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        wait_ms: int = DEFAULT_WAIT_MS,
        timer_factory: Optional[Callable[[float, Callable[[], None]], Any]] = None,
    ):
        self.callback = callback
        self.wait_ms = wait_ms
        self._timer_factory = timer_factory or threading.Timer
        self._timer = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def __call__(self, *args, **kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation

            def fire() -> None:
                self._fire(generation, args, kwargs)

            timer = self._timer_factory(self.wait_ms / 1000.0, fire)
            # threading.Timer would otherwise keep the interpreter alive
            if isinstance(timer, threading.Thread):
                timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, generation: int, args: tuple, kwargs: dict) -> None:
        with self._lock:
            # A newer call or cancel() superseded this timer
            if generation != self._generation:
                return
            self._timer = None
        self.callback(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Cancelled pending debounced call to %r", self.callback)
            self._timer = None
            self._generation += 1
