from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable

from .config import DiffConfig
from .engine import compute_diff
from .models import DiffResult

LOGGER = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class DiffRequest:
    """Inputs captured when a comparison is triggered."""

    old_text: str
    new_text: str
    config: DiffConfig


class DebouncedDiff:
    """
    Run compute_diff after input has been quiet for `delay` seconds.

    Each trigger replaces the pending one, so only the most recent request
    ever reaches the callback.
    """

    def __init__(
        self,
        callback: Callable[[DiffResult], None],
        delay: float = 0.3,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be zero or positive.")
        self._callback = callback
        self._delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Any | None = None
        self._pending: DiffRequest | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def trigger(
        self, old_text: str, new_text: str, config: DiffConfig | None = None
    ) -> None:
        """Schedule a comparison, invalidating any not-yet-run request."""
        request = DiffRequest(old_text, new_text, config or DiffConfig())
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._pending = request
            timer = self._timer_factory(
                self._delay, self._fire, args=(self._generation,)
            )
            timer.daemon = True
            self._timer = timer
        timer.start()

    def cancel(self) -> bool:
        """Drop the pending request; return True if there was one."""
        with self._lock:
            had_pending = self._pending is not None
            self._cancel_timer()
            self._pending = None
            self._generation += 1
        return had_pending

    def flush(self) -> DiffResult | None:
        """Run the pending request now instead of waiting for the timer."""
        with self._lock:
            self._cancel_timer()
            request = self._take(self._generation)
        if request is None:
            return None
        return self._run(request)

    def _fire(self, generation: int) -> None:
        with self._lock:
            request = self._take(generation)
        if request is None:
            LOGGER.debug("Skipping superseded diff request %d", generation)
            return
        self._run(request)

    def _take(self, generation: int) -> DiffRequest | None:
        if generation != self._generation or self._pending is None:
            return None
        request = self._pending
        self._pending = None
        self._timer = None
        return request

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _run(self, request: DiffRequest) -> DiffResult:
        result = compute_diff(request.old_text, request.new_text, request.config)
        self._callback(result)
        return result
