"""Debounced execution with a single pending timer."""

import threading
from typing import Any, Callable

from immo_catalog.logging import get_logger

logger = get_logger(__name__)


class Debouncer:
    """Run ``func`` once input has been quiet for ``wait`` seconds.

    Each ``call`` cancels the pending timer and schedules a new one, so
    at most one invocation is ever pending and the last arguments win.

    Parameters
    ----------
    func : Callable[..., Any]
        Function to run after the quiet window.
    wait : float
        Quiet window in seconds.
    """

    def __init__(self, func: Callable[..., Any], wait: float = 0.5) -> None:
        self.func = func
        self.wait = wait
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}

    def call(self, *args: Any, **kwargs: Any) -> None:
        """Schedule ``func(*args, **kwargs)``, superseding any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args, self._kwargs = args, kwargs
            timer = threading.Timer(self.wait, self._fire)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> bool:
        """Drop the pending call; returns whether one was pending."""
        with self._lock:
            return self._take() is not None

    def flush(self) -> bool:
        """Run the pending call now; returns whether one was pending."""
        with self._lock:
            pending = self._take()
            args, kwargs = self._args, self._kwargs
        if pending is None:
            return False
        self.func(*args, **kwargs)
        return True

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _take(self) -> threading.Timer | None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        return timer

    def _fire(self) -> None:
        with self._lock:
            if self._timer is None or self._timer is not threading.current_thread():
                # Superseded or cancelled after the timer went off
                return
            self._timer = None
            args, kwargs = self._args, self._kwargs
        try:
            self.func(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call to %r failed", self.func)
