# card_drawer/client/banner.py

import threading
from dataclasses import dataclass
from typing import Callable, Optional

from card_drawer.common.constants import ERROR_DISPLAY_SEC
from card_drawer.common.logging_utils import get_logger

log = get_logger("client.banner")


@dataclass
class TransientError:
    message: str
    visible: bool = True


class ErrorBanner:
    """
    One error at a time, hidden automatically after `hide_after` seconds.

    show() always replaces the current error and restarts the hide timer, so
    at most one hide callback is ever pending.
    """

    def __init__(
        self,
        hide_after: float = ERROR_DISPLAY_SEC,
        *,
        timer_factory: Callable[[float, Callable[[], None]], threading.Timer] = threading.Timer,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.hide_after = hide_after
        self._timer_factory = timer_factory
        self._on_change = on_change
        self._lock = threading.Lock()
        self._error: Optional[TransientError] = None
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def error(self) -> Optional[TransientError]:
        return self._error

    @property
    def visible(self) -> bool:
        return self._error is not None and self._error.visible

    @property
    def message(self) -> Optional[str]:
        return self._error.message if self._error is not None else None

    def show(self, message: str) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._error = TransientError(message)
            gen = self._generation
            self._timer = self._timer_factory(self.hide_after, lambda: self._expire(gen))
            self._timer.daemon = True
            self._timer.start()
        log.debug(f"Banner shown: {message!r} (hides in {self.hide_after}s)")
        self._notify()

    def hide(self) -> None:
        with self._lock:
            self._cancel_timer()
            if self._error is None or not self._error.visible:
                return
            self._error.visible = False
        self._notify()

    def close(self) -> None:
        with self._lock:
            self._cancel_timer()

    def _expire(self, gen: int) -> None:
        with self._lock:
            # a newer show() already replaced this error
            if gen != self._generation or self._error is None:
                return
            self._timer = None
            self._error.visible = False
        log.debug("Banner hidden")
        self._notify()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
