# card_drawer/client/polling.py

import threading
from typing import Callable, Optional

from card_drawer.common.constants import DRAW_INTERVAL_SEC
from card_drawer.common.logging_utils import get_logger

log = get_logger("client.polling")


class Poller:
    """
    Calls `tick` every `interval` seconds on a daemon thread until stopped.

    The thread handle is set if and only if the poller is active. stop() may be
    called from inside `tick` (the thread then just exits after the tick).
    """

    def __init__(self, tick: Callable[[], None], interval: float = DRAW_INTERVAL_SEC, *, name: str = "draw-poller"):
        self.tick = tick
        self.interval = interval
        self.name = name
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    @property
    def active(self) -> bool:
        return self._thread is not None

    def start(self) -> bool:
        with self._lock:
            if self._thread is not None:
                return False
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name=self.name,
                daemon=True,
            )
            self._thread.start()
        log.info(f"Polling started (every {self.interval}s)")
        return True

    def stop(self) -> bool:
        with self._lock:
            t, ev = self._thread, self._stop_event
            if t is None:
                return False
            self._thread = None
            self._stop_event = None
            ev.set()
        if t is not threading.current_thread():
            t.join(timeout=self.interval + 1.0)
        log.info("Polling stopped")
        return True

    def toggle(self) -> bool:
        """Start if idle, stop if active. Returns the new `active` state."""
        if self.active:
            self.stop()
        else:
            self.start()
        return self.active

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self.tick()
            except Exception as e:
                # keep the schedule alive; the next tick tries again
                log.error(f"Polling tick failed: {e}", exc_info=True)
