# card_drawer/client/session.py

import threading
from dataclasses import dataclass
from typing import Callable, Optional

from card_drawer.common.cards import Card
from card_drawer.common.protocol import ProtocolError
from card_drawer.common.constants import (
    DRAW_INTERVAL_SEC,
    ERROR_DISPLAY_SEC,
    REQUEST_TIMEOUT,
    SHUFFLE_SPEED_NORMAL, SHUFFLE_SPEED_FAST,
    MSG_FETCH_FAILED,
    MSG_NO_CARDS_REMAINING,
    MSG_INVALID_RESPONSE,
    MSG_NO_CARDS_AVAILABLE,
    MSG_DRAW_FAILED,
    MSG_SHUFFLE_FAILED,
)
from card_drawer.common.logging_utils import get_logger
from card_drawer.client.api import ApiError, DeckApi
from card_drawer.client.banner import ErrorBanner
from card_drawer.client.polling import Poller

log = get_logger("client.session")


@dataclass
class DeckSession:
    deck_id: Optional[str] = None
    remaining: int = 0  # only ever taken from a server response
    last_card: Optional[Card] = None
    last_card_image_url: Optional[str] = None


class DeckSessionClient:
    """
    Owns one remote deck and everything the UI shows about it.

    - initialize(): fetch a new shuffled deck (once, at startup)
    - draw():       draw one card; also the polling tick
    - shuffle():    reshuffle the same deck
    - toggle_polling(), toggle_shuffle_speed_preference()

    Failures never raise out of these methods: they end up in `banner`.
    A draw that finds a request in flight is skipped (the next tick retries);
    a shuffle waits up to `request_wait` seconds for it to finish.
    """

    def __init__(
        self,
        api: DeckApi,
        *,
        draw_interval: float = DRAW_INTERVAL_SEC,
        error_display: float = ERROR_DISPLAY_SEC,
        request_wait: float = REQUEST_TIMEOUT + 1.0,
        timer_factory: Callable = threading.Timer,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.api = api
        self.session = DeckSession()
        self.shuffle_speed = SHUFFLE_SPEED_NORMAL
        self.is_shuffling = False
        self.request_wait = request_wait
        self._on_change = on_change
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._in_flight = False
        self.banner = ErrorBanner(error_display, timer_factory=timer_factory, on_change=on_change)
        self.poller = Poller(self._tick, draw_interval)

    # ---------- state ----------
    @property
    def ready(self) -> bool:
        return self.session.deck_id is not None

    @property
    def polling(self) -> bool:
        return self.poller.active

    def close(self) -> None:
        self.poller.stop()
        self.banner.close()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def _fail(self, message: str, *, stop_polling: bool) -> None:
        if stop_polling:
            self.poller.stop()
        self.banner.show(message)

    def _begin_request(self, what: str, wait: float = 0.0) -> bool:
        with self._idle:
            if wait > 0:
                self._idle.wait_for(lambda: not self._in_flight, timeout=wait)
            if self._in_flight:
                log.debug(f"Skipping {what}: another request is in flight")
                return False
            self._in_flight = True
            return True

    def _end_request(self) -> None:
        with self._idle:
            self._in_flight = False
            self._idle.notify_all()

    # ---------- operations ----------
    def initialize(self) -> bool:
        try:
            deck = self.api.new_deck()
        except (ApiError, ProtocolError) as e:
            log.error(f"Error fetching deck: {e}")
            self.banner.show(MSG_FETCH_FAILED)
            return False

        with self._lock:
            self.session.deck_id = deck.deck_id
            self.session.remaining = deck.remaining
        self._notify()
        return True

    def draw(self) -> Optional[Card]:
        if not self.ready:
            log.warning("draw() without a deck, ignoring")
            return None

        if self.session.remaining == 0:
            log.info("Deck exhausted, not drawing")
            self._fail(MSG_NO_CARDS_REMAINING, stop_polling=True)
            return None

        if not self._begin_request("draw"):
            return None
        # the flag stays set until the result is applied, so a shuffle can't interleave
        try:
            result = self.api.draw(self.session.deck_id)
        except ProtocolError as e:
            log.error(f"Error: Invalid API response: {e}")
            self._fail(MSG_INVALID_RESPONSE, stop_polling=True)
            return None
        except ApiError as e:
            # polling keeps running; the next tick tries again
            log.error(f"Error drawing card: {e}")
            self._fail(MSG_DRAW_FAILED, stop_polling=False)
            return None
        else:
            if not result.cards:
                log.error(f"No cards found in the response (server says: {result.error})")
                self._fail(MSG_NO_CARDS_AVAILABLE, stop_polling=True)
                return None

            card = result.cards[0]
            with self._lock:
                self.session.last_card = card
                self.session.last_card_image_url = card.image
                self.session.remaining = result.remaining
        finally:
            self._end_request()

        log.info(f"Drew {card} ({result.remaining} left)")
        self._notify()
        return card

    def shuffle(self) -> bool:
        """
        Reshuffle the deck. Waits for an in-flight draw (e.g. a polling tick)
        instead of dropping the command; only a second shuffle is skipped.
        """
        if not self.ready:
            log.warning("shuffle() without a deck, ignoring")
            return False
        with self._lock:
            if self.is_shuffling:
                log.debug("Skipping shuffle: already shuffling")
                return False
            self.is_shuffling = True
        self._notify()

        if not self._begin_request("shuffle", wait=self.request_wait):
            log.warning(f"Shuffle gave up after waiting {self.request_wait}s for a draw to finish")
            self.is_shuffling = False
            self.banner.show(MSG_SHUFFLE_FAILED)
            return False
        try:
            result = self.api.shuffle(self.session.deck_id)
        except (ApiError, ProtocolError) as e:
            log.error(f"Error shuffling deck: {e}")
            self.is_shuffling = False
            self.banner.show(MSG_SHUFFLE_FAILED)
            return False
        else:
            with self._lock:
                self.session.remaining = result.remaining
                self.session.last_card = None
                self.session.last_card_image_url = None
                self.is_shuffling = False
        finally:
            self._end_request()

        log.info(f"Deck shuffled ({result.remaining} cards)")
        self._notify()
        return True

    def toggle_polling(self) -> bool:
        """Start/stop drawing once per interval. Returns whether polling is now active."""
        if not self.ready:
            return False
        active = self.poller.toggle()
        self._notify()
        return active

    def dismiss_error(self) -> None:
        self.banner.hide()

    def toggle_shuffle_speed_preference(self) -> int:
        # Inert: the value only drives a label, no timer reads it.
        self.shuffle_speed = SHUFFLE_SPEED_FAST if self.shuffle_speed == SHUFFLE_SPEED_NORMAL else SHUFFLE_SPEED_NORMAL
        self._notify()
        return self.shuffle_speed

    def _tick(self) -> None:
        self.draw()
