# card_drawer/client/api.py

import logging
from typing import Any, Callable, Dict, Optional, TypeVar

import requests

from card_drawer.common.constants import (
    API_BASE_URL,
    REQUEST_TIMEOUT,
    USER_AGENT,
    PATH_NEW_DECK, PATH_DRAW, PATH_SHUFFLE,
    DECK_COUNT, DRAW_COUNT,
)
from card_drawer.common.protocol import (
    parse_new_deck,
    parse_draw,
    parse_shuffle,
    ProtocolError,
    NewDeck,
    DrawResult,
    ShuffleResult,
)
from card_drawer.common.logging_utils import get_logger, log_exchange

log = get_logger("client.api")

T = TypeVar("T")


class ApiError(ConnectionError):
    """Raised when the deck API can't be reached or returns an undecodable body."""
    pass


class DeckApi:
    """
    Thin client for the deck-of-cards API.

    Every call is a GET returning JSON. Transport and decoding problems raise
    ApiError; well-formed JSON with missing fields raises ProtocolError.
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    def close(self) -> None:
        self.session.close()

    def _get(self, path: str, parse: Callable[[Any], T], params: Optional[Dict[str, Any]] = None) -> T:
        url = self.base_url + path
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            log_exchange(log, "GET", url, None, note=f"request failed: {e}", level=logging.WARNING)
            raise ApiError(f"GET {url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            log_exchange(log, "GET", resp.url, resp.status_code, resp.text, note="undecodable body")
            raise ApiError(f"GET {resp.url} returned non-JSON body (status {resp.status_code})") from e

        try:
            parsed = parse(data)
        except ProtocolError:
            log_exchange(log, "GET", resp.url, resp.status_code, resp.text, note="malformed body", level=logging.WARNING)
            raise

        log_exchange(log, "GET", resp.url, resp.status_code, resp.text, parsed=parsed, note="response received")
        return parsed

    def new_deck(self, deck_count: int = DECK_COUNT) -> NewDeck:
        deck = self._get(PATH_NEW_DECK, parse_new_deck, {"deck_count": deck_count})
        log.info(f"New deck {deck.deck_id} ({deck.remaining} cards)")
        return deck

    def draw(self, deck_id: str, count: int = DRAW_COUNT) -> DrawResult:
        return self._get(PATH_DRAW.format(deck_id=deck_id), parse_draw, {"count": count})

    def shuffle(self, deck_id: str) -> ShuffleResult:
        return self._get(PATH_SHUFFLE.format(deck_id=deck_id), parse_shuffle)
