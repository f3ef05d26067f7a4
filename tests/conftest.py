import pytest

from card_drawer.client.session import DeckSessionClient
from card_drawer.common.cards import Card, SUIT_GLYPHS
from card_drawer.common.protocol import NewDeck, DrawResult, ShuffleResult

CODES = "A234567890JQK"
VALUES = ["ACE", "2", "3", "4", "5", "6", "7", "8", "9", "10", "JACK", "QUEEN", "KING"]


class FakeTimer:
    def __init__(self, interval, fn):
        self.interval = interval
        self.fn = fn
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.started and not self.cancelled and not self.fired:
            self.fired = True
            self.fn()

    @property
    def live(self):
        return self.started and not self.cancelled and not self.fired


class FakeTimers:
    """threading.Timer stand-in: records every timer, fires on demand."""

    def __init__(self):
        self.created = []

    def __call__(self, interval, fn):
        t = FakeTimer(interval, fn)
        self.created.append(t)
        return t

    @property
    def live(self):
        return [t for t in self.created if t.live]


class FakeApi:
    """In-memory deck with the same server-side bookkeeping as the real API."""

    def __init__(self, size=52):
        self.size = size
        self.remaining = size
        self.calls = []
        self.new_deck_error = None
        self.draw_error = None
        self.draw_result = None
        self.shuffle_error = None
        self.on_shuffle = None

    def _card(self, i):
        suit = list(SUIT_GLYPHS)[(i // 13) % 4]
        code = CODES[i % 13] + suit[0]
        return Card(code=code, value=VALUES[i % 13], suit=suit, image=f"https://deckofcardsapi.com/static/img/{code}.png")

    def close(self):
        self.calls.append("close")

    def new_deck(self):
        self.calls.append("new_deck")
        if self.new_deck_error is not None:
            raise self.new_deck_error
        return NewDeck(deck_id="deck123", remaining=self.remaining)

    def draw(self, deck_id):
        self.calls.append("draw")
        if self.draw_error is not None:
            raise self.draw_error
        if self.draw_result is not None:
            return self.draw_result
        if self.remaining == 0:
            return DrawResult(cards=[], remaining=0, error="Not enough cards remaining to draw 1 additional")
        card = self._card(self.size - self.remaining)
        self.remaining -= 1
        return DrawResult(cards=[card], remaining=self.remaining)

    def shuffle(self, deck_id):
        self.calls.append("shuffle")
        if self.on_shuffle is not None:
            self.on_shuffle()
        if self.shuffle_error is not None:
            raise self.shuffle_error
        self.remaining = self.size
        return ShuffleResult(remaining=self.size)


@pytest.fixture
def timers():
    return FakeTimers()


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def client(api, timers):
    # long interval: the poller thread only ever waits, tests call draw() directly
    c = DeckSessionClient(api, draw_interval=60.0, timer_factory=timers)
    yield c
    c.close()
