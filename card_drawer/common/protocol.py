# card_drawer/common/protocol.py
#
# JSON bodies of the deck-of-cards API -> dataclasses.

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from .cards import Card
from .logging_utils import get_logger

_log = get_logger("protocol")


# -------------------------
# Errors
# -------------------------
class ProtocolError(ValueError):
    """Raised when a response body is malformed or invalid."""
    pass


def _require(condition: bool, msg: str) -> None:
    if not condition:
        _log.warning(f"ProtocolError: {msg}")
        raise ProtocolError(msg)


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    _require(isinstance(data, Mapping), f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _require_remaining(data: Mapping[str, Any], what: str) -> int:
    _require("remaining" in data, f"{what}: missing 'remaining'")
    remaining = data["remaining"]
    # bool is an int subclass, reject it explicitly
    _require(
        isinstance(remaining, int) and not isinstance(remaining, bool) and remaining >= 0,
        f"{what}: 'remaining' must be a non-negative integer, got {remaining!r}",
    )
    return remaining


# -------------------------
# Dataclasses
# -------------------------
@dataclass(frozen=True)
class NewDeck:
    deck_id: str
    remaining: int


@dataclass(frozen=True)
class DrawResult:
    cards: List[Card]
    remaining: int
    error: Optional[str] = None  # server-side note, e.g. "Not enough cards remaining..."


@dataclass(frozen=True)
class ShuffleResult:
    remaining: int


# -------------------------
# GET /deck/new/shuffle/?deck_count=N
# -------------------------
def parse_new_deck(data: Any) -> NewDeck:
    data = _require_mapping(data, "new deck")
    deck_id = data.get("deck_id")
    _require(isinstance(deck_id, str) and deck_id != "", f"new deck: invalid 'deck_id' {deck_id!r}")
    remaining = _require_remaining(data, "new deck")
    return NewDeck(deck_id=deck_id, remaining=remaining)


# -------------------------
# GET /deck/<id>/draw/?count=N
#
# A missing 'cards' field is malformed. An empty list is valid and
# means the server had nothing left to hand out.
# -------------------------
def parse_card(data: Any) -> Card:
    data = _require_mapping(data, "card")
    for key in ("code", "value", "suit", "image"):
        _require(isinstance(data.get(key), str), f"card: missing or invalid '{key}'")
    return Card(code=data["code"], value=data["value"], suit=data["suit"], image=data["image"])


def parse_draw(data: Any) -> DrawResult:
    data = _require_mapping(data, "draw")
    _require("cards" in data, "draw: missing 'cards'")
    raw_cards = data["cards"]
    _require(isinstance(raw_cards, list), f"draw: 'cards' must be a list, got {type(raw_cards).__name__}")
    cards = [parse_card(c) for c in raw_cards]
    remaining = _require_remaining(data, "draw")
    error = data.get("error")
    return DrawResult(cards=cards, remaining=remaining, error=error if isinstance(error, str) else None)


# -------------------------
# GET /deck/<id>/shuffle/
# -------------------------
def parse_shuffle(data: Any) -> ShuffleResult:
    data = _require_mapping(data, "shuffle")
    return ShuffleResult(remaining=_require_remaining(data, "shuffle"))
