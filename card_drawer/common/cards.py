# card_drawer/common/cards.py

from dataclasses import dataclass

# API suit names -> glyphs used by the terminal sprites
SUIT_GLYPHS = {
    "SPADES": "♠",
    "HEARTS": "♥",
    "DIAMONDS": "♦",
    "CLUBS": "♣",
}
RED_SUITS = {"HEARTS", "DIAMONDS"}

# API card values that don't fit the sprite corner as-is
RANK_SHORT = {"ACE": "A", "JACK": "J", "QUEEN": "Q", "KING": "K"}


@dataclass(frozen=True)
class Card:
    code: str    # "KH", "0S" (ten of spades)
    value: str   # "KING", "10", ...
    suit: str    # "HEARTS", ...
    image: str   # PNG url

    @property
    def rank(self) -> str:
        return RANK_SHORT.get(self.value, self.value)

    @property
    def glyph(self) -> str:
        return SUIT_GLYPHS.get(self.suit, "?")

    @property
    def is_red(self) -> bool:
        return self.suit in RED_SUITS

    def __str__(self) -> str:
        return f"{self.rank}{self.glyph}"
