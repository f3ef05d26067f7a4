# cardfx/table.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from card_drawer.common.cards import Card
from card_drawer.common.constants import TITLE, SHUFFLE_SPEED_NORMAL
from card_drawer.client.ui import draw_label, shuffle_label, speed_label
from .terminal import TerminalRenderer, Style, RESET, BOLD, DIM, RED_BOLD, ERROR
from .sprites import card_face, card_slot


def suit_style(card: Card) -> Style:
    return RED_BOLD if card.is_red else RESET


@dataclass
class CardTableConfig:
    left_margin: int = 2
    top_margin: int = 1
    gap_y: int = 1


@dataclass(frozen=True)
class TableView:
    """Everything one frame needs, copied out of the client."""
    deck_id: Optional[str]
    remaining: int
    card: Optional[Card]
    error: Optional[str]  # only set while the banner is visible
    polling: bool = False
    is_shuffling: bool = False
    shuffle_speed: int = SHUFFLE_SPEED_NORMAL

    @classmethod
    def of(cls, client) -> "TableView":
        s = client.session
        return cls(
            deck_id=s.deck_id,
            remaining=s.remaining,
            card=s.last_card,
            error=client.banner.message if client.banner.visible else None,
            polling=client.polling,
            is_shuffling=client.is_shuffling,
            shuffle_speed=client.shuffle_speed,
        )


class CardTable:
    """
    Single-screen scene:

      Card Drawer
      <error banner, while visible>
      [d] Start Drawing  [s] Shuffle Deck  [f] Fast Shuffle  [q] Quit
      <card sprite>  <image url>
      Cards Remaining: N

    Controls and card are only shown once a deck exists. render() may be
    called from the polling thread and the input thread; frames don't interleave.
    """

    def __init__(self, cfg: CardTableConfig = CardTableConfig()):
        self.cfg = cfg
        self._lock = threading.Lock()

    def _choose_card_size(self, term_w: int, term_h: int) -> Tuple[int, int]:
        card_w, card_h = (11, 7)
        if term_w < 50 or term_h < 16:
            card_w, card_h = (9, 7)
        return card_w, card_h

    def controls(self, view: TableView) -> List[str]:
        out = [
            f"[d] {draw_label(view.polling)}",
            f"[s] {shuffle_label(view.is_shuffling)}",
            f"[f] {speed_label(view.shuffle_speed)}",
            "[q] Quit",
        ]
        if view.error:
            out.append("[x] Dismiss")
        return out

    def render(self, r: TerminalRenderer, view: TableView) -> None:
        with self._lock:
            self._render(r, view)

    def _render(self, r: TerminalRenderer, view: TableView) -> None:
        term_w, term_h = r.get_size()
        card_w, card_h = self._choose_card_size(term_w, term_h)
        x0 = self.cfg.left_margin
        y = self.cfg.top_margin

        if r.clear_each_frame:
            r.clear()

        r.text(y, x0, TITLE, BOLD)
        y += 1 + self.cfg.gap_y

        if view.error:
            r.text(y, x0, f" {view.error} ", ERROR)
        y += 1 + self.cfg.gap_y

        if view.deck_id is not None:
            r.text(y, x0, "  ".join(self.controls(view)))
            y += 1 + self.cfg.gap_y

            if view.card is not None:
                r.draw_sprite(card_face(view.card.rank, view.card.glyph, card_w, card_h), x0, y, term_w, term_h, style=suit_style(view.card))
                r.text(y + card_h // 2, x0 + card_w + 2, view.card.image, DIM)
            else:
                r.draw_sprite(card_slot(card_w, card_h), x0, y, term_w, term_h, style=DIM)
            y += card_h + self.cfg.gap_y

            r.text(y, x0, f"Cards Remaining: {view.remaining}")
            y += 1

        # park the cursor below the scene for input()
        r.move(min(term_h, y + 2), 1)
        r.flush()
