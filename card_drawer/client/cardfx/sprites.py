# sprites.py
from __future__ import annotations
from .terminal import Sprite

def card_face(rank: str, suit: str, w: int = 11, h: int = 7) -> Sprite:
    w = max(w, 9)
    h = max(h, 7)
    inner_w = w - 2

    top = "┌" + "─" * inner_w + "┐"
    bot = "└" + "─" * inner_w + "┘"

    r = rank[:2]
    tl = (r + suit).ljust(inner_w)
    br = (r + suit).rjust(inner_w)

    lines = [top, "│" + tl + "│"]
    middle_rows = h - 4
    mid_symbol = suit.center(inner_w)
    for i in range(middle_rows):
        lines.append("│" + (mid_symbol if i == middle_rows // 2 else " " * inner_w) + "│")
    lines.append("│" + br + "│")
    lines.append(bot)
    return Sprite(lines)

def card_slot(w: int = 11, h: int = 7) -> Sprite:
    """Dashed outline shown where the card goes before the first draw."""
    w = max(w, 9)
    h = max(h, 7)
    inner_w = w - 2

    lines = ["┌" + "╌" * inner_w + "┐"]
    for _ in range(h - 2):
        lines.append("╎" + " " * inner_w + "╎")
    lines.append("└" + "╌" * inner_w + "┘")
    return Sprite(lines)
