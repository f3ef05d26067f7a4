# cardfx/terminal.py
from __future__ import annotations
import shutil
import sys
from dataclasses import dataclass
from typing import List, Tuple

CSI = "\033["

@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

RESET = Style(prefix=CSI + "0m")
BOLD = Style(prefix=CSI + "1m")
DIM = Style(prefix=CSI + "2m")

RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds, error banner
ERROR = Style(prefix=CSI + "37m" + CSI + "41m" + CSI + "1m")  # white on red

@dataclass
class Sprite:
    lines: List[str]

    @property
    def w(self) -> int:
        return max((len(s) for s in self.lines), default=0)

    @property
    def h(self) -> int:
        return len(self.lines)

class TerminalRenderer:
    def __init__(self, *, clear_each_frame: bool = True, out=None):
        self.clear_each_frame = clear_each_frame
        self.out = out if out is not None else sys.stdout

    def write(self, s: str) -> None:
        self.out.write(s)

    def clear(self) -> None:
        # home + clear
        self.write(CSI + "H" + CSI + "2J")

    def move(self, row_1: int, col_1: int) -> None:
        self.write(f"{CSI}{row_1};{col_1}H")

    def flush(self) -> None:
        self.out.flush()

    def get_size(self) -> Tuple[int, int]:
        s = shutil.get_terminal_size(fallback=(80, 24))
        return s.columns, s.lines

    def begin(self) -> None:
        self.write(CSI + "0m")
        if self.clear_each_frame:
            self.clear()
        self.flush()

    def end(self) -> None:
        self.write(CSI + "0m\n")
        self.flush()

    def text(self, row_0: int, col_0: int, s: str, style: Style = RESET) -> None:
        """Write one line of text at a 0-based position."""
        self.move(row_0 + 1, col_0 + 1)
        self.write(style.prefix + s + style.suffix)

    def draw_sprite(
        self,
        sprite: Sprite,
        x0: int,
        y0: int,
        term_w: int,
        term_h: int,
        style: Style = RESET,
    ) -> None:
        # x0,y0 are 0-based
        for row, line in enumerate(sprite.lines):
            yy = y0 + row
            if yy < 0 or yy >= term_h:
                continue

            if x0 >= term_w or x0 + len(line) <= 0:
                continue

            start = 0
            end = len(line)
            xx = x0

            if xx < 0:
                start = -xx
                xx = 0
            if xx + (end - start) > term_w:
                end = start + (term_w - xx)
            if start >= end:
                continue

            self.move(yy + 1, xx + 1)
            self.write(style.prefix + line[start:end] + style.suffix)
