# card_drawer/client/ui.py

from typing import Optional

from card_drawer.common.constants import SHUFFLE_SPEED_NORMAL

# command -> accepted inputs
COMMANDS = {
    "draw": ("d", "draw"),
    "shuffle": ("s", "shuffle"),
    "speed": ("f", "speed"),
    "dismiss": ("x", "dismiss"),
    "quit": ("q", "quit", "exit"),
}


def parse_command(raw: str) -> Optional[str]:
    """Map a typed line to a command name, or None if unknown."""
    raw = raw.strip().lower()
    for command, aliases in COMMANDS.items():
        if raw in aliases:
            return command
    return None


def read_command() -> str:
    """
    Blocks until a known command is typed. EOF counts as "quit".
    """
    while True:
        try:
            raw = input()
        except EOFError:
            return "quit"
        command = parse_command(raw)
        if command is not None:
            return command


def draw_label(polling: bool) -> str:
    return "Stop Drawing" if polling else "Start Drawing"


def speed_label(shuffle_speed: int) -> str:
    return "Fast Shuffle" if shuffle_speed == SHUFFLE_SPEED_NORMAL else "Normal Shuffle"


def shuffle_label(is_shuffling: bool) -> str:
    return "Shuffling..." if is_shuffling else "Shuffle Deck"
