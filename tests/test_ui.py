import pytest

from card_drawer.client import ui


@pytest.mark.parametrize("raw, command", [
    ("d", "draw"),
    (" DRAW \n", "draw"),
    ("s", "shuffle"),
    ("f", "speed"),
    ("x", "dismiss"),
    ("q", "quit"),
    ("exit", "quit"),
    ("hit", None),
    ("", None),
])
def test_parse_command(raw, command):
    assert ui.parse_command(raw) == command


def test_read_command_skips_unknown(monkeypatch):
    lines = iter(["what", "s"])
    monkeypatch.setattr("builtins.input", lambda *a: next(lines))
    assert ui.read_command() == "shuffle"


def test_read_command_eof_quits(monkeypatch):
    def eof(*a):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert ui.read_command() == "quit"


def test_labels():
    assert ui.draw_label(False) == "Start Drawing"
    assert ui.draw_label(True) == "Stop Drawing"
    assert ui.speed_label(1000) == "Fast Shuffle"
    assert ui.speed_label(500) == "Normal Shuffle"
