import io

from card_drawer.client.cardfx.table import CardTable, TableView
from card_drawer.client.cardfx.terminal import TerminalRenderer
from card_drawer.common.cards import Card

ACE = Card(code="AS", value="ACE", suit="SPADES", image="https://deckofcardsapi.com/static/img/AS.png")


def _render(view):
    buf = io.StringIO()
    CardTable().render(TerminalRenderer(out=buf), view)
    return buf.getvalue()


def test_no_deck_shows_no_controls():
    out = _render(TableView(deck_id=None, remaining=0, card=None, error="Failed to fetch deck."))
    assert "Card Drawer" in out
    assert "Failed to fetch deck." in out
    assert "[d]" not in out
    assert "Cards Remaining" not in out


def test_deck_with_card():
    out = _render(TableView(deck_id="abc", remaining=51, card=ACE, error=None))
    assert "[d] Start Drawing" in out
    assert "[s] Shuffle Deck" in out
    assert "[f] Fast Shuffle" in out
    assert "A♠" in out
    assert ACE.image in out
    assert "Cards Remaining: 51" in out


def test_labels_follow_state():
    out = _render(TableView(
        deck_id="abc", remaining=52, card=None, error=None,
        polling=True, is_shuffling=True, shuffle_speed=500,
    ))
    assert "Stop Drawing" in out
    assert "Shuffling..." in out
    assert "Normal Shuffle" in out


def test_view_of_client(client, api):
    client.initialize()
    client.draw()
    view = TableView.of(client)
    assert view.deck_id == "deck123"
    assert view.remaining == 51
    assert view.card is client.session.last_card
    assert view.error is None


def test_dismiss_only_offered_with_an_error():
    assert "[x] Dismiss" not in _render(TableView(deck_id="abc", remaining=52, card=None, error=None))
    assert "[x] Dismiss" in _render(TableView(deck_id="abc", remaining=52, card=None, error="Failed to draw card."))
