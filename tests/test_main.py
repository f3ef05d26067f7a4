from card_drawer.client import main as main_mod
from card_drawer.client.api import ApiError
from card_drawer.client.cardfx.terminal import CSI
from card_drawer.common.constants import MSG_FETCH_FAILED


def test_main_without_deck_shows_only_the_error(monkeypatch, capsys, api):
    api.new_deck_error = ApiError("offline")
    monkeypatch.setattr(main_mod, "DeckApi", lambda: api)

    main_mod.main()

    out = capsys.readouterr().out
    # nothing is printed before the first frame clears the screen
    assert out.startswith(CSI + "0m" + CSI + "H" + CSI + "2J")
    assert MSG_FETCH_FAILED in out
    assert "[d]" not in out
    assert api.calls == ["new_deck", "close"]
