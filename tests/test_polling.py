import threading

from card_drawer.client.polling import Poller


def _live_pollers():
    return [t for t in threading.enumerate() if t.name == "test-poller" and t.is_alive()]


def test_ticks_until_stopped():
    ticked = threading.Event()
    p = Poller(ticked.set, interval=0.01, name="test-poller")
    assert p.start()
    assert ticked.wait(2.0)
    assert p.stop()
    assert not p.active
    assert _live_pollers() == []


def test_toggle_pair_returns_to_idle():
    p = Poller(lambda: None, interval=60.0, name="test-poller")
    assert p.toggle() is True
    assert len(_live_pollers()) == 1
    assert p.toggle() is False
    assert _live_pollers() == []


def test_start_twice_keeps_one_thread():
    p = Poller(lambda: None, interval=60.0, name="test-poller")
    try:
        assert p.start()
        assert not p.start()
        assert len(_live_pollers()) == 1
    finally:
        p.stop()


def test_stop_from_inside_tick():
    done = threading.Event()
    calls = []

    def tick():
        calls.append(1)
        p.stop()
        done.set()

    p = Poller(tick, interval=0.01, name="test-poller")
    p.start()
    thread = p._thread
    assert done.wait(2.0)
    thread.join(2.0)
    assert not thread.is_alive()
    assert not p.active
    assert calls == [1]


def test_failing_tick_keeps_schedule():
    ok = threading.Event()
    calls = []

    def tick():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        ok.set()

    p = Poller(tick, interval=0.01, name="test-poller")
    p.start()
    try:
        assert ok.wait(2.0)
    finally:
        p.stop()
