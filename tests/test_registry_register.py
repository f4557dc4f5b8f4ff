import pytest
from hypothesis import given, strategies as st

import config
from observable.bus import EventRegistry


def make_observers(n, calls):
    """n distinct observers that append their index to `calls`."""
    return [lambda payload, i=i: calls.append(i) for i in range(n)]


def test_register_preserves_order():
    calls = []
    f1, f2, f3 = make_observers(3, calls)
    reg = EventRegistry()
    reg.register("e", f1)
    reg.register("e", f2)
    reg.register("e", f3)

    reg.fire("e")
    assert calls == [0, 1, 2]


@given(n=st.integers(min_value=0, max_value=30))
def test_register_order_property(n):
    calls = []
    reg = EventRegistry()
    for fn in make_observers(n, calls):
        reg.register("e", fn)

    reg.fire("e")
    assert calls == list(range(n))


def test_no_cross_channel_leakage():
    calls = []
    (f,) = make_observers(1, calls)
    reg = EventRegistry().register("a", f)

    reg.fire("b")
    assert calls == []
    assert reg.observers("a") == (f,)


def test_duplicate_registration_invoked_per_slot():
    calls = []
    (f,) = make_observers(1, calls)
    reg = EventRegistry().register("e", f).register("e", f)

    reg.fire("e")
    assert calls == [0, 0]
    assert len(reg) == 2


def test_register_batch_matches_sequential_register():
    f1 = lambda payload: None
    f2 = lambda payload: None

    batch = EventRegistry().register_batch({"e1": f1, "e2": f2})
    single = EventRegistry().register("e1", f1).register("e2", f2)

    assert batch.channels == single.channels
    assert batch.events() == ["e1", "e2"]


def test_register_batch_appends_after_existing():
    calls = []
    f1, f2 = make_observers(2, calls)
    reg = EventRegistry().register("e", f1).register_batch({"e": f2})

    reg.fire("e")
    assert calls == [0, 1]


@pytest.mark.parametrize("batch", [None, {}])
def test_register_batch_empty_is_noop(batch):
    reg = EventRegistry()
    assert reg.register_batch(batch) is reg
    assert reg.channels == {}


def test_register_batch_stops_at_invalid_item():
    f = lambda payload: None
    reg = EventRegistry()
    with pytest.raises(TypeError):
        reg.register_batch({"ok": f, "bad": "not callable"})
    # items before the bad one stay registered
    assert reg.observers("ok") == (f,)
    assert reg.observers("bad") == ()


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        EventRegistry().register("e", 42)


def test_register_rejects_non_string_name():
    with pytest.raises(TypeError):
        EventRegistry().register(7, lambda payload: None)


def test_register_rejects_empty_name():
    with pytest.raises(ValueError):
        EventRegistry().register("", lambda payload: None)


def test_empty_name_allowed_when_configured(monkeypatch):
    monkeypatch.setattr(config, "REJECT_EMPTY_EVENT_NAMES", False)
    seen = []
    EventRegistry().register("", seen.append).fire("", "x")
    assert seen == ["x"]


def test_chaining_returns_registry_and_keeps_prior_channels():
    calls = []
    f1, f2 = make_observers(2, calls)
    reg = EventRegistry()

    out = reg.register("a", f1).register("b", f2).unregister("b", f2).fire("a", None)

    assert out is reg
    assert reg.observers("a") == (f1,)
    assert reg.observers("b") == ()
    assert calls == [0]


def test_channels_view_is_a_copy():
    f = lambda payload: None
    reg = EventRegistry().register("e", f)

    view = reg.channels
    view["e"] = ()
    view["other"] = (f,)

    assert reg.observers("e") == (f,)
    assert "other" not in reg.events()
