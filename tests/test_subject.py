from observable.bus import EventRegistry
from observable.subject import Observable


class Thermostat:
    """Owner that composes an Observable."""

    def __init__(self, registry=None):
        self.observable = Observable(registry)
        self.temp = 20.0

    def set_temp(self, value):
        old, self.temp = self.temp, value
        self.observable.fire_event("changed", (old, value))


class Valve(Observable):
    """Owner that extends Observable."""


def test_composition_chains_on_observable():
    seen, low = [], []
    t = Thermostat()

    out = t.observable.add_observer("changed", seen.append).add_observer("low", low.append)
    assert out is t.observable

    t.set_temp(22.5)
    t.observable.fire_event("low", 15.0).remove_observer("low", low.append).fire_event("low", 10.0)
    assert seen == [(20.0, 22.5)]
    assert low == [15.0]


def test_subclass_chains_on_itself():
    seen = []
    v = Valve()
    out = v.add_observer("opened", seen.append).fire_event("opened", 1).fire_event("opened")
    assert out is v
    assert seen == [1, None]


def test_add_observers_and_remove_observer():
    calls = []
    on_a = lambda p: calls.append(("a", p))
    on_b = lambda p: calls.append(("b", p))
    v = Valve().add_observers({"a": on_a, "b": on_b})

    v.fire_event("a", 1).fire_event("b", 2)
    v.remove_observer("a", on_a).fire_event("a", 3)

    assert calls == [("a", 1), ("b", 2)]
    assert v.events.channels == {"a": (), "b": (on_b,)}


def test_add_observers_without_argument_is_noop():
    v = Valve()
    assert v.add_observers() is v
    assert v.events.events() == []


def test_owners_can_share_a_registry():
    shared = EventRegistry()
    seen = []
    t1, t2 = Thermostat(shared), Thermostat(shared)
    t1.observable.add_observer("changed", seen.append)

    t2.set_temp(30.0)
    assert seen == [(20.0, 30.0)]
    assert t1.observable.events is t2.observable.events


def test_registry_holds_no_reference_to_owner():
    t = Thermostat()
    assert t not in t.observable.events.channels.values()
    assert t.observable.events.channels == {}
