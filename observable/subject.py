from typing import Any, Mapping, Optional

from .bus import EventRegistry
from .models import Observer


class Observable:
    """
    Gives an owning object the Subject API by holding an EventRegistry.

    Use it either as a member:

        class Door:
            def __init__(self):
                self.observable = Observable()

        door.observable.add_observer("open", on_open).fire_event("open", door)

    or as a base class (`class Door(Observable)`). The forwarding methods
    return the Observable, which is the owner itself when subclassed, so calls
    chain in both styles.
    """

    def __init__(self, registry: Optional[EventRegistry] = None) -> None:
        self.events = registry if registry is not None else EventRegistry()

    def add_observer(self, event: str, observer: Observer):
        self.events.register(event, observer)
        return self

    def add_observers(self, observers: Optional[Mapping[str, Observer]] = None):
        self.events.register_batch(observers)
        return self

    def remove_observer(self, event: str, observer: Observer):
        self.events.unregister(event, observer)
        return self

    def fire_event(self, event: str, event_data: Any = None):
        self.events.fire(event, event_data)
        return self
