from __future__ import annotations
from collections import deque
from typing import Any, Deque, Dict, List, Optional, Tuple

import config
from .bus import EventRegistry
from .models import Observer


class EventRecorder:
    """
    Records what a registry fires.

    One listener per event name is created (and cached) so the same handle can
    later be unregistered again:

        rec = EventRecorder().attach(registry, "opened", "closed")
        ...
        rec.payloads("opened")
    """

    def __init__(self, maxlen: Optional[int] = None) -> None:
        self.history: Deque[Tuple[str, Any]] = deque(maxlen=maxlen or config.HISTORY_LEN)
        self._listeners: Dict[str, Observer] = {}
        self._attached: List[Tuple[EventRegistry, str]] = []

    def listener(self, event_name: str) -> Observer:
        fn = self._listeners.get(event_name)
        if fn is None:
            def fn(payload, _name=event_name):
                self.history.append((_name, payload))
            fn.__qualname__ = f"EventRecorder.listener[{event_name}]"
            self._listeners[event_name] = fn
        return fn

    def attach(self, registry: EventRegistry, *event_names: str) -> "EventRecorder":
        for name in event_names:
            registry.register(name, self.listener(name))
            self._attached.append((registry, name))
        return self

    def detach(self, registry: EventRegistry) -> "EventRecorder":
        remaining = []
        for reg, name in self._attached:
            if reg is registry:
                reg.unregister(name, self.listener(name))
            else:
                remaining.append((reg, name))
        self._attached = remaining
        return self

    def payloads(self, event_name: str) -> List[Any]:
        return [payload for name, payload in self.history if name == event_name]

    def count(self, event_name: Optional[str] = None) -> int:
        if event_name is None:
            return len(self.history)
        return sum(1 for name, _ in self.history if name == event_name)

    def clear(self) -> None:
        self.history.clear()
