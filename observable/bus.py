# Named event channels with synchronous, in-order dispatch.
from __future__ import annotations
import logging
import threading
from typing import Dict, List, Mapping, Optional, Tuple, Union

import config
from .errors import ObserverErrors
from .handles import check_event_name, check_observer, describe, index_of
from .models import DispatchStats, ErrorPolicy, Observer, ObserverFailure

log = logging.getLogger(__name__)


class EventRegistry:
    """
    The Subject: event name -> ordered list of observers.

    Channels are created on first touch (register, unregister or fire) and are
    never dropped, even when emptied. Every mutating call returns the registry
    so calls can be chained:

        registry.register("saved", on_saved).fire("saved", doc)

    fire() dispatches over a copy of the channel, so observers registered or
    removed while a fire is running only see the change on the next fire.
    """

    def __init__(self, error_policy: Union[ErrorPolicy, str, None] = None) -> None:
        if error_policy is None:
            error_policy = config.DEFAULT_ERROR_POLICY
        self.error_policy = ErrorPolicy.coerce(error_policy)
        self.stats = DispatchStats()
        self._channels: Dict[str, List[Observer]] = {}
        self._lock = threading.Lock()

    def _channel(self, event_name: str) -> List[Observer]:
        # caller holds the lock
        return self._channels.setdefault(event_name, [])

    def _record_delivery(self, ok: bool) -> None:
        # observers run outside the lock, so take it just for the counters
        with self._lock:
            self.stats.record_delivery(ok)

    # -------------------------------
    # Registration
    # -------------------------------
    def register(self, event_name: str, observer: Observer) -> EventRegistry:
        """Append `observer` to the channel for `event_name`."""
        check_event_name(event_name)
        check_observer(observer)
        with self._lock:
            self._channel(event_name).append(observer)
        log.debug("register %s -> %s", event_name, describe(observer))
        return self

    def register_batch(self, observers_by_event: Optional[Mapping[str, Observer]] = None) -> EventRegistry:
        """Register one observer per event name, in the mapping's order."""
        if not observers_by_event:
            return self
        for event_name, observer in observers_by_event.items():
            self.register(event_name, observer)
        return self

    def unregister(self, event_name: str, observer: Observer) -> EventRegistry:
        """
        Remove the first slot holding `observer`. Missing observers are ignored;
        an unknown event name still gets an (empty) channel.
        """
        check_event_name(event_name)
        with self._lock:
            observers = self._channel(event_name)
            i = index_of(observers, observer)
            if i >= 0:
                del observers[i]
        if i >= 0:
            log.debug("unregister %s -> %s", event_name, describe(observer))
        return self

    # -------------------------------
    # Dispatch
    # -------------------------------
    def fire(self, event_name: str, payload=None) -> EventRegistry:
        """Call every observer of `event_name` with `payload`, in registration order."""
        check_event_name(event_name)
        with self._lock:
            observers = list(self._channel(event_name))
            self.stats.record_fire(event_name)

        failures: List[ObserverFailure] = []
        for observer in observers:
            try:
                observer(payload)
            except Exception as e:
                self._record_delivery(ok=False)
                if self.error_policy is ErrorPolicy.RAISE:
                    raise
                if self.error_policy is ErrorPolicy.ISOLATE:
                    log.exception("observer %s failed on '%s'", describe(observer), event_name)
                else:
                    failures.append(ObserverFailure(event_name, observer, e))
                continue
            self._record_delivery(ok=True)
            log.debug("deliver %s -> %s", event_name, describe(observer))

        if failures:
            raise ObserverErrors(event_name, failures) from failures[0].error
        return self

    # -------------------------------
    # Read-only views
    # -------------------------------
    @property
    def channels(self) -> Dict[str, Tuple[Observer, ...]]:
        """Copy of every channel; mutating it does not touch the registry."""
        with self._lock:
            return {name: tuple(obs) for name, obs in self._channels.items()}

    def observers(self, event_name: str) -> Tuple[Observer, ...]:
        with self._lock:
            return tuple(self._channels.get(event_name, ()))

    def events(self) -> List[str]:
        with self._lock:
            return list(self._channels)

    def has_observers(self, event_name: str) -> bool:
        with self._lock:
            return bool(self._channels.get(event_name))

    def __len__(self) -> int:
        with self._lock:
            return sum(len(obs) for obs in self._channels.values())

    def __repr__(self) -> str:
        return f"<EventRegistry channels={len(self._channels)} policy={self.error_policy.value}>"
