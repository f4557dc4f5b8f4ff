from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Union
from enum import Enum


# An observer takes the event payload; its return value is ignored.
Observer = Callable[[Any], Any]


class ErrorPolicy(Enum):
    RAISE = "raise"        # fail fast, partial delivery
    ISOLATE = "isolate"    # log and continue
    COLLECT = "collect"    # run everyone, then raise ObserverErrors

    @classmethod
    def coerce(cls, value: Union["ErrorPolicy", str]) -> "ErrorPolicy":
        """Accept an ErrorPolicy or its string value ("raise", ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown error policy {value!r} (expected one of: {choices})") from None


@dataclass
class ObserverFailure:
    event: str
    observer: Observer
    error: BaseException


@dataclass
class DispatchStats:
    """Running totals for one registry."""
    fires: int = 0
    deliveries: int = 0
    failures: int = 0
    fires_by_event: Dict[str, int] = field(default_factory=dict)

    def record_fire(self, event: str) -> None:
        self.fires += 1
        self.fires_by_event[event] = self.fires_by_event.get(event, 0) + 1

    def record_delivery(self, ok: bool) -> None:
        if ok:
            self.deliveries += 1
        else:
            self.failures += 1
