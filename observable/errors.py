from typing import List

from .models import ObserverFailure
from .handles import describe


class ObserverErrors(Exception):
    """
    Raised by fire() under the "collect" policy once every observer has run.

    `failures` keeps the individual ObserverFailure records in invocation order;
    the first underlying exception is also chained as __cause__.
    """

    def __init__(self, event: str, failures: List[ObserverFailure]):
        self.event = event
        self.failures = list(failures)
        summary = "; ".join(
            f"{describe(f.observer)}: {type(f.error).__name__}: {f.error}" for f in self.failures
        )
        super().__init__(f"{len(self.failures)} observer(s) failed on '{event}': {summary}")

    @property
    def errors(self) -> List[BaseException]:
        return [f.error for f in self.failures]
