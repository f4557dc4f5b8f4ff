import inspect
from typing import Any, Sequence

import config


def check_event_name(event_name: Any) -> str:
    if not isinstance(event_name, str):
        raise TypeError(f"event name must be a str, got {type(event_name).__name__}")
    if config.REJECT_EMPTY_EVENT_NAMES and event_name == "":
        raise ValueError("event name must not be empty")
    return event_name


def check_observer(observer: Any) -> None:
    if not callable(observer):
        raise TypeError(f"observer must be callable, got {type(observer).__name__}")


def _is_bound(observer: Any) -> bool:
    # python methods, builtin methods (list.append) and method-wrappers
    return hasattr(observer, "__self__") and not inspect.isfunction(observer)


def same_observer(a: Any, b: Any) -> bool:
    """
    Identity-based handle equality.

    Bound methods (python or builtin) are recreated on every attribute access,
    so two of them match when they bind the same object (by identity) to the
    same function. Everything else (functions, lambdas, closures, callable
    instances) only matches itself; a callable's own __eq__ is never consulted.
    """
    if a is b:
        return True
    if not (_is_bound(a) and _is_bound(b)):
        return False
    if a.__self__ is not b.__self__:
        return False
    func_a = getattr(a, "__func__", None)
    func_b = getattr(b, "__func__", None)
    if func_a is not None or func_b is not None:
        return func_a is func_b
    return type(a) is type(b) and getattr(a, "__name__", None) == getattr(b, "__name__", None)


def index_of(observers: Sequence[Any], observer: Any) -> int:
    """Position of the first slot holding `observer`, or -1."""
    for i, candidate in enumerate(observers):
        if same_observer(candidate, observer):
            return i
    return -1


def describe(observer: Any) -> str:
    """Short human-readable name for log lines."""
    name = getattr(observer, "__qualname__", None) or getattr(observer, "__name__", None)
    if name is None:
        name = type(observer).__qualname__
    return name
