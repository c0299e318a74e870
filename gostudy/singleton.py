"""Singletons created eagerly at import time or lazily on first use."""

from __future__ import annotations

import threading


class EagerSingleton:
    """A singleton whose instance exists as soon as the module is loaded."""


print("create a hungry singleton instance")
_eager_instance = EagerSingleton()


def get_eager_singleton() -> EagerSingleton:
    """Return the instance created at import time."""
    return _eager_instance


class LazySingleton:
    """A singleton created on first request, safely across threads."""


_lazy_instance: LazySingleton | None = None
_lazy_lock = threading.Lock()


def get_lazy_singleton() -> LazySingleton:
    """Return the shared instance, creating it exactly once."""
    global _lazy_instance
    if _lazy_instance is None:
        with _lazy_lock:
            if _lazy_instance is None:
                print("create a lazy singleton instance")
                _lazy_instance = LazySingleton()
    return _lazy_instance