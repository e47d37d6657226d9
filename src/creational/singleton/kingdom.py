"""
kingdom.py — Singleton: there is only ever one Kingdom.

Every subject who asks for the Kingdom receives the very same realm. The
realm is founded lazily on the first request; founding is guarded by a lock
so two heralds racing to found it at the same moment still end up serving
one and the same Kingdom.

Usage:
    kingdom = Kingdom.instance()
    assert kingdom is Kingdom.instance()
    Kingdom()  # raises SingletonError
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)

__all__ = [
    "SingletonError",
    "SingleInstance",
    "Kingdom",
]


class SingletonError(RuntimeError):
    """
    Raised when a single-instance class is constructed directly instead of via `instance()`.
    """


_CONSTRUCTION_KEY = object()


class SingleInstance:
    """
    Base for classes that must exist at most once per process.

    Each subclass gets its own instance slot and its own lock, so two different
    singleton types never hand out each other's instance. The instance is created
    on the first call to `instance()` and kept for the lifetime of the process.

    Subclasses that define `__init__` must accept and forward `_key`.
    """

    _instance: Optional["SingleInstance"] = None
    _lock = threading.Lock()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.Lock()

    def __init__(self, _key: object = None) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise SingletonError(
                f"{type(self).__name__} cannot be constructed directly; use {type(self).__name__}.instance()"
            )

    @classmethod
    def instance(cls):
        """
        Returns the single shared instance, constructing it on first access.

        :return: The same object on every call for this class.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_key=_CONSTRUCTION_KEY)
                    logger.debug("Constructed single instance of %s", cls.__name__)
        return cls._instance

    # copy and pickle must hand back the shared instance, never a second one
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (type(self).instance, ())


class Kingdom(SingleInstance):
    """
    The one and only realm.

    :ivar name: Name the realm is known by.
    """

    def __init__(self, _key: object = None) -> None:
        super().__init__(_key)
        self.name = "The Kingdom"

    def proclaim(self, decree: str) -> str:
        """
        Announces a decree in the name of the realm.

        :param decree: Text of the decree.
        :return: The proclamation line.
        """
        return f"{self.name} decrees: {decree}"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    first = Kingdom.instance()
    second = Kingdom.instance()
    print(first.proclaim("there shall be only one of us"))
    print(f"Same kingdom? {first is second}")

    try:
        Kingdom()
    except SingletonError as exc:
        print(exc)
