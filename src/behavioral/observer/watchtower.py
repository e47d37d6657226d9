"""
watchtower.py — Observer: watchtowers guarding a strategic point.

When a sentry at the strategic point spots something, the sighting is sent
to every watchtower standing around it. Each tower raises its own alarm with
the very same message, in the order the towers were built.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

__all__ = [
    "Signal",
    "Watchtower",
    "HornWatchtower",
    "BellWatchtower",
    "StrategicPoint",
]


class Signal(list):
    """
    List of callables that is itself callable.

    Calling the signal calls every subscriber with the same arguments, in
    subscription order.
    """

    def __call__(self, *args, **kwargs):
        for item in list(self):
            item(*args, **kwargs)


class Watchtower(ABC):
    @abstractmethod
    def report(self, message: str) -> None:
        """
        Raises this tower's alarm for a sighting.

        :param message: What the sentry saw.
        """


class HornWatchtower(Watchtower):
    def report(self, message: str) -> None:
        print(f"{message}, sound the horns!!!!")


class BellWatchtower(Watchtower):
    def report(self, message: str) -> None:
        print(f"{message}, sound the bells!!!")


class StrategicPoint:
    """
    A place worth guarding; watchtowers subscribe to its sightings.
    """

    def __init__(self) -> None:
        self._sightings = Signal()

    def add(self, watchtower: Watchtower) -> "StrategicPoint":
        """
        Builds a watchtower around this point.

        :param watchtower: Tower to notify of future sightings.
        :return: This point, to allow fluent chaining of `add` calls.
        """
        self._sightings.append(watchtower.report)
        return self

    def alert(self, message: str) -> None:
        """
        Sends the same message to every watchtower in the order they were added.

        :param message: What the sentry saw.
        """
        logger.debug("Alerting %d watchtower(s): %s", len(self._sightings), message)
        self._sightings(message)

    def __len__(self) -> int:
        return len(self._sightings)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    harbour = StrategicPoint()
    harbour.add(HornWatchtower()).add(BellWatchtower())
    harbour.alert("I see ten boats")
