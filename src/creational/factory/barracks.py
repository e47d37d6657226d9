"""
barracks.py — Factory: the Barracks summons warriors.

Callers ask the Barracks for a warrior and get something that can tell which
weapon it carries. Which kind of warrior walks out is the Barracks' own
business; today it is a swordsman.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Type

from behavioral.chain_of_responsibility.fighting_memory import FightingMemory

logger = logging.getLogger(__name__)

__all__ = [
    "Warrior",
    "Swordsman",
    "Barracks",
]


class Warrior(ABC):
    """
    Anything that can fight for the Kingdom.

    :param memory: Techniques this warrior remembers; a fresh, empty memory if omitted.
    """

    def __init__(self, memory: Optional[FightingMemory] = None) -> None:
        self.memory = memory if memory is not None else FightingMemory()

    @abstractmethod
    def equipped_weapon(self) -> str:
        """
        :return: Name of the weapon this warrior carries.
        """


class Swordsman(Warrior):
    def equipped_weapon(self) -> str:
        return "sword"


class Barracks:
    """
    Creates warriors without letting callers pick the concrete type.

    :param variant: Warrior class to train; defaults to `Barracks.default_variant`.
    :raises TypeError: If `variant` is not a Warrior subclass.
    """

    default_variant: Type[Warrior] = Swordsman

    def __init__(self, variant: Optional[Type[Warrior]] = None) -> None:
        variant = variant or self.default_variant
        if not (isinstance(variant, type) and issubclass(variant, Warrior)):
            raise TypeError(f"Barracks can only train Warrior subclasses, got {variant!r}")
        self._variant = variant

    def summon(self, memory: Optional[FightingMemory] = None) -> Warrior:
        """
        Summons a new warrior.

        :param memory: Optional fighting memory to hand to the warrior.
        :return: A fresh Warrior instance; never one returned before.
        """
        warrior = self._variant(memory=memory)
        logger.debug("Summoned %s carrying a %s", type(warrior).__name__, warrior.equipped_weapon())
        return warrior

    def summon_many(self, count: int) -> List[Warrior]:
        """
        Summons several independent warriors.

        :param count: Number of warriors; must be >= 0.
        :return: List of `count` fresh warriors.
        :raises ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError("Cannot summon a negative number of warriors.")
        return [self.summon() for _ in range(count)]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    barracks = Barracks()
    first = barracks.summon()
    second = barracks.summon()
    print(f"First warrior carries a {first.equipped_weapon()}")
    print(f"Second warrior carries a {second.equipped_weapon()}")
    print(f"Same warrior? {first is second}")
