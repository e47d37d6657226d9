"""
fighting_memory.py — Technique recall as a (degenerate) Chain of Responsibility.

A warrior remembers a list of techniques. When a technique is called out by
name, every remembered technique tries to recall whether the name is its own;
the one that recognizes it performs, the others stay silent.

Two dispatch styles are offered:
  - `recall(name)`        visits every technique (fan-out, no early exit);
  - `recall_first(name)`  stops at the first technique that handles the name
                          (classic short-circuiting chain).

Python 3.9+.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List

logger = logging.getLogger(__name__)

__all__ = [
    "Technique",
    "SwordTechnique",
    "ShieldTechnique",
    "FightingMemory",
]


# ----------------------------- Techniques -------------------------------- #
class Technique(ABC):
    """
    A single fighting technique a warrior can remember.

    Techniques are stateless: the name they answer to and the cry they make
    are class constants.
    """

    name: str = ""

    def perform(self, name: str) -> bool:
        """
        Performs the technique if `name` is the one it answers to.

        :param name: Technique name being called out.
        :return: True if this technique handled the name; False otherwise.
        """
        # a technique without a name answers to nothing, not to ""
        if not self.name or name != self.name:
            return False
        logger.debug("%s handled '%s'", type(self).__name__, name)
        self.execute()
        return True

    @abstractmethod
    def execute(self) -> None:
        """
        Carries out the technique (prints its cry).
        """


class SwordTechnique(Technique):
    """Two quick cuts with the sword."""

    name = "doubleCut"

    def execute(self) -> None:
        print("cut cut!")


class ShieldTechnique(Technique):
    """Blocks a blow with the shield."""

    name = "parry"

    def execute(self) -> None:
        print("KLANG!")


# ------------------------------ Memory ----------------------------------- #
class FightingMemory:
    """
    Ordered, append-only record of the techniques a warrior knows.

    Insertion order is dispatch order. The same technique may be added more than once.
    """

    def __init__(self) -> None:
        self._techniques: List[Technique] = []

    def add(self, technique: Technique) -> "FightingMemory":
        """
        Appends a technique to the end of the memory.

        :param technique: Technique to remember.
        :return: This memory, to allow fluent chaining of `add` calls.
        """
        self._techniques.append(technique)
        return self

    def recall(self, name: str) -> None:
        """
        Asks every remembered technique, in order, to perform `name`.

        All techniques are visited whether or not an earlier one matched.
        An unknown name is silently ignored.

        :param name: Technique name being called out.
        """
        techniques = list(self._techniques)
        logger.debug("Recalling '%s' across %d technique(s)", name, len(techniques))
        for technique in techniques:
            technique.perform(name)

    def recall_first(self, name: str) -> bool:
        """
        Walks the techniques in order and stops at the first one that handles `name`.

        :param name: Technique name being called out.
        :return: True if some technique handled the name; False otherwise.
        """
        techniques = list(self._techniques)
        logger.debug("Recalling first match for '%s' across %d technique(s)", name, len(techniques))
        for technique in techniques:
            if technique.perform(name):
                return True
        return False

    def __iter__(self) -> Iterator[Technique]:
        return iter(list(self._techniques))

    def __len__(self) -> int:
        return len(self._techniques)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    memory = FightingMemory().add(SwordTechnique()).add(ShieldTechnique())
    memory.recall("parry")      # KLANG!
    memory.recall("doubleCut")  # cut cut!
    memory.recall("somersault")  # nobody remembers this one
