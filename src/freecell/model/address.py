"""Symbolic stack addresses used by moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Zone(Enum):
    """The three disjoint address ranges on the board."""

    FOUNDATION = "f"
    FREECELL = "c"
    TABLEAU = "t"


@dataclass(frozen=True)
class Address:
    """Points at one stack: a zone plus a slot index within it.

    Foundations are indexed in suit order (hearts, diamonds, clubs, spades).
    Whether the index exists is decided by the game, not here.
    """

    zone: Zone
    index: int

    def __str__(self) -> str:
        return f"{self.zone.value}{self.index}"

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse the textual form, e.g. ``"t3"`` or ``"c0"``."""
        text = text.strip().lower()
        if len(text) < 2:
            raise ValueError(f"Invalid address: {text!r}")
        try:
            zone = Zone(text[0])
            index = int(text[1:])
        except ValueError:
            raise ValueError(f"Invalid address: {text!r}") from None
        return cls(zone=zone, index=index)


def foundation(index: int) -> Address:
    return Address(Zone.FOUNDATION, index)


def freecell(index: int) -> Address:
    return Address(Zone.FREECELL, index)


def tableau(index: int) -> Address:
    return Address(Zone.TABLEAU, index)
