"""Keyboard to stack address translation."""

from __future__ import annotations

from typing import Dict, Optional

from freecell.model.address import Address, Zone

FREECELL_KEYS = "asdf"
FOUNDATION_KEYS = "hjkl"
TABLEAU_KEYS = "12345678"


class KeyMap:
    """Maps single key presses to board addresses.

    Default layout: freecells on ``a s d f``, foundations on ``h j k l``
    (hearts, diamonds, clubs, spades) and tableau piles on the digit row.
    """

    def __init__(
        self,
        freecell_keys: str = FREECELL_KEYS,
        foundation_keys: str = FOUNDATION_KEYS,
        tableau_keys: str = TABLEAU_KEYS,
    ) -> None:
        self.table: Dict[str, Address] = {}
        for zone, keys in (
            (Zone.FREECELL, freecell_keys),
            (Zone.FOUNDATION, foundation_keys),
            (Zone.TABLEAU, tableau_keys),
        ):
            for index, key in enumerate(keys):
                if key in self.table:
                    raise ValueError(f"Key {key!r} bound twice")
                self.table[key] = Address(zone, index)

    @classmethod
    def for_tableau(cls, tableau_count: int) -> KeyMap:
        """Default layout with one digit key per tableau pile (up to 9)."""
        if not 1 <= tableau_count <= 9:
            raise ValueError(f"No default keys for {tableau_count} tableau piles")
        digits = "".join(str(i) for i in range(1, tableau_count + 1))
        return cls(tableau_keys=digits)

    def translate(self, key: str) -> Optional[Address]:
        return self.table.get(key.lower())

    def key_for(self, address: Address) -> Optional[str]:
        for key, bound in self.table.items():
            if bound == address:
                return key
        return None
