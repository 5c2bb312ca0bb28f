"""Conquered territories that yield resources each turn."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import StructureCard
from .resource import ResourceQuantity


@dataclass(eq=False)
class Territory:
    """A conquered wilderness point holding structure cards."""

    territory_id: str = ""
    cards: list[StructureCard] = field(default_factory=list)
    card_slot: int = 0
    base_yield: ResourceQuantity = field(default_factory=ResourceQuantity)

    def append_card(self, card: StructureCard) -> bool:
        """Place a structure card; return False if every slot is taken."""
        if len(self.cards) >= self.card_slot:
            return False
        self.cards.append(card)
        return True

    def remove_card(self, index: int) -> StructureCard:
        """Take back the card at index. Raises IndexError if there is none."""
        if not 0 <= index < len(self.cards):
            raise IndexError(f"no structure card at index {index}")
        return self.cards.pop(index)

    def yield_(self) -> ResourceQuantity:
        """Return the base yield passed through each placed card's yield modifier in order."""
        result = self.base_yield
        for card in self.cards:
            if card.yield_modifier is not None:
                result = card.yield_modifier.modify(result)
        return result