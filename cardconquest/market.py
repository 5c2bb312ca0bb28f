"""Markets selling card packs, and the treasury that pays for them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import CardPack
from .resource import ResourceQuantity


class PurchaseError(Exception):
    """Raised when a purchase or payment cannot be made."""


@dataclass(eq=False)
class Treasury:
    """The resources a player holds."""

    resources: ResourceQuantity = field(default_factory=ResourceQuantity)

    def add(self, other: ResourceQuantity) -> None:
        self.resources = self.resources.add(other)

    def sub(self, other: ResourceQuantity) -> None:
        """Pay other. Raises PurchaseError, leaving the treasury unchanged, if it is short."""
        if not self.resources.can_purchase(other):
            raise PurchaseError(f"insufficient resources: have {self.resources}, need {other}")
        self.resources = self.resources.sub(other)


@dataclass(eq=False)
class MarketItem:
    """A card pack on sale, its price and the market level needed to see it."""

    card_pack: CardPack
    price: ResourceQuantity = field(default_factory=ResourceQuantity)
    required_level: float = 0.0

    def can_purchase(self, treasury: Treasury) -> bool:
        return treasury.resources.can_purchase(self.price)


@dataclass(eq=False)
class Market:
    """A market whose level decides which items are on offer."""

    level: float = 0.0
    items: list[MarketItem] = field(default_factory=list)

    def visible_market_items(self) -> list[MarketItem]:
        return [item for item in self.items if self.level >= item.required_level]

    def can_purchase(self, index: int, treasury: Treasury) -> bool:
        if not 0 <= index < len(self.items):
            return False
        item = self.items[index]
        if self.level < item.required_level:
            return False
        return item.can_purchase(treasury)

    def purchase(self, index: int, treasury: Treasury) -> CardPack:
        """Buy the item at index and return its card pack.

        Raises PurchaseError if the index is invalid, the item is not visible or
        the treasury cannot pay.
        """
        if not self.can_purchase(index, treasury):
            raise PurchaseError(f"cannot purchase item at index {index}")
        item = self.items[index]
        treasury.sub(item.price)
        return item.card_pack