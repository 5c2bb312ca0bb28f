"""Nations: the player's own and the NPC trading partners."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import CardPack
from .market import Market, MarketItem, Treasury
from .resource import ResourceQuantity


@dataclass(eq=False)
class BaseNation:
    """A nation with a market selling card packs."""

    nation_id: str = ""
    market: Market = field(default_factory=Market)

    def name(self) -> str:
        return f"Nation {self.nation_id}"

    def visible_market_items(self) -> list[MarketItem]:
        return self.market.visible_market_items()

    def can_purchase(self, index: int, treasury: Treasury) -> bool:
        return self.market.can_purchase(index, treasury)

    def purchase(self, index: int, treasury: Treasury) -> CardPack:
        """Buy from this nation's market. Raises PurchaseError on failure."""
        return self.market.purchase(index, treasury)


@dataclass(eq=False)
class MyNation(BaseNation):
    """The player's nation."""

    basic_yield: ResourceQuantity = field(default_factory=ResourceQuantity)

    def name(self) -> str:
        return "My Nation"

    def append_market_item(self, item: MarketItem) -> None:
        """Offer a new item in the player's own market."""
        self.market.items.append(item)

    def append_level(self, market_level: float) -> None:
        """Raise the player's market level."""
        self.market.level += market_level


@dataclass(eq=False)
class OtherNation(BaseNation):
    """An NPC nation whose market grows each time the player buys from it."""

    def purchase(self, index: int, treasury: Treasury) -> CardPack:
        """Buy as usual, then raise the market level by 0.5."""
        pack = super().purchase(index, treasury)
        self.market.level += 0.5
        return pack