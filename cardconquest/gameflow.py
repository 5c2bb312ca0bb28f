"""The overall state of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import CardDeck, CardGenerator
from .mapgrid import BossPoint, MapGrid, Point, WildernessPoint
from .market import Treasury
from .nation import MyNation
from .resource import ResourceQuantity


@dataclass(eq=False)
class GameState:
    """The player's nation, deck, map, treasury and current turn."""

    my_nation: MyNation
    map_grid: MapGrid
    treasury: Treasury
    card_deck: CardDeck = field(default_factory=CardDeck)
    current_turn: int = 0
    card_generator: CardGenerator = field(default_factory=CardGenerator)

    def get_yield(self) -> ResourceQuantity:
        """Return the nation's basic yield plus that of every controlled territory."""
        total = self.my_nation.basic_yield
        for point in self.map_grid.points:
            if isinstance(point, WildernessPoint) and point.controlled:
                total = total.add(point.territory.yield_())
        return total

    def add_yield(self) -> None:
        self.treasury.add(self.get_yield())

    def next_turn(self) -> None:
        """Advance the turn and collect the yield."""
        self.current_turn += 1
        self.add_yield()

    def is_victory(self) -> bool:
        """Return True once every boss has been defeated (or there are none)."""
        return all(
            point.defeated for point in self.map_grid.points if isinstance(point, BossPoint)
        )

    def can_interact(self, x: int, y: int) -> bool:
        return self.map_grid.can_interact(x, y)

    def get_point(self, x: int, y: int) -> Point | None:
        return self.map_grid.get_point(x, y)