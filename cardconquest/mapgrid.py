"""The map grid and the kinds of points on it."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .enemy import Enemy
from .nation import MyNation, OtherNation
from .territory import Territory


class Point(Protocol):
    def passable(self) -> bool: ...

    def is_my_nation(self) -> bool: ...


@dataclass(eq=False)
class MyNationPoint:
    """The player's nation."""

    my_nation: MyNation

    def passable(self) -> bool:
        return True

    def is_my_nation(self) -> bool:
        return True


@dataclass(eq=False)
class OtherNationPoint:
    """An NPC nation."""

    other_nation: OtherNation

    def passable(self) -> bool:
        return True

    def is_my_nation(self) -> bool:
        return False


@dataclass(eq=False)
class WildernessPoint:
    """A conquerable point guarded by an enemy; passable once controlled."""

    terrain_type: str = ""
    controlled: bool = False
    enemy: Optional[Enemy] = None
    territory: Optional[Territory] = None

    def passable(self) -> bool:
        return self.controlled

    def is_my_nation(self) -> bool:
        return False

    def get_enemy(self) -> Optional[Enemy]:
        return self.enemy

    def set_controlled(self, controlled: bool) -> None:
        self.controlled = controlled


@dataclass(eq=False)
class BossPoint:
    """A boss's lair; never passable."""

    boss: Optional[Enemy] = None
    defeated: bool = False

    def passable(self) -> bool:
        return False

    def is_my_nation(self) -> bool:
        return False

    def get_enemy(self) -> Optional[Enemy]:
        return self.boss

    def set_controlled(self, controlled: bool) -> None:
        self.defeated = controlled


@dataclass(frozen=True)
class MapGridSize:
    x: int
    y: int

    def index(self, x: int, y: int) -> int:
        return y * self.x + x

    def xy(self, index: int) -> tuple[int, int]:
        return index % self.x, index // self.x

    def length(self) -> int:
        return self.x * self.y


@dataclass(eq=False)
class MapGrid:
    """Points laid out row by row; the point at (x, y) is points[y * size.x + x]."""

    size: MapGridSize
    points: list[Optional[Point]] = field(default_factory=list)
    _accessibles: Optional[list[bool]] = field(default=None, init=False, repr=False)

    def get_point(self, x: int, y: int) -> Optional[Point]:
        """Return the point at (x, y), or None when out of bounds or empty."""
        index = self.index_from_xy(x, y)
        if index is None:
            return None
        return self.points[index]

    def xy_of_point(self, point: Point) -> Optional[tuple[int, int]]:
        """Return the coordinates of this very point object, or None if absent."""
        for index, candidate in enumerate(self.points):
            if candidate is point:
                return self.xy_from_index(index)
        return None

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.x and 0 <= y < self.size.y

    def index_from_xy(self, x: int, y: int) -> Optional[int]:
        if not self._in_bounds(x, y):
            return None
        return self.size.index(x, y)

    def xy_from_index(self, index: int) -> Optional[tuple[int, int]]:
        x, y = self.size.xy(index)
        if not self._in_bounds(x, y):
            return None
        return x, y

    def update_accessibles(self) -> None:
        """Recompute which points can be reached through passable points from the player's nation."""
        accessibles = [p is not None and p.is_my_nation() for p in self.points]
        queue = deque(i for i, reachable in enumerate(accessibles) if reachable)
        visited: set[int] = set()

        while queue:
            idx = queue.popleft()
            visited.add(idx)
            xy = self.xy_from_index(idx)
            if xy is None:
                continue
            x, y = xy
            for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                neighbour = self.index_from_xy(nx, ny)
                if neighbour is None or neighbour in visited:
                    continue
                accessibles[neighbour] = True
                point = self.points[neighbour]
                if point is not None and point.passable():
                    queue.append(neighbour)

        self._accessibles = accessibles

    def can_interact(self, x: int, y: int) -> bool:
        """Return True if (x, y) is reachable from the player's nation along controlled points."""
        if self._accessibles is None:
            self.update_accessibles()
        index = self.index_from_xy(x, y)
        if index is None:
            return False
        return self._accessibles[index]