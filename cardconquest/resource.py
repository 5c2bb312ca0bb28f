"""Quantities of the five resources a nation collects and spends."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class ResourceQuantity:
    """An amount of each of the five resource kinds. Values may be negative."""

    money: int = 0
    food: int = 0
    wood: int = 0
    iron: int = 0
    mana: int = 0

    def add(self, other: ResourceQuantity) -> ResourceQuantity:
        """Return the component-wise sum."""
        return ResourceQuantity(*(a + b for a, b in zip(astuple(self), astuple(other))))

    def sub(self, other: ResourceQuantity) -> ResourceQuantity:
        """Return the component-wise difference."""
        return ResourceQuantity(*(a - b for a, b in zip(astuple(self), astuple(other))))

    def can_purchase(self, price: ResourceQuantity) -> bool:
        """Return True if every component covers the matching component of price."""
        return all(have >= need for have, need in zip(astuple(self), astuple(price)))

    def __add__(self, other: ResourceQuantity) -> ResourceQuantity:
        if not isinstance(other, ResourceQuantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: ResourceQuantity) -> ResourceQuantity:
        if not isinstance(other, ResourceQuantity):
            return NotImplemented
        return self.sub(other)