"""Per-card adjustments to battle power accumulated by skills."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BattleCardPowerModifier:
    """Buffs and debuffs collected for a single battle card."""

    multiplicative_buff: float = 0.0
    multiplicative_debuff: float = 0.0
    buff_boosted_power: float = 0.0
    additive_buff: float = 0.0
    additive_debuff: float = 0.0
    protection_from_debuff: float = 0.0

    def calculate(self, power: float) -> float:
        """Apply buffs and debuffs to power; the result is never negative."""
        power += self._additive_buff_value()
        power *= self._multiplicative_buff_value()
        power *= self._multiplicative_debuff_value()
        power += self._additive_debuff_value()
        return max(power, 0.0)

    def _buff_boost(self) -> float:
        return self.buff_boosted_power + 1.0

    def _additive_buff_value(self) -> float:
        return self.additive_buff * self._buff_boost()

    def _multiplicative_buff_value(self) -> float:
        return self.multiplicative_buff * self._buff_boost() + 1.0

    def _debuff_exposure(self) -> float:
        return max(1.0 - self.protection_from_debuff, 0.0)

    def _multiplicative_debuff_value(self) -> float:
        return max(1.0 - self.multiplicative_debuff * self._debuff_exposure(), 0.0)

    def _additive_debuff_value(self) -> float:
        return -self.additive_debuff * self._debuff_exposure()