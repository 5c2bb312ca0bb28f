"""Battles between the player's battle cards and an enemy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .card import BattleCard, BattleCardSkillCalculationOptions
from .enemy import Enemy, EnemySkillCalculationOptions
from .modifier import BattleCardPowerModifier


@dataclass(eq=False)
class Battlefield:
    """A battle against the enemy guarding an unconquered point."""

    enemy: Enemy
    effects: list[Any] = field(default_factory=list)
    base_support_power: float = 0.0
    battle_cards: list[BattleCard] = field(default_factory=list)
    card_slot: int = 0

    def can_beat(self) -> bool:
        """Return True if the total power reaches the enemy's power."""
        return self.calculate_total_power() >= self.enemy.power

    def beat(self) -> float:
        """Conclude the battle as a win and return the winning power.

        Raises ValueError if the power is not enough to beat the enemy.
        """
        total = self.calculate_total_power()
        if total < self.enemy.power:
            raise ValueError(
                f"power {total} is not enough to beat {self.enemy.enemy_id!r} ({self.enemy.power})"
            )
        return total

    def add_battle_card(self, card: BattleCard) -> bool:
        """Play a card; return False if every slot is taken."""
        if len(self.battle_cards) >= self.card_slot:
            return False
        self.battle_cards.append(card)
        return True

    def remove_battle_card(self, index: int) -> BattleCard:
        """Take back the card at index. Raises IndexError if there is none."""
        if not 0 <= index < len(self.battle_cards):
            raise IndexError(f"no battle card at index {index}")
        return self.battle_cards.pop(index)

    def calculate_total_power(self) -> float:
        """Return support power plus every card's power after all skills apply."""
        modifiers = [BattleCardPowerModifier() for _ in self.battle_cards]

        card_options = BattleCardSkillCalculationOptions(
            battle_cards=self.battle_cards,
            battle_card_power_modifiers=modifiers,
            enemy=self.enemy,
        )
        for index, card in enumerate(self.battle_cards):
            card_options.battle_card_index = index
            if card.skill is not None:
                card.skill.calculate(card_options)

        enemy_options = EnemySkillCalculationOptions(
            battle_cards=self.battle_cards,
            battle_card_power_modifiers=modifiers,
            enemy=self.enemy,
        )
        for skill in self.enemy.skills:
            skill.calculate(enemy_options)

        total = self.base_support_power * (card_options.support_power_multiplier + 1.0)
        total += sum(
            modifier.calculate(float(card.power()))
            for card, modifier in zip(self.battle_cards, modifiers)
        )
        return total


def new_battlefield(enemy: Enemy, support_power: float) -> Battlefield:
    """Create a battlefield with as many slots as the enemy allows."""
    return Battlefield(
        enemy=enemy,
        base_support_power=support_power,
        card_slot=enemy.battle_card_slot,
    )