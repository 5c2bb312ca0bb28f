"""Enemies and the skills they use to weaken the player's battle cards."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .modifier import BattleCardPowerModifier

if TYPE_CHECKING:
    from .card import BattleCard


@dataclass(eq=False)
class Enemy:
    """An opponent guarding a map point."""

    enemy_id: str = ""
    enemy_type: str = ""
    power: float = 0.0
    skills: list[EnemySkill] = field(default_factory=list)
    battle_card_slot: int = 0
    question: str = ""


@dataclass
class EnemySkillCalculationOptions:
    """State an enemy skill reads and modifies during power calculation."""

    battle_cards: list[BattleCard] = field(default_factory=list)
    battle_card_power_modifiers: list[BattleCardPowerModifier] = field(default_factory=list)
    enemy: Enemy | None = None
    support_power_multiplier: float = 0.0


@dataclass
class EnemySkill(ABC):
    """A skill that adjusts the modifiers of the player's battle cards."""

    skill_id: str = ""

    @abstractmethod
    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        """Apply the skill to options."""


def _modifiers_for(options: EnemySkillCalculationOptions):
    return zip(options.battle_cards, options.battle_card_power_modifiers)


@dataclass
class EnemySkillAdditiveDebuff(EnemySkill):
    value: float = 0.0

    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        for _card, modifier in _modifiers_for(options):
            modifier.additive_debuff += self.value


@dataclass
class EnemySkillCardTypeAdditiveDebuff(EnemySkill):
    card_type: str = ""
    value: float = 0.0

    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        for card, modifier in _modifiers_for(options):
            if card.type == self.card_type:
                modifier.additive_debuff += self.value


@dataclass
class EnemySkillCardTypeMultiplicativeDebuff(EnemySkill):
    card_type: str = ""
    value: float = 0.0

    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        for card, modifier in _modifiers_for(options):
            if card.type == self.card_type:
                modifier.multiplicative_debuff += self.value


@dataclass
class EnemySkillCardTypeExceptMultiplicativeDebuff(EnemySkill):
    card_type: str = ""
    value: float = 0.0

    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        for card, modifier in _modifiers_for(options):
            if card.type != self.card_type:
                modifier.multiplicative_debuff += self.value


@dataclass
class EnemySkillIndexForwardMultiplicativeDebuff(EnemySkill):
    """Debuffs the first num_of_cards cards."""

    num_of_cards: int = 0
    value: float = 0.0

    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        for i, (_card, modifier) in enumerate(_modifiers_for(options)):
            if i < self.num_of_cards:
                modifier.multiplicative_debuff += self.value


@dataclass
class EnemySkillIndexBackwardMultiplicativeDebuff(EnemySkill):
    """Debuffs the last num_of_cards cards."""

    num_of_cards: int = 0
    value: float = 0.0

    def calculate(self, options: EnemySkillCalculationOptions) -> None:
        first = len(options.battle_cards) - self.num_of_cards
        for i, (_card, modifier) in enumerate(_modifiers_for(options)):
            if i >= first:
                modifier.multiplicative_debuff += self.value