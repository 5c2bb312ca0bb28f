"""Cards, card packs, battle card skills and structure card effects."""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from .enemy import Enemy
from .modifier import BattleCardPowerModifier
from .resource import ResourceQuantity

if TYPE_CHECKING:
    from .battle import Battlefield


class RandomSource(Protocol):
    """Anything with a ``randrange(n)`` returning an int in [0, n)."""

    def randrange(self, stop: int) -> int: ...


@dataclass(eq=False)
class CardPack:
    """A pack of cards sold at a market; ratios weight how often each card is drawn."""

    card_pack_id: str = ""
    ratios: dict[str, int] = field(default_factory=dict)
    num_per_open: int = 0

    def open(self, rng: RandomSource | None = None) -> list[str]:
        """Draw num_per_open card ids, each chosen with probability proportional to its ratio."""
        if not self.ratios:
            return []
        source = rng if rng is not None else random.Random()
        total_weight = sum(self.ratios.values())
        drawn: list[str] = []
        for _ in range(self.num_per_open):
            roll = source.randrange(total_weight)
            current = 0
            for card_id, weight in self.ratios.items():
                current += weight
                if roll < current:
                    drawn.append(card_id)
                    break
        return drawn


@dataclass
class Cards:
    """A collection of battle cards and structure cards."""

    battle_cards: list[BattleCard] = field(default_factory=list)
    structure_cards: list[StructureCard] = field(default_factory=list)


@dataclass(eq=False)
class BattleCard:
    """A card played on the battlefield; gains levels through experience."""

    card_id: str = ""
    experience: int = 0
    base_power: float = 0.0
    skill: BattleCardSkill | None = None
    type: str = ""

    def level(self) -> int:
        """Return the level: one plus a level per hundred experience."""
        return 1 + self.experience // 100

    def experiment(self) -> None:
        """Gain experience; higher levels gain less."""
        self.experience += 100 // self.level()

    def power(self) -> float:
        """Return the base power raised by ten percent per level above one."""
        return self.base_power * (1 + 0.1 * (self.level() - 1))


@dataclass(eq=False)
class StructureCard:
    """A card placed in a territory to change its yield or nearby battles."""

    card_id: str = ""
    description_key: str = ""
    yield_modifier: YieldModifier | None = None
    battlefield_modifier: BattlefieldModifier | None = None


@dataclass
class CardGenerator:
    """Creates fresh card instances from templates keyed by card id."""

    battle_cards: dict[str, BattleCard] = field(default_factory=dict)
    structure_cards: dict[str, StructureCard] = field(default_factory=dict)

    def generate(self, card_ids) -> Cards:
        """Return copies of the cards with the given ids.

        Raises KeyError if any id is unknown.
        """
        cards = Cards()
        for card_id in card_ids:
            if card_id in self.battle_cards:
                cards.battle_cards.append(copy.copy(self.battle_cards[card_id]))
            elif card_id in self.structure_cards:
                cards.structure_cards.append(copy.copy(self.structure_cards[card_id]))
            else:
                raise KeyError(f"unknown card id: {card_id!r}")
        return cards


@dataclass
class CardDeck(Cards):
    """The player's deck."""

    def add(self, cards: Cards | None) -> None:
        """Add cards; a battle card already in the deck gains experience instead."""
        if cards is None:
            return
        for card in cards.battle_cards:
            existing = next((c for c in self.battle_cards if c.card_id == card.card_id), None)
            if existing is not None:
                existing.experiment()
            else:
                self.battle_cards.append(card)
        self.structure_cards.extend(cards.structure_cards)


@dataclass
class BattleCardSkillCalculationOptions:
    """State a battle card skill reads and modifies during power calculation."""

    support_power_multiplier: float = 0.0
    battle_card_index: int = 0
    battle_cards: list[BattleCard] = field(default_factory=list)
    battle_card_power_modifiers: list[BattleCardPowerModifier] = field(default_factory=list)
    enemy: Enemy | None = None

    @property
    def current_modifier(self) -> BattleCardPowerModifier:
        return self.battle_card_power_modifiers[self.battle_card_index]


Calculator = Callable[[BattleCardSkillCalculationOptions], None]


@dataclass
class BattleCardSkill:
    """A skill carried by a battle card."""

    battle_card_skill_id: str = ""
    description_key: str = ""
    calculator: Calculator | None = None

    def calculate(self, options: BattleCardSkillCalculationOptions) -> None:
        if self.calculator is not None:
            self.calculator(options)


def nop_calculation(options: BattleCardSkillCalculationOptions) -> None:
    """A skill calculation that changes nothing."""


def adding_by_index_calculation(options: BattleCardSkillCalculationOptions) -> None:
    """Give the current card an additive buff equal to its position."""
    options.current_modifier.additive_buff += float(options.battle_card_index)


@dataclass
class CompositeCalculator:
    """Runs several calculators in order."""

    calculators: list[Calculator] = field(default_factory=list)

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        for calculator in self.calculators:
            calculator(options)


@dataclass
class SupportPowerMultiplierCalculator:
    multiplier: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        options.support_power_multiplier += self.multiplier


@dataclass
class EnemyTypeCalculator:
    """Buffs the current card when the enemy is of the given type."""

    enemy_type: str = ""
    multiplier: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        if options.enemy is not None and options.enemy.enemy_type == self.enemy_type:
            options.current_modifier.multiplicative_buff += self.multiplier


@dataclass
class BoostBuffCalculator:
    """Scales the buffs already given to the current card."""

    boost_buff: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        modifier = options.current_modifier
        modifier.multiplicative_buff *= self.boost_buff
        modifier.additive_buff *= self.boost_buff


@dataclass
class TrailingsCalculator:
    """Buffs every later card, optionally only those of one type."""

    card_type: str = ""
    multiplier: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        start = options.battle_card_index + 1
        pairs = zip(options.battle_cards[start:], options.battle_card_power_modifiers[start:])
        for card, modifier in pairs:
            if not self.card_type or card.type == self.card_type:
                modifier.multiplicative_buff += self.multiplier


@dataclass
class AllCalculator:
    """Applies a function to every card's modifier."""

    modifier_func: Callable[[BattleCardPowerModifier], None]

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        for modifier in options.battle_card_power_modifiers:
            self.modifier_func(modifier)


@dataclass
class AllByCardTypeCalculator:
    """Buffs every card of one type."""

    card_type: str = ""
    multiplier: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        for card, modifier in zip(options.battle_cards, options.battle_card_power_modifiers):
            if card.type == self.card_type:
                modifier.multiplicative_buff += self.multiplier


@dataclass
class ByIndexCalculator:
    """Buffs the current card only when it sits at the given position."""

    index: int = 0
    multiplier: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        if options.battle_card_index == self.index:
            options.battle_card_power_modifiers[self.index].multiplicative_buff += self.multiplier


@dataclass
class ProofBuffCalculator:
    """Protects the current card from debuffs."""

    value: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        options.current_modifier.protection_from_debuff += self.value


@dataclass
class ProofDebuffNeighboringCalculator:
    """Protects the cards on either side of the current card from debuffs."""

    value: float = 0.0

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        left = options.battle_card_index - 1
        right = options.battle_card_index + 1
        if left >= 0:
            options.battle_card_power_modifiers[left].protection_from_debuff += self.value
        if right < len(options.battle_cards):
            options.battle_card_power_modifiers[right].protection_from_debuff += self.value


@dataclass
class TwoPlatoonCalculator:
    """Buffs the current card and the next one when the next is of the given type."""

    multiplier: float = 0.0
    card_type: str = ""

    def __call__(self, options: BattleCardSkillCalculationOptions) -> None:
        right = options.battle_card_index + 1
        if right >= len(options.battle_cards):
            return
        if options.battle_cards[right].type == self.card_type:
            options.current_modifier.multiplicative_buff += self.multiplier
            options.battle_card_power_modifiers[right].multiplicative_buff += self.multiplier


class YieldModifier(Protocol):
    def modify(self, quantity: ResourceQuantity) -> ResourceQuantity: ...


@dataclass
class AddYieldModifier:
    """Adds a fixed quantity to a yield."""

    resource_quantity: ResourceQuantity = field(default_factory=ResourceQuantity)

    def modify(self, quantity: ResourceQuantity) -> ResourceQuantity:
        return quantity.add(self.resource_quantity)


@dataclass
class MultiplyYieldModifier:
    """Raises each resource of a yield by a fraction, truncating to whole units."""

    food_multiply: float = 0.0
    money_multiply: float = 0.0
    wood_multiply: float = 0.0
    iron_multiply: float = 0.0
    mana_multiply: float = 0.0

    def modify(self, quantity: ResourceQuantity) -> ResourceQuantity:
        return ResourceQuantity(
            money=int(quantity.money * (1.0 + self.money_multiply)),
            food=int(quantity.food * (1.0 + self.food_multiply)),
            wood=int(quantity.wood * (1.0 + self.wood_multiply)),
            iron=int(quantity.iron * (1.0 + self.iron_multiply)),
            mana=int(quantity.mana * (1.0 + self.mana_multiply)),
        )


class BattlefieldModifier(Protocol):
    def modify(self, battlefield: Battlefield) -> Battlefield: ...


@dataclass
class CardSlotBattlefieldModifier:
    """Changes how many battle cards may be played."""

    value: int = 0

    def modify(self, battlefield: Battlefield) -> Battlefield:
        battlefield.card_slot += self.value
        return battlefield


@dataclass
class SupportPowerBattlefieldModifier:
    """Changes the base support power of a battle."""

    value: float = 0.0

    def modify(self, battlefield: Battlefield) -> Battlefield:
        battlefield.base_support_power += self.value
        return battlefield