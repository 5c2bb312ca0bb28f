# cardconquest

The rules engine of a turn-based strategy game in which you conquer a map by
playing cards. It has no dependencies beyond the standard library.

## Modules

- `cardconquest.resource`: `ResourceQuantity`, a frozen dataclass of money,
  food, wood, iron and mana with `add`, `sub` (also `+` and `-`) and
  `can_purchase`.
- `cardconquest.turn`: `Turn`, an `int` subclass where twelve turns make a
  year; `year_month()`, `next()`, and `str(Turn(112)) == "Year 10, Month 5"`.
- `cardconquest.card`: `BattleCard` (levels through `experiment()`, power
  grows ten percent per level), `StructureCard`, `CardPack.open(rng)` drawing
  card ids weighted by `ratios` (any object with `randrange`, default a new
  `random.Random`), `CardGenerator.generate` (raises `KeyError` for an unknown
  id), `CardDeck.add` (a battle card already in the deck gains experience
  instead of being added again). Battle card skills are `BattleCardSkill`
  objects whose calculator is any callable, such as
  `SupportPowerMultiplierCalculator`, `EnemyTypeCalculator`,
  `BoostBuffCalculator`, `TrailingsCalculator`, `AllCalculator`,
  `AllByCardTypeCalculator`, `ByIndexCalculator`, `ProofBuffCalculator`,
  `ProofDebuffNeighboringCalculator`, `TwoPlatoonCalculator`,
  `CompositeCalculator`, `nop_calculation` and `adding_by_index_calculation`.
  Structure card effects: `AddYieldModifier`, `MultiplyYieldModifier`,
  `CardSlotBattlefieldModifier`, `SupportPowerBattlefieldModifier`.
- `cardconquest.modifier`: `BattleCardPowerModifier`, the buffs and debuffs
  collected for one card; `calculate(power)` never returns less than zero.
- `cardconquest.enemy`: `Enemy` and the enemy skills
  `EnemySkillAdditiveDebuff`, `EnemySkillCardTypeAdditiveDebuff`,
  `EnemySkillCardTypeMultiplicativeDebuff`,
  `EnemySkillCardTypeExceptMultiplicativeDebuff`,
  `EnemySkillIndexForwardMultiplicativeDebuff` and
  `EnemySkillIndexBackwardMultiplicativeDebuff`.
- `cardconquest.battle`: `Battlefield` and `new_battlefield`.
  `calculate_total_power()` applies card skills, then enemy skills, and adds
  the support power; `can_beat()` compares with the enemy's power; `beat()`
  returns the winning power or raises `ValueError`; `add_battle_card` returns
  `False` when all slots are taken; `remove_battle_card` raises `IndexError`.
- `cardconquest.territory`: `Territory` with `append_card`, `remove_card`
  (raises `IndexError`) and `yield_()`, which passes the base yield through
  each placed card's yield modifier in order.
- `cardconquest.market`: `Market`, `MarketItem`, `Treasury` and
  `PurchaseError`. Only items whose required level is at most the market
  level are visible and purchasable; `Market.purchase` and `Treasury.sub`
  raise `PurchaseError` and leave the treasury unchanged on failure.
- `cardconquest.nation`: `BaseNation`, `MyNation` (`append_market_item`,
  `append_level`) and `OtherNation`, whose market level rises by 0.5 after
  each purchase.
- `cardconquest.mapgrid`: `MapGrid`, `MapGridSize` and the points
  `MyNationPoint`, `OtherNationPoint`, `WildernessPoint` and `BossPoint`.
  `can_interact(x, y)` is true for points reachable from the player's nation
  through passable points (nations and controlled wilderness).
  Reachability is computed on first use; call `update_accessibles()` after
  the map changes.
- `cardconquest.gameflow`: `GameState` with `get_yield`, `add_yield`,
  `next_turn`, `is_victory` (every boss defeated), `can_interact` and
  `get_point`.
- `cardconquest.catalog`: `load_language_file` and `load_languages` read
  two-column `key,text` CSV files (`#` comment lines, literal `\n` becomes a
  newline) into dicts keyed by file name; malformed files raise
  `CatalogError`.
- `cardconquest.lang`: `TextProvider` and `load_text_provider`. The
  language `english` is chosen by default, else the first in sorted order;
  `switch()` moves to the next language and returns its capitalised name.
  `execute_template(key, data)` fills `{{.Field}}` placeholders
  (`TextTemplate.render`); a missing key yields `TMPL_NOT_FOUND: ...`.
- `cardconquest.geom`: `PointF`, `point_from_polar`, `Circle`,
  `LinearFunc`, `linear_func_from_points` and `LineSegment`.

## Install

```
pip install .
```

## Example

```python
from cardconquest.battle import new_battlefield
from cardconquest.card import BattleCard
from cardconquest.enemy import Enemy

orc = Enemy(enemy_id="orc", enemy_type="orc", power=10.0, battle_card_slot=2)
battlefield = new_battlefield(orc, support_power=0.0)
battlefield.add_battle_card(BattleCard(card_id="warrior", base_power=5.0, type="warrior"))
battlefield.add_battle_card(BattleCard(card_id="warrior", base_power=5.0, type="warrior"))
assert battlefield.can_beat()
```

```python
from cardconquest.turn import Turn

print(Turn(112))  # Year 10, Month 5
```

## What it does not do

This package holds the game rules only. It has no window, rendering, input
handling, sound or images, ships no game data or language files, and
provides no command to start a game.

## Tests

```
pip install .[test]
pytest
```