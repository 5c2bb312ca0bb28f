import pytest

from cardconquest.card import CardPack
from cardconquest.market import Market, MarketItem, PurchaseError, Treasury
from cardconquest.nation import BaseNation, MyNation, OtherNation
from cardconquest.resource import ResourceQuantity


def test_names():
    assert BaseNation(nation_id="test_nation").name() == "Nation test_nation"
    assert MyNation(nation_id="my_nation").name() == "My Nation"
    assert OtherNation(nation_id="ally").name() == "Nation ally"


def test_visible_market_items():
    pack1 = CardPack(card_pack_id="basic_pack", ratios={"card_a": 100}, num_per_open=1)
    pack2 = CardPack(card_pack_id="advanced_pack", ratios={"card_b": 100}, num_per_open=1)
    market = Market(
        level=1.5,
        items=[
            MarketItem(card_pack=pack1, price=ResourceQuantity(money=50), required_level=1.0),
            MarketItem(card_pack=pack2, price=ResourceQuantity(money=100), required_level=2.0),
        ],
    )
    nation = BaseNation(nation_id="test_nation", market=market)
    visible = nation.visible_market_items()
    assert [i.card_pack.card_pack_id for i in visible] == ["basic_pack"]


@pytest.mark.parametrize("index, money, expected", [(0, 150, True), (0, 50, False), (5, 1000, False)])
def test_can_purchase(index, money, expected):
    pack = CardPack(card_pack_id="test_pack", ratios={"card_a": 100}, num_per_open=1)
    market = Market(
        level=1.0,
        items=[MarketItem(card_pack=pack, price=ResourceQuantity(money=100), required_level=1.0)],
    )
    nation = BaseNation(nation_id="test_nation", market=market)
    assert nation.can_purchase(index, Treasury(ResourceQuantity(money=money))) is expected


def _purchase_nation():
    pack = CardPack(card_pack_id="purchase_test_pack", ratios={"card_a": 100}, num_per_open=1)
    market = Market(
        level=1.0,
        items=[
            MarketItem(
                card_pack=pack, price=ResourceQuantity(money=100, food=50), required_level=1.0
            )
        ],
    )
    return BaseNation(nation_id="test_nation", market=market), pack


def test_purchase_success():
    nation, pack = _purchase_nation()
    treasury = Treasury(ResourceQuantity(money=200, food=100, wood=50, iron=30, mana=20))
    assert nation.purchase(0, treasury) is pack
    assert treasury.resources == ResourceQuantity(money=100, food=50, wood=50, iron=30, mana=20)


def test_purchase_insufficient():
    nation, _ = _purchase_nation()
    initial = ResourceQuantity(money=50, food=25, wood=10, iron=5, mana=2)
    treasury = Treasury(initial)
    with pytest.raises(PurchaseError):
        nation.purchase(0, treasury)
    assert treasury.resources == ResourceQuantity(money=50, food=25, wood=10, iron=5, mana=2)


def test_my_nation_append_market_item():
    pack = CardPack(card_pack_id="new_pack", ratios={"card_new": 100}, num_per_open=1)
    item = MarketItem(card_pack=pack, price=ResourceQuantity(money=150), required_level=2.0)
    nation = MyNation(
        nation_id="my_nation",
        market=Market(level=2.0, items=[]),
        basic_yield=ResourceQuantity(money=10, food=5),
    )
    assert nation.market.items == []
    nation.append_market_item(item)
    assert len(nation.market.items) == 1
    assert nation.market.items[0] is item
    assert nation.visible_market_items() == [item]


def test_my_nation_append_level():
    nation = MyNation(nation_id="my_nation", market=Market(level=1.0))
    nation.append_level(0.5)
    assert nation.market.level == 1.5
    nation.append_level(1.0)
    assert nation.market.level == 2.5


def _other_nation():
    pack = CardPack(card_pack_id="other_pack", ratios={"card_a": 100}, num_per_open=1)
    market = Market(
        level=1.0,
        items=[MarketItem(card_pack=pack, price=ResourceQuantity(money=100), required_level=1.0)],
    )
    return OtherNation(nation_id="other_nation", market=market), pack


def test_other_nation_purchase_raises_level():
    nation, pack = _other_nation()
    treasury = Treasury(ResourceQuantity(money=150))
    assert nation.purchase(0, treasury) is pack
    assert treasury.resources == ResourceQuantity(money=50)
    assert nation.market.level == 1.5


def test_other_nation_failed_purchase_keeps_level():
    nation, _ = _other_nation()
    treasury = Treasury(ResourceQuantity(money=10))
    with pytest.raises(PurchaseError):
        nation.purchase(0, treasury)
    assert nation.market.level == 1.0
    assert treasury.resources == ResourceQuantity(money=10)