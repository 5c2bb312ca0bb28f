import pytest

from cardconquest.card import CardPack
from cardconquest.market import Market, MarketItem, PurchaseError, Treasury
from cardconquest.resource import ResourceQuantity

PRICE = ResourceQuantity(money=100, food=50, wood=30, iron=20, mana=10)


@pytest.mark.parametrize(
    "resources, expected",
    [
        (ResourceQuantity(money=150, food=80, wood=50, iron=30, mana=20), True),
        (ResourceQuantity(money=100, food=50, wood=30, iron=20, mana=10), True),
        (ResourceQuantity(money=50, food=30, wood=20, iron=10, mana=5), False),
        (ResourceQuantity(money=150, food=30, wood=50, iron=30, mana=20), False),
    ],
)
def test_market_item_can_purchase(resources, expected):
    pack = CardPack(card_pack_id="test_pack", ratios={"card_a": 50, "card_b": 50}, num_per_open=1)
    item = MarketItem(card_pack=pack, price=PRICE, required_level=1.0)
    assert item.can_purchase(Treasury(resources)) is expected


def _visible_items():
    packs = [
        CardPack(card_pack_id="basic_pack", ratios={"card_a": 70, "card_b": 30}, num_per_open=2),
        CardPack(card_pack_id="advanced_pack", ratios={"card_c": 50, "card_d": 50}, num_per_open=3),
        CardPack(card_pack_id="premium_pack", ratios={"card_e": 40, "card_f": 60}, num_per_open=1),
    ]
    return [
        MarketItem(card_pack=packs[0], price=ResourceQuantity(money=50), required_level=1.0),
        MarketItem(card_pack=packs[1], price=ResourceQuantity(money=100), required_level=2.0),
        MarketItem(card_pack=packs[2], price=ResourceQuantity(money=200), required_level=3.0),
    ]


@pytest.mark.parametrize(
    "level, expected",
    [
        (1.0, ["basic_pack"]),
        (2.0, ["basic_pack", "advanced_pack"]),
        (3.0, ["basic_pack", "advanced_pack", "premium_pack"]),
        (0.5, []),
        (1.5, ["basic_pack"]),
    ],
)
def test_visible_market_items(level, expected):
    market = Market(level=level, items=_visible_items())
    assert [i.card_pack.card_pack_id for i in market.visible_market_items()] == expected


@pytest.mark.parametrize(
    "index, money, expected",
    [(0, 150, True), (1, 100, False), (-1, 1000, False), (5, 1000, False)],
)
def test_market_can_purchase(index, money, expected):
    pack = CardPack(card_pack_id="test_pack", ratios={"card_a": 100}, num_per_open=1)
    market = Market(
        level=2.0,
        items=[
            MarketItem(card_pack=pack, price=ResourceQuantity(money=100), required_level=1.0),
            MarketItem(card_pack=pack, price=ResourceQuantity(money=200), required_level=2.0),
        ],
    )
    assert market.can_purchase(index, Treasury(ResourceQuantity(money=money))) is expected


def test_market_can_purchase_requires_level():
    pack = CardPack(card_pack_id="p")
    market = Market(
        level=1.0,
        items=[MarketItem(card_pack=pack, price=ResourceQuantity(), required_level=2.0)],
    )
    assert market.can_purchase(0, Treasury(ResourceQuantity(money=1000))) is False


def _purchase_market():
    pack = CardPack(card_pack_id="purchase_test_pack", ratios={"card_a": 100}, num_per_open=1)
    item = MarketItem(card_pack=pack, price=ResourceQuantity(money=100, food=50), required_level=1.0)
    return Market(level=1.0, items=[item]), pack


def test_market_purchase_success():
    market, pack = _purchase_market()
    treasury = Treasury(ResourceQuantity(money=200, food=100, wood=50, iron=30, mana=20))
    assert market.purchase(0, treasury) is pack
    assert treasury.resources == ResourceQuantity(money=100, food=50, wood=50, iron=30, mana=20)


@pytest.mark.parametrize(
    "index, initial",
    [
        (0, ResourceQuantity(money=50, food=25, wood=10, iron=5, mana=2)),
        (1, ResourceQuantity(money=1000, food=1000, wood=1000, iron=1000, mana=1000)),
    ],
)
def test_market_purchase_failure_leaves_treasury(index, initial):
    market, _ = _purchase_market()
    treasury = Treasury(initial)
    with pytest.raises(PurchaseError):
        market.purchase(index, treasury)
    assert treasury.resources == initial


@pytest.mark.parametrize(
    "initial, to_add, expected",
    [
        (
            ResourceQuantity(money=100, food=50, wood=30, iron=20, mana=10),
            ResourceQuantity(money=50, food=25, wood=15, iron=10, mana=5),
            ResourceQuantity(money=150, food=75, wood=45, iron=30, mana=15),
        ),
        (
            ResourceQuantity(money=100, food=50, wood=30, iron=20, mana=10),
            ResourceQuantity(),
            ResourceQuantity(money=100, food=50, wood=30, iron=20, mana=10),
        ),
    ],
)
def test_treasury_add(initial, to_add, expected):
    treasury = Treasury(initial)
    treasury.add(to_add)
    assert treasury.resources == expected


def test_treasury_sub():
    treasury = Treasury(ResourceQuantity(money=100, food=50, wood=30, iron=20, mana=10))
    treasury.sub(ResourceQuantity(money=30, food=20, wood=10, iron=5, mana=3))
    assert treasury.resources == ResourceQuantity(money=70, food=30, wood=20, iron=15, mana=7)


def test_treasury_sub_insufficient():
    initial = ResourceQuantity(money=50, food=30, wood=20, iron=10, mana=5)
    treasury = Treasury(initial)
    with pytest.raises(PurchaseError):
        treasury.sub(ResourceQuantity(money=100, food=20, wood=10, iron=5, mana=2))
    assert treasury.resources == ResourceQuantity(money=50, food=30, wood=20, iron=10, mana=5)