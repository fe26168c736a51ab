import uuid

from swordmerge.models.item import Item, create_item, item_worth


def test_base_worth_values():
    assert item_worth(1, 0) == 10
    assert item_worth(5, 3) == 400
    assert item_worth(6, 0) == 320
    assert item_worth(2, 1) == 30


def test_worth_doubles_per_tier():
    for tier in range(1, 30):
        assert item_worth(tier + 1, 0) == 2 * item_worth(tier, 0)


def test_worth_strictly_increases_with_upgrade_level():
    for tier in range(1, 10):
        values = [item_worth(tier, level) for level in range(0, 15)]
        assert all(b > a for a, b in zip(values, values[1:]))


def test_create_item_assigns_unique_uuid_ids():
    items = [create_item(1) for _ in range(200)]
    ids = {item.id for item in items}
    assert len(ids) == 200
    # Identifiers are UUID strings
    uuid.UUID(items[0].id)


def test_create_item_defaults_and_worth():
    item = create_item(3)
    assert item.tier == 3
    assert item.upgrade_level == 0
    assert item.worth == 40


def test_upgrade_recomputes_worth():
    item = create_item(5, 2)
    before = item.worth
    item.upgrade()
    assert item.upgrade_level == 3
    assert item.worth == 400
    assert item.worth > before


def test_item_dict_shape():
    item = Item(id="abc", tier=2, upgrade_level=1)
    assert item.to_dict() == {"id": "abc", "tier": 2, "upgrade_level": 1, "worth": 30}
    assert Item.from_dict(item.to_dict()) == item


def test_worth_is_exact_at_large_tiers():
    assert item_worth(1100, 0) == 2 ** 1099 * 10
    assert item_worth(1100, 1) == 2 ** 1099 * 15
    assert item_worth(60, 1) == 2 ** 59 * 15
