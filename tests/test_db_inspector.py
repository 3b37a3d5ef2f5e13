import pytest

from core.db_inspector import CartRecord, ItemRecord


@pytest.fixture
def seeded_db(fake_shop, shop_db):
    return shop_db


def test_items_are_typed_records(seeded_db):
    items = seeded_db.items()

    assert items[0] == ItemRecord(id=1, name="Koala")
    assert [i.id for i in items] == [1, 2, 3]


def test_cart_quantity_is_zero_without_row(seeded_db):
    assert seeded_db.cart_rows() == []
    assert seeded_db.cart_quantity(1) == 0
    assert seeded_db.cart_total() == 0


def test_cart_quantity_and_total(fake_shop, seeded_db):
    fake_shop.add_to_cart(1)
    fake_shop.add_to_cart(1)
    fake_shop.add_to_cart(2)

    assert seeded_db.cart_quantity(1) == 2
    assert seeded_db.cart_total() == 3
    assert seeded_db.cart_rows() == [CartRecord(item_id=1, quantity=2), CartRecord(item_id=2, quantity=1)]


def test_item_name(seeded_db):
    assert seeded_db.item_name(2) == "Kangaroo"
    assert seeded_db.item_name(999) is None


def test_fetch_helpers_bind_parameters(seeded_db):
    row = seeded_db.fetch_one("SELECT id, name FROM items WHERE name = :name", name="Koala")
    assert row == {"id": 1, "name": "Koala"}

    # wstrzykniecie w parametrze jest zwyklym stringiem, nie SQL
    assert seeded_db.fetch_one("SELECT id FROM items WHERE name = :name", name="x' OR '1'='1") is None

    rows = seeded_db.fetch_all("SELECT id FROM items WHERE id > :min_id ORDER BY id", min_id=1)
    assert rows == [{"id": 2}, {"id": 3}]


def test_execute_returns_rowcount(seeded_db):
    changed = seeded_db.execute("UPDATE items SET name = :name WHERE id = :id", name="Wombat", id=2)

    assert changed == 1
    assert seeded_db.item_name(2) == "Wombat"


def test_reset_table(fake_shop, seeded_db):
    fake_shop.add_to_cart(1)

    assert seeded_db.reset_table("cart") == 1
    assert seeded_db.cart_total() == 0


def test_reset_table_rejects_unknown_tables(seeded_db):
    with pytest.raises(ValueError, match="cannot be reset"):
        seeded_db.reset_table("items; DROP TABLE cart")
