import pytest

from scenarios.shop_scenarios import database_has_products, reset_is_idempotent

pytestmark = pytest.mark.e2e


async def test_database_connection(db_ctx):
    assert await database_has_products(db_ctx) > 0


async def test_reset_twice_leaves_cart_empty(db_ctx):
    await reset_is_idempotent(db_ctx)
    assert db_ctx.db.cart_total() == 0
