"""
Przeplyw "Add to Cart" na zywym sklepie: strona glowna -> koszyk -> checkout.
"""
import pytest

from scenarios.checkout_flow import CheckoutFlow
from scenarios.run_data import FlowState
from scenarios.shop_scenarios import (
    add_to_cart_updates_count,
    add_until_max_quantity,
    change_cart_quantity,
    homepage_shows_items,
)

pytestmark = pytest.mark.e2e


async def test_homepage_loads_and_shows_items(ui_ctx):
    assert await homepage_shows_items(ui_ctx, "Koala") > 0


async def test_add_to_cart_shows_message_and_updates_count(ui_ctx):
    await add_to_cart_updates_count(ui_ctx, item_id=1)


async def test_add_button_disables_at_max_quantity(ctx):
    assert await add_until_max_quantity(ctx, item_id=1) == 10


async def test_change_quantity_updates_total_and_database(ctx):
    assert await change_cart_quantity(ctx, item_id=1, new_quantity=3) == 3


async def test_e2e_add_to_cart_and_checkout(ctx):
    result = await CheckoutFlow(ctx, item_id=1).run()

    assert result.state is FlowState.CHECKED_OUT
    assert result.db_quantity == 1
    assert result.product_name
