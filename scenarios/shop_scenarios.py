"""
Mniejsze scenariusze sklepu — kazdy dostaje ShopContext i rzuca blad asercji
przy pierwszej niezgodnosci. Uzywane przez testy e2e i przez main.py.
"""
import logging

from core.errors import PageAssertionError
from pages import HomePage
from scenarios.checkout_flow import CheckoutFlow
from scenarios.context import ShopContext

logger = logging.getLogger(__name__)

MAX_QUANTITY = 10
MAX_QUANTITY_TEXT = "Maximum quantity reached"


async def homepage_shows_items(ctx: ShopContext, text: str = "Koala") -> int:
    """Smoke: strona glowna sie laduje i widac seedowany produkt."""
    home = await HomePage(ctx.require_page(), ctx).open()
    await home.assert_text_visible(text)
    count = (await home.read_product_count()).unwrap("product count")
    if count == 0:
        raise PageAssertionError("product count", "> 0", count)
    return count


async def add_to_cart_updates_count(ctx: ShopContext, item_id: int | None = None):
    """Reset, licznik 0, dodanie, powiadomienie, licznik 1. Bez item_id dodaje pierwszy produkt."""
    await ctx.require_api().reset_cart()
    home = await HomePage(ctx.require_page(), ctx).open()

    # Po resecie licznik moze byc ukryty. Jesli jest, musi pokazywac liczbe 0
    if await home.cart_badge_present():
        start = (await home.read_cart_count()).unwrap("cart count after reset")
        if start != 0:
            raise PageAssertionError("cart count after reset", 0, start,
                                     message=f"Cart should start at 0, got {start}")

    if item_id is None:
        await home.add_first_product_to_cart()
    else:
        await home.add_to_cart_by_product(item_id)
    await home.assert_success_notification_visible()
    await home.assert_cart_count(1)


async def add_until_max_quantity(ctx: ShopContext, item_id: int = 1, max_quantity: int = MAX_QUANTITY) -> int:
    """
    Dodaje ten sam produkt max_quantity razy, potem sprawdza blokade przycisku
    i ze licznik, tabela koszyka i baza pokazuja te sama ilosc.

    Miedzy kliknieciami czekamy az powiadomienie sie pojawi I zniknie —
    powiadomienie przesuwa strone w dol i kolejny klik trafia w przesuniety przycisk.
    """
    db = ctx.require_db()
    await ctx.require_api().reset_cart()
    home = await HomePage(ctx.require_page(), ctx).open()
    name = (await home.read_product_name_for(item_id)).unwrap(f"product name for item {item_id}")

    for i in range(max_quantity):
        await home.add_to_cart_by_product(item_id)
        await home.assert_success_notification_visible()
        await home.assert_success_notification_hidden()
        logger.info(f"Dodanie {i + 1}/{max_quantity} OK")

    await home.assert_cart_count(max_quantity)
    disabled = (await home.read_add_control_disabled(item_id)).unwrap(f"add control state for item {item_id}")
    if not disabled:
        raise PageAssertionError(
            f"add control for item {item_id}", "disabled", "enabled",
            message="Add to cart button should be disabled at max quantity",
        )
    await home.assert_text_visible(MAX_QUANTITY_TEXT)

    cart = await home.go_to_cart()
    await cart.assert_product_quantity(name, max_quantity)

    db_quantity = db.cart_quantity(item_id)
    if db_quantity != max_quantity:
        raise PageAssertionError(f"database quantity of item {item_id}", max_quantity, db_quantity)
    db_total = db.cart_total()
    if db_total != max_quantity:
        raise PageAssertionError("database cart total", max_quantity, db_total)
    return db_quantity


async def change_cart_quantity(ctx: ShopContext, item_id: int = 1, new_quantity: int = 3) -> int:
    """Zmiana ilosci w koszyku: UI i baza musza sie zgadzac po przeliczeniu sumy."""
    api = ctx.require_api()
    db = ctx.require_db()
    await api.reset_cart()
    await api.add_to_cart(item_id)

    name = db.item_name(item_id)
    if name is None:
        raise PageAssertionError(f"item {item_id} in database", "existing row", None)

    home = await HomePage(ctx.require_page(), ctx).open()
    cart = await home.go_to_cart()
    await cart.assert_product_quantity(name, 1)

    cart = await cart.set_quantity(name, new_quantity)
    await cart.assert_product_quantity(name, new_quantity)

    db_quantity = db.cart_quantity(item_id)
    if db_quantity != new_quantity:
        raise PageAssertionError(f"database quantity of item {item_id}", new_quantity, db_quantity)
    return db_quantity


async def database_has_products(ctx: ShopContext) -> int:
    items = ctx.require_db().items()
    logger.info(f"Produktow w katalogu: {len(items)}")
    if not items:
        raise PageAssertionError("products in database", "> 0", 0,
                                 message="The database should contain products.")
    logger.info(f"Pierwszy produkt: {items[0].name}")
    return len(items)


async def reset_is_idempotent(ctx: ShopContext) -> None:
    api = ctx.require_api()
    db = ctx.require_db()
    for attempt in (1, 2):
        await api.reset_cart()
        total = db.cart_total()
        if total != 0:
            raise PageAssertionError(f"cart total after reset #{attempt}", 0, total)


async def checkout_flow(ctx: ShopContext, item_id: int = 1):
    return await CheckoutFlow(ctx, item_id=item_id).run()


# nazwa -> (scenariusz, potrzebuje przegladarki, przyjmuje item_id)
SCENARIOS = {
    'homepage':        (homepage_shows_items, True, False),
    'add_to_cart':     (add_to_cart_updates_count, True, True),
    'max_quantity':    (add_until_max_quantity, True, True),
    'change_quantity': (change_cart_quantity, True, True),
    'checkout':        (checkout_flow, True, True),
    'db_sanity':       (database_has_products, False, False),
    'reset':           (reset_is_idempotent, False, False),
}
