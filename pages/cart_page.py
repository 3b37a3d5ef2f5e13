"""
CartPage — tabela koszyka, ilosci, suma, przejscie do checkoutu.

Ilosc w wierszu to <select> 0–10. Po zmianie UI przelicza sume asynchronicznie;
jedyny sygnal, ze sie przeliczyl, to zmiana tekstu naglowka z suma.
"""
from decimal import Decimal

from playwright.async_api import Error as PlaywrightError

from core.errors import PageAssertionError, WaitTimeout
from core.read_result import Read
from pages.base_page import BasePage, parse_price
from pages.checkout_page import CheckoutPage
from scenarios.run_data import CartRow

MIN_QUANTITY = 0
MAX_QUANTITY = 10


class CartPage(BasePage):
    CART_TABLE      = ('locator', 'table')
    CART_ROWS       = ('locator', 'tbody > tr')
    NAME_CELL       = 'td:nth-child(1)'
    QUANTITY_CELL   = 'td:nth-child(2)'
    PRICE_CELL      = 'td:nth-child(3)'
    TOTAL_PRICE     = ('locator', 'h2')
    CHECKOUT_BUTTON = ('locator', '#checkout-button')
    SHOP_LINK       = ('locator', '#shop-link')

    LOADED_SIGNAL = CART_TABLE

    def _row(self, product_name: str):
        # dokladna nazwa, z wielkoscia liter: "Cat" nie trafia w wiersz "Bobcat"
        return self.loc(self.CART_ROWS).filter(
            has=self.page.locator(self.NAME_CELL).get_by_text(product_name, exact=True)
        ).first

    def _quantity_select(self, product_name: str):
        return self._row(product_name).locator(f'{self.QUANTITY_CELL} select')

    # ── Wiersze ───────────────────────────────────────────────────────────────

    async def read_items(self) -> Read[list]:
        try:
            return Read.ok(await self.loc(self.CART_ROWS).all())
        except PlaywrightError as e:
            return Read.missing(str(e))

    async def items(self) -> list:
        result = await self.read_items()
        if not result.found:
            self.warn(f"Nie udalo sie pobrac wierszy koszyka: {result.error}")
        return result.or_default([])

    async def row_data(self) -> list[CartRow]:
        """Nazwa / ilosc / cena z kazdego wiersza — do porownania z baza."""
        rows = []
        for row in await self.items():
            name = (await row.locator(self.NAME_CELL).inner_text()).strip()
            quantity = await self._selected_quantity(row.locator(f'{self.QUANTITY_CELL} select'))
            price = parse_price(await row.locator(self.PRICE_CELL).inner_text())
            rows.append(CartRow(name=name, quantity=quantity, price=price))
        return rows

    async def assert_product_present(self, product_name: str):
        try:
            await self.wait.present(self._row(product_name), f"cart row '{product_name}'")
        except WaitTimeout as e:
            raise PageAssertionError(
                "product in cart", product_name, "no matching row",
                message=f"Product '{product_name}' not found in cart: {e.actual}",
            ) from e
        self.log(f"Produkt '{product_name}' jest w koszyku")

    async def assert_cart_empty(self):
        items = await self.items()
        if items:
            raise PageAssertionError(
                "cart empty", 0, len(items),
                message=f"Expected empty cart, but found {len(items)} items",
            )
        self.log("Koszyk pusty")

    # ── Ilosc ─────────────────────────────────────────────────────────────────

    @staticmethod
    async def _selected_quantity(select) -> int | None:
        text = await select.locator('option:checked').inner_text()
        try:
            return int(text.strip())
        except ValueError:
            return None

    async def read_product_quantity(self, product_name: str) -> Read[int]:
        try:
            select = await self.wait.present(self._quantity_select(product_name), f"quantity of '{product_name}'")
            quantity = await self._selected_quantity(select)
        except (WaitTimeout, PlaywrightError) as e:
            return Read.missing(str(e))
        if quantity is None:
            return Read.missing(f"selected quantity of '{product_name}' is not a number")
        self.log(f"Ilosc '{product_name}': {quantity}")
        return Read.ok(quantity)

    async def product_quantity(self, product_name: str) -> int:
        """-1 gdy wiersza / selecta nie da sie odczytac."""
        result = await self.read_product_quantity(product_name)
        if not result.found:
            self.warn(f"Nie udalo sie odczytac ilosci '{product_name}': {result.error}")
        return result.or_default(-1)

    async def assert_product_quantity(self, product_name: str, expected: int):
        actual = await self.read_product_quantity(product_name)
        if not actual.found or actual.value != expected:
            raise PageAssertionError(
                f"quantity of '{product_name}'", expected, actual.describe(),
                message=f"Quantity mismatch for '{product_name}'. Expected: {expected}, Actual: {actual.describe()}",
            )
        self.log(f"Ilosc OK: '{product_name}' = {expected}")

    async def set_quantity(self, product_name: str, new_quantity: int) -> "CartPage":
        """
        Zmienia ilosc i blokuje az suma na stronie sie przeliczy.

        Ta sama ilosc co obecnie = nic nie robimy, nie ma na co czekac.
        Inna ilosc dajaca identyczna sume (np. produkt za 0) skonczy sie
        WaitTimeout — nie da sie odroznic "przeliczone" od "jeszcze nie".
        """
        if not MIN_QUANTITY <= new_quantity <= MAX_QUANTITY:
            raise ValueError(f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}, got {new_quantity}")

        current = await self.read_product_quantity(product_name)
        if current.found and current.value == new_quantity:
            self.log(f"Ilosc '{product_name}' juz wynosi {new_quantity} — pomijam")
            return self

        old_total = await self.total_price_text()
        if old_total is None:
            raise PageAssertionError(
                f"set quantity of '{product_name}'", "readable total price", None,
                message=f"Failed to set quantity for '{product_name}': total price not readable before change",
            )

        try:
            await self._quantity_select(product_name).select_option(label=str(new_quantity))
        except PlaywrightError as e:
            raise PageAssertionError(
                f"set quantity of '{product_name}'", new_quantity, str(e),
                message=f"Failed to set quantity for '{product_name}': {e}",
            ) from e

        try:
            new_total = await self.wait.text_changes(self.loc(self.TOTAL_PRICE), old_total, "cart total price")
        except WaitTimeout as e:
            raise WaitTimeout(
                f"set quantity of '{product_name}'", f"total different from {old_total!r}", old_total,
                message=(
                    f"Total price did not change after setting '{product_name}' to {new_quantity} "
                    f"(still {old_total!r}); same-price transitions cannot be told apart from a stuck UI"
                ),
            ) from e

        self.log(f"Ilosc '{product_name}' zmieniona na {new_quantity} ({old_total} -> {new_total})")
        return self

    # ── Suma ──────────────────────────────────────────────────────────────────

    async def total_price_text(self) -> str | None:
        result = await self.read_text(self.TOTAL_PRICE, "cart total price")
        return result.or_default(None)

    async def read_total_price(self) -> Read[Decimal]:
        text = await self.read_text(self.TOTAL_PRICE, "cart total price")
        if not text.found:
            return Read.missing(text.error)
        price = parse_price(text.value)
        if price is None:
            return Read.missing(f"no price in {text.value!r}")
        self.log(f"Suma koszyka: ${price}")
        return Read.ok(price)

    async def total_price(self) -> Decimal:
        """Decimal(-1) gdy sumy nie da sie odczytac."""
        result = await self.read_total_price()
        if not result.found:
            self.warn(f"Nie udalo sie odczytac sumy: {result.error}")
        return result.or_default(Decimal(-1))

    # ── Nawigacja ─────────────────────────────────────────────────────────────

    async def checkout(self) -> CheckoutPage:
        try:
            await self.safe_click(self.CHECKOUT_BUTTON, "checkout button")
        except (WaitTimeout, PlaywrightError) as e:
            raise PageAssertionError(
                "click checkout", "clickable checkout button", str(e),
                message=f"Failed to click Checkout button: {e}",
            ) from e
        self.log("Klikniety Checkout")
        return await self._transition(CheckoutPage)

    async def back_to_shop(self):
        from pages.home_page import HomePage

        try:
            await self.safe_click(self.SHOP_LINK, "back to shop link")
        except (WaitTimeout, PlaywrightError) as e:
            raise PageAssertionError(
                "click back to shop", "clickable shop link", str(e),
                message=f"Failed to click Back to Shop: {e}",
            ) from e
        self.log("Powrot do sklepu")
        return await self._transition(HomePage)
