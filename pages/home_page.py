"""
HomePage — lista produktow, licznik koszyka, dodawanie do koszyka.

Zasada: nazwe produktu czytamy ZANIM cokolwiek klikniemy.
Dodanie do koszyka przeladowuje strone i pokazuje powiadomienie,
ktore przesuwa layout — wszystko co odczytane wczesniej jest nieaktualne.
"""

from playwright.async_api import Error as PlaywrightError

from core.errors import PageAssertionError, WaitTimeout
from core.read_result import Read
from pages.base_page import BasePage
from pages.cart_page import CartPage


class HomePage(BasePage):
    CART_COUNT_BADGE = ('locator', '#cart-link span')
    CART_LINK        = ('locator', '#cart-link')
    PRODUCT_LIST     = ('locator', 'ul > li')
    NOTIFICATION     = ('locator', '.notification')
    ADD_BUTTON       = 'button[type="submit"]'
    PRODUCT_NAME     = 'h2'

    LOADED_SIGNAL = PRODUCT_LIST

    @staticmethod
    def product_form_css(item_id: int) -> str:
        return f'form:has(input[name="itemId"][value="{int(item_id)}"])'

    def _product_form(self, item_id: int):
        return self.loc(('locator', self.product_form_css(item_id)))

    def _product_name_selector(self, item_id: int) -> tuple:
        # nazwa jest w tym samym <li> co formularz produktu
        return ('locator', f'li:has({self.product_form_css(item_id)}) {self.PRODUCT_NAME}')

    # ── Nawigacja ─────────────────────────────────────────────────────────────

    async def open(self) -> "HomePage":
        await self.page.goto(self.context.base_url)
        await self.wait_until_loaded()
        self.log(f"Strona glowna otwarta: {self.context.base_url}")
        return self

    async def _after_load_signal(self):
        await self.wait.visible(self.loc(self.PRODUCT_LIST), "product listing")

    async def go_to_cart(self) -> CartPage:
        await self.safe_click(self.CART_LINK, "cart link")
        self.log("Przejscie do koszyka")
        return await self._transition(CartPage)

    # ── Licznik koszyka ───────────────────────────────────────────────────────

    async def read_cart_count(self) -> Read[int]:
        text = await self.read_text(self.CART_COUNT_BADGE, "cart badge")
        if not text.found:
            return Read.missing(text.error)
        try:
            count = int(text.value)
        except ValueError:
            return Read.missing(f"cart badge is not a number: {text.value!r}")
        self.log(f"Licznik koszyka: {count}")
        return Read.ok(count)

    async def cart_badge_present(self) -> bool:
        """Czy licznik w ogole jest w DOM (sklep moze go ukrywac przy pustym koszyku)."""
        return await self.loc(self.CART_COUNT_BADGE).count() > 0

    async def cart_count(self) -> int:
        """0 takze gdy licznika nie da sie odczytac — do asercji uzyj read_cart_count()."""
        result = await self.read_cart_count()
        if not result.found:
            self.warn(f"Nie udalo sie odczytac licznika koszyka: {result.error}")
        return result.or_default(0)

    async def assert_cart_count(self, expected: int):
        """Czeka az licznik pokaze expected, potem porownuje."""
        try:
            await self.wait.text_equals(self.loc(self.CART_COUNT_BADGE), str(expected), "cart badge")
        except WaitTimeout as e:
            actual = await self.read_cart_count()
            raise PageAssertionError("cart count", expected, actual.describe(),
                                     message=f"Cart count mismatch. Expected: {expected}, Actual: {actual.describe()}") from e
        self.log(f"Licznik koszyka OK: {expected}")

    # ── Produkty ──────────────────────────────────────────────────────────────

    async def read_product_count(self) -> Read[int]:
        try:
            count = await self.loc(self.PRODUCT_LIST).count()
        except PlaywrightError as e:
            return Read.missing(str(e))
        self.log(f"Liczba produktow na stronie: {count}")
        return Read.ok(count)

    async def product_count(self) -> int:
        return (await self.read_product_count()).or_default(0)

    async def read_product_name_for(self, item_id: int) -> Read[str]:
        result = await self.read_text(self._product_name_selector(item_id), f"name of product {item_id}")
        if result.found:
            self.log(f"Nazwa produktu {item_id}: {result.value}")
        return result

    async def product_name_for(self, item_id: int) -> str | None:
        result = await self.read_product_name_for(item_id)
        if not result.found:
            self.warn(f"Nie udalo sie odczytac nazwy produktu {item_id}: {result.error}")
        return result.or_default(None)

    async def add_to_cart_by_product(self, item_id: int) -> "HomePage":
        try:
            form = await self.wait.present(self._product_form(item_id), f"add-to-cart form for item {item_id}")
            button = await self.wait.clickable(form.locator(self.ADD_BUTTON), f"add-to-cart button for item {item_id}")
            await button.click()
        except (WaitTimeout, PlaywrightError) as e:
            raise PageAssertionError(
                f"add item {item_id} to cart", "clickable add-to-cart control", str(e),
                message=f"Failed to add item {item_id} to cart: {e}",
            ) from e
        self.log(f"Klikniete 'Add to Cart' dla produktu {item_id}")
        return self

    async def add_first_product_to_cart(self) -> "HomePage":
        """Pierwszy produkt katalogu to item 1."""
        return await self.add_to_cart_by_product(1)

    async def read_add_control_disabled(self, item_id: int) -> Read[bool]:
        try:
            button = await self.wait.present(
                self._product_form(item_id).locator(self.ADD_BUTTON), f"add-to-cart button for item {item_id}"
            )
            disabled = await button.is_disabled()
        except (WaitTimeout, PlaywrightError) as e:
            return Read.missing(str(e))
        self.log(f"Przycisk 'Add to Cart' dla produktu {item_id} nieaktywny: {disabled}")
        return Read.ok(disabled)

    async def is_add_control_disabled(self, item_id: int) -> bool:
        result = await self.read_add_control_disabled(item_id)
        if not result.found:
            self.warn(f"Nie udalo sie sprawdzic przycisku dla produktu {item_id}: {result.error}")
        return result.or_default(False)

    # ── Asercje widocznosci ───────────────────────────────────────────────────

    async def assert_text_visible(self, text: str):
        try:
            await self.wait.visible(self.page.get_by_text(text), f"text '{text}'")
        except WaitTimeout as e:
            raise PageAssertionError(
                "text visible", text, e.actual,
                message=f"Expected text '{text}' not found on page: {e.actual}",
            ) from e
        self.log(f"Tekst widoczny: '{text}'")

    async def assert_success_notification_visible(self) -> str:
        try:
            notification = await self.wait.visible(self.loc(self.NOTIFICATION), "success notification")
            text = (await notification.inner_text()).strip()
        except (WaitTimeout, PlaywrightError) as e:
            raise PageAssertionError(
                "success notification", "visible", str(e),
                message=f"Success notification not visible: {e}",
            ) from e
        self.log(f"Powiadomienie widoczne: {text}")
        return text

    async def assert_success_notification_hidden(self):
        """
        Bariera miedzy kolejnymi dodaniami: powiadomienie musi zniknac,
        inaczej przesuniety layout lapie klikniecie w zlym miejscu.
        """
        try:
            await self.wait.hidden(self.loc(self.NOTIFICATION), "success notification")
        except WaitTimeout as e:
            raise PageAssertionError(
                "success notification", "hidden", e.actual,
                message=f"Success notification still visible: {e.actual}",
            ) from e
        self.log("Powiadomienie zniknelo")
