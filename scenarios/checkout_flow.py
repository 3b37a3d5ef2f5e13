"""
CheckoutFlow — glowny scenariusz end-to-end.

  Fresh → Seeded → Added → Viewed → CheckedOut

Kazde przejscie jest bramkowane asercja. Pierwsza porazka konczy scenariusz
(ScenarioFailed z etapem, pierwotny blad w __cause__). Bez ponawiania —
kazdy run startuje od resetu koszyka, wiec mozna go puscic ponownie.
"""
import logging
from pathlib import Path

from playwright.async_api import Error as PlaywrightError

from core.db_inspector import CartRecord
from core.errors import PageAssertionError, ScenarioFailed, ShopTestError
from pages import BasePage, CartPage, HomePage
from scenarios.context import ShopContext
from scenarios.run_data import FlowResult, FlowState, ProductRef


class CheckoutFlow:
    NAME = "checkout_flow"

    def __init__(self, context: ShopContext, item_id: int = 1, logger: logging.Logger | None = None):
        self.context = context
        self.item_id = item_id
        self.logger = logger or logging.getLogger(__name__)
        self.result = FlowResult()
        self._home: HomePage | None = None
        self._cart: CartPage | None = None

    @property
    def state(self) -> FlowState:
        return self.result.state

    # ── Publiczne API ─────────────────────────────────────────────────────────

    async def run(self) -> FlowResult:
        stages = [
            ('seed',     self._run_seed,     FlowState.SEEDED),
            ('add',      self._run_add,      FlowState.ADDED),
            ('cart',     self._run_cart,     FlowState.VIEWED),
            ('checkout', self._run_checkout, FlowState.CHECKED_OUT),
        ]
        for stage, step, reached in stages:
            try:
                await step()
            except (ShopTestError, AssertionError, PlaywrightError) as e:
                self.logger.warning(f"[{self.NAME}] Scenariusz przerwany na '{stage}': {e}")
                await self._screenshot(f"failed_{stage}")
                raise ScenarioFailed(self.NAME, stage, str(e)) from e
            self.result.state = reached
            self.logger.info(f"[{self.NAME}] Etap '{stage}' OK -> {reached.value}")

        return self.result

    # ── Etapy ─────────────────────────────────────────────────────────────────

    async def _run_seed(self):
        await self.context.require_api().reset_cart()

    async def _run_add(self):
        self._home = await HomePage(self.context.require_page(), self.context, self.logger).open()

        # Nazwa PRZED klikiem — po dodaniu strona sie przeladowuje
        name = (await self._home.read_product_name_for(self.item_id)).unwrap(
            f"product name for item {self.item_id}"
        )
        self.result.product = ProductRef(item_id=self.item_id, name=name)

        await self._home.add_to_cart_by_product(self.item_id)
        await self._home.assert_cart_count(1)
        await self._screenshot('home')

    async def _run_cart(self):
        name = self.result.product.name
        self._cart = await self._home.go_to_cart()
        self._home = None

        await self._cart.assert_product_present(name)
        await self._cart.assert_product_quantity(name, 1)
        self.result.ui_rows = await self._cart.row_data()

        db = self.context.require_db()
        db_quantity = db.cart_quantity(self.item_id)
        self.result.db_quantity = db_quantity
        if db_quantity != 1:
            raise PageAssertionError(
                f"database quantity of item {self.item_id}", 1, db_quantity,
                message=f"Database should show 1 item in cart, found {db_quantity}",
            )
        # Dokladnie jeden wiersz w tabeli cart, takze bez resztek z iloscia 0
        expected_rows = [CartRecord(item_id=self.item_id, quantity=1)]
        db_rows = db.cart_rows()
        if db_rows != expected_rows:
            raise PageAssertionError("database cart rows", expected_rows, db_rows)
        await self._screenshot('cart')

    async def _run_checkout(self):
        checkout = await self._cart.checkout()
        self._cart = None

        await checkout.assert_thank_you_visible()
        await checkout.assert_page_title()
        self.result.checkout_total = await checkout.total_price_text()
        await self._screenshot('checkout')

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def _screenshot(self, stage: str) -> None:
        screenshot_dir = self.context.settings.screenshot_dir
        if not screenshot_dir or self.context.page is None:
            return
        Path(screenshot_dir).mkdir(parents=True, exist_ok=True)
        path = f"{screenshot_dir}/{self.NAME}_{stage}.png"
        try:
            await BasePage(self.context.page, self.context, self.logger).screenshot(path)
            self.result.screenshots[stage] = path
        except PlaywrightError as e:
            # zrzut ekranu nie moze przerwac runu
            self.logger.warning(f"[{self.NAME}] Nie udalo sie zapisac screenshota '{stage}': {e}")
