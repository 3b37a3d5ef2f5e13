"""
Klasa bazowa dla wszystkich Page Objects.
Playwright jest TYLKO tutaj i w klasach dziedziczacych — scenariusze
rozmawiaja ze strona wylacznie przez metody page objectow.
"""
import logging
import re
from decimal import Decimal, InvalidOperation

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from core.errors import PageLoadTimeout, WaitTimeout
from core.read_result import Read
from pages.waits import Waiter
from scenarios.context import ShopContext


def parse_price(text: str | None) -> Decimal | None:
    """
    'Total Price: $45.99' -> Decimal('45.99').
    Wycina wszystko poza cyframi i kropka; None gdy nic sensownego nie zostaje.
    """
    if not text:
        return None
    cleaned = re.sub(r'[^0-9.]', '', text)
    if not cleaned:
        return None
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


class BasePage:
    # Element, ktorego obecnosc oznacza "ekran zaladowany" — nadpisz w podklasie
    LOADED_SIGNAL: tuple | None = None

    def __init__(self, page: Page, context: ShopContext, logger: logging.Logger | None = None):
        self.page = page
        self.context = context
        self._logger_override = logger
        self.logger = logger or logging.getLogger(type(self).__module__)
        self.wait = Waiter(page, context.timeout_ms, self.logger)

    @classmethod
    async def arrive(cls, page: Page, context: ShopContext, logger: logging.Logger | None = None):
        """Tworzy page object i czeka na sygnal zaladowania ekranu."""
        instance = cls(page, context, logger)
        await instance.wait_until_loaded()
        return instance

    async def _transition(self, page_cls):
        """Przejscie na inny ekran — nowy page object, stary nie powinien byc juz uzywany."""
        return await page_cls.arrive(self.page, self.context, self._logger_override)

    # ── Lokator ───────────────────────────────────────────────────────────────

    def loc(self, selector: tuple):
        """
        Interpretuje tuple selektora i zwraca Playwright Locator.

        Formaty:
          ('locator',      'css_or_xpath')
          ('role',         'button',       {'name': 'Checkout'})
          ('text',         'Koala',        {'exact': True})
          ('test_id',      'add-to-cart')
        """
        kind = selector[0]

        if kind == 'locator':
            return self.page.locator(selector[1])
        elif kind == 'role':
            kwargs = selector[2] if len(selector) > 2 else {}
            return self.page.get_by_role(selector[1], **kwargs)
        elif kind == 'text':
            kwargs = selector[2] if len(selector) > 2 else {}
            return self.page.get_by_text(selector[1], **kwargs)
        elif kind == 'test_id':
            return self.page.get_by_test_id(selector[1])
        else:
            raise ValueError(f"Unknown selector kind: {kind}")

    # ── Ladowanie ekranu ──────────────────────────────────────────────────────

    async def wait_until_loaded(self):
        """
        Czeka na LOADED_SIGNAL.
        strict_page_load=True  -> PageLoadTimeout od razu
        strict_page_load=False -> warning i jedziemy dalej; blad wyjdzie przy pierwszym uzyciu
        """
        if self.LOADED_SIGNAL is None:
            return
        try:
            await self.wait.present(self.loc(self.LOADED_SIGNAL), f"{self.__class__.__name__} load signal")
            await self._after_load_signal()
        except WaitTimeout as e:
            if self.context.settings.strict_page_load:
                raise PageLoadTimeout(
                    f"load {self.__class__.__name__}", e.expected, e.actual
                ) from e
            self.warn(f"Timeout ladowania strony, kontynuuje: {e}")
            return
        self.log("Strona zaladowana")

    async def _after_load_signal(self):
        # Hook — np. HomePage dodatkowo czeka na widocznosc listy
        pass

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def read_text(self, selector: tuple, what: str) -> Read[str]:
        try:
            el = await self.wait.present(self.loc(selector), what)
            return Read.ok((await el.inner_text()).strip())
        except (WaitTimeout, PlaywrightError) as e:
            return Read.missing(str(e))

    async def safe_click(self, selector: tuple, what: str):
        el = await self.wait.clickable(self.loc(selector), what)
        await el.click()

    async def screenshot(self, path: str) -> str:
        await self.page.screenshot(path=path)
        self.log(f"Screenshot zapisany: {path}")
        return path

    def log(self, msg: str):
        self.logger.info(f"[{self.__class__.__name__}] {msg}")

    def warn(self, msg: str):
        self.logger.warning(f"[{self.__class__.__name__}] {msg}")
