from playwright.async_api import Error as PlaywrightError

from core.errors import PageAssertionError, WaitTimeout
from core.read_result import Read
from pages.base_page import BasePage

EXPECTED_TITLE = "Checkout"


class CheckoutPage(BasePage):
    """Potwierdzenie zamowienia — podziekowanie, suma, tytul strony."""

    CHECKOUT_CONTAINER = ('locator', '.checkout-container')
    THANK_YOU_MESSAGE  = ('locator', ".thank-you-message, [class*='thank']")
    TOTAL_PRICE        = ('locator', '.total-price')

    LOADED_SIGNAL = CHECKOUT_CONTAINER

    async def read_total_price_text(self) -> Read[str]:
        result = await self.read_text(self.TOTAL_PRICE, "checkout total")
        if result.found:
            self.log(f"Suma checkout: {result.value}")
        return result

    async def total_price_text(self) -> str | None:
        result = await self.read_total_price_text()
        if not result.found:
            self.warn(f"Nie udalo sie odczytac sumy: {result.error}")
        return result.or_default(None)

    async def assert_thank_you_visible(self) -> str:
        try:
            message = await self.wait.visible(self.loc(self.THANK_YOU_MESSAGE), "thank you message")
            text = (await message.inner_text()).strip()
        except (WaitTimeout, PlaywrightError) as e:
            raise PageAssertionError(
                "thank you message", "visible", str(e),
                message=f"Thank you message not visible: {e}",
            ) from e
        self.log(f"Podziekowanie widoczne: {text}")
        return text

    async def assert_page_title(self, expected: str = EXPECTED_TITLE):
        try:
            await self.wait.title_equals(expected)
        except WaitTimeout as e:
            raise PageAssertionError(
                "page title", expected, e.actual,
                message=f"Expected page title '{expected}', got '{e.actual}'",
            ) from e
        self.log(f"Tytul strony: '{expected}'")
