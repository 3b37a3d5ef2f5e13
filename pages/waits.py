"""
Waiter — ograniczone czekanie na asynchroniczne zmiany w DOM.

Po kazdej akcji strona zmienia sie w swoim tempie (request + re-render),
test idzie dalej synchronicznie. Dlatego przed kazdym odczytem / klikiem
czekamy jawnie na konkretny warunek: obecnosc, widocznosc, klikalnosc,
znikniecie albo zmiane tekstu. Zadne czekanie nie jest nieskonczone —
timeout zamienia sie w WaitTimeout z nazwa operacji.
"""
import logging
import time

from playwright.async_api import Locator, Page, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from core.errors import WaitTimeout

DEFAULT_TIMEOUT_MS = 10_000


def _reason(error: Exception) -> str:
    # Pierwsza linia wystarcza — reszta to log wywolan Playwrighta
    return str(error).strip().splitlines()[0] if str(error).strip() else type(error).__name__


class Waiter:
    def __init__(self, page: Page, timeout_ms: int = DEFAULT_TIMEOUT_MS, logger: logging.Logger | None = None):
        self.page = page
        self.timeout_ms = timeout_ms
        self.logger = logger or logging.getLogger(__name__)

    def _timeout(self, timeout_ms: int | None) -> int:
        return self.timeout_ms if timeout_ms is None else timeout_ms

    # ── Stan elementu ─────────────────────────────────────────────────────────

    async def present(self, locator: Locator, what: str, timeout_ms: int | None = None) -> Locator:
        return await self._wait_state(locator.first, "attached", what, timeout_ms)

    async def visible(self, locator: Locator, what: str, timeout_ms: int | None = None) -> Locator:
        return await self._wait_state(locator.first, "visible", what, timeout_ms)

    async def hidden(self, locator: Locator, what: str, timeout_ms: int | None = None) -> Locator:
        """Czeka az element zniknie. Element usuniety z DOM tez jest 'ukryty'."""
        return await self._wait_state(locator.first, "hidden", what, timeout_ms)

    async def clickable(self, locator: Locator, what: str, timeout_ms: int | None = None) -> Locator:
        """Widoczny i aktywny — odpowiednik elementToBeClickable."""
        deadline = time.monotonic() + self._timeout(timeout_ms) / 1000
        target = await self.visible(locator, what, timeout_ms)
        remaining = max(1, int((deadline - time.monotonic()) * 1000))
        try:
            await expect(target).to_be_enabled(timeout=remaining)
        except AssertionError as e:
            raise WaitTimeout(f"wait for {what} to be clickable", "enabled", _reason(e)) from e
        return target

    async def _wait_state(self, locator: Locator, state: str, what: str, timeout_ms: int | None) -> Locator:
        timeout = self._timeout(timeout_ms)
        try:
            await locator.wait_for(state=state, timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(
                f"wait for {what} to be {state}",
                state,
                f"timed out after {timeout}ms",
            ) from e
        self.logger.debug(f"{what}: {state}")
        return locator

    # ── Tekst ─────────────────────────────────────────────────────────────────

    async def text_equals(self, locator: Locator, expected: str, what: str, timeout_ms: int | None = None):
        timeout = self._timeout(timeout_ms)
        try:
            await expect(locator.first).to_have_text(expected, timeout=timeout)
        except AssertionError as e:
            actual = await self._current_text(locator)
            raise WaitTimeout(f"wait for {what} text", expected, actual) from e

    async def text_changes(self, locator: Locator, previous: str, what: str, timeout_ms: int | None = None) -> str:
        """
        Blokuje az tekst elementu przestanie byc rowny poprzedniej wartosci.
        Jedyny sygnal, ze UI przeliczyl sie po zmianie — zwraca nowy tekst.
        """
        timeout = self._timeout(timeout_ms)
        try:
            await expect(locator.first).not_to_have_text(previous, timeout=timeout)
        except AssertionError as e:
            raise WaitTimeout(
                f"wait for {what} to change",
                f"text different from {previous!r}",
                f"still {previous!r} after {timeout}ms",
            ) from e
        current = await self._current_text(locator)
        self.logger.debug(f"{what}: {previous!r} -> {current!r}")
        return current

    async def title_equals(self, expected: str, timeout_ms: int | None = None):
        timeout = self._timeout(timeout_ms)
        try:
            await expect(self.page).to_have_title(expected, timeout=timeout)
        except AssertionError as e:
            raise WaitTimeout("wait for page title", expected, await self.page.title()) from e

    async def _current_text(self, locator: Locator) -> str | None:
        try:
            return (await locator.first.inner_text(timeout=1000)).strip()
        except PlaywrightTimeoutError:
            return None
