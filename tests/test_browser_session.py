"""
browser_session bez prawdziwego Chromium — async_playwright podmieniony na atrapy,
sprawdzamy tylko kolejnosc otwierania i zamykania.
"""
import pytest

import core.browser_session as browser_session_module
from config import Settings
from core.browser_session import CHROMIUM_ARGS, browser_session


class FakeContext:
    def __init__(self):
        self.closed = False
        self.default_timeout = None

    def set_default_timeout(self, timeout):
        self.default_timeout = timeout

    async def new_page(self):
        return object()

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, fail_on_context: bool = False):
        self.fail_on_context = fail_on_context
        self.closed = False
        self.context = None
        self.context_kwargs = None

    async def new_context(self, **kwargs):
        if self.fail_on_context:
            raise RuntimeError("context refused")
        self.context_kwargs = kwargs
        self.context = FakeContext()
        return self.context

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser):
        self.browser = browser
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, browser):
        self.chromium = FakeChromium(browser)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


@pytest.fixture
def fake_playwright(monkeypatch):
    def install(browser):
        playwright = FakePlaywright(browser)
        monkeypatch.setattr(browser_session_module, "async_playwright", lambda: playwright)
        return playwright
    return install


async def test_session_yields_page_and_closes_everything(fake_playwright):
    browser = FakeBrowser()
    playwright = fake_playwright(browser)

    async with browser_session(Settings(timeout_ms=1234, headless=False)) as page:
        assert page is not None
        assert browser.context.default_timeout == 1234

    assert playwright.chromium.launch_kwargs == {'headless': False, 'slow_mo': None, 'args': CHROMIUM_ARGS}
    assert browser.context_kwargs == {'viewport': {'width': 1280, 'height': 720}}
    assert browser.context.closed
    assert browser.closed


async def test_browser_is_closed_when_context_cannot_be_created(fake_playwright):
    browser = FakeBrowser(fail_on_context=True)
    fake_playwright(browser)

    with pytest.raises(RuntimeError, match="context refused"):
        async with browser_session(Settings()):
            pass

    assert browser.closed


async def test_session_closes_when_test_body_fails(fake_playwright):
    browser = FakeBrowser()
    fake_playwright(browser)

    with pytest.raises(AssertionError):
        async with browser_session(Settings()):
            raise AssertionError("test failed")

    assert browser.context.closed
    assert browser.closed
