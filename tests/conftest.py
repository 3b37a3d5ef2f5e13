"""
Fixtures wspolne: tymczasowa baza sklepu, sztuczny sklep, przegladarka, kontekst scenariusza.

Kazdy test dostaje wlasna przegladarke i wlasna baze — nic nie przechodzi miedzy testami.
Testy z przegladarka sa pomijane, gdy Chromium nie jest zainstalowany.
"""
import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from app.models import Base
from config import Settings
from core.api_client import ShopApi
from core.browser_session import CHROMIUM_ARGS
from core.db_inspector import DbInspector
from scenarios.context import ShopContext
from tests.fake_shop import BASE_URL, FakeShop


@pytest.fixture
def shop_db(tmp_path):
    db = DbInspector(str(tmp_path / "shop.db"))
    Base.metadata.create_all(db.engine)
    yield db
    db.dispose()


@pytest.fixture
def fake_shop(shop_db):
    shop = FakeShop(shop_db)
    shop.seed()
    return shop


@pytest.fixture
def settings(shop_db):
    return Settings(base_url=BASE_URL, db_path=shop_db.db_path, timeout_ms=5000)


@pytest_asyncio.fixture
async def api(fake_shop):
    async with ShopApi(BASE_URL, transport=fake_shop.transport()) as client:
        yield client


@pytest_asyncio.fixture
async def browser():
    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True, args=CHROMIUM_ARGS)
        except PlaywrightError as e:
            pytest.skip(f"Chromium not available: {e}")
        yield browser
        await browser.close()


@pytest_asyncio.fixture
async def page(browser, fake_shop, settings):
    browser_context = await browser.new_context()
    browser_context.set_default_timeout(settings.timeout_ms)
    page = await browser_context.new_page()
    await fake_shop.install(page)
    yield page
    await browser_context.close()


@pytest.fixture
def ctx(settings, page, api, shop_db):
    return ShopContext(settings=settings, page=page, api=api, db=shop_db)


@pytest.fixture
def db_ctx(settings, api, shop_db):
    """Kontekst bez przegladarki — testy samego API i bazy."""
    return ShopContext(settings=settings, api=api, db=shop_db)
