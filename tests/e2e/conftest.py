"""
Fixtures dla testow na zywym sklepie (SHOP_BASE_URL, SHOP_DB_PATH).
Gdy sklep nie odpowiada albo nie ma pliku bazy — testy sa pomijane, nie failuja.
"""
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from config import Settings
from core.api_client import ShopApi
from core.browser_session import browser_session
from core.db_inspector import DbInspector
from scenarios.context import ShopContext


@pytest.fixture(scope="session")
def settings():
    settings = Settings.from_env()
    try:
        httpx.get(settings.base_url, timeout=3)
    except httpx.HTTPError as e:
        pytest.skip(f"Storefront not reachable at {settings.base_url}: {e}")
    return settings


@pytest.fixture
def shop_db(settings):
    if not Path(settings.db_path).exists():
        pytest.skip(f"Shop database not found at {settings.db_path}")
    db = DbInspector(settings.db_path)
    yield db
    db.dispose()


@pytest_asyncio.fixture
async def api(settings):
    async with ShopApi(settings.base_url, timeout=settings.timeout_ms / 1000) as client:
        yield client


@pytest_asyncio.fixture
async def page(settings):
    async with browser_session(settings) as page:
        yield page


@pytest.fixture
def ui_ctx(settings, page, api):
    """Kontekst bez bazy — testy samego UI."""
    return ShopContext(settings=settings, page=page, api=api)


@pytest.fixture
def ctx(settings, page, api, shop_db):
    return ShopContext(settings=settings, page=page, api=api, db=shop_db)


@pytest.fixture
def db_ctx(settings, api, shop_db):
    return ShopContext(settings=settings, api=api, db=shop_db)
