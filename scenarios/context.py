from dataclasses import dataclass, replace

from playwright.async_api import Page

from config import Settings
from core.api_client import ShopApi
from core.db_inspector import DbInspector
from core.errors import ShopTestError


@dataclass
class ShopContext:
    """
    Wszystko czego potrzebuje jeden scenariusz — przekazywane jawnie, bez klasy bazowej.
    Kontekst moze byc czesciowy: testy samej bazy nie maja page, testy samego UI nie maja db.
    """
    settings: Settings
    page: Page | None = None
    api: ShopApi | None = None
    db: DbInspector | None = None

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def timeout_ms(self) -> int:
        return self.settings.timeout_ms

    def require_page(self) -> Page:
        if self.page is None:
            raise ShopTestError("This scenario needs a browser page, but the context has none")
        return self.page

    def require_api(self) -> ShopApi:
        if self.api is None:
            raise ShopTestError("This scenario needs the HTTP seed client, but the context has none")
        return self.api

    def require_db(self) -> DbInspector:
        if self.db is None:
            raise ShopTestError("This scenario needs the database inspector, but the context has none")
        return self.db

    def with_page(self, page: Page) -> "ShopContext":
        return replace(self, page=page)
