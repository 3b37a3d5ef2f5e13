"""
Konfiguracja testow — wczytywana z .env i zmiennych srodowiskowych.

Zmienne srodowiskowe maja pierwszenstwo przed plikiem .env.
Brak zmiennej = wartosc domyslna (lokalny sklep na :3000).
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.errors import ConfigError

load_dotenv()

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_DB_PATH = "app-under-test/shop.db"
DEFAULT_TIMEOUT_MS = 10_000

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got '{raw}'")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got '{raw}'") from None


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    db_path: str = DEFAULT_DB_PATH
    headless: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    # strict: brak elementu kotwicy = PageLoadTimeout, inaczej tylko warning
    strict_page_load: bool = True
    screenshot_dir: str | None = None
    slow_mo_ms: int = 0

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.timeout_ms <= 0:
            raise ConfigError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.getenv("SHOP_BASE_URL") or DEFAULT_BASE_URL,
            db_path=os.getenv("SHOP_DB_PATH") or DEFAULT_DB_PATH,
            headless=_env_bool("SHOP_HEADLESS", True),
            timeout_ms=_env_int("SHOP_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            strict_page_load=_env_bool("SHOP_STRICT_PAGE_LOAD", True),
            screenshot_dir=os.getenv("SHOP_SCREENSHOT_DIR") or None,
            slow_mo_ms=_env_int("SHOP_SLOW_MO_MS", 0),
        )

    def url(self, path: str = "") -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"
