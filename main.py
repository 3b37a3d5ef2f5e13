"""
Shop E2E
========
Uruchamia scenariusze na zywym sklepie, kazdy w osobnej sesji przegladarki.

Uzycie:
    python main.py                                # wszystkie scenariusze
    python main.py --scenario checkout            # tylko jeden (mozna powtarzac)
    python main.py --scenario max_quantity --item 2
    python main.py --headed                       # z oknem przegladarki
    python main.py --list                         # dostepne scenariusze

Konfiguracja z .env / zmiennych srodowiskowych (SHOP_BASE_URL, SHOP_DB_PATH, ...).
"""

import asyncio
import dataclasses
import logging
import sys
from datetime import datetime
from pathlib import Path

from config import Settings
from core.api_client import ShopApi
from core.browser_session import browser_session
from core.db_inspector import DbInspector
from scenarios.context import ShopContext
from scenarios.shop_scenarios import SCENARIOS

logger = logging.getLogger(__name__)


def setup_logging():
    Path("logs").mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                f"logs/run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log",
                encoding="utf-8"
            )
        ]
    )


USAGE = "Usage: python main.py [--scenario NAME]... [--item ID] [--headless|--headed] [--list]"


def _flag_value(argv: list[str], idx: int, flag: str) -> str:
    if idx + 1 >= len(argv) or argv[idx + 1].startswith("--"):
        raise SystemExit(f"{flag} requires a value. {USAGE}")
    return argv[idx + 1]


def parse_args(argv: list[str]):
    names = []
    item_id = None
    headless = None

    for idx, arg in enumerate(argv):
        if arg == "--scenario":
            names.append(_flag_value(argv, idx, arg))
        elif arg == "--item":
            raw = _flag_value(argv, idx, arg)
            try:
                item_id = int(raw)
            except ValueError:
                raise SystemExit(f"--item must be an integer, got '{raw}'. {USAGE}") from None
        elif arg == "--headless":
            headless = True
        elif arg == "--headed":
            headless = False

    unknown = [n for n in names if n not in SCENARIOS]
    if unknown:
        raise SystemExit(f"Unknown scenario(s): {', '.join(unknown)}. Available: {', '.join(SCENARIOS)}")

    return names or list(SCENARIOS), item_id, headless


async def run_scenario(name: str, settings: Settings, item_id: int | None) -> bool:
    scenario, needs_browser, takes_item = SCENARIOS[name]
    kwargs = {'item_id': item_id} if takes_item and item_id is not None else {}

    db = DbInspector(settings.db_path)
    try:
        async with ShopApi(settings.base_url, timeout=settings.timeout_ms / 1000) as api:
            ctx = ShopContext(settings=settings, api=api, db=db)
            logger.info(f"{'='*60}")
            logger.info(f"[{name}] Start @ {settings.base_url}")

            try:
                if needs_browser:
                    async with browser_session(settings) as page:
                        await scenario(ctx.with_page(page), **kwargs)
                else:
                    await scenario(ctx, **kwargs)
            except AssertionError as e:
                logger.error(f"[{name}] FAIL: {e}")
                return False
            except Exception as e:
                logger.exception(f"[{name}] Nieoczekiwany blad: {e}")
                return False

            logger.info(f"[{name}] PASS")
            return True
    finally:
        db.dispose()


async def run_all(names: list[str], settings: Settings, item_id: int | None) -> int:
    failed = []
    for name in names:
        if not await run_scenario(name, settings, item_id):
            failed.append(name)

    logger.info(f"{'='*60}")
    logger.info(f"Passed: {len(names) - len(failed)}/{len(names)}")
    if failed:
        logger.info(f"Failed: {', '.join(failed)}")
    return 1 if failed else 0


if __name__ == "__main__":
    if "--list" in sys.argv:
        print("\n".join(SCENARIOS))
        sys.exit(0)

    setup_logging()
    names, item_id, headless = parse_args(sys.argv[1:])

    settings = Settings.from_env()
    if headless is not None:
        settings = dataclasses.replace(settings, headless=headless)

    sys.exit(asyncio.run(run_all(names, settings, item_id)))
