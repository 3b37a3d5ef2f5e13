"""
DbInspector — odczyt i zapis lokalnej bazy sklepu (SQLite).

Kazda operacja otwiera wlasne polaczenie i je zamyka — sklep pisze do tej samej
bazy, wiec nie trzymamy niczego otwartego miedzy krokami testu.
Zapytania zawsze z parametrami (:nazwa), nigdy sklejane ze stringow.
"""
import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import func, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.models import CartItem, Item
from database import make_engine, make_session_factory

# Tylko te tabele wolno czyscic przez reset_table — nazwy tabeli nie da sie zbindowac
RESETTABLE_TABLES = ("cart", "items")


@dataclass(frozen=True)
class ItemRecord:
    id: int
    name: str


@dataclass(frozen=True)
class CartRecord:
    item_id: int
    quantity: int


class DbInspector:
    def __init__(self, db_path: str, logger: logging.Logger | None = None, engine: Engine | None = None):
        self.db_path = db_path
        self.logger = logger or logging.getLogger(__name__)
        self.engine = engine or make_engine(db_path)
        self._session_factory = make_session_factory(self.engine)

    def session(self) -> Session:
        return self._session_factory()

    def dispose(self):
        self.engine.dispose()

    # ── Zapytania ad hoc ──────────────────────────────────────────────────────

    def fetch_one(self, sql: str, **params: Any) -> dict[str, Any] | None:
        self.logger.debug(f"fetch_one: {sql} {params}")
        with self.engine.connect() as conn:
            row = conn.execute(text(sql), params).first()
        return dict(row._mapping) if row is not None else None

    def fetch_all(self, sql: str, **params: Any) -> list[dict[str, Any]]:
        self.logger.debug(f"fetch_all: {sql} {params}")
        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [dict(row._mapping) for row in rows]

    def execute(self, sql: str, **params: Any) -> int:
        """Zapis (INSERT/UPDATE/DELETE) w transakcji. Zwraca liczbe zmienionych wierszy."""
        self.logger.debug(f"execute: {sql} {params}")
        with self.engine.begin() as conn:
            result = conn.execute(text(sql), params)
        return result.rowcount

    def reset_table(self, table_name: str) -> int:
        if table_name not in RESETTABLE_TABLES:
            raise ValueError(f"Table '{table_name}' cannot be reset (allowed: {', '.join(RESETTABLE_TABLES)})")
        deleted = self.execute(f"DELETE FROM {table_name}")
        self.logger.info(f"Wyczyszczono tabele '{table_name}' ({deleted} wierszy)")
        return deleted

    # ── Zapytania typowane ────────────────────────────────────────────────────

    def items(self) -> list[ItemRecord]:
        with self.session() as db:
            rows = db.execute(select(Item.id, Item.name).order_by(Item.id)).all()
        return [ItemRecord(id=row.id, name=row.name) for row in rows]

    def cart_rows(self) -> list[CartRecord]:
        with self.session() as db:
            rows = db.execute(select(CartItem.item_id, CartItem.quantity).order_by(CartItem.item_id)).all()
        return [CartRecord(item_id=row.item_id, quantity=int(row.quantity)) for row in rows]

    def cart_quantity(self, item_id: int) -> int:
        """Ilosc produktu w koszyku; 0 gdy produktu nie ma w tabeli cart."""
        with self.session() as db:
            quantity = db.execute(
                select(CartItem.quantity).where(CartItem.item_id == item_id)
            ).scalar_one_or_none()
        quantity = int(quantity) if quantity is not None else 0
        self.logger.info(f"DB: ilosc produktu {item_id} w koszyku = {quantity}")
        return quantity

    def item_name(self, item_id: int) -> str | None:
        with self.session() as db:
            return db.execute(select(Item.name).where(Item.id == item_id)).scalar_one_or_none()

    def cart_total(self) -> int:
        """Suma ilosci w calym koszyku; 0 dla pustego koszyka."""
        with self.session() as db:
            total = db.execute(select(func.sum(CartItem.quantity))).scalar()
        return int(total) if total is not None else 0
