from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base


class CartItem(Base):
    """
    Wiersz koszyka — jeden na produkt, ilosc 0–10.
    """
    __tablename__ = "cart"

    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), primary_key=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<CartItem item={self.item_id} qty={self.quantity}>"
