from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base


class Item(Base):
    """
    Produkt w katalogu sklepu.
    Mapujemy tylko kolumny, z ktorych korzystaja testy — reszta tabeli jest ignorowana.
    """
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Item {self.id} {self.name}>"
