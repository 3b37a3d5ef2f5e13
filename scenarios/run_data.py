from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class ProductRef:
    """Produkt wskazany do testu. Nazwe czytamy raz, przed jakakolwiek zmiana koszyka."""
    item_id: int
    name: str


@dataclass(frozen=True)
class CartRow:
    name: str
    quantity: int | None
    price: Decimal | None = None


class FlowState(str, Enum):
    FRESH       = "fresh"
    SEEDED      = "seeded"
    ADDED       = "added"
    VIEWED      = "viewed"
    CHECKED_OUT = "checked_out"


@dataclass
class FlowResult:
    state: FlowState = FlowState.FRESH
    product: ProductRef | None = None
    ui_rows: list[CartRow] = field(default_factory=list)
    db_quantity: int | None = None
    checkout_total: str | None = None
    screenshots: dict[str, str] = field(default_factory=dict)  # stage → sciezka pliku

    @property
    def product_name(self) -> str | None:
        return self.product.name if self.product else None
