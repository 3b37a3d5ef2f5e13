from dataclasses import dataclass
from typing import Generic, TypeVar

from core.errors import ReadFailed

T = TypeVar("T")


@dataclass(frozen=True)
class Read(Generic[T]):
    """
    Wynik odczytu z UI, ktory moze sie nie udac.

    Rozroznia "brak wartosci" (error ustawiony) od "wartosc jest 0 / pusta".
    Wywolujacy sam decyduje: or_default() dla odpornych odczytow,
    unwrap() gdy wartosc jest potrzebna do asercji.
    """
    value: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> "Read[T]":
        return cls(value=value)

    @classmethod
    def missing(cls, reason: str) -> "Read[T]":
        return cls(error=reason or "unknown error")

    @property
    def found(self) -> bool:
        return self.error is None

    def or_default(self, default: T) -> T:
        return self.value if self.found else default

    def unwrap(self, operation: str) -> T:
        if not self.found:
            raise ReadFailed(operation, self.error)
        return self.value

    def describe(self) -> str:
        return repr(self.value) if self.found else f"<not found: {self.error}>"
