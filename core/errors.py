"""
Hierarchia bledow testow.

Dwie kategorie:
  - asercje (PageAssertionError i pochodne) — konczą scenariusz, pytest raportuje je jako FAIL
  - bledy odczytu (ReadFailed) — tylko gdy ktos swiadomie zazada wartosci z Read.unwrap()
"""
from typing import Any


class ShopTestError(Exception):
    """Bazowy blad calego pakietu."""


class ConfigError(ShopTestError, ValueError):
    pass


class PageAssertionError(ShopTestError, AssertionError):
    """Oczekiwany stan strony nie zostal osiagniety."""

    def __init__(self, operation: str, expected: Any = None, actual: Any = None, message: str | None = None):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"{operation}: expected {expected!r}, got {actual!r}"
        super().__init__(message)


class WaitTimeout(PageAssertionError):
    """Ograniczone czekanie wygaslo zanim warunek byl spelniony."""


class PageLoadTimeout(WaitTimeout):
    pass


class SeedError(ShopTestError, AssertionError):
    """Wywolanie HTTP ustawiajace stan backendu nie powiodlo sie."""

    def __init__(self, operation: str, status_code: int | None, body: str):
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(f"{operation} failed. Status: {status_code}. Body: {body}")


class ReadFailed(ShopTestError):
    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: value not available ({reason})")


class ScenarioFailed(ShopTestError, AssertionError):
    """Scenariusz zatrzymany na danym etapie. Pierwotny blad w __cause__."""

    def __init__(self, scenario: str, stage: str, reason: str):
        self.scenario = scenario
        self.stage = stage
        self.reason = reason
        super().__init__(f"[{scenario}] stopped at '{stage}': {reason}")
