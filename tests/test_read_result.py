from decimal import Decimal

import pytest

from core.errors import ReadFailed
from core.read_result import Read
from pages.base_page import parse_price


def test_zero_is_a_found_value_not_a_failure():
    zero = Read.ok(0)
    missing = Read.missing("badge not found")

    assert zero.found and zero.or_default(-1) == 0
    assert not missing.found and missing.or_default(-1) == -1


def test_unwrap_raises_with_reason():
    with pytest.raises(ReadFailed, match="badge not found"):
        Read.missing("badge not found").unwrap("cart count")

    assert Read.ok("Koala").unwrap("product name") == "Koala"


def test_describe():
    assert Read.ok(3).describe() == "3"
    assert Read.missing("timeout").describe() == "<not found: timeout>"


@pytest.mark.parametrize("text, expected", [
    ("Total Price: $45.99", Decimal("45.99")),
    ("Total: $0.00", Decimal("0.00")),
    ("$12.5", Decimal("12.5")),
    ("  100 ", Decimal("100")),
])
def test_parse_price(text, expected):
    assert parse_price(text) == expected


@pytest.mark.parametrize("text", [None, "", "Total Price: n/a", "1.2.3"])
def test_parse_price_unparsable(text):
    assert parse_price(text) is None
