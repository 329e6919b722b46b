"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money, require_hex_code, require_text


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_defaults_to_usd(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_of_factory_rejects_nan(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("NaN")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_uses_thousands_separator(self):
        assert str(Money.of("1234.5")) == "$1,234.50"
        assert str(Money.of("9")) == "$9.00"

    def test_zero_is_not_positive(self):
        assert not Money.zero().is_positive
        assert Money.of("0.01").is_positive


# ── Text helpers ─────────────────────────────────────────────────────────────


class TestRequireText:

    def test_strips_whitespace(self):
        assert require_text("  Red ", "Name") == "Red"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_rejected(self, value):
        with pytest.raises(ValidationError, match="Name is required"):
            require_text(value, "Name")


class TestRequireHexCode:

    def test_accepts_hex_code(self):
        assert require_hex_code("#ff0000") == "#ff0000"

    def test_missing_hash_rejected(self):
        with pytest.raises(ValidationError, match="valid hexcode"):
            require_hex_code("ff0000")

    def test_too_short_rejected(self):
        with pytest.raises(ValidationError, match="valid hexcode"):
            require_hex_code("#ff")
