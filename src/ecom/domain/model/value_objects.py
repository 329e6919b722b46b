"""Value objects and small helpers shared by every catalog record."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from ecom.domain.exceptions import ValidationError

HEX_PREFIX = re.compile(r"^#")
MIN_HEX_LENGTH = 4


def new_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def require_text(value: str | None, field_name: str) -> str:
    """Return *value* stripped, or raise if it is blank."""
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hex_code(value: str | None) -> str:
    value = require_text(value, "Value")
    if len(value) < MIN_HEX_LENGTH or not HEX_PREFIX.match(value):
        raise ValidationError("String must be a valid hexcode")
    return value


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Amounts are Decimals; floats never reach this type.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:,.2f}"

    @property
    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build Money from user input, going through ``str`` to keep precision."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value)
