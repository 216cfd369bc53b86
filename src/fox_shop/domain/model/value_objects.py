"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from fox_shop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Price:
    """Positive product price.

    Held as a Decimal in memory; written to the JSON document as a plain
    number so the persisted layout stays readable by other tools.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount <= Decimal("0"):
            raise ValidationError(f"Price must be greater than zero, got {self.amount}")

    def to_number(self) -> int | float:
        """JSON-friendly representation: integral prices stay integers."""
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Price:
        """Convenient factory that coerces to Decimal safely."""
        # bool is an int subclass; ``true`` in a JSON body is not a price
        if isinstance(amount, bool) or not isinstance(amount, (str, int, float, Decimal)):
            raise ValidationError(f"Invalid price: {amount!r}")
        try:
            return Price(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc


@dataclass(frozen=True)
class StockCount:
    """Number of units in stock. Zero is allowed, negatives are not."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Count must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Count cannot be negative")

    def __str__(self) -> str:
        return str(self.value)
