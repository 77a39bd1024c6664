"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pms.domain.exceptions import InvalidPricingInput, ValidationError

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Arithmetic keeps full
    precision; call ``quantize()`` when a figure is final.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __truediv__(self, divisor: int | Decimal) -> Money:
        if isinstance(divisor, bool) or not isinstance(divisor, (int, Decimal)):
            raise TypeError(
                f"Can only divide Money by int or Decimal, got {type(divisor).__name__}"
            )
        if divisor <= 0:
            raise ValidationError(f"Cannot divide Money by {divisor}")
        return Money(self.amount / divisor, self.currency)

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Rounding -------------------------------------------------------------

    def quantize(self) -> Money:
        """Round half-up to whole cents."""
        return Money(self.amount.quantize(CENTS, rounding=ROUND_HALF_UP), self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class Rate:
    """A fraction in the half-open interval [0, 1).

    Used for the desired margin and the variable-cost/tax share of a price.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Rate must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < Decimal("0"):
            raise ValidationError(f"Rate must be in [0, 1), got {self.value}")
        if self.value >= Decimal("1"):
            raise InvalidPricingInput(f"Rate must be in [0, 1), got {self.value}")

    def __str__(self) -> str:
        return f"{self.value * 100:.2f}%"

    @staticmethod
    def of(value: str | float | int | Decimal) -> Rate:
        try:
            return Rate(Decimal(str(value).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid rate: {value!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity.

    Estimated sales may legitimately be zero for a product that is
    listed but not expected to sell this month.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)
