"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, DecimalException, InvalidOperation

from ims.domain.exceptions import InvalidArgumentError

# Largest amount a single Money may hold, totals included.
MAX_AMOUNT = Decimal("999999999999.99")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that totals like 25.50 * 2 + 50.00 come out as exactly
    101.00.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidArgumentError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidArgumentError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidArgumentError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount > MAX_AMOUNT:
            raise InvalidArgumentError(
                f"Money amount cannot exceed {MAX_AMOUNT}, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        try:
            amount = self.amount + other.amount
        except DecimalException as exc:
            raise InvalidArgumentError(f"Cannot add {self} and {other}") from exc
        return Money(amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        try:
            amount = self.amount * factor
        except DecimalException as exc:
            raise InvalidArgumentError(f"Cannot multiply {self} by {factor}") from exc
        return Money(amount, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise InvalidArgumentError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidArgumentError(f"Quantity must be positive, got {self.value}")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)
