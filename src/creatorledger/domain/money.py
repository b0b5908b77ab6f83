"""Monetary value objects.

``Money`` is the non-negative amount used throughout the ledger. Every value
is quantized to two decimal places with half-down rounding on construction,
so arithmetic results never drift by a cent depending on which path produced
them.

``SignedMoney`` shares the same currency and rounding rules but may be
negative. It only appears as the profit of a tax year summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from creatorledger.domain.errors import ValidationError, currency_mismatch, required

DEFAULT_CURRENCY = "GBP"
DECIMAL_PLACES = 2
ROUNDING = ROUND_HALF_DOWN
# Largest magnitude that fits the Numeric(19, 2) storage columns
MAX_INTEGER_DIGITS = 17
MAX_AMOUNT = Decimal(10) ** MAX_INTEGER_DIGITS - Decimal(1).scaleb(-DECIMAL_PLACES)

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)

AmountLike = Union[Decimal, int, float, str]


def to_decimal(amount: AmountLike) -> Decimal:
    """Convert an amount to a finite Decimal without rounding.

    Raises:
        ValidationError: If amount is missing or not a finite number
    """
    if amount is None:
        raise ValidationError("Money amount cannot be null")
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid money amount: {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValidationError(f"Invalid money amount: {amount!r}")
    if not value.is_finite():
        raise ValidationError(f"Invalid money amount: {amount!r}")
    return value


def normalize_amount(amount: AmountLike) -> Decimal:
    """Convert an amount to a Decimal with exactly two decimal places.

    Raises:
        ValidationError: If the magnitude exceeds MAX_AMOUNT
    """
    value = to_decimal(amount)
    if abs(value) > MAX_AMOUNT:
        raise ValidationError(
            f"Money amount out of range: at most {MAX_INTEGER_DIGITS} integer digits "
            f"are supported (got {value})"
        )
    with localcontext() as ctx:
        ctx.prec = MAX_INTEGER_DIGITS + DECIMAL_PLACES + 1
        # Adding zero folds -0.00 into 0.00
        return value.quantize(_QUANTUM, rounding=ROUNDING) + 0


def normalize_currency(currency: str) -> str:
    """Strip and upper-case a currency code."""
    if currency is None or not str(currency).strip():
        raise ValidationError(required("Currency"))
    return str(currency).strip().upper()


@dataclass(frozen=True)
class Money:
    """Non-negative amount of a single currency."""

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if to_decimal(self.amount) < 0:
            raise ValidationError("Money amount cannot be negative")
        object.__setattr__(self, "amount", normalize_amount(self.amount))
        object.__setattr__(self, "currency", normalize_currency(self.currency))

    @classmethod
    def of(cls, amount: AmountLike, currency: str) -> Money:
        """Create a Money value.

        Args:
            amount: Non-negative amount (Decimal, int or numeric string)
            currency: Currency code, e.g. "gbp" or "GBP"

        Returns:
            Money rounded half-down to two decimal places

        Raises:
            ValidationError: If amount is missing or negative, or currency is blank
        """
        return cls(amount, currency)

    @classmethod
    def gbp(cls, amount: AmountLike) -> Money:
        """Create a Money value in pounds sterling."""
        return cls(amount, "GBP")

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        """Return zero in the given currency."""
        return cls(Decimal(0), currency)

    def add(self, other: Money) -> Money:
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        """Subtract another amount.

        Raises:
            ValidationError: If currencies differ or the result would be negative
        """
        self._ensure_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("Cannot subtract to negative amount")
        return Money(result, self.currency)

    def multiply(self, factor: AmountLike) -> Money:
        if factor is None or isinstance(factor, bool):
            raise ValidationError(f"Invalid multiplication factor: {factor!r}")
        try:
            factor_value = factor if isinstance(factor, Decimal) else Decimal(str(factor))
        except InvalidOperation:
            raise ValidationError(f"Invalid multiplication factor: {factor!r}")
        return Money(self.amount * factor_value, self.currency)

    def is_less_than(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def is_greater_than(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def _ensure_same_currency(self, other: Money) -> None:
        if other is None:
            raise ValidationError(required("Money"))
        if self.currency != other.currency:
            raise ValidationError(currency_mismatch(self.currency, other.currency))

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"


@dataclass(frozen=True)
class SignedMoney:
    """Amount of a single currency that may be negative.

    Only profit uses this type; everything else stays on ``Money``.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", normalize_amount(self.amount))
        object.__setattr__(self, "currency", normalize_currency(self.currency))

    @classmethod
    def difference(cls, minuend: Money, subtrahend: Money) -> SignedMoney:
        """Return ``minuend - subtrahend`` without the non-negative restriction.

        Raises:
            ValidationError: If currencies differ
        """
        if minuend is None or subtrahend is None:
            raise ValidationError(required("Money"))
        if minuend.currency != subtrahend.currency:
            raise ValidationError(currency_mismatch(minuend.currency, subtrahend.currency))
        return cls(minuend.amount - subtrahend.amount, minuend.currency)

    @classmethod
    def from_money(cls, money: Money) -> SignedMoney:
        return cls(money.amount, money.currency)

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def abs(self) -> Money:
        """Return the magnitude as a regular Money value."""
        return Money(abs(self.amount), self.currency)

    def __str__(self) -> str:
        if self.amount < 0:
            return f"-{self.currency} {-self.amount}"
        return f"{self.currency} {self.amount}"
