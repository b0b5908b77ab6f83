"""Domain model entities for creatorledger.

These are pure data classes representing business concepts, independent of
database schema. Entities are immutable: every change returns a new
instance, and the services persist the replacement.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional
from uuid import UUID, uuid4

from dateutil.relativedelta import relativedelta

from creatorledger.domain.errors import ValidationError, required
from creatorledger.domain.money import DEFAULT_CURRENCY, Money, SignedMoney
from creatorledger.domain.tax_year import TaxYear


class PaymentStatus(Enum):
    """Payment status of an income record."""

    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"

    def is_paid(self) -> bool:
        return self is PaymentStatus.PAID


class PaymentTransition(Enum):
    """Commands that move an income between payment states."""

    MARK_AS_PAID = "mark_as_paid"
    MARK_AS_OVERDUE = "mark_as_overdue"
    CANCEL = "cancel"


_TRANSITION_TARGETS = {
    PaymentTransition.MARK_AS_PAID: PaymentStatus.PAID,
    PaymentTransition.MARK_AS_OVERDUE: PaymentStatus.OVERDUE,
    PaymentTransition.CANCEL: PaymentStatus.CANCELLED,
}


def apply_transition(current: PaymentStatus, transition: PaymentTransition) -> PaymentStatus:
    """Return the status reached by applying ``transition``.

    Every transition is accepted from every state, including CANCELLED.
    """
    if current is None:
        raise ValidationError(required("Payment status"))
    if transition is None:
        raise ValidationError(required("Payment transition"))
    return _TRANSITION_TARGETS[transition]


class ExpenseCategory(Enum):
    """Allowable expense categories for self-employment reporting."""

    TRAVEL = "Travel"
    EQUIPMENT = "Equipment"
    OFFICE_COSTS = "Office costs"
    MARKETING = "Marketing"
    PROFESSIONAL_FEES = "Professional fees"
    TRAINING = "Training"
    SUBSCRIPTIONS = "Subscriptions"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: str) -> "ExpenseCategory":
        """Parse a category name such as ``travel`` or ``office-costs``.

        Raises:
            ValidationError: If value does not name a category
        """
        if value is None or not value.strip():
            raise ValidationError(required("Category"))
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            names = ", ".join(member.name.lower() for member in cls)
            raise ValidationError(f"Unknown expense category '{value}'. Expected one of: {names}")


def _validate_text(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(required(field_name))
    return value.strip()


def _validate_present(value, field_name: str) -> None:
    if value is None:
        raise ValidationError(f"{field_name} cannot be null")


CLIENT_NAME_MAX_LENGTH = 200
EVENT_DATE_MAX_YEARS_IN_PAST = 10
EVENT_DATE_MAX_YEARS_IN_FUTURE = 5


def validate_client_name(client_name: Optional[str]) -> str:
    """Return the stripped client name.

    Raises:
        ValidationError: If the name is blank or longer than CLIENT_NAME_MAX_LENGTH
    """
    client_name = _validate_text(client_name, "Client name")
    if len(client_name) > CLIENT_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Client name cannot exceed {CLIENT_NAME_MAX_LENGTH} characters"
        )
    return client_name


def validate_event_date(event_date: Optional[date], today: Optional[date] = None) -> date:
    """Check that an event date lies in the accepted window around today.

    Raises:
        ValidationError: If the date is missing, more than
            EVENT_DATE_MAX_YEARS_IN_PAST years ago, or more than
            EVENT_DATE_MAX_YEARS_IN_FUTURE years ahead
    """
    _validate_present(event_date, "Event date")
    today = today or date.today()
    if event_date < today - relativedelta(years=EVENT_DATE_MAX_YEARS_IN_PAST):
        raise ValidationError(
            f"Event date cannot be more than {EVENT_DATE_MAX_YEARS_IN_PAST} years in the past"
        )
    if event_date > today + relativedelta(years=EVENT_DATE_MAX_YEARS_IN_FUTURE):
        raise ValidationError(
            f"Event date cannot be more than {EVENT_DATE_MAX_YEARS_IN_FUTURE} years in the future"
        )
    return event_date


@dataclass(frozen=True, eq=False)
class Event:
    """A gig or project that income is earned from.

    ``record`` and ``update`` validate the client name and the event date
    window. Direct construction does not, so stored events always load.
    Equality is by ``id`` only.
    """

    id: UUID
    event_date: date
    client_name: str
    description: str

    @classmethod
    def record(
        cls,
        event_date: date,
        client_name: str,
        description: str,
        id: Optional[UUID] = None,
        today: Optional[date] = None,
    ) -> "Event":
        """Create a new event.

        Raises:
            ValidationError: If any field is missing or invalid
        """
        return cls(
            id=id or uuid4(),
            event_date=validate_event_date(event_date, today),
            client_name=validate_client_name(client_name),
            description=_validate_text(description, "Description"),
        )

    def update(
        self,
        event_date: date,
        client_name: str,
        description: str,
        today: Optional[date] = None,
    ) -> "Event":
        """Return a copy with new details; the id is kept."""
        return replace(
            self,
            event_date=validate_event_date(event_date, today),
            client_name=validate_client_name(client_name),
            description=_validate_text(description, "Description"),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True, eq=False)
class Income:
    """Income domain entity.

    Equality is by ``id`` only.
    """

    id: UUID
    owner: str
    event_id: UUID
    amount: Money
    description: str
    received_date: date
    status: PaymentStatus = PaymentStatus.PENDING

    @classmethod
    def record(
        cls,
        owner: str,
        event_id: UUID,
        amount: Money,
        description: str,
        received_date: date,
        id: Optional[UUID] = None,
    ) -> "Income":
        """Record new income in PENDING status.

        Raises:
            ValidationError: If any field is missing or blank
        """
        owner = _validate_text(owner, "Owner")
        _validate_present(event_id, "Event ID")
        _validate_present(amount, "Amount")
        description = _validate_text(description, "Description")
        _validate_present(received_date, "Received date")
        return cls(
            id=id or uuid4(),
            owner=owner,
            event_id=event_id,
            amount=amount,
            description=description,
            received_date=received_date,
            status=PaymentStatus.PENDING,
        )

    def mark_as_paid(self) -> "Income":
        return self._transition(PaymentTransition.MARK_AS_PAID)

    def mark_as_overdue(self) -> "Income":
        return self._transition(PaymentTransition.MARK_AS_OVERDUE)

    def cancel(self) -> "Income":
        return self._transition(PaymentTransition.CANCEL)

    def update(self, amount: Money, description: str, received_date: date) -> "Income":
        """Return a copy with new details; id and status are kept."""
        _validate_present(amount, "Amount")
        description = _validate_text(description, "Description")
        _validate_present(received_date, "Received date")
        return replace(self, amount=amount, description=description, received_date=received_date)

    def _transition(self, transition: PaymentTransition) -> "Income":
        return replace(self, status=apply_transition(self.status, transition))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Income):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True, eq=False)
class Expense:
    """Expense domain entity.

    Equality is by ``id`` only.
    """

    id: UUID
    owner: str
    amount: Money
    category: ExpenseCategory
    description: str
    incurred_date: date

    @classmethod
    def record(
        cls,
        owner: str,
        amount: Money,
        category: ExpenseCategory,
        description: str,
        incurred_date: date,
        id: Optional[UUID] = None,
    ) -> "Expense":
        """Record a new expense.

        Raises:
            ValidationError: If any field is missing or blank
        """
        owner = _validate_text(owner, "Owner")
        _validate_present(amount, "Amount")
        _validate_present(category, "Category")
        description = _validate_text(description, "Description")
        _validate_present(incurred_date, "Incurred date")
        return cls(
            id=id or uuid4(),
            owner=owner,
            amount=amount,
            category=category,
            description=description,
            incurred_date=incurred_date,
        )

    def update(
        self,
        amount: Money,
        category: ExpenseCategory,
        description: str,
        incurred_date: date,
    ) -> "Expense":
        _validate_present(amount, "Amount")
        _validate_present(category, "Category")
        description = _validate_text(description, "Description")
        _validate_present(incurred_date, "Incurred date")
        return replace(
            self,
            amount=amount,
            category=category,
            description=description,
            incurred_date=incurred_date,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expense):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class IncomeData:
    """Read-only view of an income record for reporting."""

    amount: Money
    date: date

    @classmethod
    def from_income(cls, income: Income) -> "IncomeData":
        return cls(amount=income.amount, date=income.received_date)


@dataclass(frozen=True)
class ExpenseData:
    """Read-only view of an expense record for reporting."""

    amount: Money
    category: ExpenseCategory
    date: date

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseData":
        return cls(amount=expense.amount, category=expense.category, date=expense.incurred_date)


@dataclass(frozen=True)
class CategoryTotals:
    """Per-category expense totals.

    A category that is absent from the mapping totals zero.
    """

    totals: Mapping[ExpenseCategory, Money] = field(default_factory=dict)
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if self.totals is None:
            raise ValidationError("Category totals map cannot be null")
        object.__setattr__(self, "totals", MappingProxyType(dict(self.totals)))

    @classmethod
    def empty(cls, currency: str = DEFAULT_CURRENCY) -> "CategoryTotals":
        return cls({}, currency)

    def total_for(self, category: ExpenseCategory) -> Money:
        _validate_present(category, "Category")
        return self.totals.get(category, Money.zero(self.currency))

    def overall_total(self) -> Money:
        total = Money.zero(self.currency)
        for amount in self.totals.values():
            total = total.add(amount)
        return total

    def categories(self) -> set[ExpenseCategory]:
        return set(self.totals)

    def is_empty(self) -> bool:
        return not self.totals


@dataclass(frozen=True, eq=False)
class TaxYearSummary:
    """Income, expense and category totals for one owner and tax year.

    Profit is derived on access and is the only monetary figure in the
    system that may be negative.
    """

    id: UUID
    owner: str
    tax_year: TaxYear
    total_income: Money
    total_expenses: Money
    category_totals: CategoryTotals
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        _validate_present(self.id, "Tax year summary ID")
        _validate_text(self.owner, "Owner")
        _validate_present(self.tax_year, "Tax year")
        _validate_present(self.total_income, "Total income")
        _validate_present(self.total_expenses, "Total expenses")
        _validate_present(self.category_totals, "Category totals")

    @property
    def profit(self) -> SignedMoney:
        if not self.total_income.is_less_than(self.total_expenses):
            return SignedMoney.from_money(self.total_income.subtract(self.total_expenses))
        return SignedMoney.difference(self.total_income, self.total_expenses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaxYearSummary):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
