"""Domain events and an in-process publisher."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any, Callable
from uuid import UUID

from creatorledger.domain.entities import CategoryTotals, ExpenseCategory
from creatorledger.domain.money import Money, SignedMoney
from creatorledger.domain.tax_year import TaxYear
from creatorledger.logging_config import get_logger

logger = get_logger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class EventCreated:
    event_id: UUID
    event_date: date
    client_name: str
    description: str
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class IncomeRecorded:
    income_id: UUID
    owner: str
    event_id: UUID
    amount: Money
    description: str
    received_date: date
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class ExpenseRecorded:
    expense_id: UUID
    owner: str
    amount: Money
    category: ExpenseCategory
    description: str
    incurred_date: date
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class TaxYearSummaryGenerated:
    summary_id: UUID
    owner: str
    tax_year: TaxYear
    total_income: Money
    total_expenses: Money
    category_totals: CategoryTotals
    profit: SignedMoney
    occurred_at: datetime = field(default_factory=_now)


Handler = Callable[[Any], None]


class EventPublisher:
    """Synchronous, best-effort event dispatcher.

    Handlers run in subscription order. A handler that raises is logged and
    skipped; the remaining handlers still run and ``publish`` never raises.
    """

    def __init__(self):
        self._handlers: dict[type, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Handler) -> None:
        """Register a handler for an event type."""
        self._handlers[event_type].append(handler)

    def publish(self, event: Any) -> None:
        """Deliver an event to every handler registered for its type."""
        for handler in list(self._handlers.get(type(event), ())):
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "event_handler_failed",
                    event_type=type(event).__name__,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                )
