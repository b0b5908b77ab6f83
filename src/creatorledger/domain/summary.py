"""Tax year summary domain service."""

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence
from uuid import UUID, uuid4

from creatorledger.database.base import Database
from creatorledger.domain.entities import (
    CategoryTotals,
    ExpenseCategory,
    ExpenseData,
    IncomeData,
    TaxYearSummary,
)
from creatorledger.domain.errors import ValidationError, required
from creatorledger.domain.events import EventPublisher, TaxYearSummaryGenerated
from creatorledger.domain.money import DEFAULT_CURRENCY, Money
from creatorledger.domain.tax_year import TaxYear
from creatorledger.logging_config import get_logger

logger = get_logger(__name__)


class IncomeQuery(Protocol):
    def find_by_owner_and_date_range(
        self, owner: str, start_date: date, end_date: date
    ) -> list[IncomeData]: ...


class ExpenseQuery(Protocol):
    def find_by_owner_and_date_range(
        self, owner: str, start_date: date, end_date: date
    ) -> list[ExpenseData]: ...


def reference_currency(*amount_groups: Iterable[Money]) -> str:
    """Return the currency of the first amount found, or the default."""
    for amounts in amount_groups:
        for amount in amounts:
            return amount.currency
    return DEFAULT_CURRENCY


def calculate_total(amounts: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
    """Sum amounts starting from zero in ``currency``.

    Raises:
        ValidationError: If any amount is in a different currency
    """
    total = Money.zero(currency)
    for amount in amounts:
        total = total.add(amount)
    return total


def calculate_category_totals(
    expenses: Sequence[ExpenseData], currency: str = DEFAULT_CURRENCY
) -> CategoryTotals:
    """Group expense amounts by category.

    All expenses must share ``currency``; mixed currencies raise the same
    ValidationError as ``Money.add``.
    """
    if not expenses:
        return CategoryTotals.empty(currency)

    totals: dict[ExpenseCategory, Money] = {}
    for expense in expenses:
        current = totals.get(expense.category, Money.zero(currency))
        totals[expense.category] = current.add(expense.amount)
    return CategoryTotals(totals, currency)


class TaxYearSummaryService:
    """Service for generating and looking up tax year summaries."""

    def __init__(
        self,
        income_query: IncomeQuery,
        expense_query: ExpenseQuery,
        db: Database,
        publisher: Optional[EventPublisher] = None,
    ):
        """Initialize tax year summary service.

        Args:
            income_query: Source of income records for an owner and date range
            expense_query: Source of expense records for an owner and date range
            db: Database instance used to persist summaries
            publisher: Optional event publisher notified after generation
        """
        if income_query is None:
            raise ValueError("Income query cannot be null")
        if expense_query is None:
            raise ValueError("Expense query cannot be null")
        if db is None:
            raise ValueError("Database cannot be null")
        self.income_query = income_query
        self.expense_query = expense_query
        self.db = db
        self.publisher = publisher

    def generate(self, owner: str, tax_year: TaxYear) -> UUID:
        """Generate and persist a summary for an owner's tax year.

        Every call creates a new summary with a new ID, even when one already
        exists for the same owner and tax year.

        Args:
            owner: Owner of the income and expense records
            tax_year: Tax year to summarise

        Returns:
            ID of the new summary

        Raises:
            ValidationError: If owner or tax year is missing, or records mix
                currencies
        """
        if owner is None or not owner.strip():
            raise ValidationError(required("Owner"))
        if tax_year is None:
            raise ValidationError("Tax year cannot be null")
        owner = owner.strip()

        incomes = self.income_query.find_by_owner_and_date_range(
            owner, tax_year.start_date, tax_year.end_date
        )
        expenses = self.expense_query.find_by_owner_and_date_range(
            owner, tax_year.start_date, tax_year.end_date
        )

        income_amounts = [income.amount for income in incomes]
        expense_amounts = [expense.amount for expense in expenses]
        currency = reference_currency(income_amounts, expense_amounts)

        summary = TaxYearSummary(
            id=uuid4(),
            owner=owner,
            tax_year=tax_year,
            total_income=calculate_total(income_amounts, currency),
            total_expenses=calculate_total(expense_amounts, currency),
            category_totals=calculate_category_totals(expenses, currency),
        )
        self.db.save_tax_year_summary(summary)

        logger.info(
            "tax_year_summary_generated",
            summary_id=str(summary.id),
            owner=owner,
            tax_year=tax_year.label,
            income_count=len(incomes),
            expense_count=len(expenses),
        )

        if self.publisher is not None:
            self.publisher.publish(
                TaxYearSummaryGenerated(
                    summary_id=summary.id,
                    owner=summary.owner,
                    tax_year=summary.tax_year,
                    total_income=summary.total_income,
                    total_expenses=summary.total_expenses,
                    category_totals=summary.category_totals,
                    profit=summary.profit,
                )
            )

        return summary.id

    def find_by_id(self, summary_id: UUID) -> Optional[TaxYearSummary]:
        """Get summary by ID.

        Returns:
            TaxYearSummary or None if not found
        """
        if summary_id is None:
            raise ValidationError("Tax year summary ID cannot be null")
        return self.db.get_tax_year_summary(summary_id)

    def list_for_owner(self, owner: str) -> list[TaxYearSummary]:
        """List an owner's summaries, newest first."""
        if owner is None or not owner.strip():
            raise ValidationError(required("Owner"))
        return self.db.list_tax_year_summaries(owner.strip())
