"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal
from uuid import uuid4

from creatorledger.database.models import (
    Event as ORMEvent,
    Income as ORMIncome,
    Expense as ORMExpense,
    TaxYearSummary as ORMTaxYearSummary,
    TaxYearSummaryCategoryTotal as ORMCategoryTotal,
)
from creatorledger.database.mappers import (
    apply_event,
    apply_expense,
    apply_income,
    event_to_domain,
    expense_to_domain,
    income_to_domain,
    tax_year_summary_to_domain,
    tax_year_summary_to_orm,
)
from creatorledger.domain.entities import (
    Event,
    CategoryTotals,
    Expense,
    ExpenseCategory,
    Income,
    PaymentStatus,
    TaxYearSummary,
)
from creatorledger.domain.money import Money
from creatorledger.domain.tax_year import TaxYear


class TestEventMapper:
    """Tests for Event mapper."""

    def test_event_to_domain(self):
        """Test converting ORM Event to domain Event."""
        event_id = uuid4()
        orm_event = ORMEvent(
            id=str(event_id),
            event_date=date(2023, 6, 1),
            client_name="Smith Wedding",
            description="Evening reception set",
        )
        event = event_to_domain(orm_event)

        assert isinstance(event, Event)
        assert event.id == event_id
        assert event.event_date == date(2023, 6, 1)
        assert event.client_name == "Smith Wedding"

    def test_event_to_domain_skips_date_window(self):
        """Test that old stored events still load."""
        orm_event = ORMEvent(
            id=str(uuid4()), event_date=date(1999, 1, 1), client_name="Old", description="Gig"
        )
        assert event_to_domain(orm_event).event_date == date(1999, 1, 1)

    def test_apply_event(self):
        """Test copying a domain Event onto an ORM row."""
        event = Event.record(date(2023, 6, 1), "Smith Wedding", "Set", today=date(2024, 1, 1))
        orm_event = apply_event(ORMEvent(), event)

        assert orm_event.id == str(event.id)
        assert orm_event.client_name == "Smith Wedding"
        assert orm_event.event_date == date(2023, 6, 1)


class TestIncomeMapper:
    """Tests for Income mapper."""

    def test_income_to_domain(self):
        """Test converting ORM Income to domain Income."""
        income_id, event_id = uuid4(), uuid4()
        orm_income = ORMIncome(
            id=str(income_id),
            owner="alice",
            event_id=str(event_id),
            amount=Decimal("250.50"),
            currency="GBP",
            description="Wedding set",
            received_date=date(2023, 6, 1),
            status="OVERDUE",
        )
        income = income_to_domain(orm_income)

        assert isinstance(income, Income)
        assert income.id == income_id
        assert income.event_id == event_id
        assert income.amount == Money.gbp("250.50")
        assert income.status is PaymentStatus.OVERDUE

    def test_apply_income(self):
        """Test copying a domain Income onto an ORM row."""
        income = Income.record("alice", uuid4(), Money.of("9.99", "usd"), "Tips", date(2023, 6, 1))
        orm_income = apply_income(ORMIncome(), income)

        assert orm_income.id == str(income.id)
        assert orm_income.event_id == str(income.event_id)
        assert orm_income.amount == Decimal("9.99")
        assert orm_income.currency == "USD"
        assert orm_income.status == "PENDING"


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Test converting ORM Expense to domain Expense."""
        orm_expense = ORMExpense(
            id=str(uuid4()),
            owner="alice",
            amount=Decimal("40.00"),
            currency="GBP",
            category="OFFICE_COSTS",
            description="Desk",
            incurred_date=date(2023, 6, 1),
        )
        expense = expense_to_domain(orm_expense)

        assert isinstance(expense, Expense)
        assert expense.category is ExpenseCategory.OFFICE_COSTS
        assert expense.amount == Money.gbp("40.00")

    def test_apply_expense(self):
        """Test copying a domain Expense onto an ORM row."""
        expense = Expense.record("alice", Money.gbp("12.00"), ExpenseCategory.TRAINING, "Course", date(2023, 6, 1))
        orm_expense = apply_expense(ORMExpense(), expense)

        assert orm_expense.category == "TRAINING"
        assert orm_expense.amount == Decimal("12.00")


class TestTaxYearSummaryMapper:
    """Tests for TaxYearSummary mapper."""

    def test_tax_year_summary_to_orm(self):
        """Test converting a domain summary to ORM rows."""
        summary = TaxYearSummary(
            id=uuid4(),
            owner="alice",
            tax_year=TaxYear(2023),
            total_income=Money.gbp("350.50"),
            total_expenses=Money.gbp("125.25"),
            category_totals=CategoryTotals(
                {
                    ExpenseCategory.TRAVEL: Money.gbp("50.00"),
                    ExpenseCategory.EQUIPMENT: Money.gbp("75.25"),
                }
            ),
        )
        orm_summary = tax_year_summary_to_orm(summary)

        assert orm_summary.id == str(summary.id)
        assert orm_summary.tax_year_start == 2023
        assert orm_summary.currency == "GBP"
        assert {row.category: row.amount for row in orm_summary.category_totals} == {
            "TRAVEL": Decimal("50.00"),
            "EQUIPMENT": Decimal("75.25"),
        }

    def test_tax_year_summary_to_domain(self):
        """Test converting ORM summary rows to a domain summary."""
        generated_at = datetime.now(UTC)
        orm_summary = ORMTaxYearSummary(
            id=str(uuid4()),
            owner="alice",
            tax_year_start=2001,
            currency="EUR",
            total_income=Decimal("0.00"),
            total_expenses=Decimal("500.00"),
            generated_at=generated_at,
            category_totals=[ORMCategoryTotal(category="TRAVEL", amount=Decimal("500.00"))],
        )
        summary = tax_year_summary_to_domain(orm_summary)

        assert isinstance(summary, TaxYearSummary)
        assert summary.tax_year == TaxYear(2001)
        assert summary.total_expenses == Money.of("500.00", "EUR")
        assert summary.category_totals.total_for(ExpenseCategory.TRAVEL) == Money.of("500.00", "EUR")
        assert summary.profit.amount == Decimal("-500.00")
        assert summary.generated_at == generated_at
