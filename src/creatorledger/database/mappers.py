"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic. Money is split into an amount
column and a currency column; enums are stored by member name and UUIDs as
their canonical string form.
"""

from uuid import UUID

from creatorledger.domain import entities as domain
from creatorledger.domain.money import Money
from creatorledger.domain.tax_year import TaxYear
from creatorledger.database.models import (
    Event as ORMEvent,
    Income as ORMIncome,
    Expense as ORMExpense,
    TaxYearSummary as ORMTaxYearSummary,
    TaxYearSummaryCategoryTotal as ORMCategoryTotal,
)


def event_to_domain(orm_event: ORMEvent) -> domain.Event:
    """Convert SQLAlchemy Event model to domain Event entity."""
    return domain.Event(
        id=UUID(orm_event.id),
        event_date=orm_event.event_date,
        client_name=orm_event.client_name,
        description=orm_event.description,
    )


def apply_event(orm_event: ORMEvent, event: domain.Event) -> ORMEvent:
    """Copy domain Event fields onto a SQLAlchemy Event model."""
    orm_event.id = str(event.id)
    orm_event.event_date = event.event_date
    orm_event.client_name = event.client_name
    orm_event.description = event.description
    return orm_event


def income_to_domain(orm_income: ORMIncome) -> domain.Income:
    """Convert SQLAlchemy Income model to domain Income entity."""
    return domain.Income(
        id=UUID(orm_income.id),
        owner=orm_income.owner,
        event_id=UUID(orm_income.event_id),
        amount=Money(orm_income.amount, orm_income.currency),
        description=orm_income.description,
        received_date=orm_income.received_date,
        status=domain.PaymentStatus[orm_income.status],
    )


def apply_income(orm_income: ORMIncome, income: domain.Income) -> ORMIncome:
    """Copy domain Income fields onto a SQLAlchemy Income model."""
    orm_income.id = str(income.id)
    orm_income.owner = income.owner
    orm_income.event_id = str(income.event_id)
    orm_income.amount = income.amount.amount
    orm_income.currency = income.amount.currency
    orm_income.description = income.description
    orm_income.received_date = income.received_date
    orm_income.status = income.status.name
    return orm_income


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=UUID(orm_expense.id),
        owner=orm_expense.owner,
        amount=Money(orm_expense.amount, orm_expense.currency),
        category=domain.ExpenseCategory[orm_expense.category],
        description=orm_expense.description,
        incurred_date=orm_expense.incurred_date,
    )


def apply_expense(orm_expense: ORMExpense, expense: domain.Expense) -> ORMExpense:
    """Copy domain Expense fields onto a SQLAlchemy Expense model."""
    orm_expense.id = str(expense.id)
    orm_expense.owner = expense.owner
    orm_expense.amount = expense.amount.amount
    orm_expense.currency = expense.amount.currency
    orm_expense.category = expense.category.name
    orm_expense.description = expense.description
    orm_expense.incurred_date = expense.incurred_date
    return orm_expense


def tax_year_summary_to_domain(orm_summary: ORMTaxYearSummary) -> domain.TaxYearSummary:
    """Convert SQLAlchemy TaxYearSummary model to domain TaxYearSummary entity.

    The tax year is rebuilt without the rolling window check so that old
    summaries stay readable.
    """
    currency = orm_summary.currency
    totals = {
        domain.ExpenseCategory[row.category]: Money(row.amount, currency)
        for row in orm_summary.category_totals
    }
    return domain.TaxYearSummary(
        id=UUID(orm_summary.id),
        owner=orm_summary.owner,
        tax_year=TaxYear(orm_summary.tax_year_start),
        total_income=Money(orm_summary.total_income, currency),
        total_expenses=Money(orm_summary.total_expenses, currency),
        category_totals=domain.CategoryTotals(totals, currency),
        generated_at=orm_summary.generated_at,
    )


def tax_year_summary_to_orm(summary: domain.TaxYearSummary) -> ORMTaxYearSummary:
    """Convert domain TaxYearSummary entity to a new SQLAlchemy model."""
    return ORMTaxYearSummary(
        id=str(summary.id),
        owner=summary.owner,
        tax_year_start=summary.tax_year.start_year,
        currency=summary.total_income.currency,
        total_income=summary.total_income.amount,
        total_expenses=summary.total_expenses.amount,
        generated_at=summary.generated_at,
        category_totals=[
            ORMCategoryTotal(category=category.name, amount=amount.amount)
            for category, amount in summary.category_totals.totals.items()
        ],
    )
