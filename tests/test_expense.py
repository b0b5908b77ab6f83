"""Tests for expense service."""

import pytest
from datetime import date
from uuid import uuid4

from creatorledger.domain.entities import ExpenseCategory
from creatorledger.domain.errors import NotFoundError, ValidationError
from creatorledger.domain.events import ExpenseRecorded
from creatorledger.domain.money import Money


def _record(expense_service, **overrides):
    fields = dict(
        owner="alice",
        amount="40.00",
        currency="GBP",
        category=ExpenseCategory.TRAVEL,
        description="Train to venue",
        incurred_date=date(2023, 6, 1),
    )
    fields.update(overrides)
    return expense_service.record(**fields)


def test_record_expense(expense_service):
    """Test recording an expense."""
    expense_id = _record(expense_service)

    expense = expense_service.get_expense(expense_id)
    assert expense.owner == "alice"
    assert expense.amount == Money.gbp("40.00")
    assert expense.category is ExpenseCategory.TRAVEL
    assert expense.description == "Train to venue"


def test_record_expense_requires_category(expense_service):
    """Test that a category is mandatory."""
    with pytest.raises(ValidationError):
        _record(expense_service, category=None)


def test_record_expense_rejects_negative_amount(expense_service):
    """Test that negative amounts are rejected."""
    with pytest.raises(ValidationError):
        _record(expense_service, amount="-5")


def test_record_expense_publishes_event(expense_service, publisher):
    """Test that recording an expense notifies subscribers."""
    events = []
    publisher.subscribe(ExpenseRecorded, events.append)

    expense_id = _record(expense_service)

    assert [e.expense_id for e in events] == [expense_id]
    assert events[0].category is ExpenseCategory.TRAVEL


def test_update_expense(expense_service):
    """Test updating an expense."""
    expense_id = _record(expense_service)

    expense_service.update(
        expense_id, "199.99", "GBP", ExpenseCategory.EQUIPMENT, "Microphone", date(2023, 7, 1)
    )

    expense = expense_service.get_expense(expense_id)
    assert expense.amount == Money.gbp("199.99")
    assert expense.category is ExpenseCategory.EQUIPMENT
    assert expense.description == "Microphone"
    assert expense.incurred_date == date(2023, 7, 1)


def test_update_missing_expense(expense_service):
    """Test updating an unknown expense."""
    missing = uuid4()
    with pytest.raises(NotFoundError, match=str(missing)):
        expense_service.update(missing, "1.00", "GBP", ExpenseCategory.OTHER, "x", date(2023, 6, 1))


def test_exists(expense_service):
    """Test existence checks."""
    expense_id = _record(expense_service)
    assert expense_service.exists(expense_id)
    assert not expense_service.exists(uuid4())


def test_list_expenses(expense_service):
    """Test listing expenses by owner and date range."""
    first = _record(expense_service, incurred_date=date(2023, 5, 1))
    second = _record(expense_service, incurred_date=date(2023, 8, 1))
    _record(expense_service, owner="bob")

    assert [e.id for e in expense_service.list_expenses("alice")] == [first, second]
    assert [
        e.id for e in expense_service.list_expenses("alice", start_date=date(2023, 6, 1))
    ] == [second]
    assert [
        e.id for e in expense_service.list_expenses("alice", end_date=date(2023, 6, 1))
    ] == [first]


def test_list_expenses_requires_owner(expense_service):
    """Test that listing needs an owner."""
    with pytest.raises(ValidationError):
        expense_service.list_expenses("  ")


def test_find_by_owner_and_date_range(expense_service):
    """Test reporting views of expenses."""
    _record(expense_service, amount="10.00", incurred_date=date(2023, 4, 6))
    _record(expense_service, amount="20.00", category=ExpenseCategory.MARKETING, incurred_date=date(2024, 4, 5))
    _record(expense_service, amount="30.00", incurred_date=date(2024, 4, 6))

    results = expense_service.find_by_owner_and_date_range("alice", date(2023, 4, 6), date(2024, 4, 5))

    assert [(r.amount, r.category) for r in results] == [
        (Money.gbp("10.00"), ExpenseCategory.TRAVEL),
        (Money.gbp("20.00"), ExpenseCategory.MARKETING),
    ]


def test_find_by_owner_and_date_range_rejects_inverted_range(expense_service):
    """Test that start after end is rejected."""
    with pytest.raises(ValidationError, match="after end date"):
        expense_service.find_by_owner_and_date_range("alice", date(2024, 1, 1), date(2023, 1, 1))
