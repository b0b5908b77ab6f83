"""Expense domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from creatorledger.database.base import Database
from creatorledger.domain.entities import Expense as ExpenseEntity, ExpenseCategory, ExpenseData
from creatorledger.domain.errors import NotFoundError, ValidationError, expense_not_found, required
from creatorledger.domain.events import EventPublisher, ExpenseRecorded
from creatorledger.domain.income import validate_date_range
from creatorledger.domain.money import Money
from creatorledger.logging_config import get_logger

logger = get_logger(__name__)


class ExpenseService:
    """Service for recording expenses."""

    def __init__(self, db: Database, publisher: Optional[EventPublisher] = None):
        """Initialize expense service.

        Args:
            db: Database instance
            publisher: Optional event publisher notified when expenses are recorded
        """
        self.db = db
        self.publisher = publisher

    def record(
        self,
        owner: str,
        amount: Decimal | str,
        currency: str,
        category: ExpenseCategory,
        description: str,
        incurred_date: date,
    ) -> UUID:
        """Record a new expense.

        Args:
            owner: Owner of the expense
            amount: Non-negative amount
            currency: Currency code
            category: Expense category
            description: Description of the expense
            incurred_date: Date the expense was incurred

        Returns:
            Expense ID

        Raises:
            ValidationError: If any field is invalid
        """
        expense = ExpenseEntity.record(
            owner=owner,
            amount=Money.of(amount, currency),
            category=category,
            description=description,
            incurred_date=incurred_date,
        )
        self.db.save_expense(expense)
        logger.info(
            "expense_recorded",
            expense_id=str(expense.id),
            owner=expense.owner,
            category=expense.category.name,
        )

        if self.publisher is not None:
            self.publisher.publish(
                ExpenseRecorded(
                    expense_id=expense.id,
                    owner=expense.owner,
                    amount=expense.amount,
                    category=expense.category,
                    description=expense.description,
                    incurred_date=expense.incurred_date,
                )
            )
        return expense.id

    def update(
        self,
        expense_id: UUID,
        amount: Decimal | str,
        currency: str,
        category: ExpenseCategory,
        description: str,
        incurred_date: date,
    ) -> None:
        """Update an expense.

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If expense doesn't exist
        """
        expense = self.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))

        updated = expense.update(Money.of(amount, currency), category, description, incurred_date)
        self.db.save_expense(updated)

    def get_expense(self, expense_id: UUID) -> Optional[ExpenseEntity]:
        """Get expense by ID.

        Returns:
            Expense entity or None if not found
        """
        if expense_id is None:
            raise ValidationError("Expense ID cannot be null")
        return self.db.get_expense(expense_id)

    def exists(self, expense_id: UUID) -> bool:
        return self.get_expense(expense_id) is not None

    def list_expenses(
        self,
        owner: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ExpenseEntity]:
        """List an owner's expenses, optionally within a date range."""
        if owner is None or not owner.strip():
            raise ValidationError(required("Owner"))
        return self.db.list_expenses(owner=owner.strip(), start_date=start_date, end_date=end_date)

    def find_by_owner_and_date_range(
        self, owner: str, start_date: date, end_date: date
    ) -> list[ExpenseData]:
        """Return reporting views of an owner's expenses between two dates (inclusive)."""
        owner = validate_date_range(owner, start_date, end_date)
        expenses = self.db.list_expenses(owner=owner, start_date=start_date, end_date=end_date)
        return [ExpenseData.from_expense(expense) for expense in expenses]
