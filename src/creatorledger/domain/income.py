"""Income domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from creatorledger.database.base import Database
from creatorledger.domain.entities import Income as IncomeEntity, IncomeData
from creatorledger.domain.errors import (
    NotFoundError,
    ValidationError,
    event_not_found,
    income_not_found,
    required,
)
from creatorledger.domain.events import EventPublisher, IncomeRecorded
from creatorledger.domain.money import Money
from creatorledger.logging_config import get_logger

logger = get_logger(__name__)


def validate_date_range(owner: str, start_date: date, end_date: date) -> str:
    """Validate an owner/date-range query and return the stripped owner."""
    if owner is None or not owner.strip():
        raise ValidationError(required("Owner"))
    if start_date is None:
        raise ValidationError("Start date cannot be null")
    if end_date is None:
        raise ValidationError("End date cannot be null")
    if start_date > end_date:
        raise ValidationError("Start date cannot be after end date")
    return owner.strip()


class IncomeService:
    """Service for recording income and tracking its payment status."""

    def __init__(self, db: Database, publisher: Optional[EventPublisher] = None):
        """Initialize income service.

        Args:
            db: Database instance
            publisher: Optional event publisher notified when income is recorded
        """
        self.db = db
        self.publisher = publisher

    def record(
        self,
        owner: str,
        event_id: UUID,
        amount: Decimal | str,
        currency: str,
        description: str,
        received_date: date,
    ) -> UUID:
        """Record new income in PENDING status.

        Args:
            owner: Owner of the income
            event_id: ID of the event (gig) that earned it
            amount: Non-negative amount
            currency: Currency code
            description: Description of the income
            received_date: Date the income was received

        Returns:
            Income ID

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the event doesn't exist
        """
        if event_id is not None and self.db.get_event(event_id) is None:
            raise NotFoundError(event_not_found(event_id))

        income = IncomeEntity.record(
            owner=owner,
            event_id=event_id,
            amount=Money.of(amount, currency),
            description=description,
            received_date=received_date,
        )
        self.db.save_income(income)
        logger.info("income_recorded", income_id=str(income.id), owner=income.owner)

        if self.publisher is not None:
            self.publisher.publish(
                IncomeRecorded(
                    income_id=income.id,
                    owner=income.owner,
                    event_id=income.event_id,
                    amount=income.amount,
                    description=income.description,
                    received_date=income.received_date,
                )
            )
        return income.id

    def update(
        self,
        income_id: UUID,
        amount: Decimal | str,
        currency: str,
        description: str,
        received_date: date,
    ) -> None:
        """Update amount, description and date. Payment status is unchanged.

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If income doesn't exist
        """
        income = self._require_income(income_id)
        updated = income.update(Money.of(amount, currency), description, received_date)
        self.db.save_income(updated)

    def mark_as_paid(self, income_id: UUID) -> None:
        """Mark income as paid, whatever its current status."""
        self.db.save_income(self._require_income(income_id).mark_as_paid())

    def mark_as_overdue(self, income_id: UUID) -> None:
        """Mark income as overdue, whatever its current status."""
        self.db.save_income(self._require_income(income_id).mark_as_overdue())

    def cancel(self, income_id: UUID) -> None:
        """Cancel income, whatever its current status."""
        self.db.save_income(self._require_income(income_id).cancel())

    def get_income(self, income_id: UUID) -> Optional[IncomeEntity]:
        """Get income by ID.

        Returns:
            Income entity or None if not found
        """
        if income_id is None:
            raise ValidationError("Income ID cannot be null")
        return self.db.get_income(income_id)

    def exists(self, income_id: UUID) -> bool:
        return self.get_income(income_id) is not None

    def list_incomes(
        self,
        owner: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[IncomeEntity]:
        """List an owner's income, optionally within a date range."""
        if owner is None or not owner.strip():
            raise ValidationError(required("Owner"))
        return self.db.list_incomes(owner=owner.strip(), start_date=start_date, end_date=end_date)

    def find_by_owner_and_date_range(
        self, owner: str, start_date: date, end_date: date
    ) -> list[IncomeData]:
        """Return reporting views of an owner's income between two dates (inclusive).

        Raises:
            ValidationError: If owner is blank, a date is missing, or
                start_date is after end_date
        """
        owner = validate_date_range(owner, start_date, end_date)
        incomes = self.db.list_incomes(owner=owner, start_date=start_date, end_date=end_date)
        return [IncomeData.from_income(income) for income in incomes]

    def _require_income(self, income_id: UUID) -> IncomeEntity:
        income = self.get_income(income_id)
        if income is None:
            raise NotFoundError(income_not_found(income_id))
        return income
