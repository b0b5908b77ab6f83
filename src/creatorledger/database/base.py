"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from uuid import UUID

# Import entities directly; services import this module
from creatorledger.domain.entities import Event, Expense, Income, TaxYearSummary


class Database(ABC):
    """Abstract database interface for creatorledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Event operations
    @abstractmethod
    def save_event(self, event: Event) -> Event:
        """Insert or replace an event. Returns the saved event."""
        pass

    @abstractmethod
    def get_event(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID."""
        pass

    @abstractmethod
    def list_events(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Event]:
        """List events ordered by event date, with optional inclusive date filters."""
        pass

    # Income operations
    @abstractmethod
    def save_income(self, income: Income) -> Income:
        """Insert or replace an income record. Returns the saved income."""
        pass

    @abstractmethod
    def get_income(self, income_id: UUID) -> Optional[Income]:
        """Get income by ID."""
        pass

    @abstractmethod
    def list_incomes(
        self,
        owner: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Income]:
        """List an owner's income ordered by received date.

        Args:
            owner: Owner to filter by
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
        """
        pass

    # Expense operations
    @abstractmethod
    def save_expense(self, expense: Expense) -> Expense:
        """Insert or replace an expense record. Returns the saved expense."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: UUID) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(
        self,
        owner: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Expense]:
        """List an owner's expenses ordered by incurred date."""
        pass

    # Tax year summary operations
    @abstractmethod
    def save_tax_year_summary(self, summary: TaxYearSummary) -> TaxYearSummary:
        """Persist a generated summary. Returns the saved summary."""
        pass

    @abstractmethod
    def get_tax_year_summary(self, summary_id: UUID) -> Optional[TaxYearSummary]:
        """Get summary by ID."""
        pass

    @abstractmethod
    def list_tax_year_summaries(self, owner: str) -> list[TaxYearSummary]:
        """List an owner's summaries, newest first."""
        pass
