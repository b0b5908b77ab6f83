"""Shared pytest fixtures for creatorledger tests."""

import tempfile
import os
from datetime import date
import pytest

from creatorledger.database.factories import create_sqlite_database
from creatorledger.domain.event import EventService
from creatorledger.domain.events import EventPublisher
from creatorledger.domain.expense import ExpenseService
from creatorledger.domain.income import IncomeService
from creatorledger.domain.summary import TaxYearSummaryService
from creatorledger.domain.tax_year import TaxYear
from creatorledger.logging_config import DEFAULT_LOG_LEVEL, configure_logging


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def publisher():
    """Create an in-process EventPublisher."""
    return EventPublisher()


@pytest.fixture
def event_service(temp_db, publisher):
    """Create an EventService with a temporary database."""
    return EventService(temp_db, publisher=publisher)


@pytest.fixture
def event_id(event_service):
    """Record a gig for income to point at."""
    return event_service.record(
        date(2023, 6, 1), "Smith Wedding", "Evening reception set", today=date(2024, 1, 1)
    )


@pytest.fixture
def income_service(temp_db, publisher):
    """Create an IncomeService with a temporary database."""
    return IncomeService(temp_db, publisher=publisher)


@pytest.fixture
def expense_service(temp_db, publisher):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db, publisher=publisher)


@pytest.fixture
def summary_service(temp_db, income_service, expense_service, publisher):
    """Create a TaxYearSummaryService backed by the income and expense services."""
    return TaxYearSummaryService(
        income_query=income_service,
        expense_query=expense_service,
        db=temp_db,
        publisher=publisher,
    )


@pytest.fixture
def tax_year_2023():
    """Tax year 2023-24, built relative to a fixed reference date."""
    return TaxYear.of(2023, today=date(2024, 1, 1))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def _logging():
    """Route log output to the current test's stderr at the default level."""
    configure_logging(DEFAULT_LOG_LEVEL)

