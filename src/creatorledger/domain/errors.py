"""Shared domain error messages and error types."""

from uuid import UUID


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def income_not_found(income_id: UUID) -> str:
    """Return message for missing income."""
    return f"Income {income_id} not found"


def expense_not_found(expense_id: UUID) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def currency_mismatch(currency: str, other_currency: str) -> str:
    """Return message for arithmetic across two currencies."""
    return (
        "Cannot perform operation on different currencies: "
        f"{currency} and {other_currency}"
    )


def required(field_name: str) -> str:
    """Return message for a missing or blank required field."""
    return f"{field_name} cannot be null or blank"


def event_not_found(event_id: UUID) -> str:
    """Return message for missing event."""
    return f"Event {event_id} not found"
