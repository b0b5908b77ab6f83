"""Tests for the in-process event publisher."""

from datetime import date
from uuid import uuid4

from creatorledger.domain.entities import ExpenseCategory
from creatorledger.domain.events import EventPublisher, ExpenseRecorded, IncomeRecorded
from creatorledger.domain.money import Money


def _income_event():
    return IncomeRecorded(
        income_id=uuid4(),
        owner="alice",
        event_id=uuid4(),
        amount=Money.gbp("10.00"),
        description="Set",
        received_date=date(2023, 6, 1),
    )


def test_handlers_receive_events_of_their_type():
    publisher = EventPublisher()
    incomes, expenses = [], []
    publisher.subscribe(IncomeRecorded, incomes.append)
    publisher.subscribe(ExpenseRecorded, expenses.append)

    event = _income_event()
    publisher.publish(event)

    assert incomes == [event]
    assert expenses == []


def test_handlers_run_in_subscription_order():
    publisher = EventPublisher()
    calls = []
    publisher.subscribe(IncomeRecorded, lambda e: calls.append("first"))
    publisher.subscribe(IncomeRecorded, lambda e: calls.append("second"))

    publisher.publish(_income_event())

    assert calls == ["first", "second"]


def test_failing_handler_is_logged_and_skipped(caplog):
    publisher = EventPublisher()
    calls = []

    def explode(event):
        raise RuntimeError("boom")

    publisher.subscribe(IncomeRecorded, explode)
    publisher.subscribe(IncomeRecorded, calls.append)

    publisher.publish(_income_event())

    assert len(calls) == 1
    assert "event_handler_failed" in caplog.text
    assert "IncomeRecorded" in caplog.text


def test_publish_without_subscribers():
    EventPublisher().publish(
        ExpenseRecorded(
            expense_id=uuid4(),
            owner="alice",
            amount=Money.gbp("1.00"),
            category=ExpenseCategory.OTHER,
            description="x",
            incurred_date=date(2023, 6, 1),
        )
    )


def test_events_are_timestamped():
    assert _income_event().occurred_at.tzinfo is not None
