"""Income management commands."""

import click

from creatorledger.cli.error_handling import handle_domain_error
from creatorledger.cli.input_parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_id_or_exit,
)
from creatorledger.domain.errors import DomainError
from creatorledger.domain.income import IncomeService
from creatorledger.domain.tax_year import TaxYear


def _income_service(ctx) -> IncomeService:
    return IncomeService(ctx.obj["db"], publisher=ctx.obj.get("publisher"))


@click.group()
def income_group():
    """Manage income."""
    pass


@income_group.command("record")
@click.option("--owner", required=True, help="Owner of the income")
@click.option("--event", "event_id", required=True, help="ID of the event (gig) that earned it")
@click.option("--amount", required=True, help="Amount (e.g., 250.00 or £250.00)")
@click.option("--currency", help="Currency code (defaults to the amount's symbol, then GBP)")
@click.option("--description", required=True, help="Description")
@click.option(
    "--date",
    "received",
    required=True,
    help="Date received (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def record_income(
    ctx,
    owner: str,
    event_id: str,
    amount: str,
    currency: str | None,
    description: str,
    received: str,
):
    """Record new income. New income starts as PENDING.

    Examples:
        creatorledger income record --owner alice --event <EVENT_ID> --amount 250.00 \\
            --description "Wedding set" --date 2024-05-01
    """
    service = _income_service(ctx)
    parsed_event_id = parse_id_or_exit(ctx, event_id, "event")
    received_date = parse_date_or_exit(ctx, received)
    value, currency_code = parse_amount_or_exit(ctx, amount, currency)

    try:
        income_id = service.record(
            owner=owner,
            event_id=parsed_event_id,
            amount=value,
            currency=currency_code,
            description=description,
            received_date=received_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    income = service.get_income(income_id)
    click.echo(f"Recorded income {income_id}")
    click.echo(f"  Amount: {income.amount}")
    click.echo(f"  Date: {income.received_date}")
    click.echo(f"  Status: {income.status.name}")


@income_group.command("update")
@click.argument("income_id")
@click.option("--amount", help="New amount")
@click.option("--currency", help="New currency code")
@click.option("--description", help="New description")
@click.option("--date", "received", help="New date received")
@click.pass_context
def update_income(
    ctx,
    income_id: str,
    amount: str | None,
    currency: str | None,
    description: str | None,
    received: str | None,
):
    """Update income details. Fields not given keep their current value.

    The payment status is never changed by an update.
    """
    service = _income_service(ctx)
    parsed_id = parse_id_or_exit(ctx, income_id, "income")

    try:
        existing = service.get_income(parsed_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if existing is None:
        click.echo(f"Error: Income {parsed_id} not found", err=True)
        ctx.exit(1)

    value, currency_code = existing.amount.amount, currency or existing.amount.currency
    if amount is not None:
        value, currency_code = parse_amount_or_exit(
            ctx, amount, currency or existing.amount.currency
        )
    received_date = existing.received_date
    if received is not None:
        received_date = parse_date_or_exit(ctx, received)

    try:
        service.update(
            income_id=parsed_id,
            amount=value,
            currency=currency_code,
            description=description if description is not None else existing.description,
            received_date=received_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated income {parsed_id}")


def _transition_command(name: str, method: str, past_tense: str, help_text: str):
    @income_group.command(name, help=help_text)
    @click.argument("income_id")
    @click.pass_context
    def command(ctx, income_id: str):
        service = _income_service(ctx)
        parsed_id = parse_id_or_exit(ctx, income_id, "income")
        try:
            getattr(service, method)(parsed_id)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Income {parsed_id} {past_tense}")

    return command


mark_paid = _transition_command("mark-paid", "mark_as_paid", "marked as PAID", "Mark income as paid.")
mark_overdue = _transition_command(
    "mark-overdue", "mark_as_overdue", "marked as OVERDUE", "Mark income as overdue."
)
cancel = _transition_command("cancel", "cancel", "cancelled", "Cancel income.")


@income_group.command("show")
@click.argument("income_id")
@click.pass_context
def show_income(ctx, income_id: str):
    """Show a single income record."""
    service = _income_service(ctx)
    parsed_id = parse_id_or_exit(ctx, income_id, "income")

    income = service.get_income(parsed_id)
    if income is None:
        click.echo(f"Error: Income {parsed_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Income {income.id}")
    click.echo(f"  Owner: {income.owner}")
    click.echo(f"  Event: {income.event_id}")
    click.echo(f"  Amount: {income.amount}")
    click.echo(f"  Description: {income.description}")
    click.echo(f"  Date: {income.received_date}")
    click.echo(f"  Status: {income.status.name}")


@income_group.command("list")
@click.option("--owner", required=True, help="Owner of the income")
@click.option("--tax-year", type=int, help="Only income in the tax year starting in this year")
@click.pass_context
def list_income(ctx, owner: str, tax_year: int | None):
    """List income for an owner."""
    service = _income_service(ctx)

    try:
        start_date = end_date = None
        if tax_year is not None:
            year = TaxYear.of(tax_year)
            start_date, end_date = year.start_date, year.end_date
        incomes = service.list_incomes(owner, start_date=start_date, end_date=end_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not incomes:
        click.echo("No income found.")
        return

    click.echo("\nIncome:")
    click.echo("-" * 100)
    for income in incomes:
        click.echo(
            f"{income.received_date} | {str(income.amount):>14s} | {income.status.name:9s} | "
            f"{income.description[:40]:40s} | {income.id}"
        )


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income_group, name="income")
