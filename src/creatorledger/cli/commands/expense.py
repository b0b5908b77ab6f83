"""Expense management commands."""

import click

from creatorledger.cli.error_handling import handle_domain_error
from creatorledger.cli.input_parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_id_or_exit,
)
from creatorledger.domain.entities import ExpenseCategory
from creatorledger.domain.errors import DomainError
from creatorledger.domain.expense import ExpenseService
from creatorledger.domain.tax_year import TaxYear

CATEGORY_CHOICES = [category.name.lower() for category in ExpenseCategory]


def _expense_service(ctx) -> ExpenseService:
    return ExpenseService(ctx.obj["db"], publisher=ctx.obj.get("publisher"))


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("record")
@click.option("--owner", required=True, help="Owner of the expense")
@click.option("--amount", required=True, help="Amount (e.g., 40.00 or £40.00)")
@click.option("--currency", help="Currency code (defaults to the amount's symbol, then GBP)")
@click.option(
    "--category",
    required=True,
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="Expense category",
)
@click.option("--description", required=True, help="Description")
@click.option(
    "--date",
    "incurred",
    required=True,
    help="Date incurred (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def record_expense(
    ctx,
    owner: str,
    amount: str,
    currency: str | None,
    category: str,
    description: str,
    incurred: str,
):
    """Record a new expense.

    Examples:
        creatorledger expense record --owner alice --amount 40.00 --category travel \\
            --description "Train to venue" --date 2024-05-01
    """
    service = _expense_service(ctx)
    incurred_date = parse_date_or_exit(ctx, incurred)
    value, currency_code = parse_amount_or_exit(ctx, amount, currency)

    try:
        expense_id = service.record(
            owner=owner,
            amount=value,
            currency=currency_code,
            category=ExpenseCategory.parse(category),
            description=description,
            incurred_date=incurred_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    expense = service.get_expense(expense_id)
    click.echo(f"Recorded expense {expense_id}")
    click.echo(f"  Amount: {expense.amount}")
    click.echo(f"  Category: {expense.category.value}")
    click.echo(f"  Date: {expense.incurred_date}")


@expense_group.command("update")
@click.argument("expense_id")
@click.option("--amount", help="New amount")
@click.option("--currency", help="New currency code")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="New expense category",
)
@click.option("--description", help="New description")
@click.option("--date", "incurred", help="New date incurred")
@click.pass_context
def update_expense(
    ctx,
    expense_id: str,
    amount: str | None,
    currency: str | None,
    category: str | None,
    description: str | None,
    incurred: str | None,
):
    """Update an expense. Fields not given keep their current value."""
    service = _expense_service(ctx)
    parsed_id = parse_id_or_exit(ctx, expense_id, "expense")

    existing = service.get_expense(parsed_id)
    if existing is None:
        click.echo(f"Error: Expense {parsed_id} not found", err=True)
        ctx.exit(1)

    value, currency_code = existing.amount.amount, currency or existing.amount.currency
    if amount is not None:
        value, currency_code = parse_amount_or_exit(
            ctx, amount, currency or existing.amount.currency
        )
    incurred_date = existing.incurred_date
    if incurred is not None:
        incurred_date = parse_date_or_exit(ctx, incurred)

    try:
        service.update(
            expense_id=parsed_id,
            amount=value,
            currency=currency_code,
            category=ExpenseCategory.parse(category) if category else existing.category,
            description=description if description is not None else existing.description,
            incurred_date=incurred_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated expense {parsed_id}")


@expense_group.command("show")
@click.argument("expense_id")
@click.pass_context
def show_expense(ctx, expense_id: str):
    """Show a single expense."""
    service = _expense_service(ctx)
    parsed_id = parse_id_or_exit(ctx, expense_id, "expense")

    expense = service.get_expense(parsed_id)
    if expense is None:
        click.echo(f"Error: Expense {parsed_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Expense {expense.id}")
    click.echo(f"  Owner: {expense.owner}")
    click.echo(f"  Amount: {expense.amount}")
    click.echo(f"  Category: {expense.category.value}")
    click.echo(f"  Description: {expense.description}")
    click.echo(f"  Date: {expense.incurred_date}")


@expense_group.command("list")
@click.option("--owner", required=True, help="Owner of the expenses")
@click.option("--tax-year", type=int, help="Only expenses in the tax year starting in this year")
@click.pass_context
def list_expenses(ctx, owner: str, tax_year: int | None):
    """List expenses for an owner."""
    service = _expense_service(ctx)

    try:
        start_date = end_date = None
        if tax_year is not None:
            year = TaxYear.of(tax_year)
            start_date, end_date = year.start_date, year.end_date
        expenses = service.list_expenses(owner, start_date=start_date, end_date=end_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo("\nExpenses:")
    click.echo("-" * 100)
    for expense in expenses:
        click.echo(
            f"{expense.incurred_date} | {str(expense.amount):>14s} | {expense.category.value:17s} | "
            f"{expense.description[:30]:30s} | {expense.id}"
        )


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
