"""Tax year summary commands."""

from datetime import date

import click

from creatorledger.cli.error_handling import handle_domain_error
from creatorledger.cli.input_parsing import parse_id_or_exit
from creatorledger.domain.entities import TaxYearSummary
from creatorledger.domain.errors import DomainError
from creatorledger.domain.expense import ExpenseService
from creatorledger.domain.income import IncomeService
from creatorledger.domain.summary import TaxYearSummaryService
from creatorledger.domain.tax_year import TaxYear


def _summary_service(ctx) -> TaxYearSummaryService:
    db = ctx.obj["db"]
    return TaxYearSummaryService(
        income_query=IncomeService(db),
        expense_query=ExpenseService(db),
        db=db,
        publisher=ctx.obj.get("publisher"),
    )


def _display_summary(summary: TaxYearSummary) -> None:
    """Print a summary with category totals sorted by value (highest first)."""
    click.echo(f"Tax year summary {summary.id}")
    click.echo(f"  Owner: {summary.owner}")
    click.echo(
        f"  Tax year: {summary.tax_year.label} "
        f"({summary.tax_year.start_date} to {summary.tax_year.end_date})"
    )
    click.echo()
    click.echo(f"{'Total income':<30} {str(summary.total_income):>20}")
    click.echo(f"{'Total expenses':<30} {str(summary.total_expenses):>20}")
    click.echo(f"{'Profit':<30} {str(summary.profit):>20}")

    if summary.category_totals.is_empty():
        return

    click.echo()
    click.echo("Expenses by category:")
    totals = sorted(
        summary.category_totals.totals.items(),
        key=lambda item: (-item[1].amount, item[0].value),
    )
    for category, amount in totals:
        click.echo(f"    {category.value:<26} {str(amount):>20}")


@click.group()
def summary_group():
    """Generate and view tax year summaries."""
    pass


@summary_group.command("generate")
@click.option("--owner", required=True, help="Owner to summarise")
@click.option(
    "--tax-year",
    type=int,
    help="Calendar year the tax year starts in (defaults to the current tax year)",
)
@click.pass_context
def generate_summary(ctx, owner: str, tax_year: int | None):
    """Generate a summary for an owner's tax year (6 April to 5 April).

    Each run stores a new summary; earlier summaries are kept.

    Examples:
        creatorledger summary generate --owner alice --tax-year 2023
    """
    service = _summary_service(ctx)

    try:
        year = TaxYear.of(tax_year) if tax_year is not None else TaxYear.containing(date.today())
        summary_id = service.generate(owner, year)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Generated summary {summary_id}")
    click.echo()
    _display_summary(service.find_by_id(summary_id))


@summary_group.command("show")
@click.argument("summary_id")
@click.pass_context
def show_summary(ctx, summary_id: str):
    """Show a stored summary."""
    service = _summary_service(ctx)
    parsed_id = parse_id_or_exit(ctx, summary_id, "summary")

    summary = service.find_by_id(parsed_id)
    if summary is None:
        click.echo(f"Error: Tax year summary {parsed_id} not found", err=True)
        ctx.exit(1)

    _display_summary(summary)


@summary_group.command("list")
@click.option("--owner", required=True, help="Owner whose summaries to list")
@click.pass_context
def list_summaries(ctx, owner: str):
    """List stored summaries for an owner, newest first."""
    service = _summary_service(ctx)

    try:
        summaries = service.list_for_owner(owner)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not summaries:
        click.echo("No summaries found.")
        return

    click.echo("\nSummaries:")
    click.echo("-" * 100)
    for summary in summaries:
        click.echo(
            f"{summary.tax_year.label} | income {str(summary.total_income):>14s} | "
            f"profit {str(summary.profit):>15s} | {summary.id}"
        )


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary_group, name="summary")
