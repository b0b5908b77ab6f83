"""Event (gig) management commands."""

import click

from creatorledger.cli.error_handling import handle_domain_error
from creatorledger.cli.input_parsing import parse_date_or_exit, parse_id_or_exit
from creatorledger.domain.errors import DomainError
from creatorledger.domain.event import EventService
from creatorledger.domain.tax_year import TaxYear


def _event_service(ctx) -> EventService:
    return EventService(ctx.obj["db"], publisher=ctx.obj.get("publisher"))


@click.group()
def event_group():
    """Manage events (gigs and projects)."""
    pass


@event_group.command("record")
@click.option("--client", "client_name", required=True, help="Client name")
@click.option("--description", required=True, help="Description")
@click.option(
    "--date",
    "event_date",
    required=True,
    help="Date of the event (YYYY-MM-DD or relative like 'today', 'tomorrow')",
)
@click.pass_context
def record_event(ctx, client_name: str, description: str, event_date: str):
    """Record a new event. Income is recorded against its ID.

    Examples:
        creatorledger event record --client "Smith Wedding" \\
            --description "Evening reception set" --date 2024-05-01
    """
    service = _event_service(ctx)
    parsed_date = parse_date_or_exit(ctx, event_date)

    try:
        event_id = service.record(
            event_date=parsed_date,
            client_name=client_name,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    event = service.get_event(event_id)
    click.echo(f"Recorded event {event_id}")
    click.echo(f"  Client: {event.client_name}")
    click.echo(f"  Date: {event.event_date}")


@event_group.command("update")
@click.argument("event_id")
@click.option("--client", "client_name", help="New client name")
@click.option("--description", help="New description")
@click.option("--date", "event_date", help="New event date")
@click.pass_context
def update_event(
    ctx,
    event_id: str,
    client_name: str | None,
    description: str | None,
    event_date: str | None,
):
    """Update an event. Fields not given keep their current value."""
    service = _event_service(ctx)
    parsed_id = parse_id_or_exit(ctx, event_id, "event")

    existing = service.get_event(parsed_id)
    if existing is None:
        click.echo(f"Error: Event {parsed_id} not found", err=True)
        ctx.exit(1)

    parsed_date = existing.event_date
    if event_date is not None:
        parsed_date = parse_date_or_exit(ctx, event_date)

    try:
        service.update(
            event_id=parsed_id,
            event_date=parsed_date,
            client_name=client_name if client_name is not None else existing.client_name,
            description=description if description is not None else existing.description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated event {parsed_id}")


@event_group.command("show")
@click.argument("event_id")
@click.pass_context
def show_event(ctx, event_id: str):
    """Show a single event."""
    service = _event_service(ctx)
    parsed_id = parse_id_or_exit(ctx, event_id, "event")

    event = service.get_event(parsed_id)
    if event is None:
        click.echo(f"Error: Event {parsed_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"Event {event.id}")
    click.echo(f"  Client: {event.client_name}")
    click.echo(f"  Description: {event.description}")
    click.echo(f"  Date: {event.event_date}")


@event_group.command("list")
@click.option("--tax-year", type=int, help="Only events in the tax year starting in this year")
@click.pass_context
def list_events(ctx, tax_year: int | None):
    """List events by date."""
    service = _event_service(ctx)

    try:
        start_date = end_date = None
        if tax_year is not None:
            year = TaxYear.of(tax_year)
            start_date, end_date = year.start_date, year.end_date
        events = service.list_events(start_date=start_date, end_date=end_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not events:
        click.echo("No events found.")
        return

    click.echo("\nEvents:")
    click.echo("-" * 100)
    for event in events:
        click.echo(
            f"{event.event_date} | {event.client_name[:30]:30s} | "
            f"{event.description[:30]:30s} | {event.id}"
        )


def register_commands(cli):
    """Register event commands with main CLI."""
    cli.add_command(event_group, name="event")
