"""Main CLI entry point."""

import click
from creatorledger.database.factories import DB_PATH_ENV_VAR, create_sqlite_database
from creatorledger.domain.events import EventPublisher
from creatorledger.logging_config import configure_logging

# Import and register all commands at module level
from creatorledger.cli.commands import event, expense, income, summary


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option(
    "--log-level",
    help="Log level (overrides CREATORLEDGER_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Creatorledger - income and expense tracking for freelancers.

    Record income and expenses, track whether income has been paid, and
    generate UK tax year summaries (6 April to 5 April).
    """
    ctx.ensure_object(dict)

    try:
        configure_logging(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["publisher"] = EventPublisher()
        ctx.call_on_close(db.disconnect)


# Register all commands
event.register_commands(cli)
income.register_commands(cli)
expense.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
