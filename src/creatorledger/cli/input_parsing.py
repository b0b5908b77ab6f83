"""CLI helpers that parse user input or exit with an error.

These keep error messaging and exit behavior consistent across commands.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

import click

from creatorledger.domain.money import DEFAULT_CURRENCY
from creatorledger.utils.amount_parser import detect_currency, parse_amount
from creatorledger.utils.date_parser import parse_date


def parse_id_or_exit(ctx: click.Context, value: str, label: str) -> UUID:
    """Parse a UUID argument, or exit with a CLI error."""
    try:
        return UUID(value.strip())
    except ValueError:
        click.echo(f"Error: Invalid {label} ID '{value}'", err=True)
        ctx.exit(1)


def parse_date_or_exit(ctx: click.Context, value: str) -> date:
    """Parse a date option, or exit with a CLI error."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(
    ctx: click.Context, value: str, currency: Optional[str]
) -> tuple[Decimal, str]:
    """Parse an amount option and resolve its currency.

    An explicit --currency wins; otherwise a leading symbol such as '£' picks
    the currency, falling back to the default currency.
    """
    try:
        amount = parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)
    return amount, currency or detect_currency(value) or DEFAULT_CURRENCY
