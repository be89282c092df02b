"""CLI commands for formatting instants and checking expiry."""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from ...formatter import DateTimeUtils
from ...types import DateTimeFormatConfig, DateTimeVariant
from ..base import get_logger, handle_errors

logger = get_logger(__name__)


def format_command(
    *,
    value: str,
    variant: str,
    config: DateTimeFormatConfig,
    options: dict[str, Any],
) -> None:
    """Print a single formatted instant."""
    with handle_errors("format", logger=logger):
        typer.echo(DateTimeUtils().format(value, variant, config, options))


def expired_command(*, value: str) -> None:
    """Print whether the instant is already in the past."""
    with handle_errors("expired", logger=logger):
        expired = DateTimeUtils().is_expired(value)
    typer.echo("expired" if expired else "active")


def show_command(*, value: str, config: DateTimeFormatConfig) -> None:
    """Render the instant in every predefined variant as a table."""
    utils = DateTimeUtils()
    table = Table(title=value)
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Output")

    with handle_errors("show", logger=logger):
        for variant in DateTimeVariant:
            if variant is DateTimeVariant.CUSTOM:
                continue
            table.add_row(variant.value, utils.format(value, variant, config))

    Console().print(table)
