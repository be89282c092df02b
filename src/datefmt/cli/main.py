from __future__ import annotations

from typing import Annotated

import typer

from ..global_config import DEFAULT_VARIANT, ENV_LANGUAGE, ENV_TIME_ZONE
from ..types import DateTimeFormatConfig, DateTimeVariant
from .base import configure_logging, parse_option_pairs
from .commands.dates import expired_command, format_command, show_command

configure_logging()
app = typer.Typer(
    help="Locale- and timezone-aware date/time formatting",
    context_settings={"help_option_names": ["-h", "--help"]},
)

LanguageOption = Annotated[
    str | None,
    typer.Option(
        "-l",
        "--lang",
        envvar=ENV_LANGUAGE,
        help="BCP 47 language tag (e.g., 'en-US', 'fr-FR')",
    ),
]
TimeZoneOption = Annotated[
    str | None,
    typer.Option(
        "-z",
        "--tz",
        envvar=ENV_TIME_ZONE,
        help="IANA time zone (e.g., 'Europe/Paris'); defaults to the host zone",
    ),
]


@app.command("format")
def format_(
    value: Annotated[str, typer.Argument(help="Instant to format (ISO-like string)")],
    variant: Annotated[
        DateTimeVariant,
        typer.Option("-V", "--variant", help="Presentation variant"),
    ] = DateTimeVariant(DEFAULT_VARIANT),
    lang: LanguageOption = None,
    tz: TimeZoneOption = None,
    option: Annotated[
        list[str] | None,
        typer.Option(
            "-o",
            "--option",
            help="Formatting option as key=value (repeatable, e.g. -o weekday=long)",
        ),
    ] = None,
) -> None:
    """Format an instant using a predefined variant.

    Options given with -o are layered over the variant's base options and win
    on conflicts, including time_zone.
    """
    format_command(
        value=value,
        variant=variant,
        config=DateTimeFormatConfig(language_code=lang, time_zone=tz),
        options=parse_option_pairs(option),
    )


@app.command("expired")
def expired(
    value: Annotated[str, typer.Argument(help="Instant to check (ISO-like string)")],
) -> None:
    """Report whether an instant is strictly before now."""
    expired_command(value=value)


@app.command("show")
def show(
    value: Annotated[str, typer.Argument(help="Instant to render (ISO-like string)")],
    lang: LanguageOption = None,
    tz: TimeZoneOption = None,
) -> None:
    """Render an instant in every predefined variant."""
    show_command(
        value=value,
        config=DateTimeFormatConfig(language_code=lang, time_zone=tz),
    )


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.
    """
    app()


if __name__ == "__main__":
    main()
