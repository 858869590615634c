"""
Itinerary sorter CLI entry point.

Reads a JSON ticket file, sorts it into one itinerary and prints the
result. Exit codes follow the error tier of the first error:
0 valid, 1 input problem, 2 tickets do not form one route, 3 internal.
"""

import json
import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from itinerary_sorter import __version__
from itinerary_sorter.config import ObservabilityConfig, get_config
from itinerary_sorter.container import get_container
from itinerary_sorter.domain.errors import (
    ConfigurationError,
    ErrorTier,
    ItinerarySorterError,
    TicketLoadError,
    classify_error,
)
from itinerary_sorter.domain.models import Ticket
from itinerary_sorter.logging_config import configure_logging
from itinerary_sorter.ports.tickets import TicketSourcePort
from itinerary_sorter.services import ItineraryService

EXIT_CODES = {
    ErrorTier.INPUT: 1,
    ErrorTier.BUSINESS_RULE: 2,
    ErrorTier.INTERNAL: 3,
}


def _exit_code(errors: Sequence[str]) -> int:
    if not errors:
        return 0
    return EXIT_CODES[classify_error(errors[0])]


def _load_tickets(path: Path) -> Sequence[Ticket]:
    source: TicketSourcePort = get_container().resolve(TicketSourcePort)
    try:
        return source.load(path)
    except TicketLoadError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        for detail in e.details:
            click.echo(f"  - {detail}", err=True)
        sys.exit(EXIT_CODES[ErrorTier.INPUT])


def _print_messages(label: str, messages: Sequence[str], color: str) -> None:
    if not messages:
        return
    click.echo(click.style(f"{label}:", fg=color, bold=True), err=True)
    for message in messages:
        click.echo(f"  - {message}", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="itinerary-sorter")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override ITS_LOG_LEVEL for this run.",
)
def cli(log_level: Optional[str]) -> None:
    """
    Itinerary Sorter - order travel tickets into one journey.

    Use 'itinerary-sorter COMMAND --help' for more information on a command.
    """
    try:
        observability = get_config().observability
        if log_level:
            observability = ObservabilityConfig(
                level=log_level.upper(),
                format=observability.format,
                structured=observability.structured,
            )
        configure_logging(observability)
    except ConfigurationError as e:
        message = f"Configuration error: {e.message}"
        click.echo(click.style(message, fg="red"), err=True)
        sys.exit(EXIT_CODES[ErrorTier.INPUT])


@cli.command("sort")
@click.argument(
    "ticket_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--render",
    type=click.Choice(["json", "human", "both"]),
    default=None,
    help="Output format (defaults to ITS_RENDER_DEFAULT_FORMAT).",
)
def sort_command(ticket_file: Path, render: Optional[str]) -> None:
    """
    Sort the tickets in TICKET_FILE into a single itinerary.

    TICKET_FILE is JSON: either {"tickets": [...]} or a list of tickets.
    """
    render = render or get_config().rendering.default_format
    tickets = _load_tickets(ticket_file)

    service: ItineraryService = get_container().resolve(ItineraryService)
    try:
        result = service.create(tickets, render=render)
    except ItinerarySorterError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(EXIT_CODES[ErrorTier.INTERNAL])

    if not result.is_valid:
        _print_messages("Errors", result.errors, "red")
        _print_messages("Warnings", result.warnings, "yellow")
        sys.exit(_exit_code(result.errors))

    if render in ("json", "both"):
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    if render in ("human", "both") and result.steps is not None:
        for step in result.steps:
            click.echo(step)

    _print_messages("Warnings", result.warnings, "yellow")


@cli.command("validate")
@click.argument(
    "ticket_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def validate_command(ticket_file: Path) -> None:
    """
    Check whether TICKET_FILE forms exactly one itinerary.

    Prints the errors and warnings only, and the tier of the first error.
    """
    tickets = _load_tickets(ticket_file)
    service: ItineraryService = get_container().resolve(ItineraryService)
    result = service.create(tickets)

    if result.is_valid:
        click.echo(
            click.style("OK", fg="green")
            + f" {result.sorting.ticket_count} tickets form one itinerary"
        )
        _print_messages("Warnings", result.warnings, "yellow")
        return

    tier = classify_error(result.errors[0])
    click.echo(click.style("FAIL", fg="red") + f" ({tier.value})")
    _print_messages("Errors", result.errors, "red")
    _print_messages("Warnings", result.warnings, "yellow")
    sys.exit(_exit_code(result.errors))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
