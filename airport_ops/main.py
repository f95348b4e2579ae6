"""
Main entry point for the Brisbane Domestic Airport simulator.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import typer
from rich.console import Console

from .cli import AirportShell, flights_table, ticket_panel
from .exceptions import AirportError
from .services import AuthService, FlightService
from .store import EntityStore
from .utils.config import AirportConfig, get_config

app = typer.Typer(
    help="Brisbane Domestic Airport operations simulator",
    add_completion=False,
)


def build_services(config: AirportConfig):
    """Create the store and the services sharing it."""
    store = EntityStore(strict_plane_ids=config.strict_plane_ids)
    return FlightService(store), AuthService(store.users)


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override AIRPORT_LOG_LEVEL (DEBUG, INFO, ...)"
    ),
):
    """Load configuration and configure logging."""
    try:
        config = get_config()
    except ValueError as e:
        typer.echo(f"Failed to load configuration: {e}", err=True)
        raise typer.Exit(code=1)

    level = (log_level or ("DEBUG" if config.debug else config.log_level)).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def shell():
    """Start the interactive airport command shell."""
    config = get_config()
    flights, auth = build_services(config)
    AirportShell(flights, auth, config, Console()).run()


@app.command()
def demo(
    delay: int = typer.Option(30, "--delay", min=1, help="Minutes to delay the arrival"),
):
    """Register two linked flights, book seats and cascade an arrival delay."""
    console = Console()
    config = get_config()
    flights, auth = build_services(config)
    start = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)

    try:
        manager = auth.register_manager("Mia Manager", 40, "mia@airport.test", "0400000001", "Manager123", "1001")
        traveller = auth.register_traveller("Tom Traveller", 30, "tom@airport.test", "0400000002", "Traveller1")
        flyer = auth.register_frequent_flyer(
            "Fay Flyer", 35, "fay@airport.test", "0400000003", "Frequent12", "123456"
        )

        flights.register_arrival(manager, "JST", "JST101", "Sydney", "JST1A", start)
        flights.register_departure(manager, "JST", "JST102", "Melbourne", "JST1A", start + timedelta(minutes=180))

        tickets = [
            flights.book_arrival(traveller, "JST101", "2B"),
            flights.book_arrival(flyer, "JST101", "2B"),
            flights.book_departure(flyer, "JST102"),
        ]
        flights.delay_arrival(manager, "JST101", delay)
    except AirportError as e:
        console.print(f"[red]Demo failed: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(flights_table(list(flights.list_flights()), config, title="Flights after delay"))
    for ticket, holder in zip(tickets, (traveller, flyer, flyer)):
        current = flights.seat_of(holder, ticket.flight_code, ticket.direction)
        console.print(ticket_panel(ticket, config, current))
    console.print(f"{traveller.email} now sits in {flights.seat_of(traveller, 'JST101', tickets[0].direction)}")
    console.print(f"{flyer.email} has {flyer.points} points")


if __name__ == "__main__":
    app()
