"""
Line-oriented command shell over the flight and authentication services.

Each input line is one command; arguments are split shell-style so names with
spaces can be quoted. Failures raised by the services are reported and the
shell keeps reading.
"""

import logging
import shlex
from typing import Callable, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .exceptions import AirportError
from .models import Direction, FlightModel, FlightStatus, TicketModel, UserModel, UserRole
from .services import AuthService, FlightService
from .utils.config import AirportConfig
from .utils.reference_data import airline_name

logger = logging.getLogger(__name__)

HELP_LINES = [
    "register traveller <name> <age> <email> <mobile> <password>",
    "register frequent  <name> <age> <email> <mobile> <password> <ff_number> [points]",
    "register manager   <name> <age> <email> <mobile> <password> <staff_id>",
    "login <email> <password>",
    "logout",
    "me",
    "changepwd <old> <new>",
    "add arrival   <airline> <flight_code> <departure_city> <plane_id> <YYYY-MM-DDTHH:MM>",
    "add departure <airline> <flight_code> <arrival_city>   <plane_id> <YYYY-MM-DDTHH:MM>",
    "flights",
    "book arrival   <flight_code> [SEAT]",
    "book departure <flight_code> [SEAT]",
    "my tickets",
    "delay arrival   <flight_code> <minutes>",
    "delay departure <flight_code> <minutes>",
    "help",
    "quit | exit",
]

DIRECTIONS = {"arrival": Direction.ARRIVAL, "departure": Direction.DEPARTURE}


class UsageError(Exception):
    """A command was typed with the wrong arguments."""
    pass


def flights_table(flights: Sequence[FlightModel], config: AirportConfig, title: str = "Flights") -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Direction", style="cyan", no_wrap=True)
    table.add_column("Flight", style="bold", no_wrap=True)
    table.add_column("Airline")
    table.add_column("City")
    table.add_column("Plane", no_wrap=True)
    table.add_column("Time", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Delay", justify="right", no_wrap=True)

    for flight in flights:
        status_style = "yellow" if flight.status == FlightStatus.DELAYED else "green"
        table.add_row(
            flight.direction.value,
            flight.flight_code,
            airline_name(flight.airline),
            flight.other_city,
            flight.plane_id,
            flight.effective_time.strftime(config.display_format),
            f"[{status_style}]{flight.status.value}[/{status_style}]",
            f"{flight.delay_minutes}m",
        )
    return table


def ticket_panel(ticket: TicketModel, config: AirportConfig, current_seat: Optional[str] = None) -> Panel:
    """
    Render a ticket. current_seat is the holder's seat now, shown when a
    frequent flyer has since moved them off the ticketed seat.
    """
    arriving = ticket.direction == Direction.ARRIVAL
    city_label = "Departure City" if arriving else "Arrival City"
    time_label = "Arrival Time" if arriving else "Departure Time"
    lines = [
        f"Ticket ID: {ticket.ticket_id}",
        f"Flight Code: {ticket.flight_code}",
        f"Direction: {ticket.direction.value.upper()}",
        f"{city_label}: {ticket.other_city}",
        f"{time_label}: {ticket.time_string(config.datetime_format)}",
        f"Seat: {ticket.seat_code}",
    ]
    if current_seat and current_seat != ticket.seat_code:
        lines.append(f"Current seat: {current_seat}")
    lines.append(f"Points: {ticket.points_earned}")
    return Panel("\n".join(lines), title="Ticket Information", border_style="cyan", expand=False)


class AirportShell:
    """Parses and runs shell commands for one console session."""

    def __init__(
        self,
        flights: FlightService,
        auth: AuthService,
        config: AirportConfig,
        console: Optional[Console] = None,
    ):
        self.flights = flights
        self.auth = auth
        self.config = config
        self.console = console or Console()
        self.token: Optional[str] = None
        self.commands: Dict[str, Callable[[List[str]], None]] = {
            "register": self.cmd_register,
            "login": self.cmd_login,
            "logout": self.cmd_logout,
            "me": self.cmd_me,
            "changepwd": self.cmd_changepwd,
            "add": self.cmd_add,
            "flights": self.cmd_flights,
            "book": self.cmd_book,
            "my": self.cmd_my,
            "delay": self.cmd_delay,
            "help": self.cmd_help,
        }

    # Output helpers

    def error(self, message: str) -> None:
        self.console.print("#####", style="red", markup=False)
        self.console.print(f"# Error - {message}", style="red", markup=False)
        self.console.print("# Please try again.", style="red", markup=False)
        self.console.print("#####", style="red", markup=False)

    def say(self, message: str) -> None:
        self.console.print(message, markup=False)

    # Session helpers

    @property
    def user(self) -> Optional[UserModel]:
        return self.auth.current_user(self.token) if self.token else None

    def require_user(self) -> UserModel:
        user = self.user
        if user is None:
            raise UsageError("Please login first.")
        return user

    def require_manager(self) -> UserModel:
        user = self.require_user()
        if user.role != UserRole.FLIGHT_MANAGER:
            raise UsageError("Only flight managers can do that.")
        return user

    @staticmethod
    def direction(word: str) -> Direction:
        try:
            return DIRECTIONS[word.lower()]
        except KeyError:
            raise UsageError(f"Expected 'arrival' or 'departure', got {word!r}.")

    @staticmethod
    def number(value: str, label: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise UsageError(f"Supplied {label} is invalid.")

    # Dispatch

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        try:
            args = shlex.split(line)
        except ValueError as e:
            self.error(f"Could not parse command: {e}")
            return True
        if not args:
            return True

        name = args[0].lower()
        if name in ("quit", "exit"):
            self.say("Thank you. Safe travels.")
            return False

        command = self.commands.get(name)
        if command is None:
            self.error(f"Unknown command {args[0]!r}. Type 'help' for the command list.")
            return True

        try:
            command(args[1:])
        except UsageError as e:
            self.error(str(e))
        except AirportError as e:
            logger.debug("Command %r failed: %s", line, e)
            self.error(str(e))
        return True

    def run(self) -> None:
        self.console.rule("Welcome to Brisbane Domestic Airport")
        self.say("Type 'help' for the command list.")
        while True:
            try:
                line = self.console.input("> ")
            except EOFError:
                break
            if not self.handle(line):
                break

    # Commands

    def cmd_help(self, args: List[str]) -> None:
        self.say("Commands:")
        for line in HELP_LINES:
            self.say(f"  {line}")

    def cmd_register(self, args: List[str]) -> None:
        if len(args) < 6:
            raise UsageError("Usage: register traveller|frequent|manager <name> <age> <email> <mobile> <password> ...")
        kind, name, age, email, mobile, password = args[:6]
        extra = args[6:]
        age = self.number(age, "age")
        kind = kind.lower()

        if kind == "traveller":
            self.auth.register_traveller(name, age, email, mobile, password)
            self.say(f"Congratulations {name}. You have registered as a traveller.")
        elif kind == "frequent":
            if not extra:
                raise UsageError("Usage: register frequent <name> <age> <email> <mobile> <password> <ff_number> [points]")
            points = self.number(extra[1], "frequent flyer points") if len(extra) > 1 else 0
            self.auth.register_frequent_flyer(name, age, email, mobile, password, extra[0], points)
            self.say(f"Congratulations {name}. You have registered as a frequent flyer.")
        elif kind == "manager":
            if not extra:
                raise UsageError("Usage: register manager <name> <age> <email> <mobile> <password> <staff_id>")
            self.auth.register_manager(name, age, email, mobile, password, extra[0])
            self.say(f"Congratulations {name}. You have registered as a flight manager.")
        else:
            raise UsageError(f"Unknown user type {kind!r}.")

    def cmd_login(self, args: List[str]) -> None:
        if len(args) != 2:
            raise UsageError("Usage: login <email> <password>")
        if self.token:
            self.auth.logout(self.token)
        self.token = self.auth.login(args[0], args[1])
        self.say(f"Welcome back {self.user.name}.")

    def cmd_logout(self, args: List[str]) -> None:
        if self.token:
            self.auth.logout(self.token)
        self.token = None
        self.say("Logged out.")

    def cmd_me(self, args: List[str]) -> None:
        user = self.require_user()
        self.say("Your details.")
        self.say(f"Name: {user.name}")
        self.say(f"Age: {user.age}")
        self.say(f"Mobile phone number: {user.mobile}")
        self.say(f"Email: {user.email}")
        if user.frequent_flyer is not None:
            self.say(f"Frequent flyer number: {user.frequent_flyer.ff_number}")
            self.say(f"Points: {user.frequent_flyer.points}")
        if user.manager is not None:
            self.say(f"Staff id: {user.manager.staff_id}")

    def cmd_changepwd(self, args: List[str]) -> None:
        if len(args) != 2:
            raise UsageError("Usage: changepwd <old> <new>")
        user = self.require_user()
        self.auth.change_password(user.email, args[0], args[1])
        self.say("Password changed.")

    def cmd_add(self, args: List[str]) -> None:
        if len(args) != 6:
            raise UsageError("Usage: add arrival|departure <airline> <flight_code> <city> <plane_id> <YYYY-MM-DDTHH:MM>")
        manager = self.require_manager()
        direction = self.direction(args[0])
        airline, code, city, plane = args[1].upper(), args[2].upper(), args[3], args[4].upper()
        try:
            when = self.config.parse_time(args[5])
        except ValueError:
            raise UsageError("Supplied time is invalid.")

        flight = self.flights.register_flight(manager, direction, airline, code, city, plane, when)
        self.say(f"Flight {flight.flight_code} on plane {flight.plane_id} has been added to the system.")

    def cmd_flights(self, args: List[str]) -> None:
        if self.user is not None and self.user.role == UserRole.FLIGHT_MANAGER:
            self.show_flights_by_direction()
            return
        flights = list(self.flights.list_flights())
        if not flights:
            self.say("No flights available.")
            return
        self.console.print(flights_table(flights, self.config))

    def show_flights_by_direction(self) -> None:
        """Manager view: one table for arrivals, one for departures."""
        for direction, flights in self.flights.flights_by_direction().items():
            if flights:
                title = f"{direction.value.capitalize()} Flights"
                self.console.print(flights_table(flights, self.config, title=title))
            else:
                self.say(f"There are no {direction.value} flights.")

    def cmd_book(self, args: List[str]) -> None:
        if len(args) not in (2, 3):
            raise UsageError("Usage: book arrival|departure <flight_code> [SEAT]")
        user = self.require_user()
        if user.role == UserRole.FLIGHT_MANAGER:
            raise UsageError("Flight managers cannot book flights.")
        direction = self.direction(args[0])
        seat = args[2] if len(args) == 3 else None
        code = args[1].upper()

        if direction == Direction.ARRIVAL:
            ticket = self.flights.book_arrival(user, code, seat)
        else:
            ticket = self.flights.book_departure(user, code, seat)
        self.console.print(ticket_panel(ticket, self.config))

    def cmd_my(self, args: List[str]) -> None:
        if [a.lower() for a in args] != ["tickets"]:
            raise UsageError("Usage: my tickets")
        user = self.require_user()
        tickets = self.flights.tickets_for_user(user.email)
        if not tickets:
            self.say("You have no tickets.")
            return
        for ticket in tickets:
            current = self.flights.seat_of(user, ticket.flight_code, ticket.direction)
            self.console.print(ticket_panel(ticket, self.config, current))

    def cmd_delay(self, args: List[str]) -> None:
        if len(args) != 3:
            raise UsageError("Usage: delay arrival|departure <flight_code> <minutes>")
        manager = self.require_manager()
        direction = self.direction(args[0])
        minutes = self.number(args[2], "number")
        code = args[1].upper()

        if direction == Direction.ARRIVAL:
            linked = self.flights.delay_arrival(manager, code, minutes)
            self.say(f"Arrival delayed and {len(linked)} linked departure(s) adjusted.")
        else:
            self.flights.delay_departure(manager, code, minutes)
            self.say("Departure delayed.")
