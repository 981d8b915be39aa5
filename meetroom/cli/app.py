"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pydantic
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..adapters.json_repository import JsonRoomRepository
from ..config import AppConfig, load_config
from ..domain.exceptions import MeetroomError, RepositoryError, ValidationError
from ..domain.models import Room
from ..schemas import (
    CreateParticipantRequest,
    CreateRoomRequest,
    UpdateAvailabilityRequest,
)
from ..services import ParticipantService, RoomService

app = typer.Typer(
    name="meetroom",
    help="Create availability rooms and see which dates work for everyone",
    add_completion=False
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Manage availability rooms stored in a local JSON file.
    """
    _configure_logging(verbose)
    ctx.obj = {"config_file": config_file}


def _load(ctx: typer.Context) -> AppConfig:
    try:
        return load_config(ctx.obj.get("config_file") if ctx.obj else None)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _build_services(config: AppConfig) -> tuple[RoomService, ParticipantService]:
    try:
        repository = JsonRoomRepository(config.get_storage_path())
    except RepositoryError as e:
        _print_domain_error(e)
        raise typer.Exit(1)
    room_service = RoomService(
        repository=repository,
        validator=config.build_validator(),
        code_generator=config.build_code_generator(),
    )
    return room_service, ParticipantService(repository=repository)


def _print_request_errors(error: pydantic.ValidationError) -> None:
    console.print("[bold red]Invalid request:[/bold red]")
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        console.print(f"  • {field}: {detail['msg']}")


def _print_domain_error(error: MeetroomError) -> None:
    if isinstance(error, ValidationError):
        console.print("[bold red]Request rejected:[/bold red]")
        for message in error.messages:
            console.print(f"  • {message}")
    else:
        console.print(f"[bold red]Error:[/bold red] {error}")


def _room_panel(room: Room) -> Panel:
    if room.date_only:
        window = "whole days"
    else:
        window = f"{room.start_time} - {room.end_time}"
    return Panel.fit(
        f"[bold]Code:[/bold] [bold yellow]{room.code}[/bold yellow]\n"
        f"[bold]Dates:[/bold] {', '.join(room.dates)}\n"
        f"[bold]Time window:[/bold] {window}",
        title="Room"
    )


@app.command()
def create_room(
    ctx: typer.Context,
    dates: Annotated[List[str], typer.Argument(help="Candidate dates (YYYY-MM-DD), sorted ascending.")],
    date_only: Annotated[bool, typer.Option("--date-only", help="Participants pick whole days.")] = False,
    start: Annotated[Optional[str], typer.Option("--start", help="Start of the daily window (HH:MM)")] = None,
    end: Annotated[Optional[str], typer.Option("--end", help="End of the daily window (HH:MM)")] = None,
):
    """
    Create a new room.

    Examples:

        meetroom create-room 2024-11-25 2024-11-26 --date-only

        meetroom create-room 2024-11-25 --start 09:00 --end 18:00
    """
    config = _load(ctx)
    room_service, _ = _build_services(config)

    try:
        request = CreateRoomRequest(
            dates=dates,
            date_only=date_only,
            start_time=start,
            end_time=end,
        )
        room = room_service.create_room(request)
    except pydantic.ValidationError as e:
        _print_request_errors(e)
        raise typer.Exit(1)
    except MeetroomError as e:
        _print_domain_error(e)
        raise typer.Exit(1)

    console.print("\n[green]✓ Room created[/green]")
    console.print(_room_panel(room))


@app.command()
def show_room(
    ctx: typer.Context,
    code: Annotated[str, typer.Argument(help="Room code")],
):
    """
    Show a room's dates and time window.
    """
    config = _load(ctx)
    room_service, _ = _build_services(config)

    try:
        room = room_service.find_room(code)
    except MeetroomError as e:
        _print_domain_error(e)
        raise typer.Exit(1)

    console.print(_room_panel(room))


@app.command()
def join(
    ctx: typer.Context,
    code: Annotated[str, typer.Argument(help="Room code")],
    name: Annotated[str, typer.Argument(help="Participant name")],
    slot: Annotated[Optional[List[str]], typer.Option("--slot", "-s", help="Available slot (YYYY-MM-DD or 'YYYY-MM-DD HH:MM'). Repeatable.")] = None,
):
    """
    Join a room as a new participant.
    """
    config = _load(ctx)
    _, participant_service = _build_services(config)

    try:
        request = CreateParticipantRequest(
            room_code=code,
            name=name,
            enable_times=slot or [],
        )
        participant = participant_service.register(request)
    except pydantic.ValidationError as e:
        _print_request_errors(e)
        raise typer.Exit(1)
    except MeetroomError as e:
        _print_domain_error(e)
        raise typer.Exit(1)

    console.print(
        f"[green]✓ {participant.name} joined room {participant.room_code} "
        f"with {len(participant.enable_times)} slot(s)[/green]"
    )


@app.command()
def update(
    ctx: typer.Context,
    code: Annotated[str, typer.Argument(help="Room code")],
    name: Annotated[str, typer.Argument(help="Your participant name")],
    slot: Annotated[Optional[List[str]], typer.Option("--slot", "-s", help="Available slot. Repeatable. Replaces all previous slots.")] = None,
):
    """
    Replace your available slots in a room.
    """
    config = _load(ctx)
    _, participant_service = _build_services(config)

    try:
        current_user = participant_service.find_participant(code, name)
        request = UpdateAvailabilityRequest(enable_times=slot or [])
        participant = participant_service.update_availability(current_user, code, request)
    except pydantic.ValidationError as e:
        _print_request_errors(e)
        raise typer.Exit(1)
    except MeetroomError as e:
        _print_domain_error(e)
        raise typer.Exit(1)

    console.print(
        f"[green]✓ Updated {participant.name}: {len(participant.enable_times)} slot(s)[/green]"
    )


@app.command()
def result(
    ctx: typer.Context,
    code: Annotated[str, typer.Argument(help="Room code")],
):
    """
    Show how many participants are available on each date.
    """
    config = _load(ctx)
    room_service, _ = _build_services(config)

    try:
        room_result = room_service.get_room_result(code)
    except MeetroomError as e:
        _print_domain_error(e)
        raise typer.Exit(1)

    console.print(_room_panel(room_result.room))

    if not room_result.enable_times:
        console.print("[yellow]⚠ Nobody has submitted availability yet.[/yellow]\n")
        return

    best = set(room_result.aggregation.most_popular())

    table = Table(
        title="Availability",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Date", style="bold yellow")
    table.add_column("Participants", justify="right")

    for date, count in room_result.enable_times.items():
        marker = " ★" if date in best else ""
        table.add_row(date, f"{count}{marker}")

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]meetroom[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
