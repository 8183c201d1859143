"""Command-line interface for browsing ride-share exports."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from rideshare.config.settings import RideShareConfig
    from rideshare.dataset import RideShareDataset
    from rideshare.domain.entities import Trip

app = typer.Typer(
    name="rideshare",
    help="Validate and query driver, rider and trip CSV exports.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load_config(config: Path) -> "RideShareConfig":
    """Load config and set up logging from it."""
    from rideshare.config.loader import load_config
    from rideshare.utils.logging import configure_logging

    try:
        app_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(app_config.logging.level, app_config.logging.json_output)
    return app_config


def _load_dataset(config: Path) -> "RideShareDataset":
    """Load config and dataset, turning load errors into a clean exit."""
    from rideshare.dataset import load_dataset_from_config

    app_config = _load_config(config)
    try:
        return load_dataset_from_config(app_config)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e
    except ValueError as e:
        console.print(f"[red]Invalid data: {e}[/red]")
        raise typer.Exit(code=1) from e


def _trip_table(title: str, trips: "list[Trip]") -> Table:
    table = Table(title=title)
    table.add_column("Trip", justify="right", style="cyan")
    table.add_column("Driver", justify="right")
    table.add_column("Rider", justify="right")
    table.add_column("Date")
    table.add_column("Rating", justify="right", style="green")
    for trip in trips:
        table.add_row(
            str(trip.id),
            str(trip.driver_id),
            str(trip.rider_id),
            trip.date.isoformat(),
            str(trip.rating),
        )
    return table


@app.command()
def validate(config: ConfigOption) -> None:
    """Validate the CSV exports against their schemas and entity rules."""
    from rideshare.validation import ConsoleReporter, ValidationRunner

    app_config = _load_config(config)
    console.print("[blue]Running data validation...[/blue]")

    results = ValidationRunner(app_config).run()
    ConsoleReporter(console).print_results(results)

    if not all(r.passed for r in results):
        raise typer.Exit(code=1)


@app.command()
def summary(config: ConfigOption) -> None:
    """Show entity counts and per-driver trip statistics."""
    dataset = _load_dataset(config)
    queries = dataset.queries

    counts = Table(title="Loaded Entities")
    counts.add_column("Entity", style="cyan")
    counts.add_column("Count", justify="right", style="green")
    counts.add_row("Drivers", str(dataset.drivers.count()))
    counts.add_row("Riders", str(dataset.riders.count()))
    counts.add_row("Trips", str(dataset.trips.count()))
    console.print(counts)

    drivers = Table(title="Drivers")
    drivers.add_column("ID", justify="right", style="cyan")
    drivers.add_column("Name")
    drivers.add_column("Trips", justify="right")
    drivers.add_column("Avg rating", justify="right", style="green")
    for driver in dataset.drivers:
        average = queries.driver_average_rating(driver.id)
        drivers.add_row(
            str(driver.id),
            driver.name,
            str(len(queries.find_trips_by_driver(driver.id))),
            f"{average:.2f}" if average is not None else "-",
        )
    console.print(drivers)


@app.command()
def trips(
    config: ConfigOption,
    driver: Annotated[
        int | None,
        typer.Option("--driver", "-d", help="List trips driven by this driver id."),
    ] = None,
    rider: Annotated[
        int | None,
        typer.Option("--rider", "-r", help="List trips taken by this rider id."),
    ] = None,
) -> None:
    """List the trips of one driver or one rider."""
    if (driver is None) == (rider is None):
        console.print("[red]Error: pass exactly one of --driver or --rider.[/red]")
        raise typer.Exit(code=1)

    queries = _load_dataset(config).queries

    if driver is not None:
        found = queries.find_trips_by_driver(driver)
        title = f"Trips for driver {driver}"
    else:
        found = queries.find_trips_by_rider(rider)
        title = f"Trips for rider {rider}"

    if not found:
        console.print(f"[yellow]No trips found ({title.lower()}).[/yellow]")
        return
    console.print(_trip_table(title, found))


@app.command()
def trip(
    config: ConfigOption,
    trip_id: Annotated[int, typer.Argument(help="Trip id to resolve.")],
) -> None:
    """Show one trip with its driver and rider."""
    dataset = _load_dataset(config)
    found = dataset.trips.find(trip_id)
    if found is None:
        console.print(f"[red]Error: trip {trip_id} not found.[/red]")
        raise typer.Exit(code=1)

    queries = dataset.queries
    driver = queries.resolve_driver(found)
    rider = queries.resolve_rider(found)

    console.print(_trip_table(f"Trip {trip_id}", [found]))
    if driver is not None:
        console.print(f"Driver: [cyan]{driver.name}[/cyan] (VIN {driver.vin})")
    else:
        console.print(f"[yellow]Driver {found.driver_id} is not on file.[/yellow]")
    if rider is not None:
        console.print(f"Rider:  [cyan]{rider.name}[/cyan] ({rider.phone})")
    else:
        console.print(f"[yellow]Rider {found.rider_id} is not on file.[/yellow]")


if __name__ == "__main__":
    app()
