"""Command-line interface for jmc."""

import logging
import sys

import click
import httpx

from jmc import __version__
from jmc.config import get_config, setup_logging
from jmc.models import Restaurant, RestaurantData
from jmc.services import RepositoryError, RestaurantRepository, RestaurantService
from jmc.validation import RestaurantValidationError, validate_document

logger = logging.getLogger(__name__)


def format_restaurant(restaurant: Restaurant) -> str:
    """Render a restaurant as a single line."""
    categories = ", ".join(restaurant.categories)
    return (
        f"{restaurant.name} {restaurant.rating:.1f} [{categories}] {restaurant.kakao_url}"
    )


@click.group(invoke_without_command=True)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    help="Path to the JSON document (default: JMC_DATA_FILE or data.json)",
)
@click.version_option(version=__version__, prog_name="jmc", message="%(prog)s version %(version)s")
@click.pass_context
def cli(ctx, data_file: str | None):
    """
    jmc - pick where to eat from your own restaurant list.

    Run without a command to get a recommendation. No web UI is served;
    `jmc serve` exposes the JSON API only.
    """
    ctx.ensure_object(dict)

    config = get_config()
    setup_logging(config)

    ctx.obj["config"] = config
    ctx.obj["repository"] = RestaurantRepository(data_file or config.data_file)

    if ctx.invoked_subcommand is None:
        ctx.invoke(recommend)


@cli.command()
@click.option(
    "--remote",
    is_flag=True,
    help="Ask the running jmc server instead of reading the file",
)
@click.pass_context
def recommend(ctx, remote: bool = False):
    """Print one random restaurant."""
    if remote:
        restaurant = _recommend_remote(ctx.obj["config"].server_url)
    else:
        service = RestaurantService(ctx.obj["repository"])
        try:
            restaurant = service.recommend()
        except RepositoryError as e:
            logger.debug("Failed to load restaurants", exc_info=True)
            click.echo(f"Failed to read restaurant list: {e}", err=True)
            sys.exit(1)

    if restaurant is None:
        click.echo("No restaurants yet. Add some first.")
        return

    click.echo(format_restaurant(restaurant))


def _recommend_remote(server_url: str) -> Restaurant | None:
    try:
        with httpx.Client(timeout=10.0) as client:
            response = client.get(f"{server_url}/api/restaurants/recommend")
    except httpx.TimeoutException:
        logger.exception("Request timed out")
        click.echo(f"Request to {server_url} timed out.", err=True)
        sys.exit(1)
    except httpx.ConnectError:
        logger.exception("Cannot connect to server")
        click.echo(f"Cannot connect to server at {server_url}", err=True)
        click.echo("Make sure the server is running:  jmc serve", err=True)
        sys.exit(1)

    if response.status_code != 200:
        click.echo(
            f"Server error (status {response.status_code}): {response.text}", err=True
        )
        sys.exit(1)

    payload = response.json()
    if payload is None:
        return None
    return Restaurant.model_validate(payload)


@cli.command()
@click.pass_context
def init(ctx):
    """Create the data file, or check the existing one."""
    repository: RestaurantRepository = ctx.obj["repository"]
    path = repository.file_path

    if not repository.exists():
        click.echo(f"{path} not found.")
        try:
            repository.save_all(RestaurantData(restaurants=[], config={}))
        except RepositoryError as e:
            click.echo(f"Cannot create {path}: {e}", err=True)
            sys.exit(1)
        click.echo(f"Created {path}.")
        return

    _check_document(repository)
    click.echo(f"{path} is valid. Already initialized.")


@cli.command()
@click.pass_context
def validate(ctx):
    """Check that the data file is well-formed and every entry is valid."""
    repository: RestaurantRepository = ctx.obj["repository"]
    data = _check_document(repository)
    click.echo(f"{repository.file_path} is valid ({len(data.restaurants)} restaurants).")


def _check_document(repository: RestaurantRepository) -> RestaurantData:
    path = repository.file_path
    try:
        data = repository.load_all()
    except RepositoryError as e:
        click.echo(f"Cannot read {path}: {e}", err=True)
        sys.exit(1)

    try:
        validate_document(data)
    except RestaurantValidationError as e:
        click.echo(f"{path} is invalid: {e}", err=True)
        sys.exit(1)
    return data


@cli.command()
@click.pass_context
def serve(ctx):
    """Start the JSON API server (no web UI)."""
    from jmc.server import run_server

    config = ctx.obj["config"]
    config.data_file = str(ctx.obj["repository"].file_path)
    click.echo(f"Serving on http://{config.server_host}:{config.server_port}")
    run_server()


@cli.command()
def version():
    """Print the version."""
    click.echo(f"jmc version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
