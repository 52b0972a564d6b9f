import sys

import click

from .config import get_settings
from .exceptions.handlers import (handle_generic_exception,
                                  handle_validation_error)
from .models import InvalidInput
from .registry import default_registry
from .service import calculate as calculate_fn
from .service import list_operations
from .utils.logger import get_logger

logger = get_logger()


@click.group()
def cli():
    """Interfață de comandă pentru operații matematice"""
    pass


@cli.command()
@click.option("--number", "-n", required=True, help="Număr întreg pozitiv")
@click.option(
    "--operation",
    "-o",
    "operations",
    multiple=True,
    help=f"Operația de rulat ({', '.join(sorted(default_registry.known_ids()))})",
)
@click.option("--json", "as_json", is_flag=True, help="Afișează rezultatul ca JSON")
def calculate(number, operations, as_json):
    """Rulează operațiile cerute pe număr"""
    try:
        outcome = calculate_fn(number, list(operations))
    except Exception as e:
        handle_generic_exception(e, context="Eroare la calcul")
        sys.exit(1)

    if isinstance(outcome, InvalidInput):
        handle_validation_error(outcome)
        sys.exit(1)

    if as_json:
        click.echo(outcome.model_dump_json(indent=2))
        return

    click.echo(f"Input Number: {outcome.number}")
    for result in outcome.results:
        prefix = "" if result.success else "Error: "
        click.echo(f"{result.title}: {prefix}{result.message}")


@cli.command()
def operations():
    """Listează operațiile disponibile"""
    for info in list_operations():
        click.echo(f"{info.id:<12} {info.title}")


@cli.command()
@click.option("--host", default=None, help="Adresa serverului")
@click.option("--port", type=int, default=None, help="Portul serverului")
@click.option("--reload", is_flag=True, help="Repornește la modificarea codului")
def serve(host, port, reload):
    """Pornește serverul web (uvicorn)"""
    import uvicorn

    settings = get_settings()
    host = host or settings.HOST
    port = port or settings.PORT
    logger.info(f"Pornesc serverul pe http://{host}:{port}")
    uvicorn.run("math_calculator.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
