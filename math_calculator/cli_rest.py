import json

import click
import requests

from .config import get_settings


def _api_base() -> str:
    return get_settings().API_BASE.rstrip("/")


@click.group()
def cli():
    """CLI client pentru REST API-ul Math Calculator"""
    pass


@cli.command()
@click.option("--number", "-n", required=True, help="Număr întreg pozitiv")
@click.option("--operation", "-o", "operations", multiple=True, help="Operația cerută")
def calculate(number, operations):
    """Client REST pentru /api/calculate"""
    payload = {"number": number, "operations": list(operations)}
    try:
        response = requests.post(
            f"{_api_base()}/calculate",
            json=payload,
            timeout=get_settings().REQUEST_TIMEOUT,
        )
        if response.status_code == 400:
            click.echo(f"Input invalid: {response.json().get('detail')}", err=True)
            raise SystemExit(1)
        response.raise_for_status()
        click.echo(json.dumps(response.json(), indent=2))
    except requests.exceptions.RequestException as e:
        click.echo(f"Eroare: {e}", err=True)
        raise SystemExit(1)


@cli.command()
def operations():
    """Client REST pentru /api/operations"""
    try:
        response = requests.get(
            f"{_api_base()}/operations", timeout=get_settings().REQUEST_TIMEOUT
        )
        response.raise_for_status()
        for info in response.json():
            click.echo(f"{info['id']:<12} {info['title']}")
    except requests.exceptions.RequestException as e:
        click.echo(f"Eroare: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
