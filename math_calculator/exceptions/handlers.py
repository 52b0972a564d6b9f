import logging

import click

from ..models import InvalidInput

logger = logging.getLogger(__name__)


def handle_validation_error(error: InvalidInput):
    logger.warning(f"Input invalid: {error.reason}")
    click.echo(f"Input invalid: {error.reason}", err=True)


def handle_generic_exception(error: Exception, context: str = "Eroare"):
    logger.exception(f"{context}: {error}")
    click.echo(f"{context}: {error}", err=True)
