"""CLI commands for running and seeding the service."""

from __future__ import annotations

import logging

import click
import uvicorn

from lessonshop.application.seed_catalog import SeedCatalogHandler
from lessonshop.domain.exceptions import DomainException
from lessonshop.infrastructure.bootstrap import application, lesson_repository, settings
from lessonshop.infrastructure.sample_catalog import SAMPLE_LESSONS


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: $HOST).")
@click.option("--port", default=None, type=int, help="Port (default: $PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    cfg = settings()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        application(),
        host=host or cfg.host,
        port=port or cfg.port,
        log_level=cfg.log_level.lower(),
    )


@click.command("seed")
def seed() -> None:
    """Load the sample catalog into an empty lessons collection."""
    handler = SeedCatalogHandler(lesson_repo=lesson_repository())

    try:
        count = handler.handle(SAMPLE_LESSONS)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if count:
        click.echo(f"Seeded {count} lessons.")
    else:
        click.echo("Catalog already has lessons; nothing to seed.")
