"""Command line entry point: ``bagelbot serve`` / ``bagelbot init-db``."""

import asyncio

import click
import structlog
import uvicorn

from bagelbot.config import settings
from bagelbot.logging import setup_logging

logger = structlog.get_logger(__name__)


@click.group()
def cli() -> None:
    """BagelBot backend management commands."""
    setup_logging()


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST setting).")
@click.option("--port", default=None, type=int, help="Port (defaults to PORT setting).")
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API with uvicorn."""
    uvicorn.run(
        "bagelbot.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,  # Keep structlog handlers installed by setup_logging()
    )


@cli.command("init-db")
def init_db_command() -> None:
    """Create database tables and exit."""
    from bagelbot.db import dispose_engine, init_db

    async def _run() -> None:
        try:
            await init_db()
        finally:
            await dispose_engine()

    asyncio.run(_run())
    logger.info("Database tables initialized")
    click.echo("Database tables initialized")


if __name__ == "__main__":
    cli()
