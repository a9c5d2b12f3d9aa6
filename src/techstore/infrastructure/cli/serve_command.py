"""CLI command that runs the Record Service over HTTP."""

from __future__ import annotations

import logging

import click

from techstore.infrastructure.bootstrap import DEFAULT_PORT

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option(
    "--port",
    type=int,
    default=DEFAULT_PORT,
    envvar="PORT",
    show_default=True,
    help="Port to listen on (also read from $PORT).",
)
def serve(host: str, port: int) -> None:
    """Start the order/appointment record API."""
    import uvicorn

    from techstore.infrastructure.api.app import create_app

    logger.info("API on http://%s:%s", host, port)
    uvicorn.run(create_app(), host=host, port=port, workers=1)
