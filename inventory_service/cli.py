"""Command-line entry point: `inventory-service --host ... --port ... --cache ...`."""

import click
import uvicorn
from pydantic import ValidationError

from inventory_service.core.config import INVENTORY_BACKENDS, Settings
from inventory_service.main import create_app
from inventory_service.shared.logging_setup import setup_logging


def _build_settings(**overrides) -> Settings:
    """Settings from the environment with command-line values on top."""
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        messages = "; ".join(str(err["msg"]) for err in exc.errors())
        raise click.ClickException(f"Invalid configuration: {messages}") from exc


@click.command()
@click.option("--host", "-h", required=True, help="Address to bind the server to.")
@click.option("--port", "-p", required=True, type=int, help="Port to listen on.")
@click.option(
    "--cache",
    "-c",
    "cache_dir",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory for the data file and uploaded photos (created if missing).",
)
@click.option(
    "--backend",
    type=click.Choice(INVENTORY_BACKENDS, case_sensitive=False),
    default=None,
    help="Inventory store backend. Defaults to INVENTORY_BACKEND or 'json'.",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def main(host: str, port: int, cache_dir: str, backend: str | None, debug: bool) -> None:
    """Run the inventory HTTP service."""
    settings = _build_settings(
        host=host,
        port=port,
        cache_dir=cache_dir,
        inventory_backend=backend,
        debug=True if debug else None,
    )
    setup_logging(settings)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="debug" if settings.debug else "info")


if __name__ == "__main__":
    main()
