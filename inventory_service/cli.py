"""Command line entry point: `inventory-service --host H --port P --cache DIR`."""

import os

import click
import uvicorn

from inventory_service.config import get_settings


@click.command()
@click.option("-h", "--host", required=True, help="Server host.")
@click.option("-p", "--port", required=True, type=int, help="Server port.")
@click.option(
    "-c", "--cache", "cache_dir", required=True,
    type=click.Path(file_okay=False), help="Cache directory for photos.",
)
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def main(host: str, port: int, cache_dir: str, reload: bool) -> None:
    """Run the Inventory Service HTTP server."""
    os.environ["HOST"] = host
    os.environ["PORT"] = str(port)
    os.environ["CACHE_DIR"] = cache_dir
    get_settings.cache_clear()
    settings = get_settings()

    uvicorn.run(
        "inventory_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
