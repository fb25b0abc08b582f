"""CLI entry-point for the room normalizer."""

from __future__ import annotations

import json
import logging

import click

from packages.core import config
from packages.pipeline.process import process_room_to_json


@click.group()
def main():
    """Room geometry normalizer: floor-plan polygon → points + walls."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(levelname)s | %(name)s | %(message)s",
    )


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_file", default=None, help="Output JSON path.")
def normalize(input_file: str, output_file: str | None):
    """Normalize a room JSON file and print the response envelope."""
    json_str = process_room_to_json(input_file, output_path=output_file)
    click.echo(json_str)
    if json.loads(json_str)["status"] != "success":
        raise SystemExit(1)


@main.command()
@click.option("--host", default=config.HOST, show_default=True, help="Bind address.")
@click.option("--port", default=config.PORT, show_default=True, help="Bind port.")
def serve(host: str, port: int):
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("apps.api.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
