#!/usr/bin/env python3
"""
Generate dist/schema.json from the configuration models.

Usage:
    python scripts/generate_json_schema.py
    python scripts/generate_json_schema.py --output build/schema.json

Environment Variables:
    PLEASE_CONFIG_LOG_LEVEL: Logging level (default: INFO)
    PLEASE_CONFIG_LOG_JSON: Render JSON lines (default: true)
"""

from pathlib import Path

import click
import structlog

from please_config.json_schema import write_json_schema
from please_config.settings import get_settings
from please_config.utils.logging_config import configure_logging

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "dist" / "schema.json"


@click.command()
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT,
    help="Output file path (default: dist/schema.json)",
)
def main(output: Path) -> None:
    """Generate the configuration JSON Schema."""
    configure_logging(get_settings())
    log = structlog.get_logger(__name__)

    schema = write_json_schema(output)
    log.info("json_schema_generated", path=str(output), version=schema["version"], schema_id=schema["$id"])
    click.echo(f"JSON Schema generated: {output}")


if __name__ == "__main__":
    main()
