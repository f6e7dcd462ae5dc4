"""Command line entry point.

Usage:
    diffmatch check CONFIG DATA [--format text|json] [-v]

CONFIG is a YAML (or JSON) DiffMatcher config. DATA is a YAML (or JSON)
record or list of records. Exit status: 0 when every record matches,
1 when any record has mismatches, 2 for unreadable input or invalid config.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml

from diffmatch._config import parse_diff_matcher_config
from diffmatch._errors import MatcherError
from diffmatch._registry import default_registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def _load_yaml(path: str) -> Any:
    try:
        return yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        click.echo(f"cannot read {path}: {e}", err=True)
        sys.exit(EXIT_ERROR)


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """Run declarative matchers against data and report the differences."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.argument("data", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Report format",
)
def check(config: str, data: str, output_format: str) -> None:
    """Check every record in DATA against the matchers in CONFIG."""
    try:
        diff = default_registry().load_diff_matcher(parse_diff_matcher_config(_load_yaml(config)))
    except MatcherError as e:
        click.echo(f"invalid config {config}: {e}", err=True)
        sys.exit(EXIT_ERROR)

    records = _load_yaml(data)
    if not isinstance(records, list):
        records = [records]
    logger.info("checking %d records against %d matchers", len(records), len(diff))

    report = []
    for index, record in enumerate(records):
        entries = diff.diff_match(record)
        report.append(
            {
                "record": index,
                "matched": not entries,
                "mismatches": [str(entry.description) for entry in entries],
            }
        )

    if output_format == "json":
        click.echo(json.dumps(report, indent=2))
    else:
        for item in report:
            if item["matched"]:
                click.echo(f"record {item['record']}: ok")
                continue
            click.echo(f"record {item['record']}: {len(item['mismatches'])} mismatch(es)")
            for text in item["mismatches"]:
                click.echo(f"  - {text}")

    failed = sum(1 for item in report if not item["matched"])
    if output_format == "text":
        click.echo(f"{len(report) - failed} of {len(report)} records matched")
    sys.exit(EXIT_MISMATCH if failed else EXIT_OK)


if __name__ == "__main__":
    main()
