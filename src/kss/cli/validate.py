"""CLI command: kss validate -- parse and lint a stylesheet."""

from __future__ import annotations

import sys

import click

from kss.cli.common import load_or_exit
from kss.model.diagnostic import Severity
from kss.validation import validate as run_validate


@click.command()
@click.argument("stylesheet")
@click.option("--timeout", default=10.0, type=float, help="Fetch timeout for URLs.")
def validate(stylesheet: str, timeout: float) -> None:
    """Parse and lint a KSS stylesheet (.kss text, .json document, or URL).

    Exits with code 1 if the stylesheet cannot be parsed or any
    error-level diagnostics are found.
    """
    sheet = load_or_exit(stylesheet, timeout=timeout)
    diagnostics = run_validate(sheet)

    if not diagnostics:
        click.echo(f"OK: {stylesheet} is valid ({len(sheet)} rules, 0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
