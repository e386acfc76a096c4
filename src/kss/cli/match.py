"""CLI command: kss match -- show which rules match a scene node."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from kss.cli.common import load_or_exit
from kss.model.node import SceneNode


@click.command()
@click.argument("stylesheet")
@click.argument("scene", type=click.Path(exists=True))
@click.argument("node_id")
@click.option("--timeout", default=10.0, type=float, help="Fetch timeout for URLs.")
def match(stylesheet: str, scene: str, node_id: str, timeout: float) -> None:
    """Match a stylesheet against one node of a JSON scene description.

    Prints every rule (in stylesheet order) with the selector that matched
    NODE_ID. Exits with code 1 if the node is not in the scene.
    """
    sheet = load_or_exit(stylesheet, timeout=timeout)
    try:
        root = SceneNode.from_dict(json.loads(Path(scene).read_text(encoding="utf-8")))
    except (json.JSONDecodeError, AttributeError, TypeError) as exc:
        click.echo(f"Invalid scene file {scene}: {exc}", err=True)
        sys.exit(1)

    node = root.find(node_id)
    if node is None:
        click.echo(f"Node '{node_id}' not found in {scene}", err=True)
        sys.exit(1)

    matched = 0
    for rule in sheet:
        selector = rule.matching_selector(node)
        if selector is None:
            continue
        matched += 1
        click.echo(f"Rule {rule.index}: {selector.raw}")
        for declaration in rule.declarations:
            click.echo(f"  {declaration.raw}")
    click.echo(f"{matched} of {len(sheet)} rule(s) match '{node_id}'")
