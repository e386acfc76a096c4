"""CLI command: kss inspect -- display parsed selector chains."""

from __future__ import annotations

import click

from kss.cli.common import load_or_exit
from kss.selector.model import Combinator, SelectorFragment


def _describe(fragment: SelectorFragment) -> str:
    if isinstance(fragment, Combinator):
        return f"combinator {fragment.type.name.lower()} '{fragment.raw}'"
    parts = [f"element '{fragment.raw}'"]
    if fragment.elements:
        parts.append(
            "elements=" + ",".join(f"{d.type.value}:{d.value}" for d in fragment.elements)
        )
    if fragment.attributes:
        parts.append(
            "attributes=" + ",".join(f"[{a.key}|{a.operator}|{a.value}]" for a in fragment.attributes)
        )
    if fragment.pseudos:
        parts.append(
            "pseudos=" + ",".join(f"{p.type.value}:{p.value}" for p in fragment.pseudos)
        )
    return "  ".join(parts)


@click.command()
@click.argument("stylesheet")
@click.option("--timeout", default=10.0, type=float, help="Fetch timeout for URLs.")
def inspect(stylesheet: str, timeout: float) -> None:
    """Parse a stylesheet and display each rule's compiled selectors.

    Fragments are listed most-specific-first, the order used for matching.
    """
    sheet = load_or_exit(stylesheet, timeout=timeout)
    click.echo(f"Rules: {len(sheet)}")
    for rule in sheet:
        click.echo()
        click.echo(f"Rule {rule.index}:")
        for chain in rule.selectors:
            click.echo(f"  selector '{chain.raw}'  specificity={chain.specificity}")
            for position, fragment in enumerate(chain):
                click.echo(f"    {position}: {_describe(fragment)}")
        click.echo(f"  declarations ({len(rule.declarations)}):")
        for declaration in rule.declarations:
            click.echo(f"    {declaration.raw}")
