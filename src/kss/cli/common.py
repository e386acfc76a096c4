"""Helpers shared by CLI commands."""

from __future__ import annotations

import sys

import click
import httpx

from kss.config import StylistConfig
from kss.loader import Stylist
from kss.parser.errors import ParseError
from kss.stylesheet import Stylesheet


def load_or_exit(reference: str, timeout: float = 10.0) -> Stylesheet:
    """Load one stylesheet, printing the error and exiting 1 on failure."""
    stylist = Stylist(StylistConfig(timeout=timeout))
    try:
        return stylist.load(reference)
    except ParseError as exc:
        where = f" (rule {exc.rule_index})" if exc.rule_index is not None else ""
        click.echo(f"Parse error{where}: {exc}", err=True)
        sys.exit(1)
    except (httpx.HTTPError, OSError) as exc:
        click.echo(f"Could not load {reference}: {exc}", err=True)
        sys.exit(1)
