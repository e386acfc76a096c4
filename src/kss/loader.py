"""Stylist: loads KSS documents from data, files, or URLs and announces them.

Each successful parse emits :class:`StylesheetLoaded` on the event bus. A
batch load via :meth:`Stylist.load_all` attempts every reference, reports
each failure with :class:`StylesheetFailed`, and finishes with a single
:class:`LoadCompleted`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import httpx

from kss.config import StylistConfig
from kss.events import EventBus, LoadCompleted, StylesheetFailed, StylesheetLoaded
from kss.parser.errors import ParseError
from kss.stylesheet import Stylesheet, parse_kss, parse_stylesheet

__all__ = ["Stylist"]

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


def _is_json(name: str, content_type: str = "") -> bool:
    return name.lower().endswith(".json") or "json" in content_type.lower()


class Stylist:
    """Loads stylesheets in order and keeps them for later matching."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        bus: EventBus | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or StylistConfig()
        self.bus = bus or EventBus()
        self._client = client
        self._stylesheets: list[Stylesheet] = []

    @property
    def stylesheets(self) -> tuple[Stylesheet, ...]:
        """Loaded stylesheets in load order."""
        return tuple(self._stylesheets)

    # ---- single sources ----

    def load_data(self, document: Mapping[str, Any] | str, source: str = "<data>") -> Stylesheet:
        """Parse a KSS document (mapping or JSON text) and register it."""
        return self._register(parse_stylesheet(document), source)

    def load_text(self, text: str, source: str = "<text>") -> Stylesheet:
        """Parse KSS source text and register it."""
        return self._register(parse_kss(text), source)

    def load(self, reference: str | Path) -> Stylesheet:
        """Load a stylesheet from a local path or an http(s) URL.

        JSON references (by ``.json`` suffix or response content type) are
        read as KSS documents; anything else is parsed as KSS text.
        """
        ref = str(reference)
        if ref.startswith(_URL_SCHEMES):
            text, as_json = self._fetch(ref)
        else:
            text = Path(ref).read_text(encoding=self.config.encoding)
            as_json = _is_json(ref)
        if as_json:
            return self.load_data(text, source=ref)
        return self.load_text(text, source=ref)

    # ---- batches ----

    def load_all(self, references: Iterable[str | Path]) -> list[Stylesheet]:
        """Load every reference; one failure never stops the others."""
        loaded: list[Stylesheet] = []
        failed = 0
        for reference in references:
            ref = str(reference)
            try:
                loaded.append(self.load(ref))
            except ParseError as exc:
                failed += 1
                logger.error("Could not parse KSS %s: %s", ref, exc)
                self.bus.emit(StylesheetFailed(source=ref, error=str(exc), parse_error=exc))
            except (httpx.HTTPError, OSError) as exc:
                failed += 1
                logger.error("Could not load KSS %s: %s", ref, exc)
                self.bus.emit(StylesheetFailed(source=ref, error=str(exc)))
        self.bus.emit(LoadCompleted(loaded=len(loaded), failed=failed))
        return loaded

    # ---- internals ----

    def _register(self, stylesheet: Stylesheet, source: str) -> Stylesheet:
        self._stylesheets.append(stylesheet)
        logger.info("Loaded KSS %s (%d rules)", source, len(stylesheet))
        self.bus.emit(StylesheetLoaded(stylesheet=stylesheet, source=source))
        return stylesheet

    def _fetch(self, url: str) -> tuple[str, bool]:
        if self._client is not None:
            response = self._client.get(url)
        else:
            with httpx.Client(
                timeout=self.config.timeout,
                follow_redirects=self.config.follow_redirects,
                headers=self.config.headers,
            ) as client:
                response = client.get(url)
        response.raise_for_status()
        content_type = response.headers.get("content-type", "")
        return response.text, _is_json(url, content_type)
