from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StylistConfig:
    timeout: float = 10.0  # seconds, per fetched stylesheet
    follow_redirects: bool = True
    headers: dict[str, str] = field(default_factory=dict)
    encoding: str = "utf-8"
