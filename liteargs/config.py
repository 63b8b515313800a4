"""Token configuration for recognising long and short form arguments."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SECONDARY_PREFIX",
    "DEFAULT_VALUE_SEPARATOR",
    "TokenConfig",
    "load_token_config",
]

_CONFIG_ENV = "LITEARGS_CONFIG"

DEFAULT_PREFIX = "--"
DEFAULT_SECONDARY_PREFIX = "-"
DEFAULT_VALUE_SEPARATOR = "="


@dataclass(frozen=True, slots=True)
class TokenConfig:
    prefix: str = DEFAULT_PREFIX
    secondary_prefix: str = DEFAULT_SECONDARY_PREFIX
    value_separator: str = DEFAULT_VALUE_SEPARATOR

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenConfig":
        """Build a config from a mapping, ignoring unknown or non-string keys."""

        base = cls()
        if not isinstance(data, dict):
            return base
        overrides: Dict[str, str] = {}
        for key in ("prefix", "secondary_prefix", "value_separator"):
            raw = data.get(key)
            if isinstance(raw, str) and raw:
                overrides[key] = raw
        return replace(base, **overrides)

    def with_overrides(
        self,
        *,
        prefix: Optional[str] = None,
        secondary_prefix: Optional[str] = None,
        value_separator: Optional[str] = None,
    ) -> "TokenConfig":
        overrides = {
            key: value
            for key, value in (
                ("prefix", prefix),
                ("secondary_prefix", secondary_prefix),
                ("value_separator", value_separator),
            )
            if value
        }
        return replace(self, **overrides)


def _candidate_paths(explicit: Optional[Path]) -> Iterable[Path]:
    if explicit is not None:
        yield explicit
        return
    env_path = os.getenv(_CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()


def load_token_config(path: Optional[Path] = None) -> TokenConfig:
    """Load tokens from ``path`` or ``$LITEARGS_CONFIG``, else the defaults.

    A named file that is missing or not a JSON object raises ``ValueError``.
    """

    for candidate in _candidate_paths(path):
        try:
            data = json.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ValueError(f"Cannot read token config {candidate}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Token config {candidate} must contain a JSON object.")
        return TokenConfig.from_dict(data)
    return TokenConfig()
