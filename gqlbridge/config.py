"""Runtime settings read from the environment.

GQLBRIDGE_SCHEMA               path to the schema SDL file
GQLBRIDGE_SELECTION_DEPTH      object levels expanded below the root field (default 1)
GQLBRIDGE_EXCLUDED_FIELDS      comma-separated heavy fields never expanded
GQLBRIDGE_CONNECTION_SUFFIXES  comma-separated suffixes marking paginated fields
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import ConfigError
from .loader import SCHEMA_PATH
from .selection import (
    DEFAULT_CONNECTION_SUFFIXES,
    DEFAULT_EXCLUDED_FIELDS,
    DEFAULT_MAX_DEPTH,
    SelectionPolicy,
)


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _parse_depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise ConfigError(f"GQLBRIDGE_SELECTION_DEPTH must be an integer, got {value!r}") from None
    if depth < 0:
        raise ConfigError(f"GQLBRIDGE_SELECTION_DEPTH must be >= 0, got {depth}")
    return depth


@dataclass(frozen=True)
class Settings:
    schema_path: Path = SCHEMA_PATH
    selection_depth: int = DEFAULT_MAX_DEPTH
    excluded_fields: frozenset[str] = DEFAULT_EXCLUDED_FIELDS
    connection_suffixes: tuple[str, ...] = DEFAULT_CONNECTION_SUFFIXES

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings, falling back to defaults for unset variables."""
        env = os.environ if environ is None else environ
        overrides: dict = {}

        if env.get("GQLBRIDGE_SCHEMA"):
            overrides["schema_path"] = Path(env["GQLBRIDGE_SCHEMA"])
        if env.get("GQLBRIDGE_SELECTION_DEPTH"):
            overrides["selection_depth"] = _parse_depth(env["GQLBRIDGE_SELECTION_DEPTH"])
        if "GQLBRIDGE_EXCLUDED_FIELDS" in env:
            overrides["excluded_fields"] = frozenset(_split_list(env["GQLBRIDGE_EXCLUDED_FIELDS"]))
        if "GQLBRIDGE_CONNECTION_SUFFIXES" in env:
            overrides["connection_suffixes"] = _split_list(env["GQLBRIDGE_CONNECTION_SUFFIXES"])
        return cls(**overrides)

    def selection_policy(self) -> SelectionPolicy:
        return SelectionPolicy(
            max_depth=self.selection_depth,
            connection_suffixes=self.connection_suffixes,
            excluded_fields=self.excluded_fields,
        )
