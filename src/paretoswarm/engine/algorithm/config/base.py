"""Base utilities for algorithm configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from difflib import get_close_matches
from typing import Any, Dict, Tuple

from paretoswarm.foundation.exceptions import ConfigurationError, MissingConfigError


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    """Validate that required fields are present in configuration."""
    missing = [field for field in fields if cfg.get(field) is None]
    if missing:
        raise MissingConfigError(missing[0], f"{name}Config")


def _reject_unknown_keys(data: Dict[str, Any], config_type: type, name: str) -> None:
    known = [f.name for f in fields(config_type)]
    unknown = sorted(set(data) - set(known))
    if not unknown:
        return
    key = unknown[0]
    matches = get_close_matches(key, known, n=1, cutoff=0.6)
    suggestion = f"Did you mean '{matches[0]}'?" if matches else f"Known keys: {', '.join(known)}"
    raise ConfigurationError(f"Unknown {name} configuration key '{key}'.", suggestion, {"unknown": unknown})


__all__ = ["_SerializableConfig", "_require_fields", "_reject_unknown_keys"]
