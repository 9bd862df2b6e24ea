"""
Config loading utilities shared by CLI and programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from paretoswarm.foundation.exceptions import ConfigurationError, DataError


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run configuration as a plain mapping.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise DataError(f"Config file '{config_path}' does not exist.", path=str(config_path))
    suffix = config_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install pyyaml'.") from exc
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    else:
        with config_path.open("r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise DataError(f"Config file '{config_path}' is not valid JSON: {exc}", path=str(config_path)) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file '{config_path}' must hold a mapping, got {type(data).__name__}.",
            "Write the run parameters as top-level keys",
        )
    return data
