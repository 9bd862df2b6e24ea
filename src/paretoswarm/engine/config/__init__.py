"""Config helpers shared across CLI and runner components."""

from .loader import load_config_file

__all__ = ["load_config_file"]
