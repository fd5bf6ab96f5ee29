"""Runtime configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml

from .load.loader import looks_like_path
from .models.config import Config


def _require_file(path: Path, label: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Missing {label}: {path}")


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration, falling back to canonical defaults when no file is given.

    Relative theme file references are resolved against the config file's directory.
    """
    if config_path is None:
        return Config()

    _require_file(config_path, "config_file")
    with open(config_path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    config = Config.model_validate(data)
    base_dir = config_path.resolve().parent
    return Config(
        theme=_anchor(config.theme, base_dir),
        overrides=[_anchor(item, base_dir) for item in config.overrides],
        log_path=str(base_dir / config.log_path) if config.log_path else None,
    )


def _anchor(reference: str, base_dir: Path) -> str:
    if not looks_like_path(reference):
        return reference
    path = Path(reference).expanduser()
    return str(path if path.is_absolute() else base_dir / path)
