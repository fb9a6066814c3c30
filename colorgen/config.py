"""
Settings for colorgen runs (YAML). Only the log level is configurable: the colormap name,
light levels, fullbright range and file layouts are fixed.
"""
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_LOG_LEVEL = "WARNING"


def _settings_file() -> Path:
    return Path(__file__).resolve().parent.parent / "config" / "default.yaml"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Read colorgen settings from config/default.yaml (or config_path).
    A missing file means built-in defaults; keys in the file replace defaults section by section.
    """
    path = Path(config_path) if config_path is not None else _settings_file()
    settings = {"logging": {"level": _DEFAULT_LOG_LEVEL}}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    return settings


def get_log_level(config: dict[str, Any]) -> str:
    return str(config.get("logging", {}).get("level", _DEFAULT_LOG_LEVEL)).upper()
