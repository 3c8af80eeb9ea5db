from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict
from pydantic import ValidationError
from .errors import ConfigError
from .models import LauncherConfig
from .logging_setup import get_logger

log = get_logger("preset_launcher.config")

def load_json(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config root must be an object")
    return data

def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(x) for x in e.get("loc", ())) or "config"
        parts.append(f"{loc}: {e.get('msg')}")
    return "; ".join(parts)

def load_config(config_path: Path) -> LauncherConfig:
    log.info("Loading config: %s", config_path)
    if not config_path.is_file():
        raise ConfigError(f"config file {config_path} not found")
    data = load_json(config_path)
    try:
        cfg = LauncherConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {config_path}: {_describe(e)}") from e
    log.info("Server root: %s (executable=%s, port=%d, profile=%s)",
             cfg.root_path, cfg.executable, cfg.port, cfg.profile_name)
    return cfg
