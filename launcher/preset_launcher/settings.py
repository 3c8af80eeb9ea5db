from __future__ import annotations
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    config_path: Path = Field(default=Path("launcher.json"), alias="LAUNCHER_CONFIG")
    presets_dir: Path = Field(default=Path("presets"), alias="PRESETS_DIR")
    preset_glob: str = Field(default="*.txt", alias="PRESET_GLOB")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")
    log_file: Optional[Path] = Field(default=None, alias="LOG_FILE")
    log_poll_interval: float = Field(default=0.5, alias="LOG_POLL_INTERVAL")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
