from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator, model_validator


class LauncherConfig(BaseModel):
    """
    Launcher configuration as read from the launcher JSON file.

    `root_path` is made absolute (relative roots are taken from the current
    directory). Relative config paths are taken relative to `root_path`,
    which is also the working directory the server is started in.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    root_path: Path = Field(validation_alias=AliasChoices("root_path", "rootPath", "root"))
    executable: str = Field(validation_alias=AliasChoices("executable", "exe", "executableName"))
    port: int = Field(gt=0, strict=True)
    profile_name: str = Field(default="server", validation_alias=AliasChoices("profile_name", "profileName", "profile"))
    basic_config: Path = Field(validation_alias=AliasChoices("basic_config", "basicConfig", "cfg"))
    server_config: Path = Field(validation_alias=AliasChoices("server_config", "serverConfig", "config"))
    profiles_path: Path = Field(validation_alias=AliasChoices("profiles_path", "profilesPath", "profiles"))

    @field_validator("root_path", mode="before")
    @classmethod
    def _root_set(cls, v):
        if v is None or str(v).strip() == "":
            raise ValueError("root path is not set")
        return Path(str(v).strip()).expanduser().resolve()

    @field_validator("executable")
    @classmethod
    def _executable_set(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("executable is not set")
        return v.strip()

    @model_validator(mode="after")
    def _paths_exist(self) -> "LauncherConfig":
        if not self.root_path.is_dir():
            raise ValueError(f"root path {self.root_path} does not exist")
        if not self.executable_path.is_file():
            raise ValueError(f"executable {self.executable!r} not found under {self.root_path}")
        for label, p in (
            ("basic config", self.basic_config_path),
            ("server config", self.server_config_path),
            ("profiles directory", self.profiles_dir),
        ):
            if not p.exists():
                raise ValueError(f"{label} {p} does not exist")
        return self

    def _under_root(self, p: Path) -> Path:
        return (p if p.is_absolute() else self.root_path / p).resolve()

    @property
    def executable_path(self) -> Path:
        return self.root_path / self.executable

    @property
    def basic_config_path(self) -> Path:
        return self._under_root(self.basic_config)

    @property
    def server_config_path(self) -> Path:
        return self._under_root(self.server_config)

    @property
    def profiles_dir(self) -> Path:
        return self._under_root(self.profiles_path)


@dataclass(frozen=True)
class Preset:
    index: int
    name: str
    path: Path


@dataclass
class ModSet:
    global_mods: List[str] = field(default_factory=list)
    server_mods: List[str] = field(default_factory=list)
    skipped: int = 0

    @property
    def all_mods(self) -> List[str]:
        return list(self.global_mods) + list(self.server_mods)


@dataclass(frozen=True)
class ResolvedModList:
    flag: str
    paths: List[Path]

    @property
    def value(self) -> str:
        return "".join(f"{p};" for p in self.paths)

    @property
    def argument(self) -> str:
        return f'-{self.flag}="{self.value}"'
