from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from .models import LauncherConfig

WORKSHOP_DIRNAME = "!Workshop"
KEYS_DIRNAME = "Keys"
MOD_PREFIX = "@"
KEY_SUFFIX = ".bikey"
LOG_SUFFIX = ".rpt"

# base game keys shipped with the server, never purged
BASE_KEYS = frozenset({"a3.bikey", "a3c.bikey", "gm.bikey"})

@dataclass(frozen=True)
class Layout:
    root: Path
    workshop_dir: Path
    keys_dir: Path
    profiles_dir: Path

    def mod_folder(self, mod_name: str) -> Path:
        return self.workshop_dir / f"{MOD_PREFIX}{mod_name}"

def build_layout(cfg: LauncherConfig) -> Layout:
    return Layout(
        root=cfg.root_path,
        workshop_dir=cfg.root_path / WORKSHOP_DIRNAME,
        keys_dir=cfg.root_path / KEYS_DIRNAME,
        profiles_dir=cfg.profiles_dir,
    )
