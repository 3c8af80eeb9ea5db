"""
mods.py — Workshop mod path resolution
--------------------------------------
Every mod lives behind a link in <root>/!Workshop/@<name>. The server is
given the link targets, so a moved workshop library only needs relinking.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional
from .errors import BrokenSymlink
from .fs_layout import Layout
from .models import ResolvedModList
from .logging_setup import get_logger

log = get_logger("preset_launcher.mods")


class ModResolver:
    def __init__(self, layout: Layout):
        self.layout = layout

    # ---------------------------------------------------------------------- #
    def resolve(self, name: str) -> Optional[Path]:
        """Return the real content folder of mod `name`, or None if it has no workshop folder."""
        folder = self.layout.mod_folder(name)
        if not (folder.exists() or folder.is_symlink()):
            log.warning("Mod %s not found at %s, skipping", name, folder)
            return None

        if folder.is_symlink() or _is_junction(folder):
            target = Path(os.readlink(folder))
            if not target.is_absolute():
                target = folder.parent / target
            target = Path(os.path.normpath(target))
        else:
            log.debug("%s is a plain folder, using it as is", folder)
            target = folder

        if not target.exists():
            raise BrokenSymlink(f"mod {name}: {folder} points to missing {target}")
        log.debug("Resolved %s -> %s", name, target)
        return target

    # ---------------------------------------------------------------------- #
    def build(self, names: Iterable[str], flag: str) -> Optional[ResolvedModList]:
        """
        Resolve all `names` into one launch argument.

        Returns None for an empty name list so the caller leaves the flag out.
        """
        names = list(names)
        if not names:
            return None
        paths: List[Path] = []
        for name in names:
            target = self.resolve(name)
            if target is not None:
                paths.append(target)
        log.info("-%s: %d of %d mod(s) resolved", flag, len(paths), len(names))
        return ResolvedModList(flag=flag, paths=paths)


def _is_junction(path: Path) -> bool:
    is_junction = getattr(os.path, "isjunction", None)
    return bool(is_junction and is_junction(path))
