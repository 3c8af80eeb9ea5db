"""
keys.py — Server key synchronization
------------------------------------
Clears mod keys left over from the previous launch and copies the .bikey of
every active mod into <root>/Keys so clients running those mods can join.
"""

from __future__ import annotations
import os
import shutil
from pathlib import Path
from typing import Iterable, List, Optional
from .fs_layout import Layout, BASE_KEYS, KEY_SUFFIX
from .logging_setup import get_logger

log = get_logger("preset_launcher.keys")


class KeySynchronizer:
    def __init__(self, layout: Layout):
        self.layout = layout
        self.keys_dir = layout.keys_dir

    # ---------------------------------------------------------------------- #
    def purge(self) -> List[Path]:
        """Delete every key file except the base game keys."""
        self.keys_dir.mkdir(parents=True, exist_ok=True)
        doomed = [
            p for p in self.keys_dir.iterdir()
            if (p.is_file() or p.is_symlink()) and p.name.lower() not in BASE_KEYS
        ]
        if not doomed:
            log.debug("No mod keys to purge in %s", self.keys_dir)
            return []
        for p in doomed:
            p.unlink()
            log.debug("Removed key: %s", p.name)
        log.info("Purged %d key(s) from %s", len(doomed), self.keys_dir)
        return doomed

    # ---------------------------------------------------------------------- #
    def copy_keys(self, mod_names: Iterable[str]) -> List[Path]:
        """
        Copy one key per mod into the keys folder.

        A name clash gets a numeric suffix (foo_1.bikey, foo_2.bikey, ...).
        The counter runs across the whole pass, not per file name.
        """
        mod_names = list(mod_names)
        if not mod_names:
            log.debug("No active mods, no keys to copy")
            return []

        self.keys_dir.mkdir(parents=True, exist_ok=True)
        copied: List[Path] = []
        counter = 0
        for name in mod_names:
            folder = self.layout.mod_folder(name)
            if not folder.exists():
                log.warning("No workshop folder for mod %s, key not copied", name)
                continue
            key_file = self.find_key(folder)
            if key_file is None:
                log.warning("No key found for mod %s", name)
                continue

            target = self.keys_dir / key_file.name
            while target.exists() or target.is_symlink():
                counter += 1
                target = self.keys_dir / f"{key_file.stem}_{counter}{key_file.suffix}"
            shutil.copyfile(key_file, target)
            log.debug("Copied key %s -> %s", key_file, target.name)
            copied.append(target)

        log.info("Copied %d key(s) for %d mod(s)", len(copied), len(mod_names))
        return copied

    # ---------------------------------------------------------------------- #
    @staticmethod
    def find_key(moddir: Path) -> Optional[Path]:
        """First .bikey below `moddir` (case-insensitive), walking in name order."""
        for root, dirs, files in os.walk(moddir):
            dirs.sort()
            for fn in sorted(files):
                if Path(fn).suffix.lower() == KEY_SUFFIX:
                    return Path(root) / fn
        return None
