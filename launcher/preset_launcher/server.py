"""
server.py — Builds the server command line and starts the dedicated server
---------------------------------------------------------------------------
"""

from __future__ import annotations
from typing import List, Optional
from .errors import LaunchError
from .models import LauncherConfig, ResolvedModList
from .process_runner import ProcessHandle, spawn_detached
from .logging_setup import get_logger

log = get_logger("preset_launcher.server")


def build_arguments(
    cfg: LauncherConfig,
    mods: Optional[ResolvedModList] = None,
    servermods: Optional[ResolvedModList] = None,
) -> List[str]:
    """Server arguments in fixed order; mod flags only when they carry paths."""
    args = [
        f"-name={cfg.profile_name}",
        f"-port={cfg.port}",
        f'-cfg="{cfg.basic_config_path}"',
        f'-config="{cfg.server_config_path}"',
        f'-profiles="{cfg.profiles_dir}"',
    ]
    for resolved in (mods, servermods):
        if resolved is None:
            continue
        if not resolved.paths:
            log.warning("No -%s folder could be resolved, leaving the flag out", resolved.flag)
            continue
        args.append(resolved.argument)
    return args


class ServerLauncher:
    def __init__(self, cfg: LauncherConfig):
        self.cfg = cfg

    def start(self, args: List[str]) -> ProcessHandle:
        exe = self.cfg.executable_path
        if not exe.is_file():
            raise LaunchError(f"server executable {exe} not found")
        listing = "\n  ".join(args)
        log.debug("Launch arguments:\n  %s", listing)
        try:
            handle = spawn_detached("server", exe, args, cwd=self.cfg.root_path)
        except OSError as e:
            raise LaunchError(f"could not start {exe}: {e}") from e
        log.info("Server started (pid=%s) on port %d", handle.pid, self.cfg.port)
        return handle
