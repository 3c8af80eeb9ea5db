from __future__ import annotations
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from .logging_setup import get_logger

log = get_logger("preset_launcher.proc")

@dataclass
class ProcessHandle:
    name: str
    pid: int

def command_line(executable: Path, args: List[str]) -> str:
    """Join the executable and pre-quoted arguments the way the server parses them."""
    return " ".join([f'"{executable}"', *args])

def posix_argv(executable: Path, args: List[str]) -> List[str]:
    """argv for exec: no shell, so the double quotes around values are dropped."""
    return [str(executable), *(a.replace('"', "") for a in args)]

def spawn_detached(name: str, executable: Path, args: List[str], *, cwd: Optional[Path] = None) -> ProcessHandle:
    """
    Start a process that outlives the launcher. The handle is not kept for
    supervision; only the pid is reported.
    """
    cmdline = command_line(executable, args)
    log.info("Starting %s: %s", name, cmdline)

    if os.name == "nt":
        flags = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        # Windows takes the command line verbatim, keeping -cfg="..." quoting intact
        proc = subprocess.Popen(cmdline, cwd=str(cwd) if cwd else None, creationflags=flags, close_fds=True)
    else:
        proc = subprocess.Popen(
            posix_argv(executable, args),
            cwd=str(cwd) if cwd else None,
            stdin=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    return ProcessHandle(name=name, pid=proc.pid)
