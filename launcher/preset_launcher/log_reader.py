from __future__ import annotations
import codecs
import os
import platform
import re
import subprocess
import time
from pathlib import Path
from typing import Callable, Iterator, List, Optional
from .errors import NoLogFound
from .fs_layout import LOG_SUFFIX
from .logging_setup import get_logger

log = get_logger("preset_launcher.logs")

def list_logs(profiles_dir: Path, suffix: str = LOG_SUFFIX) -> List[dict]:
    out = []
    if not profiles_dir.is_dir():
        return out
    for p in sorted(profiles_dir.iterdir()):
        if not (p.is_file() and p.suffix.lower() == suffix):
            continue
        st = p.stat()
        out.append({
            "path": p,
            "size_bytes": st.st_size,
            "modified": st.st_mtime,
        })
    return out

def find_latest_log(profiles_dir: Path, suffix: str = LOG_SUFFIX) -> Path:
    logs = list_logs(profiles_dir, suffix)
    if not logs:
        raise NoLogFound(f"no *{suffix} file in {profiles_dir}")
    latest = max(logs, key=lambda e: e["modified"])
    log.debug("Latest log: %s", latest["path"])
    return latest["path"]

def open_log(path: Path) -> None:
    """Hand the file to the desktop's default viewer."""
    log.info("Opening %s", path)
    if os.name == "nt":
        os.startfile(str(path))  # type: ignore[attr-defined]
    elif platform.system() == "Darwin":
        subprocess.Popen(["open", str(path)])
    else:
        subprocess.Popen(["xdg-open", str(path)])

def follow(path: Path, poll_interval: float = 0.5, sleep: Callable[[float], None] = time.sleep) -> Iterator[str]:
    """
    Yield every line of `path`, then keep yielding lines appended to it.
    Never returns on its own; stop by closing the generator or interrupting.
    """
    pos = 0
    pending = ""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        try:
            size = path.stat().st_size
            # truncated or replaced by the server: start over
            if size < pos:
                pos = 0
                pending = ""
                decoder.reset()
            if size == pos:
                sleep(poll_interval)
                continue
            with path.open("rb") as f:
                f.seek(pos)
                data = f.read()
        except FileNotFoundError:
            # deleted or being rotated: wait for it to come back
            pos = 0
            pending = ""
            decoder.reset()
            sleep(poll_interval)
            continue
        pos += len(data)
        text = pending + decoder.decode(data)
        lines = text.split("\n")
        pending = lines.pop()
        for line in lines:
            yield line.rstrip("\r")

def compile_pattern(pattern: Optional[str]) -> re.Pattern:
    if not pattern or not pattern.strip():
        return re.compile("")
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        log.warning("Pattern %r is not a valid regex (%s), matching it literally", pattern, e)
        return re.compile(re.escape(pattern), re.IGNORECASE)

def follow_filtered(path: Path, pattern: Optional[str], poll_interval: float = 0.5,
                    sleep: Callable[[float], None] = time.sleep) -> Iterator[str]:
    regex = compile_pattern(pattern)
    for line in follow(path, poll_interval=poll_interval, sleep=sleep):
        if regex.search(line):
            yield line
