"""
presets.py — Preset discovery, selection and parsing
----------------------------------------------------
A preset is a plain text file listing one mod per line:

    # comment, ignored
    CBA_A3          global mod, passed with -mod
    $ace_server     server-side mod, passed with -servermod
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Optional
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from .errors import NoPresetsFound, InvalidPresetName
from .models import ModSet, Preset
from .logging_setup import get_logger

log = get_logger("preset_launcher.presets")

COMMENT_MARKER = "#"
SERVER_MOD_MARKER = "$"


def list_presets(directory: Path, pattern: str = "*.txt") -> List[Preset]:
    """Enumerate preset files in `directory`, numbered from 1 in name order."""
    if not directory.is_dir():
        raise NoPresetsFound(f"presets directory {directory} does not exist")
    files = sorted((p for p in directory.glob(pattern) if p.is_file()), key=lambda p: p.name.lower())
    if not files:
        raise NoPresetsFound(f"no preset files matching {pattern!r} in {directory}")
    return [Preset(index=i, name=p.stem, path=p) for i, p in enumerate(files, start=1)]


def show_presets(presets: List[Preset], console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Available presets")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Preset", style="green")
    for p in presets:
        table.add_row(str(p.index), escape(p.name))
    console.print(table)


def select_preset(
    presets: List[Preset],
    ask: Optional[Callable[[str], str]] = None,
    console: Optional[Console] = None,
) -> Preset:
    """
    Pick a preset interactively.

    A single preset is taken without asking. Otherwise the operator is asked
    for its number until a valid one is given.
    """
    if not presets:
        raise NoPresetsFound("no presets to choose from")
    if len(presets) == 1:
        log.info("Only one preset available, auto-selected: %s", presets[0].name)
        return presets[0]

    console = console or Console()
    ask = ask or (lambda msg: Prompt.ask(msg, console=console))
    show_presets(presets, console)

    by_index = {p.index: p for p in presets}
    while True:
        choice = ask(f"Select a preset [1-{len(presets)}]").strip()
        try:
            idx = int(choice)
        except ValueError:
            console.print(f"[red]'{escape(choice)}' is not a number.[/red]")
            continue
        if idx not in by_index:
            console.print(f"[red]Invalid choice. Please select a number between 1 and {len(presets)}.[/red]")
            continue
        log.info("Selected preset: %s", by_index[idx].name)
        return by_index[idx]


def select_preset_by_name(presets: List[Preset], name: str) -> Preset:
    for p in presets:
        if p.name == name:
            log.info("Selected preset: %s", p.name)
            return p
    raise InvalidPresetName(f"preset {name!r} not found (available: {[p.name for p in presets]})")


def parse_preset(path: Path) -> ModSet:
    mods = ModSet()
    for raw in path.read_text(encoding="utf-8-sig").splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith(COMMENT_MARKER):
            mods.skipped += 1
            continue
        if line.startswith(SERVER_MOD_MARKER):
            name = line[len(SERVER_MOD_MARKER):].strip()
            if not name:
                log.debug("Empty server mod entry in %s, skipping", path.name)
                mods.skipped += 1
                continue
            mods.server_mods.append(name)
            continue
        mods.global_mods.append(line)

    log.info("Preset %s: %d global mod(s), %d server mod(s), %d line(s) skipped",
             path.stem, len(mods.global_mods), len(mods.server_mods), mods.skipped)
    return mods
