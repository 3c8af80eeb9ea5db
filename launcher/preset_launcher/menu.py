"""
menu.py — Post-launch menu for the server RPT log
-------------------------------------------------
    Enter  finish
    R      open the newest RPT in the default viewer
    P      follow the newest RPT, printing lines matching a pattern
"""

from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Callable, Optional
from rich.console import Console
from rich.markup import escape
from .errors import NoLogFound
from .log_reader import find_latest_log, follow_filtered, open_log
from .logging_setup import get_logger

log = get_logger("preset_launcher.menu")


class MenuState(str, Enum):
    WAITING = "waiting"
    OPENING = "opening"
    FILTERING = "filtering"
    DONE = "done"


KEY_DONE = ""
KEY_OPEN = "r"
KEY_FILTER = "p"


class ExitMenu:
    def __init__(
        self,
        profiles_dir: Path,
        ask: Optional[Callable[[str], str]] = None,
        console: Optional[Console] = None,
        poll_interval: float = 0.5,
        opener: Callable[[Path], None] = open_log,
    ):
        self.profiles_dir = profiles_dir
        self.console = console or Console()
        self.ask = ask or self.console.input
        self.poll_interval = poll_interval
        self.opener = opener
        self.state = MenuState.WAITING

    def next_state(self, key: str) -> MenuState:
        key = key.strip().lower()
        if key == KEY_DONE:
            return MenuState.DONE
        if key == KEY_OPEN:
            return MenuState.OPENING
        if key == KEY_FILTER:
            return MenuState.FILTERING
        return MenuState.WAITING

    def run(self) -> MenuState:
        while self.state is MenuState.WAITING:
            key = self.ask("[bold]Enter[/bold] to exit, [bold]R[/bold] to open the RPT log, "
                           "[bold]P[/bold] to follow it with a search pattern: ")
            self.state = self.next_state(key)
            if self.state is MenuState.WAITING:
                self.console.print(f"[red]Unknown choice {escape(repr(key))}.[/red]")

        if self.state is MenuState.OPENING:
            self._open()
            self.state = MenuState.DONE
        elif self.state is MenuState.FILTERING:
            self._filter()
        return self.state

    def _open(self) -> None:
        try:
            self.opener(find_latest_log(self.profiles_dir))
        except NoLogFound as e:
            log.error("%s", e)

    def _filter(self) -> None:
        try:
            path = find_latest_log(self.profiles_dir)
        except NoLogFound as e:
            log.error("%s", e)
            self.state = MenuState.DONE
            return
        pattern = self.ask("Search pattern (blank shows everything): ")
        self.console.print(f"[green]Following {escape(path.name)}, Ctrl+C to stop.[/green]")
        for line in follow_filtered(path, pattern, poll_interval=self.poll_interval):
            self.console.print(line, markup=False, highlight=False)
