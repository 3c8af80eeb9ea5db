from __future__ import annotations
from typing import Callable, List, Optional
from rich.console import Console
from .settings import Settings
from .logging_setup import get_logger
from .fs_layout import build_layout, Layout
from .config_loader import load_config
from .models import LauncherConfig, ModSet, Preset
from .presets import list_presets, parse_preset, select_preset, select_preset_by_name
from .mods import ModResolver
from .keys import KeySynchronizer
from .server import ServerLauncher, build_arguments
from .process_runner import ProcessHandle
from .planner import LaunchPlan
from .menu import ExitMenu, MenuState

log = get_logger("preset_launcher.orch")

class Orchestrator:
    def __init__(self, settings: Settings, *, ask: Optional[Callable[[str], str]] = None,
                 console: Optional[Console] = None):
        self.settings = settings
        self.ask = ask
        self.console = console or Console()
        self._cfg: Optional[LauncherConfig] = None
        self._layout: Optional[Layout] = None

    @property
    def cfg(self) -> LauncherConfig:
        if self._cfg is None:
            self._cfg = load_config(self.settings.config_path)
        return self._cfg

    @property
    def layout(self) -> Layout:
        if self._layout is None:
            self._layout = build_layout(self.cfg)
        return self._layout

    def presets(self) -> List[Preset]:
        return list_presets(self.settings.presets_dir, self.settings.preset_glob)

    def choose_preset(self, name: Optional[str] = None) -> Preset:
        presets = self.presets()
        if name:
            return select_preset_by_name(presets, name)
        return select_preset(presets, ask=self.ask, console=self.console)

    def plan(self, preset: Preset) -> tuple[LaunchPlan, ModSet]:
        mods = parse_preset(preset.path)
        resolver = ModResolver(self.layout)
        global_list = resolver.build(mods.global_mods, "mod")
        server_list = resolver.build(mods.server_mods, "servermod")

        plan = LaunchPlan(
            preset=preset.name,
            executable=str(self.cfg.executable_path),
            global_mods=list(mods.global_mods),
            server_mods=list(mods.server_mods),
            arguments=build_arguments(self.cfg, global_list, server_list),
        )
        for resolved, names in ((global_list, mods.global_mods), (server_list, mods.server_mods)):
            if resolved is not None and len(resolved.paths) < len(names):
                plan.notes.append(f"{len(names) - len(resolved.paths)} -{resolved.flag} mod(s) not found")
        return plan, mods

    def sync_keys(self, mods: ModSet) -> None:
        keys = KeySynchronizer(self.layout)
        keys.purge()
        keys.copy_keys(mods.all_mods)

    def start_server(self, plan: LaunchPlan) -> ProcessHandle:
        return ServerLauncher(self.cfg).start(plan.arguments)

    def exit_menu(self) -> MenuState:
        menu = ExitMenu(
            self.cfg.profiles_dir,
            ask=self.ask,
            console=self.console,
            poll_interval=self.settings.log_poll_interval,
        )
        return menu.run()

    def run(self, preset_name: Optional[str] = None, *, menu: bool = True) -> int:
        log.info("=== Starting Arma 3 preset launcher ===")
        cfg = self.cfg
        preset = self.choose_preset(preset_name)
        plan, mods = self.plan(preset)
        self.sync_keys(mods)
        self.start_server(plan)
        log.info("Server %s launched with preset %s", cfg.profile_name, preset.name)
        if menu:
            self.exit_menu()
        return 0
