from __future__ import annotations
import argparse
import json
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from .settings import Settings
from .logging_setup import setup_logging, get_logger
from .errors import LauncherError
from .orchestrator import Orchestrator
from .log_reader import find_latest_log, follow_filtered, open_log

log = get_logger("preset_launcher.cli")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arma-preset-launcher")
    parser.add_argument("--config", type=Path, help="Launcher JSON config (default: $LAUNCHER_CONFIG or launcher.json)")
    parser.add_argument("--presets-dir", type=Path, help="Directory holding preset files (default: $PRESETS_DIR or presets)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="Select preset, sync keys, start the server")
    run_p.add_argument("--preset", help="Preset name; skips the selection prompt")
    run_p.add_argument("--no-menu", action="store_true", help="Exit right after the server started")
    run_p.add_argument("--dry-run", action="store_true", help="Print the launch plan; do not touch keys or start the server")

    plan_p = sub.add_parser("plan", help="Print the launch plan as JSON and exit")
    plan_p.add_argument("--preset", help="Preset name; skips the selection prompt")

    sub.add_parser("presets", help="List available presets")

    log_p = sub.add_parser("log", help="View the newest server RPT log")
    log_sub = log_p.add_subparsers(dest="log_cmd", required=True)
    log_sub.add_parser("open", help="Open the RPT in the default viewer")
    filter_p = log_sub.add_parser("filter", help="Follow the RPT, printing matching lines")
    filter_p.add_argument("--pattern", default="", help="Regex to match (case-insensitive); blank matches all")

    return parser

def _print_plan(plan) -> int:
    print(json.dumps(plan.to_dict(), indent=2, ensure_ascii=False))
    return 0

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    if args.config:
        settings.config_path = args.config
    if args.presets_dir:
        settings.presets_dir = args.presets_dir
    setup_logging(settings)

    console = Console()
    orch = Orchestrator(settings, console=console)
    try:
        if args.cmd == "presets":
            for p in orch.presets():
                console.print(f"{p.index:>3}  {p.name}", markup=False)
            return 0

        if args.cmd == "plan" or (args.cmd == "run" and args.dry_run):
            plan, _ = orch.plan(orch.choose_preset(args.preset))
            return _print_plan(plan)

        if args.cmd == "run":
            return orch.run(args.preset, menu=not args.no_menu)

        if args.cmd == "log":
            path = find_latest_log(orch.cfg.profiles_dir)
            if args.log_cmd == "open":
                open_log(path)
                return 0
            console.print(f"[green]Following {escape(path.name)}, Ctrl+C to stop.[/green]")
            for line in follow_filtered(path, args.pattern, poll_interval=settings.log_poll_interval):
                console.print(line, markup=False, highlight=False)
            return 0
    except LauncherError as e:
        log.error("%s", e)
        return 1
    except KeyboardInterrupt:
        log.info("Interrupted")
        return 130

    return 2
