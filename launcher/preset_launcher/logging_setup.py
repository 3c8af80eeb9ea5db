from __future__ import annotations
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from rich.console import Console
from rich.logging import RichHandler
from .settings import Settings

class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.log_level.upper())

    plain = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if settings.log_json:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(_JsonFormatter())
    else:
        # warnings and errors get their own colour on the console
        ch = RichHandler(console=Console(stderr=True), show_path=False, markup=False, rich_tracebacks=False)
        ch.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))
    root.addHandler(ch)

    if settings.log_file:
        log_path = settings.log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(_JsonFormatter() if settings.log_json else plain)
        fh.setLevel(settings.log_level.upper())
        root.addHandler(fh)

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
