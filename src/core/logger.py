"""
RouletteBot - Logger
====================

Tree-style console logging with plain-text log files.

Console lines carry ANSI colors. The same lines, without colors, go to
logs/bot.log; warnings and errors are also copied to logs/bot_error.log
so failed commands can be found without scrolling through draws.

Usage:
    from src.core.logger import log

    log.tree("Roulette Drawn", [
        ("Roulette ID", "3"),
        ("Count", "2"),
    ], emoji="🎲")

    log.error_tree("Roulette Draw Failed", e, [("User", "tester")])

Author: حَـــــنَّـــــا
"""

from datetime import datetime, tzinfo
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Tuple
from zoneinfo import ZoneInfo

from src.core.config import LOGS_DIR, config


# ANSI colors
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
CYAN = "\033[96m"
GRAY = "\033[90m"


class Level(NamedTuple):
    """How a one-line log level is rendered and where it is written."""

    color: str
    emoji: str
    to_error_file: bool


LEVELS: Dict[str, Level] = {
    "info": Level(BLUE, "ℹ️", False),
    "success": Level(GREEN, "✅", False),
    "warning": Level(YELLOW, "⚠️", True),
    "error": Level(RED, "❌", True),
}


class Logger:
    """Tree-style logger writing to the console and to log files."""

    def __init__(self, log_dir: Path = LOGS_DIR, timezone: Optional[tzinfo] = None) -> None:
        self.log_file = log_dir / "bot.log"
        self.error_file = log_dir / "bot_error.log"
        self.timezone = timezone or ZoneInfo(config.TIMEZONE)

    def _timestamp(self) -> str:
        return datetime.now(self.timezone).strftime("%Y-%m-%d %I:%M:%S %p %Z")

    def _write(self, line: str, error: bool) -> None:
        """Append to bot.log, and to bot_error.log for problems."""
        targets = [self.log_file, self.error_file] if error else [self.log_file]
        for path in targets:
            try:
                with open(path, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
            except OSError:
                pass  # Console output already happened

    @staticmethod
    def _format_tree(items: List[Tuple[str, str]]) -> str:
        lines = []
        for i, (key, value) in enumerate(items):
            prefix = "└─" if i == len(items) - 1 else "├─"
            lines.append(f"  {prefix} {key}: {value}")
        return "\n".join(lines)

    def tree(
        self,
        title: str,
        items: List[Tuple[str, str]],
        emoji: str = "ℹ️",
        error: bool = False,
    ) -> None:
        """Log a titled block of key/value lines."""
        timestamp = self._timestamp()
        body = self._format_tree(items)

        console = f"{GRAY}[{timestamp}]{RESET} {emoji} {BOLD}{title}{RESET}"
        plain = f"[{timestamp}] {emoji} {title}"
        if body:
            console += f"\n{CYAN}{body}{RESET}"
            plain += f"\n{body}"

        print(console)
        self._write(plain, error)

    def error_tree(
        self,
        title: str,
        error: BaseException,
        items: Optional[List[Tuple[str, str]]] = None,
    ) -> None:
        """Log an exception with its type and message appended to the tree."""
        details = list(items or [])
        details.append(("Type", type(error).__name__))
        details.append(("Message", str(error)[:200]))
        self.tree(title, details, emoji="❌", error=True)

    def _line(self, level: str, message: str) -> None:
        style = LEVELS[level]
        timestamp = self._timestamp()
        print(f"{GRAY}[{timestamp}]{RESET} {style.color}{style.emoji}{RESET} {message}")
        self._write(f"[{timestamp}] {style.emoji} {message}", style.to_error_file)

    def info(self, message: str) -> None:
        self._line("info", message)

    def success(self, message: str) -> None:
        self._line("success", message)

    def warning(self, message: str) -> None:
        self._line("warning", message)

    def error(self, message: str) -> None:
        self._line("error", message)


log = Logger()
logger = log
