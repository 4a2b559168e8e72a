"""Timestamped output + GitHub Actions formatting."""

import os
import sys
from datetime import datetime

_STATE_SYMBOLS = {
    "pending": "●",
    "success": "✓",
    "failure": "✗",
    "error": "!",
}


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def info(msg: str) -> None:
    print(f"[{_timestamp()}] {msg}", flush=True)


def status(state: str, context: str) -> None:
    """One line per commit status posted."""
    symbol = _STATE_SYMBOLS.get(state, "?")
    info(f"{symbol} {state:<8} {context}")


def group(title: str) -> None:
    if _is_github_actions():
        print(f"::group::{title}", flush=True)
    else:
        info(f"── {title} " + "─" * max(0, 45 - len(title)))


def endgroup() -> None:
    if _is_github_actions():
        print("::endgroup::", flush=True)


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
