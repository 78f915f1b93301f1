"""ANSI color helpers for the card renderer."""

from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
BLUE = "\033[34m"
CYAN = "\033[36m"
GREEN = "\033[32m"
WHITE = "\033[37m"
YELLOW = "\033[33m"

BORDER = BLUE
LABEL = BOLD + WHITE
VALUE = GREEN
BINARY = YELLOW
HEADER = BOLD + CYAN


def paint(text: str, style: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{style}{text}{RESET}"
