"""ANSI styling for the console views."""

from typing import Dict

RESET = "\033[0m"

PALETTE: Dict[str, str] = {
    "heading": "\033[1m",
    "pattern": "\033[96m",
    "success": "\033[92m",
    "failure": "\033[91m",
}


def paint(role: str, text: str) -> str:
    """Wrap ``text`` in the escape code registered for ``role``.

    >>> paint("success", "paid") == "\\033[92mpaid\\033[0m"
    True
    """
    return f"{PALETTE[role]}{text}{RESET}"


def heading(text: str) -> str:
    return paint("heading", text)


def pattern_name(text: str) -> str:
    return paint("pattern", text)


def success(text: str) -> str:
    return paint("success", text)


def failure(text: str) -> str:
    return paint("failure", text)
