"""Formatting helpers for inline code excerpts."""

from collections.abc import Sequence

MESSAGE_LIMIT = 2_000
SAFE_BOUNDARY = 100
EMPTY_PLACEHOLDER = "Couldn't find any lines"
ELLIPSIS = "…"
FENCE = "```"

_ANSI_GRAY = "\x1b[30m"
_ANSI_RESET = "\x1b[0m"


def trim_leading_indent(lines: Sequence[str]) -> list[str]:
    """Remove the indentation shared by every non-blank line."""
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    if not indents:
        return list(lines)
    shared = min(indents)
    return [line[shared:] for line in lines]


def truncate_lines(lines: Sequence[str], max_length: int) -> list[str]:
    """Keep leading lines while their newline-joined length fits in ``max_length``."""
    kept: list[str] = []
    total = 0
    for line in lines:
        cost = len(line) + (1 if kept else 0)
        if total + cost > max_length:
            break
        kept.append(line)
        total += cost
    return kept


def format_line(line: str, start_line: int, end_line: int, index: int, ansi: bool = False) -> str:
    width = len(str(max(start_line, end_line)))
    number = str(start_line + index).rjust(width)
    if ansi:
        number = f"{_ANSI_GRAY}{number}{_ANSI_RESET}"
    return f"{number} | {line}"


def generate_header(path: str, start_line: int, end_line: int, ellipsed: bool = False) -> str:
    line_range = f"L{start_line}" if end_line <= start_line else f"L{start_line}-L{end_line}"
    return f"`{path}` {line_range}{ELLIPSIS if ellipsed else ''}"


def code_block(language: str, content: str) -> str:
    return f"{FENCE}{language}\n{content}\n{FENCE}"
