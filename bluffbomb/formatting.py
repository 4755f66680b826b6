"""Formatting utilities for game output."""


def h2(text: str) -> str:
    """Format a level 2 header."""
    return f"\n## {text}\n"


def separator(width: int = 60) -> str:
    """Create a visual separator line."""
    return f"{'=' * width}"


def round_header(round_num: int, focus: str) -> str:
    """Format a round start header."""
    return f"{separator()}\n💣 Round {round_num} - Focus card: {focus}\n{separator()}"
