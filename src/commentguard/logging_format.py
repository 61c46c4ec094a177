"""Structured console output for gateway commands."""

import sys

import click

# Box drawing characters
LINE_HEAVY = "\u2501"  # ━
LINE_LIGHT = "\u2500"  # ─
CORNER_TL = "\u250c"   # ┌
CORNER_TR = "\u2510"   # ┐
CORNER_BL = "\u2514"   # └
CORNER_BR = "\u2518"   # ┘
VERT = "\u2502"        # │

# Status icons
ICON_OK = "\u2713"     # ✓
ICON_FAIL = "\u2717"   # ✗

# Width for boxes
WIDTH = 60


class ConsoleOutput:
    """Structured console output for Akismet requests."""

    def __init__(self):
        # Use UTF-8 stdout for Windows compatibility
        if sys.platform == "win32":
            sys.stdout.reconfigure(encoding='utf-8')

    def request_header(self, action: str, user_ip: str, author: str = None) -> None:
        """Print request header."""
        line = LINE_HEAVY * WIDTH

        click.echo(f"\n{line}")
        click.echo(f" AKISMET {action.upper()}")
        click.echo(f" IP: {user_ip}")
        if author:
            click.echo(f" Author: {author}")
        click.echo(line)

    def result_box(self, status: str, ok: bool, detail: str = "") -> None:
        """Print final result box."""
        inner_width = WIDTH - 2
        icon = ICON_OK if ok else ICON_FAIL
        text = f"{icon} {status}"
        if detail:
            text += f" ({detail})"
        text = text[:inner_width - 2]
        padding = inner_width - len(text) - 1

        click.echo()
        click.echo(f"{CORNER_TL}{LINE_LIGHT * inner_width}{CORNER_TR}")
        click.echo(f"{VERT} {text}{' ' * padding}{VERT}")
        click.echo(f"{CORNER_BL}{LINE_LIGHT * inner_width}{CORNER_BR}")
        click.echo()

    def info(self, message: str) -> None:
        """Print info message."""
        click.echo(f" {ICON_OK} {message}")

    def error(self, message: str) -> None:
        """Print error message."""
        click.echo(f" {ICON_FAIL} {message}", err=True)

    def status(self, message: str) -> None:
        """Print status message without icon."""
        click.echo(f" {message}")


# Global instance
console = ConsoleOutput()
