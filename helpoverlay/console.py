"""
Shared Rich Console singleton for terminal output.

Every module that needs to report something to the user (config warnings,
the non-interactive help dump) imports this one instance instead of building
its own Console. Rich's Console tracks terminal width and colour support, and
a single instance keeps that state consistent. Tests patch
`helpoverlay.config.console` (or pass their own Console to a Surface) to
capture output.

Usage:
    from .console import console
    console.print("[yellow]Warning: ...[/yellow]")
"""

from rich.console import Console

console = Console()
