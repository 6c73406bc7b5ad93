"""Central UI handler for strongpass.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.
"""

import sys

from rich.console import Console
from rich.theme import Theme

STRONGPASS_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "cmd": "bold magenta",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=STRONGPASS_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_error(msg: str) -> None:
    console.print(f"[error]ERROR:[/error] {msg}", highlight=False)


def print_warning(msg: str) -> None:
    console.print(f"[warning]WARNING:[/warning] {msg}", highlight=False)


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {msg}", highlight=False)
