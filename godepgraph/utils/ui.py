"""Central UI handler for godepgraph.

Single source of truth for Rich console styling. The console writes to
stderr; stdout is reserved for the DOT graph.

Usage:
    from godepgraph.utils.ui import console, print_header

    console.print("[root]example.com/app[/root]")
"""

import sys

from rich.console import Console
from rich.theme import Theme

GODEPGRAPH_THEME = Theme({
    "root": "bold magenta",
    "stdlib": "bold green",
    "cgo": "bold yellow",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=GODEPGRAPH_THEME,
    stderr=True,
    force_terminal=sys.stderr.isatty(),
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")
