"""
print_upcoming.py
-----------------
Terminal view of the launch page: populates the rocket list, renders the
launches for an optional rocket name and prints both.

    python -m src.print_upcoming "Falcon 9 Block 5"
"""

from __future__ import annotations

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from src.dom import Element, LaunchPage
from src.fetch_upcoming import Fetcher, fetch_upcoming
from src.populate_dropdown import populate_rocket_dropdown
from src.render_launches import RenderOutcome, render_filtered_launches
from src.utils import setup_logging

console = Console()


def print_card(card: Element) -> None:
    title, *lines = card.children
    console.print(f"[bold cyan]{escape(title.text)}[/bold cyan]", highlight=False)
    for line in lines:
        console.print(f"  {line.text}", highlight=False, markup=False)
    console.print()


def show(page: LaunchPage, rocket: Optional[str] = None, fetch: Fetcher = fetch_upcoming) -> RenderOutcome:
    names = populate_rocket_dropdown(page.select, fetch=fetch)
    console.print(f"Rockets available: [cyan]{len(names)}[/cyan]")
    for name in names:
        console.print(f"  - {name}", highlight=False, markup=False)
    console.print()

    page.select.value = rocket or ""
    outcome = render_filtered_launches(page.select, page.container, fetch=fetch)
    if outcome is RenderOutcome.ERROR:
        console.print(f"[red]{escape(page.container.text_content)}[/red]")
    elif outcome is RenderOutcome.EMPTY:
        console.print(f"[yellow]{escape(page.container.text_content)}[/yellow]")
    else:
        for card in page.container.children:
            print_card(card)
    return outcome


def main(argv: List[str]) -> int:
    setup_logging(log_file=None)
    rocket = " ".join(argv).strip() or None
    outcome = show(LaunchPage(), rocket)
    return 1 if outcome is RenderOutcome.ERROR else 0


if __name__ == "__main__":
    try:
        raise SystemExit(main(sys.argv[1:]))
    except KeyboardInterrupt:
        console.print("[red]Interrupted[/red]")
        raise SystemExit(130)
