"""
Card rendering shared by the decode and notebook commands.
"""

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel

from lexnote.core.layout import ROW_SIZE


def print_rows(console: Console, entries: list[dict], rows: list[list[int]], full: bool = False):
    """Print entry dicts one row of cards at a time."""
    by_id = {e["id"]: e for e in entries}
    text_key = "full" if full else "summary"
    width = None if full else 36

    for row in rows:
        cards = [
            Panel(by_id[entry_id][text_key].rstrip("\n"), title=f"[bold]{entry_id}[/bold]", width=width)
            for entry_id in row
        ]
        console.print(Columns(cards))

    console.print(f"[dim]{len(entries)} entries, {len(rows)} rows of up to {ROW_SIZE}[/dim]")
