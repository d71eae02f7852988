# src/algolia_client/cli/display.py

"""Display and formatting utilities for CLI output."""

import json
import textwrap
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from algolia_client.models.analytics import TopSearchesResponse
from algolia_client.models.search import ListIndicesResponse, SearchResponse

_HIDDEN_ATTRIBUTES = {"objectID", "_highlightResult", "_snippetResult", "_rankingInfo"}


def format_value(value: Any, width: int = 80) -> str:
    """Render one attribute value on at most three wrapped lines.

    Args:
        value: Any JSON value of a record.
        width: The target width for wrapped text.
    """
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    lines = textwrap.wrap(text, width=width, max_lines=3, placeholder=" ...")
    return "\n".join(lines) if lines else '""'


def format_hit(hit: dict[str, Any], width: int = 80) -> str:
    """Render the visible attributes of a hit as `name: value` lines."""
    lines = []
    for name, value in hit.items():
        if name in _HIDDEN_ATTRIBUTES:
            continue
        rendered = format_value(value, width=max(width - len(name) - 2, 20))
        indented = rendered.replace("\n", "\n" + " " * (len(name) + 2))
        lines.append(f"[bold]{name}[/bold]: {indented}")
    return "\n".join(lines) if lines else "[dim](no attributes)[/dim]"


def display_search_results(
    response: SearchResponse,
    display_limit: int = 5,
    console: Console | None = None,
) -> None:
    """Displays search hits using a Panel for each item.

    Args:
        response: The search response containing hits to display.
        display_limit: Maximum number of hits to show.
        console: Console to print to; defaults to stdout.
    """
    console = console or Console()
    console.print(
        Panel(
            f"[bold cyan]Search Query:[/bold cyan] {response.query}",
            expand=False,
            border_style="dim",
        )
    )

    num_results_to_show = min(len(response.hits), display_limit)
    time_info = (
        f"Time: {response.processing_time_ms}ms"
        if response.processing_time_ms is not None
        else ""
    )
    console.print(
        f"Showing {num_results_to_show} of {response.nb_hits} results. {time_info}"
    )

    if not response.hits:
        console.print("[yellow]No results found.[/yellow]")
        return

    for i, hit in enumerate(response.hits[:display_limit]):
        console.print(
            Panel(
                format_hit(hit),
                title=f"[bold green]{hit.get('objectID', f'#{i + 1}')}[/bold green]",
                border_style="green",
                expand=False,
                padding=(0, 1),
            )
        )


def display_indices(response: ListIndicesResponse, console: Console | None = None) -> None:
    """Displays the indices of an application as a table."""
    console = console or Console()
    if not response.items:
        console.print("[yellow]No indices found.[/yellow]")
        return

    table = Table(title="Indices")
    table.add_column("Name", style="cyan")
    table.add_column("Records", justify="right")
    table.add_column("Updated", style="dim")
    table.add_column("Pending tasks", justify="right")
    for index in response.items:
        table.add_row(
            index.name,
            str(index.entries),
            index.updated_at or "",
            str(index.number_of_pending_tasks),
        )
    console.print(table)


def display_top_searches(
    index_name: str, response: TopSearchesResponse, console: Console | None = None
) -> None:
    """Displays the top searches of an index as a table."""
    console = console or Console()
    if not response.searches:
        console.print(f"[yellow]No searches recorded for {index_name}.[/yellow]")
        return

    table = Table(title=f"Top searches on {index_name}")
    table.add_column("Search", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Hits", justify="right")
    for search in response.searches:
        table.add_row(
            search.search or "[dim](empty)[/dim]",
            str(search.count),
            "" if search.nb_hits is None else str(search.nb_hits),
        )
    console.print(table)
