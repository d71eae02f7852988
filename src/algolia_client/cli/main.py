"""Command-Line Interface for the Algolia client.

Provides commands to search an index, list indices and read top searches
from the Analytics API.
"""

import asyncio

import typer
from rich.console import Console

from algolia_client.api import AnalyticsClient, SearchClient
from algolia_client.cli.display import (
    display_indices,
    display_search_results,
    display_top_searches,
)
from algolia_client.exceptions import AlgoliaException
from algolia_client.util import setup_logging

# Initialize Typer app and Rich console
app = typer.Typer(
    name="algolia",
    help="Query Algolia indices and analytics from the terminal.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def _get_console(use_stderr: bool = False) -> Console:
    """Create a Rich console on stdout or stderr."""
    return Console(stderr=use_stderr)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every request and host retry."
    ),
) -> None:
    """Algolia command line client."""
    setup_logging(verbose)


async def _search_async(
    index_name: str,
    query_string: str,
    limit: int,
    app_id: str | None = None,
    api_key: str | None = None,
) -> None:
    console = _get_console()
    error_console = _get_console(use_stderr=True)
    try:
        client = SearchClient.create(app_id, api_key)
    except ValueError as e:
        error_console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)

    async with client:
        console.print(f"Searching '{index_name}' for: '{query_string}'...")
        try:
            response = await client.init_index(index_name).search(
                query_string, {"hitsPerPage": limit}
            )
        except AlgoliaException as e:
            error_console.print(f"[bold red]Search failed: {e}[/bold red]")
            raise typer.Exit(code=1)
    display_search_results(response, display_limit=limit, console=console)


async def _indices_async(app_id: str | None = None, api_key: str | None = None) -> None:
    error_console = _get_console(use_stderr=True)
    try:
        client = SearchClient.create(app_id, api_key)
    except ValueError as e:
        error_console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)

    async with client:
        try:
            response = await client.list_indices()
        except AlgoliaException as e:
            error_console.print(f"[bold red]Listing indices failed: {e}[/bold red]")
            raise typer.Exit(code=1)
    display_indices(response, console=_get_console())


async def _top_searches_async(
    index_name: str,
    limit: int,
    region: str,
    app_id: str | None = None,
    api_key: str | None = None,
) -> None:
    error_console = _get_console(use_stderr=True)
    try:
        client = AnalyticsClient.create(app_id, api_key, region=region)
    except ValueError as e:
        error_console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)

    async with client:
        try:
            response = await client.get_top_searches(index_name, limit=limit)
        except AlgoliaException as e:
            error_console.print(f"[bold red]Analytics call failed: {e}[/bold red]")
            raise typer.Exit(code=1)
    display_top_searches(index_name, response, console=_get_console())


_APP_ID_OPTION = typer.Option(
    None, "--app-id", help="Application ID. Defaults to $ALGOLIA_APP_ID."
)
_API_KEY_OPTION = typer.Option(
    None, "--api-key", help="API key. Defaults to $ALGOLIA_API_KEY."
)


@app.command("search")
def search_command(
    index_name: str = typer.Argument(..., help="The index to search."),
    query_string: str = typer.Argument("", help="The search query string."),
    limit: int = typer.Option(
        5, "--limit", "-n", help="Number of search results to display."
    ),
    app_id: str | None = _APP_ID_OPTION,
    api_key: str | None = _API_KEY_OPTION,
):
    """Search an index."""
    asyncio.run(_search_async(index_name, query_string, limit, app_id, api_key))


@app.command("indices")
def indices_command(
    app_id: str | None = _APP_ID_OPTION,
    api_key: str | None = _API_KEY_OPTION,
):
    """List the indices of the application."""
    asyncio.run(_indices_async(app_id, api_key))


@app.command("top-searches")
def top_searches_command(
    index_name: str = typer.Argument(..., help="The index to report on."),
    limit: int = typer.Option(10, "--limit", "-n", help="Number of searches."),
    region: str = typer.Option("us", "--region", help="Analytics region: us or de."),
    app_id: str | None = _APP_ID_OPTION,
    api_key: str | None = _API_KEY_OPTION,
):
    """Show the most frequent searches of an index."""
    asyncio.run(_top_searches_async(index_name, limit, region, app_id, api_key))


if __name__ == "__main__":
    app()
