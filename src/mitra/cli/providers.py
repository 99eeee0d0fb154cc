"""Provider factory functions for CLI.

Centralizes creation of the response client from environment variables.
Hides configuration details from command implementations.
"""

import os

from rich.console import Console

from ..chat import ResponseClient
from ..llm import DEFAULT_MODEL

# Default console for output
_console = Console()


def get_client(console: Console | None = None) -> ResponseClient | None:
    """Create the response client from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Response client, or None if not configured

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    con = console or _console
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        con.print("[yellow]Warning: GEMINI_API_KEY not set[/yellow]")
        return None

    model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    return ResponseClient.from_api_key(api_key, model=model)


def require_client(console: Console | None = None) -> ResponseClient:
    """Get the response client, exiting if it is not configured.

    Args:
        console: Optional Rich console for output

    Returns:
        Response client

    Raises:
        SystemExit: If GEMINI_API_KEY is not set
    """
    import typer

    con = console or _console
    client = get_client(con)
    if not client:
        con.print("[red]Error: Gemini is not configured (set GEMINI_API_KEY)[/red]")
        raise typer.Exit(code=1)
    return client
