"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from ..chat import ChatController
from ..i18n import LANGUAGE_NAMES, Language, text
from .providers import require_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="mitra",
    help="Bilingual (English/Bengali) mental health support chat backed by Gemini",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_COMMANDS = ("exit", "quit", "q")
LANGUAGE_COMMAND = "/lang"


def _console_debug(level: str, component: str, message: str) -> None:
    """Print warnings and errors from the chat core."""
    if level == "warning":
        console.print(f"[yellow]\\[{component}] {escape(message)}[/yellow]")
    elif level == "error":
        console.print(f"[red]\\[{component}] {escape(message)}[/red]")


@app.command(name="tui")
def tui_command(
    language: Language = typer.Option(
        Language.ENGLISH,
        "--language",
        "-L",
        help="Initial UI language: en (English) or bn (Bengali)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat."""
    async def _tui():
        from ..ui import run_textual_tui

        client = require_client(console)
        controller = ChatController(client, language=language)
        await run_textual_tui(controller, log_level=log_level)
        console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    language: Language = typer.Option(
        Language.ENGLISH,
        "--language",
        "-L",
        help="Initial UI language: en (English) or bn (Bengali)"
    ),
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Your name (skips the name prompt)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print warnings and errors from the model client"
    ),
):
    """Plain console chat, without the full-screen UI."""
    async def _chat():
        client = require_client(console)
        controller = ChatController(client, language=language)
        if verbose:
            controller.set_debug_callback(_console_debug)
        session = controller.session

        try:
            console.print(f"[bold cyan]{escape(text(session.language, 'app_title'))}[/bold cyan]")
            console.print(
                f"[dim]Type '{LANGUAGE_COMMAND}' to switch language, "
                "'exit', 'quit', or 'q' to leave[/dim]\n"
            )

            if name:
                controller.submit_name(name)

            while controller.gated:
                console.print(f"[bold]{escape(text(session.language, 'name_prompt_title'))}[/bold]")
                entered = console.input(f"{escape(text(session.language, 'name_prompt_description'))} ")
                if entered.strip().lower() == LANGUAGE_COMMAND:
                    controller.toggle_language()
                    continue
                controller.submit_name(entered)

            welcome = text(session.language, "welcome_user", name=session.display_name)
            console.print(f"[green]{escape(welcome)}[/green]\n")

            while True:
                you = text(session.language, "you_label")
                user_input = console.input(f"[bold yellow]{escape(you)}:[/bold yellow] ")
                command = user_input.strip().lower()

                if not command:
                    continue

                if command in EXIT_COMMANDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                if command == LANGUAGE_COMMAND:
                    switched = controller.toggle_language()
                    console.print(f"[dim]{LANGUAGE_NAMES[switched]}[/dim]")
                    continue

                with console.status("[dim]...[/dim]"):
                    reply = await controller.send(user_input)

                if reply is not None:
                    assistant = text(session.language, "assistant_label")
                    console.print(f"[bold green]{escape(assistant)}:[/bold green] {escape(reply.text)}\n")

        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Goodbye![/dim]")
        finally:
            await controller.close()

    asyncio.run(_chat())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
