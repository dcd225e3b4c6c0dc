"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from ..session import DEFAULT_SUGGESTIONS, ChatSession, Role, create_chat_session
from .providers import configure_logging, get_config, get_transport

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="appchat",
    help="Chat with the app toolkit assistant from the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_COMMANDS = ("/quit", "/exit", "/q")


def _print_reply(session: ChatSession) -> None:
    last = session.store.last
    if last is None or last.role != Role.ASSISTANT:
        return
    style = "red" if session.error else "green"
    console.print(f"[bold {style}]Assistant[/bold {style}] [dim]({last.provider})[/dim]")
    console.print(Markdown(last.content))
    console.print()


def _print_suggestions() -> None:
    console.print("[dim]Try asking:[/dim]")
    for suggestion in DEFAULT_SUGGESTIONS:
        console.print(f"  [cyan]-[/cyan] {suggestion.text}")
    console.print()


@app.command()
def chat(
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="Assistant provider to start with (e.g. claude, gemini)"
    ),
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Assistant endpoint URL"
    ),
):
    """Interactive chat with the assistant."""
    config = get_config(provider=provider, endpoint=endpoint, console=console)
    configure_logging(config.log_level)

    async def _chat():
        transport = get_transport(config)
        session = create_chat_session(config.provider, transport=transport)

        try:
            console.print("[bold cyan]Appchat[/bold cyan]")
            console.print("[dim]Commands: /clear, /provider NAME, /quit[/dim]\n")
            _print_suggestions()

            while True:
                try:
                    user_input = console.input(
                        f"[bold yellow]You[/bold yellow] [dim]({session.provider})[/dim]: "
                    ).strip()
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input:
                    continue

                if user_input.lower() in EXIT_COMMANDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                if user_input.lower() == "/clear":
                    session.clear_messages()
                    console.print("[dim]History cleared.[/dim]\n")
                    _print_suggestions()
                    continue

                if user_input.lower().startswith("/provider"):
                    parts = user_input.split(maxsplit=1)
                    if len(parts) < 2:
                        console.print(f"[dim]Current provider: {session.provider}[/dim]")
                    else:
                        session.set_provider(parts[1])
                        console.print(f"[dim]Switched to {parts[1]}.[/dim]")
                    continue

                with console.status("[dim]Thinking...[/dim]"):
                    await session.submit_message(user_input)
                _print_reply(session)
        finally:
            await transport.close()

    asyncio.run(_chat())


@app.command()
def ask(
    query: str = typer.Argument(..., help="Question to send"),
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="Assistant provider to use"
    ),
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Assistant endpoint URL"
    ),
):
    """Send a single question and print the reply."""
    config = get_config(provider=provider, endpoint=endpoint, console=console)
    configure_logging(config.log_level)

    async def _ask() -> bool:
        transport = get_transport(config)
        session = create_chat_session(config.provider, transport=transport)
        try:
            await session.submit_message(query)
        finally:
            await transport.close()

        if not session.messages:
            console.print("[yellow]Nothing to send: the question is empty[/yellow]")
            return False

        _print_reply(session)
        return session.error is None

    if not asyncio.run(_ask()):
        raise typer.Exit(code=1)


@app.command()
def suggestions():
    """List the starter prompts offered in an empty chat."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Prompt")
    table.add_column("Category", style="yellow")

    for suggestion in DEFAULT_SUGGESTIONS:
        table.add_row(suggestion.id, suggestion.text, suggestion.category or "")

    console.print(table)


if __name__ == "__main__":
    app()
