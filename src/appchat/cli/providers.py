"""Factory functions for CLI.

Centralizes creation of configuration, logging and transports from
environment variables. Hides configuration details from command
implementations.
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from ..config import ChatConfig, load_config
from ..transport import TransportAdapter, create_transport

# Default console for output
_console = Console()


def get_config(
    provider: str | None = None,
    endpoint: str | None = None,
    console: Console | None = None,
) -> ChatConfig:
    """Load configuration from the environment and apply CLI overrides.

    Args:
        provider: Provider given on the command line
        endpoint: Endpoint given on the command line
        console: Optional Rich console for output

    Returns:
        Effective configuration

    Raises:
        SystemExit: If the environment holds an invalid value
    """
    con = console or _console
    try:
        config = load_config()
    except (ValueError, ValidationError) as e:
        con.print(f"[red]Error: invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)

    overrides = {}
    if provider:
        overrides["provider"] = provider
    if endpoint:
        overrides["endpoint"] = endpoint
    return config.model_copy(update=overrides) if overrides else config


def configure_logging(level: str) -> None:
    """Route log records through Rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def get_transport(config: ChatConfig) -> TransportAdapter:
    """Create the transport described by the configuration.

    Args:
        config: Effective configuration

    Returns:
        HTTP transport pointed at the configured endpoint
    """
    return create_transport("http", endpoint=config.endpoint, timeout=config.timeout)
