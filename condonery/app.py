"""Command-line front-end (Typer + Rich).

Bootstraps config, preferences, storage and the workspace, then either runs
an interactive shell or a single command:

    condonery [--config PATH]                   interactive shell
    condonery [--config PATH] exec "list -c"    one command, then exit
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .cli.commands import CommandResult, help_text
from .config import DEFAULT_CONFIG_FILE, Config, UserPrefs, WindowSettings
from .exceptions import CommandException, DataConversionError, ParseException
from .logging_setup import configure_logging
from .logic import LogicManager
from .models.client import Client
from .models.entity import EntityKind
from .models.portfolio import Portfolio
from .models.property import Property
from .storage import (
    JsonPortfolioStorage,
    JsonUserPrefsStorage,
    StorageManager,
    read_config,
    save_config,
)
from .workspace import Workspace

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Condonery: manage property listings and interested clients.",
)

_console = Console()


# ── Bootstrap ────────────────────────────────────────────────────

@dataclass
class Application:
    """Everything a running session needs."""
    config: Config
    storage: StorageManager
    workspace: Workspace
    logic: LogicManager


def load_config(config_path: Path) -> Config:
    """Read the config file, falling back to (and writing) defaults."""
    try:
        config = read_config(config_path)
    except DataConversionError as e:
        logger.warning("Config file at %s is not in the correct format. "
                       "Using default config properties. (%s)", config_path, e)
        return Config()

    if config is None:
        config = Config()
        try:
            save_config(config, config_path)
        except OSError as e:
            logger.warning("Failed to save config file: %s", e)
    return config


def load_user_prefs(storage: JsonUserPrefsStorage) -> UserPrefs:
    """Read preferences, falling back to defaults; always writes them back."""
    try:
        prefs = storage.read_user_prefs()
    except DataConversionError as e:
        logger.warning("Preferences file at %s is not in the correct format. "
                       "Using default preferences. (%s)", storage.file_path, e)
        prefs = None

    prefs = prefs or UserPrefs()
    try:
        storage.save_user_prefs(prefs)
    except OSError as e:
        logger.warning("Failed to save preferences file: %s", e)
    return prefs


def init_app(config_path: Path, console: Optional[Console] = None) -> Application:
    """
    Build an ``Application`` from the config file at ``config_path``.

    Raises:
        DataConversionError: the portfolio file exists but cannot be read.
        OSError: the log file cannot be created.
    """
    config = load_config(config_path)
    configure_logging(config.log_level, config.log_file, console=console)
    logger.info("=============================[ Initializing Condonery ]===========================")

    prefs_storage = JsonUserPrefsStorage(config.user_prefs_file_path)
    prefs = load_user_prefs(prefs_storage)
    storage = StorageManager(JsonPortfolioStorage(prefs.portfolio_file_path), prefs_storage)

    portfolio = storage.read_portfolio()
    if portfolio is None:
        logger.info("Data file not found. Will be starting with an empty portfolio")
        portfolio = Portfolio()

    workspace = Workspace(portfolio, prefs)
    return Application(config, storage, workspace, LogicManager(workspace, storage))


def stop_app(application: Application, console: Console) -> None:
    """Record the terminal size, then save preferences and the portfolio."""
    logger.info("============================ [ Stopping Condonery ] =============================")
    previous = application.logic.get_window_settings()
    application.logic.set_window_settings(WindowSettings(
        width=console.size.width, height=console.size.height, x=previous.x, y=previous.y,
    ))
    try:
        application.storage.save_user_prefs(application.workspace.user_prefs)
        application.storage.save_portfolio(application.workspace.portfolio)
    except OSError as e:
        logger.error("Failed to save on exit: %s", e)


# ── Rendering ────────────────────────────────────────────────────

def print_banner(console: Console) -> None:
    title = Text("Condonery", style="bold cyan")
    subtitle = Text("Properties • Clients • Interest", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _joined(values: Iterable[str]) -> Text:
    return Text(", ".join(sorted(values)))


def build_property_table(properties: Iterable[Property], logic: LogicManager) -> Table:
    table = Table(title="Properties")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="white")
    table.add_column("Tags", style="green")
    table.add_column("Interested Clients", style="magenta")
    for i, prop in enumerate(properties, start=1):
        clients = [c.name.value for c in logic.resolve_interested_clients(prop)]
        table.add_row(str(i), Text(prop.name.value), Text(prop.address.value),
                      _joined(prop.tag_names), _joined(clients))
    return table


def build_client_table(clients: Iterable[Client]) -> Table:
    table = Table(title="Clients")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Phone", style="white")
    table.add_column("Email", style="white")
    table.add_column("Address", style="white")
    table.add_column("Tags", style="green")
    for i, client in enumerate(clients, start=1):
        table.add_row(str(i), Text(client.name.value), Text(client.phone.value),
                      Text(client.email.value), Text(client.address.value),
                      _joined(client.tag_names))
    return table


def render_list(console: Console, logic: LogicManager, kind: EntityKind) -> None:
    if kind is EntityKind.PROPERTY:
        console.print(build_property_table(logic.get_filtered_property_list(), logic))
    else:
        console.print(build_client_table(logic.get_filtered_client_list()))


def render_result(console: Console, logic: LogicManager, result: CommandResult) -> None:
    console.print(Text(result.message, style="bold"))
    if result.show_help:
        console.print(Panel(Text(help_text()), title="Help", border_style="yellow"))
    if result.view is not None:
        render_list(console, logic, result.view)


def render_error(console: Console, error) -> None:
    console.print(Text(str(error), style="red"))


# ── Shell ────────────────────────────────────────────────────────

def run_shell(application: Application, console: Console) -> None:
    """Read-execute-print loop; ``exit`` or end of input stops it."""
    print_banner(console)
    render_list(console, application.logic, EntityKind.PROPERTY)

    while True:
        try:
            text = console.input("[bold cyan]condonery>[/] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not text.strip():
            continue

        try:
            result = application.logic.execute(text)
        except (ParseException, CommandException) as e:
            render_error(console, e)
            continue

        render_result(console, application.logic, result)
        if result.exit:
            break

    stop_app(application, console)


def _start(config_path: Path) -> Application:
    try:
        return init_app(config_path)
    except DataConversionError as e:
        render_error(_console, f"Could not load the portfolio: {e}")
        raise typer.Exit(code=1)
    except OSError as e:
        # Log directory or handler file could not be created.
        render_error(_console, f"Could not start Condonery: {e}")
        raise typer.Exit(code=1)


# ── Typer commands ───────────────────────────────────────────────

@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        DEFAULT_CONFIG_FILE, "--config", "-C", help="Path to the config JSON file.",
    ),
) -> None:
    """Start the interactive shell unless a subcommand is given."""
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        run_shell(_start(config), _console)


@app.command("exec")
def exec_command(
    ctx: typer.Context,
    command_text: str = typer.Argument(..., help="Command to run, e.g. \"list -c\"."),
) -> None:
    """Run a single command and exit."""
    application = _start(ctx.obj)
    try:
        result = application.logic.execute(command_text)
    except (ParseException, CommandException) as e:
        render_error(_console, e)
        raise typer.Exit(code=1)
    render_result(_console, application.logic, result)


def main() -> None:
    app()
