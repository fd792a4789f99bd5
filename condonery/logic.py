"""
    LogicManager — the command-execution pipeline.

    Design Patterns applied
    ───────────────────────
    • Facade       – single ``execute(text)`` entry-point for the front-end;
                     hides parsing, undo snapshots and persistence.
    • Memento      – a portfolio snapshot is taken before every command
                     that ``supports_undo`` and kept on success.

    Pipeline:
        parse  →  execute  →  save  →  CommandResult

    ``ParseException`` and ``CommandException`` propagate unchanged.  An
    ``OSError`` while saving is re-raised as ``CommandException`` with the
    fixed file-operation prefix; the command's effect on the in-memory
    portfolio is kept, so memory and disk differ until the next save.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple

from .cli.command_parser import CommandParser
from .cli.commands import CommandResult
from .cli.messages import FILE_OPS_ERROR_MESSAGE
from .config import WindowSettings
from .exceptions import CommandException
from .models.client import Client
from .models.portfolio import Portfolio
from .models.property import Property
from .storage import StorageManager
from .workspace import Workspace

logger = logging.getLogger(__name__)


class LogicManager:
    """
    Runs user commands against a ``Workspace`` and persists the result.

    Usage:
        logic = LogicManager(workspace, storage)
        result = logic.execute("add n/Sunny Villa a/123 Orchard Rd t/luxury")
    """

    def __init__(self, workspace: Workspace, storage: StorageManager,
                 parser: Optional[CommandParser] = None):
        self._workspace = workspace
        self._storage = storage
        self._parser = parser or CommandParser()

    # ── Public API ───────────────────────────────────────────────

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute a single command, then save the portfolio.

        Raises:
            ParseException:   the text is not a valid command.
            CommandException: the command failed, or saving failed.
        """
        logger.info("----------------[USER COMMAND][%s]", command_text)

        command = self._parser.parse(command_text)
        snapshot = self._workspace.snapshot() if command.supports_undo else None

        result = command.execute(self._workspace)

        if snapshot is not None:
            self._workspace.push_history(snapshot)

        try:
            self._storage.save_portfolio(self._workspace.portfolio)
        except OSError as e:
            logger.warning("Saving portfolio failed: %s", e)
            raise CommandException(f"{FILE_OPS_ERROR_MESSAGE}{e}") from e

        logger.info("Result: %s", result.message)
        return result

    # ── Read accessors ───────────────────────────────────────────

    def get_portfolio(self) -> Portfolio:
        """A detached copy of the current portfolio."""
        return self._workspace.snapshot()

    def get_filtered_property_list(self) -> Tuple[Property, ...]:
        return self._workspace.filtered_properties

    def get_filtered_client_list(self) -> Tuple[Client, ...]:
        return self._workspace.filtered_clients

    def resolve_interested_clients(self, prop: Property) -> Tuple[Client, ...]:
        return self._workspace.portfolio.resolve_interested_clients(prop)

    # ── Preferences ──────────────────────────────────────────────

    def get_portfolio_file_path(self) -> Path:
        return self._workspace.user_prefs.portfolio_file_path

    def get_window_settings(self) -> WindowSettings:
        return self._workspace.window_settings

    def set_window_settings(self, settings: WindowSettings) -> None:
        self._workspace.window_settings = settings
