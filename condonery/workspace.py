"""
    Workspace — the portfolio combined with the active filters.

    Design Pattern: Memento (simplified)
    ─────────────────────────────────────
    The Workspace keeps a history stack of portfolio snapshots so that the
    user can roll back mutating commands with ``undo``.

    Each workspace holds:
        • portfolio   – the authoritative property and client directories
        • filters     – one active predicate per entity kind
        • history     – stack of earlier portfolio snapshots
        • user_prefs  – window geometry and data file location

    Index-based commands resolve against ``filtered(kind)``, i.e. what the
    user currently sees, not against the whole directory.
"""
import logging
from typing import Dict, List, Optional, Tuple

from .config import UserPrefs, WindowSettings
from .models.client import Client
from .models.directory import Directory, Predicate, show_all
from .models.entity import EntityKind
from .models.portfolio import Portfolio
from .models.property import Property

logger = logging.getLogger(__name__)


class Workspace:
    """
    In-memory model the commands operate on.

    Attributes:
        portfolio:  The live portfolio (mutated in place by commands).
        user_prefs: Preferences loaded at startup.
    """

    def __init__(
        self,
        portfolio: Optional[Portfolio] = None,
        user_prefs: Optional[UserPrefs] = None,
        max_history: int = 50,
    ):
        self.portfolio: Portfolio = portfolio.copy() if portfolio is not None else Portfolio()
        self.user_prefs: UserPrefs = user_prefs or UserPrefs()

        self._filters: Dict[EntityKind, Predicate] = {kind: show_all for kind in EntityKind}
        self._history: List[Portfolio] = []
        self._max_history: int = max_history
        logger.debug("Workspace initialized with %r", self.portfolio)

    # ── Directories ──────────────────────────────────────────────

    def directory(self, kind: EntityKind) -> Directory:
        return self.portfolio.directory(kind)

    @property
    def properties(self) -> Directory[Property]:
        return self.portfolio.properties

    @property
    def clients(self) -> Directory[Client]:
        return self.portfolio.clients

    # ── Filtered views ───────────────────────────────────────────

    def filtered(self, kind: EntityKind) -> Tuple:
        """The entities of ``kind`` currently displayed, in directory order."""
        return self.directory(kind).view(self._filters[kind])

    @property
    def filtered_properties(self) -> Tuple[Property, ...]:
        return self.filtered(EntityKind.PROPERTY)

    @property
    def filtered_clients(self) -> Tuple[Client, ...]:
        return self.filtered(EntityKind.CLIENT)

    def update_filter(self, kind: EntityKind, predicate: Predicate) -> None:
        self._filters[kind] = predicate
        logger.info("%s filter set to %r (%d shown)",
                    kind.label.capitalize(), predicate, len(self.filtered(kind)))

    def active_filter(self, kind: EntityKind) -> Predicate:
        return self._filters[kind]

    # ── History ──────────────────────────────────────────────────

    @property
    def history_depth(self) -> int:
        """Number of snapshots available to ``undo``."""
        return len(self._history)

    def snapshot(self) -> Portfolio:
        """A detached copy of the current portfolio."""
        return self.portfolio.copy()

    def push_history(self, snapshot: Portfolio) -> None:
        """Record the state before a successful mutation."""
        if len(self._history) >= self._max_history:
            self._history.pop(0)  # Drop oldest snapshot
        self._history.append(snapshot)

    def undo(self) -> bool:
        """
        Restore the most recent snapshot.

        Returns:
            False if there was nothing to restore.
        """
        if not self._history:
            logger.warning("Nothing to undo.")
            return False
        self.portfolio.reset_data(self._history.pop())
        logger.info("Undo: restored %r (%d left)", self.portfolio, len(self._history))
        return True

    # ── Preferences ──────────────────────────────────────────────

    @property
    def window_settings(self) -> WindowSettings:
        return self.user_prefs.window

    @window_settings.setter
    def window_settings(self, value: WindowSettings) -> None:
        self.user_prefs.window = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Workspace):
            return False
        return (
            self.portfolio == other.portfolio
            and self.user_prefs == other.user_prefs
            and self.filtered_properties == other.filtered_properties
            and self.filtered_clients == other.filtered_clients
        )

    def __repr__(self) -> str:
        return (
            f"Workspace({self.portfolio!r}, "
            f"shown={len(self.filtered_properties)}/{len(self.filtered_clients)}, "
            f"history_depth={self.history_depth})"
        )
