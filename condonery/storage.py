"""
    Storage — JSON files for the portfolio, the user preferences and the
    application config.

    Design Pattern: Facade
    ──────────────────────
    ``StorageManager`` hides the two file-backed stores behind one object,
    which is what ``LogicManager`` and the application bootstrap talk to.

    Read policy (all stores):
        • missing file          → ``None`` (caller starts from defaults)
        • unreadable / invalid  → ``DataConversionError``
    Writes create parent directories and let ``OSError`` propagate.
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .config import Config, UserPrefs
from .exceptions import DataConversionError
from .models.portfolio import Portfolio
from .services.serialization_service import PortfolioSerializer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ── JSON helpers ─────────────────────────────────────────────────

def read_json_file(file_path: PathLike) -> Optional[Any]:
    """
    Load a JSON document.

    Returns:
        The decoded document, or ``None`` if the file does not exist.

    Raises:
        DataConversionError: the file exists but cannot be opened or is not
            valid JSON.
    """
    path = Path(file_path)
    if not path.exists():
        logger.info("%s not found.", path)
        return None
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Error reading from %s: %s", path, e)
        raise DataConversionError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        logger.warning("Error reading from %s: %s", path, e)
        raise DataConversionError(f"Could not read {path}: {e}") from e


def save_json_file(file_path: PathLike, data: Any) -> None:
    """Write ``data`` as indented UTF-8 JSON, creating parent folders."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


# ── Portfolio ────────────────────────────────────────────────────

class JsonPortfolioStorage:
    """Reads and writes a ``Portfolio`` as a JSON file."""

    def __init__(self, file_path: PathLike, serializer: Optional[PortfolioSerializer] = None):
        self._file_path = Path(file_path)
        self._serializer = serializer or PortfolioSerializer()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read_portfolio(self, file_path: Optional[PathLike] = None) -> Optional[Portfolio]:
        path = Path(file_path) if file_path is not None else self._file_path
        data = read_json_file(path)
        if data is None:
            return None
        portfolio = self._serializer.deserialize(data)
        logger.debug("Loaded %r from %s", portfolio, path)
        return portfolio

    def save_portfolio(self, portfolio: Portfolio, file_path: Optional[PathLike] = None) -> None:
        path = Path(file_path) if file_path is not None else self._file_path
        save_json_file(path, self._serializer.serialize(portfolio))
        logger.debug("Saved %r to %s", portfolio, path)


# ── User preferences ─────────────────────────────────────────────

class JsonUserPrefsStorage:
    """Reads and writes ``UserPrefs`` as a JSON file."""

    def __init__(self, file_path: PathLike):
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        data = read_json_file(self._file_path)
        if data is None:
            return None
        try:
            return UserPrefs.from_dict(data)
        except (AttributeError, TypeError, ValueError) as e:
            raise DataConversionError(f"Invalid preferences in {self._file_path}: {e}") from e

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        save_json_file(self._file_path, prefs.to_dict())


# ── Config ───────────────────────────────────────────────────────

def read_config(file_path: PathLike) -> Optional[Config]:
    """Load ``Config`` from ``file_path``; ``None`` if the file is missing."""
    data = read_json_file(file_path)
    if data is None:
        return None
    try:
        return Config.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise DataConversionError(f"Invalid config in {file_path}: {e}") from e


def save_config(config: Config, file_path: PathLike) -> None:
    save_json_file(file_path, config.to_dict())


# ── Facade ───────────────────────────────────────────────────────

class StorageManager:
    """
    Single entry point for persistence.

    Usage:
        storage = StorageManager(JsonPortfolioStorage(path),
                                 JsonUserPrefsStorage(prefs_path))
        portfolio = storage.read_portfolio() or Portfolio()
        storage.save_portfolio(portfolio)
    """

    def __init__(self, portfolio_storage: JsonPortfolioStorage,
                 user_prefs_storage: JsonUserPrefsStorage):
        self._portfolio_storage = portfolio_storage
        self._user_prefs_storage = user_prefs_storage

    # ── Portfolio ──

    @property
    def portfolio_file_path(self) -> Path:
        return self._portfolio_storage.file_path

    def read_portfolio(self) -> Optional[Portfolio]:
        logger.debug("Attempting to read data file: %s", self.portfolio_file_path)
        return self._portfolio_storage.read_portfolio()

    def save_portfolio(self, portfolio: Portfolio) -> None:
        logger.debug("Attempting to write to data file: %s", self.portfolio_file_path)
        self._portfolio_storage.save_portfolio(portfolio)

    # ── Preferences ──

    @property
    def user_prefs_file_path(self) -> Path:
        return self._user_prefs_storage.file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        return self._user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        self._user_prefs_storage.save_user_prefs(prefs)
