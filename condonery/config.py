"""
    Application configuration and user preferences.

    Two files are involved:

        • config.json       – ``Config``: log level, log file, and where the
                              preferences live.
        • preferences.json  – ``UserPrefs``: window geometry and the path of
                              the portfolio data file.

    Both are plain dataclasses with ``to_dict`` / ``from_dict`` so that they
    round-trip through JSON without any schema library.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_FILE = Path("config.json")
DEFAULT_USER_PREFS_FILE = Path("preferences.json")
DEFAULT_PORTFOLIO_FILE = Path("data") / "portfolio.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class WindowSettings:
    """
    Size and position of the application window.

    ``x`` / ``y`` are ``None`` until the window has been placed once.
    """
    width: int = 740
    height: int = 600
    x: Optional[int] = None
    y: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'width': self.width, 'height': self.height, 'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WindowSettings":
        return cls(
            width=int(data.get('width', cls.width)),
            height=int(data.get('height', cls.height)),
            x=_optional_int(data.get('x')),
            y=_optional_int(data.get('y')),
        )


@dataclass
class UserPrefs:
    """
    Preferences persisted between sessions.

    Attributes:
        window:              Last known window geometry.
        portfolio_file_path: Where the portfolio JSON is read and written.
    """
    window: WindowSettings = field(default_factory=WindowSettings)
    portfolio_file_path: Path = DEFAULT_PORTFOLIO_FILE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'window': self.window.to_dict(),
            'portfolio_file_path': str(self.portfolio_file_path),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserPrefs":
        return cls(
            window=WindowSettings.from_dict(data.get('window') or {}),
            portfolio_file_path=Path(data.get('portfolio_file_path', DEFAULT_PORTFOLIO_FILE)),
        )


@dataclass
class Config:
    """
    Top-level application configuration.

    Attributes:
        log_level:            Name of the stdlib logging level.
        user_prefs_file_path: Location of the preferences file.
        log_file:             Rotating log file, or ``None`` for console only.
    """
    log_level: str = "INFO"
    user_prefs_file_path: Path = DEFAULT_USER_PREFS_FILE
    log_file: Optional[Path] = Path("condonery.log")

    def __post_init__(self):
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: '{self.log_level}'.")
        self.log_level = level

    def to_dict(self) -> Dict[str, Any]:
        return {
            'log_level': self.log_level,
            'user_prefs_file_path': str(self.user_prefs_file_path),
            'log_file': str(self.log_file) if self.log_file is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        log_file = data.get('log_file', cls.log_file)
        return cls(
            log_level=data.get('log_level', cls.log_level),
            user_prefs_file_path=Path(data.get('user_prefs_file_path', DEFAULT_USER_PREFS_FILE)),
            log_file=Path(log_file) if log_file is not None else None,
        )


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)
