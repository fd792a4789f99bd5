"""
Condonery — a command-line manager for property listings and the clients
interested in them.

Public API:
    Workspace       – portfolio + active filters + undo history
    LogicManager    – parse → execute → persist (Facade)
    StorageManager  – JSON persistence for portfolio and preferences
    Config          – application configuration
    UserPrefs       – window settings and data file location
"""
from .config import Config, UserPrefs, WindowSettings
from .logic import LogicManager
from .storage import JsonPortfolioStorage, JsonUserPrefsStorage, StorageManager
from .workspace import Workspace

__version__ = '1.0.0'

__all__ = [
    'Config',
    'UserPrefs',
    'WindowSettings',
    'LogicManager',
    'JsonPortfolioStorage',
    'JsonUserPrefsStorage',
    'StorageManager',
    'Workspace',
]
