"""
CLI package — command language for managing the portfolio.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with an
                  ``execute()`` method.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_parser import CommandParser
from .commands import (
    Command,
    CommandResult,
    AddPropertyCommand,
    AddClientCommand,
    EditPropertyCommand,
    EditClientCommand,
    EditPropertyDescriptor,
    EditClientDescriptor,
    DeleteCommand,
    ListCommand,
    FindCommand,
    FilterCommand,
    ClearCommand,
    UndoCommand,
    HelpCommand,
    ExitCommand,
    help_text,
)

__all__ = [
    'CommandParser',
    'Command',
    'CommandResult',
    'AddPropertyCommand',
    'AddClientCommand',
    'EditPropertyCommand',
    'EditClientCommand',
    'EditPropertyDescriptor',
    'EditClientDescriptor',
    'DeleteCommand',
    'ListCommand',
    'FindCommand',
    'FilterCommand',
    'ClearCommand',
    'UndoCommand',
    'HelpCommand',
    'ExitCommand',
    'help_text',
]
