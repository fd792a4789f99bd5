# condonery/exceptions.py


class CondoneryError(Exception):
    """Base class for every error raised by the application."""
    pass


class ValidationError(CondoneryError, ValueError):
    """Raised when a raw string does not satisfy a field's constraints."""
    pass


class NullArgumentError(CondoneryError, TypeError):
    """Raised when an entity is built with a missing required field."""
    pass


class ParseException(CondoneryError):
    """Raised when user input cannot be turned into a command."""
    pass


class CommandException(CondoneryError):
    """Raised when a parsed command cannot be carried out."""
    pass


class DuplicateEntityError(CommandException):
    """Raised when an entity would share its name with another one."""
    pass


class EntityNotFoundError(CommandException):
    """Raised when an entity expected in a directory is absent."""
    pass


class InvalidIndexError(CommandException):
    """Raised when a displayed index does not point at a listed entity."""
    pass


class DataConversionError(CondoneryError):
    """Raised when a stored file cannot be converted back into the model."""
    pass
