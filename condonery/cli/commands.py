"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each user action is an object built by ``CommandParser`` with already
    validated arguments.  Every command has:
        • ``execute(workspace) → CommandResult``  — perform the action
        • ``supports_undo``                       — whether ``LogicManager``
                                                    should snapshot first

    Semantic failures raise ``CommandException`` (or one of its subclasses)
    and leave the workspace untouched.

    Supported commands:
    ───────────────────
        add    [-p] n/NAME a/ADDRESS [t/TAG]... [ic/CLIENT]...
        add    -c   n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...
        edit   [-p|-c] INDEX [field prefixes]...
        delete [-p|-c] INDEX
        list   [-p|-c]
        find   [-p|-c] KEYWORD [MORE_KEYWORDS]...
        filter t/TAG [t/TAG]...
        clear
        undo
        help
        exit
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import FrozenSet, Optional, Tuple

from ..exceptions import CommandException, DuplicateEntityError, InvalidIndexError
from ..models.client import Client
from ..models.directory import Predicate, show_all
from ..models.entity import Entity, EntityKind
from ..models.property import Property
from ..types import Address, Email, Name, Phone, Tag
from ..workspace import Workspace
from .messages import (
    MESSAGE_CLIENT_NOT_FOUND,
    MESSAGE_ENTITIES_LISTED_OVERVIEW,
    MESSAGE_INVALID_CLIENT_DISPLAYED_INDEX,
    MESSAGE_INVALID_PROPERTY_DISPLAYED_INDEX,
)


# ── Result wrapper ───────────────────────────────────────────────

@dataclass(frozen=True)
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        message:    Human-readable feedback.
        show_help:  The front-end should display the help text.
        exit:       The front-end should shut down.
        view:       Which list the front-end should show, if any.
    """
    message: str
    show_help: bool = False
    exit: bool = False
    view: Optional[EntityKind] = None


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    @abstractmethod
    def execute(self, workspace: Workspace) -> CommandResult:
        """Execute the command on the given workspace."""
        ...

    @property
    def supports_undo(self) -> bool:
        """Whether this command mutates the portfolio and can be undone."""
        return False

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and vars(other) == vars(self)

    def __repr__(self) -> str:
        args = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


def _invalid_index_message(kind: EntityKind) -> str:
    if kind is EntityKind.PROPERTY:
        return MESSAGE_INVALID_PROPERTY_DISPLAYED_INDEX
    return MESSAGE_INVALID_CLIENT_DISPLAYED_INDEX


def _resolve_displayed(workspace: Workspace, kind: EntityKind, index: int) -> Entity:
    """Return the entity at one-based ``index`` of the displayed list."""
    shown = workspace.filtered(kind)
    if index < 1 or index > len(shown):
        raise InvalidIndexError(_invalid_index_message(kind))
    return shown[index - 1]


def _check_interested_clients(workspace: Workspace, names: FrozenSet[Name]) -> None:
    missing = workspace.portfolio.missing_clients(names)
    if missing:
        raise CommandException(MESSAGE_CLIENT_NOT_FOUND.format(", ".join(missing)))


# ═════════════════════════════════════════════════════════════════
#  ADD
# ═════════════════════════════════════════════════════════════════

class AddPropertyCommand(Command):
    """
    Add a property to the portfolio.

    Syntax:
        add -p n/Sunny Villa a/123 Orchard Rd t/luxury ic/Alice Tan
    """

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add -p: Adds a property to the portfolio. "
        "Parameters: n/NAME a/ADDRESS [t/TAG]... [ic/INTERESTED_CLIENT]...\n"
        "Example: add -p n/Sunny Villa a/123 Orchard Rd t/luxury ic/Alice Tan"
    )
    MESSAGE_SUCCESS = "New property added: {}"
    MESSAGE_DUPLICATE_PROPERTY = "This property already exists in the portfolio"

    def __init__(self, prop: Property):
        self._property = prop

    def execute(self, workspace: Workspace) -> CommandResult:
        if workspace.properties.contains(self._property):
            raise DuplicateEntityError(self.MESSAGE_DUPLICATE_PROPERTY)
        _check_interested_clients(workspace, self._property.interested_clients)

        workspace.properties.add(self._property)
        return CommandResult(self.MESSAGE_SUCCESS.format(self._property),
                             view=EntityKind.PROPERTY)

    @property
    def supports_undo(self) -> bool:
        return True


class AddClientCommand(Command):
    """
    Add a client to the portfolio.

    Syntax:
        add -c n/Alice Tan p/91234567 e/alice@example.com a/8 Bukit Timah Rd
    """

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add -c: Adds a client to the portfolio. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
        "Example: add -c n/Alice Tan p/91234567 e/alice@example.com "
        "a/8 Bukit Timah Rd t/buyer"
    )
    MESSAGE_SUCCESS = "New client added: {}"
    MESSAGE_DUPLICATE_CLIENT = "This client already exists in the portfolio"

    def __init__(self, client: Client):
        self._client = client

    def execute(self, workspace: Workspace) -> CommandResult:
        if workspace.clients.contains(self._client):
            raise DuplicateEntityError(self.MESSAGE_DUPLICATE_CLIENT)

        workspace.clients.add(self._client)
        return CommandResult(self.MESSAGE_SUCCESS.format(self._client),
                             view=EntityKind.CLIENT)

    @property
    def supports_undo(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  EDIT
# ═════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class EditPropertyDescriptor:
    """
    Field overrides for ``edit -p``.  ``None`` means "keep the current
    value"; an empty set for ``tags`` or ``interested_clients`` clears it.
    """
    name: Optional[Name] = None
    address: Optional[Address] = None
    tags: Optional[FrozenSet[Tag]] = None
    interested_clients: Optional[FrozenSet[Name]] = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in
                   (self.name, self.address, self.tags, self.interested_clients))

    def apply_to(self, prop: Property) -> Property:
        return Property(
            name=self.name if self.name is not None else prop.name,
            address=self.address if self.address is not None else prop.address,
            tags=self.tags if self.tags is not None else prop.tags,
            interested_clients=(self.interested_clients
                                if self.interested_clients is not None
                                else prop.interested_clients),
        )


@dataclass(frozen=True)
class EditClientDescriptor:
    """Field overrides for ``edit -c``; same conventions as for properties."""
    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    tags: Optional[FrozenSet[Tag]] = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in
                   (self.name, self.phone, self.email, self.address, self.tags))

    def apply_to(self, client: Client) -> Client:
        overrides = {k: v for k, v in vars(self).items() if v is not None}
        return replace(client, **overrides)


class EditPropertyCommand(Command):
    """
    Edit the property at a displayed index.

    Syntax:
        edit -p 1 a/456 Other Rd t/
    """

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit -p: Edits the details of the property identified by the index number "
        "used in the displayed property list. Existing values will be overwritten "
        "by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [a/ADDRESS] "
        "[t/TAG]... [ic/INTERESTED_CLIENT]...\n"
        "Example: edit -p 1 a/456 Other Rd t/"
    )
    MESSAGE_SUCCESS = "Edited Property: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PROPERTY = "This property already exists in the portfolio"

    def __init__(self, index: int, descriptor: EditPropertyDescriptor):
        self._index = index
        self._descriptor = descriptor

    def execute(self, workspace: Workspace) -> CommandResult:
        target = _resolve_displayed(workspace, EntityKind.PROPERTY, self._index)
        edited = self._descriptor.apply_to(target)

        if not target.is_same_identity(edited) and workspace.properties.contains(edited):
            raise DuplicateEntityError(self.MESSAGE_DUPLICATE_PROPERTY)
        if self._descriptor.interested_clients is not None:
            _check_interested_clients(workspace, self._descriptor.interested_clients)

        workspace.properties.replace(target, edited)
        workspace.update_filter(EntityKind.PROPERTY, show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited), view=EntityKind.PROPERTY)

    @property
    def supports_undo(self) -> bool:
        return True


class EditClientCommand(Command):
    """
    Edit the client at a displayed index.
    A new name is carried over to every property that listed the old one.

    Syntax:
        edit -c 2 p/98765432 e/alice@work.com
    """

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit -c: Edits the details of the client identified by the index number "
        "used in the displayed client list. Existing values will be overwritten "
        "by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] "
        "[e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Renaming a client also renames it in the properties it is interested in.\n"
        "Example: edit -c 2 p/98765432 e/alice@work.com"
    )
    MESSAGE_SUCCESS = "Edited Client: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_CLIENT = "This client already exists in the portfolio"

    def __init__(self, index: int, descriptor: EditClientDescriptor):
        self._index = index
        self._descriptor = descriptor

    def execute(self, workspace: Workspace) -> CommandResult:
        target = _resolve_displayed(workspace, EntityKind.CLIENT, self._index)
        edited = self._descriptor.apply_to(target)

        if not target.is_same_identity(edited) and workspace.clients.contains(edited):
            raise DuplicateEntityError(self.MESSAGE_DUPLICATE_CLIENT)

        workspace.clients.replace(target, edited)
        if target.name != edited.name:
            workspace.portfolio.rename_client_references(target.name, edited.name)
        workspace.update_filter(EntityKind.CLIENT, show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited), view=EntityKind.CLIENT)

    @property
    def supports_undo(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  DELETE
# ═════════════════════════════════════════════════════════════════

class DeleteCommand(Command):
    """
    Delete the entity at a displayed index.

    Syntax:
        delete -p 1
        delete -c 3
    """

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the property (-p, default) or client (-c) identified by "
        "the index number used in the displayed list.\n"
        "Parameters: [-p|-c] INDEX (must be a positive integer)\n"
        "Example: delete -p 1"
    )
    MESSAGE_SUCCESS = "Deleted {label}: {entity}"

    def __init__(self, kind: EntityKind, index: int):
        self._kind = kind
        self._index = index

    def execute(self, workspace: Workspace) -> CommandResult:
        target = _resolve_displayed(workspace, self._kind, self._index)
        workspace.directory(self._kind).remove(target)
        return CommandResult(
            self.MESSAGE_SUCCESS.format(label=self._kind.label.capitalize(), entity=target),
            view=self._kind,
        )

    @property
    def supports_undo(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  QUERY COMMANDS (list / find / filter)
# ═════════════════════════════════════════════════════════════════

class ListCommand(Command):
    """
    Show every property or client.

    Syntax:
        list -p
        list -c
    """

    COMMAND_WORD = "list"
    MESSAGE_USAGE = (
        "list: Lists all properties (-p, default) or clients (-c).\n"
        "Example: list -c"
    )
    MESSAGE_SUCCESS = "Listed all {plural}"

    def __init__(self, kind: EntityKind = EntityKind.PROPERTY):
        self._kind = kind

    def execute(self, workspace: Workspace) -> CommandResult:
        workspace.update_filter(self._kind, show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(plural=self._kind.plural),
                             view=self._kind)


class FindCommand(Command):
    """
    Show entities whose name contains any of the keywords.
    An empty result is not an error.

    Syntax:
        find -p villa loft
    """

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all properties (-p, default) or clients (-c) whose names "
        "contain any of the specified keywords (case-insensitive) and displays "
        "them as a list with index numbers.\n"
        "Parameters: [-p|-c] KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find -p villa loft"
    )

    def __init__(self, kind: EntityKind, predicate: Predicate):
        self._kind = kind
        self._predicate = predicate

    def execute(self, workspace: Workspace) -> CommandResult:
        workspace.update_filter(self._kind, self._predicate)
        count = len(workspace.filtered(self._kind))
        return CommandResult(
            MESSAGE_ENTITIES_LISTED_OVERVIEW.format(count=count, plural=self._kind.plural),
            view=self._kind,
        )


class FilterCommand(Command):
    """
    Show properties that carry every given tag.

    Syntax:
        filter t/luxury t/pool
    """

    COMMAND_WORD = "filter"
    MESSAGE_USAGE = (
        "filter: Shows the properties that have all of the given tags.\n"
        "Parameters: t/TAG [t/TAG]...\n"
        "Example: filter t/luxury t/pool"
    )

    def __init__(self, predicate: Predicate):
        self._predicate = predicate

    def execute(self, workspace: Workspace) -> CommandResult:
        workspace.update_filter(EntityKind.PROPERTY, self._predicate)
        count = len(workspace.filtered_properties)
        return CommandResult(
            MESSAGE_ENTITIES_LISTED_OVERVIEW.format(count=count, plural=EntityKind.PROPERTY.plural),
            view=EntityKind.PROPERTY,
        )


# ═════════════════════════════════════════════════════════════════
#  PORTFOLIO-LEVEL COMMANDS
# ═════════════════════════════════════════════════════════════════

class ClearCommand(Command):
    """
    Remove every property and client.

    Syntax:
        clear
    """

    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Removes all properties and clients."
    MESSAGE_SUCCESS = "Portfolio has been cleared!"

    def execute(self, workspace: Workspace) -> CommandResult:
        workspace.portfolio.clear()
        return CommandResult(self.MESSAGE_SUCCESS, view=EntityKind.PROPERTY)

    @property
    def supports_undo(self) -> bool:
        return True


class UndoCommand(Command):
    """
    Restore the portfolio as it was before the last mutating command.

    Syntax:
        undo
    """

    COMMAND_WORD = "undo"
    MESSAGE_USAGE = "undo: Reverts the last command that changed the portfolio."
    MESSAGE_SUCCESS = "Undo successful."
    MESSAGE_NOTHING_TO_UNDO = "Nothing to undo."

    def execute(self, workspace: Workspace) -> CommandResult:
        if not workspace.undo():
            raise CommandException(self.MESSAGE_NOTHING_TO_UNDO)
        return CommandResult(self.MESSAGE_SUCCESS)


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no portfolio mutation)
# ═════════════════════════════════════════════════════════════════

class HelpCommand(Command):
    """
    Ask the front-end to display the help text.

    Syntax:
        help
    """

    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, workspace: Workspace) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


class ExitCommand(Command):
    """
    Ask the front-end to shut down.

    Syntax:
        exit
    """

    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Condonery as requested ..."

    def execute(self, workspace: Workspace) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


ALL_COMMANDS: Tuple[type, ...] = (
    AddPropertyCommand,
    AddClientCommand,
    EditPropertyCommand,
    EditClientCommand,
    DeleteCommand,
    ListCommand,
    FindCommand,
    FilterCommand,
    ClearCommand,
    UndoCommand,
    HelpCommand,
    ExitCommand,
)


def help_text() -> str:
    """Usage of every command, separated by blank lines."""
    return "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)
