"""
    CommandParser — turns raw user input into ``Command`` objects.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Facade        – single ``parse(text)`` entry-point hides all parsing.

    Parsing is pure: it never looks at the workspace.  Field values are
    built through the validating value types, and their errors surface as
    ``ParseException`` with the constraint message.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Tuple, Type

from ..exceptions import ParseException, ValidationError
from ..models.client import Client
from ..models.entity import EntityKind
from ..models.property import Property
from ..services.filter_service import TagsMatchPredicate
from ..services.search_service import NameContainsKeywordsPredicate
from ..types import Address, Email, FieldValue, Name, Phone, Tag
from .arguments import (
    ArgumentMultimap,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_INTERESTED_CLIENT,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    tokenize,
)
from .commands import (
    AddClientCommand,
    AddPropertyCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditClientCommand,
    EditClientDescriptor,
    EditPropertyCommand,
    EditPropertyDescriptor,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    UndoCommand,
)
from .messages import MESSAGE_INVALID_INDEX, MESSAGE_UNKNOWN_COMMAND, invalid_format

logger = logging.getLogger(__name__)

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)
_KIND_FLAG = re.compile(r"(?P<flag>-[pc])(?=\s|$)")
_UNSIGNED_INT = re.compile(r"\d+", re.ASCII)

_PROPERTY_PREFIXES = (PREFIX_NAME, PREFIX_ADDRESS, PREFIX_TAG, PREFIX_INTERESTED_CLIENT)
_CLIENT_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)
_ALL_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG,
                 PREFIX_INTERESTED_CLIENT)


# ── Value parsers ────────────────────────────────────────────────

def parse_value(value_type: Type[FieldValue], raw: str) -> FieldValue:
    """Trim ``raw`` and wrap it, turning validation errors into parse errors."""
    try:
        return value_type(raw.strip())
    except ValidationError as e:
        raise ParseException(str(e)) from e


def parse_values(value_type: Type[FieldValue], raws: Iterable[str]) -> FrozenSet:
    return frozenset(parse_value(value_type, raw) for raw in raws)


def parse_index(raw: str) -> int:
    """Parse a one-based index; anything but a positive integer is rejected."""
    text = raw.strip()
    if not _UNSIGNED_INT.fullmatch(text) or int(text) == 0:
        raise ParseException(MESSAGE_INVALID_INDEX)
    return int(text)


def split_kind(arguments: str) -> Tuple[EntityKind, str]:
    """
    Strip a leading ``-p`` / ``-c`` flag from ``arguments``.

    Example:
        >>> split_kind(" -c 2")
        (<EntityKind.CLIENT: '-c'>, ' 2')
        >>> split_kind(" n/Sunny Villa")
        (<EntityKind.PROPERTY: '-p'>, ' n/Sunny Villa')
    """
    stripped = arguments.lstrip()
    match = _KIND_FLAG.match(stripped)
    if match is None:
        return EntityKind.PROPERTY, arguments
    return EntityKind(match.group("flag")), stripped[match.end():]


def tokenize_for(arguments: str, allowed: Tuple[str, ...], usage: str) -> ArgumentMultimap:
    """
    Tokenize on every known prefix so a prefix belonging to the other kind
    (e.g. ``ic/`` after a client address) is rejected instead of being
    folded into the preceding value.
    """
    args = tokenize(arguments, *_ALL_PREFIXES)
    if any(args.has(prefix) for prefix in _ALL_PREFIXES if prefix not in allowed):
        raise ParseException(invalid_format(usage))
    return args


class CommandParser:
    """
    Parses a full line of user input into a ``Command``.

    Usage:
        parser = CommandParser()
        command = parser.parse("add n/Sunny Villa a/123 Orchard Rd t/luxury")
    """

    def __init__(self):
        self._parsers: Dict[str, Callable[[str], Command]] = {
            AddPropertyCommand.COMMAND_WORD: self._parse_add,
            EditPropertyCommand.COMMAND_WORD: self._parse_edit,
            DeleteCommand.COMMAND_WORD: self._parse_delete,
            ListCommand.COMMAND_WORD: self._parse_list,
            FindCommand.COMMAND_WORD: self._parse_find,
            FilterCommand.COMMAND_WORD: self._parse_filter,
            ClearCommand.COMMAND_WORD: lambda _: ClearCommand(),
            UndoCommand.COMMAND_WORD: lambda _: UndoCommand(),
            HelpCommand.COMMAND_WORD: lambda _: HelpCommand(),
            ExitCommand.COMMAND_WORD: lambda _: ExitCommand(),
        }

    # ── Public API ───────────────────────────────────────────────

    def parse(self, text: str) -> Command:
        """
        Parse raw CLI text into a ``Command`` object.

        Raises:
            ParseException: If the text cannot be parsed.
        """
        match = _BASIC_COMMAND_FORMAT.fullmatch(text.strip())
        if match is None:
            raise ParseException(invalid_format(HelpCommand.MESSAGE_USAGE))
        return self.parse_command(match.group("word"), match.group("arguments"))

    def parse_command(self, command_word: str, arguments: str) -> Command:
        """Build the command named ``command_word`` from its argument text."""
        parser = self._parsers.get(command_word)
        if parser is None:
            logger.debug("Unknown command word: '%s'", command_word)
            raise ParseException(MESSAGE_UNKNOWN_COMMAND)
        return parser(arguments)

    # ── add ──────────────────────────────────────────────────────

    def _parse_add(self, arguments: str) -> Command:
        kind, rest = split_kind(arguments)
        if kind is EntityKind.CLIENT:
            return self._parse_add_client(rest)
        return self._parse_add_property(rest)

    @staticmethod
    def _parse_add_property(arguments: str) -> AddPropertyCommand:
        args = tokenize_for(arguments, _PROPERTY_PREFIXES, AddPropertyCommand.MESSAGE_USAGE)
        if not args.has_all(PREFIX_NAME, PREFIX_ADDRESS) or args.preamble:
            raise ParseException(invalid_format(AddPropertyCommand.MESSAGE_USAGE))

        prop = Property(
            name=parse_value(Name, args.get_value(PREFIX_NAME)),
            address=parse_value(Address, args.get_value(PREFIX_ADDRESS)),
            tags=parse_values(Tag, args.get_all_values(PREFIX_TAG)),
            interested_clients=parse_values(Name, args.get_all_values(PREFIX_INTERESTED_CLIENT)),
        )
        return AddPropertyCommand(prop)

    @staticmethod
    def _parse_add_client(arguments: str) -> AddClientCommand:
        args = tokenize_for(arguments, _CLIENT_PREFIXES, AddClientCommand.MESSAGE_USAGE)
        required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
        if not args.has_all(*required) or args.preamble:
            raise ParseException(invalid_format(AddClientCommand.MESSAGE_USAGE))

        client = Client(
            name=parse_value(Name, args.get_value(PREFIX_NAME)),
            phone=parse_value(Phone, args.get_value(PREFIX_PHONE)),
            email=parse_value(Email, args.get_value(PREFIX_EMAIL)),
            address=parse_value(Address, args.get_value(PREFIX_ADDRESS)),
            tags=parse_values(Tag, args.get_all_values(PREFIX_TAG)),
        )
        return AddClientCommand(client)

    # ── edit ─────────────────────────────────────────────────────

    def _parse_edit(self, arguments: str) -> Command:
        kind, rest = split_kind(arguments)
        if kind is EntityKind.CLIENT:
            args = tokenize_for(rest, _CLIENT_PREFIXES, EditClientCommand.MESSAGE_USAGE)
            index = self._edit_index(args, EditClientCommand.MESSAGE_USAGE)
            descriptor = EditClientDescriptor(
                name=self._optional(Name, args.get_value(PREFIX_NAME)),
                phone=self._optional(Phone, args.get_value(PREFIX_PHONE)),
                email=self._optional(Email, args.get_value(PREFIX_EMAIL)),
                address=self._optional(Address, args.get_value(PREFIX_ADDRESS)),
                tags=self._optional_set(Tag, args, PREFIX_TAG),
            )
            if not descriptor.is_any_field_edited():
                raise ParseException(EditClientCommand.MESSAGE_NOT_EDITED)
            return EditClientCommand(index, descriptor)

        args = tokenize_for(rest, _PROPERTY_PREFIXES, EditPropertyCommand.MESSAGE_USAGE)
        index = self._edit_index(args, EditPropertyCommand.MESSAGE_USAGE)
        descriptor = EditPropertyDescriptor(
            name=self._optional(Name, args.get_value(PREFIX_NAME)),
            address=self._optional(Address, args.get_value(PREFIX_ADDRESS)),
            tags=self._optional_set(Tag, args, PREFIX_TAG),
            interested_clients=self._optional_set(Name, args, PREFIX_INTERESTED_CLIENT),
        )
        if not descriptor.is_any_field_edited():
            raise ParseException(EditPropertyCommand.MESSAGE_NOT_EDITED)
        return EditPropertyCommand(index, descriptor)

    @staticmethod
    def _edit_index(args: ArgumentMultimap, usage: str) -> int:
        try:
            return parse_index(args.preamble)
        except ParseException as e:
            raise ParseException(invalid_format(usage)) from e

    @staticmethod
    def _optional(value_type: Type[FieldValue], raw: Optional[str]) -> Optional[FieldValue]:
        return None if raw is None else parse_value(value_type, raw)

    @staticmethod
    def _optional_set(value_type: Type[FieldValue], args: ArgumentMultimap,
                      prefix: str) -> Optional[FrozenSet]:
        """
        ``None`` when the prefix is absent, an empty set for a lone empty
        prefix (``t/``), otherwise the parsed values.
        """
        if not args.has(prefix):
            return None
        values = args.get_all_values(prefix)
        if values == [""]:
            return frozenset()
        return parse_values(value_type, values)

    # ── delete / list / find / filter ────────────────────────────

    @staticmethod
    def _parse_delete(arguments: str) -> DeleteCommand:
        kind, rest = split_kind(arguments)
        try:
            return DeleteCommand(kind, parse_index(rest))
        except ParseException as e:
            raise ParseException(invalid_format(DeleteCommand.MESSAGE_USAGE)) from e

    @staticmethod
    def _parse_list(arguments: str) -> ListCommand:
        kind, _ = split_kind(arguments)
        return ListCommand(kind)

    @staticmethod
    def _parse_find(arguments: str) -> FindCommand:
        kind, rest = split_kind(arguments)
        keywords = rest.split()
        if not keywords:
            raise ParseException(invalid_format(FindCommand.MESSAGE_USAGE))
        return FindCommand(kind, NameContainsKeywordsPredicate(keywords))

    @staticmethod
    def _parse_filter(arguments: str) -> FilterCommand:
        args = tokenize(arguments, PREFIX_TAG)
        values = args.get_all_values(PREFIX_TAG)
        if not values or args.preamble or "" in values:
            raise ParseException(invalid_format(FilterCommand.MESSAGE_USAGE))
        return FilterCommand(TagsMatchPredicate(parse_values(Tag, values)))
