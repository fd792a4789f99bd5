"""
    Field value types with validation.

    Every field of a property or client is wrapped in a small immutable
    value object.  The wrapper can only be constructed from a string that
    satisfies the field's pattern, so an entity built from these values
    never holds malformed data.
"""
import re
from dataclasses import dataclass
from typing import ClassVar

from .exceptions import ValidationError


@dataclass(frozen=True)
class FieldValue:
    """
    Base for string-backed value types.

    Subclasses declare ``PATTERN`` (matched against the whole string) and
    ``MESSAGE_CONSTRAINTS`` (shown to the user on rejection).  Equality and
    hashing are structural and case-sensitive; values of different
    subclasses never compare equal.
    """
    value: str

    PATTERN: ClassVar[re.Pattern] = re.compile(r".*", re.DOTALL)
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value is invalid."

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw) -> bool:
        """Return True if ``raw`` may be wrapped by this type."""
        return isinstance(raw, str) and cls.PATTERN.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.value


class Name(FieldValue):
    PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*")
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )


class Address(FieldValue):
    # The first character must not be whitespace, otherwise " " is accepted.
    PATTERN = re.compile(r"\S.*")
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"


class Tag(FieldValue):
    PATTERN = re.compile(r"[^\W_]+")
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    def __str__(self) -> str:
        return f"[{self.value}]"


class Phone(FieldValue):
    PATTERN = re.compile(r"\d{3,}")
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )


_EMAIL_LOCAL = r"[^\W_](?:[+_.\-]?[^\W_])*"
_EMAIL_LABEL = r"[^\W_](?:-?[^\W_])*"
_EMAIL_LAST_LABEL = r"[^\W_](?:-?[^\W_])+"


class Email(FieldValue):
    PATTERN = re.compile(
        rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)*{_EMAIL_LAST_LABEL}"
    )
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
