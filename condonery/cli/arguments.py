"""
    Argument tokenizer for ``prefix/value`` style command arguments.

    Example:
        >>> m = tokenize("1 n/Sunny Villa t/luxury t/pool", PREFIX_NAME, PREFIX_TAG)
        >>> m.preamble
        '1'
        >>> m.get_value(PREFIX_NAME)
        'Sunny Villa'
        >>> m.get_all_values(PREFIX_TAG)
        ['luxury', 'pool']

    A prefix is only recognised at the very start of the text or right
    after whitespace, so ``home/office`` inside an address is left alone.
"""
import re
from typing import Dict, List, Optional, Tuple

PREFIX_NAME = "n/"
PREFIX_ADDRESS = "a/"
PREFIX_TAG = "t/"
PREFIX_INTERESTED_CLIENT = "ic/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"


class ArgumentMultimap:
    """Maps each prefix to the values it was given, in input order."""

    def __init__(self, preamble: str = ""):
        self.preamble = preamble
        self._values: Dict[str, List[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: str) -> Optional[str]:
        """The last value given for ``prefix``, or ``None``."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: str) -> bool:
        return prefix in self._values

    def has_all(self, *prefixes: str) -> bool:
        return all(self.has(p) for p in prefixes)


def tokenize(args_string: str, *prefixes: str) -> ArgumentMultimap:
    """Split ``args_string`` into a preamble and per-prefix values."""
    positions: List[Tuple[int, str]] = []
    for prefix in prefixes:
        pattern = re.compile(r"(?:(?<=\s)|^)" + re.escape(prefix))
        positions.extend((m.start(), prefix) for m in pattern.finditer(args_string))
    positions.sort()

    first = positions[0][0] if positions else len(args_string)
    multimap = ArgumentMultimap(args_string[:first].strip())

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args_string)
        multimap.put(prefix, args_string[start + len(prefix):end].strip())
    return multimap
