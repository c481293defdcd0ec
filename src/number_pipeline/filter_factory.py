"""
Turns filter tokens from the command line into filter instances.

Tokens are either exact names (``EVEN``) or a prefix followed by an argument
(``GT5``). The registry refuses any registration that would make a token match
more than one form, so lookups never have to break ties.
"""

import re
from typing import Callable, Dict

from .exceptions import InvalidFilterArgumentError, UnknownFilterError
from .filters import EvenFilter, GreaterThanFilter, NumberFilter, OddFilter
from .logger import logger

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class FilterRegistry:
    def __init__(self):
        self._exact: Dict[str, Callable[[], NumberFilter]] = {}
        self._prefixed: Dict[str, Callable[[str], NumberFilter]] = {}

    def register_exact(self, token: str, constructor: Callable[[], NumberFilter]):
        if not token:
            raise ValueError("Filter tokens must not be empty")
        if token in self._exact:
            raise ValueError(f"Filter token {token} is already registered")
        for prefix in self._prefixed:
            if token.startswith(prefix):
                raise ValueError(
                    f"Filter token {token} overlaps registered prefix {prefix}"
                )
        logger.debug(f"Registering filter token {token}")
        self._exact[token] = constructor

    def register_prefix(self, prefix: str, constructor: Callable[[str], NumberFilter]):
        """
        Register a constructor for tokens of the form ``<prefix><argument>``.

        The constructor receives the whole token and is responsible for
        parsing the argument. No registered prefix may be a prefix of another,
        and no exact token may start with a registered prefix.
        """
        if not prefix:
            raise ValueError("Filter prefixes must not be empty")
        for existing in self._prefixed:
            if existing.startswith(prefix) or prefix.startswith(existing):
                raise ValueError(
                    f"Filter prefix {prefix} overlaps registered prefix {existing}"
                )
        for token in self._exact:
            if token.startswith(prefix):
                raise ValueError(
                    f"Filter prefix {prefix} overlaps registered token {token}"
                )
        logger.debug(f"Registering filter prefix {prefix}")
        self._prefixed[prefix] = constructor

    def create(self, token: str) -> NumberFilter:
        if token in self._exact:
            return self._exact[token]()
        for prefix, constructor in self._prefixed.items():
            if token.startswith(prefix):
                return constructor(token)
        raise UnknownFilterError(token)

    def tokens(self):
        return sorted(self._exact) + [f"{prefix}<int>" for prefix in sorted(self._prefixed)]


def parse_greater_than(token: str) -> GreaterThanFilter:
    argument = token[len("GT"):]
    if not INTEGER_PATTERN.fullmatch(argument):
        raise InvalidFilterArgumentError(token)
    try:
        threshold = int(argument)
    except ValueError:
        # digits beyond the interpreter's int conversion limit
        raise InvalidFilterArgumentError(token) from None
    return GreaterThanFilter(threshold)


def default_registry() -> FilterRegistry:
    registry = FilterRegistry()
    registry.register_exact("EVEN", EvenFilter)
    registry.register_exact("ODD", OddFilter)
    registry.register_prefix("GT", parse_greater_than)
    return registry


FILTERS = default_registry()


def create_filter(token: str) -> NumberFilter:
    number_filter = FILTERS.create(token)
    logger.info(f"Using filter {number_filter!r} for token {token}")
    return number_filter
