"""Contract tiers and the error kind each one raises."""

from __future__ import annotations

from enum import Enum
from typing import Type

from common_contracts.errors import ArgumentError, ContractError, ResultError, StateError
from common_contracts.logging_config import get_logger

logger = get_logger(__name__)


class Tier(str, Enum):
    """Which side of an operation a check guards."""

    REQUIRE = "require"
    CHECK = "check"
    ENSURE = "ensure"

    @property
    def error_type(self) -> Type[ContractError]:
        return _ERROR_TYPES[self]

    @property
    def prefix(self) -> str:
        """Prefix used for conditions, collections and strings."""
        return _PREFIXES[self]

    @property
    def object_prefix(self) -> str:
        """Prefix used for plain values and options."""
        if self is Tier.CHECK:
            return "State object"
        return self.prefix

    def violation(self, message: str) -> ContractError:
        """Build (and log) the error for a failed check of this tier."""
        error = self.error_type(message)
        logger.debug(
            "Contract violated",
            extra={"tier": self.value, "error": message},
        )
        return error


_ERROR_TYPES = {
    Tier.REQUIRE: ArgumentError,
    Tier.CHECK: StateError,
    Tier.ENSURE: ResultError,
}

_PREFIXES = {
    Tier.REQUIRE: "Argument",
    Tier.CHECK: "State",
    Tier.ENSURE: "Result",
}
