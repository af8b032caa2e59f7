"""Exceptions raised when a contract is violated."""

from typing import Optional


class ContractError(Exception):
    """Base class for contract violations."""

    def __init__(self, message: str, tier: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.tier = tier


class ArgumentError(ContractError, ValueError):
    """Raised by ``require*`` checks when a caller passed an invalid argument."""

    def __init__(self, message: str):
        super().__init__(message, tier="require")


class StateError(ContractError, RuntimeError):
    """Raised by ``check*`` checks when an invariant about current state is broken."""

    def __init__(self, message: str):
        super().__init__(message, tier="check")


class ResultError(ContractError, RuntimeError):
    """Raised by ``ensure*`` checks when a computed result fails its postcondition."""

    def __init__(self, message: str):
        super().__init__(message, tier="ensure")
