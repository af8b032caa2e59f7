"""Contracts on collections: "not None" and "not empty".

Works for anything with a length, so lists, tuples, sets and dicts (or any
other mapping) share the same checks.
"""

from __future__ import annotations

from typing import Optional, Sized, TypeVar

from common_contracts.tiers import Tier

C = TypeVar("C", bound=Sized)


def _not_empty(tier: Tier, container: Optional[C], name: str) -> C:
    if container is None:
        raise tier.violation(f"{tier.prefix} {name} was null")
    if len(container) == 0:
        raise tier.violation(f"{tier.prefix} {name} was empty")
    return container


def require_not_empty(argument: Optional[C], argument_name: str) -> C:
    """Require the collection argument to be not None and not empty."""
    return _not_empty(Tier.REQUIRE, argument, argument_name)


def check_not_empty(state: Optional[C], state_name: str) -> C:
    """Check that a state collection is not None and not empty."""
    return _not_empty(Tier.CHECK, state, state_name)


def ensure_not_empty(result: Optional[C], result_name: str) -> C:
    """Ensure a result collection is not None and not empty."""
    return _not_empty(Tier.ENSURE, result, result_name)
