"""
Base contracts: "not null", "present" and "meets condition".

Each check exists once per tier:

- ``require*`` guards arguments (preconditions) and raises ``ArgumentError``
- ``check*`` guards object state (invariants) and raises ``StateError``
- ``ensure*`` guards results (postconditions) and raises ``ResultError``

Checks return the value they were given, so they can wrap an assignment or
a ``return`` statement.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar, Union

from common_contracts.option import Option
from common_contracts.tiers import Tier

T = TypeVar("T")

Description = Union[str, Callable[[], str]]


def _describe(description: Description) -> str:
    """Resolve a description, calling it if it was passed lazily."""
    if callable(description):
        return description()
    return description


def _not_null(tier: Tier, value: Optional[T], name: str) -> T:
    if value is None:
        raise tier.violation(f"{tier.object_prefix} {name} was null")
    return value


def _present(tier: Tier, option: Optional[Option[T]], name: str) -> T:
    if option is None:
        raise tier.violation(f"{tier.object_prefix} {name} was null")
    if option.is_empty():
        raise tier.violation(f"{tier.object_prefix} {name} was empty")
    return option.get()


def _condition(tier: Tier, condition: Optional[bool], description: Description) -> None:
    # None collapses to False
    if not condition:
        raise tier.violation(
            f"{tier.prefix} did not meet condition: {_describe(description)}"
        )


def require_not_null(argument: Optional[T], argument_name: str) -> T:
    """Require the argument to be not None."""
    return _not_null(Tier.REQUIRE, argument, argument_name)


def require_present(argument: Optional[Option[T]], argument_name: str) -> T:
    """
    Require the argument to be a present ``Option`` and unwrap it.

    Raises:
        ArgumentError: if the option is None ("was null") or empty ("was empty").
    """
    return _present(Tier.REQUIRE, argument, argument_name)


def require(condition: Optional[bool], condition_description: Description) -> None:
    """
    Require an argument to meet a condition.

    ``condition`` may be None, which fails like False. ``condition_description``
    may be a string or a zero-argument callable that is only invoked when the
    check fails.
    """
    _condition(Tier.REQUIRE, condition, condition_description)


def check_not_null(state: Optional[T], state_name: str) -> T:
    """Check that a state object is not None."""
    return _not_null(Tier.CHECK, state, state_name)


def check_present(state: Optional[Option[T]], state_name: str) -> T:
    """Check that a state ``Option`` is present and unwrap it."""
    return _present(Tier.CHECK, state, state_name)


def check(condition: Optional[bool], condition_description: Description) -> None:
    """Check that a state object meets a condition (None fails like False)."""
    _condition(Tier.CHECK, condition, condition_description)


def ensure_not_null(result: Optional[T], result_name: str) -> T:
    """Ensure a result is not None."""
    return _not_null(Tier.ENSURE, result, result_name)


def ensure_present(result: Optional[Option[T]], result_name: str) -> T:
    """Ensure a result ``Option`` is present and unwrap it."""
    return _present(Tier.ENSURE, result, result_name)


def ensure(condition: Optional[bool], condition_description: Description) -> None:
    """Ensure a result meets a condition (None fails like False)."""
    _condition(Tier.ENSURE, condition, condition_description)


def ensure_with_predicate(
    result: Optional[T],
    result_predicate: Callable[[T], bool],
    condition_description: Description,
) -> T:
    """
    Ensure a result satisfies ``result_predicate`` and return it.

    Convenience for single line returns::

        return ensure_with_predicate(total, lambda t: t >= 0, "total is not negative")

    Raises:
        ResultError: if ``result`` is None or the predicate returns a falsy value.
    """
    if result is None:
        raise Tier.ENSURE.violation(
            f"Result did not meet condition: {_describe(condition_description)}, it was null instead"
        )
    if not result_predicate(result):
        raise Tier.ENSURE.violation(
            f"Result did not meet condition: {_describe(condition_description)}"
        )
    return result
