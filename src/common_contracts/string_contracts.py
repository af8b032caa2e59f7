"""
Contracts on strings: "has length", "has text" and "max length".

Note the wording: ``*_has_length`` reports an empty string as "was empty"
while ``*_has_text`` reports empty or whitespace-only strings as "was blank".
Callers match on both messages.
"""

from __future__ import annotations

from typing import Optional

from common_contracts.tiers import Tier


def _has_length(tier: Tier, text: Optional[str], name: str) -> str:
    if text is None:
        raise tier.violation(f"{tier.prefix} {name} was null")
    if len(text) == 0:
        raise tier.violation(f"{tier.prefix} {name} was empty")
    return text


def _has_text(tier: Tier, text: Optional[str], name: str) -> str:
    if text is None:
        raise tier.violation(f"{tier.prefix} {name} was null")
    if not text.strip():
        raise tier.violation(f"{tier.prefix} {name} was blank")
    return text


def _max_length(tier: Tier, text: Optional[str], max_length: int, name: str) -> str:
    if text is None:
        raise tier.violation(f"{tier.prefix} {name} was null")
    if len(text) > max_length:
        raise tier.violation(f"Length of {name} was > {max_length}")
    return text


def require_has_length(argument: Optional[str], argument_name: str) -> str:
    """Require the string argument to be not None and not empty."""
    return _has_length(Tier.REQUIRE, argument, argument_name)


def require_has_text(argument: Optional[str], argument_name: str) -> str:
    """Require the string argument to be not None and not blank."""
    return _has_text(Tier.REQUIRE, argument, argument_name)


def require_max_length(argument: Optional[str], max_length: int, argument_name: str) -> str:
    """Require the string argument to be not None and at most ``max_length`` long."""
    return _max_length(Tier.REQUIRE, argument, max_length, argument_name)


def check_has_length(state: Optional[str], state_name: str) -> str:
    return _has_length(Tier.CHECK, state, state_name)


def check_has_text(state: Optional[str], state_name: str) -> str:
    return _has_text(Tier.CHECK, state, state_name)


def check_max_length(state: Optional[str], max_length: int, state_name: str) -> str:
    return _max_length(Tier.CHECK, state, max_length, state_name)


def ensure_has_length(result: Optional[str], result_name: str) -> str:
    return _has_length(Tier.ENSURE, result, result_name)


def ensure_has_text(result: Optional[str], result_name: str) -> str:
    return _has_text(Tier.ENSURE, result, result_name)


def ensure_max_length(result: Optional[str], max_length: int, result_name: str) -> str:
    return _max_length(Tier.ENSURE, result, max_length, result_name)
