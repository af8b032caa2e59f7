"""Fail-fast preconditions, invariants and postconditions."""

from common_contracts.base_contracts import (  # noqa: F401
    check,
    check_not_null,
    check_present,
    ensure,
    ensure_not_null,
    ensure_present,
    ensure_with_predicate,
    require,
    require_not_null,
    require_present,
)
from common_contracts.collection_contracts import (  # noqa: F401
    check_not_empty,
    ensure_not_empty,
    require_not_empty,
)
from common_contracts.errors import (  # noqa: F401
    ArgumentError,
    ContractError,
    ResultError,
    StateError,
)
from common_contracts.option import Option  # noqa: F401
from common_contracts.string_contracts import (  # noqa: F401
    check_has_length,
    check_has_text,
    check_max_length,
    ensure_has_length,
    ensure_has_text,
    ensure_max_length,
    require_has_length,
    require_has_text,
    require_max_length,
)
from common_contracts.tiers import Tier  # noqa: F401
