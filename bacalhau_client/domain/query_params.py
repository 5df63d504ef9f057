"""Deterministic query-string encoding for orchestrator list endpoints."""

from __future__ import annotations

from typing import Any, Final, Mapping
from urllib.parse import quote

# Unreserved set of ECMAScript `encodeURIComponent`, which the orchestrator API expects.
_DOMAIN_QUERY_SAFE_CHARACTERS: Final[str] = "-_.!~*'()"


def domain_encode_query_params(params: Mapping[str, Any] | None = None) -> str:
    """Encode query parameters into a URL query suffix.

    Keys are lower-cased before percent-encoding; values are percent-encoded
    as-is. Pairs follow the mapping's iteration order.

    Args:
        params: Parameter name to scalar value mapping.

    Returns:
        str: Empty string for no parameters, else `?`-prefixed `&`-joined pairs.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not params:
        return ""

    encoded_pairs = [
        f"{_domain_quote(str(key).lower())}={_domain_quote(_domain_query_value_text(value))}"
        for key, value in params.items()
    ]
    return "?" + "&".join(encoded_pairs)


def _domain_query_value_text(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _domain_quote(text: str) -> str:
    return quote(text, safe=_DOMAIN_QUERY_SAFE_CHARACTERS)
