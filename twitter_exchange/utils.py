"""
Utility Functions
Helpers for preparing request parameters before they are signed.
"""

from typing import Any, Dict, Mapping, Union
from urllib.parse import parse_qsl, urlencode

NUL = "\0"


def escape_status(status: Any) -> Any:
    """
    Guard a status that starts with '@'.

    The API reads a leading '@' in a status as a different token type, so the
    value is prefixed with a single NUL byte.

    Args:
        status: Raw status value

    Returns:
        The escaped status, or the value unchanged
    """
    if isinstance(status, str) and status.startswith("@"):
        return NUL + status
    return status


def normalize_body_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Prepare body parameters for signing and JSON serialisation.

    Args:
        params: Body parameters as given by the caller

    Returns:
        A new dict with the status escaped and booleans as "true"/"false"
    """
    normalized = dict(params)
    if "status" in normalized:
        normalized["status"] = escape_status(normalized["status"])
    for key, value in normalized.items():
        if isinstance(value, bool):
            normalized[key] = "true" if value else "false"
    return normalized


def parse_query_string(query: str) -> Dict[str, str]:
    """Parse '?a=1&b=2' (leading '?' optional) into a dict, skipping empty fragments."""
    if query.startswith("?"):
        query = query[1:]
    return dict(parse_qsl(query, keep_blank_values=True))


def coerce_query_params(params: Union[str, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(params, str):
        return parse_query_string(params)
    return dict(params)


def encode_query(params: Mapping[str, Any]) -> str:
    """Form-encode query parameters, spaces as '+'."""
    return urlencode(list(params.items()))
