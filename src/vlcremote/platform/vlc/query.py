"""
Summary: Deterministic endpoint construction from a parameter map.
Why: The same parameters must always produce the same request target.
"""

from __future__ import annotations

from collections.abc import Mapping

ParamMap = Mapping[str, str]


def _escape(value: str) -> str:
    # Only spaces are escaped; callers pre-encode anything else they need.
    return value.replace(" ", "%20")


def build_endpoint(base: str, params: ParamMap | None = None) -> str:
    """Append ``params`` to ``base`` as a query string with sorted keys.

    >>> build_endpoint("requests/status.json", {"val": "10", "command": "volume"})
    'requests/status.json?command=volume&val=10'
    """

    if not params:
        return base

    query = "&".join(
        f"{_escape(str(key))}={_escape(str(params[key]))}"
        for key in sorted(params, key=str)
    )
    return f"{base}?{query}"


def format_int(value: int) -> str:
    return str(int(value))


def format_float(value: float) -> str:
    """Encode with six fixed decimals, e.g. ``1.5`` -> ``"1.500000"``."""

    return f"{value:f}"


__all__ = ["ParamMap", "build_endpoint", "format_float", "format_int"]
