"""
Key casing conversion between the application and the wire format.

Dribbble speaks ``snake_case`` while callers of this package work with
``camelCase`` keys.  Two pure functions translate between the two:

* :func:`to_wire_format` runs on every outgoing body and query mapping.
  It drops blank values (``None``, ``False``, ``""``, zero and NaN) and
  rewrites each remaining key to snake case.  Empty lists and dicts are
  kept so an empty collection can still be sent.
* :func:`from_wire_format` runs on every decoded response object and
  rewrites each key to camel case.  Values are left untouched, and only
  top-level keys are converted; nested objects keep their wire keys.

All-caps keys are lowercased before conversion (``ID`` -> ``id``).
Letter/digit boundaries are not word breaks: ``image2x`` stays
``image2x`` in both directions.
"""

from __future__ import annotations

import math
from numbers import Number
from typing import Any, Dict, Mapping

import humps


def _normalise(key: str) -> str:
    return key.lower() if key.isupper() else key


def to_snake_key(key: str) -> str:
    """Return ``key`` in snake case (``redirectUri`` -> ``redirect_uri``)."""
    # Normalise kebab/snake input to camel first so every style ends up
    # with the same underscore-separated result.
    return humps.decamelize(humps.camelize(_normalise(key)))


def to_camel_key(key: str) -> str:
    """Return ``key`` in camel case (``access_token`` -> ``accessToken``)."""
    return humps.camelize(_normalise(key))


def is_blank(value: Any) -> bool:
    """True for values the wire format omits."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def to_wire_format(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert an application mapping into its wire representation.

    >>> to_wire_format({"clientId": "x", "state": None, "tags": []})
    {'client_id': 'x', 'tags': []}
    """
    return {
        to_snake_key(key): value
        for key, value in data.items()
        if not is_blank(value)
    }


def from_wire_format(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a decoded wire mapping into application keys.

    >>> from_wire_format({"access_token": "abc", "token_type": "bearer"})
    {'accessToken': 'abc', 'tokenType': 'bearer'}
    """
    return {to_camel_key(key): value for key, value in data.items()}
