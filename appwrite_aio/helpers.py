"""Helper functions for the appwrite_aio package.

This module contains utility functions used across the appwrite_aio package,
including parameter flattening for query strings and form fields, base64
padding, required-parameter checks and size formatting.
"""

import base64
import binascii
from collections.abc import Mapping
from typing import Any, Dict
from urllib.parse import urlencode

from .exceptions import ValidationError
from .types import FlatParams

_SCALARS = (str, int, float, bool, type(None))


def flatten(data: Any, prefix: str = "") -> FlatParams:
    """Flatten nested mappings and sequences into bracket-notation keys.

    Mapping keys are appended as ``prefix[key]`` and sequence positions as
    ``prefix[index]``; with an empty prefix the bare key is used. Every leaf
    scalar appears exactly once, keyed from the outermost container inwards.

    Args:
        data: A mapping, list/tuple or scalar (str, int, float, bool, None)
        prefix: Key accumulated by the enclosing containers

    Returns:
        Flat dictionary of keys to scalar values, in input order

    Raises:
        ValidationError: If a value is neither a container nor a scalar

    Example:
        >>> flatten({"a": {"b": "v"}, "c": ["x", "y"]})
        {'a[b]': 'v', 'c[0]': 'x', 'c[1]': 'y'}
    """
    if isinstance(data, _SCALARS):
        return {prefix: data}

    if isinstance(data, Mapping):
        items = ((str(key), value) for key, value in data.items())
    elif isinstance(data, (list, tuple)):
        items = ((str(index), value) for index, value in enumerate(data))
    else:
        raise ValidationError(
            f"Cannot flatten value of type {type(data).__name__}: expected a mapping, a list or a scalar"
        )

    flat: FlatParams = {}
    for key, value in items:
        final_key = key if prefix == "" else f"{prefix}[{key}]"
        if isinstance(value, (Mapping, list, tuple)):
            flat.update(flatten(value, final_key))
        elif isinstance(value, _SCALARS):
            flat[final_key] = value
        else:
            raise ValidationError(
                f"Cannot flatten value of type {type(value).__name__} at '{final_key}'"
            )
    return flat


def stringify(value: Any) -> str:
    """Render a scalar the way the API expects it in query strings and form fields."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Any) -> str:
    """Flatten params and URL-encode them as a query string.

    ``None`` leaves are skipped and brackets are kept literal, so
    ``{"queries": ["a", "b"]}`` becomes ``queries[0]=a&queries[1]=b``.
    """
    if not params:
        return ""
    pairs = [(key, stringify(value)) for key, value in flatten(params).items() if value is not None]
    return urlencode(pairs, safe="[]")


def compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of payload without the keys whose value is None."""
    return {key: value for key, value in payload.items() if value is not None}


def require_params(**params: Any) -> None:
    """Raise ValidationError for the first parameter that is None or an empty string.

    Keyword names are the API names, e.g. ``require_params(teamId=team_id)``.
    """
    for name, value in params.items():
        if value is None:
            raise ValidationError(f"Missing required parameter: '{name}'")
        if value == "":
            raise ValidationError(f"'{name}' cannot be empty")


def pad_base64(s: str) -> str:
    """Add padding to base64 strings that may be missing it.

    Example:
        >>> pad_base64("SGVsbG8")
        'SGVsbG8='
    """
    return s + '=' * (-len(s) % 4)


def decode_base64(s: str) -> bytes:
    """Decode a base64 string, adding padding if necessary.

    Raises:
        ValidationError: If the string is not valid base64
    """
    try:
        return base64.b64decode(pad_base64(s), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f"Invalid base64 content: {e}") from e


def bytes_to_human_readable(size: int) -> str:
    """Format a byte count for log messages.

    Example:
        >>> bytes_to_human_readable(5 * 1024 * 1024)
        '5.0 MB'
    """
    if size < 1024:
        return f"{size} Bytes"
    if size < 1024 ** 2:
        return f"{round(size / 1024, 2)} KB"
    if size < 1024 ** 3:
        return f"{round(size / 1024 ** 2, 2)} MB"
    return f"{round(size / 1024 ** 3, 2)} GB"
