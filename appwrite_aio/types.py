"""Shared typing helpers used across the appwrite_aio package.

This module centralizes JSON-like typings, the tagged validation result and the
typed dictionaries used for request payloads so other modules can import
concrete types rather than using unstructured Any in many places.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Generic, List, TypeVar, TypedDict, Union


# Recursive JSON-ish type used for payloads / returned JSON values
JSONType = Union[Dict[str, "JSONType"], List["JSONType"], str, int, float, bool, None]

# Flattened query/form parameters
FlatParams = Dict[str, Union[str, int, float, bool, None]]

T = TypeVar("T")

# Response decoding tags accepted by Client.call
RESPONSE_JSON = "json"
RESPONSE_ARRAY_BUFFER = "arrayBuffer"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful validation carrying the accepted value."""
    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Err:
    """Failed validation carrying a human-readable reason."""
    error: str
    ok: ClassVar[bool] = False


Result = Union[Ok[T], Err]


class ErrorPayload(TypedDict, total=False):
    """Error body returned by the Appwrite API for status >= 400."""
    message: str
    code: int
    type: str
    version: str
