"""Query string builders for list endpoints.

Each builder returns the compact JSON form the API expects in ``queries``:

    >>> Query.equal("name", "John")
    '{"method":"equal","attribute":"name","values":["John"]}'
"""
import json
from typing import Any, List, Optional, Sequence, Union

QueryValue = Union[str, int, float, bool]


class Query:
    """Static builders for Appwrite query strings."""

    @staticmethod
    def new(method: str, attribute: Optional[str] = None, values: Any = None) -> str:
        """Build a query; a single value is wrapped in a list and None parts are left out."""
        query = {"method": method}
        if attribute is not None:
            query["attribute"] = attribute
        if values is not None:
            query["values"] = list(values) if isinstance(values, (list, tuple)) else [values]
        return json.dumps(query, separators=(",", ":"))

    @staticmethod
    def equal(attribute: str, value: Union[QueryValue, Sequence[QueryValue]]) -> str:
        return Query.new("equal", attribute, value)

    @staticmethod
    def not_equal(attribute: str, value: Union[QueryValue, Sequence[QueryValue]]) -> str:
        return Query.new("notEqual", attribute, value)

    @staticmethod
    def less_than(attribute: str, value: QueryValue) -> str:
        return Query.new("lessThan", attribute, value)

    @staticmethod
    def less_than_equal(attribute: str, value: QueryValue) -> str:
        return Query.new("lessThanEqual", attribute, value)

    @staticmethod
    def greater_than(attribute: str, value: QueryValue) -> str:
        return Query.new("greaterThan", attribute, value)

    @staticmethod
    def greater_than_equal(attribute: str, value: QueryValue) -> str:
        return Query.new("greaterThanEqual", attribute, value)

    @staticmethod
    def is_null(attribute: str) -> str:
        return Query.new("isNull", attribute)

    @staticmethod
    def is_not_null(attribute: str) -> str:
        return Query.new("isNotNull", attribute)

    @staticmethod
    def between(attribute: str, start: QueryValue, end: QueryValue) -> str:
        """Match values between start and end, both inclusive."""
        return Query.new("between", attribute, [start, end])

    @staticmethod
    def starts_with(attribute: str, value: str) -> str:
        return Query.new("startsWith", attribute, value)

    @staticmethod
    def ends_with(attribute: str, value: str) -> str:
        return Query.new("endsWith", attribute, value)

    @staticmethod
    def select(attributes: Sequence[str]) -> str:
        return Query.new("select", None, list(attributes))

    @staticmethod
    def search(attribute: str, value: str) -> str:
        """Full-text search; the attribute needs a fulltext index."""
        return Query.new("search", attribute, value)

    @staticmethod
    def order_asc(attribute: str) -> str:
        return Query.new("orderAsc", attribute)

    @staticmethod
    def order_desc(attribute: str) -> str:
        return Query.new("orderDesc", attribute)

    @staticmethod
    def cursor_after(document_id: str) -> str:
        return Query.new("cursorAfter", None, document_id)

    @staticmethod
    def cursor_before(document_id: str) -> str:
        return Query.new("cursorBefore", None, document_id)

    @staticmethod
    def limit(limit: int) -> str:
        return Query.new("limit", None, limit)

    @staticmethod
    def offset(offset: int) -> str:
        return Query.new("offset", None, offset)

    @staticmethod
    def contains(attribute: str, value: Union[str, Sequence[str]]) -> str:
        return Query.new("contains", attribute, value)

    @staticmethod
    def or_(queries: List[str]) -> str:
        """Combine query strings so that any of them may match."""
        return Query.new("or", None, [json.loads(q) for q in queries])

    @staticmethod
    def and_(queries: List[str]) -> str:
        """Combine query strings so that all of them must match."""
        return Query.new("and", None, [json.loads(q) for q in queries])
