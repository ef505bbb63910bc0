from ._base import ConstantSet


class ExecutionMethod(ConstantSet):
    """HTTP methods a function execution can be invoked with."""

    label = "HTTP method"

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
