from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import Client

JSON_HEADERS = {"content-type": "application/json"}
MULTIPART_HEADERS = {"content-type": "multipart/form-data"}


class Service:
    """Base for service groups; holds the client every request goes through."""

    def __init__(self, client: "Client"):
        self._client = client
