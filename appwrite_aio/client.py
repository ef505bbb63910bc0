"""Appwrite API client implementation.

This module provides the Client class that builds requests, talks to the
Appwrite REST API over aiohttp, uploads files in chunks and decodes responses.
Service groups (account, databases, storage, ...) hang off the client as lazy
properties.
"""
import asyncio
import inspect
import json
import logging
import math
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

import aiohttp

from .config import ClientConfig
from .exceptions import AppwriteError, ValidationError
from .helpers import bytes_to_human_readable, encode_query, flatten, stringify
from .models import InputFile, ProgressCallback, UploadProgress
from .services import Account, Avatars, Databases, Functions, Locale, Storage, Teams
from .types import RESPONSE_ARRAY_BUFFER, RESPONSE_JSON, ErrorPayload

log = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


class PreparedRequest(NamedTuple):
    """A fully built request, ready to hand to the transport."""
    method: str
    url: str
    headers: Dict[str, str]
    body: Any


def decode_response(status: int, body: bytes, headers: Optional[Mapping[str, str]] = None,
                    response_type: str = RESPONSE_JSON) -> Any:
    """Decode a successful response body.

    Args:
        status: HTTP status, reported on parse errors
        body: Raw response body
        headers: Response headers
        response_type: ``"json"``, ``"arrayBuffer"`` or anything else for text

    Returns:
        Parsed JSON for ``"json"`` (``{}`` for an empty body), raw bytes for
        ``"arrayBuffer"``, otherwise ``{"message": <body text>}``

    Raises:
        AppwriteError: If a JSON body cannot be parsed
    """
    if response_type == RESPONSE_ARRAY_BUFFER:
        return bytes(body)
    if response_type == RESPONSE_JSON:
        if not body.strip():
            log.warning(f"Empty JSON response body (status {status})")
            return {}
        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.error(f"Failed to parse JSON response (status {status}): {e}")
            raise AppwriteError(
                f"Failed to parse server response: {e}", code=status, type="response_parse_error",
                response={"message": body.decode("utf-8", errors="replace")},
            ) from e
    return {"message": body.decode("utf-8", errors="replace")}


def _error_payload(body: bytes, response_type: str) -> ErrorPayload:
    text = body.decode("utf-8", errors="replace")
    if response_type == RESPONSE_JSON:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            data = None
        if isinstance(data, dict):
            return data
    return {"message": text}


def _find_file(payload: Mapping[str, Any]) -> Tuple[str, InputFile]:
    for key, value in payload.items():
        if isinstance(value, InputFile):
            return key, value
    raise ValidationError("Upload payload does not contain an InputFile")


class Client:
    """Async client for the Appwrite REST API.

    The aiohttp session is created on first use and released by ``close()``
    (or by leaving an ``async with`` block).

    Example:
        >>> async with Client(ClientConfig(project="demo", key="secret")) as client:
        ...     user = await client.account.get()
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self._session: Optional[aiohttp.ClientSession] = None
        self._account: Optional[Account] = None
        self._avatars: Optional[Avatars] = None
        self._databases: Optional[Databases] = None
        self._functions: Optional[Functions] = None
        self._locale: Optional[Locale] = None
        self._storage: Optional[Storage] = None
        self._teams: Optional[Teams] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Client":
        """Create a client configured from APPWRITE_* environment variables."""
        return cls(ClientConfig.from_env(environ, **overrides))

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            log.debug(f"Opened HTTP session (timeout={self.config.timeout}s)")
        return self._session

    async def close(self) -> None:
        """Close the underlying HTTP session, if any."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            log.debug("Closed HTTP session")
        self._session = None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    # -------------------------
    # Services
    # -------------------------
    @property
    def account(self) -> Account:
        """Account and session operations for the authenticated user."""
        if self._account is None:
            self._account = Account(self)
        return self._account

    @property
    def avatars(self) -> Avatars:
        """Avatar and image URL builders."""
        if self._avatars is None:
            self._avatars = Avatars(self)
        return self._avatars

    @property
    def databases(self) -> Databases:
        """Document operations."""
        if self._databases is None:
            self._databases = Databases(self)
        return self._databases

    @property
    def functions(self) -> Functions:
        if self._functions is None:
            self._functions = Functions(self)
        return self._functions

    @property
    def locale(self) -> Locale:
        if self._locale is None:
            self._locale = Locale(self)
        return self._locale

    @property
    def storage(self) -> Storage:
        """File storage operations, including chunked uploads."""
        if self._storage is None:
            self._storage = Storage(self)
        return self._storage

    @property
    def teams(self) -> Teams:
        if self._teams is None:
            self._teams = Teams(self)
        return self._teams

    # -------------------------
    # Request pipeline
    # -------------------------
    def prepare(self, method: str, api_path: str, headers: Optional[Mapping[str, str]] = None,
                params: Any = None) -> PreparedRequest:
        """Build a request without sending it.

        Args:
            method: HTTP method, any case
            api_path: Path relative to the configured endpoint, e.g. ``/account``
            headers: Per-call headers; they override the defaults
            params: Query parameters for GET, otherwise the body payload

        Returns:
            PreparedRequest with lower-case header names

        Raises:
            MissingRootUriError: If no endpoint is configured
            MissingProjectIdError: If no project is configured
            MissingSecretError: If no secret, JWT or session is configured
            ValidationError: If params cannot be flattened
        """
        method = method.upper()
        url = self.config.require_endpoint() + api_path
        merged = self.config.default_headers()
        for name, value in (headers or {}).items():
            merged[name.lower()] = value
        if self.config.fallback_cookie:
            merged["x-fallback-cookies"] = self.config.fallback_cookie

        body: Any = None
        if method == "GET":
            query = encode_query(params)
            if query:
                url = f"{url}?{query}"
        else:
            content_type = merged.get("content-type", "")
            if content_type.startswith(JSON_CONTENT_TYPE):
                body = json.dumps(params if params is not None else {})
            elif content_type.startswith(MULTIPART_CONTENT_TYPE):
                body = self._form_data(params or {})
                # aiohttp sets the header with the multipart boundary
                del merged["content-type"]
            else:
                body = params

        return PreparedRequest(method, url, merged, body)

    @staticmethod
    def _form_data(params: Mapping[str, Any]) -> aiohttp.FormData:
        form = aiohttp.FormData(default_to_multipart=True)
        fields = {}
        for key, value in params.items():
            if isinstance(value, InputFile):
                form.add_field(key, value.content, filename=value.name, content_type=value.mime_type)
            elif value is not None:
                fields[key] = value
        for key, value in flatten(fields).items():
            if value is not None:
                form.add_field(key, stringify(value))
        return form

    async def call(self, method: str, api_path: str, headers: Optional[Mapping[str, str]] = None,
                   params: Any = None, response_type: str = RESPONSE_JSON) -> Any:
        """Send one request and decode its response.

        Args:
            method: HTTP method
            api_path: Path relative to the configured endpoint
            headers: Per-call headers
            params: Query parameters (GET) or body payload
            response_type: ``"json"``, ``"arrayBuffer"`` or a text fallback

        Returns:
            Decoded response, see ``decode_response``

        Raises:
            ConfigurationError: If required configuration is missing (no request is sent)
            AppwriteError: With the server status for responses >= 400, or code
                500 when the request could not be completed
        """
        request = self.prepare(method, api_path, headers, params)
        session = await self._ensure_session()
        log.debug(f"{request.method} {api_path}")
        try:
            async with session.request(request.method, request.url, headers=request.headers,
                                       data=request.body) as resp:
                status = resp.status
                body = await resp.read()
                resp_headers = dict(resp.headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            reason = str(e) or type(e).__name__
            log.error(f"Request failed for {request.method} {api_path}: {reason}")
            raise AppwriteError(reason, code=500) from e

        log.debug(f"{api_path} response - status: {status}, size: {len(body)}")
        if status >= 400:
            data = _error_payload(body, response_type)
            message = data.get("message") or f"HTTP {status}"
            log.debug(f"{api_path} failed with {status}: {message}")
            raise AppwriteError(message, code=status, type=data.get("type", ""), response=data)
        return decode_response(status, body, resp_headers, response_type)

    async def chunked_upload(self, method: str, api_path: str, headers: Optional[Mapping[str, str]],
                             payload: Mapping[str, Any],
                             on_progress: Optional[ProgressCallback] = None) -> Any:
        """Upload the InputFile in payload, splitting it into sequential chunks.

        Files up to ``config.chunk_size`` bytes go out in a single request.
        Larger files are sent as ``content-range`` slices; after the first
        chunk the returned ``$id`` is sent as ``x-appwrite-id`` so the server
        appends to the same upload. Progress is reported after each chunk.

        Args:
            method: HTTP method, usually POST
            api_path: Path relative to the configured endpoint
            headers: Per-call headers (multipart content type)
            payload: Form fields plus exactly one InputFile value
            on_progress: Called with an UploadProgress after every chunk; may be a coroutine function

        Returns:
            Decoded response of the last request

        Raises:
            ValidationError: If payload holds no InputFile
            AppwriteError: If any chunk fails; later chunks are not sent
        """
        key, input_file = _find_file(payload)
        size = input_file.size
        chunk_size = self.config.chunk_size
        headers = dict(headers or {})

        if size <= chunk_size:
            log.info(f"Uploading '{input_file.name}' ({bytes_to_human_readable(size)}) in one request")
            return await self.call(method, api_path, headers, payload)

        chunks_total = math.ceil(size / chunk_size)
        log.info(f"Uploading '{input_file.name}' ({bytes_to_human_readable(size)}) in {chunks_total} chunks")
        response: Any = None
        start = 0
        while start < size:
            end = min(start + chunk_size, size)
            headers["content-range"] = f"bytes {start}-{end - 1}/{size}"
            chunk_payload = dict(payload)
            chunk_payload[key] = input_file.slice(start, end)

            response = await self.call(method, api_path, headers, chunk_payload)
            upload_id = response.get("$id") if isinstance(response, dict) else None
            if upload_id:
                headers["x-appwrite-id"] = upload_id
            log.debug(f"Uploaded {headers['content-range']}")

            if on_progress is not None:
                progress = UploadProgress(
                    id=upload_id,
                    progress=math.floor(end * 100 / size + 0.5),
                    size_uploaded=end,
                    chunks_total=chunks_total,
                    chunks_uploaded=math.floor(end / chunk_size),
                )
                result = on_progress(progress)
                if inspect.isawaitable(result):
                    await result
            start = end
        return response

    def build_url(self, api_path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Return an absolute URL for a GET resource, with ``project`` added to the query.

        Used for resources meant to be opened directly (images, file downloads,
        OAuth2 redirects) rather than fetched through ``call``.
        """
        query = dict(params or {})
        query["project"] = self.config.require_project()
        return f"{self.config.require_endpoint()}{api_path}?{encode_query(query)}"
