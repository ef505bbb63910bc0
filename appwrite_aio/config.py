"""Client configuration for the appwrite_aio package.

ClientConfig is an immutable value: every ``set_*`` method returns an updated
copy, so a configuration can be shared between clients and tasks without
locking. ``ClientConfig.from_env`` resolves the process environment once.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional
from urllib.parse import urlparse

from ._version import __version__
from .exceptions import MissingProjectIdError, MissingRootUriError, MissingSecretError, ValidationError

DEFAULT_ENDPOINT = "https://cloud.appwrite.io/v1"
DEFAULT_TIMEOUT = 60.0
CHUNK_SIZE = 5 * 1024 * 1024  # 5 MiB
RESPONSE_FORMAT = "1.6.0"

SDK_HEADERS = {
    "x-sdk-name": "Python Async",
    "x-sdk-platform": "server",
    "x-sdk-language": "python",
    "x-sdk-version": __version__,
    "x-appwrite-response-format": RESPONSE_FORMAT,
}

log = logging.getLogger(__name__)


def _validate_endpoint(endpoint: str) -> str:
    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid endpoint URL '{endpoint}': expected an absolute http(s) URL")
    return endpoint.rstrip('/')


def realtime_endpoint_for(endpoint: str) -> str:
    """Derive the websocket endpoint from an http(s) endpoint."""
    if endpoint.startswith("https://"):
        return "wss://" + endpoint[len("https://"):]
    if endpoint.startswith("http://"):
        return "ws://" + endpoint[len("http://"):]
    return endpoint


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings and credentials for an Appwrite project.

    Attributes:
        endpoint: Absolute API URL including the version prefix
        endpoint_realtime: Websocket URL; derived from endpoint when not given
        project: Project id sent as ``x-appwrite-project``
        key: API secret sent as ``x-appwrite-key``
        jwt: End-user JWT sent as ``x-appwrite-jwt``
        locale: Locale sent as ``x-appwrite-locale``
        session: Session secret sent as ``x-appwrite-session``
        headers: Extra headers added to every request
        fallback_cookie: Value for ``x-fallback-cookies`` where cookies cannot be used
        timeout: Total request timeout in seconds
        chunk_size: Upload chunk size in bytes
    """
    endpoint: Optional[str] = DEFAULT_ENDPOINT
    endpoint_realtime: Optional[str] = None
    project: Optional[str] = None
    key: Optional[str] = None
    jwt: Optional[str] = None
    locale: Optional[str] = None
    session: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    fallback_cookie: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    chunk_size: int = CHUNK_SIZE

    def __post_init__(self):
        if self.endpoint is not None:
            endpoint = _validate_endpoint(self.endpoint)
            object.__setattr__(self, "endpoint", endpoint)
            if self.endpoint_realtime is None:
                object.__setattr__(self, "endpoint_realtime", realtime_endpoint_for(endpoint))
        if self.chunk_size <= 0:
            raise ValidationError(f"chunk_size must be positive, got {self.chunk_size}")
        object.__setattr__(self, "headers", MappingProxyType({k.lower(): v for k, v in self.headers.items()}))

    def __hash__(self) -> int:
        values = tuple(getattr(self, f.name) for f in dataclasses.fields(self) if f.name != "headers")
        return hash(values + (frozenset(self.headers.items()),))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ClientConfig":
        """Build a configuration from environment variables.

        Reads APPWRITE_ROOT_URI (or APPWRITE_ENDPOINT), APPWRITE_ENDPOINT_REALTIME,
        APPWRITE_PROJECT_ID, APPWRITE_SECRET, APPWRITE_JWT, APPWRITE_LOCALE,
        APPWRITE_SESSION, FALLBACK_COOKIE and APPWRITE_TIMEOUT. Empty values are
        treated as unset. Missing required values are reported at call time.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Field values taking precedence over the environment
        """
        env = os.environ if environ is None else environ

        def get(*names: str) -> Optional[str]:
            for name in names:
                value = env.get(name)
                if value:
                    return value
            return None

        values = {
            "endpoint": get("APPWRITE_ROOT_URI", "APPWRITE_ENDPOINT"),
            "endpoint_realtime": get("APPWRITE_ENDPOINT_REALTIME"),
            "project": get("APPWRITE_PROJECT_ID"),
            "key": get("APPWRITE_SECRET", "APPWRITE_API_KEY"),
            "jwt": get("APPWRITE_JWT"),
            "locale": get("APPWRITE_LOCALE"),
            "session": get("APPWRITE_SESSION"),
            "fallback_cookie": get("FALLBACK_COOKIE"),
        }
        timeout = get("APPWRITE_TIMEOUT")
        if timeout is not None:
            try:
                values["timeout"] = float(timeout)
            except ValueError as e:
                raise ValidationError(f"Invalid APPWRITE_TIMEOUT '{timeout}': {e}") from e
        values.update(overrides)
        log.debug(f"Loaded configuration from environment (endpoint={values['endpoint']}, project={values['project']})")
        return cls(**values)

    # -------------------------
    # Setters (return a copy)
    # -------------------------
    def set_endpoint(self, endpoint: str) -> "ClientConfig":
        """Return a copy using another API endpoint.

        The realtime endpoint is re-derived unless it was set explicitly.
        """
        derived = self.endpoint is not None and self.endpoint_realtime == realtime_endpoint_for(self.endpoint)
        realtime = None if (derived or self.endpoint_realtime is None) else self.endpoint_realtime
        return dataclasses.replace(self, endpoint=endpoint, endpoint_realtime=realtime)

    def set_endpoint_realtime(self, endpoint_realtime: str) -> "ClientConfig":
        return dataclasses.replace(self, endpoint_realtime=endpoint_realtime)

    def set_project(self, project: str) -> "ClientConfig":
        return dataclasses.replace(self, project=project)

    def set_key(self, key: str) -> "ClientConfig":
        return dataclasses.replace(self, key=key)

    def set_jwt(self, jwt: str) -> "ClientConfig":
        return dataclasses.replace(self, jwt=jwt)

    def set_locale(self, locale: str) -> "ClientConfig":
        return dataclasses.replace(self, locale=locale)

    def set_session(self, session: str) -> "ClientConfig":
        return dataclasses.replace(self, session=session)

    def set_fallback_cookie(self, cookie: str) -> "ClientConfig":
        return dataclasses.replace(self, fallback_cookie=cookie)

    def set_timeout(self, timeout: float) -> "ClientConfig":
        return dataclasses.replace(self, timeout=timeout)

    def add_header(self, name: str, value: str) -> "ClientConfig":
        headers = dict(self.headers)
        headers[name.lower()] = value
        return dataclasses.replace(self, headers=headers)

    # -------------------------
    # Resolution at call time
    # -------------------------
    def require_endpoint(self) -> str:
        if not self.endpoint:
            raise MissingRootUriError()
        return self.endpoint

    def require_project(self) -> str:
        if not self.project:
            raise MissingProjectIdError()
        return self.project

    def require_key(self) -> Optional[str]:
        """Return the API secret; only optional for JWT or session authenticated clients."""
        if not self.key and not (self.jwt or self.session):
            raise MissingSecretError()
        return self.key

    def default_headers(self) -> Dict[str, str]:
        """Headers sent with every request, resolved from this configuration.

        Raises:
            MissingProjectIdError: If no project is configured
            MissingSecretError: If neither a secret, a JWT nor a session is configured
        """
        headers = dict(SDK_HEADERS)
        headers["x-appwrite-project"] = self.require_project()
        key = self.require_key()
        if key:
            headers["x-appwrite-key"] = key
        if self.jwt:
            headers["x-appwrite-jwt"] = self.jwt
        if self.locale:
            headers["x-appwrite-locale"] = self.locale
        if self.session:
            headers["x-appwrite-session"] = self.session
        headers.update(self.headers)
        return headers
