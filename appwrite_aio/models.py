"""Typed records mirroring Appwrite JSON responses.

Every record is built with ``from_dict`` (or ``from_json``) and keeps the
server payload in ``raw``. Attribute names are the snake_case form of the
API's camelCase keys; system attributes drop their ``$`` prefix
(``$id`` -> ``id``, ``$createdAt`` -> ``created_at``).
"""
from __future__ import annotations

import json
import mimetypes
import os
from dataclasses import dataclass, field, fields
from typing import Any, Awaitable, Callable, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union

from .exceptions import ValidationError
from .helpers import decode_base64
from .types import JSONType

M = TypeVar("M", bound="Model")

_SYSTEM_KEYS = {
    "id": "$id",
    "created_at": "$createdAt",
    "updated_at": "$updatedAt",
    "permissions": "$permissions",
    "collection_id": "$collectionId",
    "database_id": "$databaseId",
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass
class Model:
    """Base class for API records.

    Subclasses declare their attributes as optional dataclass fields. Nested
    records are converted through ``_nested`` ({attribute: record class}).
    """
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    _nested: ClassVar[Dict[str, Type["Model"]]] = {}

    @classmethod
    def api_key(cls, attribute: str) -> str:
        return _SYSTEM_KEYS.get(attribute) or _camel(attribute)

    @classmethod
    def from_dict(cls: Type[M], data: Mapping[str, Any]) -> M:
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__}.from_dict expects a mapping, got {type(data).__name__}")
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name == "raw":
                continue
            key = cls.api_key(f.name)
            if key not in data:
                continue
            value = data[key]
            nested = cls._nested.get(f.name)
            if nested is not None and value is not None:
                if isinstance(value, list):
                    value = [nested.from_dict(item) for item in value]
                else:
                    value = nested.from_dict(value)
            kwargs[f.name] = value
        return cls(raw=dict(data), **kwargs)

    @classmethod
    def from_json(cls: Type[M], value: Union[str, bytes, Mapping[str, Any]]) -> M:
        """Build a record from a JSON string/bytes or an already decoded mapping."""
        if isinstance(value, (str, bytes)):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON for {cls.__name__}: {e}") from e
        return cls.from_dict(value)


# -------------------------
# Account
# -------------------------
@dataclass
class Preferences(Model):
    """Free-form key/value preferences of a user or team."""
    data: Dict[str, JSONType] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, Mapping):
            raise TypeError(f"Preferences.from_dict expects a mapping, got {type(data).__name__}")
        return cls(raw=dict(data), data=dict(data))

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


@dataclass
class Target(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    name: Optional[str] = None
    user_id: Optional[str] = None
    provider_id: Optional[str] = None
    provider_type: Optional[str] = None
    identifier: Optional[str] = None


@dataclass
class User(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    hash: Optional[str] = None
    hash_options: Optional[Dict[str, Any]] = None
    registration: Optional[str] = None
    status: Optional[bool] = None
    labels: List[str] = field(default_factory=list)
    password_update: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    email_verification: Optional[bool] = None
    phone_verification: Optional[bool] = None
    mfa: Optional[bool] = None
    prefs: Optional[Preferences] = None
    targets: List[Target] = field(default_factory=list)
    accessed_at: Optional[str] = None

    _nested: ClassVar[Dict[str, Type[Model]]] = {"prefs": Preferences, "targets": Target}


@dataclass
class Session(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_id: Optional[str] = None
    expire: Optional[str] = None
    provider: Optional[str] = None
    provider_uid: Optional[str] = None
    provider_access_token: Optional[str] = None
    provider_access_token_expiry: Optional[str] = None
    provider_refresh_token: Optional[str] = None
    ip: Optional[str] = None
    os_code: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    client_type: Optional[str] = None
    client_code: Optional[str] = None
    client_name: Optional[str] = None
    client_version: Optional[str] = None
    client_engine: Optional[str] = None
    client_engine_version: Optional[str] = None
    device_name: Optional[str] = None
    device_brand: Optional[str] = None
    device_model: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    current: Optional[bool] = None
    factors: List[str] = field(default_factory=list)
    secret: Optional[str] = None
    mfa_updated_at: Optional[str] = None


@dataclass
class Identity(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_id: Optional[str] = None
    provider: Optional[str] = None
    provider_uid: Optional[str] = None
    provider_email: Optional[str] = None
    provider_access_token: Optional[str] = None
    provider_access_token_expiry: Optional[str] = None
    provider_refresh_token: Optional[str] = None


@dataclass
class Jwt(Model):
    jwt: Optional[str] = None


@dataclass
class Log(Model):
    event: Optional[str] = None
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    mode: Optional[str] = None
    ip: Optional[str] = None
    time: Optional[str] = None
    os_code: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    client_type: Optional[str] = None
    client_code: Optional[str] = None
    client_name: Optional[str] = None
    client_version: Optional[str] = None
    client_engine: Optional[str] = None
    client_engine_version: Optional[str] = None
    device_name: Optional[str] = None
    device_brand: Optional[str] = None
    device_model: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None


@dataclass
class Token(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    user_id: Optional[str] = None
    secret: Optional[str] = None
    expire: Optional[str] = None
    phrase: Optional[str] = None


@dataclass
class MfaType(Model):
    secret: Optional[str] = None
    uri: Optional[str] = None


@dataclass
class MfaChallenge(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    user_id: Optional[str] = None
    expire: Optional[str] = None


@dataclass
class MfaRecoveryCodes(Model):
    recovery_codes: List[str] = field(default_factory=list)


@dataclass
class MfaFactors(Model):
    totp: Optional[bool] = None
    phone: Optional[bool] = None
    email: Optional[bool] = None
    recovery_code: Optional[bool] = None


# -------------------------
# Databases / storage / functions / teams
# -------------------------
@dataclass
class Document(Model):
    """A database document; user attributes (keys without ``$``) land in ``data``."""
    id: Optional[str] = None
    collection_id: Optional[str] = None
    database_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: List[str] = field(default_factory=list)
    data: Dict[str, JSONType] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data):
        document = super().from_dict(data)
        document.data = {k: v for k, v in data.items() if not k.startswith("$")}
        return document

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


@dataclass
class File(Model):
    id: Optional[str] = None
    bucket_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: List[str] = field(default_factory=list)
    name: Optional[str] = None
    signature: Optional[str] = None
    mime_type: Optional[str] = None
    size_original: Optional[int] = None
    chunks_total: Optional[int] = None
    chunks_uploaded: Optional[int] = None


@dataclass
class Headers(Model):
    name: Optional[str] = None
    value: Optional[str] = None


@dataclass
class Execution(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: List[str] = field(default_factory=list)
    function_id: Optional[str] = None
    trigger: Optional[str] = None
    status: Optional[str] = None
    request_method: Optional[str] = None
    request_path: Optional[str] = None
    request_headers: List[Headers] = field(default_factory=list)
    response_status_code: Optional[int] = None
    response_body: Optional[str] = None
    response_headers: List[Headers] = field(default_factory=list)
    logs: Optional[str] = None
    errors: Optional[str] = None
    duration: Optional[float] = None
    scheduled_at: Optional[str] = None

    _nested: ClassVar[Dict[str, Type[Model]]] = {"request_headers": Headers, "response_headers": Headers}


@dataclass
class Team(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    name: Optional[str] = None
    total: Optional[int] = None
    prefs: Optional[Preferences] = None

    _nested: ClassVar[Dict[str, Type[Model]]] = {"prefs": Preferences}


@dataclass
class Membership(Model):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    team_id: Optional[str] = None
    team_name: Optional[str] = None
    invited: Optional[str] = None
    joined: Optional[str] = None
    confirm: Optional[bool] = None
    mfa: Optional[bool] = None
    roles: List[str] = field(default_factory=list)


# -------------------------
# Locale
# -------------------------
@dataclass
class Locale(Model):
    ip: Optional[str] = None
    country_code: Optional[str] = None
    country: Optional[str] = None
    continent_code: Optional[str] = None
    continent: Optional[str] = None
    eu: Optional[bool] = None
    currency: Optional[str] = None


@dataclass
class LocaleCode(Model):
    code: Optional[str] = None
    name: Optional[str] = None


@dataclass
class Continent(Model):
    name: Optional[str] = None
    code: Optional[str] = None


@dataclass
class Country(Model):
    name: Optional[str] = None
    code: Optional[str] = None


@dataclass
class Currency(Model):
    symbol: Optional[str] = None
    name: Optional[str] = None
    symbol_native: Optional[str] = None
    decimal_digits: Optional[int] = None
    rounding: Optional[float] = None
    code: Optional[str] = None
    name_plural: Optional[str] = None


@dataclass
class Language(Model):
    name: Optional[str] = None
    code: Optional[str] = None
    native_name: Optional[str] = None


@dataclass
class Phone(Model):
    code: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None


# -------------------------
# Lists
# -------------------------
@dataclass
class RecordList(Model):
    """A page of records: ``total`` plus ``items`` parsed as ``_item``.

    ``_items_key`` names the array in the JSON payload (``documents``,
    ``sessions``, ...).
    """
    total: int = 0
    items: List[Any] = field(default_factory=list)

    _item: ClassVar[Type[Model]] = Model
    _items_key: ClassVar[str] = "items"

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__}.from_dict expects a mapping, got {type(data).__name__}")
        items = [cls._item.from_dict(item) for item in data.get(cls._items_key) or []]
        return cls(raw=dict(data), total=data.get("total", len(items)), items=items)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _record_list(name: str, item: Type[Model], items_key: str) -> Type[RecordList]:
    namespace = {"_item": item, "_items_key": items_key, "__doc__": f"List of {item.__name__} records."}
    cls = type(name, (RecordList,), namespace)
    cls.__module__ = __name__
    return dataclass(cls)


DocumentList = _record_list("DocumentList", Document, "documents")
SessionList = _record_list("SessionList", Session, "sessions")
IdentityList = _record_list("IdentityList", Identity, "identities")
LogList = _record_list("LogList", Log, "logs")
FileList = _record_list("FileList", File, "files")
TeamList = _record_list("TeamList", Team, "teams")
MembershipList = _record_list("MembershipList", Membership, "memberships")
ExecutionList = _record_list("ExecutionList", Execution, "executions")
LocaleCodeList = _record_list("LocaleCodeList", LocaleCode, "localeCodes")
ContinentList = _record_list("ContinentList", Continent, "continents")
CountryList = _record_list("CountryList", Country, "countries")
CurrencyList = _record_list("CurrencyList", Currency, "currencies")
LanguageList = _record_list("LanguageList", Language, "languages")
PhoneList = _record_list("PhoneList", Phone, "phones")


# -------------------------
# Uploads
# -------------------------
@dataclass(frozen=True)
class UploadProgress:
    """Progress of a chunked upload, reported after every chunk."""
    id: Optional[str]
    progress: int
    size_uploaded: int
    chunks_total: int
    chunks_uploaded: int


ProgressCallback = Callable[[UploadProgress], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class InputFile:
    """A file to upload.

    ``size`` is the raw byte length the chunked upload computes its ranges
    from; it must match ``len(content)``.
    """
    content: bytes
    name: str
    mime_type: str = "application/octet-stream"
    size: int = -1

    def __post_init__(self):
        if self.size < 0:
            object.__setattr__(self, "size", len(self.content))

    @classmethod
    def from_bytes(cls, content: bytes, name: str, mime_type: Optional[str] = None) -> "InputFile":
        return cls(content=bytes(content), name=name, mime_type=mime_type or _guess_mime_type(name))

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"], name: Optional[str] = None,
                  mime_type: Optional[str] = None) -> "InputFile":
        """Read a file from disk."""
        name = name or os.path.basename(os.fspath(path))
        with open(path, 'rb') as f:
            content = f.read()
        return cls(content=content, name=name, mime_type=mime_type or _guess_mime_type(name))

    @classmethod
    def from_base64(cls, data: str, name: str, mime_type: Optional[str] = None) -> "InputFile":
        """Decode base64 content; ranges are computed on the decoded bytes."""
        if not isinstance(data, str):
            raise ValidationError(f"Base64 content must be a string, got {type(data).__name__}")
        return cls.from_bytes(decode_base64(data), name, mime_type)

    def slice(self, start: int, end: int) -> "InputFile":
        """Return a copy holding ``content[start:end]`` with the original name, type and size."""
        return InputFile(content=self.content[start:end], name=self.name, mime_type=self.mime_type, size=self.size)


def _guess_mime_type(name: str) -> str:
    mime_type, _ = mimetypes.guess_type(name)
    return mime_type or "application/octet-stream"
