"""Appwrite async client package.

This package provides an asyncio client for the Appwrite backend-as-a-service
REST API: accounts and sessions, databases, storage (with chunked uploads),
teams, functions, locale data and avatar URLs.

Example Usage:
    from appwrite_aio import Client, ClientConfig, ID, InputFile, Permission, Query, Role

    config = ClientConfig(
        endpoint='https://cloud.appwrite.io/v1',
        project='my-project',
        key='my-api-secret',
    )
    # or: config = ClientConfig.from_env()

    async with Client(config) as client:
        docs = await client.databases.list_documents(
            'main', 'books', queries=[Query.equal('author', 'Jane'), Query.limit(10)]
        )
        for doc in docs:
            print(doc.id, doc['title'])

        stored = await client.storage.create_file(
            'covers',
            ID.unique(),
            InputFile.from_path('cover.png'),
            permissions=[Permission.read(Role.any())],
            on_progress=lambda p: print(f"{p.progress}%"),
        )
"""

from ._version import __version__, __version_info__
from .client import Client, PreparedRequest, decode_response
from .config import ClientConfig
from .exceptions import (
    AppwriteError,
    ConfigurationError,
    MissingProjectIdError,
    MissingSecretError,
    MissingRootUriError,
    ValidationError,
    InvalidValueError,
)
from .helpers import flatten
from .id import ID
from .models import InputFile, UploadProgress
from .permission import Permission, Role
from .query import Query
from .types import Ok, Err

__all__ = [
    # Version
    '__version__',
    '__version_info__',

    # Main classes
    'Client',
    'ClientConfig',
    'PreparedRequest',
    'decode_response',
    'flatten',

    # Exceptions
    'AppwriteError',
    'ConfigurationError',
    'MissingProjectIdError',
    'MissingSecretError',
    'MissingRootUriError',
    'ValidationError',
    'InvalidValueError',

    # Uploads
    'InputFile',
    'UploadProgress',

    # Helpers
    'ID',
    'Permission',
    'Role',
    'Query',
    'Ok',
    'Err',
]
