"""Databases service: documents within collections."""
import logging
from typing import Any, Dict, List, Optional

from ..helpers import compact, require_params
from ..id import ID
from ..models import Document, DocumentList
from ._base import JSON_HEADERS, Service

log = logging.getLogger(__name__)


def _documents_path(database_id: str, collection_id: str) -> str:
    return f"/databases/{database_id}/collections/{collection_id}/documents"


class Databases(Service):
    """Service for documents stored in database collections."""

    async def list_documents(self, database_id: str, collection_id: str,
                             queries: Optional[List[str]] = None) -> DocumentList:
        """List documents of a collection, filtered and paged with ``Query`` strings."""
        require_params(databaseId=database_id, collectionId=collection_id)
        data = await self._client.call("GET", _documents_path(database_id, collection_id),
                                       params=compact({"queries": queries}))
        return DocumentList.from_dict(data)

    async def create_document(self, database_id: str, collection_id: str, data: Dict[str, Any],
                              document_id: Optional[str] = None,
                              permissions: Optional[List[str]] = None) -> Document:
        """Create a document.

        Args:
            database_id: Database id
            collection_id: Collection id
            data: Attribute values of the document
            document_id: Id of the new document; generated with ``ID.unique()`` when omitted
            permissions: Permission strings, see ``Permission``
        """
        require_params(databaseId=database_id, collectionId=collection_id, data=data)
        document_id = document_id or ID.unique()
        log.debug(f"Creating document {document_id} in {database_id}/{collection_id}")
        payload = compact({"documentId": document_id, "data": data, "permissions": permissions})
        result = await self._client.call("POST", _documents_path(database_id, collection_id), JSON_HEADERS, payload)
        return Document.from_dict(result)

    async def get_document(self, database_id: str, collection_id: str, document_id: str,
                           queries: Optional[List[str]] = None) -> Document:
        require_params(databaseId=database_id, collectionId=collection_id, documentId=document_id)
        data = await self._client.call("GET", f"{_documents_path(database_id, collection_id)}/{document_id}",
                                       params=compact({"queries": queries}))
        return Document.from_dict(data)

    async def update_document(self, database_id: str, collection_id: str, document_id: str,
                              data: Optional[Dict[str, Any]] = None,
                              permissions: Optional[List[str]] = None) -> Document:
        """Update some attributes and/or the permissions of a document."""
        require_params(databaseId=database_id, collectionId=collection_id, documentId=document_id)
        payload = compact({"data": data, "permissions": permissions})
        result = await self._client.call("PATCH", f"{_documents_path(database_id, collection_id)}/{document_id}",
                                         JSON_HEADERS, payload)
        return Document.from_dict(result)

    async def delete_document(self, database_id: str, collection_id: str, document_id: str) -> None:
        require_params(databaseId=database_id, collectionId=collection_id, documentId=document_id)
        await self._client.call("DELETE", f"{_documents_path(database_id, collection_id)}/{document_id}",
                                JSON_HEADERS)
