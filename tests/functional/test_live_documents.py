"""
Test: create, query, update and delete a document
Usage:
  python tests/functional/test_live_documents.py
Requires APPWRITE_DATABASE_ID and APPWRITE_COLLECTION_ID; the collection needs a string attribute "title".
"""

import asyncio
import sys
from pathlib import Path

# Add repo root to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from tests.utils.read_credentials import client_config_kwargs, read_credentials


async def main():
    creds = read_credentials()
    required = ("APPWRITE_ROOT_URI", "APPWRITE_PROJECT_ID", "APPWRITE_SECRET",
                "APPWRITE_DATABASE_ID", "APPWRITE_COLLECTION_ID")
    if not all(creds.get(k) for k in required):
        print("Missing credentials.")
        return

    from appwrite_aio import AppwriteError, Client, ClientConfig, Permission, Query, Role

    db, col = creds["APPWRITE_DATABASE_ID"], creds["APPWRITE_COLLECTION_ID"]
    async with Client(ClientConfig(**client_config_kwargs(creds))) as client:
        doc = await client.databases.create_document(db, col, {"title": "functional test"},
                                                     permissions=[Permission.read(Role.any())])
        print("Created:", doc.id, doc.data)
        found = await client.databases.list_documents(db, col, [Query.equal("title", "functional test"), Query.limit(5)])
        print("Found", found.total, "matching documents")
        doc = await client.databases.update_document(db, col, doc.id, {"title": "functional test (updated)"})
        print("Updated:", doc.data)
        await client.databases.delete_document(db, col, doc.id)
        try:
            await client.databases.get_document(db, col, doc.id)
        except AppwriteError as e:
            print("Deleted, lookup now fails with:", e)


if __name__ == "__main__":
    asyncio.run(main())
