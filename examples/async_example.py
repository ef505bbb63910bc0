#!/usr/bin/env python3
"""
Example: Using the appwrite_aio Client

Lists documents of a collection and uploads a file with progress reporting.

Usage:
    python async_example.py --endpoint https://cloud.appwrite.io/v1 --project my-project \
        --database main --collection books --bucket covers --file cover.png

The API secret is read from APPWRITE_SECRET.
"""

import asyncio
import argparse
import logging

from appwrite_aio import AppwriteError, Client, ClientConfig, ID, InputFile, Permission, Query, Role


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger(__name__)


async def list_documents(client: Client, database: str, collection: str):
    log.info("=== Documents ===")
    docs = await client.databases.list_documents(
        database, collection, queries=[Query.order_desc("$createdAt"), Query.limit(5)]
    )
    log.info(f"{docs.total} documents in {database}/{collection}")
    for doc in docs:
        log.info(f"  {doc.id}: {doc.data}")


async def upload_file(client: Client, bucket: str, path: str):
    log.info("=== Upload ===")

    def report(progress):
        log.info(f"  {progress.progress}% ({progress.chunks_uploaded}/{progress.chunks_total} chunks)")

    stored = await client.storage.create_file(
        bucket,
        ID.unique(),
        InputFile.from_path(path),
        permissions=[Permission.read(Role.any())],
        on_progress=report,
    )
    log.info(f"Stored {stored.name} as {stored.id} ({stored.size_original} bytes)")
    log.info(f"Preview: {client.storage.get_file_preview(bucket, stored.id, width=320)}")


async def main():
    parser = argparse.ArgumentParser(description="appwrite_aio example")
    parser.add_argument("--endpoint", help="API endpoint, e.g. https://cloud.appwrite.io/v1")
    parser.add_argument("--project", help="Project id")
    parser.add_argument("--database")
    parser.add_argument("--collection")
    parser.add_argument("--bucket")
    parser.add_argument("--file", help="File to upload into --bucket")
    args = parser.parse_args()

    overrides = {k: v for k, v in (("endpoint", args.endpoint), ("project", args.project)) if v}
    async with Client.from_env(**overrides) as client:
        try:
            if args.database and args.collection:
                await list_documents(client, args.database, args.collection)
            if args.bucket and args.file:
                await upload_file(client, args.bucket, args.file)
        except AppwriteError as e:
            log.error(f"Request failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
