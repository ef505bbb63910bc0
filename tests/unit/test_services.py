import json
import re

import pytest
from aioresponses import aioresponses
from yarl import URL

from appwrite_aio.client import Client
from appwrite_aio.config import ClientConfig
from appwrite_aio.exceptions import InvalidValueError, ValidationError
from appwrite_aio.models import DocumentList, File, InputFile

BASE = "https://aw.example.com/v1"
DOCS = f"{BASE}/databases/main/collections/books/documents"


def make_client(**overrides) -> Client:
    values = {"endpoint": BASE, "project": "proj", "key": "secret"}
    values.update(overrides)
    return Client(ClientConfig(**values))


# -------------------------
# Databases
# -------------------------
@pytest.mark.asyncio
async def test_list_documents_with_queries():
    client = make_client()
    with aioresponses() as m:
        m.get(re.compile(rf"^{re.escape(DOCS)}\?.*$"),
              payload={"total": 1, "documents": [{"$id": "d1", "title": "Dune"}]})
        try:
            docs = await client.databases.list_documents("main", "books", queries=['{"method":"limit","values":[1]}'])
            assert isinstance(docs, DocumentList)
            assert docs.items[0]["title"] == "Dune"
            (method, url), = m.requests.keys()
            assert url.query["queries[0]"] == '{"method":"limit","values":[1]}'
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_create_document_generates_id():
    client = make_client()
    with aioresponses() as m:
        m.post(DOCS, status=201, payload={"$id": "generated", "title": "Dune"})
        try:
            doc = await client.databases.create_document("main", "books", {"title": "Dune"})
            assert doc.id == "generated"
            body = json.loads(m.requests[("POST", URL(DOCS))][0].kwargs["data"])
            assert re.fullmatch(r"[0-9a-f]{20,}", body["documentId"])
            assert body["data"] == {"title": "Dune"}
            assert "permissions" not in body
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_update_and_delete_document():
    client = make_client()
    with aioresponses() as m:
        m.patch(f"{DOCS}/d1", payload={"$id": "d1", "title": "Dune Messiah"})
        m.delete(f"{DOCS}/d1", status=204)
        try:
            doc = await client.databases.update_document("main", "books", "d1", data={"title": "Dune Messiah"})
            assert doc["title"] == "Dune Messiah"
            assert await client.databases.delete_document("main", "books", "d1") is None
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_get_document_requires_id():
    client = make_client()
    with pytest.raises(ValidationError, match="documentId"):
        await client.databases.get_document("main", "books", None)


@pytest.mark.asyncio
async def test_empty_ids_send_no_request():
    client = make_client()
    with aioresponses() as m:
        try:
            with pytest.raises(ValidationError, match="teamId"):
                await client.teams.get("")
            with pytest.raises(ValidationError, match="documentId"):
                await client.databases.delete_document("main", "books", "")
            with pytest.raises(ValidationError, match="fileId"):
                await client.storage.get_file("covers", "")
            with pytest.raises(ValidationError, match="membershipId"):
                await client.teams.delete_membership("t1", "")
            assert not m.requests
        finally:
            await client.close()


# -------------------------
# Storage
# -------------------------
@pytest.mark.asyncio
async def test_create_file_uploads_in_chunks():
    client = make_client(chunk_size=4)
    url = f"{BASE}/storage/buckets/covers/files"
    reports = []
    with aioresponses() as m:
        m.post(url, payload={"$id": "f1", "bucketId": "covers", "name": "c.png", "chunksTotal": 2,
                             "chunksUploaded": 2, "sizeOriginal": 6}, repeat=True)
        try:
            stored = await client.storage.create_file(
                "covers", "f1", InputFile.from_bytes(b"abcdef", "c.png"), on_progress=reports.append
            )
            assert isinstance(stored, File)
            assert stored.size_original == 6
            calls = m.requests[("POST", URL(url))]
            assert len(calls) == 2
            assert "content-type" not in calls[0].kwargs["headers"]
            assert [r.progress for r in reports] == [67, 100]
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_download_file_returns_bytes():
    client = make_client()
    with aioresponses() as m:
        m.get(f"{BASE}/storage/buckets/b/files/f/download", body=b"binary\x00data")
        try:
            assert await client.storage.download_file("b", "f") == b"binary\x00data"
        finally:
            await client.close()


def test_file_preview_url():
    client = make_client()
    url = URL(client.storage.get_file_preview("b", "f", width=200, gravity="top-left", border_width=2,
                                              output="webp"))
    assert url.path == "/v1/storage/buckets/b/files/f/preview"
    assert url.query["width"] == "200"
    assert url.query["borderWidth"] == "2"
    assert url.query["gravity"] == "top-left"
    assert url.query["project"] == "proj"
    with pytest.raises(InvalidValueError):
        client.storage.get_file_preview("b", "f", output="tiff")


def test_file_view_and_download_urls():
    client = make_client()
    assert client.storage.get_file_view("b", "f") == f"{BASE}/storage/buckets/b/files/f/view?project=proj"
    assert client.storage.get_file_download("b", "f") == f"{BASE}/storage/buckets/b/files/f/download?project=proj"


# -------------------------
# Avatars
# -------------------------
def test_avatar_urls():
    client = make_client()
    assert client.avatars.get_flag("fr", width=64) == f"{BASE}/avatars/flags/fr?width=64&project=proj"
    assert client.avatars.get_browser("ch") == f"{BASE}/avatars/browsers/ch?project=proj"
    assert URL(client.avatars.get_qr("hello", download=True)).query["download"] == "true"
    with pytest.raises(InvalidValueError):
        client.avatars.get_credit_card("monopoly-money")
    with pytest.raises(ValidationError):
        client.avatars.get_favicon(None)


# -------------------------
# Teams / functions / locale
# -------------------------
@pytest.mark.asyncio
async def test_team_membership_flow():
    client = make_client()
    with aioresponses() as m:
        m.post(f"{BASE}/teams", status=201, payload={"$id": "t1", "name": "Crew", "total": 1})
        m.post(f"{BASE}/teams/t1/memberships", status=201,
               payload={"$id": "m1", "teamId": "t1", "roles": ["editor"], "confirm": False})
        m.patch(f"{BASE}/teams/t1/memberships/m1/status", payload={"$id": "m1", "confirm": True})
        try:
            team = await client.teams.create("t1", "Crew")
            assert team.name == "Crew"
            membership = await client.teams.create_membership("t1", ["editor"], email="x@y.io")
            assert membership.roles == ["editor"]
            accepted = await client.teams.update_membership_status("t1", "m1", "u1", "secret")
            assert accepted.confirm is True
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_team_prefs():
    client = make_client()
    with aioresponses() as m:
        m.put(f"{BASE}/teams/t1/prefs", payload={"theme": "dark"})
        try:
            prefs = await client.teams.update_prefs("t1", {"theme": "dark"})
            assert prefs.data == {"theme": "dark"}
        finally:
            await client.close()


@pytest.mark.asyncio
async def test_create_execution():
    client = make_client()
    url = f"{BASE}/functions/fn/executions"
    with aioresponses() as m:
        m.post(url, status=201, payload={"$id": "e1", "status": "completed", "responseStatusCode": 200})
        try:
            execution = await client.functions.create_execution("fn", body="{}", async_=False, method="POST")
            assert execution.status == "completed"
            body = json.loads(m.requests[("POST", URL(url))][0].kwargs["data"])
            assert body == {"body": "{}", "async": False, "method": "POST"}
        finally:
            await client.close()
    with pytest.raises(InvalidValueError):
        await client.functions.create_execution("fn", method="TRACE")


@pytest.mark.asyncio
async def test_locale_lists():
    client = make_client()
    with aioresponses() as m:
        m.get(f"{BASE}/locale", payload={"ip": "127.0.0.1", "countryCode": "--", "eu": False})
        m.get(f"{BASE}/locale/countries/phones",
              payload={"total": 1, "phones": [{"code": "+33", "countryCode": "FR", "countryName": "France"}]})
        try:
            locale = await client.locale.get()
            assert locale.country_code == "--"
            phones = await client.locale.list_countries_phones()
            assert phones.items[0].country_name == "France"
        finally:
            await client.close()
