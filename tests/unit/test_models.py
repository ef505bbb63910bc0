import json
from typing import Any, Dict

import pytest

from appwrite_aio.models import (
    Document,
    DocumentList,
    Execution,
    File,
    InputFile,
    MfaRecoveryCodes,
    Preferences,
    Session,
    User,
)


def test_user_from_dict_maps_system_and_camel_keys() -> None:
    data: Dict[str, Any] = {
        "$id": "u1",
        "$createdAt": "2024-01-01T00:00:00.000+00:00",
        "name": "Jane",
        "emailVerification": True,
        "labels": ["admin"],
        "prefs": {"theme": "dark"},
        "targets": [{"$id": "t1", "providerType": "email", "identifier": "jane@example.com"}],
    }
    user = User.from_dict(data)
    assert user.id == "u1"
    assert user.created_at == "2024-01-01T00:00:00.000+00:00"
    assert user.email_verification is True
    assert user.labels == ["admin"]
    assert isinstance(user.prefs, Preferences)
    assert user.prefs.get("theme") == "dark"
    assert user.targets[0].provider_type == "email"
    assert user.raw == data


def test_missing_fields_default_to_none() -> None:
    session = Session.from_dict({"$id": "s1"})
    assert session.id == "s1"
    assert session.provider is None
    assert session.factors == []


def test_from_json_string() -> None:
    codes = MfaRecoveryCodes.from_json(json.dumps({"recoveryCodes": ["a1", "b2"]}))
    assert codes.recovery_codes == ["a1", "b2"]


def test_from_json_invalid() -> None:
    with pytest.raises(ValueError):
        File.from_json("{oops")


def test_from_dict_requires_mapping() -> None:
    with pytest.raises(TypeError):
        User.from_dict(["not", "a", "dict"])


def test_document_user_attributes_land_in_data() -> None:
    doc = Document.from_dict({
        "$id": "d1",
        "$collectionId": "books",
        "$databaseId": "main",
        "$permissions": ['read("any")'],
        "title": "Dune",
        "year": 1965,
    })
    assert doc.id == "d1"
    assert doc.collection_id == "books"
    assert doc.database_id == "main"
    assert doc.permissions == ['read("any")']
    assert doc.data == {"title": "Dune", "year": 1965}
    assert doc["title"] == "Dune"


def test_record_list_parses_items() -> None:
    docs = DocumentList.from_dict({"total": 2, "documents": [{"$id": "a", "x": 1}, {"$id": "b"}]})
    assert docs.total == 2
    assert len(docs) == 2
    assert [d.id for d in docs] == ["a", "b"]
    assert isinstance(docs.items[0], Document)


def test_execution_headers_are_records() -> None:
    execution = Execution.from_dict({
        "$id": "e1",
        "responseStatusCode": 200,
        "responseHeaders": [{"name": "content-type", "value": "text/plain"}],
    })
    assert execution.response_status_code == 200
    assert execution.response_headers[0].value == "text/plain"


def test_input_file_from_path(tmp_path) -> None:
    path = tmp_path / "photo.png"
    path.write_bytes(b"\x89PNG....")
    f = InputFile.from_path(path)
    assert f.name == "photo.png"
    assert f.mime_type == "image/png"
    assert f.size == 8


def test_input_file_unknown_type() -> None:
    f = InputFile.from_bytes(b"abc", "blob")
    assert f.mime_type == "application/octet-stream"
    assert f.size == 3
