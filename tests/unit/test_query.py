import json
import re

import pytest

from appwrite_aio.id import ID
from appwrite_aio.permission import Permission, Role
from appwrite_aio.query import Query


def test_equal_is_compact_json():
    assert Query.equal("name", "John") == '{"method":"equal","attribute":"name","values":["John"]}'


def test_list_values_kept():
    assert json.loads(Query.equal("tag", ["a", "b"]))["values"] == ["a", "b"]


def test_builders_without_attribute_or_values():
    assert json.loads(Query.limit(25)) == {"method": "limit", "values": [25]}
    assert json.loads(Query.order_desc("year")) == {"method": "orderDesc", "attribute": "year"}
    assert json.loads(Query.is_null("deleted")) == {"method": "isNull", "attribute": "deleted"}
    assert json.loads(Query.cursor_after("doc1")) == {"method": "cursorAfter", "values": ["doc1"]}


def test_between():
    assert json.loads(Query.between("age", 18, 30))["values"] == [18, 30]


def test_logical_combinators_nest_queries():
    combined = json.loads(Query.or_([Query.equal("a", 1), Query.greater_than("b", 2)]))
    assert combined["method"] == "or"
    assert combined["values"] == [
        {"method": "equal", "attribute": "a", "values": [1]},
        {"method": "greaterThan", "attribute": "b", "values": [2]},
    ]
    assert json.loads(Query.and_([Query.limit(1)]))["method"] == "and"


def test_roles():
    assert Role.any() == "any"
    assert Role.user("u1") == "user:u1"
    assert Role.user("u1", "verified") == "user:u1/verified"
    assert Role.users() == "users"
    assert Role.users("unverified") == "users/unverified"
    assert Role.guests() == "guests"
    assert Role.team("t1") == "team:t1"
    assert Role.team("t1", "owner") == "team:t1/owner"
    assert Role.member("m1") == "member:m1"
    assert Role.label("vip") == "label:vip"


def test_permissions():
    assert Permission.read(Role.any()) == 'read("any")'
    assert Permission.write(Role.team("t1")) == 'write("team:t1")'
    assert Permission.create("users") == 'create("users")'
    assert Permission.update("guests") == 'update("guests")'
    assert Permission.delete("user:u1") == 'delete("user:u1")'


def test_unique_id_shape():
    first = ID.unique()
    assert re.fullmatch(r"[0-9a-f]+", first)
    assert len(first) >= 13 + 7
    assert ID.unique() != first
    assert len(ID.unique(10)) == len(first) + 3


def test_unique_id_invalid_padding():
    with pytest.raises(ValueError):
        ID.unique(0)


def test_custom_id():
    assert ID.custom("my-id") == "my-id"
