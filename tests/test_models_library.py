import json
import uuid
from datetime import datetime

import pytest

from storage_app.db import connect, create_schema
from storage_app.models.library import (
    LibraryModel,
    LibraryWithRepoModel,
    get_library,
    get_library_with_repo,
)


@pytest.fixture
def conn():
    connection = connect(":memory:")
    create_schema(connection)
    connection.execute(
        "INSERT INTO repos (id, storage_type, storage_settings) VALUES (?, ?, ?)",
        ("main", "local", json.dumps({"path": "/srv"})),
    )
    return connection


def _insert_library(conn, repo_id="main", name="Documents"):
    library_id = uuid.uuid4()
    owner_id = uuid.uuid4()
    conn.execute(
        "INSERT INTO libraries (id, owner_id, repo_id, created_at, name) "
        "VALUES (?, ?, ?, ?, ?)",
        (str(library_id), str(owner_id), repo_id, "2024-05-06 07:08:09", name),
    )
    return library_id, owner_id


def test_get_library_reads_fields(conn):
    library_id, owner_id = _insert_library(conn)
    library = get_library(conn, str(library_id))
    assert library.id == library_id
    assert library.owner_id == owner_id
    assert library.repo_id == "main"
    assert library.name == "Documents"
    assert library.created_at == datetime(2024, 5, 6, 7, 8, 9)


def test_get_library_accepts_uppercase_id(conn):
    library_id, _ = _insert_library(conn)
    assert get_library(conn, str(library_id).upper()).id == library_id


def test_get_library_missing_returns_none(conn):
    assert get_library(conn, str(uuid.uuid4())) is None


def test_get_library_invalid_id_raises(conn):
    with pytest.raises(ValueError):
        get_library(conn, "not-a-uuid")


def test_get_library_with_repo(conn):
    library_id, _ = _insert_library(conn)
    result = get_library_with_repo(conn, str(library_id))
    assert result.storage_type == "local"
    assert result.library.id == library_id


def test_get_library_with_repo_missing_library(conn):
    assert get_library_with_repo(conn, str(uuid.uuid4())) is None


def test_get_library_with_repo_missing_repo_raises(conn):
    conn.execute("PRAGMA foreign_keys = OFF")
    library_id, _ = _insert_library(conn, repo_id="ghost")
    with pytest.raises(LookupError):
        get_library_with_repo(conn, str(library_id))


def test_to_dict_shapes(conn):
    library_id, owner_id = _insert_library(conn)
    result = get_library_with_repo(conn, str(library_id))
    data = json.loads(json.dumps(result.to_dict()))
    assert data["storage_type"] == "local"
    assert data["library"]["id"] == str(library_id)
    assert data["library"]["owner_id"] == str(owner_id)
    assert datetime.fromisoformat(data["library"]["created_at"]) == result.library.created_at


def test_models_construct_directly():
    model = LibraryModel(
        id=uuid.uuid4(),
        owner_id=uuid.uuid4(),
        repo_id="main",
        created_at=datetime(2024, 1, 1),
        name="Photos",
    )
    combined = LibraryWithRepoModel(library=model, storage_type="local")
    assert combined.to_dict()["library"] == model.to_dict()