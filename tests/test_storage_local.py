import os

import pytest

from storage_app.storage.base import FileType
from storage_app.storage.local import LocalStorage, resolve_path

LIB = "lib1"


@pytest.fixture
def storage(tmp_path):
    (tmp_path / LIB).mkdir()
    return LocalStorage({"path": str(tmp_path)})


def test_init_requires_path():
    with pytest.raises(ValueError):
        LocalStorage({})


def test_init_rejects_non_string_path():
    with pytest.raises(ValueError):
        LocalStorage({"path": 5})


def test_resolve_path_joins_under_library(tmp_path):
    assert resolve_path(tmp_path, LIB, "a/b") == tmp_path / LIB / "a" / "b"


def test_resolve_path_ignores_leading_slash(tmp_path):
    assert resolve_path(tmp_path, LIB, "/a") == resolve_path(tmp_path, LIB, "a")


@pytest.mark.parametrize("path", ["../../outside", "a/../../../outside"])
def test_resolve_path_rejects_traversal(tmp_path, path):
    with pytest.raises(ValueError):
        resolve_path(tmp_path, LIB, path)


def test_resolve_path_rejects_absolute_library(tmp_path):
    with pytest.raises(ValueError):
        resolve_path(tmp_path / "root", "/elsewhere", "a")


def test_write_read_round_trip(storage):
    storage.write_file(LIB, "a.txt", b"hello")
    assert storage.read_file(LIB, "/a.txt") == b"hello"


def test_read_missing_returns_none(storage):
    assert storage.read_file(LIB, "missing.txt") is None


def test_write_rejects_traversal(storage):
    with pytest.raises(ValueError):
        storage.write_file(LIB, "../../x", b"data")


def test_touch_folder_creates_nested(storage, tmp_path):
    storage.touch_file(LIB, "a/b", FileType.FOLDER)
    storage.touch_file(LIB, "a/b", FileType.FOLDER)
    assert (tmp_path / LIB / "a" / "b").is_dir()


def test_touch_file_needs_existing_file(storage):
    with pytest.raises(FileNotFoundError):
        storage.touch_file(LIB, "nope.txt", FileType.FILE)
    storage.write_file(LIB, "yes.txt", b"")
    storage.touch_file(LIB, "yes.txt", FileType.FILE)
    assert storage.read_file(LIB, "yes.txt") == b""


@pytest.mark.parametrize("kind", [FileType.SYMLINK, FileType.OTHER])
def test_touch_unsupported(storage, kind):
    with pytest.raises(ValueError):
        storage.touch_file(LIB, "x", kind)


def test_list_files(storage, tmp_path):
    storage.write_file(LIB, "a.txt", b"abc")
    storage.touch_file(LIB, "sub", FileType.FOLDER)
    os.symlink(tmp_path / LIB / "a.txt", tmp_path / LIB / "link")
    entries = {entry.path: entry for entry in storage.list_files(LIB, "")}
    assert set(entries) == {"a.txt", "sub", "link"}
    assert entries["a.txt"].size == 3
    assert entries["a.txt"].file_type is FileType.FILE
    assert entries["sub"].file_type is FileType.FOLDER
    assert entries["link"].file_type is FileType.SYMLINK


def test_list_missing_folder_raises(storage):
    with pytest.raises(FileNotFoundError):
        storage.list_files(LIB, "missing")


def test_delete_file(storage):
    storage.write_file(LIB, "a.txt", b"abc")
    storage.delete_file(LIB, "a.txt")
    assert storage.read_file(LIB, "a.txt") is None
    with pytest.raises(FileNotFoundError):
        storage.delete_file(LIB, "a.txt")


def test_move_file(storage):
    storage.write_file(LIB, "a.txt", b"abc")
    storage.move_file(LIB, "a.txt", "b.txt")
    assert storage.read_file(LIB, "a.txt") is None
    assert storage.read_file(LIB, "b.txt") == b"abc"


def test_open_read(storage):
    storage.write_file(LIB, "a.txt", b"stream me")
    with storage.open_read(LIB, "a.txt") as stream:
        assert stream.read() == b"stream me"