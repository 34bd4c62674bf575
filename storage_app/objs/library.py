"""A library bound to the repository that stores its files."""

from typing import BinaryIO

from storage_app.models.library import LibraryModel
from storage_app.objs.repo import Repo
from storage_app.storage.base import FileEntry, FileType


class Library:
    """File operations on one library, carried out by its repository."""

    def __init__(self, model: LibraryModel, repo: Repo):
        self._model = model
        self._repo = repo

    @property
    def model(self) -> LibraryModel:
        """The library's database record."""
        return self._model

    @property
    def _library_id(self) -> str:
        return str(self._model.id)

    def touch_file(self, rel_path, file_type: FileType) -> None:
        """Make sure an entry of ``file_type`` exists at ``rel_path``."""
        self._repo.backend.touch_file(self._library_id, rel_path, file_type)

    def write_file(self, rel_path, contents: bytes) -> None:
        """Replace the file's contents."""
        self._repo.backend.write_file(self._library_id, rel_path, contents)

    def read_file(self, rel_path) -> bytes | None:
        """Return the file's contents, or None when it does not exist."""
        return self._repo.backend.read_file(self._library_id, rel_path)

    def list_files(self, rel_path) -> list[FileEntry]:
        """List the entries of a folder."""
        return self._repo.backend.list_files(self._library_id, rel_path)

    def delete_file(self, rel_path) -> None:
        """Remove a file."""
        self._repo.backend.delete_file(self._library_id, rel_path)

    def move_file(self, rel_path, new_rel_path) -> None:
        """Rename a file within the library."""
        self._repo.backend.move_file(self._library_id, rel_path, new_rel_path)

    def open_read(self, rel_path) -> BinaryIO:
        """Open the file for buffered binary reading."""
        return self._repo.backend.open_read(self._library_id, rel_path)