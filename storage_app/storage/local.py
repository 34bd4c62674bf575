"""Storage backend that keeps library files in a local folder."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import BinaryIO

from storage_app.storage.base import (
    FileEntry,
    FileType,
    StorageBackend,
    file_type_from_mode,
)

logger = logging.getLogger(__name__)


def resolve_path(folder_root, library_id: str, path) -> Path:
    """Map a library-relative path to a location under ``folder_root``.

    A leading slash is ignored. Raises ValueError for paths that would
    leave the root.
    """
    relative = Path(path)
    if relative.is_absolute():
        relative = relative.relative_to(relative.anchor)
    root = Path(os.path.normpath(folder_root))
    candidate = Path(os.path.normpath(root / library_id / relative))
    logger.debug("root=%s path=%s", root, candidate)
    if candidate != root and root not in candidate.parents:
        raise ValueError("Invalid path provided")
    return candidate


class LocalStorage(StorageBackend):
    """Files live in ``<path>/<library id>/...`` on the local disk."""

    def __init__(self, settings):
        folder_root = settings.get("path") if isinstance(settings, Mapping) else None
        if not isinstance(folder_root, str):
            raise ValueError("No 'path' configured")
        self.folder_root = Path(folder_root)

    def _path(self, library_id: str, rel_path) -> Path:
        return resolve_path(self.folder_root, library_id, rel_path)

    def touch_file(self, library_id, rel_path, file_type):
        path = self._path(library_id, rel_path)
        if file_type is FileType.FILE:
            with open(path, "rb"):
                pass
        elif file_type is FileType.FOLDER:
            path.mkdir(parents=True, exist_ok=True)
        else:
            raise ValueError("Unsupported")

    def write_file(self, library_id, rel_path, contents):
        self._path(library_id, rel_path).write_bytes(bytes(contents))

    def read_file(self, library_id, rel_path):
        try:
            return self._path(library_id, rel_path).read_bytes()
        except FileNotFoundError:
            return None

    def list_files(self, library_id, rel_path):
        path = self._path(library_id, rel_path)
        with os.scandir(path) as entries:
            return [
                FileEntry(
                    path=entry.name,
                    size=info.st_size,
                    file_type=file_type_from_mode(info.st_mode),
                )
                for entry in entries
                for info in (entry.stat(follow_symlinks=False),)
            ]

    def delete_file(self, library_id, rel_path):
        os.remove(self._path(library_id, rel_path))

    def move_file(self, library_id, rel_path, new_rel_path):
        source = self._path(library_id, rel_path)
        destination = self._path(library_id, new_rel_path)
        os.rename(source, destination)

    def open_read(self, library_id, rel_path) -> BinaryIO:
        return open(self._path(library_id, rel_path), "rb")