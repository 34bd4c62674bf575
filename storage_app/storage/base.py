"""Storage backend interface and the file metadata it reports."""

import enum
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO


class FileType(str, enum.Enum):
    """Kind of entry in a library."""

    FILE = "file"
    FOLDER = "folder"
    SYMLINK = "symlink"
    OTHER = "other"


def file_type_from_mode(mode: int) -> FileType:
    """Classify an ``st_mode`` value."""
    if stat.S_ISREG(mode):
        return FileType.FILE
    if stat.S_ISDIR(mode):
        return FileType.FOLDER
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.OTHER


@dataclass(frozen=True)
class FileEntry:
    """One entry of a directory listing."""

    path: str
    size: int
    file_type: FileType

    def to_dict(self) -> dict:
        """Serializable form, with the kind under ``type``."""
        return {"path": self.path, "size": self.size, "type": self.file_type.value}


class StorageBackend(ABC):
    """Where a repository keeps the files of its libraries.

    Paths are relative to the library; a leading slash is ignored.
    """

    @abstractmethod
    def touch_file(self, library_id: str, rel_path, file_type: FileType) -> None:
        """Make sure an entry of ``file_type`` exists at ``rel_path``."""

    @abstractmethod
    def write_file(self, library_id: str, rel_path, contents: bytes) -> None:
        """Replace the file's contents."""

    @abstractmethod
    def read_file(self, library_id: str, rel_path) -> bytes | None:
        """Return the file's contents, or None when it does not exist."""

    @abstractmethod
    def list_files(self, library_id: str, rel_path) -> list[FileEntry]:
        """List the entries of a folder."""

    @abstractmethod
    def delete_file(self, library_id: str, rel_path) -> None:
        """Remove a file."""

    @abstractmethod
    def move_file(self, library_id: str, rel_path, new_rel_path) -> None:
        """Rename a file within the library."""

    @abstractmethod
    def open_read(self, library_id: str, rel_path) -> BinaryIO:
        """Open the file for buffered binary reading."""