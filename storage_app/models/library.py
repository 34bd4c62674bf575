"""Library records as stored in the database."""

import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime

from storage_app.models.repo import get_repo


@dataclass
class LibraryModel:
    """A row of the ``libraries`` table."""

    id: uuid.UUID
    owner_id: uuid.UUID
    repo_id: str
    created_at: datetime
    name: str

    @classmethod
    def _from_row(cls, row) -> "LibraryModel":
        return cls(
            id=uuid.UUID(row["id"]),
            owner_id=uuid.UUID(row["owner_id"]),
            repo_id=row["repo_id"],
            created_at=datetime.fromisoformat(row["created_at"]),
            name=row["name"],
        )

    def to_dict(self) -> dict:
        """Serializable form."""
        return {
            "id": str(self.id),
            "owner_id": str(self.owner_id),
            "repo_id": self.repo_id,
            "created_at": self.created_at.isoformat(),
            "name": self.name,
        }


@dataclass
class LibraryWithRepoModel:
    """A library together with the storage type of its repository."""

    library: LibraryModel
    storage_type: str

    def to_dict(self) -> dict:
        """Serializable form."""
        return {"library": self.library.to_dict(), "storage_type": self.storage_type}


def get_library(conn: sqlite3.Connection, library_id: str) -> LibraryModel | None:
    """Fetch one library, or None when there is no such id.

    Raises ValueError when ``library_id`` is not a UUID.
    """
    parsed = uuid.UUID(library_id)
    row = conn.execute(
        "SELECT id, owner_id, repo_id, created_at, name FROM libraries WHERE id = ?",
        (str(parsed),),
    ).fetchone()
    return LibraryModel._from_row(row) if row is not None else None


def get_library_with_repo(
    conn: sqlite3.Connection, library_id: str
) -> LibraryWithRepoModel | None:
    """Fetch a library along with its repository's storage type.

    Raises LookupError when the library's repository does not exist.
    """
    library = get_library(conn, library_id)
    if library is None:
        return None
    repo = get_repo(conn, library.repo_id)
    if repo is None:
        raise LookupError("Repository does not exist")
    return LibraryWithRepoModel(library=library, storage_type=repo.storage_type)