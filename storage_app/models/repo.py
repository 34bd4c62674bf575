"""Repository records as stored in the database."""

import json
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class RepoModel:
    """A row of the ``repos`` table."""

    id: str
    created_at: datetime
    storage_type: str
    storage_settings: object = field(default_factory=dict)
    flags: int = 0

    @classmethod
    def _from_row(cls, row) -> "RepoModel":
        return cls(
            id=row["id"],
            created_at=datetime.fromisoformat(row["created_at"]),
            storage_type=row["storage_type"],
            storage_settings=json.loads(row["storage_settings"]),
            flags=row["flags"],
        )

    def to_dict(self) -> dict:
        """Serializable form."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "storage_type": self.storage_type,
            "storage_settings": self.storage_settings,
            "flags": self.flags,
        }


_COLUMNS = "id, created_at, storage_type, storage_settings, flags"


def get_repo(conn: sqlite3.Connection, repo_id: str) -> RepoModel | None:
    """Fetch one repository, or None when there is no such id."""
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM repos WHERE id = ?", (repo_id,)
    ).fetchone()
    return RepoModel._from_row(row) if row is not None else None


def list_repos(conn: sqlite3.Connection) -> list[RepoModel]:
    """Fetch every repository, ordered by id."""
    rows = conn.execute(f"SELECT {_COLUMNS} FROM repos ORDER BY id").fetchall()
    return [RepoModel._from_row(row) for row in rows]