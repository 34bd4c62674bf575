"""A repository together with its live storage backend."""

import enum
from dataclasses import dataclass
from datetime import datetime

from storage_app.models.repo import RepoModel
from storage_app.storage.base import StorageBackend
from storage_app.storage.registry import get_backend


class RepoFlags(enum.IntFlag):
    """Options stored in a repository's ``flags`` column."""

    NONE = 0
    USER_ADDABLE = 1


@dataclass
class Repo:
    """A configured repository that can store files."""

    id: str
    created_at: datetime
    storage_type: str
    storage_settings: object
    flags: RepoFlags
    backend: StorageBackend

    @classmethod
    def from_model(cls, model: RepoModel) -> "Repo":
        """Build a repository and its backend from a database record.

        Raises ValueError for an unknown storage type or unusable settings.
        """
        backend = get_backend(model.storage_type, model.storage_settings)
        if backend is None:
            raise ValueError(f"unknown backend: {model.storage_type}")
        return cls(
            id=model.id,
            created_at=model.created_at,
            storage_type=model.storage_type,
            storage_settings=model.storage_settings,
            flags=RepoFlags(model.flags),
            backend=backend,
        )