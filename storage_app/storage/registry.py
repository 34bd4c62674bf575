"""Choose a storage backend by its configured type."""

from storage_app.storage.base import StorageBackend
from storage_app.storage.local import LocalStorage


def get_backend(storage_type: str, settings) -> StorageBackend | None:
    """Build the backend for ``storage_type``, or None if it is unknown.

    Raises ValueError when the settings do not suit the backend.
    """
    if storage_type == "local":
        return LocalStorage(settings)
    return None