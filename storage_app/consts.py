"""Application-wide constants."""

from dataclasses import dataclass

# The maximum amount of bytes that can be uploaded at once (100 000 MiB).
MAX_UPLOAD_SIZE = 100_000 * 1024 * 1024

# The number of hashing rounds used for passwords.
ENCRYPTION_ROUNDS = 12

# Sessions last 14 days.
SESSION_LIFETIME_SECONDS = 3600 * 24 * 14

SESSION_COOKIE_NAME = "storage-session"

SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class FileConstants:
    """Choices offered by the file browser."""

    display_options: tuple[str, ...]
    sort_keys: tuple[str, ...]


FILE_CONSTANTS = FileConstants(
    display_options=("list", "grid"),
    sort_keys=("name", "last_modified", "size"),
)