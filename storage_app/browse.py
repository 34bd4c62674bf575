"""Pure helpers behind the file browser pages."""

import mimetypes
from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import quote

from storage_app.consts import FILE_CONSTANTS, SORT_DIRECTIONS

_MIME_TYPES = mimetypes.MimeTypes()
_DEFAULT_CONTENT_TYPE = "application/octet-stream"
_PATH_SAFE = "/!$&'()*+,;=:@-._~"


@dataclass(frozen=True)
class PathSegment:
    """One breadcrumb: the path up to and including ``segment``."""

    path: str
    segment: str


@dataclass(frozen=True)
class DisplayOptions:
    """How a folder listing is sorted and shown."""

    sort_key: str
    sort_dir: str
    display: str


def validate_option(option, valid_values, default: str) -> str:
    """Return ``option`` if it is one of ``valid_values``, else ``default``."""
    if option is not None and option in valid_values:
        return option
    return default


def parent_prefix(path: str) -> str:
    """The prefix for links to entries inside ``path``."""
    if path in ("", "/"):
        return ""
    return f"{path}/"


def path_segments(path: str) -> list[PathSegment]:
    """Breadcrumbs for each component of ``path``."""
    segments = []
    current = PurePosixPath()
    for part in PurePosixPath(path).parts:
        current = current / part
        segments.append(PathSegment(path=str(current), segment=part))
    return segments


def display_options(sort_key, sort_dir, display) -> DisplayOptions:
    """Validated listing options, falling back to the defaults."""
    return DisplayOptions(
        sort_key=validate_option(sort_key, FILE_CONSTANTS.sort_keys, "name"),
        sort_dir=validate_option(sort_dir, SORT_DIRECTIONS, "asc"),
        display=validate_option(display, FILE_CONSTANTS.display_options, "list"),
    )


def attachment_headers(path: str) -> dict[str, str]:
    """Content type and disposition for sending the file at ``path``.

    Raises ValueError when the path has no file name or no extension.
    """
    pure = PurePosixPath(path)
    if not pure.name:
        raise ValueError("path has no file name")
    if not pure.suffix:
        raise ValueError("file name has no extension")
    content_type = _MIME_TYPES.types_map[True].get(pure.suffix.lower())
    return {
        "Content-Type": content_type or _DEFAULT_CONTENT_TYPE,
        "Content-Disposition": f'filename="{pure.name}"',
    }


def login_redirect_url(path: str) -> str:
    """Where to send a visitor who must log in before seeing ``path``."""
    return f"/auth/login?return_to={quote(path, safe=_PATH_SAFE)}"