# storage_app

Building blocks for a small self-hosted file storage server. Files are kept in
*libraries*; each library belongs to a *repository*, and each repository is
backed by a storage backend. The built-in backend is `local`, which stores
library files under a folder on disk. Records are kept in SQLite.

The package uses only the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

- `storage_app.db` — `connect(url)` opens a SQLite database from a
  `sqlite://` URL (`sqlite:///relative`, `sqlite:////absolute`, or
  `sqlite://` for in-memory) or a plain file path; other schemes raise
  `ValueError`. `create_schema(conn)` creates the `repos` and `libraries`
  tables if they are missing.
- `storage_app.models.repo` — `RepoModel`, `get_repo(conn, repo_id)` and
  `list_repos(conn)`.
- `storage_app.models.library` — `LibraryModel`, `LibraryWithRepoModel`,
  `get_library(conn, library_id)` (raises `ValueError` for an id that is not a
  UUID) and `get_library_with_repo(conn, library_id)` (raises `LookupError`
  when the library's repository is missing).
- `storage_app.objs.repo` — `Repo.from_model(model)` builds a repository with
  its backend; `RepoFlags` holds `NONE` and `USER_ADDABLE`.
- `storage_app.objs.library` — `Library(model, repo)` offers `touch_file`,
  `write_file`, `read_file`, `list_files`, `delete_file`, `move_file` and
  `open_read` on paths relative to the library.
- `storage_app.storage` — `FileType`, `FileEntry`, the `StorageBackend`
  interface, `LocalStorage`, `resolve_path` and `get_backend(storage_type,
  settings)`, which returns `None` for an unknown storage type.
- `storage_app.csrf` — `gen_csrf_token()`, `set_csrf(session)` and
  `validate_csrf(session, form_token)` over any mutable mapping used as a
  session; a matching token is consumed.
- `storage_app.helpers` — template helpers `humanize_bytes(value)`
  (decimal units, e.g. `1.5 kB`), `debug_value(value)` and
  `is_active(current_path, href, exact)`.
- `storage_app.browse` — file browser helpers: `validate_option`,
  `display_options` (falls back to `name`, `asc`, `list`), `parent_prefix`,
  `path_segments` (breadcrumbs), `attachment_headers` (content type and
  disposition for a file) and `login_redirect_url`.
- `storage_app.consts` — upload limit, session lifetime and cookie name, and
  `FILE_CONSTANTS` with the sort keys (`name`, `last_modified`, `size`) and
  display options (`list`, `grid`).

## The local backend

A repository record names a storage type and its settings. For `local` the
settings must contain a `path`, the root folder under which every library gets
its own sub-folder:

```json
{"path": "/srv/storage"}
```

Paths are resolved inside the library's folder; a leading slash is ignored and
a path that escapes the storage root raises `ValueError`. `read_file` returns
`None` for a missing file. `touch_file` with `FileType.FOLDER` creates the
folder and its parents; with `FileType.FILE` it opens an existing file and
raises if there is none.

## Example

```python
import json
import uuid

from storage_app.db import connect, create_schema
from storage_app.models.library import get_library
from storage_app.models.repo import get_repo
from storage_app.objs.library import Library
from storage_app.objs.repo import Repo
from storage_app.storage.base import FileType

conn = connect("sqlite://")
create_schema(conn)
conn.execute(
    "INSERT INTO repos (id, storage_type, storage_settings) VALUES (?, ?, ?)",
    ("main", "local", json.dumps({"path": "/tmp/storage"})),
)
library_id = str(uuid.uuid4())
conn.execute(
    "INSERT INTO libraries (id, owner_id, repo_id, name) VALUES (?, ?, ?, ?)",
    (library_id, str(uuid.uuid4()), "main", "Documents"),
)

repo = Repo.from_model(get_repo(conn, "main"))
library = Library(get_library(conn, library_id), repo)
library.touch_file("", FileType.FOLDER)
library.write_file("notes.txt", b"hello")
print([entry.to_dict() for entry in library.list_files("/")])
```

## What the package does not do

There is no HTTP server, no command to start one, no JSON API routes, no login
or session handling beyond the CSRF helpers, and no cache of repositories or
lookup of libraries by a manager. The pieces above are meant to be wired into a
web application by the caller.