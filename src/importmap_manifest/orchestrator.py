"""Require and remove workflows over the import map manifest."""

import logging
import os
from pathlib import Path
from typing import Callable

from .entries import ImportMapEntry, ImportMapType
from .http import resolve_version
from .manifest import ImportMapStore
from .specifier import PackageRequest

log = logging.getLogger("importmap_manifest")

# Type alias for the resolve function signature
ResolveFn = Callable[[str, str | None], str]


def resolve_local_path(path: str, root_directory: Path) -> str:
    """Return *path* as it should be stored in the manifest.

    Stored paths are relative to *root_directory*.  A path that already
    exists under the root is returned as given; one that only exists
    relative to the working directory is rewritten relative to the root.
    Raises ``FileNotFoundError`` when neither location holds a file.
    """
    root = Path(root_directory)
    if (root / path).is_file():
        return path
    if Path(path).is_file():
        return Path(
            os.path.relpath(Path(path).resolve(), root.resolve())
        ).as_posix()
    raise FileNotFoundError(f'The path "{path}" does not exist.')


def require_packages(
    package_requests: list[PackageRequest],
    store: ImportMapStore,
    *,
    path: str | None = None,
    entrypoint: bool = False,
    resolve_fn: ResolveFn = resolve_version,
) -> list[ImportMapEntry]:
    """Add an entry for each request to the manifest and save it once.

    With *path* the single request points at a local file and nothing is
    resolved; otherwise each request's version is resolved through
    *resolve_fn*.  Returns the new entries in request order.
    """
    if path is not None and len(package_requests) > 1:
        raise ValueError(
            'The "path" option can only be used when you require a '
            "single package."
        )

    entries = store.load()
    new_entries = []

    for request in package_requests:
        entry_type = (
            ImportMapType.CSS if request.package.endswith(".css")
            else ImportMapType.JS
        )
        if path is not None:
            entry = ImportMapEntry(
                request.import_name,
                path=path,
                type=entry_type,
                is_entrypoint=entrypoint,
            )
        else:
            version = resolve_fn(request.package, request.version)
            entry = ImportMapEntry(
                request.import_name,
                version=version,
                type=entry_type,
                is_entrypoint=entrypoint,
            )

        if entries.has(entry.import_name):
            log.info("  replacing %s", entry.import_name)
        entries.add(entry)
        new_entries.append(entry)

    store.save(entries)
    return new_entries


def remove_packages(names: list[str], store: ImportMapStore) -> list[str]:
    """Remove the named entries from the manifest.

    Unknown names are logged and skipped.  Returns the names removed.
    """
    entries = store.load()
    removed = []

    for name in names:
        if not entries.has(name):
            log.warning('Package "%s" is not in the importmap', name)
            continue
        entries.remove(name)
        removed.append(name)

    if removed:
        store.save(entries)
    return removed
