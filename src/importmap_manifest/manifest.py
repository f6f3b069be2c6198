"""Manifest persistence (load/save)."""

import logging
import os
import stat
import tempfile
from pathlib import Path

import yaml

from .constants import MANIFEST_FILE, MANIFEST_HEADER
from .entries import ImportMapEntries, ImportMapEntry, VersionExtractor
from .errors import ImportMapConfigError
from .urls import extract_version_from_legacy_url

log = logging.getLogger("importmap_manifest")


class ImportMapStore:
    """Reads and writes the import map manifest at *manifest_file*.

    The first successful :meth:`load` is cached on the instance; a
    :meth:`save` replaces that cache with the saved entries, so a later
    ``load()`` returns them without touching the file.
    """

    def __init__(
        self,
        manifest_file: Path = MANIFEST_FILE,
        *,
        version_extractor: VersionExtractor = extract_version_from_legacy_url,
    ):
        self.manifest_file = Path(manifest_file)
        self.version_extractor = version_extractor
        self._entries: ImportMapEntries | None = None

    @property
    def root_directory(self) -> Path:
        """Directory that local entry paths are relative to."""
        return self.manifest_file.parent

    def load(self) -> ImportMapEntries:
        """Load the manifest from disk, or return an empty collection.

        Raises :class:`ImportMapConfigError` (or a subclass) naming the
        offending import if any entry is invalid; nothing is cached then.
        """
        if self._entries is not None:
            return self._entries

        config = self._read_config()
        entries = ImportMapEntries()
        for import_name, options in config.items():
            if not isinstance(options, dict):
                raise ImportMapConfigError(
                    f'The importmap entry "{import_name}" must be a '
                    "mapping of options.",
                    str(import_name),
                )
            entries.add(ImportMapEntry.from_options(
                str(import_name), options, self.version_extractor,
            ))

        log.debug("Loaded %d entries from %s", len(entries), self.manifest_file)
        self._entries = entries
        return entries

    def reload(self) -> ImportMapEntries:
        """Drop the cached entries and read the file again."""
        self._entries = None
        return self.load()

    def save(self, entries: ImportMapEntries) -> None:
        """Replace the manifest on disk with *entries*.

        The file is written to a temporary sibling and moved into place,
        so a failed write leaves the previous manifest untouched.
        """
        config = {entry.import_name: entry.to_options() for entry in entries}
        content = MANIFEST_HEADER + "\n" + yaml.safe_dump(
            config,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

        self.manifest_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            suffix=".tmp",
            prefix=self.manifest_file.name + ".",
            dir=self.manifest_file.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            # mkstemp creates 0600; keep the mode a plain write would give
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.manifest_file)
        except BaseException:
            os.unlink(tmp_path)
            raise

        self._entries = entries
        log.info("Wrote %d entries to %s", len(entries), self.manifest_file)

    def _file_mode(self) -> int:
        if self.manifest_file.exists():
            return stat.S_IMODE(self.manifest_file.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def _read_config(self) -> dict:
        if not self.manifest_file.exists():
            return {}

        try:
            config = yaml.safe_load(self.manifest_file.read_text("utf-8"))
        except yaml.YAMLError as exc:
            raise ImportMapConfigError(
                f"Could not parse {self.manifest_file}: {exc}"
            ) from exc

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ImportMapConfigError(
                f"{self.manifest_file} must contain a mapping of import "
                "names to options."
            )
        return config
