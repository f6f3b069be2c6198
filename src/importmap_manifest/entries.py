"""Import map entries and the ordered collection that holds them."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from .constants import VALID_KEYS
from .errors import (
    EntrypointTypeError,
    InvalidOptionError,
    InvalidTypeError,
    MissingPathOrVersionError,
    PathAndVersionError,
)

log = logging.getLogger("importmap_manifest")

VersionExtractor = Callable[[str], str | None]


class ImportMapType(Enum):
    JS = "js"
    CSS = "css"


@dataclass(frozen=True)
class ImportMapEntry:
    """One resolved line of the import map.

    Exactly one of *path* (a local file) or *version* (resolved through
    the registry) is set.  Only JavaScript entries may be entrypoints.
    """

    import_name: str
    path: str | None = None
    version: str | None = None
    type: ImportMapType = ImportMapType.JS
    is_entrypoint: bool = False

    def __post_init__(self):
        if self.is_entrypoint and self.type is not ImportMapType.JS:
            raise EntrypointTypeError(self.import_name, self.type.value)
        if not self.path and not self.version:
            raise MissingPathOrVersionError(self.import_name)
        if self.path and self.version:
            raise PathAndVersionError(self.import_name)

    @classmethod
    def from_options(
        cls,
        import_name: str,
        options: dict,
        version_extractor: VersionExtractor,
    ) -> "ImportMapEntry":
        """Build an entry from one raw manifest record, applying defaults.

        *version_extractor* recovers a version from the deprecated
        ``url`` option when no ``version`` is given.
        """
        invalid_keys = [key for key in options if key not in VALID_KEYS]
        if invalid_keys:
            raise InvalidOptionError(import_name, invalid_keys, VALID_KEYS)

        # rewritten without "url" on the next save
        url = options.get("url")
        if "url" in options:
            log.warning(
                'The "url" option of importmap entry "%s" is deprecated, '
                'use "version" instead.',
                import_name,
            )

        if options.get("type") is not None:
            try:
                entry_type = ImportMapType(options["type"])
            except (ValueError, TypeError):
                raise InvalidTypeError(import_name, options["type"]) from None
        else:
            entry_type = ImportMapType.JS

        is_entrypoint = bool(options.get("entrypoint", False))
        if is_entrypoint and entry_type is not ImportMapType.JS:
            raise EntrypointTypeError(import_name, entry_type.value)

        # YAML may hand back numbers for unquoted values like 5 or 4.17
        path = _as_text(options.get("path"))
        version = _as_text(options.get("version"))
        if version is None and url:
            version = version_extractor(str(url))

        return cls(
            import_name,
            path=path,
            version=version,
            type=entry_type,
            is_entrypoint=is_entrypoint,
        )

    def to_options(self) -> dict:
        """Return the canonical record for this entry, defaults omitted."""
        options = {}
        if self.path:
            options["path"] = self.path
        if self.version:
            options["version"] = self.version
        if self.type is not ImportMapType.JS:
            options["type"] = self.type.value
        if self.is_entrypoint:
            options["entrypoint"] = True
        return options


def _as_text(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class ImportMapEntries:
    """Ordered, name-keyed set of :class:`ImportMapEntry`.

    Adding an entry whose name already exists replaces the old entry
    in place, so the original position is kept.
    """

    def __init__(self, entries=()):
        self._entries: dict[str, ImportMapEntry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: ImportMapEntry) -> None:
        self._entries[entry.import_name] = entry

    def has(self, import_name: str) -> bool:
        return import_name in self._entries

    def get(self, import_name: str) -> ImportMapEntry:
        try:
            return self._entries[import_name]
        except KeyError:
            raise KeyError(
                f'The importmap entry "{import_name}" does not exist.'
            ) from None

    def remove(self, import_name: str) -> ImportMapEntry:
        entry = self.get(import_name)
        del self._entries[import_name]
        return entry

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, import_name: object) -> bool:
        return import_name in self._entries

    def __iter__(self) -> Iterator[ImportMapEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImportMapEntries):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"ImportMapEntries({list(self._entries.values())!r})"
