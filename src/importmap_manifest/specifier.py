"""Package specifier parsing (``[@scope/]name[/subpath][@version][=alias]``)."""

import re
from dataclasses import dataclass

_SPECIFIER_RE = re.compile(
    r"""
    (?P<package>
        (?:@[^/=@\s]+/)?        # optional @scope/
        [^/=@\s]+               # package name
        (?:/[^/=@\s]+)*         # optional /sub/path
    )
    (?:@(?P<version>[^=@\s]+))?
    (?:=(?P<alias>[^=\s]+))?
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class PackageRequest:
    package: str
    version: str | None = None
    alias: str | None = None

    @property
    def import_name(self) -> str:
        """The import map key: the alias if given, else the package."""
        return self.alias or self.package


def parse_package_name(text: str) -> PackageRequest | None:
    """Parse a package specifier, or return None if it is malformed.

    >>> parse_package_name("lodash@^4.15")
    PackageRequest(package='lodash', version='^4.15', alias=None)
    >>> parse_package_name("vue/dist/vue.esm-bundler.js=vue").alias
    'vue'
    """
    match = _SPECIFIER_RE.fullmatch(text)
    if match is None:
        return None
    return PackageRequest(
        package=match["package"],
        version=match["version"],
        alias=match["alias"],
    )


def split_package_name(package: str) -> tuple[str, str]:
    """Split *package* into the registry name and its sub-path.

    ``chart.js/auto`` -> ``("chart.js", "/auto")``;
    ``@hotwired/stimulus`` -> ``("@hotwired/stimulus", "")``.
    """
    parts = package.split("/")
    size = 2 if package.startswith("@") else 1
    name = "/".join(parts[:size])
    subpath = "/".join(parts[size:])
    return name, f"/{subpath}" if subpath else ""
