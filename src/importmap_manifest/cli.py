"""Command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from .constants import MANIFEST_FILE
from .errors import ImportMapError, InvalidPackageNameError
from .http import resolve_version
from .manifest import ImportMapStore
from .orchestrator import remove_packages, require_packages, resolve_local_path
from .specifier import parse_package_name

log = logging.getLogger("importmap_manifest")

EPILOG = """\
examples:
  importmap require lodash
  importmap require "lodash@^4.15"
  importmap require "chart.js/auto"
  importmap require "vue/dist/vue.esm-bundler.js=vue"
  importmap require "lodash@^4.15" "@hotwired/stimulus"
  importmap require app --path assets/app.js --entrypoint
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="importmap",
        description="Manage the import map manifest of a front-end project.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=MANIFEST_FILE,
        help=f"Path to the manifest file (default: {MANIFEST_FILE}).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    require = sub.add_parser("require", help="Add packages to the import map.")
    require.add_argument("packages", nargs="+", help="The packages to add.")
    require.add_argument(
        "--entrypoint",
        action="store_true",
        help="Make the package(s) an entrypoint.",
    )
    require.add_argument(
        "--path",
        type=str,
        help="The local path where the package lives, relative to the "
        "manifest directory.",
    )

    remove = sub.add_parser("remove", help="Remove packages from the import map.")
    remove.add_argument("packages", nargs="+", help="The import names to remove.")

    sub.add_parser("list", help="Show the entries of the import map.")
    return parser


def cmd_require(args: argparse.Namespace, store: ImportMapStore) -> None:
    if args.path and len(args.packages) > 1:
        log.error(
            'The "--path" option can only be used when you require a '
            "single package."
        )
        sys.exit(1)

    path = None
    if args.path:
        try:
            path = resolve_local_path(args.path, store.root_directory)
        except FileNotFoundError as exc:
            log.error("%s", exc)
            sys.exit(1)

    package_requests = []
    for package_name in args.packages:
        request = parse_package_name(package_name)
        if request is None:
            log.error("%s", InvalidPackageNameError(package_name))
            sys.exit(1)
        package_requests.append(request)

    new_entries = require_packages(
        package_requests, store,
        path=path, entrypoint=args.entrypoint, resolve_fn=resolve_version,
    )

    if len(new_entries) == 1:
        name = new_entries[0].import_name
        log.info('Package "%s" added to the importmap.', name)
        log.info('Use the new package normally by importing "%s".', name)
    else:
        log.info(
            "%d new items (%s) added to the importmap!",
            len(new_entries),
            ", ".join(entry.import_name for entry in new_entries),
        )


def cmd_remove(args: argparse.Namespace, store: ImportMapStore) -> None:
    removed = remove_packages(args.packages, store)
    if not removed:
        sys.exit(1)
    log.info(
        "Removed %d package(s) from the importmap: %s",
        len(removed), ", ".join(removed),
    )


def cmd_list(args: argparse.Namespace, store: ImportMapStore) -> None:
    for entry in store.load():
        target = f"path {entry.path}" if entry.path else f"version {entry.version}"
        flags = entry.type.value
        if entry.is_entrypoint:
            flags += ", entrypoint"
        print(f"{entry.import_name}  {target}  ({flags})")


COMMANDS = {
    "require": cmd_require,
    "remove": cmd_remove,
    "list": cmd_list,
}


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    store = ImportMapStore(args.manifest)

    try:
        COMMANDS[args.command](args, store)
    except (ImportMapError, ValueError) as exc:
        log.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
