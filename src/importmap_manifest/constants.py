"""Configuration constants and logging setup."""

import logging
import os
from pathlib import Path

MANIFEST_FILE = Path(os.environ.get("IMPORTMAP_FILE", "importmap.yaml"))
VALID_KEYS = ("path", "version", "type", "entrypoint", "url")

RESOLVE_URL = "https://data.jsdelivr.com/v1/packages/npm/{name}/resolved"
REQUEST_TIMEOUT = 30  # seconds
MAX_RETRIES = 3
RETRY_BASE_DELAY = 1.0  # seconds
USER_AGENT = "importmap-manifest/1.0"

MANIFEST_HEADER = """\
# Returns the importmap for this application.
#
# - "path" is a path to a local file, relative to the directory holding
#     this file.
#
# - "version" is resolved through the npm registry.
#
# - "entrypoint" (JavaScript only) set to true for any module that will
#     be used as an "entrypoint" (and loaded directly by the page).
#
# The "importmap require" command can be used to add new entries to this file.
#
# This file has been auto-generated by the importmap commands.
"""

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    datefmt="%H:%M:%S",
)
