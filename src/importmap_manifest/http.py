"""Registry lookups with retry logic."""

import logging
import random
import time

import requests

from .constants import (
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RESOLVE_URL,
    RETRY_BASE_DELAY,
    USER_AGENT,
)
from .errors import PackageResolutionError
from .specifier import split_package_name

log = logging.getLogger("importmap_manifest")


def request_with_retry(
    url: str,
    params: dict | None = None,
) -> requests.Response:
    """GET *url* with exponential back-off and jitter.

    Client errors (4xx) are raised immediately since retrying will not
    change the answer.
    """
    headers = {"User-Agent": USER_AGENT}

    for attempt in range(MAX_RETRIES):
        try:
            resp = requests.get(
                url, params=params, headers=headers, timeout=REQUEST_TIMEOUT
            )
            resp.raise_for_status()
            return resp
        except requests.RequestException as exc:
            if attempt == MAX_RETRIES - 1 or _is_client_error(exc):
                raise
            delay = RETRY_BASE_DELAY * (2 ** attempt) + random.uniform(0, 0.5)
            log.warning(
                "Attempt %d for %s failed (%s), retrying in %.1fs …",
                attempt + 1, url, exc, delay,
            )
            time.sleep(delay)

    raise RuntimeError("Exceeded max retries")  # pragma: no cover


def _is_client_error(exc: requests.RequestException) -> bool:
    resp = exc.response
    return resp is not None and 400 <= resp.status_code < 500


def resolve_version(package: str, constraint: str | None = None) -> str:
    """Resolve *constraint* (default: latest) to a concrete npm version.

    Any sub-path of *package* is ignored; ``chart.js/auto`` resolves the
    ``chart.js`` package.
    """
    name, _ = split_package_name(package)
    specifier = constraint or "latest"
    log.info("Resolving %s@%s", name, specifier)

    try:
        resp = request_with_retry(
            RESOLVE_URL.format(name=name),
            params={"specifier": specifier},
        )
        version = resp.json().get("version")
    except (requests.RequestException, ValueError) as exc:
        raise PackageResolutionError(
            f'Error finding version for "{name}@{specifier}": {exc}'
        ) from exc

    if not version:
        raise PackageResolutionError(
            f'No version of "{name}" matches "{specifier}".'
        )
    return version
