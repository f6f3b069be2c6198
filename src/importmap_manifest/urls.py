"""Legacy CDN URL handling."""


def extract_version_from_legacy_url(url: str) -> str | None:
    """Recover the version from an old-style CDN URL.

    Only the one legacy producer format is understood, e.g.
    ``https://ga.jspm.io/npm:bootstrap@5.3.2/dist/js/bootstrap.esm.js``
    gives ``5.3.2``: the text between the last ``@`` and the next ``/``.
    """
    last_at = url.rfind("@")
    if last_at == -1:
        return None

    next_slash = url.find("/", last_at)
    if next_slash == -1:
        return None

    return url[last_at + 1:next_slash]
