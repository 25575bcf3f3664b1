"""URL normalization for user-supplied links."""

import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_DEFAULT_PORTS = {80, 443}


def normalize_url(raw: str | None) -> str:
    """Normalize a user-entered link into an absolute HTTPS URL.

    - Adds ``https://`` when no scheme is given, forces http to https
    - Lowercases the host and strips a leading ``www.``
    - Drops credentials, default ports and trailing slashes
    - Sorts query parameters

    Args:
        raw: Link as typed by the user (may be None or blank)

    Returns:
        Normalized URL, or "" if the input is empty or can't be parsed
    """
    if raw is None:
        return ""

    value = raw.strip()
    if not value:
        return ""

    if value.startswith("//"):
        value = f"https:{value}"
    elif not _SCHEME_RE.match(value):
        value = f"https://{value}"

    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError:
        return ""

    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        return ""

    host = parts.hostname.lower()
    if host.startswith("www.") and host.count(".") >= 2:
        host = host[len("www.") :]

    netloc = host if port is None or port in _DEFAULT_PORTS else f"{host}:{port}"

    path = re.sub(r"/{2,}", "/", parts.path).rstrip("/")
    query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)))

    return urlunsplit(("https", netloc, path, query, parts.fragment))
