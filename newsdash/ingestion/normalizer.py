"""URL canonicalization for article deduplication."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

TRACKING_PARAMS = frozenset(
    {
        "utm_source",
        "utm_medium",
        "utm_campaign",
        "utm_term",
        "utm_content",
        "fbclid",
        "gclid",
        "ref",
    }
)
TRACKING_PREFIXES = ("utm_",)

_SPECIAL_SCHEMES = ("http", "https")


def _is_tracking_param(key: str) -> bool:
    return key in TRACKING_PARAMS or key.startswith(TRACKING_PREFIXES)


def normalize_url(raw_url: str) -> str:
    """
    Canonicalize an article URL.

    Tracking parameters are dropped, the remaining ones sorted by key and
    the trailing slash removed from non-root paths. Input that is not an
    absolute URL is returned unchanged.
    """
    try:
        parts = urlsplit(raw_url)
    except (TypeError, ValueError):
        return raw_url

    if not parts.scheme or not parts.netloc:
        return raw_url

    params = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _is_tracking_param(key)
    ]
    params.sort(key=lambda kv: kv[0])

    path = parts.path
    if len(path) > 1 and path.endswith("/"):
        path = path.rstrip("/") or "/"
    elif not path and parts.scheme.lower() in _SPECIAL_SCHEMES:
        path = "/"

    return urlunsplit((parts.scheme, parts.netloc, path, urlencode(params), parts.fragment))
