import re
from urllib.parse import urlparse

# Schemes that can't be parsed without a host
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

# Code points a host name may not contain
_FORBIDDEN_HOST_RE = re.compile(r"[\x00-\x20\x7f#%/:<>?@\[\\\]^|]")


def _valid_host(parsed):
    if "[" in parsed.netloc:
        # IPv6 literal, already checked by urlparse
        return True
    return not _FORBIDDEN_HOST_RE.search(parsed.hostname)


def is_url(value):
    """Check whether a string parses as an absolute URL.

    Relative references ("/img.png", "img.png", "//cdn.example/img.png")
    are rejected since they can't be resolved without a base.
    """
    value = value.strip()
    if not value:
        return False
    try:
        parsed = urlparse(value)
        # Raises ValueError for non-numeric or out of range ports
        parsed.port
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    if parsed.hostname is None:
        return parsed.scheme not in _HOST_SCHEMES
    return _valid_host(parsed)


def select_tag(candidates, metadata, require_url=False):
    """Get the first usable value for the given meta-tag names.

    Candidates are tried in priority order. Empty values are skipped, and so
    are values that don't parse as a URL when require_url is set. Returns
    None when nothing matches.
    """
    for name in candidates:
        content = metadata.get(name)
        if content is None:
            continue
        if require_url:
            if not is_url(content):
                continue
        elif not content:
            continue
        return content
    return None
