"""Page fetching service: downloads HTML pages and linked scripts over HTTP(S)."""

import http.client
import logging
import urllib.error
import urllib.request
from urllib.parse import quote, urlparse

from js_compat_checker.errors import CompatCheckerError

logger = logging.getLogger(__name__)

USER_AGENT = "js-compat-analyzer/0.1"
ALLOWED_SCHEMES = ("http", "https")
# Reserved and already-escaped characters stay as they are
_URL_SAFE_CHARS = ":/?#[]@!$&'()*+,;=%~"


class FetchError(CompatCheckerError):
    """Network, DNS or HTTP failure while retrieving a URL."""


def validate_url(url: str) -> str:
    """Return the stripped URL, or raise ValueError if it is not http(s)."""
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.netloc:
        raise ValueError(f"URL must be absolute http(s): {url!r}")
    return url


def request_url(url: str) -> str:
    """Percent-encode spaces and non-ASCII characters so urllib accepts the URL."""
    return quote(url, safe=_URL_SAFE_CHARS)


def fetch_text(url: str, timeout: float = 15.0) -> str:
    """Download a URL and decode it as text (charset from headers, else UTF-8)."""
    try:
        req = urllib.request.Request(request_url(url), headers={"User-Agent": USER_AGENT})
        with urllib.request.urlopen(req, timeout=timeout) as response:
            body = response.read()
            charset = response.headers.get_content_charset() or "utf-8"
    except urllib.error.HTTPError as e:
        raise FetchError(f"HTTP {e.code} fetching {url}") from e
    except (urllib.error.URLError, OSError) as e:
        reason = getattr(e, "reason", e)
        raise FetchError(f"Failed to fetch {url}: {reason}") from e
    except (http.client.HTTPException, ValueError) as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e
    try:
        return body.decode(charset, errors="replace")
    except LookupError:
        logger.debug("Unknown charset %r for %s, falling back to UTF-8", charset, url)
        return body.decode("utf-8", errors="replace")
