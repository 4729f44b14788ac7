"""
Base URL handling
Normalization of the configured server URL and relative joins against it.
"""

import logging
from urllib.parse import urljoin, urlsplit

from requests.exceptions import InvalidURL, MissingSchema
from requests.models import PreparedRequest

from .errors import InvalidUrlError

logger = logging.getLogger(__name__)


def normalize_base_url(base_url: str) -> str:
    """Return ``base_url`` with a trailing slash, validated as absolute.

    Without the slash, a relative join would replace the last path segment
    instead of appending to it.
    """
    base = base_url
    if not base.endswith("/"):
        logger.info("Provided base URL missing trailing slash, adding...")
        base += "/"

    try:
        parts = urlsplit(base)
        # .port raises ValueError for out-of-range or non-numeric ports
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid URL given: {exc}") from exc

    if not parts.scheme:
        raise InvalidUrlError(f"Invalid URL given: {base_url!r} has no scheme")
    if not parts.netloc:
        raise InvalidUrlError(f"Invalid URL given: {base_url!r} has no host")

    # the transport parses hosts more strictly than urlsplit
    try:
        PreparedRequest().prepare_url(base, None)
    except (InvalidURL, MissingSchema) as exc:
        raise InvalidUrlError(f"Invalid URL given: {exc}") from exc

    return base


def join_url(base_url: str, path: str) -> str:
    """Resolve ``path`` against ``base_url`` as a relative reference."""
    try:
        return urljoin(base_url, path)
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid URL given: {exc}") from exc
