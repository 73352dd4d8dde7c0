"""Put Content-Disposition values onto outgoing header mappings."""

from __future__ import annotations

import re
from typing import MutableMapping, TypeVar

import httpx

from ._content_disposition import content_disposition

CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_TYPE = "Content-Type"

# Control characters (other than tab) cannot appear in a header field value.
_ILLEGAL_HEADER_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")

HeadersT = TypeVar("HeadersT", bound=MutableMapping[str, str])


def header_content_disposition(filename: str) -> str:
    """Return ``content_disposition(filename)``, checked for use as a real header.

    The quoted ``filename=`` field keeps control characters as-is, which no HTTP
    stack will send.

    Raises:
        ValueError: If ``filename`` contains a control character other than tab.
    """
    value = content_disposition(filename)
    if _ILLEGAL_HEADER_CHARS.search(value):
        raise ValueError(f"filename contains characters not allowed in a header: {filename!r}")
    return value


def apply_content_disposition(headers: HeadersT, filename: str) -> HeadersT:
    """Set or clear the Content-Disposition header in ``headers`` for ``filename``.

    When the file is viewable any existing Content-Disposition entry is removed,
    whatever its case, so the browser is left to decide. On ``httpx.Headers``
    the value is stored as ISO-8859-1 bytes, as in :func:`download_headers`.

    Args:
        headers: A mutable header mapping, e.g. ``httpx.Headers`` or a ``dict``.
        filename: The bare filename (not a path).

    Returns:
        The same ``headers`` object.

    Raises:
        ValueError: If ``filename`` contains a control character other than tab.
    """
    value = header_content_disposition(filename)
    for existing in [k for k in headers if k.lower() == CONTENT_DISPOSITION.lower()]:
        del headers[existing]
    if not value:
        return headers

    if isinstance(headers, httpx.Headers):
        headers.update(httpx.Headers([(CONTENT_DISPOSITION, value.encode("latin-1"))]))
        if not value.isascii():
            headers.encoding = "iso-8859-1"
    else:
        headers[CONTENT_DISPOSITION] = value
    return headers


def download_headers(filename: str, content_type: str | None = None) -> httpx.Headers:
    """Build the headers for serving ``filename`` as a download.

    Values are stored as ISO-8859-1 bytes, which is how the quoted ``filename=``
    field expects to be read.

    Raises:
        ValueError: If ``filename`` contains a control character other than tab,
            or ``content_type`` is not ASCII.

    Examples:
        >>> download_headers("data.csv", "text/csv")["content-type"]
        'text/csv'
    """
    raw: list[tuple[str, bytes]] = []
    value = header_content_disposition(filename)
    if value:
        raw.append((CONTENT_DISPOSITION, value.encode("latin-1")))
    if content_type:
        if not content_type.isascii() or _ILLEGAL_HEADER_CHARS.search(content_type):
            raise ValueError(f"content_type must be printable ASCII: {content_type!r}")
        raw.append((CONTENT_TYPE, content_type.encode("ascii")))
    return httpx.Headers(raw)
