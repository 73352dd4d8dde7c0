"""Inline vs attachment policy for stored files."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger("storage_headers")

# Extensions a browser is left to render on its own.
VIEWABLE_EXTENSIONS: frozenset[str] = frozenset(
    {
        "avi",
        "css",
        "gif",
        "html",
        "htm",
        "jpeg",
        "jpg",
        "mp3",
        "mpeg",
        "mpg",
        "mov",
        "qt",
        "pdf",
        "png",
        "xml",
        "tiff",
        "txt",
        "wav",
        "log",
    }
)


class Disposition(str, Enum):
    """How a browser should treat a downloaded file.

    Examples:
        >>> disposition_for("report.pdf")
        <Disposition.INLINE: 'inline'>
        >>> disposition_for("data.csv")
        <Disposition.ATTACHMENT: 'attachment'>
    """

    INLINE = "inline"
    ATTACHMENT = "attachment"


def is_viewable(filename: str) -> bool:
    """Return ``True`` if ``filename`` ends with a viewable extension, ignoring case.

    This is a plain suffix match: no dot is required before the extension.
    """
    if not isinstance(filename, str):
        raise TypeError(f"filename must be a str, not {type(filename).__name__}")
    lowered = filename.lower()
    return any(lowered.endswith(ext) for ext in VIEWABLE_EXTENSIONS)


def disposition_for(filename: str) -> Disposition:
    """Return ``INLINE`` for viewable files and ``ATTACHMENT`` for everything else."""
    if is_viewable(filename):
        logger.debug("Inline disposition for %r", filename)
        return Disposition.INLINE
    logger.debug("Attachment disposition for %r", filename)
    return Disposition.ATTACHMENT
