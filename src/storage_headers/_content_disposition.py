"""Build Content-Disposition header values for arbitrary filenames."""

from __future__ import annotations

from ._disposition import Disposition, disposition_for

# RFC 5987 attr-char punctuation; ASCII letters and digits are allowed too.
RFC5987_ATTR_CHARS = "!#$&+-.^_`|~"


def content_disposition(filename: str) -> str:
    """Return a Content-Disposition header value for ``filename``.

    Files the browser can display on its own get no header at all, signalled by
    an empty string. Everything else is forced to download, with the name
    given twice: as an RFC 2616 quoted-string for older user agents and as an
    RFC 5987 ext-value that carries the full Unicode name.

    Args:
        filename: The bare filename (not a path).

    Returns:
        The header value, or ``""`` if no header should be sent.

    Examples:
        >>> content_disposition("report.pdf")
        ''
        >>> content_disposition("data.csv")
        'attachment; filename="data.csv"; filename*=UTF-8\\'\\'data.csv'
    """
    if disposition_for(filename) is Disposition.INLINE:
        return ""
    return "{}; filename={}; filename*={}".format(
        Disposition.ATTACHMENT.value,
        rfc2616_quoted_string(filename),
        rfc5987_ext_value(filename),
    )


def rfc2616_quoted_string(text: str) -> str:
    """Return an RFC 2616 quoted-string encoding of ``text``.

    Code points up to U+00FF are kept as-is, on the assumption that the reader
    decodes the header as ISO-8859-1. Anything above that is replaced with
    ``_``.
    """
    parts = ['"']
    for char in text:
        if char == '"':
            parts.append('\\"')
        elif char == "\\":
            parts.append("\\\\")
        elif ord(char) <= 0xFF:
            parts.append(char)
        else:
            parts.append("_")
    parts.append('"')
    return "".join(parts)


def rfc5987_ext_value(text: str) -> str:
    """Return an RFC 5987 ext-value encoding of ``text``, charset UTF-8, no language tag.

    Examples:
        >>> rfc5987_ext_value("café.csv")
        "UTF-8''caf%C3%A9.csv"
    """
    parts = ["UTF-8''"]
    for char in text:
        if char.isascii() and char.isalnum() or char in RFC5987_ATTR_CHARS:
            parts.append(char)
        else:
            # surrogatepass keeps lone surrogates encodable
            for octet in char.encode("utf-8", "surrogatepass"):
                parts.append(f"%{octet:02X}")
    return "".join(parts)
