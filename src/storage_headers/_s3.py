"""S3 uploads and presigned downloads carrying a Content-Disposition."""

from __future__ import annotations

import logging

import aiofiles
import boto3

from ._content_disposition import content_disposition
from ._headers import header_content_disposition

logger = logging.getLogger("storage_headers")


def _build_s3_client():  # noqa: ANN202
    return boto3.client("s3")


def filename_from_key(key: str) -> str:
    """Return the final ``/``-separated segment of an object key or local path.

    Raises:
        ValueError: If the key has no final segment (empty, or ending in ``/``).

    Examples:
        >>> filename_from_key("builds/42/artifact.tar.gz")
        'artifact.tar.gz'
    """
    name = key.replace("\\", "/").rsplit("/", 1)[-1]
    if not name:
        raise ValueError(f"No filename in key: {key!r}")
    return name


async def upload_to_s3(
    bucket: str,
    key: str,
    data: bytes | None = None,
    *,
    path: str | None = None,
    filename: str | None = None,
    content_type: str | None = None,
) -> str:
    """Upload bytes or a local file to S3 with a Content-Disposition.

    The name used in the header is ``filename`` if given, otherwise the
    basename of ``path``, otherwise the basename of ``key``. No
    ``ContentDisposition`` is stored for viewable files.

    Args:
        bucket: The S3 bucket name.
        key: The S3 object key.
        data: Raw content to upload. Mutually exclusive with ``path``.
        path: Local file to upload. Mutually exclusive with ``data``.
        filename: Name to offer to the browser.
        content_type: Stored as ``ContentType`` when given.

    Returns:
        The Content-Disposition value stored on the object, or ``""``.

    Raises:
        ValueError: If neither or both of ``data`` and ``path`` are given, or the
            filename contains a control character other than tab. Both are
            checked before anything is read or sent.
    """
    if (data is None) == (path is None):
        raise ValueError("Exactly one of data or path must be given")

    if filename is None:
        filename = filename_from_key(path if path is not None else key)
    disposition = header_content_disposition(filename)

    if path is not None:
        async with aiofiles.open(path, "rb") as f:
            data = await f.read()

    extra: dict = {}
    if content_type:
        extra["ContentType"] = content_type
    if disposition:
        extra["ContentDisposition"] = disposition

    logger.debug("Uploading s3://%s/%s with disposition %r", bucket, key, disposition)
    s3 = _build_s3_client()
    s3.put_object(Bucket=bucket, Key=key, Body=data, **extra)
    logger.info("Uploaded s3://%s/%s (%d bytes)", bucket, key, len(data))
    return disposition


async def get_signed_url(
    bucket: str,
    key: str,
    *,
    filename: str | None = None,
    expires_in: int = 3600,
) -> str:
    """Generate a pre-signed ``get_object`` URL.

    When ``filename`` is given and is not viewable, the URL asks S3 to serve the
    object with a matching Content-Disposition, overriding stored metadata.

    Args:
        bucket: The S3 bucket name.
        key: The S3 object key.
        filename: Name to offer to the browser.
        expires_in: Seconds until the URL expires (default 3600).

    Returns:
        The pre-signed URL string.
    """
    params = {"Bucket": bucket, "Key": key}
    if filename is not None:
        disposition = content_disposition(filename)
        if disposition:
            params["ResponseContentDisposition"] = disposition
    logger.debug("Presigning s3://%s/%s for %ds", bucket, key, expires_in)
    s3 = _build_s3_client()
    return s3.generate_presigned_url("get_object", Params=params, ExpiresIn=expires_in)
