"""Storage Headers - Content-Disposition values for stored files.

Encodes arbitrary filenames into Content-Disposition header values and
applies them to outgoing headers and S3 objects.
"""

__version__ = "1.0.0"

from ._content_disposition import content_disposition, rfc2616_quoted_string, rfc5987_ext_value
from ._disposition import VIEWABLE_EXTENSIONS, Disposition, disposition_for, is_viewable
from ._headers import apply_content_disposition, download_headers, header_content_disposition
from ._s3 import filename_from_key, get_signed_url, upload_to_s3

__all__ = [
    "VIEWABLE_EXTENSIONS",
    "Disposition",
    "apply_content_disposition",
    "content_disposition",
    "disposition_for",
    "download_headers",
    "filename_from_key",
    "get_signed_url",
    "header_content_disposition",
    "is_viewable",
    "rfc2616_quoted_string",
    "rfc5987_ext_value",
    "upload_to_s3",
]
