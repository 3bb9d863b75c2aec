"""Storage key naming: date extraction and slug-based key composition."""

from .dates import extract_date, is_valid_date, parse_date, strip_date
from .keys import UploadRequest, build_inferred_key, build_key, slugify

__all__ = [
    "UploadRequest",
    "build_inferred_key",
    "build_key",
    "extract_date",
    "is_valid_date",
    "parse_date",
    "slugify",
    "strip_date",
]
