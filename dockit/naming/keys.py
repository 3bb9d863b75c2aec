"""Storage key composition.

Interactive uploads are stored as::

    documents/{year}/{month}/{source}-{tags}--{date}--{title}.pdf

and uploads named from the filename alone as::

    documents/{year}/{month}/{date}--{title}.pdf

Every text segment goes through :func:`slugify`, so a key never contains
anything outside ``[a-z0-9-]`` apart from the ``/`` separators and the
extension.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, Tuple

from dockit.exceptions import ValidationError

KEY_PREFIX = "documents"
KEY_EXTENSION = ".pdf"
UNTAGGED = "untagged"
UNTITLED = "untitled"

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")


def slugify(text: str) -> str:
    """Trim, lowercase, turn whitespace runs into ``-`` and drop anything else."""
    value = _WHITESPACE.sub("-", text.strip().lower())
    return _NON_SLUG.sub("", value)


def normalize_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    """Slugify each tag, drop empty slugs and de-duplicate in first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        slug = slugify(tag)
        if slug:
            seen.setdefault(slug, None)
    return tuple(seen)


@dataclass(frozen=True)
class UploadRequest:
    """One scanned file and the metadata its storage key is derived from.

    Attributes:
        file_path: Local file to upload
        source: Who the document came from (bank, insurer, ...)
        received_date: Date the document was received
        tags: Tags in the order the user gave them
        title: Short human title
    """
    file_path: Path
    source: str
    received_date: date
    tags: Tuple[str, ...] = field(default_factory=tuple)
    title: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", normalize_tags(self.tags))

    @classmethod
    def from_tag_text(
        cls, file_path: Path, source: str, received_date: date, tag_text: str, title: str
    ) -> "UploadRequest":
        """Build a request from a comma separated tag string as typed at a prompt."""
        return cls(file_path, source, received_date, tuple(tag_text.split(",")), title)


def _date_prefix(received_date: date) -> str:
    return f"{KEY_PREFIX}/{received_date.year:04d}/{received_date.month:02d}"


def _title_slug(title: str) -> str:
    return slugify(title) or UNTITLED


def build_key(request: UploadRequest) -> str:
    """Compose the interactive-mode key for ``request``."""
    source = slugify(request.source)
    if not source:
        raise ValidationError("Source is required", {"source": request.source})
    tags = slugify("-".join(request.tags)) or UNTAGGED
    day = request.received_date.isoformat()
    file_name = f"{source}-{tags}--{day}--{_title_slug(request.title)}{KEY_EXTENSION}"
    return f"{_date_prefix(request.received_date)}/{file_name}"


def build_inferred_key(received_date: date, title: str) -> str:
    """Compose the key used when date and title come from the filename."""
    day = received_date.isoformat()
    return f"{_date_prefix(received_date)}/{day}--{_title_slug(title)}{KEY_EXTENSION}"
