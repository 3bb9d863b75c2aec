from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from loguru import logger

from dockit.exceptions import UploadError
from dockit.storage import ObjectStorage

from .progress import ProgressObserver, ProgressTracker

PDF_CONTENT_TYPE = "application/pdf"


@dataclass(frozen=True)
class UploadResult:
    uri: str
    bytes_transferred: int
    total_bytes: int


def upload(
    destination: ObjectStorage,
    bucket: str,
    key: str,
    file_path: Path,
    *,
    observers: Iterable[ProgressObserver] = (),
    content_type: str = PDF_CONTENT_TYPE,
) -> UploadResult:
    """Stream ``file_path`` to ``destination`` under ``bucket/key``.

    The result is returned only once the destination has accepted the whole
    object. Any failure raises :class:`UploadError`; nothing is retried.
    """
    path = Path(file_path)
    try:
        total = path.stat().st_size
        stream = path.open("rb")
    except OSError as exc:
        raise UploadError(f"Cannot read {path}: {exc}", {"path": str(path)}) from exc

    tracker = ProgressTracker(total, observers)
    logger.debug("Uploading {} ({} bytes) to {}/{}", path, total, bucket, key)
    with stream:
        uri = destination.put_stream(
            bucket,
            key,
            stream,
            size=total,
            content_type=content_type,
            callback=tracker,
        )

    # Transports may skip the final callback for tiny or empty objects.
    tracker.advance(total - tracker.bytes_transferred)
    logger.debug("Uploaded {} to {}", path, uri)
    return UploadResult(uri=uri, bytes_transferred=tracker.bytes_transferred, total_bytes=total)
