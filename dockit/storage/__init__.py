"""Storage abstraction (S3 or local filesystem)."""

from __future__ import annotations

from typing import BinaryIO, Callable, Optional, Protocol

# Invoked with the number of bytes sent since the previous call.
TransferCallback = Callable[[int], None]


class ObjectStorage(Protocol):
    def put_stream(
        self,
        bucket: str,
        key: str,
        stream: BinaryIO,
        *,
        size: int,
        content_type: str,
        callback: Optional[TransferCallback] = None,
    ) -> str:  # returns uri
        ...


__all__ = ["ObjectStorage", "TransferCallback"]
