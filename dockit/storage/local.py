from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional

from dockit.exceptions import UploadError
from dockit.storage import TransferCallback

CHUNK_SIZE = 64 * 1024


class LocalStorage:
    """Writes objects under ``root/<bucket>/<key>``.

    The object only appears once the stream has been fully copied.
    """

    def __init__(self, root: Path, chunk_size: int = CHUNK_SIZE) -> None:
        self.root = root
        self.chunk_size = chunk_size
        self.root.mkdir(parents=True, exist_ok=True)

    def put_stream(
        self,
        bucket: str,
        key: str,
        stream: BinaryIO,
        *,
        size: int,
        content_type: str,
        callback: Optional[TransferCallback] = None,
    ) -> str:
        target = self.root / bucket / key
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".partial-")
            try:
                with os.fdopen(fd, "wb") as out:
                    while True:
                        chunk = stream.read(self.chunk_size)
                        if not chunk:
                            break
                        out.write(chunk)
                        if callback is not None:
                            callback(len(chunk))
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise UploadError(
                f"Writing {target} failed: {exc}", {"bucket": bucket, "key": key}
            ) from exc
        return str(target)


__all__ = ["LocalStorage"]
