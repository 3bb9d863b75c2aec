"""Byte-level upload progress reporting."""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Protocol

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskID,
    TextColumn,
    TransferSpeedColumn,
)


class ProgressObserver(Protocol):
    def on_progress(self, bytes_transferred: int) -> None:
        ...


class ProgressTracker:
    """Monotone byte counter fed by transport callbacks.

    Transports report the bytes sent since their previous callback, possibly
    from worker threads. The tracker accumulates them, clamps the total to
    ``total_bytes`` and notifies observers only when the count grows.
    """

    def __init__(self, total_bytes: int, observers: Iterable[ProgressObserver] = ()) -> None:
        self.total_bytes = total_bytes
        self.observers = list(observers)
        self._transferred = 0
        self._lock = threading.Lock()

    @property
    def bytes_transferred(self) -> int:
        return self._transferred

    def __call__(self, bytes_amount: int) -> None:
        self.advance(bytes_amount)

    def advance(self, bytes_amount: int) -> None:
        if bytes_amount <= 0:
            return
        with self._lock:
            updated = min(self._transferred + bytes_amount, self.total_bytes)
            if updated == self._transferred:
                return
            self._transferred = updated
            for observer in self.observers:
                observer.on_progress(updated)


class RichProgressObserver:
    """Renders a transfer bar on the console while a file uploads."""

    def __init__(self, description: str, total_bytes: int, console: Optional[Console] = None) -> None:
        self._progress = Progress(
            TextColumn("Uploading {task.description}"),
            BarColumn(),
            TextColumn("{task.percentage:>3.0f}%"),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=console,
            transient=False,
        )
        self._task: TaskID | None = None
        self._description = escape(description)
        self._total = total_bytes

    def __enter__(self) -> "RichProgressObserver":
        self._progress.start()
        self._task = self._progress.add_task(self._description, total=self._total)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._progress.stop()
        return False

    def on_progress(self, bytes_transferred: int) -> None:
        if self._task is not None:
            self._progress.update(self._task, completed=bytes_transferred)
