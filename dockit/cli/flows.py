"""Interactive and filename-inference upload flows.

Files are handled one at a time in the order they were matched. The storage
backend is only created once a real (non dry-run) upload happens.
"""

from __future__ import annotations

import glob
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from dockit.naming import (
    UploadRequest,
    build_inferred_key,
    build_key,
    extract_date,
    parse_date,
    strip_date,
)
from dockit.naming.keys import UNTITLED
from dockit.settings import Settings
from dockit.storage import ObjectStorage
from dockit.tagging import suggest_tags
from dockit.upload import RichProgressObserver, upload

from .prompts import Prompter, required, required_slug, valid_date

GLOB_PROMPT = "Enter file paths or globs (e.g. scans/*.pdf)"


def match_files(patterns: Iterable[str]) -> List[Path]:
    """Expand paths and glob patterns into existing files, first match first."""
    seen: dict[Path, None] = {}
    for pattern in patterns:
        literal = Path(pattern).expanduser()
        # Existing paths win over glob syntax, so "scan[1].pdf" matches itself.
        if literal.is_file():
            seen.setdefault(literal, None)
            continue
        for name in sorted(glob.glob(str(literal), recursive=True)):
            path = Path(name)
            if path.is_file():
                seen.setdefault(path, None)
    return list(seen)


def split_patterns(text: str) -> List[str]:
    return [part for part in text.replace(",", " ").split() if part]


@dataclass
class UploadSession:
    """Shared state for one CLI run."""

    settings: Settings
    prompter: Prompter
    storage_factory: Callable[[], ObjectStorage]
    console: Console = field(default_factory=Console)
    show_progress: bool = True
    uploaded: int = 0
    _storage: Optional[ObjectStorage] = None

    @property
    def storage(self) -> ObjectStorage:
        if self._storage is None:
            self._storage = self.storage_factory()
        return self._storage

    def collect_files(self, patterns: Optional[List[str]] = None) -> List[Path]:
        if not patterns:
            patterns = split_patterns(self.prompter.text(GLOB_PROMPT, validate=required("File pattern")))
        files = match_files(patterns)
        logger.debug("Matched {} file(s) for {}", len(files), patterns)
        return files

    def deliver(self, path: Path, key: str, dry_run: bool) -> None:
        bucket = self.settings.default_bucket
        self.console.print(
            f"📄 [bold]{escape(str(path))}[/bold] → s3://[cyan]{escape(bucket)}[/cyan]/{escape(key)}"
        )
        if dry_run:
            self.console.print("[bright_black]⚠️  Dry run — not uploaded[/bright_black]\n")
            return

        if self.show_progress:
            with RichProgressObserver(path.name, path.stat().st_size, console=self.console) as bar:
                result = upload(self.storage, bucket, key, path, observers=[bar])
        else:
            result = upload(self.storage, bucket, key, path)
        self.uploaded += 1
        logger.info("Uploaded {} ({} bytes) to {}", path, result.total_bytes, result.uri)
        self.console.print("[green]✓ Upload complete[/green]\n")

    def no_files(self) -> int:
        self.console.print("[yellow]No files matched.[/yellow]")
        return 0


def run_interactive(session: UploadSession) -> int:
    """Prompt for source, date and per-file tags/title; name keys with all of them."""
    prompter = session.prompter
    files = session.collect_files()
    if not files:
        return session.no_files()

    source = prompter.text("Document source (e.g. bank)", validate=required_slug("Source"))
    received = parse_date(prompter.text("Date received (YYYY-MM-DD)", validate=valid_date))
    dry_run = prompter.confirm("Dry run? (preview only)", default=session.settings.dry_run_default)

    for path in files:
        base = path.stem
        suggested = suggest_tags(base, session.settings.enable_nlp_tagging)
        tag_text = prompter.text(f"Tags for {escape(base)} (comma-separated)", default=",".join(suggested))
        title = prompter.text("Short title", default=base)
        request = UploadRequest.from_tag_text(path, source, received, tag_text, title)
        session.deliver(path, build_key(request), dry_run)

    logger.info("Processed {} file(s), uploaded {}", len(files), session.uploaded)
    return 0


def run_inferred(
    session: UploadSession,
    patterns: Optional[List[str]] = None,
    dry_run: Optional[bool] = None,
) -> int:
    """Name each file from the date and title found in its own filename."""
    prompter = session.prompter
    files = session.collect_files(patterns)
    if not files:
        return session.no_files()

    if dry_run is None:
        dry_run = prompter.confirm("Dry run? (preview only)", default=session.settings.dry_run_default)

    for path in files:
        base = path.stem
        day = extract_date(base)
        if day is None:
            day = prompter.text(f"No date found in {escape(path.name)}. Date (YYYY-MM-DD)", validate=valid_date)
            default_title = base
        else:
            default_title = strip_date(base, day)
        title = prompter.text("Short title", default=default_title or UNTITLED)
        session.deliver(path, build_inferred_key(parse_date(day), title), dry_run)

    logger.info("Processed {} file(s), uploaded {}", len(files), session.uploaded)
    return 0
