"""Entry point for the ``dockit`` command."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from loguru import logger
from rich.console import Console

from dockit.exceptions import DockitError, OperationCancelled
from dockit.logging_config import setup_logging
from dockit.settings import Settings, create_config_file
from dockit.storage import ObjectStorage
from dockit.storage.local import LocalStorage
from dockit.storage.s3 import S3Storage

from .flows import UploadSession, run_inferred, run_interactive
from .prompts import Prompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockit",
        description="Rename scanned documents and upload them to S3. Without a subcommand, runs interactively.",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument("--config", "-c", type=Path, help="Config file (default: ~/.dockitrc.json)")
    parser.add_argument(
        "--local-root",
        type=Path,
        help="Write objects under this directory instead of S3",
    )
    sub = parser.add_subparsers(dest="command")

    upload_cmd = sub.add_parser("upload", help="Name files from the date and title in their filenames")
    upload_cmd.add_argument("paths", nargs="*", help="Files or glob patterns (prompted for when omitted)")
    upload_cmd.add_argument(
        "--dry-run",
        "-d",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Preview keys without uploading (asked when omitted)",
    )
    upload_cmd.add_argument("--config", "-c", dest="upload_config", type=Path, help="Config file")

    config_cmd = sub.add_parser("config", help="Write a default config file if none exists")
    config_cmd.add_argument("--config", "-c", dest="target_config", type=Path, help="Where to write it")
    config_cmd.add_argument("--force", action="store_true", help="Overwrite an existing file")
    return parser


def _storage_factory(settings: Settings, local_root: Optional[Path]) -> Callable[[], ObjectStorage]:
    if local_root is not None:
        return lambda: LocalStorage(local_root)
    return lambda: S3Storage.from_settings(settings)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> int:
    args = build_parser().parse_args(argv)

    log_file = os.getenv("LOG_FILE")
    setup_logging(
        level=args.log_level,
        json_format=os.getenv("JSON_LOGGING", "false").lower() in {"true", "1", "yes"},
        log_file=Path(log_file) if log_file else None,
    )

    console = console or Console()
    try:
        if args.command == "config":
            create_config_file(args.target_config or args.config, force=args.force)
            return 0

        settings = Settings.load(getattr(args, "upload_config", None) or args.config)
        session = UploadSession(
            settings=settings,
            prompter=prompter or Prompter(console),
            storage_factory=_storage_factory(settings, args.local_root),
            console=console,
            show_progress=console.is_terminal,
        )
        if args.command == "upload":
            return run_inferred(session, args.paths, args.dry_run)
        return run_interactive(session)
    except (KeyboardInterrupt, OperationCancelled):
        logger.warning("Cancelled by user")
        return 0
    except DockitError as exc:
        logger.error("{}", exc.message)
        return 1
    except Exception:
        logger.exception("Unhandled error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
