from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from json_uploads.config.loader import ConfigError, load_config_or_default
from json_uploads.logging.init import log_summary, setup_logging
from json_uploads.models.notification import Severity
from json_uploads.models.uploaded_file import UploadedFile
from json_uploads.services.artifact_writer import DirectorySink
from json_uploads.services.progress import ProgressTracker
from json_uploads.services.summary import render_summary_line
from json_uploads.services.workbench import Workbench

"""CLI entrypoint.

Drives one workbench session from the command line, in fixed phases:
upload -> edits -> deletes -> row exports -> bulk export -> show.
Row numbers on the command line are 1-based, like export filenames.

Every notification is logged as it is raised; the run ends with a SUMMARY line.
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="json-uploads",
        description="Import JSON files as rows, edit or delete them, and export them back to JSON",
    )
    p.add_argument("files", nargs="*", type=Path, help="JSON files to upload")
    p.add_argument("--config", type=Path, default=None, help="YAML config (default: config/uploads.yml if present)")
    p.add_argument("--output-dir", type=Path, default=None, help="Directory for exported files")
    p.add_argument(
        "--edit", nargs=3, action="append", default=[], metavar=("ROW", "KEY", "VALUE"),
        help="Set one field of a row (repeatable)",
    )
    p.add_argument("--delete", type=int, action="append", default=[], metavar="ROW", help="Delete a row (repeatable)")
    p.add_argument(
        "--export-row", type=int, action="append", default=[], metavar="ROW",
        help="Export one row to user_info_<ROW>.json (repeatable)",
    )
    p.add_argument("--export-all", action="store_true", help="Export all rows to all_user_info.json")
    p.add_argument("--show", action="store_true", help="Print the rows after all actions")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _parse_edits(raw: list[list[str]]) -> list[tuple[int, str, str]]:
    edits = []
    for row, key, value in raw:
        try:
            edits.append((int(row), key, value))
        except ValueError as e:
            raise ValueError(f"--edit: row must be an integer, got {row!r}") from e
    return edits


def _show(workbench: Workbench) -> None:
    for n, record in enumerate(workbench.records, start=1):
        print(f"ROW {n}: {json.dumps(record, ensure_ascii=False)}")


def main(argv: list[str] | None = None) -> int:
    # None のときのみシステム引数を読む ([] はテストからの明示指定)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    try:
        edits = _parse_edits(args.edit)
    except ValueError as e:
        logger.error(str(e))
        return EXIT_FATAL

    try:
        cfg = load_config_or_default(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    cfg = cfg.with_output_directory(args.output_dir)

    if cfg.output_directory.exists() and not cfg.output_directory.is_dir():
        logger.error(f"output directory is not a directory: {cfg.output_directory}")
        return EXIT_FATAL

    sink = DirectorySink(cfg.output_directory)
    workbench = Workbench(cfg, sink=sink)

    uploads = [UploadedFile.from_path(p) for p in args.files]
    logger.info(f"Uploading {len(uploads)} file(s)")
    with ProgressTracker(len(uploads)) as progress:
        result = asyncio.run(workbench.upload(uploads, progress=progress))

    for row, key, value in edits:
        index = row - 1
        if workbench.start_edit(index):
            workbench.change_field(index, key, value)
            workbench.save()

    for row in args.delete:
        workbench.delete_row(row - 1)

    for row in args.export_row:
        workbench.download_row(row - 1)

    if args.export_all:
        workbench.download_all()

    if args.show:
        _show(workbench)

    errors = len(workbench.notifications.by_severity(Severity.DANGER))
    summary_line = render_summary_line(result, rows=len(workbench.store), exported=len(sink.written), errors=errors)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])

    if errors:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
