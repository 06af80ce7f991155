"""Orchestration logic for annotating a tree of JSX/TSX files."""

import argparse
import logging
from pathlib import Path
from typing import Any

from semantic_codemod.annotate_source import annotate_source
from semantic_codemod.annotation_report import AnnotationReport
from semantic_codemod.annotation_stats import FileResult
from semantic_codemod.compute_config_hash import compute_config_hash
from semantic_codemod.iter_source_files import iter_source_files
from semantic_codemod.jsx_source import LANGUAGE_BY_SUFFIX
from semantic_codemod.load_config import load_config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PENDING_CHANGES = 1
EXIT_FAILURES = 2


def run_annotation(args: argparse.Namespace) -> int:
    """Annotate every matching file under args.paths.

    Returns 2 if any file failed, 1 in check mode when a file would change,
    otherwise 0.
    """
    config = load_config(args.config)
    report = AnnotationReport(compute_config_hash(config))
    write = not (args.dry_run or args.check)

    files = iter_source_files(
        args.paths,
        config["files"]["extensions"],
        config["files"]["exclude_dirs"],
    )
    for path in files:
        result = _process_file(path, config, write=write)
        report.add_result(result)
        if result.changed and not write:
            print(f"Would annotate: {path}")

    if args.report:
        report.generate_report(args.report)
        logger.info("Report written to %s", args.report)

    totals = report.totals()
    verb = "Annotated" if write else "Would annotate"
    print(
        f"{verb} {totals['annotated']} components in {totals['changed']} of "
        f"{totals['files']} files ({totals['failed']} failed)"
    )

    if report.failed:
        return EXIT_FAILURES
    if args.check and report.changed:
        return EXIT_PENDING_CHANGES
    return EXIT_OK


def _process_file(path: Path, config: dict[str, Any], *, write: bool) -> FileResult:
    """Annotate one file; failures are recorded on the result, never raised."""
    language = LANGUAGE_BY_SUFFIX.get(path.suffix.lower(), "tsx")
    try:
        text = path.read_text(encoding="utf-8")
        new_text, result = annotate_source(text, language, config, path=str(path))
        if write and result.changed:
            path.write_text(new_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping %s: %s", path, e)
        return FileResult(path=str(path), error=str(e))
    except Exception as e:
        logger.exception("Failed to annotate %s", path)
        return FileResult(path=str(path), error=str(e))

    if result.changed:
        logger.info("%s: %d components annotated", path, result.stats.annotated)
    return result
