"""Add semantic data-* attributes to PatternFly components in JSX/TSX sources.

Each PatternFly component found in the given files or directories gets
``data-role``, ``data-purpose`` and, where they can be inferred from its props
and ancestors, ``data-variant``, ``data-context``, ``data-state``,
``data-action-type`` and ``data-size``. Running the tool again over annotated
sources changes nothing.
"""

import argparse
import logging
from pathlib import Path

from semantic_codemod.run_annotation import run_annotation


def main(argv: list[str] | None = None) -> int:
    """Run the annotation process."""
    ap = argparse.ArgumentParser(
        prog="semantic-codemod",
        description="Annotate PatternFly JSX with semantic data-* attributes.",
    )
    ap.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Source files or directories to annotate",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without writing files",
    )
    ap.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if any file would change (implies --dry-run)",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of the run to this path",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_annotation(args)


if __name__ == "__main__":
    raise SystemExit(main())
