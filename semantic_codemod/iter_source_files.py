"""Logic for discovering source files to annotate."""

from collections.abc import Iterable, Iterator
from pathlib import Path


def iter_source_files(
    paths: Iterable[Path],
    extensions: Iterable[str],
    exclude_dirs: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield matching files under each path in sorted order.

    Explicitly named files are yielded when their suffix matches, regardless
    of the directory they live in.
    """
    suffixes = {e.lower() for e in extensions}
    excluded = set(exclude_dirs)
    seen: set[Path] = set()

    for path in paths:
        if path.is_file():
            candidates = [path]
        else:
            candidates = sorted(
                p
                for p in path.rglob("*")
                if p.is_file()
                and not excluded.intersection(p.relative_to(path).parts[:-1])
            )
        for p in candidates:
            if p.suffix.lower() in suffixes and p not in seen:
                seen.add(p)
                yield p
