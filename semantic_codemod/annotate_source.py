"""Logic for annotating a single JSX/TSX source text."""

import logging
from typing import Any

from semantic_codemod.annotation_stats import FileResult
from semantic_codemod.import_provenance import ImportProvenance
from semantic_codemod.jsx_source import parse_jsx_source, render_jsx_document
from semantic_codemod.tree_annotator import TreeAnnotator

logger = logging.getLogger(__name__)


def annotate_source(
    text: str,
    language: str = "tsx",
    config: dict[str, Any] | None = None,
    path: str = "<string>",
) -> tuple[str, FileResult]:
    """Annotate library components in ``text`` and return the new text.

    When nothing qualifies the input is returned unchanged.
    """
    config = config or {}
    doc = parse_jsx_source(text, language)
    provenance = ImportProvenance(
        doc.imports,
        packages=config.get("packages"),
        default_import_names=config.get("default_import_names"),
    )
    if not provenance.records:
        logger.debug("%s: no imports from recognized packages", path)

    result = FileResult(path=path)
    annotator = TreeAnnotator(provenance, config)
    for root in doc.roots:
        result.stats.merge(annotator.annotate(root))

    new_text = render_jsx_document(doc)
    result.changed = new_text != text
    return new_text, result
