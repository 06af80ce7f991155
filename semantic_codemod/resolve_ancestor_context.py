"""Logic for inheriting context from the nearest qualifying ancestor."""

import logging
from collections.abc import Iterable
from itertools import islice

from semantic_codemod.attribute_vocabulary import (
    DEFAULT_VOCABULARY,
    AttributeVocabulary,
)
from semantic_codemod.component_family import resolve_family, resolve_traits
from semantic_codemod.import_provenance import ImportProvenance
from semantic_codemod.infer_context import infer_context
from semantic_codemod.infer_purpose import infer_purpose
from semantic_codemod.node import Node
from semantic_codemod.normalize_props import normalize_props

logger = logging.getLogger(__name__)

MAX_ANCESTOR_DEPTH = 10
CONTEXT_PURPOSES = frozenset({"form-container", "overlay"})


def resolve_ancestor_context(
    ancestors: Iterable[Node],
    provenance: ImportProvenance,
    vocabulary: AttributeVocabulary = DEFAULT_VOCABULARY,
) -> str | None:
    """Return the context of the nearest form or overlay ancestor.

    At most MAX_ANCESTOR_DEPTH ancestors are pulled from ``ancestors``. Each
    candidate is classified from its own props with no inherited context.
    """
    for ancestor in islice(ancestors, MAX_ANCESTOR_DEPTH):
        exported = provenance.resolve(ancestor.component_name or "")
        if exported is None:
            continue

        family = resolve_family(exported)
        props = normalize_props(ancestor.attributes, vocabulary)
        if infer_purpose(family, props) in CONTEXT_PURPOSES:
            return infer_context(resolve_traits(exported), props)

    logger.debug("No context-providing ancestor within %d levels", MAX_ANCESTOR_DEPTH)
    return None
