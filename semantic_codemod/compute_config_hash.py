"""Logic for fingerprinting the settings that shape an annotation run.

Two runs with the same fingerprint emit the same labels for the same
sources, so a report can tell whether its results are comparable to an
earlier one.
"""

import hashlib
import json
from typing import Any

from semantic_codemod.attribute_vocabulary import (
    DEFAULT_VOCABULARY,
    AttributeVocabulary,
)
from semantic_codemod.resolve_ancestor_context import (
    CONTEXT_PURPOSES,
    MAX_ANCESTOR_DEPTH,
)


def compute_config_hash(
    config: dict[str, Any], vocabulary: AttributeVocabulary = DEFAULT_VOCABULARY
) -> str:
    """Return a sha256 over the config, emitted names and ancestor-walk bounds."""
    settings = {
        "config": config,
        "vocabulary": [*vocabulary.names, vocabulary.legacy_prefix],
        "ancestor_depth": MAX_ANCESTOR_DEPTH,
        "ancestor_purposes": sorted(CONTEXT_PURPOSES),
    }
    payload = json.dumps(settings, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
