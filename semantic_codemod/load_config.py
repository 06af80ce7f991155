"""Logic for loading and merging codemod configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from semantic_codemod.deep_merge import deep_merge
from semantic_codemod.import_provenance import DEFAULT_IMPORT_NAMES, DEFAULT_PACKAGES
from semantic_codemod.tree_annotator import DEFAULT_STRUCTURAL_CHILDREN

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "packages": list(DEFAULT_PACKAGES),
    "default_import_names": list(DEFAULT_IMPORT_NAMES),
    "files": {
        "extensions": [".tsx", ".jsx", ".js"],
        "exclude_dirs": ["node_modules", "dist", "build", ".git"],
    },
    "rules": {
        "skip_structural_children": False,
        "structural_children": list(DEFAULT_STRUCTURAL_CHILDREN),
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A path that does not exist falls back to the defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", path)
    return config
