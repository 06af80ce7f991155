"""Logic for injecting semantic attributes into a structural tree."""

import logging
import re
from typing import Any

from semantic_codemod.annotation_stats import AnnotationStats
from semantic_codemod.attribute import Attribute
from semantic_codemod.attribute_vocabulary import (
    DEFAULT_VOCABULARY,
    AttributeVocabulary,
)
from semantic_codemod.classify import classify
from semantic_codemod.import_provenance import ImportProvenance
from semantic_codemod.node import Node
from semantic_codemod.normalize_props import normalize_props
from semantic_codemod.resolve_ancestor_context import resolve_ancestor_context

logger = logging.getLogger(__name__)

JS_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")

DEFAULT_STRUCTURAL_CHILDREN = [
    "breadcrumbitem",
    "breadcrumbheading",
    "accordionitem",
    "accordioncontent",
    "accordiontoggle",
    "cardbody",
    "cardheader",
    "cardtitle",
    "actionlistitem",
    "modalcontent",
    "modalheader",
    "modalfooter",
    "modalbody",
    "datalistaction",
    "drawermain",
    "drawerpanel",
    "drawercontent",
    "drawerbody",
    "drawerhead",
    "draweractions",
    "drawersection",
    "drawersectiongroup",
    "duallistselectorlist",
    "emptystateheader",
    "emptystateicon",
    "emptystatebody",
    "emptystatefooter",
    "emptystateactions",
    "expandablesectiontoggle",
    "expandablesectioncontent",
    "helpertext",
    "mastheadbrand",
    "menulist",
    "menugroup",
    "menusearch",
    "menusearchinput",
    "selectoptiongroup",
    "notificationdrawerheader",
    "notificationdrawerbody",
    "overflowmenucontent",
]


class TreeAnnotator:
    """Appends data-* labels to every library component in a tree.

    Annotation only ever appends. Nodes already carrying a semantic marker are
    left alone, which makes a second pass over the same tree a no-op.
    """

    def __init__(
        self,
        provenance: ImportProvenance,
        config: dict[str, Any] | None = None,
        vocabulary: AttributeVocabulary = DEFAULT_VOCABULARY,
    ) -> None:
        """Initialize with the file's import table and rule configuration."""
        self.provenance = provenance
        self.vocabulary = vocabulary
        rules = (config or {}).get("rules", {})
        self.skip_structural = rules.get("skip_structural_children", False)
        self.structural_children = [
            s.lower()
            for s in rules.get("structural_children", DEFAULT_STRUCTURAL_CHILDREN)
        ]

    def annotate(self, root: Node) -> AnnotationStats:
        """Annotate every eligible node under (and including) root."""
        stats = AnnotationStats()
        for node in root.walk():
            stats.visited += 1
            self._annotate_node(node, stats)
        return stats

    def _annotate_node(self, node: Node, stats: AnnotationStats) -> None:
        name = node.component_name
        if not name or not JS_IDENTIFIER_RE.fullmatch(name):
            stats.skipped_unnamed += 1
            return

        exported = self.provenance.resolve(name)
        if exported is None:
            stats.skipped_foreign += 1
            return

        if self.skip_structural and self._is_structural(exported):
            logger.debug("Skipping structural child <%s>", name)
            stats.skipped_structural += 1
            return

        if self._has_semantic_marker(node):
            logger.debug("Skipping already annotated <%s>", name)
            stats.skipped_existing += 1
            return

        parent_context = resolve_ancestor_context(
            node.ancestors(), self.provenance, self.vocabulary
        )
        props = normalize_props(node.attributes, self.vocabulary)
        result = classify(exported, props, parent_context)

        node.attributes.extend(
            Attribute(attr_name, value)
            for attr_name, value in result.to_attributes(self.vocabulary)
        )
        stats.annotated += 1

    def _has_semantic_marker(self, node: Node) -> bool:
        return any(self.vocabulary.is_semantic_marker(a.name) for a in node.attributes)

    def _is_structural(self, component_name: str) -> bool:
        name = component_name.lower()
        return any(child in name for child in self.structural_children)
