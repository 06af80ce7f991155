"""Entry point combining all classifiers into one result.

This is the contract shared by the static codemod and runtime wrappers: both
must produce the same labels for the same name, props and parent context.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from semantic_codemod.attribute import Attribute
from semantic_codemod.classification_result import ClassificationResult
from semantic_codemod.component_family import resolve_family, resolve_traits
from semantic_codemod.infer_action_type import infer_action_type
from semantic_codemod.infer_context import infer_context
from semantic_codemod.infer_purpose import infer_purpose
from semantic_codemod.infer_role import infer_role
from semantic_codemod.infer_size import infer_size
from semantic_codemod.infer_state import infer_state
from semantic_codemod.infer_variant import infer_variant
from semantic_codemod.normalize_props import normalize_props, props_from_mapping
from semantic_codemod.props_map import PropsMap


def classify(
    component_name: str,
    props: PropsMap | Mapping[str, Any] | Iterable[Attribute] | None = None,
    parent_context: str | None = None,
) -> ClassificationResult:
    """Infer every semantic label for a component instance."""
    props_map = as_props_map(props)
    family = resolve_family(component_name)
    return ClassificationResult(
        role=infer_role(component_name),
        purpose=infer_purpose(family, props_map),
        variant=infer_variant(family, props_map),
        context=infer_context(
            resolve_traits(component_name), props_map, parent_context
        ),
        state=infer_state(family, props_map),
        action_type=infer_action_type(family, props_map),
        size=infer_size(family, props_map),
    )


def as_props_map(
    props: PropsMap | Mapping[str, Any] | Iterable[Attribute] | None,
) -> PropsMap:
    """Accept a PropsMap, a runtime props mapping, or a raw attribute list."""
    if props is None:
        return PropsMap()
    if isinstance(props, PropsMap):
        return props
    if isinstance(props, Mapping):
        return props_from_mapping(props)
    return normalize_props(props)
