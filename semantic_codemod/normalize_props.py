"""Logic for turning raw attributes or runtime props into a PropsMap."""

from collections.abc import Iterable, Mapping
from typing import Any

from semantic_codemod.attribute import UNRESOLVED, Attribute, AttributeValue
from semantic_codemod.attribute_vocabulary import AttributeVocabulary
from semantic_codemod.props_map import PropsMap


def normalize_props(
    attributes: Iterable[Attribute],
    vocabulary: AttributeVocabulary | None = None,
) -> PropsMap:
    """Build a PropsMap from a node's attribute list.

    Shorthand attributes become True; later duplicates overwrite earlier ones.
    When a vocabulary is given, previously injected semantic markers are left
    out so they never influence classification.
    """
    values: dict[str, AttributeValue] = {}
    for attr in attributes:
        if vocabulary is not None and vocabulary.is_semantic_marker(attr.name):
            continue
        values[attr.name] = True if attr.value is None else attr.value
    return PropsMap(values)


def props_from_mapping(props: Mapping[str, Any]) -> PropsMap:
    """Build a PropsMap from runtime prop values.

    None means the prop was not passed. Primitive values are kept as
    literals; anything else (callbacks, elements, objects) is only known to be
    present.
    """
    values: dict[str, AttributeValue] = {}
    for name, value in props.items():
        if value is None:
            continue
        if isinstance(value, str | bool | int | float):
            values[name] = value
        else:
            values[name] = UNRESOLVED
    return PropsMap(values)
