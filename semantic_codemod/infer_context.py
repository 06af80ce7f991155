"""Logic for inferring where a component is used."""

from collections.abc import Set

from semantic_codemod.component_family import ContextTrait
from semantic_codemod.props_map import PropsMap


def infer_context(
    traits: Set[ContextTrait], props: PropsMap, parent_context: str | None = None
) -> str | None:
    """Return the context label.

    An explicit ``context`` prop wins, then an inherited parent context, then
    keyword traits of the component name in a fixed order.
    """
    explicit = props.string("context")
    if explicit is not None:
        return explicit

    if parent_context:
        return parent_context

    if ContextTrait.FORM in traits or (
        ContextTrait.INPUT in traits and props.has("form")
    ):
        return "form"
    if ContextTrait.OVERLAY in traits:
        return "modal"
    if ContextTrait.TABLE in traits:
        return "table"
    if ContextTrait.TOOLBAR in traits or props.has("toolbar"):
        return "toolbar"
    if ContextTrait.NAVIGATION in traits or props.has("navigation"):
        return "navigation"
    return None
