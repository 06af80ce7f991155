"""Logic for inferring what a component does."""

from semantic_codemod.component_family import ComponentFamily
from semantic_codemod.props_map import PropsMap

DEFAULT_PURPOSE = "display"

FAMILY_PURPOSES: dict[ComponentFamily, str] = {
    ComponentFamily.TEXT_INPUT: "input",
    ComponentFamily.CHOICE: "input",
    ComponentFamily.OVERLAY: "overlay",
    ComponentFamily.FORM: "form-container",
    ComponentFamily.TABLE: "data-display",
    ComponentFamily.LAYOUT: "layout",
}


def infer_purpose(family: ComponentFamily, props: PropsMap) -> str:
    """Return the purpose label; always a string."""
    if family is ComponentFamily.BUTTON:
        return "action"
    if family is ComponentFamily.LINK and props.has("onClick", "onSubmit"):
        return "action"

    if props.has("href"):
        return "navigation"

    if family is ComponentFamily.CARD:
        return _card_purpose(props)

    return FAMILY_PURPOSES.get(family, DEFAULT_PURPOSE)


def _card_purpose(props: PropsMap) -> str:
    """Cards are selectable, clickable, both, or plain display."""
    selectable = props.has("isSelectable", "isSelectableRaised")
    clickable = props.has("isClickable", "onClick")

    if selectable and clickable:
        return "clickable and selectable"
    if selectable:
        return "selectable"
    if clickable:
        return "clickable"
    return DEFAULT_PURPOSE
