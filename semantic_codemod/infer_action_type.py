"""Logic for inferring the consequence of activating a component."""

from semantic_codemod.component_family import ComponentFamily
from semantic_codemod.props_map import PropsMap

BUTTON_TYPE_ACTIONS = {"submit": "confirmation", "reset": "cancel"}


def infer_action_type(family: ComponentFamily, props: PropsMap) -> str | None:
    """Return destructive, navigation or a family-specific action, else None."""
    if props.string("variant") == "danger" or props.has("isDanger", "danger"):
        return "destructive"

    if props.has("href"):
        return "navigation"

    if family is ComponentFamily.ALERT:
        if props.has("actionLinks"):
            return "actionable"
        if props.has("actionClose"):
            return "dismissible"

    if family is ComponentFamily.BUTTON:
        button_type = props.string("type")
        if button_type in BUTTON_TYPE_ACTIONS:
            return BUTTON_TYPE_ACTIONS[button_type]

    return None
