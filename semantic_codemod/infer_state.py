"""Logic for inferring the interaction state of a component."""

from semantic_codemod.component_family import ComponentFamily
from semantic_codemod.props_map import PropsMap

CARD_INTERACTIVE_PROPS = (
    "isClickable",
    "isSelectable",
    "isSelectableRaised",
    "onClick",
)

# (props, state when present, state when literally false)
DIRECTIONAL_STATES: list[tuple[tuple[str, ...], str, str]] = [
    (("isExpanded", "expanded"), "expanded", "collapsed"),
    (("isOpen", "open"), "open", "closed"),
    (("isChecked", "checked"), "checked", "unchecked"),
]


def infer_state(family: ComponentFamily, props: PropsMap) -> str | None:
    """Return the state label, or None when nothing indicates a state."""
    if props.has("isDisabled", "disabled", "isAriaDisabled"):
        return "disabled"
    if props.has("isReadOnly", "readOnly"):
        return "readonly"
    if props.has("isSelected", "selected"):
        return "selected"

    for names, on_state, off_state in DIRECTIONAL_STATES:
        if props.has(*names):
            if any(props.is_false(n) for n in names):
                return off_state
            return on_state

    if props.has("isRead", "read"):
        return "read"
    if props.has("isUnread", "unread"):
        return "unread"
    if props.has("isAttention", "attention", "needsAttention"):
        return "attention"

    if family is ComponentFamily.BUTTON and not props.has("onClick", "onSubmit"):
        return "disabled"
    if family is ComponentFamily.CARD and not props.has(*CARD_INTERACTIVE_PROPS):
        return "readonly"

    if props.has("onClick", "onSubmit", "onChange"):
        return "active"
    return None
