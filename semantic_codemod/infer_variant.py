"""Logic for inferring the visual variant of a component.

Most families report the literal ``variant`` prop. Accordions, alerts and
labels instead build a compound variant from an ordered list of qualifiers
joined with ``-``, e.g. ``multiple-expand-bordered-h3``.
"""

from semantic_codemod.component_family import ComponentFamily
from semantic_codemod.props_map import PropsMap

STATEFUL_PROPS = (
    "isRead",
    "read",
    "isUnread",
    "unread",
    "isAttention",
    "attention",
    "needsAttention",
)


def infer_variant(family: ComponentFamily, props: PropsMap) -> str | None:
    """Return the variant label, or None when no variant can be inferred."""
    if family is ComponentFamily.ACCORDION:
        return _join(_accordion_parts(props))
    if family is ComponentFamily.ALERT:
        return _join(_alert_parts(props))
    if family is ComponentFamily.LABEL:
        return _join(_label_parts(props))

    explicit = props.string("variant")
    if explicit is not None:
        if explicit == "link":
            return _refine_link(props)
        return explicit

    if props.has("isWarning", "warning"):
        return "warning"

    if props.has(*STATEFUL_PROPS):
        return "stateful"

    if family is ComponentFamily.TEXT_INPUT:
        input_type = props.string("type")
        if input_type is not None:
            return input_type

    if props.has("isDanger", "danger"):
        return "danger-link" if family is ComponentFamily.LINK else "danger"

    # Unstyled buttons render as primary
    if family is ComponentFamily.BUTTON and not props.has("variant"):
        return "primary"

    return None


def _refine_link(props: PropsMap) -> str:
    if props.has("isInline", "inline"):
        return "inline-link"
    if props.has("isDanger", "danger"):
        return "danger-link"
    return "link"


def _accordion_parts(props: PropsMap) -> list[str]:
    """Expand mode, border, heading level, then definition-list markup."""
    single = props.has("isSingleExpand", "singleExpand") and not (
        props.is_false("isSingleExpand") or props.is_false("singleExpand")
    )
    parts = ["single-expand" if single else "multiple-expand"]
    if props.has("isBordered"):
        parts.append("bordered")
    heading = props.string("headingLevel")
    if heading:
        parts.append(heading)
    if props.has("asDefinitionList"):
        parts.append("definition-list")
    return parts


def _alert_parts(props: PropsMap) -> list[str]:
    parts = [props.string("variant") or "default"]
    if props.has("isInline"):
        parts.append("inline")
    if props.has("isPlain"):
        parts.append("plain")
    if props.has("isExpandable"):
        parts.append("expandable")
    return parts


def _label_parts(props: PropsMap) -> list[str]:
    parts = []
    color = props.string("color")
    if color:
        parts.append(color)
    variant = props.string("variant")
    if variant:
        parts.append(variant)
    if props.has("isEditable"):
        parts.append("editable")
    return parts


def _join(parts: list[str]) -> str | None:
    return "-".join(parts) if parts else None
