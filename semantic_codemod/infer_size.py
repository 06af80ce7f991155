"""Logic for inferring component size and density."""

from semantic_codemod.component_family import ComponentFamily
from semantic_codemod.props_map import PropsMap

AVATAR_SIZES = {"sm": "small", "md": "medium", "lg": "large", "xl": "extra-large"}
ACCORDION_DISPLAY_SIZES = {"lg": "large"}


def infer_size(family: ComponentFamily, props: PropsMap) -> str | None:
    """Return the size label, or None when no size prop is present."""
    if family is ComponentFamily.AVATAR:
        size = props.string("size")
        if size in AVATAR_SIZES:
            return AVATAR_SIZES[size]
    if family is ComponentFamily.ACCORDION:
        display_size = props.string("displaySize")
        if display_size in ACCORDION_DISPLAY_SIZES:
            return ACCORDION_DISPLAY_SIZES[display_size]

    for name in ("size", "displaySize"):
        value = props.string(name)
        if value is not None:
            return value

    if props.has("isCompact", "compact"):
        return "compact"
    if props.has("isLarge", "large"):
        return "large"
    return None
