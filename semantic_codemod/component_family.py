"""Closed set of component families and the name rules that select them."""

from collections.abc import Callable
from enum import Enum


class ComponentFamily(str, Enum):
    """Groups of components that share classification rules."""

    ACCORDION = "accordion"
    ACCORDION_PART = "accordion-part"
    ALERT = "alert"
    AVATAR = "avatar"
    LABEL = "label"
    BUTTON = "button"
    LINK = "link"
    CARD = "card"
    TEXT_INPUT = "text-input"
    CHOICE = "choice"
    OVERLAY = "overlay"
    FORM = "form"
    TABLE = "table"
    LAYOUT = "layout"
    TOOLBAR = "toolbar"
    NAVIGATION = "navigation"
    GENERIC = "generic"


TABLE_NAMES = {"table", "thead", "tbody", "tfoot", "tr", "td", "th", "caption"}
LAYOUT_PREFIXES = ("flex", "grid", "stack", "gallery", "split", "level", "bullseye")
NAVIGATION_KEYWORDS = ("nav", "menu", "breadcrumb", "tabs", "dropdown", "pagination")


def _contains(*keywords: str) -> Callable[[str], bool]:
    return lambda name: any(k in name for k in keywords)


# Ordered: the first matching rule decides the family.
FAMILY_RULES: list[tuple[ComponentFamily, Callable[[str], bool]]] = [
    (ComponentFamily.ACCORDION, lambda name: name == "accordion"),
    (ComponentFamily.ACCORDION_PART, lambda name: name.startswith("accordion")),
    (ComponentFamily.ALERT, lambda name: name == "alert"),
    (ComponentFamily.AVATAR, lambda name: name == "avatar"),
    (ComponentFamily.LABEL, lambda name: name == "label"),
    (ComponentFamily.BUTTON, _contains("button")),
    (ComponentFamily.LINK, _contains("link")),
    (ComponentFamily.CARD, _contains("card")),
    (ComponentFamily.TEXT_INPUT, _contains("input", "textarea", "select")),
    (ComponentFamily.CHOICE, _contains("checkbox", "radio", "switch")),
    (ComponentFamily.OVERLAY, _contains("modal", "drawer")),
    (ComponentFamily.FORM, _contains("form")),
    (
        ComponentFamily.TABLE,
        lambda name: name in TABLE_NAMES or name.startswith("table"),
    ),
    (ComponentFamily.LAYOUT, lambda name: name.startswith(LAYOUT_PREFIXES)),
    (ComponentFamily.TOOLBAR, _contains("toolbar")),
    (ComponentFamily.NAVIGATION, _contains(*NAVIGATION_KEYWORDS)),
]


def resolve_family(component_name: str) -> ComponentFamily:
    """Resolve a component name to its family; unknown names are generic."""
    name = component_name.lower()
    for family, matches in FAMILY_RULES:
        if matches(name):
            return family
    return ComponentFamily.GENERIC


class ContextTrait(str, Enum):
    """Keywords in a component name that hint at where it is used.

    Unlike families, traits are not exclusive: ``MenuSearchInput`` is both an
    input and a navigation component.
    """

    FORM = "form"
    INPUT = "input"
    OVERLAY = "overlay"
    TABLE = "table"
    TOOLBAR = "toolbar"
    NAVIGATION = "navigation"


NAVIGATION_CONTEXT_KEYWORDS = ("nav", "menu", "breadcrumb")

TRAIT_RULES: list[tuple[ContextTrait, Callable[[str], bool]]] = [
    (ContextTrait.FORM, _contains("form")),
    (ContextTrait.INPUT, _contains("input")),
    (ContextTrait.OVERLAY, _contains("modal", "drawer")),
    (
        ContextTrait.TABLE,
        lambda name: name in TABLE_NAMES or name.startswith("table"),
    ),
    (ContextTrait.TOOLBAR, _contains("toolbar")),
    (ContextTrait.NAVIGATION, _contains(*NAVIGATION_CONTEXT_KEYWORDS)),
]


def resolve_traits(component_name: str) -> frozenset[ContextTrait]:
    """Collect every context trait whose keyword appears in the name."""
    name = component_name.lower()
    return frozenset(trait for trait, matches in TRAIT_RULES if matches(name))
