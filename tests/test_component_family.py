"""Tests for component family resolution."""

import pytest

from semantic_codemod.component_family import (
    ComponentFamily,
    ContextTrait,
    resolve_family,
    resolve_traits,
)


@pytest.mark.parametrize(
    ("name", "family"),
    [
        ("Accordion", ComponentFamily.ACCORDION),
        ("AccordionItem", ComponentFamily.ACCORDION_PART),
        ("Alert", ComponentFamily.ALERT),
        ("Avatar", ComponentFamily.AVATAR),
        ("Label", ComponentFamily.LABEL),
        ("Button", ComponentFamily.BUTTON),
        ("MenuToggle", ComponentFamily.NAVIGATION),
        ("Card", ComponentFamily.CARD),
        ("CardBody", ComponentFamily.CARD),
        ("TextInput", ComponentFamily.TEXT_INPUT),
        ("FormSelect", ComponentFamily.TEXT_INPUT),
        ("Checkbox", ComponentFamily.CHOICE),
        ("Modal", ComponentFamily.OVERLAY),
        ("Drawer", ComponentFamily.OVERLAY),
        ("Form", ComponentFamily.FORM),
        ("FormGroup", ComponentFamily.FORM),
        ("Td", ComponentFamily.TABLE),
        ("Table", ComponentFamily.TABLE),
        ("FlexItem", ComponentFamily.LAYOUT),
        ("Toolbar", ComponentFamily.TOOLBAR),
        ("Breadcrumb", ComponentFamily.NAVIGATION),
        ("Spinner", ComponentFamily.GENERIC),
    ],
)
def test_resolve_family(name: str, family: ComponentFamily) -> None:
    """Verify that names resolve to the expected family."""
    assert resolve_family(name) is family


def test_button_rule_precedes_toolbar() -> None:
    """Verify that rule order decides overlapping names."""
    assert resolve_family("ToolbarButton") is ComponentFamily.BUTTON


def test_traits_are_not_exclusive() -> None:
    """Verify every matching keyword contributes a trait."""
    assert resolve_traits("MenuSearchInput") == {
        ContextTrait.INPUT,
        ContextTrait.NAVIGATION,
    }
    assert resolve_traits("DrawerCloseButton") == {ContextTrait.OVERLAY}
    assert resolve_traits("Spinner") == frozenset()
