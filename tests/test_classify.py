"""Tests for the combined classification entry point."""

import pytest

from semantic_codemod.attribute import UNRESOLVED, Attribute
from semantic_codemod.classification_result import ClassificationResult
from semantic_codemod.classify import classify


def test_clickable_card() -> None:
    """Verify a clickable card has no state and no context."""
    result = classify("Card", {"isClickable": True})
    assert result.role == "card"
    assert result.purpose == "clickable"
    assert result.state is None
    assert result.context is None


def test_danger_button_with_handler() -> None:
    """Verify a danger button with onClick is a destructive active action."""
    result = classify("Button", {"variant": "danger", "onClick": lambda: None})
    assert result == ClassificationResult(
        role="button",
        purpose="action",
        variant="danger",
        state="active",
        action_type="destructive",
    )


def test_bare_button_defaults() -> None:
    """Verify a button without variant or handler."""
    result = classify("Button", {})
    assert result.variant == "primary"
    assert result.state == "disabled"


def test_card_body_is_display() -> None:
    """Verify nested card parts without interactive props display content."""
    result = classify("CardBody", {})
    assert result.role == "card-body"
    assert result.purpose == "display"


def test_bordered_accordion_variant() -> None:
    """Verify the compound accordion variant."""
    result = classify("Accordion", {"isBordered": True, "headingLevel": "h3"})
    assert result.variant == "multiple-expand-bordered-h3"


def test_unknown_component_falls_back() -> None:
    """Verify unknown names map to their lower-cased name and display."""
    result = classify("FancyWidget")
    assert result.role == "fancywidget"
    assert result.purpose == "display"
    assert result.variant is None
    assert result.context is None


def test_parent_context_is_inherited() -> None:
    """Verify an inherited context is used when nothing explicit is set."""
    assert classify("TextInput", {}, parent_context="form").context == "form"
    assert classify("Button", {"context": "wizard"}, "modal").context == "wizard"


def test_attribute_list_input() -> None:
    """Verify classify accepts raw attributes."""
    result = classify("Modal", [Attribute("isOpen", UNRESOLVED)])
    assert result.purpose == "overlay"
    assert result.context == "modal"
    assert result.state == "open"


@pytest.mark.parametrize(
    ("name", "props"),
    [
        ("", {}),
        ("Button", {"onClick": object()}),
        ("Alert", {"variant": UNRESOLVED}),
        ("Avatar", {"size": 12}),
        ("Label", {"color": "blue", "isEditable": True}),
        ("x-custom-tag", {"href": "/x"}),
    ],
)
def test_classification_is_total_and_deterministic(name: str, props: dict) -> None:
    """Verify role/purpose are always strings and repeated calls agree."""
    first = classify(name, props)
    assert isinstance(first.role, str)
    assert isinstance(first.purpose, str)
    for value in (first.variant, first.context, first.state, first.action_type):
        assert value is None or isinstance(value, str)
    assert classify(name, props) == first


def test_to_attributes_order() -> None:
    """Verify emitted attributes follow the fixed order and skip None fields."""
    result = classify("Button", {"variant": "danger", "onClick": lambda: None})
    assert result.to_attributes() == [
        ("data-role", "button"),
        ("data-purpose", "action"),
        ("data-variant", "danger"),
        ("data-state", "active"),
        ("data-action-type", "destructive"),
    ]


@pytest.mark.parametrize(
    ("name", "context"),
    [
        ("FormSelect", "form"),
        ("DrawerCloseButton", "modal"),
        ("MenuToggleCheckbox", "navigation"),
        ("MenuSearchInput", "navigation"),
        ("ToolbarButton", "toolbar"),
        ("Thead", "table"),
        ("SelectableCard", None),
    ],
)
def test_context_from_name_keywords(name: str, context: str | None) -> None:
    """Verify context keywords apply whatever family the name resolves to."""
    assert classify(name, {}).context == context


def test_input_with_form_prop() -> None:
    """Verify an input bound to a form by prop gets the form context."""
    assert classify("TextInput", {"form": "signup"}).context == "form"
    assert classify("TextInput", {}).context is None
