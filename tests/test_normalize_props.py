"""Tests for props normalization."""

from semantic_codemod.attribute import UNRESOLVED, Attribute
from semantic_codemod.attribute_vocabulary import (
    DEFAULT_VOCABULARY,
    AttributeVocabulary,
)
from semantic_codemod.normalize_props import normalize_props, props_from_mapping


def test_shorthand_becomes_true() -> None:
    """Verify that a valueless attribute is treated as literal true."""
    props = normalize_props([Attribute("isClickable")])
    assert props["isClickable"] is True
    assert props.has("isClickable")


def test_last_duplicate_wins() -> None:
    """Verify that a repeated prop keeps its last value."""
    props = normalize_props(
        [Attribute("variant", "primary"), Attribute("variant", "danger")]
    )
    assert props.string("variant") == "danger"
    assert len(props) == 1


def test_unresolved_values_are_present_but_opaque() -> None:
    """Verify that unresolved props count for presence only."""
    props = normalize_props([Attribute("onClick", UNRESOLVED)])
    assert props.has("onClick")
    assert props.literal("onClick") is None
    assert props.string("onClick") is None
    assert not props.is_false("onClick")


def test_literal_false_is_present() -> None:
    """Verify that isExpanded={false} is present and literally false."""
    props = normalize_props([Attribute("isExpanded", False)])
    assert props.has("isExpanded")
    assert props.is_false("isExpanded")


def test_semantic_markers_dropped_with_vocabulary() -> None:
    """Verify that injected and legacy markers never reach classifiers."""
    attrs = [
        Attribute("data-role", "button"),
        Attribute("data-semantic-purpose", "action"),
        Attribute("variant", "danger"),
    ]
    assert list(normalize_props(attrs, DEFAULT_VOCABULARY)) == ["variant"]
    assert "data-role" in normalize_props(attrs)


def test_custom_vocabulary_markers() -> None:
    """Verify that a substituted vocabulary changes what counts as a marker."""
    vocab = AttributeVocabulary(role="x-role", legacy_prefix="x-legacy-")
    attrs = [Attribute("x-role", "card"), Attribute("data-role", "card")]
    assert list(normalize_props(attrs, vocab)) == ["data-role"]


def test_props_from_mapping() -> None:
    """Verify runtime props: None is absent, callables are unresolved."""
    props = props_from_mapping(
        {"variant": "danger", "onClick": lambda: None, "isOpen": False, "href": None}
    )
    assert props.string("variant") == "danger"
    assert props["onClick"] is UNRESOLVED
    assert props.is_false("isOpen")
    assert not props.has("href")
