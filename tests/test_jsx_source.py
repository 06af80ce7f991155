"""Tests for parsing and rendering JSX source through ast-grep."""

from semantic_codemod.attribute import UNRESOLVED, Attribute
from semantic_codemod.import_provenance import ImportKind
from semantic_codemod.jsx_source import parse_jsx_source, render_jsx_document
from semantic_codemod.node import Node

SOURCE = """\
import React from 'react';
import { Button, Card as PFCard, CardBody } from '@patternfly/react-core';
import * as Icons from '@patternfly/react-icons';
import '@patternfly/react-core/dist/styles/base.css';

export const Example = ({ onSave, items }) => (
  <PFCard isClickable title="Hello" count={3} flag={false}>
    <CardBody>
      <Button variant={`danger`} onClick={onSave} {...items} />
    </CardBody>
    <>
      <Icons.PlusIcon />
    </>
  </PFCard>
);
"""


def _attrs(node: Node) -> dict[str, object]:
    return {a.name: a.value for a in node.attributes}


def test_import_records() -> None:
    """Verify default, named, aliased, namespace and side-effect imports."""
    doc = parse_jsx_source(SOURCE, "tsx")
    records = {(r.kind, r.local_name, r.imported_name, r.source) for r in doc.imports}
    core = "@patternfly/react-core"
    assert (ImportKind.DEFAULT, "React", None, "react") in records
    assert (ImportKind.NAMED, "Button", "Button", core) in records
    assert (ImportKind.NAMED, "PFCard", "Card", core) in records
    assert (
        ImportKind.NAMESPACE,
        "Icons",
        None,
        "@patternfly/react-icons",
    ) in records
    assert (
        ImportKind.SIDE_EFFECT,
        None,
        None,
        "@patternfly/react-core/dist/styles/base.css",
    ) in records


def test_element_tree() -> None:
    """Verify elements nest by containment and names are read from tags."""
    doc = parse_jsx_source(SOURCE, "tsx")
    assert len(doc.roots) == 1
    card = doc.roots[0]
    assert card.component_name == "PFCard"
    body, fragment = card.children
    assert body.component_name == "CardBody"
    assert fragment.component_name is None
    assert fragment.children[0].component_name is None  # member expression tag
    button = body.children[0]
    assert button.component_name == "Button"
    assert [n.component_name for n in button.ancestors()] == ["CardBody", "PFCard"]


def test_attribute_values() -> None:
    """Verify literals, shorthand and dynamic values; spreads are ignored."""
    doc = parse_jsx_source(SOURCE, "tsx")
    card = doc.roots[0]
    assert _attrs(card) == {
        "isClickable": None,
        "title": "Hello",
        "count": 3,
        "flag": False,
    }
    button = card.children[0].children[0]
    assert _attrs(button) == {"variant": "danger", "onClick": UNRESOLVED}


def test_render_unchanged_returns_source() -> None:
    """Verify rendering without new attributes is byte-identical."""
    doc = parse_jsx_source(SOURCE, "tsx")
    assert render_jsx_document(doc) is SOURCE


def test_render_inserts_before_closing_token() -> None:
    """Verify appended attributes land at the end of the opening tag."""
    source = "const a = <Card isClickable>\n  <Button/>\n</Card>;\n"
    doc = parse_jsx_source(source, "tsx")
    card = doc.roots[0]
    button = card.children[0]
    card.attributes.append(Attribute("data-role", "card"))
    button.attributes.append(Attribute("data-role", "button"))
    button.attributes.append(Attribute("data-note", 'say "hi"'))

    assert render_jsx_document(doc) == (
        'const a = <Card isClickable data-role="card">\n'
        "  <Button data-role=\"button\" data-note='say \"hi\"' />\n"
        "</Card>;\n"
    )


def test_javascript_grammar() -> None:
    """Verify .jsx sources parse with the javascript grammar."""
    source = "import { Modal } from '@patternfly/react-core';\nx = <Modal isOpen />;\n"
    doc = parse_jsx_source(source, "javascript")
    modal = doc.roots[0]
    modal.attributes.append(Attribute("data-role", "modal"))
    assert 'x = <Modal isOpen data-role="modal" />;' in render_jsx_document(doc)


def test_render_multiline_tag_keeps_layout() -> None:
    """Verify attributes go on their own lines when the closer has its own line."""
    source = (
        "const a = (\n"
        "  <Button\n"
        '    variant="danger"\n'
        "    onClick={go}\n"
        "  >\n"
        "    Delete\n"
        "  </Button>\n"
        ");\n"
    )
    doc = parse_jsx_source(source, "tsx")
    button = doc.roots[0]
    button.attributes.append(Attribute("data-role", "button"))
    button.attributes.append(Attribute("data-purpose", "action"))

    assert render_jsx_document(doc) == (
        "const a = (\n"
        "  <Button\n"
        '    variant="danger"\n'
        "    onClick={go}\n"
        '    data-role="button"\n'
        '    data-purpose="action"\n'
        "  >\n"
        "    Delete\n"
        "  </Button>\n"
        ");\n"
    )


def test_render_multiline_self_closing_tag() -> None:
    """Verify a self-closing tag whose ``/>`` is on its own line."""
    source = "x = (\n  <Modal\n    isOpen\n  />\n);\n"
    doc = parse_jsx_source(source, "tsx")
    doc.roots[0].attributes.append(Attribute("data-role", "modal"))
    assert render_jsx_document(doc) == (
        'x = (\n  <Modal\n    isOpen\n    data-role="modal"\n  />\n);\n'
    )
