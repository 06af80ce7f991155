"""Binding between JSX/TSX source text and the structural tree.

Parsing uses ast-grep's tree-sitter grammars. Every ``jsx_element`` and
``jsx_self_closing_element`` becomes a Node whose ``host`` remembers the
opening tag and how many attributes it had when parsed, so that attributes
appended later can be written back as text insertions in front of the tag's
closing ``>`` or ``/>``. Nothing else in the file is touched.
"""

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ast_grep_py import SgNode, SgRoot

from semantic_codemod.attribute import UNRESOLVED, Attribute, AttributeValue
from semantic_codemod.import_provenance import ImportKind, ImportRecord
from semantic_codemod.node import Node

if TYPE_CHECKING:
    from ast_grep_py import Edit

ELEMENT_KINDS = {"jsx_element", "jsx_self_closing_element"}

LANGUAGE_BY_SUFFIX = {
    ".tsx": "tsx",
    ".jsx": "javascript",
    ".js": "javascript",
}


@dataclass
class TagBinding:
    """Links a Node to the opening tag it was parsed from."""

    tag: SgNode
    parsed_count: int


@dataclass
class JsxDocument:
    """A parsed source file: its element forest and import declarations."""

    source: str
    sg_root: SgRoot
    roots: list[Node] = field(default_factory=list)
    elements: list[Node] = field(default_factory=list)
    imports: list[ImportRecord] = field(default_factory=list)


def parse_jsx_source(source: str, language: str = "tsx") -> JsxDocument:
    """Parse source text into a JsxDocument."""
    sg_root = SgRoot(source, language)
    doc = JsxDocument(source=source, sg_root=sg_root)
    top = sg_root.root()
    doc.imports = _read_imports(top)
    _build_tree(top, doc)
    return doc


def render_jsx_document(doc: JsxDocument) -> str:
    """Write appended attributes back into the source text."""
    edits = []
    for node in doc.elements:
        binding: TagBinding = node.host
        added = node.attributes[binding.parsed_count :]
        if added:
            edit = _insertion_edit(binding.tag, added)
            if edit is not None:
                edits.append(edit)

    if not edits:
        return doc.source

    # The program node does not span leading or trailing whitespace.
    top = doc.sg_root.root()
    body = top.text()
    start = doc.source.find(body)
    end = start + len(body)
    return doc.source[:start] + top.commit_edits(edits) + doc.source[end:]


# -----------------------------
# Tree building
# -----------------------------


def _build_tree(top: SgNode, doc: JsxDocument) -> None:
    """Walk the syntax tree in document order, nesting elements by containment."""
    stack: list[tuple[SgNode, Node | None]] = [(top, None)]
    while stack:
        sg, owner = stack.pop()
        if sg.kind() in ELEMENT_KINDS:
            node = _build_node(sg)
            doc.elements.append(node)
            if owner is None:
                doc.roots.append(node)
            else:
                owner.add_child(node)
            owner = node
        stack.extend((child, owner) for child in reversed(sg.children()))


def _build_node(element: SgNode) -> Node:
    tag = _opening_tag(element)
    attributes = [
        _read_attribute(child)
        for child in tag.children()
        if child.kind() == "jsx_attribute"
    ]
    return Node(
        component_name=_tag_name(tag),
        attributes=attributes,
        host=TagBinding(tag=tag, parsed_count=len(attributes)),
    )


def _opening_tag(element: SgNode) -> SgNode:
    """Self-closing elements are their own tag."""
    for child in element.children():
        if child.kind() == "jsx_opening_element":
            return child
    return element


def _tag_name(tag: SgNode) -> str | None:
    """Return the tag name when it is a plain identifier."""
    for child in tag.children():
        if child.is_named():
            return child.text() if child.kind() == "identifier" else None
    return None


def _read_attribute(attr: SgNode) -> Attribute:
    named = [c for c in attr.children() if c.is_named()]
    name = named[0].text()
    if len(named) < 2:  # noqa: PLR2004
        return Attribute(name)
    return Attribute(name, _read_value(named[1]))


def _read_value(value: SgNode) -> AttributeValue:
    """Convert an attribute value node to a literal or UNRESOLVED."""
    kind = value.kind()
    if kind == "string":
        return value.text()[1:-1]
    if kind != "jsx_expression":
        return UNRESOLVED

    inner = [c for c in value.children() if c.is_named()]
    if len(inner) != 1:
        return UNRESOLVED
    expr = inner[0]
    kind = expr.kind()
    if kind == "true":
        return True
    if kind == "false":
        return False
    if kind == "string":
        return expr.text()[1:-1]
    if kind == "template_string" and not any(
        c.kind() == "template_substitution" for c in expr.children()
    ):
        return expr.text()[1:-1]
    if kind == "number":
        return _parse_number(expr.text())
    return UNRESOLVED


def _parse_number(text: str) -> AttributeValue:
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return UNRESOLVED


# -----------------------------
# Imports
# -----------------------------


def _read_imports(top: SgNode) -> list[ImportRecord]:
    records: list[ImportRecord] = []
    for stmt in top.find_all(kind="import_statement"):
        source = _import_source(stmt)
        if source is None:
            continue
        clauses = [c for c in stmt.children() if c.kind() == "import_clause"]
        if not clauses:
            records.append(ImportRecord(source=source, kind=ImportKind.SIDE_EFFECT))
            continue
        for part in clauses[0].children():
            records.extend(_clause_records(source, part))
    return records


def _import_source(stmt: SgNode) -> str | None:
    source = stmt.field("source")
    if source is None:
        strings = [c for c in stmt.children() if c.kind() == "string"]
        if not strings:
            return None
        source = strings[-1]
    return source.text()[1:-1]


def _clause_records(source: str, part: SgNode) -> list[ImportRecord]:
    kind = part.kind()
    if kind == "identifier":
        return [
            ImportRecord(source=source, kind=ImportKind.DEFAULT, local_name=part.text())
        ]
    if kind == "namespace_import":
        names = [c.text() for c in part.children() if c.kind() == "identifier"]
        return [
            ImportRecord(
                source=source,
                kind=ImportKind.NAMESPACE,
                local_name=names[0] if names else None,
            )
        ]
    if kind == "named_imports":
        return [
            _specifier_record(source, spec)
            for spec in part.children()
            if spec.kind() == "import_specifier"
        ]
    return []


def _specifier_record(source: str, spec: SgNode) -> ImportRecord:
    """``{ Button }`` or ``{ Button as PFButton }``."""
    names = [_unquote(c) for c in spec.children() if c.is_named()]
    imported = names[0]
    local = names[1] if len(names) > 1 else imported
    return ImportRecord(
        source=source,
        kind=ImportKind.NAMED,
        local_name=local,
        imported_name=imported,
    )


def _unquote(node: SgNode) -> str:
    text = node.text()
    return text[1:-1] if node.kind() == "string" else text


# -----------------------------
# Rendering
# -----------------------------


def _insertion_edit(tag: SgNode, added: list[Attribute]) -> "Edit | None":
    """Build an edit that inserts attributes before the tag's closing token."""
    children = tag.children()
    named = [i for i, c in enumerate(children) if c.is_named()]
    if not named or named[-1] + 1 >= len(children):
        return None

    last = children[named[-1]]
    closer = children[named[-1] + 1]
    formatted = [_format_attribute(a) for a in added]

    if last.range().end.line < closer.range().start.line:
        return closer.replace(_multiline_insertion(last, closer, formatted))

    text = " ".join(formatted)
    if last.range().end.index < closer.range().start.index:
        replacement = f"{text} {closer.text()}"
    else:
        spacer = "" if closer.text() == ">" else " "
        replacement = f" {text}{spacer}{closer.text()}"
    return closer.replace(replacement)


def _multiline_insertion(last: SgNode, closer: SgNode, formatted: list[str]) -> str:
    """One attribute per line, aligned with the existing ones.

    The closing token keeps its own line and indentation.
    """
    closer_indent = closer.range().start.column
    if last.kind() == "jsx_attribute":
        indent = max(last.range().start.column, closer_indent)
    else:
        indent = closer_indent + 2
    lines = [" " * indent + attr for attr in formatted]
    lines.append(" " * closer_indent + closer.text())
    return "\n".join(lines)[closer_indent:]


def _format_attribute(attr: Attribute) -> str:
    value = str(attr.value)
    if '"' not in value:
        return f'{attr.name}="{value}"'
    if "'" not in value:
        return f"{attr.name}='{value}'"
    return f"{attr.name}={{{json.dumps(value)}}}"
