"""Per-file record of which identifiers come from the component library."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

DEFAULT_PACKAGES = [
    "@patternfly/react-core",
    "@patternfly/react-table",
    "@patternfly/react-icons",
    "@patternfly/react-charts",
    "@patternfly/react-topology",
]

# Lower-cased names trusted for imports that bind no identifiers.
DEFAULT_IMPORT_NAMES = [
    "button",
    "card",
    "modal",
    "form",
    "input",
    "select",
    "checkbox",
    "radio",
    "switch",
    "textarea",
    "flex",
    "table",
    "tr",
    "td",
    "th",
]

LIBRARY_SCOPE = "@patternfly"


class ImportKind(str, Enum):
    """How an identifier was bound by an import declaration."""

    NAMED = "named"
    DEFAULT = "default"
    NAMESPACE = "namespace"
    SIDE_EFFECT = "side-effect"


@dataclass(frozen=True)
class ImportRecord:
    """One binding introduced by an import declaration."""

    source: str
    kind: ImportKind
    local_name: str | None = None
    imported_name: str | None = None


class ImportProvenance:
    """Answers whether a JSX tag name refers to a recognized library component."""

    def __init__(
        self,
        records: Iterable[ImportRecord],
        packages: Iterable[str] | None = None,
        default_import_names: Iterable[str] | None = None,
    ) -> None:
        """Initialize from import records and the recognized package catalog."""
        self.packages = list(DEFAULT_PACKAGES if packages is None else packages)
        self.default_import_names = {
            n.lower()
            for n in (
                DEFAULT_IMPORT_NAMES
                if default_import_names is None
                else default_import_names
            )
        }
        # Only imports from recognized packages matter for eligibility.
        self.records = [r for r in records if self.is_library_source(r.source)]

    def is_library_source(self, source: str) -> bool:
        """Check if an import path points into a recognized package."""
        return any(pkg in source for pkg in self.packages)

    def resolve(self, component_name: str) -> str | None:
        """Return the library's exported name for a tag, or None if foreign.

        Default imports and the side-effect heuristic resolve to the tag name
        itself since the library's export name is not visible.
        """
        if not component_name:
            return None

        for record in self.records:
            if record.kind is ImportKind.NAMED and component_name in (
                record.local_name,
                record.imported_name,
            ):
                return record.imported_name or component_name
            if (
                record.kind is ImportKind.DEFAULT
                and record.local_name == component_name
            ):
                return component_name
            if (
                record.kind is ImportKind.SIDE_EFFECT
                and LIBRARY_SCOPE in record.source
                and component_name.lower() in self.default_import_names
            ):
                return component_name
        return None

    def is_recognized(self, component_name: str | None) -> bool:
        """Check if a tag name resolves to a library component."""
        return component_name is not None and self.resolve(component_name) is not None
