"""The set of attribute names the codemod emits and recognizes."""

from dataclasses import dataclass

LEGACY_PREFIX = "data-semantic-"


@dataclass(frozen=True)
class AttributeVocabulary:
    """Maps classification fields to the data-* attribute names they produce."""

    role: str = "data-role"
    purpose: str = "data-purpose"
    variant: str = "data-variant"
    context: str = "data-context"
    state: str = "data-state"
    action_type: str = "data-action-type"
    size: str = "data-size"
    legacy_prefix: str = LEGACY_PREFIX

    @property
    def names(self) -> tuple[str, ...]:
        """Return the canonical attribute names in emission order."""
        return (
            self.role,
            self.purpose,
            self.variant,
            self.context,
            self.state,
            self.action_type,
            self.size,
        )

    def is_semantic_marker(self, name: str) -> bool:
        """Check if an attribute name was produced by this or an older codemod."""
        return name.startswith(self.legacy_prefix) or name in self.names


DEFAULT_VOCABULARY = AttributeVocabulary()
