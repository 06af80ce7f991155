"""Data model for the labels inferred for one component instance."""

from dataclasses import dataclass

from semantic_codemod.attribute_vocabulary import (
    DEFAULT_VOCABULARY,
    AttributeVocabulary,
)

FIELD_ORDER = ("role", "purpose", "variant", "context", "state", "action_type", "size")


@dataclass(frozen=True)
class ClassificationResult:
    """Semantic labels for a component; None fields produce no attribute."""

    role: str
    purpose: str
    variant: str | None = None
    context: str | None = None
    state: str | None = None
    action_type: str | None = None
    size: str | None = None

    def to_attributes(
        self, vocabulary: AttributeVocabulary = DEFAULT_VOCABULARY
    ) -> list[tuple[str, str]]:
        """Return (attribute name, value) pairs in emission order."""
        pairs = []
        for field_name in FIELD_ORDER:
            value = getattr(self, field_name)
            if value is not None:
                pairs.append((getattr(vocabulary, field_name), value))
        return pairs
