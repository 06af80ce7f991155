"""Read-only lookup view over a component's statically known props."""

from collections.abc import Iterator, Mapping

from semantic_codemod.attribute import AttributeValue, Unresolved


class PropsMap(Mapping[str, AttributeValue]):
    """Maps prop names to literals, True for shorthand, or UNRESOLVED.

    Presence and polarity are separate questions: a prop written as
    ``isExpanded={false}`` is present (``has``) and literally false
    (``is_false``). Classifiers never inspect the content of unresolved props.
    """

    def __init__(self, values: Mapping[str, AttributeValue] | None = None) -> None:
        """Initialize the view from an already normalized mapping."""
        self._values: dict[str, AttributeValue] = dict(values or {})

    def __getitem__(self, name: str) -> AttributeValue:
        """Return the stored value for a prop."""
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        """Iterate prop names in declaration order."""
        return iter(self._values)

    def __len__(self) -> int:
        """Return the number of props."""
        return len(self._values)

    def __repr__(self) -> str:
        """Render the props for debugging output."""
        return f"PropsMap({self._values!r})"

    def has(self, *names: str) -> bool:
        """Check if any of the given props is present, whatever its value."""
        return any(name in self._values for name in names)

    def literal(self, name: str) -> AttributeValue:
        """Return the literal value of a prop, or None if absent or unresolved."""
        value = self._values.get(name)
        if isinstance(value, Unresolved):
            return None
        return value

    def string(self, name: str) -> str | None:
        """Return the prop value if it is a string literal."""
        value = self.literal(name)
        return value if isinstance(value, str) else None

    def is_false(self, name: str) -> bool:
        """Check if a prop is present and literally false."""
        return self._values.get(name) is False
