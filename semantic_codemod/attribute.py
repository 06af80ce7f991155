"""Data models for JSX attributes and statically unknown values."""

from dataclasses import dataclass


class Unresolved:
    """Marker for a prop that is present but has no statically known value."""

    _instance: "Unresolved | None" = None

    def __new__(cls) -> "Unresolved":
        """Return the shared marker instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        """Render the marker for debugging output."""
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        """Present props are truthy even when their value is unknown."""
        return True


UNRESOLVED = Unresolved()

AttributeValue = str | bool | int | float | Unresolved | None


@dataclass
class Attribute:
    """Represents one name/value pair written on a JSX opening tag."""

    name: str
    value: AttributeValue = None  # None: shorthand, e.g. <Card isClickable />
