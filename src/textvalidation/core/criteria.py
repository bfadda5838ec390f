"""
Catalog of predefined validation criteria.

Each ``ValidationKind`` carries the integer value used by attribute-style
configuration and the canonical regular expression that valid input must
fully match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationKind(Enum):
    """Predefined validation criteria."""

    # Input is not empty
    NON_EMPTY = (0, r"(?s).+")
    # Approximate URL syntax; only http, https and ftp schemes, dotted host
    URL = (1, r"(https?|ftp)://[^\s.]+(\.[^\s.]+)+")
    # A #-sign followed by 3 or 6 hexadecimal digits
    HEX_COLOR = (2, r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
    # ASCII letters and digits, implies not empty
    ALPHANUMERIC = (3, r"[a-zA-Z0-9]+")
    # ASCII letters, implies not empty
    ALPHABETIC = (4, r"[a-zA-Z]+")
    # ASCII digits, implies not empty
    NUMERIC = (5, r"[0-9]+")
    # Approximate e-mail address syntax
    EMAIL = (
        6,
        r"[a-zA-Z0-9+._%\-]{1,256}"
        r"@"
        r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
        r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+",
    )

    def __init__(self, number: int, pattern: str) -> None:
        self.number = number
        self.pattern = pattern


_KIND_ALIASES: dict[str, ValidationKind] = {
    "hex": ValidationKind.HEX_COLOR,
    "hexadecimal_color": ValidationKind.HEX_COLOR,
    "alpha": ValidationKind.ALPHABETIC,
    "alphabet": ValidationKind.ALPHABETIC,
    "number": ValidationKind.NUMERIC,
    "nonempty": ValidationKind.NON_EMPTY,
}


def pattern_for(kind: ValidationKind) -> str:
    """Return the canonical pattern for a predefined kind."""
    return kind.pattern


def kind_from_value(value: int) -> ValidationKind:
    """
    Look up a kind by its attribute integer value.

    Raises:
        ValueError: If no kind has the given value
    """
    for kind in ValidationKind:
        if kind.number == value:
            return kind
    raise ValueError(f"{value} is not a valid validation kind")


def kind_from_name(name: str) -> ValidationKind:
    """
    Look up a kind by name, case-insensitively.

    Accepts enum member names (``"hex_color"``, ``"EMAIL"``) and a few
    short aliases (``"hex"``, ``"alpha"``, ``"number"``).

    Raises:
        ValueError: If the name does not denote a kind
    """
    key = name.strip().lower().replace("-", "_")
    if key in _KIND_ALIASES:
        return _KIND_ALIASES[key]
    try:
        return ValidationKind[key.upper()]
    except KeyError:
        raise ValueError(f"'{name}' is not a valid validation kind") from None


@dataclass(frozen=True)
class Criterion:
    """
    The validation rule in effect for one field.

    Exactly one of ``kind`` or ``custom_pattern`` is set. Use the
    ``of_kind`` and ``custom`` constructors rather than building one directly.
    """

    kind: ValidationKind | None = None
    custom_pattern: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is None) == (self.custom_pattern is None):
            raise ValueError("A criterion needs exactly one of kind or custom_pattern")

    @classmethod
    def of_kind(cls, kind: ValidationKind) -> Criterion:
        return cls(kind=kind)

    @classmethod
    def custom(cls, pattern: str) -> Criterion:
        return cls(custom_pattern=pattern)

    @property
    def is_custom(self) -> bool:
        return self.custom_pattern is not None

    @property
    def pattern(self) -> str:
        """The pattern string this criterion matches against."""
        if self.kind is not None:
            return pattern_for(self.kind)
        return self.custom_pattern  # type: ignore[return-value]

    def describe(self) -> str:
        if self.kind is not None:
            return f"kind {self.kind.name}"
        return f"custom pattern {self.custom_pattern!r}"


DEFAULT_CRITERION = Criterion.of_kind(ValidationKind.NON_EMPTY)
