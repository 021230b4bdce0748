"""Immutable value types consumed by the requirement matcher."""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, ClassVar, Iterator, Optional, Tuple


class Op(Enum):
    """Operator of a single requirement clause."""

    EXACT = "="
    GREATER = ">"
    GREATER_EQ = ">="
    LESS = "<"
    LESS_EQ = "<="
    TILDE = "~"
    CARET = "^"
    WILDCARD = "*"


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _compare_identifiers(left: str, right: str) -> int:
    """Compare two prerelease identifiers by semver precedence.

    Numeric identifiers compare numerically and always sort before
    alphanumeric ones. Alphanumeric identifiers compare in ASCII order.

    Args:
        left: Identifier on the left-hand side
        right: Identifier on the right-hand side

    Returns:
        Negative, zero or positive like a classic ``cmp``
    """
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        # Digit strings of equal length order the same as their values
        left_key: Any = (len(left), left)
        right_key: Any = (len(right), right)
    elif left_numeric:
        return -1
    elif right_numeric:
        return 1
    else:
        left_key, right_key = left, right

    return (left_key > right_key) - (left_key < right_key)


@total_ordering
@dataclass(frozen=True)
class Prerelease:
    """Dot-separated prerelease identifiers, e.g. ``alpha.1``.

    Equality is structural (same identifier text). The ``<``/``>`` operators
    implement semver precedence, where an empty prerelease sorts after every
    non-empty one.
    """

    text: str = ""

    EMPTY: ClassVar["Prerelease"]

    def __post_init__(self) -> None:
        """Validate identifier structure."""
        if not isinstance(self.text, str):
            raise TypeError(f"Prerelease text must be a string, got {type(self.text).__name__}")
        if self.text and any(not identifier for identifier in self.text.split(".")):
            raise ValueError(f"Prerelease identifiers cannot be empty: {self.text!r}")

    @classmethod
    def from_identifiers(cls, *identifiers: Any) -> "Prerelease":
        """Build a prerelease from individual identifiers.

        Args:
            identifiers: Identifiers, numeric ones may be given as ints

        Returns:
            Prerelease joining the identifiers with dots
        """
        return cls(".".join(str(identifier) for identifier in identifiers))

    @property
    def identifiers(self) -> Tuple[str, ...]:
        if not self.text:
            return ()
        return tuple(self.text.split("."))

    def is_empty(self) -> bool:
        return not self.text

    def _compare(self, other: "Prerelease") -> int:
        if self.is_empty() or other.is_empty():
            return int(self.is_empty()) - int(other.is_empty())

        for left, right in zip(self.identifiers, other.identifiers):
            result = _compare_identifiers(left, right)
            if result:
                return result

        # A shorter run of identifiers that is a prefix of the longer one sorts first
        return len(self.identifiers) - len(other.identifiers)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Prerelease):
            return NotImplemented
        return self._compare(other) < 0

    def __str__(self) -> str:
        return self.text


Prerelease.EMPTY = Prerelease()


@dataclass(frozen=True)
class BuildMetadata:
    """Informational build metadata, never used for matching."""

    text: str = ""

    EMPTY: ClassVar["BuildMetadata"]

    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return self.text


BuildMetadata.EMPTY = BuildMetadata()


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")


@dataclass(frozen=True)
class Version:
    """A semantic version.

    ``build`` is excluded from equality and hashing, so two versions that
    differ only in build metadata compare equal.
    """

    major: int
    minor: int
    patch: int
    pre: Prerelease = Prerelease.EMPTY
    build: BuildMetadata = field(default=BuildMetadata.EMPTY, compare=False)

    def __post_init__(self) -> None:
        """Validate numeric fields and normalize textual metadata."""
        for name in ("major", "minor", "patch"):
            _check_number(name, getattr(self, name))

        if isinstance(self.pre, str):
            object.__setattr__(self, "pre", Prerelease(self.pre))
        if isinstance(self.build, str):
            object.__setattr__(self, "build", BuildMetadata(self.build))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if not self.pre.is_empty():
            text += f"-{self.pre}"
        if not self.build.is_empty():
            text += f"+{self.build}"
        return text


@dataclass(frozen=True)
class Comparator:
    """One clause of a version requirement, e.g. ``>=1.2`` or ``^0.3.1``.

    ``minor`` and ``patch`` set to ``None`` mean the field was not specified,
    which is not the same as zero.
    """

    op: Op
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    pre: Prerelease = Prerelease.EMPTY

    def __post_init__(self) -> None:
        """Validate the clause invariants."""
        if not isinstance(self.op, Op):
            object.__setattr__(self, "op", Op(self.op))

        _check_number("major", self.major)
        if self.minor is not None:
            _check_number("minor", self.minor)
        if self.patch is not None:
            _check_number("patch", self.patch)
            if self.minor is None:
                raise ValueError("Comparator cannot specify patch without minor")

        if isinstance(self.pre, str):
            object.__setattr__(self, "pre", Prerelease(self.pre))

    def __str__(self) -> str:
        if self.op is Op.WILDCARD:
            if self.minor is None:
                return f"{self.major}.*"
            return f"{self.major}.{self.minor}.*"

        text = f"{self.op.value}{self.major}"
        if self.minor is not None:
            text += f".{self.minor}"
        if self.patch is not None:
            text += f".{self.patch}"
        if not self.pre.is_empty():
            text += f"-{self.pre}"
        return text


@dataclass(frozen=True)
class VersionReq:
    """A set of comparators that a version must all satisfy."""

    comparators: Tuple[Comparator, ...] = ()

    STAR: ClassVar["VersionReq"]

    def __post_init__(self) -> None:
        """Freeze the comparator sequence."""
        comparators = tuple(self.comparators)
        for comparator in comparators:
            if not isinstance(comparator, Comparator):
                raise TypeError(
                    f"VersionReq members must be Comparator, got {type(comparator).__name__}"
                )
        object.__setattr__(self, "comparators", comparators)

    def matches(self, version: Version) -> bool:
        """Check whether a version satisfies this requirement.

        Args:
            version: Version to check

        Returns:
            True if the version satisfies every comparator
        """
        from .matcher import requirement_matches

        return requirement_matches(self, version)

    def __iter__(self) -> Iterator[Comparator]:
        return iter(self.comparators)

    def __len__(self) -> int:
        return len(self.comparators)

    def __str__(self) -> str:
        if not self.comparators:
            return "*"
        return ", ".join(str(comparator) for comparator in self.comparators)


VersionReq.STAR = VersionReq()
