"""Core value types and requirement matching logic for SemverGate."""

from .matcher import RequirementMatcher, comparator_matches, requirement_matches
from .models import BuildMetadata, Comparator, Op, Prerelease, Version, VersionReq

__all__ = [
    "RequirementMatcher",
    "requirement_matches",
    "comparator_matches",
    "BuildMetadata",
    "Comparator",
    "Op",
    "Prerelease",
    "Version",
    "VersionReq",
]
