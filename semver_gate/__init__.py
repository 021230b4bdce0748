"""SemverGate - decide whether a semantic version satisfies a version requirement."""

__version__ = "0.1.0"
__author__ = "SemverGate Team"

from .core.matcher import RequirementMatcher, comparator_matches, requirement_matches
from .core.models import BuildMetadata, Comparator, Op, Prerelease, Version, VersionReq

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
