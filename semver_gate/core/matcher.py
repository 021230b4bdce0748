"""Core requirement matching logic for SemverGate."""

from typing import Any, Dict, Iterable, List

from ..utils.logging import get_logger
from ..utils.performance import PerformanceMonitor, benchmark
from .models import Comparator, Op, Version, VersionReq


def requirement_matches(req: VersionReq, ver: Version) -> bool:
    """Check whether a version satisfies every comparator of a requirement.

    A version with a prerelease tag (for example ``1.2.3-alpha.3``) only
    satisfies the requirement if at least one comparator names the same
    ``major.minor.patch`` and carries a prerelease tag itself.

    Args:
        req: Requirement to evaluate
        ver: Candidate version

    Returns:
        True if the version satisfies the requirement
    """
    for cmp in req.comparators:
        if not _matches_impl(cmp, ver):
            return False

    if ver.pre.is_empty():
        return True

    for cmp in req.comparators:
        if _pre_is_compatible(cmp, ver):
            return True

    return False


def comparator_matches(cmp: Comparator, ver: Version) -> bool:
    """Check whether a version satisfies a single comparator.

    Applies the same prerelease gate as :func:`requirement_matches`, against
    this comparator alone.

    Args:
        cmp: Comparator to evaluate
        ver: Candidate version

    Returns:
        True if the version satisfies the comparator
    """
    return _matches_impl(cmp, ver) and (ver.pre.is_empty() or _pre_is_compatible(cmp, ver))


def _matches_impl(cmp: Comparator, ver: Version) -> bool:
    op = cmp.op
    if op is Op.EXACT or op is Op.WILDCARD:
        return _matches_exact(cmp, ver)
    if op is Op.GREATER:
        return _matches_greater(cmp, ver)
    if op is Op.GREATER_EQ:
        return _matches_exact(cmp, ver) or _matches_greater(cmp, ver)
    if op is Op.LESS:
        return _matches_less(cmp, ver)
    if op is Op.LESS_EQ:
        return _matches_exact(cmp, ver) or _matches_less(cmp, ver)
    if op is Op.TILDE:
        return _matches_tilde(cmp, ver)
    if op is Op.CARET:
        return _matches_caret(cmp, ver)
    raise AssertionError(f"Unhandled comparator operator: {op!r}")


def _matches_exact(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return False

    if cmp.minor is not None and ver.minor != cmp.minor:
        return False

    if cmp.patch is not None and ver.patch != cmp.patch:
        return False

    # Structural equality, not precedence
    return ver.pre == cmp.pre


def _matches_greater(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return ver.major > cmp.major

    if cmp.minor is None:
        return False
    if ver.minor != cmp.minor:
        return ver.minor > cmp.minor

    if cmp.patch is None:
        return False
    if ver.patch != cmp.patch:
        return ver.patch > cmp.patch

    return ver.pre > cmp.pre


def _matches_less(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return ver.major < cmp.major

    if cmp.minor is None:
        return False
    if ver.minor != cmp.minor:
        return ver.minor < cmp.minor

    if cmp.patch is None:
        return False
    if ver.patch != cmp.patch:
        return ver.patch < cmp.patch

    return ver.pre < cmp.pre


def _matches_tilde(cmp: Comparator, ver: Version) -> bool:
    """Patch may float upward within the pinned major.minor."""
    if ver.major != cmp.major:
        return False

    if cmp.minor is not None and ver.minor != cmp.minor:
        return False

    if cmp.patch is not None and ver.patch != cmp.patch:
        return ver.patch > cmp.patch

    return ver.pre >= cmp.pre


def _matches_caret(cmp: Comparator, ver: Version) -> bool:
    """Allow changes that do not modify the leftmost non-zero component."""
    if ver.major != cmp.major:
        return False

    minor = cmp.minor
    if minor is None:
        return True

    patch = cmp.patch
    if patch is None:
        if cmp.major > 0:
            return ver.minor >= minor
        return ver.minor == minor

    if cmp.major > 0:
        if ver.minor != minor:
            return ver.minor > minor
        if ver.patch != patch:
            return ver.patch > patch
    elif minor > 0:
        if ver.minor != minor:
            return False
        if ver.patch != patch:
            return ver.patch > patch
    elif ver.minor != minor or ver.patch != patch:
        return False

    return ver.pre >= cmp.pre


def _pre_is_compatible(cmp: Comparator, ver: Version) -> bool:
    return (
        cmp.major == ver.major
        and cmp.minor == ver.minor
        and cmp.patch == ver.patch
        and not cmp.pre.is_empty()
    )


class RequirementMatcher:
    """Requirement matcher with logging for evaluating many candidates."""

    def __init__(self, enable_performance_monitoring: bool = False) -> None:
        """Initialize the requirement matcher.

        Args:
            enable_performance_monitoring: Record timing and memory metrics
        """
        self.logger = get_logger("RequirementMatcher")
        self.performance_monitor = PerformanceMonitor(enabled=enable_performance_monitoring)

    def matches(self, req: VersionReq, ver: Version) -> bool:
        """Check a version against a requirement, logging the decision.

        Args:
            req: Requirement to evaluate
            ver: Candidate version

        Returns:
            True if the version satisfies the requirement
        """
        result = requirement_matches(req, ver)
        if result:
            self.logger.debug(f"MATCH: {ver} satisfies {req}")
        else:
            self.logger.debug(f"NO MATCH: {ver} does not satisfy {req}")
        return result

    def matches_any(self, reqs: Iterable[VersionReq], ver: Version) -> bool:
        """Check a version against alternative requirements.

        Args:
            reqs: Requirements combined with OR
            ver: Candidate version

        Returns:
            True if any requirement is satisfied, False for no requirements
        """
        with self.performance_monitor.measure("matches_any"):
            return any(self.matches(req, ver) for req in reqs)

    @benchmark
    def filter_matching(self, req: VersionReq, versions: Iterable[Version]) -> List[Version]:
        """Select the candidates that satisfy a requirement.

        Args:
            req: Requirement to evaluate
            versions: Candidate versions

        Returns:
            Matching versions in the order they were given
        """
        with self.performance_monitor.measure("filter_matching"):
            matching = [ver for ver in versions if self.matches(req, ver)]

        self.logger.debug(f"{len(matching)} candidate(s) satisfy {req}")
        return matching

    def get_performance_summary(self) -> Dict[str, Any]:
        """Get performance summary from the matcher.

        Returns:
            Performance summary dictionary
        """
        return self.performance_monitor.get_summary()

    def print_performance_summary(self) -> None:
        """Print performance summary to console."""
        self.performance_monitor.print_summary()
