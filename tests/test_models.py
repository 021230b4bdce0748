"""Tests for version and requirement value types."""

import pytest

from semver_gate.core.models import (
    BuildMetadata,
    Comparator,
    Op,
    Prerelease,
    Version,
    VersionReq,
)


class TestPrerelease:
    """Test prerelease equality and precedence."""

    def test_empty_prerelease(self):
        """Test the empty prerelease constant."""
        assert Prerelease.EMPTY.is_empty()
        assert Prerelease.EMPTY == Prerelease("")
        assert Prerelease.EMPTY.identifiers == ()

    def test_identifiers_split_on_dots(self):
        """Test that identifiers are split on dots."""
        assert Prerelease("alpha.1").identifiers == ("alpha", "1")
        assert Prerelease.from_identifiers("rc", 2) == Prerelease("rc.2")

    def test_empty_identifier_rejected(self):
        """Test that empty identifiers are rejected."""
        with pytest.raises(ValueError):
            Prerelease("alpha..1")
        with pytest.raises(ValueError):
            Prerelease(".alpha")

    def test_non_string_rejected(self):
        """Test that non-string text is rejected."""
        with pytest.raises(TypeError):
            Prerelease(1)

    def test_structural_equality(self):
        """Test that equality compares identifier text."""
        assert Prerelease("alpha") == Prerelease("alpha")
        assert Prerelease("alpha") != Prerelease("alpha.1")
        assert hash(Prerelease("beta.2")) == hash(Prerelease("beta.2"))

    def test_precedence_chain(self):
        """Test the ordering example from the semver precedence rules."""
        chain = [
            Prerelease("alpha"),
            Prerelease("alpha.1"),
            Prerelease("alpha.beta"),
            Prerelease("beta"),
            Prerelease("beta.2"),
            Prerelease("beta.11"),
            Prerelease("rc.1"),
            Prerelease.EMPTY,
        ]

        for lower, higher in zip(chain, chain[1:]):
            assert lower < higher
            assert higher > lower
            assert not higher < lower

        assert sorted(reversed(chain)) == chain

    def test_numeric_sorts_before_alphanumeric(self):
        """Test that numeric identifiers sort below alphanumeric ones."""
        assert Prerelease("1") < Prerelease("alpha")
        assert Prerelease("999") < Prerelease("0a")
        assert Prerelease("alpha.9") < Prerelease("alpha.x")

    def test_numeric_identifiers_compare_numerically(self):
        """Test that numeric identifiers are not compared as text."""
        assert Prerelease("2") < Prerelease("10")
        assert Prerelease("rc.9") < Prerelease("rc.10")

    def test_empty_sorts_after_non_empty(self):
        """Test that a release sorts after any prerelease."""
        assert Prerelease("zzz") < Prerelease.EMPTY
        assert Prerelease.EMPTY >= Prerelease.EMPTY
        assert not Prerelease.EMPTY < Prerelease.EMPTY

    def test_comparison_with_other_types(self):
        """Test that ordering against unrelated types is unsupported."""
        with pytest.raises(TypeError):
            Prerelease("alpha") < "beta"


class TestVersion:
    """Test the Version value type."""

    def test_defaults(self):
        """Test default prerelease and build metadata."""
        version = Version(1, 2, 3)
        assert version.pre is Prerelease.EMPTY
        assert version.build is BuildMetadata.EMPTY

    def test_string_metadata_normalized(self):
        """Test that textual pre/build values become value types."""
        version = Version(1, 2, 3, pre="alpha.1", build="build5")
        assert version.pre == Prerelease("alpha.1")
        assert version.build == BuildMetadata("build5")

    def test_build_excluded_from_equality(self):
        """Test that build metadata does not affect equality or hashing."""
        plain = Version(1, 2, 3)
        built = Version(1, 2, 3, build="build5")
        assert plain == built
        assert hash(plain) == hash(built)
        assert len({plain, built}) == 1

    def test_prerelease_included_in_equality(self):
        """Test that prerelease tags affect equality."""
        assert Version(1, 2, 3) != Version(1, 2, 3, pre="alpha")

    def test_negative_field_rejected(self):
        """Test that negative numbers are rejected."""
        with pytest.raises(ValueError):
            Version(1, -1, 0)

    def test_non_integer_field_rejected(self):
        """Test that non-integer fields are rejected."""
        with pytest.raises(TypeError):
            Version(1, "2", 0)
        with pytest.raises(TypeError):
            Version(True, 0, 0)

    def test_immutable(self):
        """Test that versions cannot be modified."""
        version = Version(1, 2, 3)
        with pytest.raises(AttributeError):
            version.major = 2

    def test_str(self):
        """Test string rendering."""
        assert str(Version(1, 2, 3)) == "1.2.3"
        assert str(Version(1, 2, 3, pre="alpha.1", build="build5")) == "1.2.3-alpha.1+build5"


class TestComparator:
    """Test the Comparator value type."""

    def test_unspecified_fields_default_to_none(self):
        """Test that minor and patch are unspecified by default."""
        comparator = Comparator(Op.CARET, 1)
        assert comparator.minor is None
        assert comparator.patch is None
        assert comparator.pre.is_empty()

    def test_zero_is_not_unspecified(self):
        """Test that zero and unspecified are distinct."""
        assert Comparator(Op.TILDE, 1, 0) != Comparator(Op.TILDE, 1)

    def test_patch_without_minor_rejected(self):
        """Test the patch-implies-minor invariant."""
        with pytest.raises(ValueError):
            Comparator(Op.EXACT, 1, None, 3)

    def test_operator_from_symbol(self):
        """Test that operator symbols are accepted."""
        assert Comparator(">=", 1, 2).op is Op.GREATER_EQ
        assert Comparator("^", 1).op is Op.CARET

    def test_unknown_operator_rejected(self):
        """Test that unknown operator symbols are rejected."""
        with pytest.raises(ValueError):
            Comparator("!=", 1)

    def test_negative_field_rejected(self):
        """Test that negative numbers are rejected."""
        with pytest.raises(ValueError):
            Comparator(Op.LESS, 1, 2, -3)

    def test_str(self):
        """Test string rendering for each operator family."""
        assert str(Comparator(Op.GREATER_EQ, 1, 2, 3, "alpha")) == ">=1.2.3-alpha"
        assert str(Comparator(Op.CARET, 0, 2)) == "^0.2"
        assert str(Comparator(Op.WILDCARD, 1)) == "1.*"
        assert str(Comparator(Op.WILDCARD, 1, 2)) == "1.2.*"


class TestVersionReq:
    """Test the VersionReq value type."""

    def test_comparators_frozen_to_tuple(self):
        """Test that comparator lists are stored as tuples."""
        req = VersionReq([Comparator(Op.GREATER_EQ, 1, 2), Comparator(Op.LESS, 2)])
        assert isinstance(req.comparators, tuple)
        assert len(req) == 2
        assert [cmp.op for cmp in req] == [Op.GREATER_EQ, Op.LESS]

    def test_non_comparator_rejected(self):
        """Test that non-comparator members are rejected."""
        with pytest.raises(TypeError):
            VersionReq([">=1.2"])

    def test_star(self):
        """Test the empty requirement."""
        assert len(VersionReq.STAR) == 0
        assert str(VersionReq.STAR) == "*"

    def test_str(self):
        """Test string rendering."""
        req = VersionReq([Comparator(Op.GREATER_EQ, 1, 2), Comparator(Op.LESS, 2)])
        assert str(req) == ">=1.2, <2"

    def test_matches_delegates_to_matcher(self):
        """Test the convenience matches method."""
        req = VersionReq([Comparator(Op.CARET, 1, 2)])
        assert req.matches(Version(1, 4, 0))
        assert not req.matches(Version(2, 0, 0))
        assert VersionReq.STAR.matches(Version(0, 0, 1))
        assert not VersionReq.STAR.matches(Version(1, 0, 0, pre="alpha"))
