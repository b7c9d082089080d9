"""Tests for bassmix_headers.version module."""

import pytest

from bassmix_headers.errors import InvalidFormatError
from bassmix_headers.platforms import Platform
from bassmix_headers.version import (
    KNOWN_VERSIONS,
    LATEST,
    V2_3,
    V2_4,
    Version,
    coerce_version,
)


class TestParse:
    """Tests for Version.parse()."""

    def test_parse_two_components(self):
        """Test parsing a major.minor version."""
        assert Version.parse("2.4") == Version(2, 4)

    def test_parse_strips_whitespace(self):
        """Test surrounding whitespace is ignored."""
        assert Version.parse("  2.4\n") == V2_4

    def test_parse_four_components(self):
        """Test parsing a full build number."""
        assert Version.parse("2.4.17.1").components == (2, 4, 17, 1)

    @pytest.mark.parametrize(
        "text", ["", "2.", ".4", "2.4a", "v2.4", "2..4", "2.4.1.0.1", "two"]
    )
    def test_parse_invalid_raises(self, text):
        """Test malformed strings raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError, match="Invalid version format"):
            Version.parse(text)

    def test_parse_non_string_raises(self):
        """Test non-string input raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            Version.parse(24)  # type: ignore[arg-type]

    def test_round_trip_catalog(self):
        """Test parse(str(v)) == v for every catalog version."""
        for version in KNOWN_VERSIONS:
            assert Version.parse(str(version)) == version

    def test_constructor_rejects_negative(self):
        """Test negative components are rejected."""
        with pytest.raises(InvalidFormatError):
            Version(2, -1)

    @pytest.mark.parametrize("text", ["\u0662.\u0664", "2.\uff14", "\u00b2.4"])
    def test_parse_rejects_non_ascii_digits(self, text):
        """Test only ASCII digits are accepted."""
        with pytest.raises(InvalidFormatError):
            Version.parse(text)

    def test_constructor_rejects_bool(self):
        """Test bool components are not treated as integers."""
        with pytest.raises(InvalidFormatError):
            Version(True, 4)

    def test_constructor_rejects_empty(self):
        """Test a version needs at least one component."""
        with pytest.raises(InvalidFormatError):
            Version()


class TestOrdering:
    """Tests for version comparison."""

    def test_gte_equal(self):
        """Test a version is >= itself."""
        assert Version.parse("2.4").gte(Version.parse("2.4"))

    def test_numeric_not_lexicographic(self):
        """Test 2.4 < 2.10."""
        assert Version.parse("2.4").lt(Version.parse("2.10"))
        assert Version.parse("2.10") > Version.parse("2.4")

    def test_compare_values(self):
        """Test compare() returns -1, 0, 1."""
        assert V2_3.compare(V2_4) == -1
        assert V2_4.compare(V2_4) == 0
        assert V2_4.compare(V2_3) == 1

    def test_compare_accepts_string(self):
        """Test lt/gte accept version strings."""
        assert V2_3.lt("2.4")
        assert V2_4.gte("2.3")

    def test_compare_invalid_string_raises(self):
        """Test comparison against a malformed string raises."""
        with pytest.raises(InvalidFormatError):
            V2_4.lt("latest")

    def test_sorting(self):
        """Test versions sort numerically."""
        versions = [Version.parse(v) for v in ["2.10", "2.4", "1.9", "2.4.1"]]
        assert [str(v) for v in sorted(versions)] == ["1.9", "2.4", "2.4.1", "2.10"]

    def test_hashable(self):
        """Test equal versions hash equally."""
        assert len({Version(2, 4), Version.parse("2.4"), V2_4}) == 1


class TestCatalog:
    """Tests for the known release catalog."""

    def test_latest_is_newest(self):
        """Test LATEST is the newest known release."""
        assert LATEST == max(KNOWN_VERSIONS)
        assert LATEST == V2_4

    def test_known_versions_ascending(self):
        """Test KNOWN_VERSIONS is sorted."""
        assert list(KNOWN_VERSIONS) == sorted(KNOWN_VERSIONS)

    def test_is_known(self):
        """Test catalog membership."""
        assert V2_3.is_known()
        assert not Version(2, 5).is_known()

    def test_string_forms(self):
        """Test str/to_string/repr."""
        assert str(V2_4) == "2.4"
        assert V2_4.to_string() == "2.4"
        assert repr(V2_4) == "Version('2.4')"

    def test_archive_tag(self):
        """Test vendor archive tag drops the dots."""
        assert V2_4.archive_tag() == "24"
        assert V2_3.archive_tag() == "23"

    def test_bass_version_code(self):
        """Test BASSVERSION encoding."""
        assert V2_4.bass_version_code() == "0x204"
        assert V2_3.bass_version_code() == "0x203"

    def test_supported_on(self):
        """Test the Version-side compatibility helper."""
        assert V2_4.supported_on(Platform.LINUX)
        assert not V2_3.supported_on(Platform.LINUX)
        assert V2_3.supported_on(None)


class TestCoerceVersion:
    """Tests for coerce_version()."""

    def test_passes_version_through(self):
        assert coerce_version(V2_4) is V2_4

    def test_parses_string(self):
        assert coerce_version("2.3") == V2_3
