"""Tests for domain/model/feature_uri.py."""

import pytest

from featurelines.domain.model.feature_uri import FeatureUri


class TestFeatureUriCreation:
    """Tests for valid FeatureUri creation."""

    def test_fields(self) -> None:
        uri = FeatureUri(scheme="file", scheme_specific_part="///a/b.feature")
        assert uri.scheme == "file"
        assert uri.scheme_specific_part == "///a/b.feature"

    def test_scheme_lower_cased(self) -> None:
        uri = FeatureUri(scheme="CLASSPATH", scheme_specific_part="a.feature")
        assert uri.scheme == "classpath"
        assert uri == FeatureUri(scheme="classpath", scheme_specific_part="a.feature")

    def test_from_string_splits_at_first_colon(self) -> None:
        uri = FeatureUri.from_string("file:///a/b.feature")
        assert uri.scheme == "file"
        assert uri.scheme_specific_part == "///a/b.feature"

    def test_is_frozen(self) -> None:
        uri = FeatureUri(scheme="file", scheme_specific_part="///a.feature")
        with pytest.raises(AttributeError):
            uri.scheme = "http"  # type: ignore[misc]

    def test_hashable(self) -> None:
        a = FeatureUri(scheme="file", scheme_specific_part="///a.feature")
        b = FeatureUri(scheme="file", scheme_specific_part="///a.feature")
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_ordering(self) -> None:
        a = FeatureUri(scheme="file", scheme_specific_part="///a.feature")
        b = FeatureUri(scheme="file", scheme_specific_part="///b.feature")
        assert sorted([b, a]) == [a, b]


class TestFeatureUriFailFirst:
    """Tests for FAIL-FIRST validation in FeatureUri."""

    def test_empty_scheme_raises(self) -> None:
        with pytest.raises(ValueError, match="scheme must be non-empty"):
            FeatureUri(scheme="", scheme_specific_part="a.feature")

    def test_empty_scheme_specific_part_raises(self) -> None:
        with pytest.raises(ValueError, match="scheme_specific_part must be non-empty"):
            FeatureUri(scheme="file", scheme_specific_part="")

    def test_from_string_without_colon_raises(self) -> None:
        with pytest.raises(ValueError, match="must contain a scheme"):
            FeatureUri.from_string("a.feature")


class TestFeatureUriBehavior:
    """Tests for FeatureUri helpers."""

    def test_str_format(self) -> None:
        uri = FeatureUri(scheme="classpath", scheme_specific_part="com/example/a.feature")
        assert str(uri) == "classpath:com/example/a.feature"

    def test_str_round_trips_through_from_string(self) -> None:
        uri = FeatureUri(scheme="file", scheme_specific_part="///a/b.feature")
        assert FeatureUri.from_string(str(uri)) == uri

    def test_is_feature(self) -> None:
        uri = FeatureUri(scheme="file", scheme_specific_part="///a/b.feature")
        assert uri.is_feature(".feature") is True
        assert uri.is_feature(".story") is False


class TestFeatureUriNormalization:
    """Tests for equivalent spellings collapsing at construction."""

    def test_file_single_slash(self) -> None:
        uri = FeatureUri(scheme="file", scheme_specific_part="/x.feature")
        assert uri == FeatureUri(scheme="file", scheme_specific_part="///x.feature")
        assert str(uri) == "file:///x.feature"

    def test_classpath_leading_slash(self) -> None:
        uri = FeatureUri(scheme="classpath", scheme_specific_part="/com/x.feature")
        assert str(uri) == "classpath:com/x.feature"

    def test_classpath_only_slashes_raises(self) -> None:
        with pytest.raises(ValueError, match="scheme_specific_part must be non-empty"):
            FeatureUri(scheme="classpath", scheme_specific_part="/")

    def test_str_reads_back_equal(self) -> None:
        uri = FeatureUri(scheme="FILE", scheme_specific_part="/a/b.feature")
        assert FeatureUri.from_string(str(uri)) == uri
