"""Tests for domain/model/selection.py."""

import pytest

from featurelines.domain.model.selection import FeatureSelection
from tests.factories import make_feature, make_selection, make_uri


class TestFeatureSelectionOf:
    """Tests for merging identifiers into a selection."""

    def test_empty(self) -> None:
        selection = FeatureSelection.of([])
        assert len(selection) == 0
        assert selection.uris == ()

    def test_merges_lines_per_uri(self) -> None:
        selection = make_selection(
            make_feature("/a.feature", 3),
            make_feature("/a.feature", 1, 3),
        )
        assert len(selection) == 1
        assert selection.features[0].lines == (1, 3)

    def test_lines_narrow_bare_feature(self) -> None:
        selection = make_selection(
            make_feature("/a.feature"),
            make_feature("/a.feature", 4),
        )
        assert selection.features[0].lines == (4,)

    def test_bare_feature_stays_bare(self) -> None:
        selection = make_selection(make_feature("/a.feature"), make_feature("/a.feature"))
        assert selection.features[0].has_lines is False

    def test_ordered_by_uri(self) -> None:
        selection = make_selection(make_feature("/b.feature"), make_feature("/a.feature"))
        assert selection.uris == (make_uri("/a.feature"), make_uri("/b.feature"))


class TestFeatureSelectionFailFirst:
    """Tests for FAIL-FIRST validation in FeatureSelection."""

    def test_duplicate_uri_raises(self) -> None:
        with pytest.raises(ValueError, match="unique uris"):
            FeatureSelection(features=(make_feature("/a.feature", 1), make_feature("/a.feature", 2)))

    def test_list_coerced_to_tuple(self) -> None:
        selection = FeatureSelection(features=[make_feature("/a.feature", 1)])  # type: ignore[arg-type]
        assert isinstance(selection.features, tuple)
        assert hash(selection) == hash(make_selection(make_feature("/a.feature", 1)))

    def test_unordered_raises(self) -> None:
        with pytest.raises(ValueError, match="ordered by uri"):
            FeatureSelection(features=(make_feature("/b.feature"), make_feature("/a.feature")))


class TestFeatureSelectionAccess:
    """Tests for selection accessors."""

    def test_line_filters_only_features_with_lines(self) -> None:
        selection = make_selection(make_feature("/a.feature", 2), make_feature("/b.feature"))
        assert dict(selection.line_filters) == {make_uri("/a.feature"): (2,)}

    def test_line_filters_read_only(self) -> None:
        selection = make_selection(make_feature("/a.feature", 2))
        with pytest.raises(TypeError):
            selection.line_filters[make_uri("/b.feature")] = (1,)  # type: ignore[index]

    def test_contains_by_uri(self) -> None:
        selection = make_selection(make_feature("/a.feature", 2))
        assert make_uri("/a.feature") in selection
        assert make_uri("/b.feature") not in selection

    def test_iterates_features(self) -> None:
        features = (make_feature("/a.feature", 1), make_feature("/b.feature"))
        assert tuple(make_selection(*features)) == features

    def test_str_one_identifier_per_line(self) -> None:
        selection = make_selection(make_feature("/b.feature"), make_feature("/a.feature", 2, 1))
        assert str(selection) == "file:///a.feature:1:2\nfile:///b.feature"
