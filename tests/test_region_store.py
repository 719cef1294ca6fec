"""
Unit tests for region models and the region store.

Tests region validation, normalization helpers and the pure list
transformations behind commit, bulk strength changes and clear.
"""

import pytest

from SB_Libs.RegionEditLib.region_models import (
    Point,
    Region,
    SelectionDraft,
    validate_blur_strength,
)
from SB_Libs.RegionEditLib.region_store import (
    RegionStore,
    clear_regions,
    commit_region,
    set_all_blur_strength,
)


class TestRegion:
    """Tests for the Region data model."""

    def test_valid_region(self):
        """Should keep geometry and strength as given."""
        region = Region(x=10, y=10, width=40, height=50, blur_strength=5)

        assert region.box == (10, 10, 50, 60)
        assert not region.is_degenerate

    def test_negative_width_rejected(self):
        """Should reject negative width."""
        with pytest.raises(ValueError):
            Region(x=0, y=0, width=-1, height=5, blur_strength=5)

    def test_negative_height_rejected(self):
        """Should reject negative height."""
        with pytest.raises(ValueError):
            Region(x=0, y=0, width=5, height=-1, blur_strength=5)

    @pytest.mark.parametrize("strength", [0, 21, -3])
    def test_out_of_range_strength_rejected(self, strength):
        """Should reject strengths outside 1-20."""
        with pytest.raises(ValueError):
            Region(x=0, y=0, width=5, height=5, blur_strength=strength)

    def test_non_integer_strength_rejected(self):
        """Should reject float and bool strengths."""
        with pytest.raises(TypeError):
            validate_blur_strength(2.5)
        with pytest.raises(TypeError):
            validate_blur_strength(True)

    def test_zero_area_is_degenerate(self):
        """Zero width or height marks a region as degenerate."""
        assert Region(x=1, y=1, width=0, height=5, blur_strength=1).is_degenerate
        assert Region(x=1, y=1, width=5, height=0, blur_strength=1).is_degenerate

    def test_with_blur_strength_keeps_geometry(self):
        """Should only change the strength."""
        region = Region(x=1, y=2, width=3, height=4, blur_strength=5)
        updated = region.with_blur_strength(12)

        assert updated == Region(x=1, y=2, width=3, height=4, blur_strength=12)
        assert region.blur_strength == 5


class TestSelectionDraft:
    """Tests for drag normalization."""

    def test_normalizes_reverse_drag(self):
        """Dragging up-left should yield a top-left anchored box."""
        draft = SelectionDraft(start=Point(10, 10), current=Point(2, 4))

        assert draft.normalized_box() == (2, 4, 8, 6)


class TestRegionListFunctions:
    """Tests for the pure region list functions."""

    def setup_method(self):
        self.a = Region(x=0, y=0, width=10, height=10, blur_strength=5)
        self.b = Region(x=5, y=5, width=10, height=10, blur_strength=8)

    def test_commit_appends_in_order(self):
        """Commit should append and leave the input untouched."""
        original = (self.a,)
        result = commit_region(original, self.b)

        assert result == (self.a, self.b)
        assert original == (self.a,)

    def test_commit_rejects_non_region(self):
        """Commit should only accept Region objects."""
        with pytest.raises(TypeError):
            commit_region((), {"x": 0})

    def test_set_all_blur_strength(self):
        """Every region should get the new strength, geometry unchanged."""
        result = set_all_blur_strength((self.a, self.b), 12)

        assert [r.blur_strength for r in result] == [12, 12]
        assert [r.box for r in result] == [self.a.box, self.b.box]

    def test_set_all_blur_strength_validates(self):
        """Out-of-range strength should raise even for an empty list."""
        with pytest.raises(ValueError):
            set_all_blur_strength((), 25)

    def test_clear(self):
        assert clear_regions() == ()


class TestRegionStore:
    """Tests for the RegionStore holder."""

    def test_commit_and_iterate(self):
        """Store should expose committed regions in order."""
        store = RegionStore()
        first = Region(x=0, y=0, width=1, height=1, blur_strength=1)
        second = Region(x=1, y=1, width=1, height=1, blur_strength=2)

        store.commit(first)
        store.commit(second)

        assert len(store) == 2
        assert list(store) == [first, second]

    def test_replace_and_clear(self):
        """Replace should swap in a snapshot; clear should empty the store."""
        region = Region(x=0, y=0, width=1, height=1, blur_strength=1)
        store = RegionStore()

        store.replace([region])
        assert store.regions == (region,)

        store.clear()
        assert store.regions == ()
