"""Tests for taxonomy classification."""

import pytest

from catalog.core.taxonomy import Taxonomy, TaxonomyMismatchError, classify


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "category, sub_category",
        [
            ("Fittings", ""),
            ("Furniture", "Soft-Close Hinges"),
            ("Drawer Channels", None),
            ("", "Door Handles"),
            ("Locks & Latches", ""),
            ("Cabinet HARDWARE", "Misc"),
        ],
    )
    def test_fitting_keywords(self, category, sub_category):
        assert classify(category, sub_category) is Taxonomy.FITTING

    def test_keyword_match_is_case_insensitive(self):
        assert classify("HINGE", "") is Taxonomy.FITTING
        assert classify("", "hInGe") is Taxonomy.FITTING

    def test_keyword_inside_word_matches(self):
        """Substring match: 'Padlocks' contains 'lock'."""
        assert classify("Padlocks", "") is Taxonomy.FITTING

    def test_everything_else_is_fastener(self):
        assert classify("Screws", "Drywall Screws") is Taxonomy.FASTENER
        assert classify("Bolts", "Hex Bolts") is Taxonomy.FASTENER

    def test_empty_names_are_fastener(self):
        assert classify("", "") is Taxonomy.FASTENER
        assert classify(None, None) is Taxonomy.FASTENER


class TestTaxonomyMismatchError:
    def test_carries_both_taxonomies(self):
        error = TaxonomyMismatchError(expected=Taxonomy.FASTENER, actual=Taxonomy.FITTING)

        assert error.expected is Taxonomy.FASTENER
        assert error.actual is Taxonomy.FITTING
        assert "FITTING" in str(error)
        assert isinstance(error, ValueError)
