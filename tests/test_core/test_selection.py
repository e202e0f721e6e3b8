"""Tests for the storefront selection cascade."""

import pytest

from catalog.core.selection import (
    Selection,
    SelectionCascade,
    diameter_sort_key,
    explode_lengths,
    length_sort_key,
)
from catalog.core.variants import VariantRow


@pytest.fixture
def rows() -> list[VariantRow]:
    return [
        VariantRow(diameter="M6", length="20", finish="Zinc", image="zinc.jpg"),
        VariantRow(diameter="M4", length="10,12,16", finish="Zinc"),
        VariantRow(diameter="M4", length="8", finish="Black", image="black.jpg"),
        VariantRow(diameter="M4", length="12", finish="Brass"),
        VariantRow(diameter="M10", length="30", finish=""),
    ]


@pytest.fixture
def cascade(rows: list[VariantRow]) -> SelectionCascade:
    return SelectionCascade(rows, default_images=["a.jpg", "b.jpg"])


class TestSortKeys:
    def test_diameters_sort_by_first_number(self):
        values = ["M10", "Standard", "M4", "6mm", "M4.5"]

        assert sorted(values, key=diameter_sort_key) == ["M4", "M4.5", "6mm", "M10", "Standard"]

    def test_lengths_sort_by_leading_integer(self):
        values = ["16", "8", "long", "100", "12"]

        assert sorted(values, key=length_sort_key) == ["8", "12", "16", "100", "long"]

    def test_explode_lengths(self):
        assert explode_lengths("10, 12,16") == ["10", "12", "16"]
        assert explode_lengths("10,,12") == ["10", "12"]
        assert explode_lengths("20") == ["20"]
        assert explode_lengths("") == []


class TestOptions:
    def test_unique_diameters_numeric_order(self, cascade: SelectionCascade):
        assert cascade.unique_diameters() == ["M4", "M6", "M10"]

    def test_available_lengths_explodes_and_sorts(self, cascade: SelectionCascade):
        assert cascade.available_lengths("M4") == ["8", "10", "12", "16"]

    def test_available_lengths_without_diameter(self, cascade: SelectionCascade):
        assert cascade.available_lengths("") == []

    def test_available_finishes_substring_match(self, cascade: SelectionCascade):
        assert cascade.available_finishes("M4", "12") == ["Zinc", "Brass"]
        assert cascade.available_finishes("M4", "8") == ["Black"]

    def test_unnamed_finish_not_offered(self, cascade: SelectionCascade):
        assert cascade.available_finishes("M10", "30") == []

    def test_empty_product(self):
        cascade = SelectionCascade([])

        assert cascade.unique_diameters() == []
        assert cascade.initial_selection() == Selection()
        assert cascade.available_finishes("", "") == []
        assert cascade.is_orderable(Selection()) is False


class TestTransitions:
    def test_initial_selection(self, cascade: SelectionCascade):
        assert cascade.initial_selection() == Selection(diameter="M4", length="8")

    def test_diameter_change_reconciles_length(self, cascade: SelectionCascade):
        selection = cascade.select_length(cascade.initial_selection(), "12")

        selection = cascade.select_diameter(selection, "M6")

        assert selection.length == "20"

    def test_length_kept_when_still_offered(self):
        cascade = SelectionCascade(
            [VariantRow(diameter="4", length="10"), VariantRow(diameter="5", length="10,20")]
        )
        selection = cascade.select_diameter(Selection(diameter="4", length="10"), "5")

        assert selection.length == "10"

    def test_unknown_length_falls_back_to_first(self, cascade: SelectionCascade):
        selection = cascade.select_length(cascade.initial_selection(), "999")

        assert selection.length == "8"

    def test_finish_cleared_when_no_longer_offered(self, cascade: SelectionCascade):
        selection = cascade.select_finish(cascade.initial_selection(), "Black")
        assert selection.image_override == "black.jpg"

        selection = cascade.select_length(selection, "12")

        assert selection.finish == ""
        assert selection.image_override is None

    def test_finish_kept_when_still_offered(self, cascade: SelectionCascade):
        selection = cascade.select_length(cascade.initial_selection(), "12")
        selection = cascade.select_finish(selection, "Zinc")

        selection = cascade.select_length(selection, "16")

        assert selection.finish == "Zinc"

    def test_cascade_stays_consistent(self, cascade: SelectionCascade, rows: list[VariantRow]):
        """After any sequence of choices the selection is one the options allow."""
        selection = cascade.initial_selection()
        for diameter in cascade.unique_diameters():
            selection = cascade.select_diameter(selection, diameter)
            lengths = cascade.available_lengths(diameter)
            assert selection.length in lengths

            for finish in cascade.available_finishes(selection.diameter, selection.length):
                selection = cascade.select_finish(selection, finish)
                assert cascade.matching_rows(selection)


class TestGallery:
    def test_finish_image_goes_first(self, cascade: SelectionCascade):
        selection = cascade.select_image(cascade.initial_selection(), 1)
        selection = cascade.select_finish(selection, "Black")

        assert cascade.display_images(selection) == ["black.jpg", "a.jpg", "b.jpg"]
        assert selection.image_index == 0
        assert cascade.current_image(selection) == "black.jpg"

    def test_finish_without_image_drops_override(self, cascade: SelectionCascade):
        selection = cascade.select_finish(cascade.initial_selection(), "Black")
        selection = cascade.select_length(selection, "12")

        selection = cascade.select_finish(selection, "Brass")

        assert selection.image_override is None
        assert cascade.display_images(selection) == ["a.jpg", "b.jpg"]

    def test_stored_map_wins_over_row_image(self, rows: list[VariantRow]):
        cascade = SelectionCascade(rows, finish_images={"Zinc": "stored-zinc.jpg"})

        assert cascade.finish_images["Zinc"] == "stored-zinc.jpg"
        assert cascade.finish_images["Black"] == "black.jpg"

    def test_select_image_is_clamped(self, cascade: SelectionCascade):
        selection = cascade.initial_selection()

        assert cascade.select_image(selection, 9).image_index == 1
        assert cascade.select_image(selection, -3).image_index == 0

    def test_no_images(self):
        cascade = SelectionCascade([VariantRow(diameter="4")])

        assert cascade.current_image(cascade.initial_selection()) is None


class TestOrderable:
    def test_requires_finish_when_offered(self, cascade: SelectionCascade):
        selection = cascade.initial_selection()

        assert cascade.is_orderable(selection) is False
        assert cascade.is_orderable(cascade.select_finish(selection, "Black")) is True

    def test_row_without_finish(self, cascade: SelectionCascade):
        selection = cascade.select_diameter(cascade.initial_selection(), "M10")

        assert cascade.is_orderable(selection) is True
        assert cascade.matching_rows(selection) == [VariantRow(diameter="M10", length="30")]

    def test_length_prefix_does_not_resolve_row(self):
        """A selected length of 12 never resolves to a 120 row."""
        cascade = SelectionCascade(
            [
                VariantRow(diameter="M4", length="12", finish="Zinc"),
                VariantRow(diameter="M4", length="120", finish="Black"),
            ]
        )
        selection = Selection(diameter="M4", length="12", finish="Black")

        assert cascade.matching_rows(selection) == []
        assert cascade.is_orderable(selection) is False

        zinc = Selection(diameter="M4", length="12", finish="Zinc")
        assert cascade.matching_rows(zinc) == [VariantRow(diameter="M4", length="12", finish="Zinc")]
        assert cascade.is_orderable(zinc) is True

    def test_comma_joined_length_resolves_row(self, cascade: SelectionCascade):
        selection = Selection(diameter="M4", length="16", finish="Zinc")

        assert cascade.matching_rows(selection) == [
            VariantRow(diameter="M4", length="10,12,16", finish="Zinc")
        ]
