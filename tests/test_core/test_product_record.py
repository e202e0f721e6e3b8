"""Tests for product record helpers."""

from catalog.core.product_record import (
    MaterialRow,
    SpecItem,
    compose_material,
    merge_specifications,
    parse_material,
    resolve_slug,
    slugify,
)


class TestSlug:
    def test_slugify(self):
        assert slugify("Drywall Screw 4mm") == "drywall-screw-4mm"
        assert slugify("  Soft-Close Hinge (35mm)! ") == "soft-close-hinge-35mm"

    def test_explicit_slug_wins(self):
        assert resolve_slug("Drywall Screw", "custom-slug") == "custom-slug"

    def test_blank_slug_is_derived(self):
        assert resolve_slug("Drywall Screw", "  ") == "drywall-screw"
        assert resolve_slug("Drywall Screw") == "drywall-screw"


class TestMaterial:
    def test_compose(self):
        rows = [
            MaterialRow(name="Stainless Steel", grades="304, 316"),
            MaterialRow(name="Brass"),
            MaterialRow(name="  ", grades="ignored"),
        ]

        assert compose_material(rows) == "Stainless Steel (Grade 304, 316) | Brass"

    def test_parse(self):
        rows = parse_material("Stainless Steel (Grade 304, 316) | Brass")

        assert rows == [
            MaterialRow(name="Stainless Steel", grades="304, 316"),
            MaterialRow(name="Brass"),
        ]

    def test_parse_empty_gives_one_blank_row(self):
        assert parse_material(None) == [MaterialRow()]
        assert parse_material("") == [MaterialRow()]


class TestSpecifications:
    def test_blank_values_dropped(self):
        specs = [SpecItem("Thread", "Coarse"), SpecItem("Drive", " ")]
        extras = [SpecItem("Standard", "DIN 7982"), SpecItem("Pack", "")]

        merged = merge_specifications(specs, extras)

        assert merged == [SpecItem("Thread", "Coarse"), SpecItem("Standard", "DIN 7982")]

    def test_without_extras(self):
        assert merge_specifications([SpecItem("Thread", "Fine")]) == [SpecItem("Thread", "Fine")]
