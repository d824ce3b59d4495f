"""Tests for spending sliders: percentage-based and legacy multiplier-based."""

import pytest

from nyctax.sdk import (
    FREQUENCIES,
    SLIDER_CONFIG,
    SLIDER_MAPPING,
    apply_slider_multiplier,
    compute_slider_amount,
    get_slider_for_item,
    percentage_to_slider,
    slider_to_multiplier,
    slider_to_percentage,
)


class TestPercentageSliders:
    """Tests for the percentage-of-income sliders."""

    def test_endpoints_match_config(self):
        for name, config in SLIDER_CONFIG.items():
            assert slider_to_percentage(name, 0) == pytest.approx(config.min_pct)
            assert slider_to_percentage(name, 100) == pytest.approx(config.max_pct)

    def test_midpoint_housing(self):
        assert slider_to_percentage("housing", 50) == pytest.approx(0.275)

    def test_unknown_category_percentage_is_zero(self):
        assert slider_to_percentage("yachts", 50) == 0

    def test_round_trip(self):
        for name in SLIDER_CONFIG:
            for value in range(0, 101, 5):
                pct = slider_to_percentage(name, value)
                assert percentage_to_slider(name, pct) == pytest.approx(value, abs=1e-9)

    def test_percentage_to_slider_clamps(self):
        assert percentage_to_slider("food", 0.0) == 0
        assert percentage_to_slider("food", 0.9) == 100

    def test_unknown_category_slider_is_midpoint(self):
        assert percentage_to_slider("yachts", 0.2) == 50

    def test_compute_slider_amount_housing(self):
        result = compute_slider_amount("housing", 50, 200000)
        assert result["percentage"] == pytest.approx(0.275)
        assert result["annual_amount"] == pytest.approx(55000)
        assert result["display_amount"] == pytest.approx(55000 / 12)
        assert result["display_freq"] == "monthly"

    def test_compute_slider_amount_weekly_display(self):
        result = compute_slider_amount("food", 0, 520000)
        assert result["annual_amount"] == pytest.approx(5200)
        assert result["display_amount"] == pytest.approx(100)
        assert result["display_freq"] == "weekly"

    def test_compute_slider_amount_unknown_category(self):
        result = compute_slider_amount("yachts", 50, 200000)
        assert result == {
            "percentage": 0,
            "annual_amount": 0,
            "display_amount": 0,
            "display_freq": "annual",
        }


class TestSliderMapping:
    """SLIDER_MAPPING integrity."""

    def test_every_category_has_config(self):
        assert set(SLIDER_MAPPING) == set(SLIDER_CONFIG)

    def test_all_items_reference_valid_frequencies(self):
        for name, items in SLIDER_MAPPING.items():
            for item in items:
                assert item.freq in FREQUENCIES, f"{name}: invalid freq {item.freq}"
                assert item.key, f"{name}: empty key"

    def test_no_item_mapped_to_two_sliders(self):
        seen = {}
        for name, items in SLIDER_MAPPING.items():
            for item in items:
                key = f"{item.freq}:{item.key}"
                assert key not in seen, f"{key} is mapped to both {seen.get(key)} and {name}"
                seen[key] = name


class TestLegacySliders:
    """Tests for the multiplier-based legacy helpers."""

    def test_center_is_identity(self):
        assert slider_to_multiplier(3) == pytest.approx(1.0)

    def test_min_below_half(self):
        assert 0 < slider_to_multiplier(1) < 0.5

    def test_max_between_2_5_and_4(self):
        assert 2.5 < slider_to_multiplier(5) < 4

    def test_monotonically_increasing(self):
        previous = 0
        for step in range(9):
            value = 1 + step * 0.5
            multiplier = slider_to_multiplier(value)
            assert multiplier > previous, f"{value} -> {multiplier} should be > {previous}"
            previous = multiplier

    def test_get_slider_for_item_finds_owner(self):
        assert get_slider_for_item("monthly", "rent") == "housing"
        assert get_slider_for_item("weekly", "dining") == "food"
        assert get_slider_for_item("weekly", "bars") == "nightlife"
        assert get_slider_for_item("annual", "vacations") == "travel"
        assert get_slider_for_item("monthly", "gym") == "health"
        assert get_slider_for_item("annual", "clothing") == "shopping"

    def test_get_slider_for_item_every_mapped_pair(self):
        for name, items in SLIDER_MAPPING.items():
            for freq, key in items:
                assert get_slider_for_item(freq, key) == name

    def test_get_slider_for_item_unmapped(self):
        assert get_slider_for_item("monthly", "streaming") is None
        assert get_slider_for_item("annual", "taxpro") is None
        assert get_slider_for_item("weekly", "transit") is None
        # Right key, wrong frequency
        assert get_slider_for_item("annual", "rent") is None

    def test_apply_at_identity(self):
        base = {"annual:vacations": 5000, "annual:flights": 2000}
        result = apply_slider_multiplier("travel", 1.0, base)
        assert result["scaled_values"] == {"annual:vacations": 5000, "annual:flights": 2000}
        assert result["annual_impact"] == 7000

    def test_apply_doubles_values(self):
        base = {"monthly:rent": 3000, "monthly:utilities": 150}
        result = apply_slider_multiplier("housing", 2.0, base)
        assert result["scaled_values"]["monthly:rent"] == 6000
        assert result["scaled_values"]["monthly:utilities"] == 300
        # (6000 + 300) * 12
        assert result["annual_impact"] == 75600

    def test_apply_skips_missing_base_values(self):
        base = {"annual:vacations": 5000}
        result = apply_slider_multiplier("travel", 1.5, base)
        assert result["scaled_values"] == {"annual:vacations": 7500}
        assert "annual:flights" not in result["scaled_values"]

    def test_apply_rounds_half_up(self):
        result = apply_slider_multiplier("food", 1.5, {"daily:coffee": 5, "weekly:dining": 333})
        assert result["scaled_values"] == {"weekly:dining": 500, "daily:coffee": 8}
        assert result["annual_impact"] == 500 * 52 + 8 * 365

    def test_apply_ignores_unmapped_items(self):
        base = {"monthly:rent": 3000, "monthly:streaming": 50}
        result = apply_slider_multiplier("housing", 1.0, base)
        assert "monthly:streaming" not in result["scaled_values"]

    def test_apply_unknown_category(self):
        result = apply_slider_multiplier("yachts", 2.0, {"monthly:rent": 3000})
        assert result == {"scaled_values": {}, "annual_impact": 0}
