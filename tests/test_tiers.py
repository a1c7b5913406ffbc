"""Tests for tier and opacity classifiers"""

import math

import pytest

from timevalue.tiers import (
    OPACITY_MAX,
    OPACITY_MIN,
    get_currency_opacity,
    get_currency_tier,
    get_tier,
    get_time_opacity,
    get_time_tier,
)


class TestCurrencyTier:
    """Test currency tier bands"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, "tier-1"),
            (9.99, "tier-1"),
            (10, "tier-2"),
            (99, "tier-2"),
            (100, "tier-3"),
            (999, "tier-3"),
            (1000, "tier-4"),
            (9999, "tier-4"),
            (10000, "tier-5"),
            (250000, "tier-5"),
        ],
    )
    def test_bands_at_100k(self, salary, value, expected):
        assert get_currency_tier(value, salary) == expected

    def test_normalised_to_salary(self):
        # 500 on a 50k salary reads like 1000 on 100k
        assert get_currency_tier(500, 50000) == "tier-4"

    def test_monotonic_in_value(self, salary):
        values = [0.5 * 1.3 ** i for i in range(60)]
        tiers = [int(get_currency_tier(v, salary).split("-")[1]) for v in values]
        assert tiers == sorted(tiers)
        assert set(tiers) == {1, 2, 3, 4, 5}

    def test_zero_salary_not_guarded(self):
        with pytest.raises(ZeroDivisionError):
            get_currency_tier(100, 0)

    def test_legacy_alias(self):
        assert get_tier is get_currency_tier


class TestTimeTier:
    """Test time tier bands"""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "tier-1"),
            (44.9, "tier-1"),
            (45, "tier-2"),
            (2699, "tier-2"),
            (2700, "tier-3"),
            (21599, "tier-3"),
            (21600, "tier-4"),
            (115199, "tier-4"),
            (115200, "tier-5"),
            (7_200_000, "tier-5"),
        ],
    )
    def test_bands(self, seconds, expected):
        assert get_time_tier(seconds) == expected


class TestCurrencyOpacity:
    """Test currency fade"""

    def test_mid_range_is_opaque(self, salary):
        assert get_currency_opacity(1000, salary) == OPACITY_MAX
        assert get_currency_opacity(5000, salary) == OPACITY_MAX

    def test_high_fade_reaches_floor_at_twice_salary(self, salary):
        assert get_currency_opacity(200000, salary) == pytest.approx(OPACITY_MIN)
        assert get_currency_opacity(10_000_000, salary) == OPACITY_MIN

    def test_high_fade_is_logarithmic(self, salary):
        midpoint = math.sqrt(5000 * 200000)
        assert get_currency_opacity(midpoint, salary) == pytest.approx(0.5)

    def test_low_fade(self, salary):
        assert get_currency_opacity(3, salary) == pytest.approx(0.5)
        assert get_currency_opacity(1, salary) == OPACITY_MIN
        assert get_currency_opacity(0.01, salary) == OPACITY_MIN

    def test_bounded_and_unimodal(self, salary):
        values = [0.01 * 1.5 ** i for i in range(50)]
        opacities = [get_currency_opacity(v, salary) for v in values]
        assert all(OPACITY_MIN <= o <= OPACITY_MAX for o in opacities)
        peak = opacities.index(max(opacities))
        rising, falling = opacities[: peak + 1], opacities[peak:]
        assert rising == sorted(rising)
        assert falling == sorted(falling, reverse=True)

    @pytest.mark.parametrize("value,salary", [(0, 100000), (-5, 100000), (100, 0)])
    def test_precondition(self, value, salary):
        with pytest.raises(ValueError, match="positive"):
            get_currency_opacity(value, salary)


class TestTimeOpacity:
    """Test time fade"""

    def test_mid_range_is_opaque(self):
        assert get_time_opacity(60) == OPACITY_MAX
        assert get_time_opacity(576000) == OPACITY_MAX

    def test_low_fade(self):
        assert get_time_opacity(1) == OPACITY_MIN
        assert get_time_opacity(30.5) == pytest.approx(0.5)

    def test_high_fade(self):
        midpoint = math.sqrt(576000 * 7_200_000)
        assert get_time_opacity(midpoint) == pytest.approx(0.5)
        assert get_time_opacity(7_200_000) == pytest.approx(OPACITY_MIN)
        assert get_time_opacity(90_000_000) == OPACITY_MIN

    def test_zero_and_negative_hit_floor(self):
        assert get_time_opacity(0) == OPACITY_MIN
        assert get_time_opacity(-10) == OPACITY_MIN

    def test_bounded_and_unimodal(self):
        values = [0.5 * 1.6 ** i for i in range(45)]
        opacities = [get_time_opacity(s) for s in values]
        assert all(OPACITY_MIN <= o <= OPACITY_MAX for o in opacities)
        peak = opacities.index(max(opacities))
        assert opacities[: peak + 1] == sorted(opacities[: peak + 1])
        assert opacities[peak:] == sorted(opacities[peak:], reverse=True)
