"""Tests for the reference tables"""

from timevalue.tables import (
    DURATIONS,
    FREQUENCIES,
    WORK_DAYS_PER_YEAR,
    WORK_HOURS_PER_YEAR,
    FrequencyItem,
)


class TestConstants:
    """Test public work-calendar constants"""

    def test_work_hours_per_year(self):
        assert WORK_HOURS_PER_YEAR == 2000

    def test_work_days_per_year(self):
        assert WORK_DAYS_PER_YEAR == 250


class TestFrequencies:
    """Test the frequency columns"""

    def test_labels_in_order(self):
        assert [f.label for f in FREQUENCIES] == ["50/day", "5/day", "Daily", "Weekly", "Monthly", "Yearly"]

    def test_multipliers(self):
        assert [f.multiplier for f in FREQUENCIES] == [12500, 1250, 250, 50, 12, 1]

    def test_most_to_least_frequent(self):
        multipliers = [f.multiplier for f in FREQUENCIES]
        assert multipliers == sorted(multipliers, reverse=True)

    def test_items_are_immutable_tuples(self):
        assert isinstance(FREQUENCIES, tuple)
        assert FREQUENCIES[2] == FrequencyItem("Daily", 250)


class TestDurations:
    """Test the duration rows"""

    def test_nine_entries_shortest_first(self):
        seconds = [d.seconds for d in DURATIONS]
        assert len(seconds) == 9
        assert seconds == sorted(seconds)

    def test_seconds(self):
        assert [d.seconds for d in DURATIONS] == [1, 5, 30, 60, 300, 1800, 3600, 14400, 28800]

    def test_day_is_eight_hours(self):
        assert DURATIONS[-1].label == "1 day"
        assert DURATIONS[-1].seconds == 8 * 3600
