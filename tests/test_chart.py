"""Unit tests for the day filter and chart series derivations."""

from datetime import date, timedelta

from fitracker.client.chart import CHART_WINDOW, build_chart_series, filter_day
from fitracker.client.formatting import format_date_label


def _days(count, start=date(2024, 1, 1)):
    return [(start + timedelta(days=i)).isoformat() for i in range(count)]


class TestFilterDay:

    def test_only_matching_date(self, make_entry):
        entries = [make_entry("2024-01-01", food="a"), make_entry("2024-01-02", food="b")]

        result = filter_day(entries, "2024-01-01")

        assert result == [entries[0]]

    def test_preserves_list_order(self, make_entry):
        entries = [
            make_entry("2024-01-02", food="late"),
            make_entry("2024-01-01", food="x"),
            make_entry("2024-01-02", food="early"),
        ]

        result = filter_day(entries, "2024-01-02")

        assert [e["food"] for e in result] == ["late", "early"]

    def test_no_match(self, make_entry):
        assert filter_day([make_entry("2024-01-01")], "2024-02-01") == []


class TestChartSeries:

    def test_counts_non_blank_food_and_exercise(self, make_entry):
        entries = [
            make_entry("2024-01-02", food="eggs", exercise="run"),
            make_entry("2024-01-02", food="   ", exercise="legs"),
            make_entry("2024-01-01", food="oats", exercise=""),
        ]

        points = build_chart_series(entries)

        assert [(p.date, p.foodLogs, p.exerciseLogs) for p in points] == [
            ("2024-01-02", 1, 2),
            ("2024-01-01", 1, 0),
        ]

    def test_points_labelled_with_display_date(self, make_entry):
        points = build_chart_series([make_entry("2024-01-05", food="x")])

        assert points[0].day == "1/5/2024"
        assert points[0].to_dict() == {
            "date": "2024-01-05", "day": "1/5/2024", "foodLogs": 1, "exerciseLogs": 0,
        }

    def test_keeps_first_encounter_order(self, make_entry):
        entries = [
            make_entry("2024-01-03"),
            make_entry("2024-01-01"),
            make_entry("2024-01-03"),
            make_entry("2024-01-02"),
        ]

        points = build_chart_series(entries)

        assert [p.date for p in points] == ["2024-01-03", "2024-01-01", "2024-01-02"]

    def test_twenty_dates_keeps_last_fourteen_encountered(self, make_entry):
        days = _days(20)
        # Newest first, the way the server lists them
        entries = [make_entry(d, food="meal") for d in reversed(days)]

        points = build_chart_series(entries)

        assert len(points) == CHART_WINDOW == 14
        # End of the scan is the oldest dates, not the 14 most recent
        assert [p.date for p in points] == list(reversed(days))[-14:]
        assert points[-1].date == "2024-01-01"
        assert "2024-01-20" not in {p.date for p in points}

    def test_encounter_order_wins_over_calendar_order(self, make_entry):
        days = _days(16)
        shuffled = days[8:] + days[:8]
        entries = [make_entry(d) for d in shuffled]

        points = build_chart_series(entries)

        assert [p.date for p in points] == shuffled[-14:]

    def test_fewer_than_window_returns_all(self, make_entry):
        entries = [make_entry(d) for d in _days(3)]

        assert len(build_chart_series(entries)) == 3

    def test_empty(self):
        assert build_chart_series([]) == []


class TestFormatDateLabel:

    def test_us_format_without_padding(self):
        assert format_date_label("2024-01-05") == "1/5/2024"
        assert format_date_label("2023-12-25") == "12/25/2023"

    def test_invalid(self):
        assert format_date_label("not a date") == "Invalid Date"
        assert format_date_label(None) == "Invalid Date"
