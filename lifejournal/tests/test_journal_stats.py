from datetime import date, datetime, time, timedelta, timezone

import pytest

from lifejournal.domains.journal.services import stats_service as stats

pytestmark = pytest.mark.unit

TODAY = date(2026, 10, 19)
NOW = datetime(2026, 10, 19, 12, 0)


def _entry(days_ago: int, hour: int = 9, **fields) -> dict:
    moment = datetime.combine(TODAY - timedelta(days=days_ago), time(hour))
    entry = {"date": moment.isoformat(), "mood": 7, "motivation": 7, "energy": 7, "goalAchieved": False}
    entry.update(fields)
    return entry


def test_parse_entry_date_accepts_utc_suffix():
    parsed = stats.parse_entry_date("2026-10-19T12:00:00.000Z")
    assert parsed == datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def test_parse_entry_date_rejects_garbage():
    assert stats.parse_entry_date("yesterday-ish") is None
    assert stats.parse_entry_date("") is None
    assert stats.parse_entry_date(None) is None


def test_streak_zero_without_entries():
    assert stats.compute_streak([], TODAY) == 0


def test_streak_single_entry_today():
    assert stats.compute_streak([_entry(0)], TODAY) == 1


def test_streak_consecutive_days():
    entries = [_entry(0), _entry(1), _entry(2)]
    assert stats.compute_streak(entries, TODAY) == 3


def test_streak_today_and_two_days_ago():
    assert stats.compute_streak([_entry(0), _entry(2)], TODAY) == 1


def test_streak_three_entries_today():
    entries = [_entry(0, hour=8), _entry(0, hour=12), _entry(0, hour=20)]
    assert stats.compute_streak(entries, TODAY) == 1


def test_streak_gap_at_day_three_keeps_three():
    entries = [_entry(0), _entry(1), _entry(2), _entry(4)]
    assert stats.compute_streak(entries, TODAY) == 3


def test_streak_counts_each_day_once():
    entries = [_entry(0, hour=8), _entry(0, hour=20), _entry(1, hour=9), _entry(1, hour=22)]
    assert stats.compute_streak(entries, TODAY) == 2


def test_streak_zero_when_latest_entry_is_yesterday():
    entries = [_entry(1), _entry(2), _entry(3)]
    assert stats.compute_streak(entries, TODAY) == 0


def test_streak_stops_at_gap():
    entries = [_entry(0), _entry(1), _entry(3), _entry(4)]
    assert stats.compute_streak(entries, TODAY) == 2


def test_streak_ignores_future_entries():
    entries = [_entry(-2), _entry(0), _entry(1)]
    assert stats.compute_streak(entries, TODAY) == 2


def test_streak_order_of_input_does_not_matter():
    entries = [_entry(2), _entry(0), _entry(1)]
    assert stats.compute_streak(entries, TODAY) == 3


def test_this_week_count_window():
    entries = [_entry(days) for days in range(9)]
    # Day 7 at 09:00 falls just before now - 7 days (12:00).
    assert stats.this_week_count(entries, NOW) == 7


def test_this_week_count_excludes_future():
    assert stats.this_week_count([_entry(-1)], NOW) == 0


def test_mean_of_scores():
    entries = [_entry(0, mood=4), _entry(1, mood=6), _entry(2, mood=8)]
    assert stats.mean_of(entries, "mood") == pytest.approx(6.0)


def test_mean_of_empty_is_zero():
    assert stats.mean_of([], "mood") == 0.0


def test_goal_achievement_rate():
    entries = [_entry(i, goalAchieved=i < 2) for i in range(5)]
    assert stats.goals_achieved(entries) == 2
    assert stats.goal_achievement_rate(entries) == pytest.approx(0.4)


def test_goal_achievement_rate_empty():
    assert stats.goal_achievement_rate([]) == 0.0


def test_tag_frequency_and_ranking():
    entries = [
        _entry(0, lifeAreas=["health", "career"]),
        _entry(1, lifeAreas=["health"]),
        _entry(2, lifeAreas=["family", "health", "career"]),
    ]
    frequency = stats.tag_frequency(entries, "lifeAreas")
    assert frequency == {"health": 3, "career": 2, "family": 1}
    assert stats.top_tags(frequency, 2) == [("health", 3), ("career", 2)]


def test_tag_frequency_tolerates_missing_lists():
    assert stats.tag_frequency([_entry(0), _entry(1, emotions=None)], "emotions") == {}


def test_mood_series_is_oldest_first():
    entries = [_entry(0, mood=9), _entry(2, mood=3), _entry(1, mood=5)]
    series = stats.mood_series(entries)
    assert [point["mood"] for point in series] == [3, 5, 9]
    assert series[-1]["date"] == TODAY.isoformat()


def test_monthly_goal_achievement_buckets():
    entries = [
        {"date": "2026-09-10T10:00:00", "goalAchieved": True},
        {"date": "2026-09-20T10:00:00", "goalAchieved": False},
        {"date": "2026-10-02T10:00:00", "goalAchieved": True},
    ]
    assert stats.monthly_goal_achievement(entries) == [
        {"month": "2026-09", "achieved": 1, "total": 2, "percentage": 50.0},
        {"month": "2026-10", "achieved": 1, "total": 1, "percentage": 100.0},
    ]


def test_life_balance_scores():
    entries = [
        _entry(0, mood=8, lifeAreas=["health"]),
        _entry(1, mood=6, lifeAreas=["health", "career"]),
    ]
    balance = {row["area"]: row["score"] for row in stats.life_balance(entries)}
    assert balance["health"] == pytest.approx(7.0)
    assert balance["career"] == pytest.approx(6.0)
    assert balance["finance"] == 0.0
    assert "family" not in balance


def test_summarize_empty():
    summary = stats.summarize([], NOW)
    assert summary["totalEntries"] == 0
    assert summary["thisWeekEntries"] == 0
    assert summary["averageMood"] == 0.0
    assert summary["currentStreak"] == 0
    assert summary["goalAchievementRate"] == 0.0
    assert summary["mostActiveArea"] is None
    assert summary["dominantEmotion"] is None
    assert summary["moodSeries"] == []


def test_summarize_counts_undated_entries_in_total_only():
    entries = [_entry(0, emotions=["calm"]), {"date": "not a date", "mood": 3}]
    summary = stats.summarize(entries, NOW)
    assert summary["totalEntries"] == 2
    assert summary["thisWeekEntries"] == 1
    assert summary["averageMood"] == pytest.approx(5.0)
    assert summary["dominantEmotion"] == "calm"
    assert len(summary["moodSeries"]) == 1
