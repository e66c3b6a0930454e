"""Journal analytics computed from a user's entry list.

Everything here is a pure function of ``(entries, now)``; nothing reads the
store or caches results, so the dashboard can recompute on every request.
Dates are compared in the server's local time zone: an entry's ``date`` is
truncated to a local calendar day before any day arithmetic.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from lifejournal.domains.journal.constants import BALANCE_AREAS

Entry = Mapping[str, Any]
Moment = Union[datetime, date]

WEEK = timedelta(days=7)


def _to_local(moment: datetime) -> datetime:
    # Naive values are taken to be local wall-clock time.
    return moment.astimezone()


def parse_entry_date(value: Any) -> Optional[datetime]:
    """Parse an entry ``date`` into an aware local datetime, or ``None``."""
    if isinstance(value, datetime):
        return _to_local(value)
    if isinstance(value, date):
        return _to_local(datetime.combine(value, time()))
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _to_local(datetime.fromisoformat(text))
    except ValueError:
        return None


def _local_now(now: Optional[Moment]) -> datetime:
    if now is None:
        return datetime.now().astimezone()
    if isinstance(now, datetime):
        return _to_local(now)
    return _to_local(datetime.combine(now, time()))


def _local_day(now: Optional[Moment]) -> date:
    if isinstance(now, date) and not isinstance(now, datetime):
        return now
    return _local_now(now).date()


def _dated(entries: Iterable[Entry]) -> List[Tuple[datetime, Entry]]:
    pairs = []
    for entry in entries:
        moment = parse_entry_date(entry.get("date"))
        if moment is not None:
            pairs.append((moment, entry))
    return pairs


def total_count(entries: Sequence[Entry]) -> int:
    return len(entries)


def this_week_count(entries: Sequence[Entry], now: Optional[Moment] = None) -> int:
    """Entries dated within ``[now - 7 days, now]``."""
    current = _local_now(now)
    start = current - WEEK
    return sum(1 for moment, _ in _dated(entries) if start <= moment <= current)


def mean_of(entries: Sequence[Entry], field: str) -> float:
    """Arithmetic mean of a numeric field; 0.0 when there is nothing to average."""
    values = [
        entry[field]
        for entry in entries
        if isinstance(entry.get(field), (int, float)) and not isinstance(entry.get(field), bool)
    ]
    if not values:
        return 0.0
    return sum(values) / len(values)


def compute_streak(entries: Sequence[Entry], today: Optional[Moment] = None) -> int:
    """Consecutive calendar days, ending today, with at least one entry.

    Days are walked newest first. A day ``streak`` days before today extends
    the streak; a repeat of the day just matched is skipped; anything else
    ends the walk. Without an entry today the streak is 0. Entries dated in
    the future are ignored.
    """
    anchor = _local_day(today)
    days = sorted((moment.date() for moment, _ in _dated(entries)), reverse=True)
    streak = 0
    for day in days:
        diff = (anchor - day).days
        if diff < 0:
            continue
        if diff == streak:
            streak += 1
        elif diff == streak - 1:
            continue
        else:
            break
    return streak


def tag_frequency(entries: Sequence[Entry], field: str) -> Dict[str, int]:
    """Occurrences of each tag in ``field`` across all entries."""
    counts: Counter = Counter()
    for entry in entries:
        counts.update(entry.get(field) or [])
    return dict(counts)


def top_tags(frequency: Mapping[str, int], limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """Tags ordered by count, most frequent first; ties keep first-seen order."""
    ranked = sorted(frequency.items(), key=lambda item: -item[1])
    return ranked if limit is None else ranked[:limit]


def goals_achieved(entries: Sequence[Entry]) -> int:
    return sum(1 for entry in entries if entry.get("goalAchieved") is True)


def goal_achievement_rate(entries: Sequence[Entry]) -> float:
    if not entries:
        return 0.0
    return goals_achieved(entries) / len(entries)


def mood_series(entries: Sequence[Entry]) -> List[dict]:
    """Mood, motivation and energy per entry, oldest first."""
    points = sorted(_dated(entries), key=lambda pair: pair[0])
    return [
        {
            "date": moment.date().isoformat(),
            "mood": entry.get("mood"),
            "motivation": entry.get("motivation"),
            "energy": entry.get("energy"),
        }
        for moment, entry in points
    ]


def monthly_goal_achievement(entries: Sequence[Entry]) -> List[dict]:
    buckets: Dict[str, Dict[str, int]] = {}
    for moment, entry in _dated(entries):
        month = moment.strftime("%Y-%m")
        bucket = buckets.setdefault(month, {"achieved": 0, "total": 0})
        bucket["total"] += 1
        if entry.get("goalAchieved") is True:
            bucket["achieved"] += 1
    return [
        {
            "month": month,
            "achieved": bucket["achieved"],
            "total": bucket["total"],
            "percentage": round(bucket["achieved"] / bucket["total"] * 100, 1),
        }
        for month, bucket in sorted(buckets.items())
    ]


def life_balance(entries: Sequence[Entry], areas: Sequence[str] = BALANCE_AREAS) -> List[dict]:
    """Mean mood of the entries tagged with each area (0 for untagged areas)."""
    balance = []
    for area in areas:
        tagged = [entry for entry in entries if area in (entry.get("lifeAreas") or [])]
        balance.append({"area": area, "score": round(mean_of(tagged, "mood"), 2)})
    return balance


def summarize(entries: Sequence[Entry], now: Optional[Moment] = None) -> dict:
    """Dashboard payload for one user's entries."""
    life_areas = tag_frequency(entries, "lifeAreas")
    emotions = tag_frequency(entries, "emotions")
    ranked_areas = top_tags(life_areas)
    ranked_emotions = top_tags(emotions)
    return {
        "totalEntries": total_count(entries),
        "thisWeekEntries": this_week_count(entries, now),
        "averageMood": round(mean_of(entries, "mood"), 2),
        "averageMotivation": round(mean_of(entries, "motivation"), 2),
        "averageEnergy": round(mean_of(entries, "energy"), 2),
        "currentStreak": compute_streak(entries, now),
        "goalsAchieved": goals_achieved(entries),
        "goalAchievementRate": round(goal_achievement_rate(entries), 4),
        "lifeAreaFrequency": life_areas,
        "emotionFrequency": emotions,
        "mostActiveArea": ranked_areas[0][0] if ranked_areas else None,
        "leastActiveArea": ranked_areas[-1][0] if ranked_areas else None,
        "dominantEmotion": ranked_emotions[0][0] if ranked_emotions else None,
        "moodSeries": mood_series(entries),
        "monthlyGoalAchievement": monthly_goal_achievement(entries),
        "lifeBalance": life_balance(entries),
    }
