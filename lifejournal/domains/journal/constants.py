"""Controlled vocabularies for journal tags."""

from __future__ import annotations

LIFE_AREAS = (
    "health",
    "career",
    "relationships",
    "personal-growth",
    "finance",
    "recreation",
    "family",
    "education",
    "spirituality",
    "creativity",
    "travel",
    "community",
)

EMOTIONS = (
    "grateful",
    "happy",
    "excited",
    "peaceful",
    "confident",
    "motivated",
    "anxious",
    "frustrated",
    "sad",
    "overwhelmed",
    "hopeful",
    "inspired",
    "content",
    "energetic",
    "calm",
    "stressed",
)

CHALLENGES = (
    "time-management",
    "work-stress",
    "relationship-issues",
    "health-concerns",
    "financial-pressure",
    "self-doubt",
    "procrastination",
    "communication",
    "work-life-balance",
    "decision-making",
)

ACHIEVEMENTS = (
    "completed-task",
    "learned-something",
    "helped-someone",
    "exercised",
    "ate-healthy",
    "meditated",
    "connected-with-friend",
    "made-progress",
    "overcame-fear",
    "practiced-gratitude",
)

# Areas plotted on the life-balance chart
BALANCE_AREAS = (
    "health",
    "career",
    "relationships",
    "personal-growth",
    "finance",
    "recreation",
)

SCORE_MIN = 1
SCORE_MAX = 10
MAX_GRATITUDE_ITEMS = 3
