"""CLI command seeding a demo account with a few days of journaling.

Usage:
    flask seed-demo
    flask seed-demo --email someone@example.com --days 10
"""

from __future__ import annotations

from datetime import datetime, timedelta

import click
from flask.cli import with_appcontext

from lifejournal.core.auth.auth_service import register_user
from lifejournal.core.auth.schemas import SignupRequest
from lifejournal.core.users.services import get_user
from lifejournal.domains.goals.schemas.goal_schemas import GoalCreate
from lifejournal.domains.goals.services import goal_service
from lifejournal.domains.journal.schemas.journal_schemas import JournalEntryCreate
from lifejournal.domains.journal.services import journal_service

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo12345"

_ROTATION = (
    {"lifeAreas": ["health"], "emotions": ["energetic"], "achievements": ["exercised"]},
    {"lifeAreas": ["career"], "emotions": ["motivated"], "challenges": ["time-management"]},
    {"lifeAreas": ["relationships", "family"], "emotions": ["grateful", "content"]},
    {"lifeAreas": ["personal-growth"], "emotions": ["calm"], "achievements": ["meditated"]},
)


def seed_demo_user(email: str) -> dict:
    user = get_user(email)
    if user:
        return user
    return register_user(SignupRequest(email=email, password=DEMO_PASSWORD, name="Demo User"))


def seed_entries(user_id: str, days: int) -> int:
    now = datetime.now().astimezone()
    # Oldest first so the newest entry ends up at the head of the list.
    for offset in range(days - 1, -1, -1):
        tags = _ROTATION[offset % len(_ROTATION)]
        data = JournalEntryCreate.model_validate(
            {
                "title": f"Day {days - offset}",
                "content": "Short reflection on how the day went.",
                "mood": 5 + offset % 5,
                "motivation": 6 + offset % 4,
                "energy": 4 + offset % 6,
                "goalAchieved": offset % 2 == 0,
                "gratitude": ["Morning coffee", ""],
                **tags,
            }
        )
        journal_service.create_entry(user_id, data, now=now - timedelta(days=offset))
    return days


def seed_goals(user_id: str) -> int:
    goals = (
        GoalCreate(title="Run a 10k", category="health", priority="high", progress=40),
        GoalCreate(title="Read 12 books", category="education", progress=25),
    )
    existing = {goal["title"] for goal in goal_service.list_goals(user_id)}
    created = 0
    for goal in goals:
        if goal.title not in existing:
            goal_service.create_goal(user_id, goal)
            created += 1
    return created


@click.command("seed-demo")
@click.option("--email", "-e", default=DEMO_EMAIL, show_default=True, help="Demo account email")
@click.option("--days", "-d", default=7, show_default=True, type=click.IntRange(1, 365), help="Days of entries")
@with_appcontext
def seed_demo_command(email: str, days: int):
    """Create a demo user with journal entries and goals."""
    user = seed_demo_user(email)
    click.echo(f"Demo user: {user['email']} (id {user['id']})")
    click.echo(f"  ✓ Entries: {seed_entries(user['id'], days)}")
    click.echo(f"  ✓ Goals: {seed_goals(user['id'])}")


def register_commands(app) -> None:
    app.cli.add_command(seed_demo_command)
