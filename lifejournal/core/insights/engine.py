"""Insight generation behind a swappable interface.

The app keeps one generator in ``app.extensions["insight_generator"]``.
Anything with a ``generate(request)`` method returning text can replace the
default template engine, e.g. a client for a hosted language model.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence

from flask import current_app


@dataclass(frozen=True)
class InsightRequest:
    content: str = ""
    mood: int = 7
    emotions: Sequence[str] = field(default_factory=tuple)
    life_areas: Sequence[str] = field(default_factory=tuple)
    challenges: Sequence[str] = field(default_factory=tuple)
    achievements: Sequence[str] = field(default_factory=tuple)


class InsightGenerator(Protocol):
    def generate(self, request: InsightRequest) -> str: ...


@dataclass(frozen=True)
class InsightTemplate:
    name: str
    applies: Callable[[InsightRequest], bool]
    text: str


def _humanize(tag: str) -> str:
    return tag.replace("-", " ")


def _mood_state(mood: int) -> str:
    if mood >= 7:
        return "well"
    if mood >= 5:
        return "moderately"
    return "currently challenged but still"


class TemplateInsightGenerator:
    """First matching template wins; with no match a template is drawn at random."""

    def __init__(self, templates: Sequence[InsightTemplate], *, seed: Optional[str] = None) -> None:
        if not templates:
            raise ValueError("at least one template is required")
        self.templates: List[InsightTemplate] = list(templates)
        self._rng = random.Random(seed)

    def select(self, request: InsightRequest) -> InsightTemplate:
        for template in self.templates:
            if template.applies(request):
                return template
        return self._rng.choice(self.templates)

    def generate(self, request: InsightRequest) -> str:
        template = self.select(request)
        areas = list(request.life_areas)
        values = {
            "primaryArea": _humanize(areas[0]) if areas else "personal growth",
            "secondaryArea": _humanize(areas[1]) if len(areas) > 1 else "overall well-being",
            "achievement": _humanize(request.achievements[0]) if request.achievements else "your recent accomplishment",
            "challenge": _humanize(request.challenges[0]) if request.challenges else "current obstacles",
            "moodState": _mood_state(request.mood),
        }
        return template.text.format(**values)


def get_generator() -> InsightGenerator:
    return current_app.extensions["insight_generator"]
