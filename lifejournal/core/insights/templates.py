"""Default insight templates, checked in order."""

from __future__ import annotations

from lifejournal.core.insights.engine import InsightTemplate

DEFAULT_TEMPLATES = (
    InsightTemplate(
        name="high_mood",
        applies=lambda req: req.mood >= 8,
        text=(
            "Your high mood score suggests you're in a positive mental state. This is an excellent time "
            "to tackle challenging goals and build momentum in your {primaryArea} journey."
        ),
    ),
    InsightTemplate(
        name="low_mood",
        applies=lambda req: req.mood <= 4,
        text=(
            "Your mood indicates you might be going through a difficult period. Remember that this is "
            "temporary, and focusing on {primaryArea} activities could help improve your emotional state."
        ),
    ),
    InsightTemplate(
        name="gratitude",
        applies=lambda req: "grateful" in req.emotions,
        text=(
            "Your gratitude practice is showing positive effects on your mindset. Research shows that "
            "grateful individuals tend to have better {primaryArea} outcomes and stronger resilience."
        ),
    ),
    InsightTemplate(
        name="stress",
        applies=lambda req: "anxious" in req.emotions or "stressed" in req.emotions,
        text=(
            "The anxiety you're experiencing is common during growth periods. Consider incorporating "
            "mindfulness practices into your {primaryArea} routine to manage stress more effectively."
        ),
    ),
    InsightTemplate(
        name="achievement",
        applies=lambda req: len(req.achievements) > 0,
        text=(
            "Celebrating your achievements like '{achievement}' is crucial for maintaining motivation. "
            "This success in {primaryArea} shows your capability to overcome challenges."
        ),
    ),
    InsightTemplate(
        name="challenge",
        applies=lambda req: len(req.challenges) > 0,
        text=(
            "The challenges you're facing with {challenge} are growth opportunities in disguise. Your "
            "awareness of these obstacles is the first step toward overcoming them."
        ),
    ),
    InsightTemplate(
        name="health_focus",
        applies=lambda req: "health" in req.life_areas,
        text=(
            "Your focus on health is foundational to all other life areas. The mind-body connection means "
            "that improvements in physical wellness often lead to enhanced {secondaryArea} performance."
        ),
    ),
    InsightTemplate(
        name="career_focus",
        applies=lambda req: "career" in req.life_areas,
        text=(
            "Career development requires consistent effort and strategic thinking. Your current emotional "
            "state suggests you're {moodState} positioned to make meaningful professional progress."
        ),
    ),
)
