from __future__ import annotations

from ..metrics.experience import classify_career_progression, determine_industry
from ..schemas import ExperienceAssessment, ParsedResume
from ..utils import dedupe

MAX_ACHIEVEMENTS = 5
MIN_ACHIEVEMENT_LENGTH = 10


def assess_experience(parsed: ParsedResume) -> ExperienceAssessment:
    work = parsed.work_experience
    industries = dedupe(determine_industry([exp], parsed.skills) for exp in work)

    achievements = [
        line
        for exp in work
        for line in (*exp.description, *exp.achievements)
        if len(line) > MIN_ACHIEVEMENT_LENGTH
    ]

    return ExperienceAssessment(
        relevant_industries=industries,
        career_progression=classify_career_progression(work),
        key_achievements=achievements[:MAX_ACHIEVEMENTS],
    )
