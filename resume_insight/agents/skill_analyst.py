from __future__ import annotations

from ..schemas import ParsedResume, SkillAssessment

MAX_TECHNICAL = 8
MAX_SOFT = 6


def assess_skills(parsed: ParsedResume) -> SkillAssessment:
    return SkillAssessment(
        technical_strengths=parsed.skill_items("technical")[:MAX_TECHNICAL],
        soft_skills=parsed.skill_items("soft")[:MAX_SOFT],
    )
