from __future__ import annotations
from typing import List

from ..schemas import EducationAssessment, ExperienceAssessment, OverallAssessment, SkillAssessment

MAX_HIGHLIGHTS = 6


def _highlights_zh(skills: SkillAssessment, experience: ExperienceAssessment,
                   education: EducationAssessment, years: int) -> List[str]:
    lines: List[str] = []
    if skills.technical_strengths:
        lines.append(f"掌握{len(skills.technical_strengths)}项核心技术技能")
    if experience.relevant_industries:
        lines.append(f"在{'、'.join(experience.relevant_industries)}领域有丰富经验")
    if experience.career_progression == "ascending":
        lines.append("职业发展呈上升趋势")
    if education.degrees:
        lines.append(f"具备{'、'.join(education.degrees)}学历背景")
    if experience.key_achievements:
        lines.append("工作成果丰富，有具体项目经验")
    if skills.soft_skills:
        lines.append("具备良好的软技能和团队协作能力")
    if years > 0:
        lines.append(f"拥有{years}年专业工作经验")
    return lines


def _highlights_en(skills: SkillAssessment, experience: ExperienceAssessment,
                   education: EducationAssessment, years: int) -> List[str]:
    lines: List[str] = []
    if skills.technical_strengths:
        lines.append(f"Proficient in {len(skills.technical_strengths)} core technical skills")
    if experience.relevant_industries:
        lines.append(f"Rich experience in {', '.join(experience.relevant_industries)} industry")
    if experience.career_progression == "ascending":
        lines.append("Demonstrated career progression and growth")
    if education.degrees:
        lines.append(f"Strong educational background with {', '.join(education.degrees)} degree(s)")
    if experience.key_achievements:
        lines.append("Strong track record with concrete project achievements")
    if skills.soft_skills:
        lines.append("Well-developed soft skills and team collaboration abilities")
    if years > 0:
        lines.append(f"{years} years of professional experience")
    return lines


def generate_highlights(
    language: str,
    skills: SkillAssessment,
    experience: ExperienceAssessment,
    education: EducationAssessment,
    years_of_experience: int,
) -> OverallAssessment:
    """Positive summary sentences in a fixed order, at most six."""
    build = _highlights_zh if language == "zh" else _highlights_en
    lines = build(skills, experience, education, years_of_experience)
    return OverallAssessment(highlights=lines[:MAX_HIGHLIGHTS])
