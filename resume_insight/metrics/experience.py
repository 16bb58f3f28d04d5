from __future__ import annotations
from datetime import date
from typing import List, Optional, Sequence, Tuple

from .. import patterns as P
from ..extractors.experience import is_present, iter_stated_durations, split_date
from ..schemas import CareerProgression, Skill, WorkExperience

MAX_STATED_YEARS = 20
MAX_COMPUTED_YEARS = 15


def find_stated_years(text: str) -> Optional[int]:
    """First explicit "N years of experience" figure between 1 and 20, if any."""
    for _, years in iter_stated_durations(text or ""):
        if 0 < years <= MAX_STATED_YEARS:
            return years
    return None


def _normalize(value: str, today: date, *, is_end: bool) -> Tuple[int, int]:
    if is_end and (is_present(value) or "present" in value.lower()):
        return today.year, today.month
    year, month = split_date(value)
    if not year:
        return (today.year, today.month) if is_end else (today.year, 1)
    return year, month or (12 if is_end else 1)


def calculate_years_of_experience(
    work_experience: Sequence[WorkExperience],
    raw_text: str = "",
    today: Optional[date] = None,
) -> int:
    """Whole years from the earliest start to the latest end, capped at 15.

    A stated duration in the raw text wins over computed spans. The stored
    records are never modified.
    """
    if not work_experience:
        return 0

    stated = find_stated_years(raw_text)
    if stated is not None:
        return stated

    today = today or date.today()
    spans = sorted(
        (_normalize(exp.start_date, today, is_end=False), _normalize(exp.end_date, today, is_end=True))
        for exp in work_experience
    )
    start_year, start_month = spans[0][0]
    end_year, end_month = max(end for _, end in spans)

    total_months = (end_year - start_year) * 12 + (end_month - start_month)
    years = max(0, total_months // 12)
    return min(years, MAX_COMPUTED_YEARS)


def determine_industry(work_experience: Sequence[WorkExperience], skills: Sequence[Skill]) -> str:
    chunks: List[str] = []
    for exp in work_experience:
        chunks.extend([exp.company, exp.position, *exp.description])
    for skill in skills:
        chunks.extend(skill.items)
    all_text = " ".join(chunks).lower()

    for industry, keywords in P.INDUSTRY_KEYWORDS.items():
        if any(keyword in all_text for keyword in keywords):
            return industry
    return P.DEFAULT_INDUSTRY


def _start_year(exp: WorkExperience) -> int:
    year, _ = split_date(exp.start_date)
    return year


def analyze_career_progression(work_experience: Sequence[WorkExperience]) -> bool:
    """True when some seniority ladder shows a move to a higher, nonzero rung."""
    if len(work_experience) < 2:
        return False

    positions = [exp.position.lower() for exp in work_experience]
    for ladder in P.PROGRESSION_LADDERS:
        last_rank = -1
        for position in positions:
            rank = next((i for i, rung in enumerate(ladder) if rung in position), -1)
            if rank > last_rank and rank > 0:
                return True
            if rank != -1:
                last_rank = max(last_rank, rank)
    return False


def classify_career_progression(work_experience: Sequence[WorkExperience]) -> CareerProgression:
    # "lateral" is a valid classification that no rule produces yet
    if len(work_experience) < 2:
        return "stable"
    ordered = sorted(work_experience, key=_start_year)
    return "ascending" if analyze_career_progression(ordered) else "stable"
