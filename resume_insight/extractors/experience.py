from __future__ import annotations
import re
from datetime import date
from typing import Iterator, List, Optional, Tuple

from .. import patterns as P
from ..schemas import WorkExperience

_DATE_PARTS = re.compile(r"[./]")


def parse_numeral(token: str) -> int:
    """Chinese numerals one to ten or Arabic digits; anything else is 0."""
    if token in P.CHINESE_NUMERALS:
        return P.CHINESE_NUMERALS[token]
    if token.isdigit():
        return int(token)
    return 0


def iter_stated_durations(text: str) -> Iterator[Tuple[str, int]]:
    """Yield (phrase, years) for every "N年…经验" / "N years of … experience" phrase."""
    for pattern in P.STATED_YEARS_PATTERNS:
        for m in pattern.finditer(text):
            yield m.group(0), parse_numeral(m.group(1))


def is_present(token: str) -> bool:
    return token.strip().lower() in P.PRESENT_TOKENS


def split_date(value: str) -> Tuple[int, Optional[int]]:
    parts = _DATE_PARTS.split(value.strip())
    year = int(parts[0]) if parts[0].isdigit() else 0
    month = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return year, month or None


def _stated_position(phrase: str, language: str) -> str:
    lowered = phrase.lower()
    frontend = "前端" in phrase or "frontend" in lowered or "front-end" in lowered
    backend = "后端" in phrase or "backend" in lowered or "back-end" in lowered
    fullstack = "全栈" in phrase or "fullstack" in lowered or "full stack" in lowered or "full-stack" in lowered
    if language == "zh":
        if "前端" in phrase:
            return "前端开发工程师"
        if "后端" in phrase:
            return "后端开发工程师"
        if "全栈" in phrase:
            return "全栈开发工程师"
        return P.PLACEHOLDER_POSITION["zh"]
    if frontend:
        return "Frontend Engineer"
    if backend:
        return "Backend Engineer"
    if fullstack:
        return "Full Stack Engineer"
    return P.PLACEHOLDER_POSITION["en"]


def _from_stated_durations(text: str, language: str, today: date) -> List[WorkExperience]:
    experience: List[WorkExperience] = []
    for phrase, years in iter_stated_durations(text):
        if years <= 0:
            continue
        experience.append(WorkExperience(
            company=P.PLACEHOLDER_COMPANY[language],
            position=_stated_position(phrase, language),
            start_date=str(today.year - years),
            end_date=str(today.year),
            description=[phrase],
            achievements=[],
        ))
    return experience


def _first_fitting(patterns, context: str, clean) -> str:
    for pattern in patterns:
        m = pattern.search(context)
        if m:
            value = clean(m.group(0))
            if 0 < len(value) < P.MAX_FIELD_LENGTH:
                return value
    return ""


def _company(context: str) -> str:
    return _first_fitting(P.COMPANY_PATTERNS, context, lambda s: s.strip().lstrip("#").strip())


def _position(context: str) -> str:
    return _first_fitting(P.POSITION_PATTERNS, context, lambda s: P.POSITION_LABEL.sub("", s.strip()).strip())


def _from_date_ranges(text: str, language: str, today: date) -> List[WorkExperience]:
    experience: List[WorkExperience] = []
    for pattern in P.DATE_RANGE_PATTERNS:
        for m in pattern.finditer(text):
            start_str, end_str = m.group(1), m.group(2)
            start_year, start_month = split_date(start_str)
            start_month = start_month or 1

            ongoing = is_present(end_str)
            if ongoing:
                end_year, end_month = today.year, today.month
            else:
                end_year, end_month = split_date(end_str)
                end_month = end_month or 12

            if not (start_year > P.EARLIEST_START_YEAR and start_year <= end_year):
                continue

            context = text[max(0, m.start() - P.EXPERIENCE_WINDOW): m.start() + P.EXPERIENCE_WINDOW]
            description = [line.strip() for line in context.split("\n") if len(line.strip()) > 10][:5]

            experience.append(WorkExperience(
                company=_company(context) or P.PLACEHOLDER_COMPANY[language],
                position=_position(context) or P.PLACEHOLDER_POSITION[language],
                start_date=f"{start_year}.{start_month}",
                end_date=P.PRESENT_LABEL[language] if ongoing else f"{end_year}.{end_month}",
                description=description,
                achievements=[],
            ))
    return experience


def extract_work_experience(text: str, language: str = "en", today: Optional[date] = None) -> List[WorkExperience]:
    """Collect experience from stated durations and from date ranges.

    Both paths append to the same list, so one job can show up more than once.
    """
    today = today or date.today()
    return _from_stated_durations(text, language, today) + _from_date_ranges(text, language, today)
