from __future__ import annotations
from typing import List, Optional

from .. import patterns as P
from ..schemas import Education

WINDOW_BEFORE = 2
WINDOW_AFTER = 2


def _first_degree(window: str) -> str:
    latin = P.DEGREE_LATIN.search(window)
    cjk = P.DEGREE_CJK.search(window)
    if latin and (not cjk or latin.start() < cjk.start()):
        return P.DEGREE_STOP.sub("", latin.group(0)).strip()
    if cjk:
        return cjk.group(0)
    return ""


def _first_institution(window: str) -> str:
    latin = P.INSTITUTION_LATIN.search(window)
    cjk = P.INSTITUTION_CJK.search(window)
    if latin and (not cjk or latin.start() < cjk.start()):
        return latin.group(0).strip()
    if cjk:
        return cjk.group(1)
    return ""


def _first_major(window: str) -> Optional[str]:
    for pattern in P.MAJOR:
        m = pattern.search(window)
        if m and m.group(1).strip():
            return m.group(1).strip()
    return None


def extract_education(text: str) -> List[Education]:
    """One record per line carrying an education keyword, read from a 5-line window.

    Overlapping windows can yield the same school more than once; callers
    deduplicate on the derived strings.
    """
    education: List[Education] = []
    lines = text.split("\n")
    for i, line in enumerate(lines):
        if not P.EDUCATION_KEYWORDS.search(line):
            continue
        window = "\n".join(lines[max(0, i - WINDOW_BEFORE): i + WINDOW_AFTER + 1])

        edu = Education(institution=_first_institution(window), degree=_first_degree(window))
        year = P.GRADUATION_YEAR.search(window)
        if year:
            edu.graduation_year = int(year.group(0))
        edu.major = _first_major(window)
        gpa = P.GPA.search(window)
        if gpa:
            edu.gpa = float(gpa.group(1))

        if edu.institution or edu.degree:
            education.append(edu)
    return education
