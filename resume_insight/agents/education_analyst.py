from __future__ import annotations

from ..schemas import EducationAssessment, ParsedResume
from ..utils import dedupe


def assess_education(parsed: ParsedResume) -> EducationAssessment:
    education = parsed.education
    return EducationAssessment(
        institutions=dedupe(e.institution for e in education if e.institution),
        degrees=dedupe(e.degree for e in education if e.degree),
        majors=dedupe(e.major for e in education if e.major),
    )
