from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from ..extractors.contact import extract_personal_info
from ..extractors.education import extract_education
from ..extractors.experience import extract_work_experience
from ..extractors.projects import extract_projects
from ..extractors.skills import extract_certifications, extract_languages, extract_skills
from ..schemas import ParsedResume


def parse_resume(text: str, language: str, today: Optional[date] = None) -> ParsedResume:
    """Run every extractor over the raw text. Pure extraction, no inference."""
    logging.debug(f"Parsing resume ({language}, {len(text)} chars)")
    parsed = ParsedResume(
        personal_info=extract_personal_info(text),
        education=extract_education(text),
        work_experience=extract_work_experience(text, language, today),
        projects=extract_projects(text),
        skills=extract_skills(text),
        certifications=extract_certifications(text),
        languages=extract_languages(text),
        language=language,
    )
    logging.debug(
        f"Parsed {len(parsed.work_experience)} experience, {len(parsed.education)} education, "
        f"{len(parsed.projects)} project records"
    )
    return parsed
