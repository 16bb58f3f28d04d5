from __future__ import annotations
from typing import List

from .. import patterns as P
from ..schemas import Skill
from ..utils import contains_keyword, dedupe


def extract_skills(text: str) -> List[Skill]:
    skills: List[Skill] = []

    technical = [s for s in P.TECHNICAL_SKILLS if contains_keyword(text, s)]
    technical += [label for term, label in P.CHINESE_SKILLS.items() if term in text]
    if technical:
        skills.append(Skill(category=P.TECHNICAL_CATEGORY, items=dedupe(technical), proficiency="intermediate"))

    soft = [label for pattern, label in P.SOFT_SKILLS if pattern.search(text)]
    if soft:
        skills.append(Skill(category=P.SOFT_CATEGORY, items=dedupe(soft), proficiency="intermediate"))

    return skills


def _collect(text: str, patterns) -> List[str]:
    found: List[str] = []
    for pattern in patterns:
        found.extend(m.group(0) for m in pattern.finditer(text))
    return dedupe(found)


def extract_certifications(text: str) -> List[str]:
    return _collect(text, P.CERTIFICATION_PATTERNS)


def extract_languages(text: str) -> List[str]:
    return _collect(text, P.LANGUAGE_PATTERNS)
