from __future__ import annotations
from typing import Dict, Sequence

from .. import patterns as P
from ..schemas import Skill

_ENGLISH_TO_CHINESE: Dict[str, str] = {}
for _zh, _en in P.POSITION_TRANSLATIONS.items():
    # "Senior Engineer" maps back to the first Chinese title that produced it
    _ENGLISH_TO_CHINESE.setdefault(_en, _zh)


def translate_position(position: str, language: str) -> str:
    if language == "zh":
        return _ENGLISH_TO_CHINESE.get(position, position)
    return P.POSITION_TRANSLATIONS.get(position, position)


def _has_any(skills_lower: Sequence[str], needles: Sequence[str]) -> bool:
    return any(needle in skill for needle in needles for skill in skills_lower)


def generate_role_from_skills(skills: Sequence[Skill], language: str) -> str:
    tech = [item.lower() for s in skills if "technical" in s.category.lower() for item in s.items]
    buckets = P.ROLE_SKILL_BUCKETS

    if _has_any(tech, buckets["web3"]):
        role = "web3"
    else:
        frontend = _has_any(tech, buckets["frontend"])
        backend = _has_any(tech, buckets["backend"])
        if frontend and backend:
            role = "fullstack"
        elif frontend:
            role = "frontend"
        elif backend:
            role = "backend"
        else:
            role = "generic"
    return P.ROLE_TITLES[role][language]
