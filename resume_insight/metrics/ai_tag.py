from __future__ import annotations
import logging
from typing import Dict, List

from .. import patterns as P
from ..schemas import AITag, ParsedResume
from ..utils import count_keywords

logger = logging.getLogger(__name__)


def collect_tag_text(parsed: ParsedResume, raw_text: str) -> str:
    chunks: List[str] = [raw_text]
    for exp in parsed.work_experience:
        chunks.extend([exp.position, exp.company, *exp.description, *exp.achievements])
    for proj in parsed.projects:
        chunks.extend([proj.name, proj.description, *proj.achievements])
    for skill in parsed.skills:
        chunks.extend(skill.items)
    return " ".join(chunks).lower()


def score_ai_tags(text: str) -> Dict[str, int]:
    """Keyword hits per tag, with the tag weights already applied."""
    return {
        tag: count_keywords(text, keywords) * P.AI_TAG_WEIGHTS.get(tag, 1)
        for tag, keywords in P.AI_TAG_KEYWORDS.items()
    }


def classify_ai_tag(text: str) -> AITag:
    text = text.lower()
    scores = score_ai_tags(text)
    logger.debug("AI tag scores: %s", scores)

    has_strong_title = any(title in text for title in P.STRONG_DEVELOPER_TITLES)
    if has_strong_title or scores["developer"] >= P.DEVELOPER_SHORT_CIRCUIT_SCORE:
        return "developer"

    best = max(scores.values())
    if best == 0:
        return P.DEFAULT_AI_TAG
    return next(tag for tag in P.AI_TAG_PRIORITY if scores[tag] == best)


def determine_ai_tag(parsed: ParsedResume, raw_text: str) -> AITag:
    return classify_ai_tag(collect_tag_text(parsed, raw_text))
