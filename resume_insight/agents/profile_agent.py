from __future__ import annotations
from datetime import date
from typing import List, Optional, Sequence

from .. import patterns as P
from ..metrics.ai_tag import determine_ai_tag
from ..metrics.experience import calculate_years_of_experience, determine_industry
from ..metrics.roles import generate_role_from_skills, translate_position
from ..schemas import Education, ParsedResume, ProfessionalProfile
from ..utils import dedupe

MAX_TITLE_ROLES = 3
MAX_RESEARCH_INTERESTS = 3
_PLACEHOLDER_COMPANIES = set(P.PLACEHOLDER_COMPANY.values())


def _title_roles(parsed: ParsedResume, language: str) -> List[str]:
    roles: List[str] = []
    experiences = parsed.work_experience
    if experiences:
        recent = experiences[-1]
        if recent.position:
            roles.append(translate_position(recent.position, language))
        for exp in experiences:
            if exp.position:
                roles.append(translate_position(exp.position, language))
        roles = dedupe(roles)
    if not roles:
        roles.append(generate_role_from_skills(parsed.skills, language))
    return roles[:MAX_TITLE_ROLES]


def _affiliation(parsed: ParsedResume) -> str:
    if not parsed.work_experience:
        return ""
    company = parsed.work_experience[-1].company
    return "" if company in _PLACEHOLDER_COMPANIES else company


def _skill_phrase(skills_text: str, language: str) -> str:
    lowered = skills_text.lower()
    if "react" in lowered or "vue" in lowered:
        kind = "frontend"
    elif "web3" in lowered or "blockchain" in lowered:
        kind = "web3"
    else:
        kind = "generic"
    if language == "zh":
        return {
            "frontend": f"前端开发经验。专注于{skills_text}等现代前端技术栈。",
            "web3": f"Web3开发经验。擅长{skills_text}等区块链技术。",
            "generic": f"软件开发经验。熟练掌握{skills_text}等技术。",
        }[kind]
    return {
        "frontend": f" in frontend development. I specialize in {skills_text} and modern frontend technologies.",
        "web3": f" in Web3 development. I'm skilled in {skills_text} and blockchain technologies.",
        "generic": f" in software development. I'm proficient in {skills_text}.",
    }[kind]


def generate_professional_description(parsed: ParsedResume, language: str, years: int) -> str:
    tech = parsed.skill_items("technical")[:3]
    position = company = ""
    if parsed.work_experience:
        recent = parsed.work_experience[-1]
        position = translate_position(recent.position, language)
        company = recent.company
    # "Acme Inc." must not end up as "Acme Inc.." before the sentence period
    company_name = company.rstrip(".")
    has_company = bool(company) and company not in _PLACEHOLDER_COMPANIES
    total_projects = len(parsed.projects)

    if language == "zh":
        description = "我是一位"
        if position and has_company:
            description += f"{position}，现任职于{company_name}。"
        elif position:
            description += f"{position}。"
        else:
            description += "软件开发工程师。"
        if years > 0:
            description += f"拥有{years}年"
            description += _skill_phrase("、".join(tech), language) if tech else "软件开发经验。"
        if total_projects > 0:
            description += f"参与过{total_projects}个项目的开发与维护。"
        return description

    description = "I am a"
    if position and has_company:
        description += f" {position} currently working at {company_name}."
    elif position:
        description += f" {position}"
    else:
        description += " Software Engineer"
    if years > 0:
        description += f" with {years} year{'s' if years > 1 else ''} of experience"
        description += _skill_phrase(", ".join(tech), language) if tech else " in software development."
    else:
        description += " focused on building quality software solutions."
    if total_projects > 0:
        description += f" I have contributed to {total_projects} project{'s' if total_projects > 1 else ''}."
    return description


def generate_latest_education(education: Sequence[Education], language: str) -> str:
    if not education:
        return "学历信息未提供" if language == "zh" else "Education not specified"

    latest = education[0]
    for edu in education[1:]:
        if (edu.graduation_year or 0) > (latest.graduation_year or 0):
            latest = edu

    parts: List[str] = []
    if latest.degree:
        parts.append(latest.degree)
    if latest.major:
        parts.append(f"{latest.major}专业" if language == "zh" else f"in {latest.major}")
    if latest.institution:
        parts.append(f"毕业于{latest.institution}" if language == "zh" else f"from {latest.institution}")
    if latest.graduation_year:
        parts.append(f"({latest.graduation_year})")

    if parts:
        return " ".join(parts)
    return "学历信息不完整" if language == "zh" else "Education details incomplete"


def extract_research_interests(parsed: ParsedResume) -> List[str]:
    candidates = list(parsed.skill_items("technical"))
    for proj in parsed.projects:
        candidates.extend([proj.name, *proj.technologies])
    cleaned = [c.strip() for c in candidates if c and c.strip()]
    return dedupe(cleaned)[:MAX_RESEARCH_INTERESTS]


def build_professional_profile(
    parsed: ParsedResume,
    raw_text: str,
    language: str,
    today: Optional[date] = None,
) -> ProfessionalProfile:
    info = parsed.personal_info
    years = calculate_years_of_experience(parsed.work_experience, raw_text, today)
    industry = determine_industry(parsed.work_experience, parsed.skills) if parsed.work_experience else P.DEFAULT_INDUSTRY

    return ProfessionalProfile(
        name=info.name or P.PLACEHOLDER_NAME[language],
        title_roles=_title_roles(parsed, language),
        affiliation=_affiliation(parsed) or P.PLACEHOLDER_AFFILIATION[language],
        email=info.email,
        phone=info.phone,
        github=info.github,
        website=info.website,
        linkedin=info.linkedin,
        twitter=None,
        photo_url=None,
        description=generate_professional_description(parsed, language, years),
        ai_tag=determine_ai_tag(parsed, raw_text),
        latest_education=generate_latest_education(parsed.education, language),
        years_of_experience=years,
        industry=industry,
        research_interests=extract_research_interests(parsed),
    )
