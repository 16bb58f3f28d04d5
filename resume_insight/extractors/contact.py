from __future__ import annotations
from typing import Optional

from .. import patterns as P
from ..schemas import PersonalInfo
from ..utils import non_blank_lines

NAME_SCAN_LINES = 5


def _looks_like_header(line: str) -> bool:
    lowered = line.lower()
    if any(word in lowered for word in P.NAME_SKIP_WORDS):
        return True
    if any(marker in line for marker in P.NAME_SKIP_MARKERS):
        return True
    if line[0].isdigit():
        return True
    return "experience" in lowered


def _name_from_line(line: str) -> Optional[str]:
    cjk = P.CJK_CHAR.findall(line)
    if 2 <= len(cjk) <= 4 and len(cjk) / len(line) > 0.5:
        return line
    if P.LATIN_NAME.match(line) and len(line.split()) <= 3:
        return line
    if line.startswith("#"):
        candidate = P.HEADING_PREFIX.sub("", line).strip()
        if 2 <= len(candidate) <= 10:
            return candidate
    return None


def extract_name(text: str) -> str:
    for line in non_blank_lines(text)[:NAME_SCAN_LINES]:
        line = line.strip()
        if not (1 < len(line) < 20) or _looks_like_header(line):
            continue
        name = _name_from_line(line)
        if name:
            return name
    return ""


def extract_website(text: str) -> Optional[str]:
    for match in P.WEBSITE.finditer(text):
        url = match.group(0)
        if not any(excluded in url.lower() for excluded in P.WEBSITE_EXCLUDES):
            return url
    labeled = P.LABELED_DOMAIN.search(text)
    if labeled:
        return f"https://{labeled.group(1)}"
    return None


def extract_personal_info(text: str) -> PersonalInfo:
    info = PersonalInfo(name=extract_name(text))

    email = P.EMAIL.search(text)
    if email:
        info.email = email.group(0)

    phone = P.PHONE.search(text)
    if phone:
        info.phone = phone.group(0)

    linkedin = P.LINKEDIN.search(text)
    if linkedin:
        info.linkedin = f"https://{linkedin.group(0)}"

    github = P.GITHUB.search(text)
    if github:
        info.github = f"https://{github.group(0)}"

    info.website = extract_website(text)

    location = P.LOCATION.search(text)
    if location:
        info.location = location.group(0)

    return info
