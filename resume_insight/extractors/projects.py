from __future__ import annotations
from typing import List

from .. import patterns as P
from ..schemas import Project
from ..utils import dedupe

SECTION_LOOKAHEAD = 9
TECH_LOOKAHEAD = 5
HEADING_LOOKAHEAD = 8
MIN_STUB_LENGTH = 10
HEADING_NAME_LENGTH = (5, 50)


def find_technologies(text: str) -> List[str]:
    return dedupe(m.group(0) for m in P.PROJECT_TECH.finditer(text))


def _section_projects(lines: List[str], i: int) -> List[Project]:
    projects: List[Project] = []
    for j in range(i + 1, min(i + 1 + SECTION_LOOKAHEAD, len(lines))):
        line = lines[j].strip()
        if len(line) < MIN_STUB_LENGTH or line.startswith("#") or "项目" in line:
            continue
        name = line.split("（")[0].split("(")[0].strip()
        context = " ".join(lines[j: j + TECH_LOOKAHEAD])
        projects.append(Project(name=name, description=line, technologies=find_technologies(context)))
    return projects


def _heading_project(lines: List[str], i: int, name: str) -> Project:
    following = lines[i + 1: i + HEADING_LOOKAHEAD]
    description = next((l.strip() for l in following if l.strip()), "")
    return Project(name=name, description=description, technologies=find_technologies(" ".join(following)))


def extract_projects(text: str) -> List[Project]:
    projects: List[Project] = []
    lines = text.split("\n")

    for i, raw in enumerate(lines):
        line = raw.strip()

        if P.PROJECT_SECTION.search(line):
            projects.extend(_section_projects(lines, i))

        heading = P.PROJECT_HEADING.search(line)
        if heading:
            name = heading.group(1).strip()
            low, high = HEADING_NAME_LENGTH
            if low <= len(name) < high:
                projects.append(_heading_project(lines, i, name))

    if not projects:
        for keyword in P.KNOWN_PROJECTS:
            if keyword in text:
                projects.append(Project(name=keyword, description=f"{keyword}项目开发"))

    return projects
