from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Language = Literal["en", "zh"]
Proficiency = Literal["beginner", "intermediate", "advanced", "expert"]
CareerProgression = Literal["ascending", "lateral", "stable"]
AITag = Literal["developer", "researcher", "founder", "teacher", "designer", "creator", "practitioner"]

AI_TAGS: tuple[str, ...] = ("developer", "researcher", "founder", "teacher", "designer", "creator", "practitioner")

AI_TAG_DESCRIPTIONS = {
    "zh": {
        "developer": "软件开发、编程、技术项目",
        "researcher": "科学研究、学术发表",
        "founder": "公司或项目创始人",
        "teacher": "教学、讲座",
        "designer": "UX/UI设计、产品设计",
        "creator": "内容创作、艺术应用",
        "practitioner": "行业应用实践者",
    },
    "en": {
        "developer": "Software Development, Programming, Technical Projects",
        "researcher": "Scientific Research, Academic Publications",
        "founder": "Company or Project Founder",
        "teacher": "Teaching, Lectures",
        "designer": "UX/UI Design, Product Design",
        "creator": "Content Creation, AI Art Applications",
        "practitioner": "Industry Application Practitioner",
    },
}


# -------- Stage 0: parsed resume --------
class PersonalInfo(BaseModel):
    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


class Education(BaseModel):
    institution: str = ""
    degree: str = ""
    major: Optional[str] = None
    graduation_year: Optional[int] = None
    gpa: Optional[float] = None


class WorkExperience(BaseModel):
    company: str
    position: str
    start_date: str
    end_date: str
    description: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)


class Project(BaseModel):
    name: str
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)


class Skill(BaseModel):
    category: str
    items: List[str] = Field(default_factory=list)
    proficiency: Proficiency = "intermediate"


class ParsedResume(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: List[Education] = Field(default_factory=list)
    work_experience: List[WorkExperience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    language: Language = "en"

    def skill_items(self, category: str) -> List[str]:
        """Flatten the items of every skill group whose category mentions `category`."""
        needle = category.lower()
        return [item for skill in self.skills if needle in skill.category.lower() for item in skill.items]


# -------- Stages 1-5 --------
class ProfessionalProfile(BaseModel):
    name: str
    title_roles: List[str] = Field(default_factory=list, max_length=3)
    affiliation: str
    email: Optional[str] = None
    phone: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    photo_url: Optional[str] = None
    description: str
    ai_tag: AITag
    latest_education: str
    years_of_experience: int = 0
    industry: str = "Technology"
    research_interests: List[str] = Field(default_factory=list, max_length=3)


class SkillAssessment(BaseModel):
    technical_strengths: List[str] = Field(default_factory=list)
    soft_skills: List[str] = Field(default_factory=list)


class ExperienceAssessment(BaseModel):
    relevant_industries: List[str] = Field(default_factory=list)
    career_progression: CareerProgression = "stable"
    key_achievements: List[str] = Field(default_factory=list)


class EducationAssessment(BaseModel):
    institutions: List[str] = Field(default_factory=list)
    degrees: List[str] = Field(default_factory=list)
    majors: List[str] = Field(default_factory=list)


class OverallAssessment(BaseModel):
    highlights: List[str] = Field(default_factory=list)


class ResumeAnalysisResult(BaseModel):
    professional_profile: ProfessionalProfile
    skill_assessment: SkillAssessment
    experience_assessment: ExperienceAssessment
    education_assessment: EducationAssessment
    overall_assessment: OverallAssessment
    language: Language
