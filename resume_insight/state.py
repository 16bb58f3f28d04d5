from __future__ import annotations
from datetime import date, datetime
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from .schemas import (
    EducationAssessment,
    ExperienceAssessment,
    OverallAssessment,
    ParsedResume,
    ProfessionalProfile,
    SkillAssessment,
)

StepStatus = Literal["pending", "processing", "completed", "error"]


class StepDefinition(BaseModel):
    title: str
    description: str = ""


class Step(BaseModel):
    id: str
    title: str
    description: str = ""
    status: StepStatus = "pending"
    result: Any = None
    error: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class RunMetadata(BaseModel):
    """Run-scoped values written once before the first stage and read by every stage."""

    model_config = ConfigDict(extra="allow")

    raw_text: str = ""
    language: Literal["en", "zh"] = "en"
    target_job: Optional[str] = None
    reference_date: date = Field(default_factory=date.today)


class PipelineContext(BaseModel):
    steps: List[Step] = Field(default_factory=list)
    current_step_index: int = 0
    is_processing: bool = False
    metadata: RunMetadata = Field(default_factory=RunMetadata)


class AnalysisState(BaseModel):
    # Stage outputs, filled in order
    parsed: Optional[ParsedResume] = None
    profile: Optional[ProfessionalProfile] = None
    skills: Optional[SkillAssessment] = None
    experience: Optional[ExperienceAssessment] = None
    education: Optional[EducationAssessment] = None
    overall: Optional[OverallAssessment] = None

    errors: List[str] = Field(default_factory=list)
