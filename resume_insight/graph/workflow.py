from __future__ import annotations
from typing import Any, Awaitable, Callable, Dict, List
from langgraph.graph import StateGraph, END
from ..state import AnalysisState, RunMetadata, StepDefinition
from ..orchestrator import SequentialOrchestrator
from ..inference import InferenceHook
from ..agents.cv_parser import parse_resume
from ..agents.profile_agent import build_professional_profile
from ..agents.skill_analyst import assess_skills
from ..agents.experience_analyst import assess_experience
from ..agents.education_analyst import assess_education
from ..agents.report_agent import generate_highlights

# (stage key, title, description), in execution order; step ids are step-0 .. step-5
STAGES = (
    ("parse", "Parse Resume Content",
     "Extract and structure basic information, skills, experience from the resume"),
    ("profile", "Generate Professional Profile",
     "Create AI-tagged professional profile with industry classification and experience summary"),
    ("skills", "Skills Assessment",
     "Analyze technical and soft skills proficiency and expertise areas"),
    ("experience", "Experience Evaluation",
     "Evaluate work experience relevance, career trajectory and key achievements"),
    ("education", "Education Assessment",
     "Extract educational background including institutions, degrees and specializations"),
    ("highlights", "Generate Highlights",
     "Generate comprehensive positive highlights and key strengths summary"),
)


def create_resume_analysis_steps() -> List[StepDefinition]:
    return [StepDefinition(title=title, description=description) for _, title, description in STAGES]


def build_graph(
    orchestrator: SequentialOrchestrator, inference: InferenceHook
) -> Callable[[AnalysisState], Awaitable[Any]]:
    step_ids = {key: f"step-{index}" for index, (key, _, _) in enumerate(STAGES)}

    async def run_stage(
        state: AnalysisState, stage: str, field: str, compute: Callable[[RunMetadata], Any]
    ) -> Dict[str, Any]:
        step_id = step_ids[stage]
        step = orchestrator.get_step(step_id)
        # A completed step is reused as-is on re-entry
        if step is not None and step.status == "completed":
            return {field: step.result}

        async def executor(step, context):
            await inference(stage)
            return compute(context.metadata)

        step = await orchestrator.run_step(step_id, executor)
        if step.status == "error":
            return {"errors": [*state.errors, f"{step.title}: {step.error}"]}
        return {field: step.result}

    async def parse_node(state: AnalysisState) -> Dict[str, Any]:
        return await run_stage(state, "parse", "parsed",
                               lambda m: parse_resume(m.raw_text, m.language, m.reference_date))

    async def profile_node(state: AnalysisState) -> Dict[str, Any]:
        return await run_stage(state, "profile", "profile",
                               lambda m: build_professional_profile(state.parsed, m.raw_text, m.language, m.reference_date))

    async def skills_node(state: AnalysisState) -> Dict[str, Any]:
        return await run_stage(state, "skills", "skills", lambda m: assess_skills(state.parsed))

    async def experience_node(state: AnalysisState) -> Dict[str, Any]:
        return await run_stage(state, "experience", "experience", lambda m: assess_experience(state.parsed))

    async def education_node(state: AnalysisState) -> Dict[str, Any]:
        return await run_stage(state, "education", "education", lambda m: assess_education(state.parsed))

    async def highlights_node(state: AnalysisState) -> Dict[str, Any]:
        return await run_stage(
            state, "highlights", "overall",
            lambda m: generate_highlights(
                m.language, state.skills, state.experience, state.education, state.profile.years_of_experience
            ),
        )

    def route(state: AnalysisState) -> str:
        return "halt" if state.errors else "next"

    g = StateGraph(AnalysisState)
    g.add_node("parse", parse_node)
    g.add_node("profile", profile_node)
    g.add_node("skills", skills_node)
    g.add_node("experience", experience_node)
    g.add_node("education", education_node)
    g.add_node("highlights", highlights_node)

    g.set_entry_point("parse")
    order = [key for key, _, _ in STAGES]
    for current, following in zip(order, order[1:]):
        g.add_conditional_edges(current, route, {"next": following, "halt": END})
    g.add_edge("highlights", END)

    app = g.compile()

    async def runner(state: AnalysisState) -> Any:
        return await app.ainvoke(state)

    return runner
