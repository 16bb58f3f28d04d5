from __future__ import annotations
import os
from pathlib import Path
import sys
import tempfile
import streamlit as st
BASE_DIR = Path(__file__).parent.resolve()
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from resume_insight.analyzer import ResumeAnalyzer
from resume_insight.errors import ResumeAnalysisError
from resume_insight.inference import get_inference_hook
from resume_insight.schemas import AI_TAG_DESCRIPTIONS
from resume_insight.utils import clean_text, load_cv
from dotenv import load_dotenv

STATUS_ICONS = {"pending": "⏳", "processing": "🔄", "completed": "✅", "error": "❌"}


def render_result(result):
    profile = result.professional_profile
    st.subheader(profile.name)
    st.caption(f"{', '.join(profile.title_roles)} · {profile.affiliation} · {profile.ai_tag}")
    st.write(profile.description)
    st.caption(AI_TAG_DESCRIPTIONS[result.language][profile.ai_tag])

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Years of experience", profile.years_of_experience)
        st.markdown("**Technical strengths**")
        st.write(", ".join(result.skill_assessment.technical_strengths) or "-")
        st.markdown("**Soft skills**")
        st.write(", ".join(result.skill_assessment.soft_skills) or "-")
    with col2:
        st.metric("Industry", profile.industry)
        st.markdown("**Education**")
        st.write(profile.latest_education)
        st.markdown("**Career progression**")
        st.write(result.experience_assessment.career_progression)

    st.markdown("**Highlights**")
    for line in result.overall_assessment.highlights:
        st.markdown(f"- {line}")

    st.download_button(
        label="Download as .json",
        data=result.model_dump_json(indent=2).encode("utf-8"),
        file_name="analysis.json",
        mime="application/json",
    )


def main():
    load_dotenv()
    st.set_page_config(page_title="Resume Insight", page_icon="📄", layout="centered")
    st.title("Resume Insight")
    st.caption("Step-by-step analysis of a resume into a structured professional profile.")

    with st.sidebar:
        target_job = st.text_input("Target job (optional)", placeholder="e.g., Frontend Engineer")
        latency = st.selectbox("Latency", options=["auto", "simulated", "instant"], index=0)
        uploaded = st.file_uploader("Upload resume (.pdf or .txt)", type=["pdf", "txt"], accept_multiple_files=False)
        run = st.button("Run analysis")

    if not run:
        return
    if not uploaded:
        st.warning("Please upload a resume file (.pdf or .txt).")
        return

    # Persist to a temp file with the correct suffix
    suffix = "." + uploaded.name.split(".")[-1].lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
        tmp.write(uploaded.getvalue())
        tmp_path = tmp.name
    try:
        text = clean_text(load_cv(tmp_path))
    except (RuntimeError, ValueError) as e:
        st.error(str(e))
        return
    finally:
        os.unlink(tmp_path)

    placeholders = {}

    def show_step(step, context):
        slot = placeholders.get(step.id)
        if slot is None:
            return
        line = f"{STATUS_ICONS[step.status]} **{step.title}**: {step.description}"
        if step.error:
            line += f"  \n`{step.error}`"
        slot.markdown(line)

    analyzer = ResumeAnalyzer(
        target_job=target_job or None,
        on_step_update=show_step,
        inference=get_inference_hook(latency),
    )
    for step in analyzer.get_thinking_context().steps:
        placeholders[step.id] = st.empty()
        placeholders[step.id].markdown(f"{STATUS_ICONS[step.status]} {step.title}")

    try:
        result = analyzer.analyze_sync(text)
    except ResumeAnalysisError as e:
        st.error(f"Analysis failed: {e}")
        return

    render_result(result)


if __name__ == "__main__":
    main()
