from __future__ import annotations
import asyncio
import logging
from datetime import date
from typing import Optional

from .errors import ResumeAnalysisError
from .graph.workflow import build_graph, create_resume_analysis_steps
from .inference import InferenceHook, get_inference_hook
from .orchestrator import SequentialOrchestrator, StepObserver
from .schemas import ResumeAnalysisResult
from .state import AnalysisState, PipelineContext, RunMetadata
from .utils import detect_language

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """Six-stage résumé analysis run through a ``SequentialOrchestrator``.

    Each call to :meth:`analyze` starts from a fresh set of pending steps. The
    step list of the latest run stays available through
    :meth:`get_thinking_context`, including after a failure.
    """

    def __init__(
        self,
        target_job: Optional[str] = None,
        on_step_update: Optional[StepObserver] = None,
        inference: Optional[InferenceHook] = None,
    ):
        self.target_job = target_job
        self._on_step_update = on_step_update
        self._inference = inference
        self._orchestrator = self._new_orchestrator(RunMetadata(target_job=target_job))
        self._result: Optional[ResumeAnalysisResult] = None

    def _new_orchestrator(self, metadata: RunMetadata) -> SequentialOrchestrator:
        return SequentialOrchestrator(
            create_resume_analysis_steps(),
            on_step_update=self._on_step_update,
            metadata=metadata,
        )

    async def analyze(self, text: str, today: Optional[date] = None) -> ResumeAnalysisResult:
        language = detect_language(text)
        metadata = RunMetadata(
            raw_text=text,
            language=language,
            target_job=self.target_job,
            reference_date=today or date.today(),
        )
        self._orchestrator = self._new_orchestrator(metadata)
        self._result = None
        logger.info(f"Analyzing resume ({len(text)} chars, language={language})")
        return await self._run()

    async def resume(self) -> ResumeAnalysisResult:
        """Re-run the latest analysis from its failed step.

        Steps that already completed keep their results and timestamps and
        are not executed again.
        """
        metadata = self._orchestrator.get_metadata()
        if not metadata.raw_text:
            raise RuntimeError("Nothing to resume: call analyze() first.")
        if self._result is not None:
            return self._result
        logger.info(f"Resuming analysis at {self._orchestrator.get_current_step().id}")
        return await self._run()

    async def _run(self) -> ResumeAnalysisResult:
        language = self._orchestrator.get_metadata("language")
        inference = self._inference or get_inference_hook()
        run = build_graph(self._orchestrator, inference)
        final = await run(AnalysisState())
        # LangGraph may hand back a plain dict
        if isinstance(final, dict):
            final = AnalysisState.model_validate(final)

        failed = self._orchestrator.failed_step
        if failed is not None:
            raise ResumeAnalysisError(failed.id, failed.title, failed.error or "")
        if final.errors:
            raise ResumeAnalysisError("", "Resume analysis", "; ".join(final.errors))

        self._result = ResumeAnalysisResult(
            professional_profile=final.profile,
            skill_assessment=final.skills,
            experience_assessment=final.experience,
            education_assessment=final.education,
            overall_assessment=final.overall,
            language=language,
        )
        logger.info(
            f"Analysis complete: {final.profile.ai_tag}, "
            f"{final.profile.years_of_experience} years, {len(final.overall.highlights)} highlights"
        )
        return self._result

    def analyze_sync(self, text: str, today: Optional[date] = None) -> ResumeAnalysisResult:
        return asyncio.run(self.analyze(text, today=today))

    def get_thinking_context(self) -> PipelineContext:
        return self._orchestrator.get_context()

    def get_analysis_result(self) -> Optional[ResumeAnalysisResult]:
        return self._result
