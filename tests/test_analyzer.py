import sys
import unittest
from datetime import date
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.analyzer import ResumeAnalyzer  # noqa: E402
from resume_insight.errors import ResumeAnalysisError  # noqa: E402
from resume_insight.graph.workflow import STAGES, create_resume_analysis_steps  # noqa: E402
from resume_insight.agents.profile_agent import generate_professional_description  # noqa: E402
from resume_insight.inference import NoLatency  # noqa: E402
from resume_insight.schemas import ParsedResume, WorkExperience  # noqa: E402

TODAY = date(2024, 6, 1)

CHINESE_RESUME = (
    "Zhang Wei\n"
    "前端工程师 | 深圳\n"
    "五年前端开发经验\n"
    "项目经历\n"
    "NFT商城开发，使用 React, TypeScript\n"
)

ENGLISH_RESUME = (
    "John Smith\n"
    "john.smith@example.com | github.com/jsmith\n"
    "Senior Software Engineer\n"
    "Acme Inc. 2018.01 - 2021.06\n"
    "Built scalable backend services with Python and Docker\n"
    "Stanford University\n"
    "Bachelor of Science in Computer Science, 2017\n"
)


class RecordingLatency:
    def __init__(self):
        self.stages = []

    async def __call__(self, stage):
        self.stages.append(stage)


class WorkflowDefinitionTests(unittest.TestCase):
    def test_six_fixed_steps(self):
        titles = [d.title for d in create_resume_analysis_steps()]
        self.assertEqual(titles, [
            "Parse Resume Content",
            "Generate Professional Profile",
            "Skills Assessment",
            "Experience Evaluation",
            "Education Assessment",
            "Generate Highlights",
        ])
        self.assertTrue(all(d.description for d in create_resume_analysis_steps()))

    def test_fresh_analyzer_has_pending_steps(self):
        analyzer = ResumeAnalyzer(inference=NoLatency())
        context = analyzer.get_thinking_context()
        self.assertEqual([s.status for s in context.steps], ["pending"] * 6)
        self.assertIsNone(analyzer.get_analysis_result())


class ResumeAnalyzerTests(unittest.IsolatedAsyncioTestCase):
    async def test_chinese_resume_end_to_end(self):
        analyzer = ResumeAnalyzer(inference=NoLatency())
        result = await analyzer.analyze(CHINESE_RESUME, today=TODAY)

        self.assertEqual(result.language, "zh")
        profile = result.professional_profile
        self.assertEqual(profile.name, "Zhang Wei")
        self.assertEqual(profile.ai_tag, "developer")
        self.assertEqual(profile.years_of_experience, 5)
        self.assertEqual(profile.industry, "Technology")
        self.assertEqual(profile.title_roles, ["前端开发工程师"])
        self.assertEqual(profile.affiliation, "科技行业")
        self.assertEqual(profile.latest_education, "学历信息未提供")
        self.assertTrue(profile.description.startswith("我是一位前端开发工程师。拥有5年前端开发经验。"))
        self.assertIsNone(profile.twitter)
        self.assertIsNone(profile.photo_url)

        self.assertEqual(result.skill_assessment.technical_strengths, ["TypeScript", "React", "Frontend Development"])
        self.assertEqual(result.skill_assessment.soft_skills, [])
        self.assertEqual(result.experience_assessment.career_progression, "stable")
        self.assertEqual(result.overall_assessment.highlights, [
            "掌握3项核心技术技能",
            "在Technology领域有丰富经验",
            "拥有5年专业工作经验",
        ])

        context = analyzer.get_thinking_context()
        self.assertEqual([s.status for s in context.steps], ["completed"] * 6)
        self.assertEqual(context.current_step_index, 5)
        self.assertEqual(context.metadata.language, "zh")
        self.assertEqual(context.metadata.reference_date, TODAY)
        self.assertIs(analyzer.get_analysis_result(), result)

        parsed = context.steps[0].result
        self.assertEqual(parsed.personal_info.location, "深圳")
        self.assertEqual(len(parsed.projects), 1)
        self.assertEqual(parsed.projects[0].technologies, ["React", "TypeScript"])

    async def test_markdown_project_section(self):
        text = (
            "Zhang Wei\nzhang@example.com\n深圳\n五年前端开发经验\n"
            "### 项目经历\nNFT商城开发，使用 React, TypeScript"
        )
        analyzer = ResumeAnalyzer(inference=NoLatency())
        result = await analyzer.analyze(text, today=TODAY)

        self.assertEqual(result.language, "zh")
        self.assertEqual(result.professional_profile.name, "Zhang Wei")
        self.assertEqual(result.professional_profile.email, "zhang@example.com")
        self.assertEqual(result.professional_profile.years_of_experience, 5)
        self.assertEqual(result.professional_profile.ai_tag, "developer")

        projects = analyzer.get_thinking_context().steps[0].result.projects
        self.assertTrue(projects)
        self.assertNotEqual(projects[0].name, "NFT商城")
        self.assertIn("React", projects[0].technologies)
        self.assertIn("TypeScript", projects[0].technologies)

        highlights = result.overall_assessment.highlights
        self.assertIn("掌握3项核心技术技能", highlights)
        self.assertIn("拥有5年专业工作经验", highlights)

    async def test_english_resume_end_to_end(self):
        analyzer = ResumeAnalyzer(target_job="Backend Engineer", inference=NoLatency())
        result = await analyzer.analyze(ENGLISH_RESUME, today=TODAY)

        self.assertEqual(result.language, "en")
        profile = result.professional_profile
        self.assertEqual(profile.name, "John Smith")
        self.assertEqual(profile.email, "john.smith@example.com")
        self.assertEqual(profile.github, "https://github.com/jsmith")
        self.assertEqual(profile.title_roles, ["Senior Software Engineer"])
        self.assertEqual(profile.affiliation, "Acme Inc.")
        self.assertEqual(profile.years_of_experience, 3)
        self.assertEqual(profile.ai_tag, "developer")
        self.assertIn("Stanford University", profile.latest_education)
        self.assertTrue(profile.description.startswith(
            "I am a Senior Software Engineer currently working at Acme Inc. with 3 years of experience"
        ))

        self.assertEqual(result.education_assessment.institutions, ["Stanford University"])
        self.assertEqual(result.education_assessment.majors, ["Computer Science"])
        self.assertIn("Python", result.skill_assessment.technical_strengths)
        self.assertIn("3 years of professional experience", result.overall_assessment.highlights)
        self.assertLessEqual(len(result.overall_assessment.highlights), 6)
        self.assertEqual(analyzer.get_thinking_context().metadata.target_job, "Backend Engineer")

    async def test_inference_hook_runs_once_per_stage(self):
        latency = RecordingLatency()
        await ResumeAnalyzer(inference=latency).analyze(ENGLISH_RESUME, today=TODAY)
        self.assertEqual(latency.stages, [key for key, _, _ in STAGES])

    async def test_observer_sees_every_transition(self):
        events = []
        analyzer = ResumeAnalyzer(
            on_step_update=lambda step, context: events.append((step.id, step.status)),
            inference=NoLatency(),
        )
        await analyzer.analyze(CHINESE_RESUME, today=TODAY)

        self.assertEqual(len(events), 12)
        self.assertEqual(events[0], ("step-0", "processing"))
        self.assertEqual(events[-1], ("step-5", "completed"))

    async def test_stage_failure_raises_and_halts(self):
        analyzer = ResumeAnalyzer(inference=NoLatency())
        with patch("resume_insight.graph.workflow.assess_skills", side_effect=ValueError("skills broke")):
            with self.assertRaises(ResumeAnalysisError) as ctx:
                await analyzer.analyze(ENGLISH_RESUME, today=TODAY)

        self.assertEqual(ctx.exception.step_id, "step-2")
        self.assertEqual(ctx.exception.title, "Skills Assessment")
        self.assertIn("skills broke", str(ctx.exception))

        steps = analyzer.get_thinking_context().steps
        self.assertEqual(
            [s.status for s in steps],
            ["completed", "completed", "error", "pending", "pending", "pending"],
        )
        self.assertEqual(steps[2].error, "skills broke")
        self.assertIsNone(analyzer.get_analysis_result())

    async def test_resume_reuses_completed_steps(self):
        analyzer = ResumeAnalyzer(inference=NoLatency())
        with patch("resume_insight.graph.workflow.assess_skills", side_effect=ValueError("skills broke")):
            with self.assertRaises(ResumeAnalysisError):
                await analyzer.analyze(ENGLISH_RESUME, today=TODAY)

        before = analyzer.get_thinking_context().steps
        completed = [(s.id, s.timestamp, s.result) for s in before[:2]]

        with patch("resume_insight.graph.workflow.parse_resume") as parse:
            result = await analyzer.resume()
        parse.assert_not_called()

        steps = analyzer.get_thinking_context().steps
        self.assertEqual([s.status for s in steps], ["completed"] * 6)
        self.assertEqual([(s.id, s.timestamp, s.result) for s in steps[:2]], completed)
        self.assertIsNone(steps[2].error)
        self.assertEqual(result.professional_profile.name, "John Smith")
        self.assertIs(analyzer.get_analysis_result(), result)

    async def test_resume_matches_uninterrupted_run(self):
        analyzer = ResumeAnalyzer(inference=NoLatency())
        with patch("resume_insight.graph.workflow.generate_highlights", side_effect=RuntimeError("late failure")):
            with self.assertRaises(ResumeAnalysisError):
                await analyzer.analyze(CHINESE_RESUME, today=TODAY)
        resumed = await analyzer.resume()

        direct = await ResumeAnalyzer(inference=NoLatency()).analyze(CHINESE_RESUME, today=TODAY)
        self.assertEqual(resumed.model_dump(), direct.model_dump())

    async def test_resume_without_analysis_raises(self):
        with self.assertRaises(RuntimeError):
            await ResumeAnalyzer(inference=NoLatency()).resume()

    async def test_same_input_gives_same_result(self):
        first = await ResumeAnalyzer(inference=NoLatency()).analyze(ENGLISH_RESUME, today=TODAY)
        second = await ResumeAnalyzer(inference=NoLatency()).analyze(ENGLISH_RESUME, today=TODAY)
        self.assertEqual(first.model_dump(), second.model_dump())

    async def test_each_run_starts_from_pending_steps(self):
        analyzer = ResumeAnalyzer(inference=NoLatency())
        await analyzer.analyze(CHINESE_RESUME, today=TODAY)
        result = await analyzer.analyze(ENGLISH_RESUME, today=TODAY)
        self.assertEqual(result.professional_profile.name, "John Smith")


class ProfileDescriptionTests(unittest.TestCase):
    def _parsed(self, company, position):
        job = WorkExperience(company=company, position=position, start_date="2020", end_date="2021")
        return ParsedResume(work_experience=[job])

    def test_company_ending_in_period_is_not_doubled(self):
        description = generate_professional_description(self._parsed("Acme Inc.", "Engineer"), "en", 0)
        self.assertIn("currently working at Acme Inc. focused on", description)
        self.assertNotIn("..", description)

    def test_chinese_sentence_ends_once(self):
        description = generate_professional_description(self._parsed("Acme Co.", "前端工程师"), "zh", 0)
        self.assertEqual(description, "我是一位前端工程师，现任职于Acme Co。")


class SyncHostTests(unittest.TestCase):
    def test_analyze_sync(self):
        result = ResumeAnalyzer(inference=NoLatency()).analyze_sync(CHINESE_RESUME, today=TODAY)
        self.assertEqual(result.professional_profile.years_of_experience, 5)


if __name__ == "__main__":
    unittest.main()
