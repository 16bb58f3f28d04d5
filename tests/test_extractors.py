import sys
import unittest
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.extractors.contact import extract_name, extract_personal_info  # noqa: E402
from resume_insight.extractors.education import extract_education  # noqa: E402
from resume_insight.extractors.experience import (  # noqa: E402
    extract_work_experience,
    iter_stated_durations,
    parse_numeral,
    split_date,
)
from resume_insight.extractors.projects import extract_projects  # noqa: E402
from resume_insight.extractors.skills import (  # noqa: E402
    extract_certifications,
    extract_languages,
    extract_skills,
)

TODAY = date(2024, 6, 1)


class ContactExtractionTests(unittest.TestCase):
    def test_latin_name_on_first_line(self):
        self.assertEqual(extract_name("Zhang Wei\nzhang@example.com"), "Zhang Wei")

    def test_header_lines_are_skipped(self):
        self.assertEqual(extract_name("个人简历\n张伟\n五年前端开发经验"), "张伟")

    def test_markdown_heading_name(self):
        self.assertEqual(extract_name("# 李明\n前端工程师"), "李明")

    def test_no_name_found(self):
        self.assertEqual(extract_name("2019-2021\nzhang@example.com"), "")

    def test_personal_info_fields(self):
        text = (
            "Zhang Wei\n"
            "zhang.wei@example.com | 13800138000\n"
            "github.com/zhangwei | linkedin.com/in/zhang-wei\n"
            "深圳\n"
        )
        info = extract_personal_info(text)
        self.assertEqual(info.name, "Zhang Wei")
        self.assertEqual(info.email, "zhang.wei@example.com")
        self.assertEqual(info.phone, "13800138000")
        self.assertEqual(info.github, "https://github.com/zhangwei")
        self.assertEqual(info.linkedin, "https://linkedin.com/in/zhang-wei")
        self.assertEqual(info.location, "深圳")
        self.assertIsNone(info.website)

    def test_website_skips_social_profiles(self):
        info = extract_personal_info("Jane Doe\nhttps://github.com/jane\nhttps://janedoe.dev/about\n")
        self.assertEqual(info.website, "https://janedoe.dev/about")


class EducationExtractionTests(unittest.TestCase):
    def test_latin_record(self):
        text = "Stanford University\nBachelor of Science in Computer Science, 2018\nGPA: 3.8"
        records = extract_education(text)
        self.assertGreaterEqual(len(records), 1)
        first = records[0]
        self.assertEqual(first.institution, "Stanford University")
        self.assertEqual(first.degree, "Bachelor of Science in Computer Science")
        self.assertEqual(first.major, "Computer Science")
        self.assertEqual(first.graduation_year, 2018)
        self.assertEqual(first.gpa, 3.8)

    def test_chinese_record(self):
        records = extract_education("北京大学 硕士 2015")
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].institution, "北京大学")
        self.assertEqual(records[0].degree, "硕士")
        self.assertEqual(records[0].graduation_year, 2015)

    def test_no_education_lines(self):
        self.assertEqual(extract_education("前端工程师\nReact, TypeScript"), [])


class ExperienceExtractionTests(unittest.TestCase):
    def test_parse_numeral(self):
        self.assertEqual(parse_numeral("五"), 5)
        self.assertEqual(parse_numeral("十"), 10)
        self.assertEqual(parse_numeral("7"), 7)
        self.assertEqual(parse_numeral("几"), 0)

    def test_split_date(self):
        self.assertEqual(split_date("2019.03"), (2019, 3))
        self.assertEqual(split_date("2020/11"), (2020, 11))
        self.assertEqual(split_date("2021"), (2021, None))
        self.assertEqual(split_date("至今"), (0, None))

    def test_stated_durations_in_both_languages(self):
        found = list(iter_stated_durations("五年前端开发经验，5 years of React experience"))
        self.assertEqual([years for _, years in found], [5, 5])

    def test_stated_duration_becomes_record(self):
        records = extract_work_experience("五年前端开发经验", "zh", TODAY)
        self.assertEqual(len(records), 1)
        record = records[0]
        self.assertEqual(record.company, "科技公司")
        self.assertEqual(record.position, "前端开发工程师")
        self.assertEqual(record.start_date, "2019")
        self.assertEqual(record.end_date, "2024")
        self.assertEqual(record.description, ["五年前端开发经验"])

    def test_english_stated_duration_position(self):
        records = extract_work_experience("6 years of frontend experience", "en", TODAY)
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].position, "Frontend Engineer")
        self.assertEqual(records[0].company, "Technology Company")
        self.assertEqual(records[0].start_date, "2018")

    def test_date_range_record(self):
        text = "2019.03 - 2021.06 ABC科技有限公司 前端工程师\n负责公司核心产品的前端开发工作"
        records = extract_work_experience(text, "zh", TODAY)
        self.assertGreaterEqual(len(records), 1)
        record = records[0]
        self.assertEqual(record.start_date, "2019.3")
        self.assertEqual(record.end_date, "2021.6")
        self.assertIn("ABC科技有限公司", record.company)
        self.assertEqual(record.position, "前端工程师")
        self.assertIn("负责公司核心产品的前端开发工作", record.description)

    def test_ongoing_range_uses_language_label(self):
        records = extract_work_experience("2020.01 - 至今 XYZ公司", "zh", TODAY)
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].start_date, "2020.1")
        self.assertEqual(records[0].end_date, "至今")

        records = extract_work_experience("2020.01 - present Acme Inc.", "en", TODAY)
        self.assertEqual(records[0].end_date, "Present")

    def test_ranges_before_1991_are_ignored(self):
        self.assertEqual(extract_work_experience("1985 - 1989 Old Corp", "en", TODAY), [])

    def test_reversed_range_is_ignored(self):
        self.assertEqual(extract_work_experience("2022 - 2020 Acme Inc.", "en", TODAY), [])


class ProjectExtractionTests(unittest.TestCase):
    def test_markdown_heading_project(self):
        text = "### Wallet Dashboard (2022)\n基于 React 和 TypeScript 的钱包后台\n"
        projects = extract_projects(text)
        self.assertEqual(len(projects), 1)
        self.assertEqual(projects[0].name, "Wallet Dashboard")
        self.assertEqual(projects[0].description, "基于 React 和 TypeScript 的钱包后台")
        self.assertEqual(projects[0].technologies, ["React", "TypeScript"])

    def test_section_stub_project(self):
        text = "项目经历\nNFT商城开发，使用 React, TypeScript\n"
        projects = extract_projects(text)
        self.assertEqual(len(projects), 1)
        self.assertEqual(projects[0].name, "NFT商城开发，使用 React, TypeScript")
        self.assertEqual(projects[0].technologies, ["React", "TypeScript"])

    def test_known_project_fallback(self):
        projects = extract_projects("负责NFT商城前端")
        self.assertEqual([p.name for p in projects], ["NFT商城"])
        self.assertEqual(projects[0].description, "NFT商城项目开发")

    def test_javascript_is_not_split_into_java(self):
        projects = extract_projects("### Dashboard rebuild\nWritten in JavaScript\n")
        self.assertEqual(projects[0].technologies, ["JavaScript"])


class SkillExtractionTests(unittest.TestCase):
    def test_technical_and_soft_groups(self):
        skills = extract_skills("Skilled in React, TypeScript and C++; strong communication")
        self.assertEqual(len(skills), 2)
        self.assertEqual(skills[0].category, "Technical Skills")
        self.assertEqual(skills[0].items, ["TypeScript", "React", "C++"])
        self.assertEqual(skills[0].proficiency, "intermediate")
        self.assertEqual(skills[1].category, "Soft Skills")
        self.assertEqual(skills[1].items, ["Communication"])

    def test_chinese_skill_terms(self):
        skills = extract_skills("熟悉前端开发，注重性能优化")
        self.assertEqual(skills[0].items, ["Frontend Development", "Performance Optimization"])

    def test_java_does_not_match_javascript(self):
        skills = extract_skills("JavaScript")
        self.assertEqual(skills[0].items, ["JavaScript"])

    def test_no_skills(self):
        self.assertEqual(extract_skills("nothing relevant here"), [])

    def test_certifications_and_languages(self):
        text = "AWS Certified Solutions Architect\nLanguages: English, 中文"
        self.assertIn("AWS Certified", extract_certifications(text))
        self.assertEqual(extract_languages(text), ["English", "中文"])


if __name__ == "__main__":
    unittest.main()
