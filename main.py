from __future__ import annotations
import argparse
import logging
import os
from pathlib import Path
from dotenv import load_dotenv
import sys
from pathlib import Path as _P
BASE_DIR = _P(__file__).parent.resolve()
sys.path.insert(0, str(BASE_DIR))
from resume_insight.analyzer import ResumeAnalyzer
from resume_insight.errors import ResumeAnalysisError
from resume_insight.inference import get_inference_hook
from resume_insight.utils import clean_text, load_cv

STATUS_MARKS = {"processing": "...", "completed": "ok", "error": "!!", "pending": "  "}


def print_step(step, context):
    total = len(context.steps)
    index = int(step.id.split("-")[-1]) + 1
    line = f"[{STATUS_MARKS[step.status]}] {index}/{total} {step.title}"
    if step.error:
        line += f": {step.error}"
    print(line)


def main():
    load_dotenv()  # load .env if exists
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    parser = argparse.ArgumentParser(description="Resume Insight: staged resume analysis")
    parser.add_argument("--cv", required=True, help="Path to resume file (.txt, .md or .pdf)")
    parser.add_argument("--target-job", default=None, help="Target job, e.g. 'Frontend Engineer'")
    parser.add_argument("--out", default="analysis.json", help="Output JSON path")
    parser.add_argument("--latency", default="auto", choices=["auto", "simulated", "instant"],
                        help="Simulated inference latency per stage")
    args = parser.parse_args()

    text = clean_text(load_cv(args.cv))
    analyzer = ResumeAnalyzer(
        target_job=args.target_job,
        on_step_update=print_step,
        inference=get_inference_hook(args.latency),
    )
    try:
        result = analyzer.analyze_sync(text)
    except ResumeAnalysisError as e:
        print(f"[ERR] {e}")
        sys.exit(1)

    out_path = Path(args.out)
    out_path.write_text(result.model_dump_json(indent=2), encoding="utf-8")
    print(f"[OK] Analysis written to: {out_path.resolve()}")


if __name__ == "__main__":
    main()
