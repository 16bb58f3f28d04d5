from __future__ import annotations
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Literal, Optional

from .patterns import CJK_CHAR

CJK_THRESHOLD = 0.1
_ASCII_WORD = "A-Za-z0-9_"


def detect_language(text: str) -> Literal["en", "zh"]:
    """Share of CJK ideographs over the whole text; above 10% is the Chinese track."""
    if not text:
        return "en"
    ratio = len(CJK_CHAR.findall(text)) / len(text)
    return "zh" if ratio > CJK_THRESHOLD else "en"


@lru_cache(maxsize=512)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    # ASCII word boundaries: CJK keywords still match inside CJK runs, "C++" matches before a space
    return re.compile(rf"(?<![{_ASCII_WORD}]){re.escape(keyword)}(?![{_ASCII_WORD}])", re.IGNORECASE)


def contains_keyword(text: str, keyword: str) -> bool:
    return keyword_pattern(keyword).search(text) is not None


def count_keywords(text: str, keywords: Iterable[str]) -> int:
    return sum(len(keyword_pattern(k).findall(text)) for k in keywords)


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop repeats while keeping first-seen order."""
    return list(dict.fromkeys(items))


def non_blank_lines(text: str) -> List[str]:
    return [line for line in text.split("\n") if line.strip()]


def clean_text(text: str) -> str:
    """Normalize text coming out of a PDF/DOCX extractor before analysis."""
    s = text.replace("\r\n", "\n").replace("\r", "\n")
    s = re.sub(r"[ \t]+", " ", s)
    s = re.sub(r"(\d{4})\s*-\s*(\d{4})", r"\1-\2", s)
    s = re.sub(r"(\d{4})\s*-\s*now\b", r"\1-present", s, flags=re.I)
    s = re.sub(r"(\w+)\s*@\s*(\w+)\s*\.\s*(\w+)", r"\1@\2.\3", s)
    s = re.sub(r"\((\d{3})\)\s*(\d{3})\s*-?\s*(\d{4})", r"(\1) \2-\3", s)
    s = re.sub(r"(https?)\s*:\s*/\s*/\s*", r"\1://", s)
    lines = [line.strip() for line in s.split("\n")]
    return "\n".join(line for line in lines if line).strip()


def read_text_file(path: str) -> str:
    p = Path(path)
    return p.read_text(encoding="utf-8")


def pdf_to_text(path: str) -> Optional[str]:
    from pypdf import PdfReader
    from pypdf.errors import PdfReadError

    try:
        reader = PdfReader(path)
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PdfReadError, OSError):
        return None
    return "\n".join(pages).strip()


def load_cv(path: str) -> str:
    path_lower = path.lower()
    if path_lower.endswith(".txt") or path_lower.endswith(".md"):
        return read_text_file(path)
    if path_lower.endswith(".pdf"):
        txt = pdf_to_text(path)
        if txt:
            return txt
        raise RuntimeError("Could not extract text from the PDF. It may be image-based or encrypted.")
    raise ValueError("Unsupported resume format. Use .txt, .md or .pdf")
