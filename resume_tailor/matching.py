"""Lexical resume to job description match scoring."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from . import preprocessing
from .config import DEFAULT_FAIR_MATCH, DEFAULT_STRONG_MATCH
from .logger import get_logger

log = get_logger("match")

KEYWORD_SOURCE_LLM = "llm"
KEYWORD_SOURCE_REGEX = "regex"


@dataclass(frozen=True)
class MatchResult:
    """How many job description keywords a resume covers."""

    matched_keywords: Tuple[str, ...]
    missed_keywords: Tuple[str, ...]
    match_count: int
    total_keywords: int
    match_percentage: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "matchedKeywords": list(self.matched_keywords),
            "missedKeywords": list(self.missed_keywords),
            "matchCount": self.match_count,
            "totalKeywords": self.total_keywords,
            "matchPercentage": self.match_percentage,
        }


@dataclass(frozen=True)
class MatchComparison:
    """Match results for a resume before and after tailoring."""

    keyword_source: str
    before: MatchResult
    after: MatchResult

    @property
    def improvement(self) -> int:
        """Number of additional keywords matched after tailoring."""
        return self.after.match_count - self.before.match_count

    @property
    def score_improvement(self) -> int:
        return self.after.match_percentage - self.before.match_percentage

    def to_dict(self) -> Dict[str, object]:
        return {
            "keywordSource": self.keyword_source,
            "before": self.before.to_dict(),
            "after": self.after.to_dict(),
            "improvement": self.improvement,
            "scoreImprovement": self.score_improvement,
        }


def _is_compound(keyword: str) -> bool:
    return " " in keyword or "/" in keyword


def _match_percentage(match_count: int, total_keywords: int) -> int:
    if total_keywords == 0:
        return 0
    # Half-up rounding; Python's round() would send 12.5 to 12.
    return int(100 * match_count / total_keywords + 0.5)


def calculate_match_score(resume_text: str, jd_keywords: Iterable[str]) -> MatchResult:
    """Compare resume text against a set of job description keywords.

    Parameters
    ----------
    resume_text:
        Raw resume text.
    jd_keywords:
        Pre-normalised (lower-case) keywords, typically the output of
        :func:`~resume_tailor.preprocessing.extract_keywords` applied to a job
        description. Duplicates are ignored.

    Keywords containing a space or ``/`` match when they occur anywhere in the
    lower-cased resume text. Single words match exactly against the resume's
    own keywords, or by equal stems.
    """

    keywords: Set[str] = set(jd_keywords)
    resume_lower = resume_text.lower()
    resume_keywords = preprocessing.extract_keywords(resume_text)
    resume_stems = {preprocessing.stem_word(keyword) for keyword in resume_keywords}

    matched: List[str] = []
    missed: List[str] = []
    for keyword in keywords:
        if _is_compound(keyword):
            found = keyword in resume_lower
        else:
            found = (
                keyword in resume_keywords
                or preprocessing.stem_word(keyword) in resume_stems
            )
        (matched if found else missed).append(keyword)

    result = MatchResult(
        matched_keywords=tuple(sorted(matched)),
        missed_keywords=tuple(sorted(missed)),
        match_count=len(matched),
        total_keywords=len(keywords),
        match_percentage=_match_percentage(len(matched), len(keywords)),
    )
    log.debug(
        f"Matched {result.match_count}/{result.total_keywords} keywords "
        f"({result.match_percentage}%)"
    )
    return result


def resolve_job_keywords(
    job_description: str, llm_keywords: Optional[Sequence[object]] = None
) -> Tuple[Set[str], str]:
    """Pick the keyword set used for scoring and report where it came from.

    A non-empty externally extracted keyword list takes precedence over
    regex extraction from the job description text.
    """

    if llm_keywords:
        normalised = preprocessing.normalise_keywords(llm_keywords)
        if normalised:
            return normalised, KEYWORD_SOURCE_LLM
    return preprocessing.extract_keywords(job_description), KEYWORD_SOURCE_REGEX


def compare_resumes(
    job_description: str,
    original_resume: str,
    tailored_resume: str,
    *,
    llm_keywords: Optional[Sequence[object]] = None,
) -> MatchComparison:
    """Score an original and a tailored resume against the same keyword set."""

    keywords, source = resolve_job_keywords(job_description, llm_keywords)
    log.debug(f"Using {source}-extracted keywords ({len(keywords)} total)")

    comparison = MatchComparison(
        keyword_source=source,
        before=calculate_match_score(original_resume, keywords),
        after=calculate_match_score(tailored_resume, keywords),
    )
    if comparison.after.missed_keywords:
        log.debug(f"Unmatched keywords: {', '.join(comparison.after.missed_keywords)}")
    return comparison


def score_band(
    percentage: int,
    *,
    strong: int = DEFAULT_STRONG_MATCH,
    fair: int = DEFAULT_FAIR_MATCH,
) -> str:
    """Classify a match percentage as ``"strong"``, ``"fair"`` or ``"weak"``."""

    if percentage >= strong:
        return "strong"
    if percentage >= fair:
        return "fair"
    return "weak"
