"""Keyword matching, phrase cleanup and redaction for tailored resumes."""

from .matching import MatchComparison, MatchResult, calculate_match_score, compare_resumes
from .phrase_cleaner import CleanupResult, SectionCleanupResult, clean_ai_phrases, clean_sections
from .pipeline import TailorResponse, finalise_tailor_response, load_job_description, load_resume_text
from .preprocessing import extract_keywords, stem_word
from .redaction import redact_personal_info, redact_sections, redact_text
from .sections import PersonalInfo, Section

__all__ = [
    "CleanupResult",
    "MatchComparison",
    "MatchResult",
    "PersonalInfo",
    "Section",
    "SectionCleanupResult",
    "TailorResponse",
    "calculate_match_score",
    "clean_ai_phrases",
    "clean_sections",
    "compare_resumes",
    "extract_keywords",
    "finalise_tailor_response",
    "load_job_description",
    "load_resume_text",
    "redact_personal_info",
    "redact_sections",
    "redact_text",
    "stem_word",
]
