"""Streamlit interface for the resume tailoring helpers."""
from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import streamlit as st
from streamlit.runtime.uploaded_file_manager import UploadedFile

from resume_tailor import matching
from resume_tailor.config import Settings
from resume_tailor.documents import read_document
from resume_tailor.exceptions import ResumeTailorError
from resume_tailor.logger import setup_logger
from resume_tailor.phrase_cleaner import clean_ai_phrases
from resume_tailor.pipeline import validate_input_length
from resume_tailor.redaction import redact_text


def _extract_uploaded_text(uploaded_file: UploadedFile) -> str:
    """Write an upload to a temporary file and read its text content."""

    suffix = Path(uploaded_file.name).suffix.lower()
    with NamedTemporaryFile(delete=False, suffix=suffix) as temp_file:
        temp_file.write(uploaded_file.getbuffer())
        temp_path = Path(temp_file.name)

    try:
        return read_document(temp_path)
    finally:
        temp_path.unlink(missing_ok=True)


def _text_or_upload(label: str, key: str) -> str:
    """Render a text area plus optional upload; the upload wins when present."""

    text = st.text_area(label, height=200, key=f"{key}_text")
    uploaded = st.file_uploader(
        f"{label} file (optional)",
        type=["pdf", "docx", "txt"],
        accept_multiple_files=False,
        key=f"{key}_file",
    )
    if uploaded is None:
        return text
    return _extract_uploaded_text(uploaded)


def _parse_keyword_input(raw: str) -> list[str]:
    return [part for part in raw.replace("\n", ",").split(",") if part.strip()]


def _render_match(label: str, result: matching.MatchResult, settings: Settings) -> None:
    band = matching.score_band(
        result.match_percentage, strong=settings.strong_match, fair=settings.fair_match
    )
    st.metric(label, f"{result.match_percentage}", help=f"{band} match")


def main() -> None:
    settings = Settings.from_env()
    setup_logger(settings.log_level, settings.log_dir)

    st.set_page_config(page_title="Resume Tailor", page_icon="📄")
    st.title("Resume Tailor")
    st.write(
        "Compare a resume before and after tailoring against a job description, "
        "clean up AI-sounding phrasing, and preview the redacted teaser."
    )

    try:
        job_description = _text_or_upload("Job description", "jd")
        original_resume = _text_or_upload("Original resume", "original")
        tailored_resume = _text_or_upload("Tailored resume", "tailored")
    except ResumeTailorError as exc:
        st.error(str(exc))
        return

    keyword_input = st.text_area(
        "Pre-extracted keywords (optional, comma or newline separated)", height=80
    )
    show_teaser = st.checkbox("Show redacted teaser preview")

    if not st.button("Analyse", type="primary"):
        return

    if not job_description.strip():
        st.error("Please provide a job description before running the analysis.")
        return
    if not original_resume.strip():
        st.error("Please provide the original resume.")
        return

    try:
        for field, value in (
            ("job description", job_description),
            ("resume", original_resume),
            ("tailored resume", tailored_resume),
        ):
            validate_input_length(value, field=field, limit=settings.max_input_length)
    except ResumeTailorError as exc:
        st.error(str(exc))
        return

    cleanup = clean_ai_phrases(tailored_resume or original_resume)
    comparison = matching.compare_resumes(
        job_description,
        original_resume,
        cleanup.text,
        llm_keywords=_parse_keyword_input(keyword_input),
    )

    st.subheader("JD match score")
    col1, col2 = st.columns(2)
    with col1:
        _render_match("Before", comparison.before, settings)
    with col2:
        _render_match("After", comparison.after, settings)
    if comparison.score_improvement > 0:
        st.success(f"+{comparison.score_improvement} after tailoring")

    st.caption(
        f"Scores are the share of {comparison.after.total_keywords} "
        f"{comparison.keyword_source}-extracted keywords found in each resume."
    )
    st.dataframe(
        [
            {"Keyword": keyword, "Matched": keyword in comparison.after.matched_keywords}
            for keyword in sorted(
                comparison.after.matched_keywords + comparison.after.missed_keywords
            )
        ],
        use_container_width=True,
    )

    st.subheader("Cleaned resume")
    if cleanup.replacement_count:
        st.caption(
            f"{cleanup.replacement_count} replacement(s): {', '.join(cleanup.replaced_phrases)}"
        )
    st.text(cleanup.text)
    st.download_button(
        label="Download cleaned resume",
        data=cleanup.text,
        file_name="tailored_resume.txt",
        mime="text/plain",
    )

    if show_teaser:
        st.subheader("Teaser preview")
        st.text(redact_text(cleanup.text))


if __name__ == "__main__":  # pragma: no cover - Streamlit entry point
    main()
