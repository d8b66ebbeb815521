"""High level orchestration helpers for the resume tailoring workflow."""
from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from .config import DEFAULT_MAX_INPUT_LENGTH
from .documents import read_document
from .exceptions import InputTooLargeError, InvalidTailorResponseError
from .logger import get_logger
from .phrase_cleaner import clean_sections
from .redaction import redact_personal_info, redact_sections
from .sections import PersonalInfo, Section

log = get_logger("pipeline")


@dataclass(frozen=True)
class TailorResponse:
    """A tailoring payload after cleanup, and redaction when required."""

    sections: Tuple[Section, ...]
    personal_info: Optional[PersonalInfo]
    cover_letter: Optional[str]
    redacted: bool
    total_replacements: int
    replaced_phrases: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        """Serialise for the client. Absent optional fields are omitted."""

        payload: Dict[str, object] = {
            "sections": [section.to_dict() for section in self.sections],
            "redacted": self.redacted,
            "cleanup": {
                "totalReplacements": self.total_replacements,
                "replacedPhrases": list(self.replaced_phrases),
            },
        }
        if self.personal_info is not None:
            payload["personalInfo"] = self.personal_info.to_dict()
        if self.cover_letter is not None:
            payload["coverLetter"] = self.cover_letter
        return payload


def load_job_description(path: Path | str) -> str:
    """Load a job description from a text, PDF or Word file."""

    return read_document(path)


def load_resume_text(path: Path | str) -> str:
    """Load a resume from a text, PDF or Word file."""

    return read_document(path)


def validate_input_length(
    text: str, *, field: str, limit: int = DEFAULT_MAX_INPUT_LENGTH
) -> str:
    """Return ``text`` unchanged, or raise if it is longer than ``limit``."""

    if len(text) > limit:
        raise InputTooLargeError(field, len(text), limit)
    return text


def parse_sections(payload: Mapping[str, object]) -> List[Section]:
    """Validate and convert the ``sections`` list of a tailoring payload.

    Raises
    ------
    InvalidTailorResponseError
        If ``sections`` is missing or empty, or any entry lacks a string
        ``title`` or ``content``.
    """

    raw_sections = payload.get("sections")
    if not isinstance(raw_sections, list) or not raw_sections:
        raise InvalidTailorResponseError("Tailoring response has no sections.")

    sections: List[Section] = []
    for index, raw in enumerate(raw_sections):
        if (
            not isinstance(raw, Mapping)
            or not isinstance(raw.get("title"), str)
            or not isinstance(raw.get("content"), str)
        ):
            raise InvalidTailorResponseError(
                f"Section {index} must have string 'title' and 'content' fields."
            )
        sections.append(Section(title=raw["title"], content=raw["content"]))
    return sections


def _parse_cover_letter(payload: Mapping[str, object]) -> Optional[str]:
    cover_letter = payload.get("coverLetter")
    if cover_letter is not None and not isinstance(cover_letter, str):
        raise InvalidTailorResponseError("'coverLetter' must be a string when present.")
    return cover_letter


def _parse_personal_info(payload: Mapping[str, object]) -> Optional[PersonalInfo]:
    raw = payload.get("personalInfo")
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise InvalidTailorResponseError("'personalInfo' must be an object when present.")
    return PersonalInfo.from_dict(raw)


def finalise_tailor_response(
    payload: Mapping[str, object],
    *,
    authenticated: bool,
    rng: Optional[random.Random] = None,
) -> TailorResponse:
    """Clean a tailoring payload and redact it for anonymous callers.

    Sections always go through AI phrase cleanup. When the caller is not
    authenticated, the cleaned sections and personal info are redacted and
    the cover letter is dropped rather than redacted.
    """

    sections = parse_sections(payload)
    cover_letter = _parse_cover_letter(payload)
    personal_info = _parse_personal_info(payload)

    cleanup = clean_sections(sections)
    cleaned: Tuple[Section, ...] = cleanup.sections

    if not authenticated:
        rng = rng or random.Random()
        cleaned = tuple(redact_sections(cleaned, rng=rng))
        if personal_info is not None:
            personal_info = redact_personal_info(personal_info, rng=rng)
        if cover_letter is not None:
            log.debug("Dropping cover letter from unauthenticated response")
        cover_letter = None

    log.info(
        f"Finalised {len(cleaned)} section(s) "
        f"({'redacted' if not authenticated else 'full'} response)"
    )
    return TailorResponse(
        sections=cleaned,
        personal_info=personal_info,
        cover_letter=cover_letter,
        redacted=not authenticated,
        total_replacements=cleanup.total_replacements,
        replaced_phrases=cleanup.replaced_phrases,
    )
