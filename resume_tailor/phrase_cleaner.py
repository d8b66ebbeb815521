"""Replace AI-sounding stock phrases with plainer wording."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .logger import get_logger
from .sections import Section
from .vocabulary import AI_PHRASE_REPLACEMENTS

log = get_logger("cleanup")


def _compile_replacements() -> Tuple[Tuple[str, str, re.Pattern[str]], ...]:
    # Longest first so "paradigm shift" is handled before "paradigm".
    ordered = sorted(AI_PHRASE_REPLACEMENTS, key=lambda item: len(item[0]), reverse=True)
    return tuple(
        (phrase, replacement, re.compile(re.escape(phrase), re.IGNORECASE))
        for phrase, replacement in ordered
    )


_REPLACEMENTS = _compile_replacements()

EM_DASH_PATTERN = re.compile("\\s*\u2014\\s*")
TRIPLE_HYPHEN_PATTERN = re.compile(r"\s*---\s*")
# Needs whitespace on both sides so flags like --verbose survive.
DOUBLE_HYPHEN_PATTERN = re.compile(r"\s+--\s+")
MULTI_SPACE_PATTERN = re.compile(r" {2,}")


@dataclass(frozen=True)
class CleanupResult:
    """Cleaned text plus the dictionary phrases that were replaced."""

    text: str
    replaced_phrases: Tuple[str, ...]
    replacement_count: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "text": self.text,
            "replacedPhrases": list(self.replaced_phrases),
            "replacementCount": self.replacement_count,
        }


@dataclass(frozen=True)
class SectionCleanupResult:
    """Cleaned sections with replacement stats aggregated across all of them."""

    sections: Tuple[Section, ...]
    total_replacements: int
    replaced_phrases: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "sections": [section.to_dict() for section in self.sections],
            "totalReplacements": self.total_replacements,
            "allReplacedPhrases": list(self.replaced_phrases),
        }


def match_case(original: str, replacement: str) -> str:
    """Capitalise ``replacement`` when ``original`` starts with a capital letter."""

    if not replacement or not original:
        return replacement
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def normalise_punctuation(text: str) -> str:
    """Turn em-dashes and dash runs into commas, then squeeze repeated spaces."""

    text = EM_DASH_PATTERN.sub(", ", text)
    text = TRIPLE_HYPHEN_PATTERN.sub(", ", text)
    text = DOUBLE_HYPHEN_PATTERN.sub(", ", text)
    return MULTI_SPACE_PATTERN.sub(" ", text).strip()


def clean_ai_phrases(text: str) -> CleanupResult:
    """Replace AI-sounding phrases in ``text`` with simpler alternatives.

    Matching is case-insensitive and the first letter's case of every match is
    carried over to its replacement. Running the function on its own output
    changes nothing.
    """

    cleaned = MULTI_SPACE_PATTERN.sub(" ", text)
    seen: Dict[str, None] = {}
    count = 0

    # A deletion can join text into a phrase that was already scanned, so
    # passes repeat until one makes no replacement.
    while True:
        pass_hits = 0
        for phrase, replacement, pattern in _REPLACEMENTS:
            cleaned, hits = pattern.subn(
                lambda match, replacement=replacement: match_case(match.group(0), replacement),
                cleaned,
            )
            if hits:
                seen.setdefault(phrase, None)
                pass_hits += hits
        cleaned = normalise_punctuation(cleaned)
        if not pass_hits:
            break
        count += pass_hits

    replaced = list(seen)
    if count:
        log.debug(f"Replaced {count} AI phrase occurrence(s): {', '.join(replaced)}")
    return CleanupResult(text=cleaned, replaced_phrases=tuple(replaced), replacement_count=count)


def clean_sections(sections: Iterable[Section]) -> SectionCleanupResult:
    """Apply :func:`clean_ai_phrases` to the content of every section.

    Titles are left untouched. Replaced phrases are deduplicated across
    sections in first-seen order.
    """

    cleaned_sections: List[Section] = []
    seen: Dict[str, None] = {}
    total = 0

    for section in sections:
        result = clean_ai_phrases(section.content)
        cleaned_sections.append(Section(title=section.title, content=result.text))
        total += result.replacement_count
        for phrase in result.replaced_phrases:
            seen.setdefault(phrase, None)

    log.debug(f"Cleaned {len(cleaned_sections)} section(s), {total} replacement(s)")
    return SectionCleanupResult(
        sections=tuple(cleaned_sections),
        total_replacements=total,
        replaced_phrases=tuple(seen),
    )
