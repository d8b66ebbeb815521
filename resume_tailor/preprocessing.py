"""Text normalisation, keyword extraction and stemming helpers."""
from __future__ import annotations

import re
from typing import Iterable, List, Set

from .logger import get_logger
from .vocabulary import (
    GENERIC_COMPOUND_PREFIXES,
    GENERIC_COMPOUND_SUFFIXES,
    KNOWN_PHRASES,
    MIN_WORD_LENGTH,
    SHORT_KEYWORD_ALLOWLIST,
    STEM_SUFFIXES,
    STOP_WORDS,
)

log = get_logger("keywords")

# Anything outside this class separates tokens; keeps "node.js", "c++", "ci/cd".
TOKEN_SPLIT_PATTERN = re.compile(r"[^a-z0-9#+./-]+")
EDGE_PUNCTUATION_PATTERN = re.compile(r"^[.-]+|[.-]+$")
NUMERIC_PATTERN = re.compile(r"^\d+$")


def tokenize(text: str) -> List[str]:
    """Split lower-cased text into raw candidate tokens.

    Leading and trailing dots and hyphens are trimmed from each token, and
    empty tokens are discarded. No stop word filtering happens here.
    """

    tokens = []
    for raw in TOKEN_SPLIT_PATTERN.split(text.lower()):
        token = EDGE_PUNCTUATION_PATTERN.sub("", raw)
        if token:
            tokens.append(token)
    return tokens


def is_generic_compound(token: str) -> bool:
    """Return ``True`` for hyphenated filler such as ``ai-enabled`` or ``on-call``."""

    if "-" not in token:
        return False

    parts = [part for part in token.split("-") if part]
    if not parts:
        return False

    if all(part in STOP_WORDS or len(part) < MIN_WORD_LENGTH for part in parts):
        return True

    return parts[0] in GENERIC_COMPOUND_PREFIXES or parts[-1] in GENERIC_COMPOUND_SUFFIXES


def _is_significant(token: str) -> bool:
    if NUMERIC_PATTERN.match(token) or token in STOP_WORDS:
        return False
    if len(token) < MIN_WORD_LENGTH and token not in SHORT_KEYWORD_ALLOWLIST:
        return False
    return not is_generic_compound(token)


def extract_keywords(text: str) -> Set[str]:
    """Extract the significant keywords and known phrases contained in ``text``.

    Known multi-word phrases are detected first by a plain substring test on
    the lower-cased text. The remaining single tokens are kept unless they are
    purely numeric, stop words, generic hyphenated compounds, or shorter than
    three characters without being on the short keyword allowlist.
    """

    lower_text = text.lower()
    keywords: Set[str] = {phrase for phrase in KNOWN_PHRASES if phrase in lower_text}
    keywords.update(token for token in tokenize(lower_text) if _is_significant(token))

    log.debug(f"Extracted {len(keywords)} keywords from {len(text)} characters")
    return keywords


def stem_word(word: str) -> str:
    """Reduce a lower-case token to a heuristic root.

    Short words and allowlisted abbreviations are returned as-is. Otherwise the
    first suffix in :data:`~resume_tailor.vocabulary.STEM_SUFFIXES` that leaves
    a stem of at least three characters is removed. Failing that, a plural
    ``s`` is dropped unless the word ends in ``ss``, ``us`` or ``is`` or the
    result would be four characters or fewer.
    """

    if len(word) <= 4 or word in SHORT_KEYWORD_ALLOWLIST:
        return word

    for suffix in STEM_SUFFIXES:
        if word.endswith(suffix) and len(word) - len(suffix) >= 3:
            return word[: -len(suffix)]

    if word.endswith("s") and not word.endswith(("ss", "us", "is")) and len(word) - 1 > 4:
        return word[:-1]

    return word


def normalise_keywords(keywords: Iterable[object]) -> Set[str]:
    """Lower-case, trim and deduplicate an externally supplied keyword list.

    Non-string and blank entries are dropped.
    """

    normalised = set()
    for keyword in keywords:
        if not isinstance(keyword, str):
            continue
        cleaned = keyword.strip().lower()
        if cleaned:
            normalised.add(cleaned)
    return normalised
