"""Layout preserving redaction for unauthenticated resume previews.

Every run of letters is swapped for pseudo-pronounceable gibberish of the same
length. Whitespace, punctuation, digits and bullet glyphs are left alone so the
redacted text keeps the exact shape of the original.
"""
from __future__ import annotations

import random
import re
from typing import Iterable, List, Optional

from .logger import get_logger
from .sections import PersonalInfo, Section

log = get_logger("redact")

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"

PHONE_MASK = "***-***-****"
LINKEDIN_MASK = "linkedin.com/in/********"
DEFAULT_TLD = "com"
EMAIL_LOCAL_LENGTH = 6
EMAIL_DOMAIN_LENGTH = 5

# Letter runs joined by a single apostrophe, hyphen or slash: "don't",
# "self-taught", "CI/CD".
WORD_PATTERN = re.compile(r"[a-zA-Z]+(?:['’/-][a-zA-Z]+)*")
JOINER_PATTERN = re.compile(r"(['’/-])")


def gibberish_word(length: int, rng: Optional[random.Random] = None) -> str:
    """Build a lower-case word alternating consonants and vowels."""

    if length <= 0:
        return ""
    rng = rng or random.Random()
    return "".join(
        rng.choice(CONSONANTS if index % 2 == 0 else VOWELS) for index in range(length)
    )


def _redact_part(part: str, rng: random.Random) -> str:
    replacement = gibberish_word(len(part), rng)
    # A short word can come out unchanged ("to"); draw again until it differs.
    while replacement == part.lower():
        replacement = gibberish_word(len(part), rng)
    if part[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def _redact_word(word: str, rng: random.Random) -> str:
    return "".join(
        part if JOINER_PATTERN.fullmatch(part) else _redact_part(part, rng)
        for part in JOINER_PATTERN.split(word)
        if part
    )


def redact_text(text: str, *, rng: Optional[random.Random] = None) -> str:
    """Replace every word in ``text`` with same-length gibberish.

    Joiners inside compound words are kept verbatim and a leading capital is
    preserved on each letter run. Pass ``rng`` to control the random source;
    by default a fresh, unseeded generator is used per call.
    """

    rng = rng or random.Random()
    return WORD_PATTERN.sub(lambda match: _redact_word(match.group(0), rng), text)


def redact_sections(
    sections: Iterable[Section], *, rng: Optional[random.Random] = None
) -> List[Section]:
    """Redact section contents. Titles are generic and kept as-is."""

    rng = rng or random.Random()
    redacted = [
        Section(title=section.title, content=redact_text(section.content, rng=rng))
        for section in sections
    ]
    log.debug(f"Redacted {len(redacted)} section(s)")
    return redacted


def _email_tld(email: str) -> str:
    _, dot, tld = email.rpartition(".")
    if not dot or not tld or "@" in tld:
        return DEFAULT_TLD
    return tld


def redact_email(email: str, *, rng: Optional[random.Random] = None) -> str:
    """Replace the local part and domain name, keeping the top-level domain."""

    rng = rng or random.Random()
    local = gibberish_word(EMAIL_LOCAL_LENGTH, rng)
    domain = gibberish_word(EMAIL_DOMAIN_LENGTH, rng)
    return f"{local}@{domain}.{_email_tld(email)}"


def redact_personal_info(
    info: PersonalInfo, *, rng: Optional[random.Random] = None
) -> PersonalInfo:
    """Redact contact details without inventing fields that were not given.

    Names and locations are redacted word by word, the e-mail keeps only its
    top-level domain, and phone and LinkedIn values become fixed masks.
    Absent or empty fields are passed through unchanged.
    """

    rng = rng or random.Random()
    return PersonalInfo(
        full_name=redact_text(info.full_name, rng=rng) if info.full_name else info.full_name,
        email=redact_email(info.email, rng=rng) if info.email else info.email,
        phone=PHONE_MASK if info.phone else info.phone,
        location=redact_text(info.location, rng=rng) if info.location else info.location,
        linkedin=LINKEDIN_MASK if info.linkedin else info.linkedin,
    )
