from __future__ import annotations

import pytest

from resume_tailor import preprocessing
from resume_tailor.vocabulary import STOP_WORDS

SAMPLE_TEXTS = [
    "",
    "React TypeScript Node.js Python",
    "We are looking for a Senior Engineer with 5+ years of experience in Go, AWS and CI/CD.",
    "Developed and managed scalable React applications in Vancouver, British Columbia.",
    "Responsibilities include building real-time data pipeline tooling (Kafka, Spark) -- 2024",
    "• Led team of 12 engineers\n• Built C++ and C# services on-call ai-enabled",
]


def test_extract_keywords_returns_normalised_set():
    assert preprocessing.extract_keywords("React TypeScript Node.js Python") == {
        "react",
        "typescript",
        "node.js",
        "python",
    }


def test_extract_keywords_filters_stop_words():
    keywords = preprocessing.extract_keywords("the role requires strong experience with React")
    assert "the" not in keywords
    assert "role" not in keywords
    assert "strong" not in keywords
    assert "experience" not in keywords
    assert "react" in keywords


def test_extract_keywords_filters_resume_generic_words():
    keywords = preprocessing.extract_keywords("Developed and managed scalable React applications")
    assert "developed" not in keywords
    assert "managed" not in keywords
    assert {"react", "scalable"} <= keywords


def test_extract_keywords_detects_known_phrases():
    keywords = preprocessing.extract_keywords(
        "Built real-time distributed systems with server-side rendering, machine learning and CI/CD"
    )
    assert {
        "real-time",
        "distributed systems",
        "server-side rendering",
        "machine learning",
        "ci/cd",
    } <= keywords


def test_known_phrases_match_as_plain_substrings():
    # "draws" contains "aws"; phrase detection is not word-boundary aware.
    keywords = preprocessing.extract_keywords("She draws well")
    assert "aws" in keywords
    assert "draws" in keywords


def test_extract_keywords_drops_pure_numbers():
    keywords = preprocessing.extract_keywords("5 years of React experience 2024")
    assert "5" not in keywords
    assert "2024" not in keywords
    assert "react" in keywords


def test_extract_keywords_is_case_insensitive():
    keywords = preprocessing.extract_keywords("React TYPESCRIPT Node.js")
    assert {"react", "typescript", "node.js"} <= keywords


def test_extract_keywords_keeps_allowlisted_short_tokens():
    keywords = preprocessing.extract_keywords("Go R C AI ML CI CD")
    assert {"go", "r", "c", "ai", "ml", "ci", "cd"} <= keywords


def test_extract_keywords_drops_other_short_tokens():
    keywords = preprocessing.extract_keywords("js ts px React")
    assert keywords == {"react"}


def test_extract_keywords_keeps_symbol_heavy_tech_tokens():
    keywords = preprocessing.extract_keywords("Experience with C++, C#, Node.js and GraphQL APIs.")
    assert {"c++", "c#", "node.js", "graphql", "apis"} <= keywords


@pytest.mark.parametrize("text", ["", "   ", "the and or but if with for"])
def test_extract_keywords_empty_results(text):
    assert preprocessing.extract_keywords(text) == set()


@pytest.mark.parametrize(
    "text",
    [
        "Anyone can run this first available area currently",
        "applicant applicants applying authorized encouraged employment hire rotation",
        "impactful initiatives insights leadership ownership foster proactively",
        "Alberta British Columbia Ontario Saskatchewan Quebec",
        "engaged analyzing enabled executed identified resolved streamlined",
        "comprehensive robust reliable rapid significant",
        "areas details outcomes systems services topic",
    ],
)
def test_extract_keywords_filters_expanded_stop_words(text):
    assert preprocessing.extract_keywords(text) == set()


def test_extract_keywords_keeps_real_tech_terms():
    keywords = preprocessing.extract_keywords(
        "React TypeScript Docker Kubernetes Python SQL agile scrum"
    )
    assert {"react", "typescript", "docker", "kubernetes", "python", "sql", "agile", "scrum"} <= keywords


def test_extract_keywords_drops_generic_compounds():
    keywords = preprocessing.extract_keywords(
        "We need ai-augmented ai-enabled user-friendly non-core on-call engineers"
    )
    for compound in ("ai-augmented", "ai-enabled", "user-friendly", "non-core", "on-call"):
        assert compound not in keywords
    assert "engineers" in keywords


def test_extract_keywords_keeps_known_hyphenated_phrases():
    keywords = preprocessing.extract_keywords(
        "Experience with real-time systems and cross-functional teams"
    )
    assert {"real-time", "cross-functional"} <= keywords


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_extracted_keywords_never_contain_stop_words_or_numbers(text):
    for keyword in preprocessing.extract_keywords(text):
        assert keyword not in STOP_WORDS
        assert not keyword.isdigit()


@pytest.mark.parametrize(
    "token", ["ai-augmented", "ai-enabled", "user-friendly", "non-core", "self-driven", "on-call"]
)
def test_is_generic_compound_flags_filler(token):
    assert preprocessing.is_generic_compound(token)


@pytest.mark.parametrize("token", ["webpack", "postgresql", "react", "real-time", "scikit-learn"])
def test_is_generic_compound_keeps_real_terms(token):
    assert not preprocessing.is_generic_compound(token)


def test_tokenize_trims_edge_punctuation():
    assert preprocessing.tokenize("--verbose node.js. -x- ci/cd") == ["verbose", "node.js", "x", "ci/cd"]


@pytest.mark.parametrize(
    "word, stem",
    [
        ("optimization", "optim"),
        ("optimized", "optim"),
        ("optimizing", "optim"),
        ("deployment", "deploy"),
        ("deployed", "deploy"),
        ("effectiveness", "effective"),
        ("monitoring", "monitor"),
        ("systems", "system"),
        ("pipelines", "pipeline"),
    ],
)
def test_stem_word_strips_suffixes(word, stem):
    assert preprocessing.stem_word(word) == stem


@pytest.mark.parametrize("word", ["go", "api", "aws", "ai", "ml", "data", "c++"])
def test_stem_word_leaves_short_and_allowlisted_words(word):
    assert preprocessing.stem_word(word) == word


@pytest.mark.parametrize("word", ["access", "focus", "analysis", "tests"])
def test_stem_word_protects_trailing_s(word):
    assert preprocessing.stem_word(word) == word


def test_stem_word_requires_three_character_stem():
    # "bring" minus "ing" would leave two characters.
    assert preprocessing.stem_word("bring") == "bring"


def test_stem_word_maps_variants_to_same_root():
    assert preprocessing.stem_word("deployment") == preprocessing.stem_word("deployed")


def test_normalise_keywords_cleans_external_lists():
    assert preprocessing.normalise_keywords([" React ", "react", "", "   ", None, 3, "CI/CD"]) == {
        "react",
        "ci/cd",
    }
