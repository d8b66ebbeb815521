from __future__ import annotations

import pytest

from resume_tailor import phrase_cleaner
from resume_tailor.sections import Section
from resume_tailor.vocabulary import AI_PHRASE_REPLACEMENTS


def test_clean_ai_phrases_replaces_action_verbs():
    result = phrase_cleaner.clean_ai_phrases("Spearheaded the migration to cloud infrastructure")

    assert result.text == "Led the migration to cloud infrastructure"
    assert result.replaced_phrases == ("spearheaded",)
    assert result.replacement_count == 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Leveraged React and TypeScript to build the app", "Used React and TypeScript to build the app"),
        ("Utilized Python for data analysis", "Used Python for data analysis"),
        ("Built a robust and cutting-edge solution", "Built a strong and modern solution"),
        ("Refactored the codebase in order to improve performance", "Refactored the codebase to improve performance"),
        ("Orchestrated the deployment pipeline", "Coordinated the deployment pipeline"),
        ("LEVERAGED the framework", "Used the framework"),
        ("paradigm shift in the industry", "change in the industry"),
    ],
)
def test_clean_ai_phrases_rewrites(text, expected):
    assert phrase_cleaner.clean_ai_phrases(text).text == expected


def test_clean_ai_phrases_handles_multiple_replacements():
    result = phrase_cleaner.clean_ai_phrases(
        "Spearheaded a paradigm shift by leveraging cutting-edge technology"
    )
    assert result.text == "Led a change by using modern technology"
    assert result.replacement_count == 4
    assert "paradigm" not in result.replaced_phrases


def test_clean_ai_phrases_counts_every_occurrence():
    result = phrase_cleaner.clean_ai_phrases("Robust tests, robust code")
    assert result.text == "Strong tests, strong code"
    assert result.replaced_phrases == ("robust",)
    assert result.replacement_count == 2


def test_clean_ai_phrases_leaves_plain_text_alone():
    text = "Built a REST API using Node.js and PostgreSQL"
    result = phrase_cleaner.clean_ai_phrases(text)
    assert result.text == text
    assert result.replaced_phrases == ()
    assert result.replacement_count == 0


def test_clean_ai_phrases_handles_empty_input():
    result = phrase_cleaner.clean_ai_phrases("")
    assert result.text == ""
    assert result.replaced_phrases == ()


def test_clean_ai_phrases_removes_deleted_phrases_cleanly():
    result = phrase_cleaner.clean_ai_phrases("Going forward we will improve")
    assert result.text == "we will improve"
    assert "  " not in result.text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Built the system — a complex distributed architecture", "Built the system, a complex distributed architecture"),
        ("Built the system—a distributed architecture", "Built the system, a distributed architecture"),
        ("Shipped fast --- then iterated", "Shipped fast, then iterated"),
        ("Shipped fast -- then iterated", "Shipped fast, then iterated"),
        ("Run the tool with --verbose for details", "Run the tool with --verbose for details"),
        ("Supported versions 2--4", "Supported versions 2--4"),
    ],
)
def test_clean_ai_phrases_normalises_dashes(text, expected):
    assert phrase_cleaner.clean_ai_phrases(text).text == expected


@pytest.mark.parametrize(
    "text",
    [
        "Spearheaded a paradigm shift by leveraging cutting-edge technology",
        "Moving forward, we proactively facilitated synergies — in order to win",
        "  Leveraged   robust tooling --- on a daily basis  ",
        "Plain text with --flags and numbers 2--4",
        "Refactored in  order to win",
        "Ready in the evmoving forwardent that it fails",
    ],
)
def test_clean_ai_phrases_is_idempotent(text):
    once = phrase_cleaner.clean_ai_phrases(text).text
    twice = phrase_cleaner.clean_ai_phrases(once)
    assert twice.text == once
    assert twice.replacement_count == 0


def test_no_replacement_contains_a_dictionary_phrase():
    phrases = [phrase for phrase, _ in AI_PHRASE_REPLACEMENTS]
    for _, replacement in AI_PHRASE_REPLACEMENTS:
        assert not any(phrase in replacement for phrase in phrases)


def test_clean_ai_phrases_matches_phrases_split_by_extra_spaces():
    result = phrase_cleaner.clean_ai_phrases("Refactored in  order to win")
    assert result.text == "Refactored to win"
    assert result.replaced_phrases == ("in order to",)
    assert result.replacement_count == 1


def test_clean_ai_phrases_rescans_text_joined_by_a_deletion():
    result = phrase_cleaner.clean_ai_phrases("Ready in the evmoving forwardent that it fails")
    assert result.text == "Ready if it fails"
    assert result.replaced_phrases == ("moving forward", "in the event that")
    assert result.replacement_count == 2


@pytest.mark.parametrize(
    "original, replacement, expected",
    [("Hello", "world", "World"), ("hello", "world", "world"), ("Hi", "", ""), ("", "x", "x")],
)
def test_match_case(original, replacement, expected):
    assert phrase_cleaner.match_case(original, replacement) == expected


def test_clean_sections_aggregates_stats():
    sections = [
        Section("Summary", "Leveraged cutting-edge tech to build robust systems"),
        Section("Experience", "Spearheaded the migration. Utilized Python daily."),
    ]

    result = phrase_cleaner.clean_sections(sections)

    assert [section.content for section in result.sections] == [
        "Used modern tech to build strong systems",
        "Led the migration. Used Python daily.",
    ]
    assert result.total_replacements == 5
    assert set(result.replaced_phrases) == {
        "leveraged",
        "cutting-edge",
        "robust",
        "spearheaded",
        "utilized",
    }


def test_clean_sections_preserves_titles():
    result = phrase_cleaner.clean_sections([Section("Leveraged Work", "Leveraged React")])
    assert result.sections[0].title == "Leveraged Work"
    assert result.sections[0].content == "Used React"


def test_clean_sections_deduplicates_phrases():
    result = phrase_cleaner.clean_sections(
        [Section("A", "Leveraged React"), Section("B", "Leveraged Node.js")]
    )
    assert result.replaced_phrases == ("leveraged",)
    assert result.total_replacements == 2


def test_clean_sections_handles_empty_list():
    result = phrase_cleaner.clean_sections([])
    assert result.sections == ()
    assert result.total_replacements == 0
    assert result.to_dict() == {"sections": [], "totalReplacements": 0, "allReplacedPhrases": []}
