"""Command line interface for the resume tailoring helpers."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable

from resume_tailor import matching, phrase_cleaner, pipeline, preprocessing, redaction
from resume_tailor.config import Settings
from resume_tailor.exceptions import ResumeTailorError
from resume_tailor.logger import setup_logger


def _parse_arguments(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score, clean up and redact tailored resumes against a job description.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    keywords = subparsers.add_parser(
        "keywords", help="List the keywords extracted from a document."
    )
    keywords.add_argument("document", type=Path, help="Text, PDF or DOCX file.")

    score = subparsers.add_parser(
        "score", help="Compare an original and a tailored resume against a job description."
    )
    score.add_argument("job_description", type=Path, help="Job description file.")
    score.add_argument("original_resume", type=Path, help="Resume before tailoring.")
    score.add_argument(
        "tailored_resume",
        type=Path,
        nargs="?",
        help="Resume after tailoring. Defaults to the original resume.",
    )
    score.add_argument(
        "--keywords",
        type=Path,
        help="Optional JSON file with a pre-extracted keyword list (or {\"keywords\": [...]}).",
    )
    score.add_argument("--json", action="store_true", help="Print the comparison as JSON.")

    clean = subparsers.add_parser("clean", help="Replace AI-sounding phrases in a document.")
    clean.add_argument("document", type=Path, help="Text, PDF or DOCX file.")
    clean.add_argument("--json", action="store_true", help="Print the cleanup result as JSON.")

    redact = subparsers.add_parser(
        "redact", help="Print a layout-preserving gibberish preview of a document."
    )
    redact.add_argument("document", type=Path, help="Text, PDF or DOCX file.")

    return parser.parse_args(list(argv) if argv is not None else None)


def _load_keyword_file(path: Path) -> list[object]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ResumeTailorError(f"Could not read keyword file {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("keywords")
    if not isinstance(data, list):
        raise ResumeTailorError(f"Keyword file {path} must contain a list of keywords.")
    return data


def _read_input(path: Path, field: str, settings: Settings, *, loader=pipeline.load_resume_text) -> str:
    text = loader(path)
    return pipeline.validate_input_length(text, field=field, limit=settings.max_input_length)


def _print_match(label: str, result: matching.MatchResult, settings: Settings) -> None:
    band = matching.score_band(
        result.match_percentage, strong=settings.strong_match, fair=settings.fair_match
    )
    print(
        f"{label}: {result.match_percentage} "
        f"({result.match_count}/{result.total_keywords} keywords, {band})"
    )


def _run_score(args: argparse.Namespace, settings: Settings) -> matching.MatchComparison:
    job_description = _read_input(
        args.job_description, "job description", settings, loader=pipeline.load_job_description
    )
    original = _read_input(args.original_resume, "resume", settings)
    tailored = (
        _read_input(args.tailored_resume, "tailored resume", settings)
        if args.tailored_resume
        else original
    )
    llm_keywords = _load_keyword_file(args.keywords) if args.keywords else None

    comparison = matching.compare_resumes(
        job_description, original, tailored, llm_keywords=llm_keywords
    )

    if args.json:
        print(json.dumps(comparison.to_dict(), indent=2))
        return comparison

    _print_match("Before", comparison.before, settings)
    _print_match("After", comparison.after, settings)
    if comparison.score_improvement > 0:
        print(f"Improvement: +{comparison.score_improvement}")
    if comparison.after.missed_keywords:
        print(f"Missing keywords: {', '.join(comparison.after.missed_keywords)}")
    return comparison


def main(argv: Iterable[str] | None = None) -> int:
    args = _parse_arguments(argv)
    settings = Settings.from_env()
    setup_logger(settings.log_level, settings.log_dir)

    try:
        if args.command == "keywords":
            text = _read_input(args.document, "document", settings)
            for keyword in sorted(preprocessing.extract_keywords(text)):
                print(keyword)
        elif args.command == "score":
            _run_score(args, settings)
        elif args.command == "clean":
            text = _read_input(args.document, "document", settings)
            result = phrase_cleaner.clean_ai_phrases(text)
            if args.json:
                print(json.dumps(result.to_dict(), indent=2))
            else:
                print(result.text)
        elif args.command == "redact":
            text = _read_input(args.document, "document", settings)
            print(redaction.redact_text(text))
    except ResumeTailorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
