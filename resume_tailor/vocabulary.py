"""Static word lists shared by keyword extraction, stemming and phrase cleanup.

Everything here is immutable. Tables whose order changes behaviour (known
phrases, stem suffixes, AI phrase replacements) are tuples so that match
priority is fixed.
"""
from __future__ import annotations

from typing import FrozenSet, Tuple

MIN_WORD_LENGTH = 3

_ARTICLES_AND_PRONOUNS = """
a an the i me my we our you your he him his she her it its they them their
what which who whom this that these those anyone everyone someone
"""

_AUXILIARY_VERBS = """
am is are was were be been being have has had having do does did doing will
would could should might must shall can need
"""

_PREPOSITIONS_AND_CONJUNCTIONS = """
and but if or because as until while of at by for with about against between
into through during before after above below to from up down in out on off
over under again further then once nor so yet both either neither not only
"""

_GENERIC_WORDS = """
here there when where why how all each every few more most other some such no
own same than too very just also now etc within first available area areas
currently run running ago alone among truly nearly able around best better
get getting going one two three many much well-known
"""

_JOB_POSTING_FILLER = """
role roles position positions job jobs work working team teams company
looking seeking required requirements responsibilities qualifications
preferred experience experiences years year ability skills knowledge strong
excellent good great well include including includes may like via based using
used new across along ensure take make join apply please candidate candidates
opportunity opportunities read learn create world desire mission help culture
values applicant applicants applying authorized
authorization encouraged employment employer employers hire hiring hired
rotation benefits salary compensation equal eligible eligibility location
remote-first office offices day days week weeks month months
"""

_RESUME_GENERIC_VERBS = """
build built develop developed developing development manage managed managing
management support supported supporting implement implemented implementing
implementation design designed designing provide provided providing maintain
maintained maintaining responsible lead leading led improve improved
improving improvement drive driven collaborate collaborated collaborating
collaboration communicate communicated communication deliver delivered
delivering high level leverage multiple various key effectively efficient
successfully contribute contributed contributing established utilize utilized
utilizing facilitate facilitated facilitating engaged engage engaging analyze
analyzed analyzing enable enabled enabling execute executed executing identify
identified identifying resolve resolved resolving streamline streamlined
streamlining achieve achieved achieving assist assisted assisting
"""

_CORPORATE_BUZZWORDS = """
impactful impact initiative initiatives insight insights leadership ownership
foster fostering proactive proactively passionate passion innovative
innovation dynamic synergy synergies stakeholder stakeholders thrive thriving
fast-paced self-starter empower empowering best-in-class world-class
cutting-edge
"""

_GENERIC_ADJECTIVES = """
comprehensive robust reliable rapid rapidly significant significantly complex
critical effective successful diverse global large small
relevant related similar additional appropriate specific various overall
"""

_GENERIC_NOUNS = """
details detail outcome outcomes system systems service services topic topics
thing things part parts way ways people person time times end goal goals
result results process processes solution solutions
environment environments problem problems
"""

_PLACE_NAMES = """
alberta british columbia ontario saskatchewan quebec manitoba nova scotia
brunswick newfoundland labrador prince edward island yukon nunavut northwest
territories canada canadian vancouver toronto montreal calgary edmonton
ottawa winnipeg victoria halifax waterloo usa united states america
"""

STOP_WORDS: FrozenSet[str] = frozenset(
    " ".join(
        (
            _ARTICLES_AND_PRONOUNS,
            _AUXILIARY_VERBS,
            _PREPOSITIONS_AND_CONJUNCTIONS,
            _GENERIC_WORDS,
            _JOB_POSTING_FILLER,
            _RESUME_GENERIC_VERBS,
            _CORPORATE_BUZZWORDS,
            _GENERIC_ADJECTIVES,
            _GENERIC_NOUNS,
            _PLACE_NAMES,
        )
    ).split()
)

# Tokens shorter than MIN_WORD_LENGTH that are still meaningful.
SHORT_KEYWORD_ALLOWLIST: FrozenSet[str] = frozenset(
    {
        "go", "r", "c", "c#", "c++", "ai", "ml", "ci", "cd", "ui", "ux",
        "qa", "db", "os", "vm", "ip", "io", "aws",
    }
)

# Matched as case-insensitive substrings of the whole text.
KNOWN_PHRASES: Tuple[str, ...] = (
    "machine learning", "deep learning", "natural language processing",
    "computer vision", "data science", "data engineering", "data pipeline",
    "ci/cd", "ci cd", "continuous integration", "continuous deployment",
    "continuous delivery", "test driven", "test-driven",
    "project management", "product management", "agile methodology",
    "distributed systems", "microservices architecture", "event driven",
    "event-driven", "real time", "real-time", "cross functional",
    "cross-functional", "full stack", "full-stack", "front end", "front-end",
    "back end", "back-end", "open source", "open-source",
    "cloud computing", "cloud native", "cloud-native",
    "web3", "smart contracts", "block chain", "blockchain",
    "rest api", "restful api", "graphql api",
    "user experience", "user interface",
    "unit testing", "integration testing", "end to end",
    "version control", "code review", "pull request",
    "responsive design", "web accessibility", "accessibility",
    "performance optimization", "search engine optimization", "seo",
    "object oriented", "object-oriented", "functional programming",
    "design patterns", "design system", "component library",
    "state management", "server side rendering", "server-side rendering",
    "static site generation", "single page application",
    "node.js", "next.js", "react.js", "vue.js", "angular.js",
    "ruby on rails", "asp.net", ".net core",
    "amazon web services", "aws", "google cloud", "gcp", "microsoft azure",
    "azure", "docker compose", "kubernetes",
    "sql server", "no sql", "nosql",
    "type safety", "type-safe",
)

# Hyphenated tokens built from these parts carry no signal ("ai-enabled",
# "user-friendly", "non-core").
GENERIC_COMPOUND_PREFIXES: FrozenSet[str] = frozenset(
    {"non", "self", "user", "well", "multi", "high", "fast", "low", "hands"}
)

GENERIC_COMPOUND_SUFFIXES: FrozenSet[str] = frozenset(
    {
        "augmented", "enabled", "friendly", "driven", "based", "focused",
        "oriented", "powered", "minded", "centric", "facing", "first",
        "level", "paced", "related", "ready", "savvy", "specific", "wide",
        "call",
    }
)

# First match wins, so longer and more specific suffixes come first.
STEM_SUFFIXES: Tuple[str, ...] = (
    "ization", "isation",
    "izing", "ising",
    "ized", "ised",
    "ation",
    "ment", "ness",
    "ible", "able",
    "ting", "ing",
    "ical", "ally", "ious",
    "ity", "ive", "ous", "ful", "ant", "ent",
    "ion", "ism", "ist",
    "ed", "er", "ly",
)

# No replacement may contain a phrase from this table, so repeated cleanup
# passes always settle.
AI_PHRASE_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    # Overused action verbs
    ("spearheaded", "led"),
    ("spearheading", "leading"),
    ("orchestrated", "coordinated"),
    ("orchestrating", "coordinating"),
    ("championed", "advocated for"),
    ("championing", "advocating for"),
    ("synergized", "collaborated"),
    ("leveraged", "used"),
    ("leveraging", "using"),
    ("revolutionized", "transformed"),
    ("revolutionizing", "transforming"),
    ("pioneered", "introduced"),
    ("pioneering", "introducing"),
    ("catalyzed", "initiated"),
    ("catalyzing", "initiating"),
    ("operationalized", "implemented"),
    ("architected", "designed"),
    ("envisioned", "planned"),
    ("effectuated", "completed"),
    ("endeavored", "worked"),
    ("facilitated", "helped"),
    ("facilitate", "help"),
    ("facilitating", "helping"),
    ("utilized", "used"),
    ("utilizing", "using"),
    # Corporate buzzwords
    ("synergy", "collaboration"),
    ("synergies", "collaborations"),
    ("paradigm", "approach"),
    ("paradigm shift", "change"),
    ("best-in-class", "top-performing"),
    ("world-class", "high-quality"),
    ("cutting-edge", "modern"),
    ("bleeding-edge", "modern"),
    ("game-changer", "improvement"),
    ("game-changing", "significant"),
    ("disruptive", "innovative"),
    ("disruptor", "innovator"),
    ("holistic", "comprehensive"),
    ("robust", "strong"),
    ("actionable", "practical"),
    ("impactful", "effective"),
    ("proactive", "active"),
    ("proactively", "actively"),
    ("stakeholder", "team member"),
    ("deliverables", "outputs"),
    ("value-add", "benefit"),
    # Filler phrases
    ("in order to", "to"),
    ("for the purpose of", "to"),
    ("with a view to", "to"),
    ("at the end of the day", ""),
    ("moving forward", ""),
    ("going forward", ""),
    ("on a daily basis", "daily"),
    ("on a regular basis", "regularly"),
    ("in a timely manner", "promptly"),
    ("at this point in time", "now"),
    ("due to the fact that", "because"),
    ("in the event that", "if"),
    ("in light of the fact that", "since"),
)
