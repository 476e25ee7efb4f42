"""Anchored text detectors shared by the scanner and the passes.

Every pattern is line-scoped or length-bounded so that arbitrary input
scans in linear time. Each detector is a pure function of its text.
"""

from __future__ import annotations

import re
from functools import lru_cache

from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import EXCERPT_MAX_CHARS

# [NEEDS CLARIFICATION] / [NEEDS CLARIFICATION: question]
MARKER_RE = re.compile(
    r"\[NEEDS CLARIFICATION[^\]\n]{0,500}\]", re.IGNORECASE
)
_BARE_TODO_RE = re.compile(r"\b(?:TODO|TBD)\b")
_HEADING_LINE_RE = re.compile(r"^[ \t]{0,3}#{1,6}(?:[ \t]|$)")
_CAPS_RE = re.compile(r"\b[A-Z]{3,40}\b")
# Scenario keywords are searched one after another, never as one
# pattern spanning the line.
_GIVEN_RE = re.compile(r"\bgiven\b", re.IGNORECASE)
_WHEN_RE = re.compile(r"\bwhen\b", re.IGNORECASE)
_THEN_RE = re.compile(r"\bthen\b", re.IGNORECASE)

ERROR_HANDLING_RE = re.compile(
    r"\b(?:errors?|fail(?:s|ed|ures?)?|exceptions?|fallbacks?"
    r"|retry|retries|timeouts?|invalid)\b",
    re.IGNORECASE,
)
NON_FUNCTIONAL_RE = re.compile(
    r"\b(?:performance|availability|latency|throughput|scalability"
    r"|reliability|uptime|response time|non-functional|security"
    r"|accessibility|concurrency)\b",
    re.IGNORECASE,
)
ACCEPTANCE_RE = re.compile(
    r"acceptance (?:criteria|scenarios?|tests?)", re.IGNORECASE
)
REQUIREMENTS_HEADING_RE = re.compile(
    r"^[ \t]{0,3}#{1,6}[ \t]{1,12}[^\n]{0,200}?\brequirements?\b",
    re.IGNORECASE | re.MULTILINE,
)
SECTION_HEADING_RE = re.compile(
    r"^[ \t]{0,3}#{2,6}[ \t]{1,12}([^\n]{1,200}?)[ \t#]{0,20}$",
    re.MULTILINE,
)
REQUIREMENT_ID_RE = re.compile(r"\b(?:FR|NFR|SC|REQ)-\d{3}\b")
_LIST_ITEM_RE = re.compile(r"^[ \t]{0,12}(?:[-*+]|\d{1,4}[.)])[ \t]+\S")
CHECKBOX_RE = re.compile(
    r"^[ \t]{0,12}[-*+][ \t]+\[([ xX])\]", re.MULTILINE
)
# Unfilled template slots: [FEATURE NAME], [DATE]
_TEMPLATE_SLOT_RE = re.compile(
    r"\[(?!NEEDS CLARIFICATION)[A-Z][A-Z_ ]{2,40}\]"
)
MEASURE_RE = re.compile(
    r"(?<![\w.\-])(\d{1,9}(?:\.\d{1,6})?)[ \t]?"
    r"(milliseconds?|ms|seconds?|secs?|s|minutes?|mins?|hours?|hrs?|h"
    r"|days?|bytes|[kmgt]ib|[kmgt]b|rps|qps|tps|rpm|req/s|requests/s)\b",
    re.IGNORECASE,
)


def excerpt(line: str) -> str:
    """Strip *line* and cap it at the excerpt length."""
    text = line.strip()
    if len(text) <= EXCERPT_MAX_CHARS:
        return text
    return text[: EXCERPT_MAX_CHARS - 3].rstrip() + "..."


def is_heading(line: str) -> bool:
    return _HEADING_LINE_RE.match(line) is not None


def find_markers(text: str) -> list[re.Match[str]]:
    """All clarification markers in document order."""
    return list(MARKER_RE.finditer(text))


def count_markers(text: str) -> int:
    return len(find_markers(text))


def has_unresolved_marker(line: str) -> bool:
    """Marker tag or a bare TODO/TBD token."""
    return (
        MARKER_RE.search(line) is not None
        or _BARE_TODO_RE.search(line) is not None
    )


@lru_cache(maxsize=8)
def _word_list_re(words: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so multi-word entries win over their prefixes
    ordered = sorted(words, key=len, reverse=True)
    alternation = "|".join(re.escape(w) for w in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


@lru_cache(maxsize=8)
def _token_list_re(tokens: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(t) for t in tokens)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def find_vague_quantifiers(
    text: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Vague quantifier occurrences, lowercased, in order."""
    if not vocabulary.vague_quantifiers:
        return []
    pattern = _word_list_re(vocabulary.vague_quantifiers)
    return [m.group(0).lower() for m in pattern.finditer(text)]


def undefined_terms(
    line: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Distinct ALLCAPS tokens not in the skip-list.

    Heading lines never yield terms.
    """
    if is_heading(line):
        return []
    found: list[str] = []
    for token in _CAPS_RE.findall(line):
        if token in vocabulary.acronym_skip_list or token in found:
            continue
        found.append(token)
    return found


def _scenario_shape(line: str) -> tuple[bool, bool]:
    """(has Given then When, has Then after that When) for one line."""
    given = _GIVEN_RE.search(line)
    if given is None:
        return False, False
    when = _WHEN_RE.search(line, given.end())
    if when is None:
        return False, False
    return True, _THEN_RE.search(line, when.end()) is not None


def given_when_without_then(line: str) -> bool:
    """A Given…When scenario whose Then is missing on the same line."""
    has_given_when, has_then = _scenario_shape(line)
    return has_given_when and not has_then


def has_complete_scenario(text: str) -> bool:
    """Some line reads Given…When…Then in that order."""
    return any(_scenario_shape(line)[1] for line in text.splitlines())


def has_acceptance_criteria(text: str) -> bool:
    """An acceptance section phrase or a complete Given/When/Then line."""
    return ACCEPTANCE_RE.search(text) is not None or has_complete_scenario(
        text
    )


def count_placeholders(
    text: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Template slots plus placeholder tokens, each counted once.

    Slots are removed before token counting so ``[TODO]`` is one hit.
    """
    stripped, slots = _TEMPLATE_SLOT_RE.subn("", text)
    if not vocabulary.placeholder_tokens:
        return slots
    tokens = _token_list_re(vocabulary.placeholder_tokens)
    return slots + len(tokens.findall(stripped))


def requirement_lines(text: str, min_length: int) -> set[str]:
    """Normalized list-item lines at least *min_length* long."""
    lines: set[str] = set()
    for raw in text.splitlines():
        if _LIST_ITEM_RE.match(raw) is None:
            continue
        normalized = raw.strip().lower()
        if len(normalized) >= min_length:
            lines.add(normalized)
    return lines


def requirement_ids(text: str) -> list[str]:
    """Distinct requirement identifiers in first-seen order."""
    return list(dict.fromkeys(REQUIREMENT_ID_RE.findall(text)))


def section_headings(text: str) -> list[str]:
    """Distinct level 2–6 heading texts in document order."""
    headings = (
        m.group(1).strip() for m in SECTION_HEADING_RE.finditer(text)
    )
    return list(dict.fromkeys(h for h in headings if h))


def measurements(text: str) -> list[tuple[str, str]]:
    """(value, lowercased unit) pairs for number+unit tokens."""
    return [
        (m.group(1), m.group(2).lower())
        for m in MEASURE_RE.finditer(text)
    ]


@lru_cache(maxsize=8)
def _declaration_re(keys: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(k) for k in keys)
    return re.compile(
        r"^[ \t]{0,12}(?:[-*+][ \t]+)?(?:\*\*)?"
        rf"({alternation})"
        r"(?:\*\*)?[ \t]{0,12}:[ \t]{0,12}(?:\*\*[ \t]{0,12})?"
        r"(\S[^\n]{0,300})$",
        re.IGNORECASE | re.MULTILINE,
    )


def technology_declarations(
    text: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[tuple[str, str]]:
    """(Key, value) technology choices declared in a constitution.

    Keys are title-cased; values drop trailing bold markers and
    duplicates are collapsed.
    """
    if not vocabulary.constitution_keys:
        return []
    pattern = _declaration_re(vocabulary.constitution_keys)
    found: list[tuple[str, str]] = []
    for match in pattern.finditer(text):
        key = match.group(1).title()
        value = match.group(2).strip().strip("*").strip()
        pair = (key, value)
        if pair not in found:
            found.append(pair)
    return found
