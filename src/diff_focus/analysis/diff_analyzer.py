"""Diff analyzer: classifies raw unified diff text into a risk assessment."""

import logging
import re
from collections.abc import Collection, Iterable

from diff_focus.models.analysis_models import (
    SEVERITY_SCORES,
    AnalysisResult,
    FileCategory,
    Flag,
    RiskLevel,
)
from diff_focus.rules.diff_rules import (
    FALLBACK_SUMMARY,
    FILE_CATEGORY_RULES,
    FILE_HEADER_PATTERN,
    FLAG_RULES,
    SUMMARY_RULES,
)
from diff_focus.rules.rule_engine import FileCategoryRule, FlagRule, SummaryRule

logger = logging.getLogger(__name__)

HIGH_RISK_THRESHOLD = 5
MEDIUM_RISK_THRESHOLD = 2


def classify_path(
    file_path: str,
    category_rules: list[FileCategoryRule] | None = None,
) -> FileCategory | None:
    """Return the category of the first rule whose suffixes match, if any."""
    rules = category_rules if category_rules is not None else FILE_CATEGORY_RULES
    for rule in rules:
        if rule.matches(file_path):
            return rule.category
    return None


def detect_file_types(
    diff_text: str,
    category_rules: list[FileCategoryRule] | None = None,
) -> set[FileCategory]:
    """Collect the distinct categories of every file header in the diff."""
    file_types: set[FileCategory] = set()
    for match in re.finditer(FILE_HEADER_PATTERN, diff_text):
        category = classify_path(match.group(1), category_rules)
        if category is not None:
            file_types.add(category)
    return file_types


def detect_flags(
    diff_text: str,
    flag_rules: list[FlagRule] | None = None,
) -> list[Flag]:
    """Apply each flag rule once, in rule order."""
    rules = flag_rules if flag_rules is not None else FLAG_RULES
    flags: list[Flag] = []
    for rule in rules:
        if rule.matches(diff_text):
            logger.debug("Flag rule fired: %s (%s)", rule.rule_id, rule.severity.value)
            flags.append(rule.to_flag())
    return flags


def score_flags(flags: Iterable[Flag]) -> int:
    return sum(SEVERITY_SCORES[flag.severity] for flag in flags)


def risk_level_for_score(score: int) -> RiskLevel:
    """Map an accumulated score onto a risk band; boundaries round up."""
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def derive_summary(
    diff_text: str,
    file_types: Collection[FileCategory],
    score: int,
    summary_rules: list[SummaryRule] | None = None,
) -> list[str]:
    """Build the summary notes in rule order; never returns an empty list."""
    rules = summary_rules if summary_rules is not None else SUMMARY_RULES
    summary = [
        rule.note for rule in rules if rule.matches(diff_text, file_types, score)
    ]
    if not summary:
        summary.append(FALLBACK_SUMMARY)
    return summary


def analyze_diff(diff_text: str) -> AnalysisResult:
    """Classify a unified diff.

    Total over all strings: malformed or empty text yields a neutral
    Low-risk result rather than an error. Rejecting blank input is the
    caller's job.

    Args:
        diff_text: Raw diff text, one or more concatenated file diffs.

    Returns:
        AnalysisResult with risk level, summary notes, flags and file types.
    """
    file_types = detect_file_types(diff_text)
    flags = detect_flags(diff_text)
    score = score_flags(flags)
    summary = derive_summary(diff_text, file_types, score)
    risk_level = risk_level_for_score(score)

    logger.info(
        "Diff analyzed: risk=%s score=%d flags=%d file_types=%d",
        risk_level.value,
        score,
        len(flags),
        len(file_types),
    )

    return AnalysisResult(
        risk_level=risk_level,
        summary=summary,
        flags=flags,
        # Set has no order; emit in declaration order for stable output
        file_types=[category for category in FileCategory if category in file_types],
    )
