"""Diff risk rules and rule models."""

from diff_focus.rules.diff_rules import (
    FALLBACK_SUMMARY,
    FILE_CATEGORY_RULES,
    FILE_HEADER_PATTERN,
    FLAG_RULES,
    SUMMARY_RULES,
)
from diff_focus.rules.rule_engine import FileCategoryRule, FlagRule, SummaryRule

__all__ = [
    "FALLBACK_SUMMARY",
    "FILE_CATEGORY_RULES",
    "FILE_HEADER_PATTERN",
    "FLAG_RULES",
    "SUMMARY_RULES",
    "FileCategoryRule",
    "FlagRule",
    "SummaryRule",
]
