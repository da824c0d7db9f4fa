"""Diff analysis engine."""

from diff_focus.analysis.diff_analyzer import (
    analyze_diff,
    classify_path,
    derive_summary,
    detect_file_types,
    detect_flags,
    risk_level_for_score,
    score_flags,
)

__all__ = [
    "analyze_diff",
    "classify_path",
    "derive_summary",
    "detect_file_types",
    "detect_flags",
    "risk_level_for_score",
    "score_flags",
]
