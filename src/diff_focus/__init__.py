"""Diff-Focus: advisory risk triage for unified diffs."""

from diff_focus.analysis import analyze_diff
from diff_focus.models import AnalysisResult, FileCategory, Flag, FlagSeverity, RiskLevel

__all__ = [
    "AnalysisResult",
    "FileCategory",
    "Flag",
    "FlagSeverity",
    "RiskLevel",
    "analyze_diff",
]
