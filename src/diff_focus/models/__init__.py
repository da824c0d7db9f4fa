"""Data models for diff-focus."""

from diff_focus.models.analysis_models import (
    SEVERITY_SCORES,
    AnalysisResult,
    FileCategory,
    Flag,
    FlagSeverity,
    RiskLevel,
)

__all__ = [
    "SEVERITY_SCORES",
    "AnalysisResult",
    "FileCategory",
    "Flag",
    "FlagSeverity",
    "RiskLevel",
]
