"""Models for diff analysis results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FileCategory(str, Enum):
    REACT_COMPONENT = "React Component"
    BACKEND_SCRIPTING = "Hack/PHP Backend"
    PYTHON = "Python"
    SQL_MIGRATION = "SQL Migration"
    STYLING = "Styling"


class FlagSeverity(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Score contribution per fired flag; thresholds live in risk_level_for_score
SEVERITY_SCORES: dict[FlagSeverity, int] = {
    FlagSeverity.DANGER: 5,
    FlagSeverity.WARNING: 2,
    FlagSeverity.INFO: 0,
}


class Flag(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: FlagSeverity
    message: str


class AnalysisResult(BaseModel):
    """Structured risk assessment for one diff.

    ``flags`` and ``summary`` follow rule order. ``file_types`` holds each
    category at most once.
    """

    model_config = ConfigDict(frozen=False)

    risk_level: RiskLevel = RiskLevel.LOW
    summary: list[str] = Field(default_factory=list)
    flags: list[Flag] = Field(default_factory=list)
    file_types: list[FileCategory] = Field(default_factory=list)
