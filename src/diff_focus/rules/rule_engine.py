"""Rule models for diff risk detection."""

import re
from collections.abc import Collection

from pydantic import BaseModel, ConfigDict

from diff_focus.models.analysis_models import FileCategory, Flag, FlagSeverity


class FileCategoryRule(BaseModel):
    """Maps file path suffixes to a single category."""

    model_config = ConfigDict(frozen=True)

    category: FileCategory
    suffixes: tuple[str, ...]

    def matches(self, file_path: str) -> bool:
        return file_path.endswith(self.suffixes)


class FlagRule(BaseModel):
    """A content pattern that raises one flag when present anywhere in a diff."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    pattern: str
    severity: FlagSeverity
    message: str
    ignore_case: bool = True

    @property
    def regex(self) -> re.Pattern[str]:
        return re.compile(self.pattern, re.IGNORECASE if self.ignore_case else 0)

    def matches(self, diff_text: str) -> bool:
        """Presence test: repeated occurrences still count once."""
        return self.regex.search(diff_text) is not None

    def to_flag(self) -> Flag:
        return Flag(severity=self.severity, message=self.message)


class SummaryRule(BaseModel):
    """A condition that contributes one human-readable note to the summary.

    All configured conditions must hold for the rule to fire. A rule with no
    conditions always fires.
    """

    model_config = ConfigDict(frozen=True)

    rule_id: str
    note: str
    requires_category: FileCategory | None = None
    pattern: str | None = None
    multiline: bool = False
    requires_zero_score: bool = False

    def matches(
        self,
        diff_text: str,
        file_types: Collection[FileCategory],
        score: int,
    ) -> bool:
        if self.requires_category is not None and self.requires_category not in file_types:
            return False
        if self.requires_zero_score and score != 0:
            return False
        if self.pattern is not None:
            flags = re.MULTILINE if self.multiline else 0
            if re.search(self.pattern, diff_text, flags) is None:
                return False
        return True
