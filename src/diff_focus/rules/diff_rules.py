"""Fixed rule battery for diff risk triage.

Order is significant: flags and summary notes are emitted in the order the
rules appear here, and the first matching file category rule wins.
"""

from diff_focus.models.analysis_models import FileCategory, FlagSeverity
from diff_focus.rules.rule_engine import FileCategoryRule, FlagRule, SummaryRule

# One match per touched file: "diff --git a/<path> b/<path>"
FILE_HEADER_PATTERN = r"diff --git a/(\S+)"

FILE_CATEGORY_RULES = [
    FileCategoryRule(category=FileCategory.REACT_COMPONENT, suffixes=(".jsx", ".tsx")),
    FileCategoryRule(category=FileCategory.BACKEND_SCRIPTING, suffixes=(".hh", ".php")),
    FileCategoryRule(category=FileCategory.PYTHON, suffixes=(".py",)),
    FileCategoryRule(category=FileCategory.SQL_MIGRATION, suffixes=(".sql",)),
    FileCategoryRule(category=FileCategory.STYLING, suffixes=(".css", ".scss")),
]

FLAG_RULES = [
    FlagRule(
        rule_id="destructive-sql",
        pattern=r"DROP\s+TABLE|ALTER\s+TABLE|DELETE\s+FROM|TRUNCATE",
        severity=FlagSeverity.DANGER,
        message="Destructive database operation detected.",
    ),
    FlagRule(
        rule_id="auth-privacy-config",
        pattern=r"Auth::|PrivacyCheck|ViewerContext|\.env|config\.|secrets",
        severity=FlagSeverity.WARNING,
        message="Authentication, privacy, or config change.",
    ),
    FlagRule(
        rule_id="torch-model-mutation",
        pattern=r"torch\.(nn\.|optim|load|save)",
        severity=FlagSeverity.WARNING,
        message="PyTorch model logic modified (FAIR team relevance).",
    ),
    FlagRule(
        rule_id="debug-artifact",
        pattern=r"console\.log|var_dump|print_r|pdb\.set_trace",
        severity=FlagSeverity.INFO,
        message="Debug artifact (console.log, var_dump, etc.) left in code.",
    ),
]

SUMMARY_RULES = [
    SummaryRule(
        rule_id="react-hooks",
        note="Modifies React component logic or hooks.",
        requires_category=FileCategory.REACT_COMPONENT,
        pattern=r"useEffect|useState|useContext",
    ),
    SummaryRule(
        rule_id="styling-only",
        note="Primarily a CSS/styling update.",
        requires_category=FileCategory.STYLING,
        requires_zero_score=True,
    ),
    SummaryRule(
        rule_id="torch-nn-module",
        note="Defines or modifies a PyTorch neural network module.",
        requires_category=FileCategory.PYTHON,
        pattern=r"class.*\(nn\.Module\)",
    ),
    SummaryRule(
        rule_id="todo-comments",
        note="Contains TODO comments – may indicate incomplete work.",
        pattern=r"^\+\s*//\s*TODO:|^#\s*TODO:",
        multiline=True,
    ),
]

# Appended only when no summary rule fired
FALLBACK_SUMMARY = "General code update with no clear pattern."
