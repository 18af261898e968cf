"""Java profile — print statements, main signature, and class naming."""

from app.validators.base import LanguageProfile, PatternRule, RewriteRule, TypoRule
from app.validators.models import Severity

JAVA = LanguageProfile(
    id="java",
    display_name="Java",
    file_extension="java",
    rules=(
        PatternRule(
            name="println_semicolon",
            pattern=r"System\.out\.println",
            message="Missing semicolon after println statement",
            unless=r";$",
        ),
        PatternRule(
            name="main_signature",
            pattern=r"\bpublic\s+static\s+void\s+main\b",
            message="main method should have 'String[] args' parameter",
            unless=r"String\s*(\[\]|\.\.\.)",
        ),
        PatternRule(
            name="class_name_case",
            pattern=r"\bclass\s+[a-z_$]",
            message="Class names should start with uppercase letter",
            severity=Severity.WARNING,
        ),
        TypoRule("Sytem", "System"),
    ),
    corrector_rules=(
        RewriteRule.literal("Sytem", "System"),
    ),
)
