"""C++ profile — stream operators, include directives, and main's return."""

from app.validators.base import LanguageProfile, PatternRule, RewriteRule, TypoRule
from app.validators.models import Severity

CPP = LanguageProfile(
    id="cpp",
    display_name="C++",
    file_extension="cpp",
    rules=(
        PatternRule(
            name="cout_operator",
            pattern=r"\bcout\b",
            message="cout requires << operator",
            unless=r"<<",
        ),
        PatternRule(
            name="cin_operator",
            pattern=r"\bcin\b",
            message="cin requires >> operator",
            unless=r">>",
        ),
        PatternRule(
            name="include_delimiters",
            pattern=r"^#\s*include\b",
            message="include directive needs <> or quotes",
            unless=r"[<\"]",
        ),
        TypoRule("#inlcude", "#include"),
        PatternRule(
            name="main_return",
            pattern=r"\bint\s+main\b",
            message="main function should return an integer",
            severity=Severity.WARNING,
            unless_in_source=r"\breturn\b",
        ),
    ),
    corrector_rules=(
        RewriteRule.literal("#inlcude", "#include"),
    ),
)
