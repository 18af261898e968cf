"""Python profile — print typos, missing colons, foreign keywords and operators."""

from app.validators.base import LanguageProfile, PatternRule, RewriteRule
from app.validators.models import Severity

PYTHON = LanguageProfile(
    id="python",
    display_name="Python",
    file_extension="py",
    rules=(
        PatternRule(
            name="print_typo",
            pattern=r"\b(pritn|prnit)\(",
            message="Typo: should be 'print('",
        ),
        PatternRule(
            name="def_missing_colon",
            pattern=r"^(async\s+)?def\s",
            message="Function definition missing colon ':'",
            unless=r":",
        ),
        PatternRule(
            name="if_missing_colon",
            pattern=r"^(if|elif)\b",
            message="if statement missing colon ':'",
            unless=r":",
        ),
        PatternRule(
            name="elseif_keyword",
            pattern=r"\belseif\b",
            message="Python uses 'elif' not 'elseif'",
        ),
        PatternRule(
            name="lowercase_true",
            pattern=r"\btrue\b",
            message="Python uses 'True' not 'true' (capital T)",
        ),
        PatternRule(
            name="lowercase_false",
            pattern=r"\bfalse\b",
            message="Python uses 'False' not 'false' (capital F)",
        ),
        PatternRule(
            name="and_operator",
            pattern=r"&&",
            message="Python uses 'and' not '&&'",
        ),
        PatternRule(
            name="or_operator",
            pattern=r"\|\|",
            message="Python uses 'or' not '||'",
        ),
        PatternRule(
            name="trailing_semicolon",
            pattern=r";$",
            message="Python doesn't require semicolons",
            severity=Severity.WARNING,
        ),
    ),
    corrector_rules=(
        RewriteRule.regex(r"\b(?:pritn|prnit)\(", "print("),
        RewriteRule.literal("elseif", "elif"),
        RewriteRule.regex(r"[ \t]*&&[ \t]*", " and "),
        RewriteRule.regex(r"[ \t]*\|\|[ \t]*", " or "),
    ),
)
