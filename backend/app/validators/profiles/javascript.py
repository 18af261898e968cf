"""JavaScript profile — keyword typos, conditionals, equality, semicolons, and delimiter balance."""

import re
from typing import Optional

from app.validators.base import (
    BalanceRule,
    LanguageProfile,
    LineRule,
    PatternRule,
    RewriteRule,
    SourceLine,
    TypoRule,
)
from app.validators.models import Diagnostic, Severity

# Misspelled keyword → keyword
KEYWORD_TYPOS = {
    "funtion": "function",
    "retrun": "return",
    "cosnt": "const",
    "lte": "let",
}

COMMENT_PREFIXES = ("//", "/*", "*")


class MissingSemicolonRule(LineRule):
    """Heuristic: an assignment-looking statement that does not end with ';'."""

    OPEN_ENDINGS = (";", "{", "}", ",")
    CONTROL_KEYWORDS = re.compile(r"^(if|else|for|while|switch|do)\b")

    def __init__(self):
        super().__init__(
            name="missing_semicolon",
            message="Missing semicolon at end of statement",
            severity=Severity.WARNING,
        )

    def check(self, line: SourceLine, source: str) -> Optional[Diagnostic]:
        text = line.text
        if not text or text.endswith(self.OPEN_ENDINGS) or text.startswith(COMMENT_PREFIXES):
            return None
        if self.CONTROL_KEYWORDS.match(text):
            return None
        if "=" not in text or "function" in text or "=>" in text:
            return None
        return self._emit(line)


JAVASCRIPT = LanguageProfile(
    id="javascript",
    display_name="JavaScript",
    file_extension="js",
    rules=(
        PatternRule(
            name="console_log_parentheses",
            pattern=r"console\.log",
            message="console.log requires parentheses",
            unless=r"\(",
        ),
        *(TypoRule(typo, correct) for typo, correct in KEYWORD_TYPOS.items()),
        PatternRule(
            name="variable_spelling",
            pattern=r"varible|variabel",
            message="Typo in variable spelling",
            severity=Severity.WARNING,
        ),
        PatternRule(
            name="if_parentheses",
            pattern=r"\bif\b(?!\s*\()",
            message="if statement requires parentheses around condition",
            unless=r"^(//|/\*|\*)",
        ),
        PatternRule(
            name="strict_equality",
            pattern=r"(?<![!=<>])==(?!=)",
            message="Consider using === instead of == for strict equality",
            severity=Severity.WARNING,
        ),
        MissingSemicolonRule(),
        BalanceRule("curly_brace_balance", "{", "}", "curly braces"),
        BalanceRule("parenthesis_balance", "(", ")", "parentheses"),
    ),
    corrector_rules=tuple(
        RewriteRule.literal(typo, correct) for typo, correct in KEYWORD_TYPOS.items()
    ),
)
