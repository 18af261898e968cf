from app.validators.base import BalanceRule, PatternRule, RewriteRule, SourceLine, TypoRule, word_pattern
from app.validators.models import Severity
from app.validators.profiles import get_profile, is_supported, list_profiles
from app.validators.profiles.javascript import JAVASCRIPT, MissingSemicolonRule


def make_line(text: str, number: int = 1) -> SourceLine:
    return SourceLine(number=number, raw=text, text=text.strip())


def test_typo_rule_matches_whole_word_only():
    rule = TypoRule("lte", "let")

    assert rule.check(make_line("lte x = 1;"), "") is not None
    assert rule.check(make_line("const filtered = 1;"), "") is None
    assert rule.check(make_line("const ltes = 1;"), "") is None


def test_typo_rule_message_names_both_spellings():
    diagnostic = TypoRule("funtion", "function").check(make_line("funtion foo() {}", 4), "")

    assert diagnostic.line == 4
    assert diagnostic.message == "Typo: 'funtion' should be 'function'"
    assert diagnostic.severity == Severity.ERROR


def test_pattern_rule_unless_suppresses():
    rule = PatternRule("cout_operator", r"\bcout\b", "cout requires << operator", unless=r"<<")

    assert rule.check(make_line("cout Hello;"), "") is not None
    assert rule.check(make_line('cout << "Hello";'), "") is None


def test_pattern_rule_unless_in_source_looks_at_whole_source():
    rule = PatternRule(
        "main_return",
        r"\bint\s+main\b",
        "main function should return an integer",
        severity=Severity.WARNING,
        unless_in_source=r"\breturn\b",
    )
    line = make_line("int main() {")

    assert rule.check(line, "int main() {\n}") is not None
    assert rule.check(line, "int main() {\n  return 0;\n}") is None


def test_balance_rule_reports_both_counts():
    rule = BalanceRule("curly_brace_balance", "{", "}", "curly braces")

    assert rule.check("{ }") is None
    diagnostic = rule.check("{ { }")
    assert diagnostic.line == 1
    assert diagnostic.message == "Unmatched curly braces: 2 opening, 1 closing"


def test_missing_semicolon_rule_skips_blocks_comments_and_functions():
    rule = MissingSemicolonRule()

    assert rule.check(make_line("let x = 1"), "") is not None
    assert rule.check(make_line("let x = 1;"), "") is None
    assert rule.check(make_line("if (a = b) {"), "") is None
    assert rule.check(make_line("// x = 1"), "") is None
    assert rule.check(make_line("const f = () => 1"), "") is None
    assert rule.check(make_line("return a"), "") is None
    assert rule.check(make_line(""), "") is None


def test_word_pattern_bounds_only_word_edges():
    assert word_pattern("lte") == r"\blte\b"
    assert word_pattern("#inlcude").endswith(r"inlcude\b")
    assert not word_pattern("#inlcude").startswith(r"\b")


def test_rewrite_rule_replacement_is_literal():
    rule = RewriteRule.regex(r"x", r"\1")

    assert rule.apply("axb") == r"a\1b"


def test_unknown_language_resolves_to_javascript():
    assert get_profile("ruby") is JAVASCRIPT
    assert get_profile("") is JAVASCRIPT
    assert get_profile(None) is JAVASCRIPT
    assert get_profile("Python") is JAVASCRIPT


def test_registry_lists_closed_language_set():
    assert [profile.id for profile in list_profiles()] == ["javascript", "python", "java", "cpp"]
    assert is_supported("cpp")
    assert not is_supported("rust")


def test_profiles_split_line_and_source_rules():
    javascript = get_profile("javascript")

    assert [rule.name for rule in javascript.source_rules] == ["curly_brace_balance", "parenthesis_balance"]
    assert len(javascript.line_rules) + len(javascript.source_rules) == len(javascript.rules)
    assert get_profile("python").source_rules == ()
