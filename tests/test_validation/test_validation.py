"""Tests for markup diagnostics."""

from tablescope import ScopeConfig, scope_markup
from tablescope.model import Diagnostic, Severity
from tablescope.parser import parse_markup
from tablescope.validation import ALL_RULES, validate
from tablescope.validation.rules import (
    check_identifier,
    check_inline_styles,
    check_style_block,
    check_table_root,
    check_unscoped_selectors,
)

CONFIG = ScopeConfig()


def _rules(diagnostics: list[Diagnostic]) -> set[str]:
    return {d.rule for d in diagnostics}


class TestCleanDocument:
    def test_raw_output_only_reports_unscoped_selectors(self, gt_html):
        diagnostics = validate(parse_markup(gt_html), CONFIG)
        # the raw output still has unscoped selectors
        assert _rules(diagnostics) == {"check_unscoped_selectors"}

    def test_scoped_output_is_clean(self, gt_html):
        assert validate(parse_markup(scope_markup(gt_html)), CONFIG) == []


class TestCheckIdentifier:
    def test_missing(self):
        diags = check_identifier(parse_markup("<style></style><table>"), CONFIG)
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].fix

    def test_present(self, gt_html):
        assert check_identifier(parse_markup(gt_html), CONFIG) == []


class TestCheckStyleBlock:
    def test_missing(self):
        diags = check_style_block(parse_markup('<table id="t">'), CONFIG)
        assert _rules(diags) == {"check_style_block"}

    def test_style_after_table_does_not_count(self):
        diags = check_style_block(parse_markup('<table id="t"><style>a{}</style>'), CONFIG)
        assert len(diags) == 1


class TestCheckTableRoot:
    def test_missing(self):
        diags = check_table_root(parse_markup('<div id="t"></div>'), CONFIG)
        assert "No <table>" in diags[0].message

    def test_nested(self):
        doc = parse_markup('<table id="t"><tr><td><table></table></td></tr></table>')
        diags = check_table_root(doc, CONFIG)
        assert "Found 2 table elements" in diags[0].message

    def test_single(self, gt_html):
        assert check_table_root(parse_markup(gt_html), CONFIG) == []


class TestCheckInlineStyles:
    def test_inline_styles_reported(self):
        doc = parse_markup('<table id="t"><tr><td style="color: red">x</td></tr></table>')
        diags = check_inline_styles(doc, CONFIG)
        assert diags[0].severity is Severity.INFO
        assert "1 inline style" in diags[0].message

    def test_wrapper_style_ignored(self, gt_html):
        assert check_inline_styles(parse_markup(gt_html), CONFIG) == []


class TestCheckUnscopedSelectors:
    def test_reports_each_selector(self):
        doc = parse_markup('<style>#t .a, .b { x: y; } .c { z: w; }</style><table id="t">')
        diags = check_unscoped_selectors(doc, CONFIG)
        assert [d.selector for d in diags] == [".b", ".c"]
        assert str(diags[0]) == "WARNING [selector=.b]: Selector is not scoped to the table id."

    def test_no_identifier_skipped(self):
        doc = parse_markup("<style>.a {}</style><table>")
        assert check_unscoped_selectors(doc, CONFIG) == []


class TestValidate:
    def test_runs_all_rules(self):
        diagnostics = validate(parse_markup(""), CONFIG)
        assert _rules(diagnostics) == {"check_identifier", "check_style_block", "check_table_root"}

    def test_extra_rules(self, gt_html):
        def always(document, config):
            return [Diagnostic(rule="always", severity=Severity.ERROR, message="boom")]

        diagnostics = validate(parse_markup(scope_markup(gt_html)), CONFIG, extra_rules=[always])
        assert len(diagnostics) == 1
        assert diagnostics[0].is_error

    def test_default_config(self, gt_html):
        assert validate(parse_markup(scope_markup(gt_html))) == []

    def test_all_rules_registered(self):
        assert len(ALL_RULES) == 5
