"""
Tests for snippet analysis and reports.
"""

import json

import pytest
from aria_helper.analysis import (
    DEFAULT_STATE_HINT,
    AnalysisReport,
    analyze_snippet,
    problematic_attributes,
    summarize_aria_states,
    summarize_roles,
)
from aria_helper.aria_data import ARIA_STATE_HINTS
from aria_helper.smell_detector import Diagnostic, SmellKind


class TestSummarizeRoles:
    """Tests for role summaries."""

    def test_explicit_roles(self):
        """Test unique explicit roles and the first known one."""
        summary = summarize_roles(
            '<div role="Foo"></div><div role="Tab">A</div><div role="tab">B</div>')

        assert summary.explicit_roles == ['foo', 'tab']
        assert summary.unknown_roles == ['foo']
        assert summary.primary_role.name == 'tab'
        assert summary.is_implicit is False
        assert summary.implicit_roles == []

    def test_only_unknown_roles(self):
        """Test unknown roles leave no primary role."""
        summary = summarize_roles('<div role="fancy"></div>')
        assert summary.primary_role is None
        assert summary.unknown_roles == ['fancy']

    def test_implicit_fallback(self):
        """Test implicit roles are used when no role attribute exists."""
        summary = summarize_roles('<nav><a href="/">Home</a><a href="/b">B</a></nav>')

        assert summary.explicit_roles == []
        assert summary.implicit_roles == ['navigation', 'link']
        assert summary.primary_role.name == 'navigation'
        assert summary.is_implicit is True

    def test_nothing_found(self):
        """Test snippets without any role."""
        summary = summarize_roles('<div><span>hi</span></div>')
        assert summary.primary_role is None
        assert summary.implicit_roles == []
        assert summarize_roles(None).explicit_roles == []


class TestSummarizeAriaStates:
    """Tests for aria-* attribute summaries."""

    def test_hint_and_issue(self):
        """Test hints come from the table and issues from diagnostics."""
        states = summarize_aria_states('<button aria-expanded="true">Menu</button>')

        assert len(states) == 1
        assert states[0].name == 'aria-expanded'
        assert states[0].value == 'true'
        assert states[0].hint == ARIA_STATE_HINTS['aria-expanded']
        assert states[0].has_issue is True

    def test_fallback_hint(self):
        """Test attributes without a hint."""
        states = summarize_aria_states('<div role="slider" aria-valuenow="3">', diagnostics=[])
        assert states[0].hint == DEFAULT_STATE_HINT
        assert states[0].has_issue is False

    def test_given_diagnostics_used(self):
        """Test correlation uses the diagnostics passed in."""
        diagnostics = [Diagnostic(kind=SmellKind.EMPTY_NAME, message="",
                                  subject_attribute='aria-label')]
        states = summarize_aria_states(
            '<nav aria-label="x" aria-hidden="true">', diagnostics=diagnostics)

        assert [(s.name, s.has_issue) for s in states] == [
            ('aria-label', True),
            ('aria-hidden', False),
        ]

    def test_blank(self):
        """Test blank snippets."""
        assert summarize_aria_states('  ') == []
        assert summarize_aria_states(None) == []

    def test_problematic_attributes(self):
        """Test attribute names are collected from diagnostics."""
        diagnostics = [
            Diagnostic(kind=SmellKind.REDUNDANT_ROLE, message="", subject_role='button'),
            Diagnostic(kind=SmellKind.EMPTY_NAME, message="", subject_attribute='aria-label'),
            Diagnostic(kind=SmellKind.DIALOG_WITHOUT_MODAL, message="",
                       subject_attribute='aria-modal'),
        ]
        assert problematic_attributes(diagnostics) == {'aria-label', 'aria-modal'}
        assert problematic_attributes([]) == set()


class TestAnalysisReport:
    """Tests for analyze_snippet and report output."""

    def setup_method(self):
        """Set up test fixtures."""
        self.report = analyze_snippet('<div role="switch">', source='switch.html')

    def test_counts(self):
        """Test totals and per-category counts."""
        report = self.report

        assert isinstance(report, AnalysisReport)
        assert report.source == 'switch.html'
        assert report.total_smells == 3
        assert report.has_smells is True
        assert report.category_counts == {
            'interaction': 1,
            'accessible-name': 1,
            'attributes': 1,
        }
        assert report.kind_counts['missing-required-attribute'] == 1

    def test_fixes(self):
        """Test the fix result is bundled."""
        assert self.report.fixes_available == 1
        assert self.report.fixed_text == '<div role="switch" aria-checked="false">'

    def test_roles(self):
        """Test the role summary is bundled."""
        assert self.report.roles.primary_role.name == 'switch'

    def test_to_json(self):
        """Test JSON export."""
        data = json.loads(self.report.to_json())

        assert data['source'] == 'switch.html'
        assert data['total_smells'] == 3
        assert data['diagnostics'][0]['kind'] == 'switch-without-checked'
        assert data['diagnostics'][0]['category'] == 'interaction'
        assert '<code>' not in data['diagnostics'][0]['text']
        assert data['changes'][0]['kind'] == 'added-aria-checked'
        assert data['roles']['primary_role']['name'] == 'switch'

    def test_to_text(self):
        """Test the human-readable report."""
        text = self.report.to_text()

        assert "ARIA SNIPPET ANALYSIS REPORT" in text
        assert "Source: switch.html" in text
        assert "Total Smells: 3" in text
        assert "Role: switch (widget)" in text
        assert "switch-without-checked" in text
        assert 'Added default aria-checked="false"' in text
        assert '<div role="switch" aria-checked="false">' in text

    def test_clean_snippet(self):
        """Test a snippet with nothing to report."""
        report = analyze_snippet('<button>Save</button>')

        assert report.source == 'inline'
        assert report.total_smells == 0
        assert report.has_smells is False
        assert report.category_counts == {}
        assert report.changes == []
        text = report.to_text()
        assert "No obvious ARIA issues detected." in text
        assert "Implicit role: button" in text

    def test_empty_snippet(self):
        """Test empty input."""
        report = analyze_snippet('')
        assert report.total_smells == 0
        assert report.fixed_text == ''
        assert "No role attributes or implicit roles detected." in report.to_text()
        assert json.loads(report.to_json())['diagnostics'] == []
