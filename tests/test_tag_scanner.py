"""
Tests for the tag and attribute scanner.
"""

import pytest
from aria_helper.tag_scanner import (
    attribute_value,
    explicit_role,
    extract_aria_attributes,
    find_first_close,
    find_matching_close,
    has_attribute,
    inner_text_after,
    iter_tags,
    plain_text,
    roles_in,
    visible_text,
)


class TestIterTags:
    """Tests for tag scanning."""

    def test_opening_and_self_closing_tags(self):
        """Test closing tags, comments and doctypes are skipped."""
        snippet = '<!DOCTYPE html><div role="tab">A</div><!-- note --><br/>'
        tags = list(iter_tags(snippet))

        assert [tag.name for tag in tags] == ['div', 'br']
        assert tags[0].is_self_closing is False
        assert tags[1].is_self_closing is True

    def test_positions(self):
        """Test tag spans point back into the text."""
        snippet = '<div role="tab">A</div>'
        tag = next(iter_tags(snippet))

        assert tag.start == 0
        assert tag.end == 16
        assert snippet[tag.start:tag.end] == tag.text
        assert tag.attribute_text == ' role="tab"'

    def test_case_handling(self):
        """Test names are lowercased but raw names kept."""
        tag = next(iter_tags('<DIV Role=" TAB ">'))
        assert tag.name == 'div'
        assert tag.raw_name == 'DIV'
        assert tag.role == 'tab'

    def test_lazy(self):
        """Test iter_tags returns a generator."""
        tags = iter_tags('<a><b>')
        assert next(tags).name == 'a'
        assert next(tags).name == 'b'

    def test_empty_input(self):
        """Test empty, None and plain-text input."""
        assert list(iter_tags('')) == []
        assert list(iter_tags(None)) == []
        assert list(iter_tags('just words < 3')) == []


class TestAttributes:
    """Tests for attribute helpers."""

    def test_extract_aria_attributes(self):
        """Test aria-* pairs keep order and value case."""
        attrs = extract_aria_attributes('<div ARIA-Expanded="True" aria-controls=\'p1\'>')

        assert [(a.name, a.value) for a in attrs] == [
            ('aria-expanded', 'True'),
            ('aria-controls', 'p1'),
        ]

    def test_extract_across_tags(self):
        """Test extraction ignores tag boundaries."""
        attrs = extract_aria_attributes('<a aria-label="x">t</a><b aria-hidden="true">')
        assert [a.name for a in attrs] == ['aria-label', 'aria-hidden']

    def test_extract_empty(self):
        """Test extraction from empty input."""
        assert extract_aria_attributes('') == []
        assert extract_aria_attributes(None) == []

    def test_unquoted_values_ignored(self):
        """Test unquoted values count as absent."""
        assert explicit_role('<div role=button>') is None
        assert extract_aria_attributes('<div aria-hidden=true>') == []

    def test_attribute_value(self):
        """Test value lookup."""
        text = ' id="x" TITLE="Hello"'
        assert attribute_value(text, 'title') == 'Hello'
        assert attribute_value(text, 'href') is None

    def test_empty_values(self):
        """Test empty quoted values."""
        assert has_attribute(' role=""', 'role') is True
        assert has_attribute(' role=""', 'role', allow_empty=False) is False

    def test_explicit_role_normalized(self):
        """Test roles are trimmed and lowercased."""
        assert explicit_role(' role=" Switch "') == 'switch'
        assert explicit_role(' role="   "') is None
        assert explicit_role('') is None

    def test_prefixed_names_not_matched(self):
        """Test data-role and similar names are not role."""
        assert explicit_role(' data-role="button"') is None
        assert has_attribute(' x-aria-label="a"', 'aria-label') is False

    def test_roles_in(self):
        """Test explicit roles in order with duplicates."""
        snippet = '<div role="tab"></div><span></span><div role="Tab"></div>'
        assert roles_in(snippet) == ['tab', 'tab']


class TestPairedTags:
    """Tests for closing-tag matching."""

    def setup_method(self):
        """Set up test fixtures."""
        self.nested = '<div><div>a</div></div>'
        self.outer = next(iter_tags(self.nested))

    def test_first_close_is_non_greedy(self):
        """Test the first same-named closing tag is found."""
        assert find_first_close(self.nested, self.outer) == (11, 17)

    def test_matching_close_tracks_depth(self):
        """Test depth tracking finds the tag's own closing tag."""
        assert find_matching_close(self.nested, self.outer) == (17, 23)

    def test_self_closing_ignored_for_depth(self):
        """Test self-closing same-named tags do not open a level."""
        text = '<div><div/>x</div>'
        assert find_matching_close(text, next(iter_tags(text))) == (12, 18)

    def test_unbalanced(self):
        """Test missing closing tags."""
        text = '<div><span>x</span>'
        assert find_matching_close(text, next(iter_tags(text))) is None
        assert find_first_close(text, next(iter_tags(text))) is None

    def test_self_closing_has_no_close(self):
        """Test self-closing tags never match a close."""
        text = '<div/></div>'
        assert find_matching_close(text, next(iter_tags(text))) is None


class TestVisibleText:
    """Tests for visible text extraction."""

    def test_inner_text_strips_markup(self):
        """Test nested markup and whitespace are removed."""
        text = '<button><span> Save  file </span></button>'
        assert inner_text_after(text, next(iter_tags(text))) == 'Savefile'

    def test_inner_text_empty(self):
        """Test an empty element gives an empty string."""
        text = '<button><svg></svg></button>'
        assert inner_text_after(text, next(iter_tags(text))) == ''

    def test_inner_text_without_close(self):
        """Test tags without a closing tag give None."""
        text = '<div role="switch">'
        assert inner_text_after(text, next(iter_tags(text))) is None

    def test_entities_decoded(self):
        """Test character references count as text."""
        assert visible_text('&amp;') == '&'
        assert visible_text(' plain ') == 'plain'

    def test_plain_text(self):
        """Test markup fragments become plain text."""
        assert plain_text('Use <code>&lt;nav&gt;</code> here') == 'Use <nav> here'
