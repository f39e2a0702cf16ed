"""
Tests for the token stream, list item extraction and rejection rules.
"""

from data_model import Region
from html_parser.lists import extract_candidates, iter_item_markup
from html_parser.rules import REJECT_RULES, RejectRule, rejection_reason
from html_parser.tokens import TokenKind, tokenize


def _region(markup: str) -> Region:
    return Region(section="S", subsection=None, anchor="S", markup=markup, start=0, end=len(markup))


class TestTokenize:
    """Only headings, lists and list items become tokens."""

    def test_token_kinds_in_order(self):
        """Tokens follow document order with correct kinds."""
        markup = '<h2 id="A">A</h2><ul><li>x</li></ul>'
        kinds = [t.kind for t in tokenize(markup)]
        assert kinds == [
            TokenKind.HEADING_OPEN, TokenKind.HEADING_CLOSE,
            TokenKind.LIST_OPEN, TokenKind.ITEM_OPEN, TokenKind.ITEM_CLOSE, TokenKind.LIST_CLOSE,
        ]

    def test_heading_anchor_and_offsets(self):
        """Heading tokens carry the id attribute and tag offsets."""
        markup = '<p>x</p><h3 class="c" id="Sub_part">T</h3>'
        first = next(iter(tokenize(markup)))
        assert first.tag == "h3"
        assert first.anchor == "Sub_part"
        assert markup[first.start:first.end] == '<h3 class="c" id="Sub_part">'

    def test_data_id_is_not_an_anchor(self):
        """data-id does not count as id."""
        token = next(iter(tokenize('<h2 data-id="x">T</h2>')))
        assert token.anchor is None

    def test_similar_tag_names_ignored(self):
        """<link>, <header>, <html> are not structural."""
        assert list(tokenize('<link rel="a"><header>h</header><html>')) == []


class TestIterItemMarkup:
    """Top-level items, cut before nested lists."""

    def test_plain_items(self):
        """Each top-level <li> yields its inner markup."""
        assert list(iter_item_markup("<ul><li>One</li><li>T<b>w</b>o</li></ul>")) == ["One", "T<b>w</b>o"]

    def test_nested_list_cuts_item_and_sub_items_dropped(self):
        """Sub-items never appear as separate items."""
        markup = (
            "<ul><li>One item here</li>"
            "<li>Two<ul><li>sub</li><li>sub2</li></ul></li>"
            "<li>Three</li></ul>"
        )
        assert list(iter_item_markup(markup)) == ["One item here", "Two", "Three"]

    def test_nested_ordered_list_cuts_item(self):
        """Numbered sub-lists cut the item too."""
        assert list(iter_item_markup("<ul><li>Main<ol><li>x</li></ol> tail</li></ul>")) == ["Main"]

    def test_unclosed_items(self):
        """A sibling <li> or </ul> closes an item without </li>."""
        assert list(iter_item_markup("<ul><li>A<li>B</ul>")) == ["A", "B"]

    def test_item_outside_list(self):
        """A bare <li> is still a top-level item."""
        markup = "<li>The Earth is <i>not</i> a perfect sphere.</li>"
        assert list(iter_item_markup(markup)) == ["The Earth is <i>not</i> a perfect sphere."]

    def test_bare_item_with_nested_list(self):
        """Nested items under a bare <li> are dropped as well."""
        markup = "<li>Parent<ul><li>child</li></ul></li><li>Next</li>"
        assert list(iter_item_markup(markup)) == ["Parent", "Next"]

    def test_no_lists(self):
        """Markup without lists yields nothing."""
        assert list(iter_item_markup("<p>Only a paragraph.</p>")) == []


class TestRejectionRules:
    """Named rejection predicates."""

    def test_length_boundary(self):
        """Exactly 20 characters is rejected, 21 passes."""
        assert rejection_reason("x" * 20) == "too_short"
        assert rejection_reason("x" * 21) is None

    def test_navigation_prefixes(self):
        """'Main article:' and 'See also:' stubs are rejected."""
        assert rejection_reason("Main article: Myth of the flat Earth") == "navigation"
        assert rejection_reason("See also: List of common misconceptions") == "navigation"

    def test_lowercase_letter_marker(self):
        """'a. ' sub-enumeration artifacts are rejected."""
        assert rejection_reason("b. The word comes from Latin vomere.") == "letter_marker"

    def test_uppercase_initial_is_not_a_marker(self):
        """'A. ' starts a name, not a sub-enumeration."""
        assert rejection_reason("A. Lincoln did not write the address on an envelope.") is None

    def test_rules_are_extensible(self):
        """A custom rule list replaces the default one."""
        rules = REJECT_RULES + [RejectRule("mentions_x", lambda t: "forbidden" in t)]
        assert rejection_reason("This sentence is forbidden to extract.", rules) == "mentions_x"


class TestExtractCandidates:
    """Cleaned, filtered candidates of one region."""

    def test_example_item_passes(self):
        """A simple item becomes one candidate."""
        region = _region("<ul><li>The Earth is <i>not</i> a perfect sphere.</li></ul>")
        assert extract_candidates(region) == ["The Earth is not a perfect sphere."]

    def test_rejected_items_dropped(self):
        """Short, navigational and marker items do not survive."""
        region = _region(
            "<ul>"
            "<li>Main article: Foo</li>"
            "<li>Short one</li>"
            "<li>a. marker item that is quite long</li>"
            "<li>Bats are not blind and many see well.</li>"
            "</ul>"
        )
        assert extract_candidates(region) == ["Bats are not blind and many see well."]
