"""
Tests for the HTML tokenizer adapter.
"""

from htmlquill.parser.html_tokenizer import MarkupTokenizer, tokenize


class RecordingSink:
    """Event sink collecting every event it receives."""

    def __init__(self):
        self.events = []

    def open(self, tag, attributes=None):
        self.events.append(("open", tag, attributes))

    def text(self, raw):
        self.events.append(("text", raw))

    def close(self, tag):
        self.events.append(("close", tag))


def _events(markup):
    sink = RecordingSink()
    assert tokenize(markup, sink) is True
    return sink.events


class TestMarkupTokenizer:
    """Test cases for MarkupTokenizer."""

    def test_document_order(self):
        events = _events("<div>a<span>b</span></div>")

        assert events == [
            ("open", "div", {}),
            ("text", "a"),
            ("open", "span", {}),
            ("text", "b"),
            ("close", "span"),
            ("close", "div"),
        ]

    def test_names_lower_cased(self):
        events = _events('<DIV CLASS="x">t</DIV>')

        assert events[0] == ("open", "div", {"class": "x"})
        assert events[-1] == ("close", "div")

    def test_entities_decoded(self):
        events = _events('<p title="a &amp; b">1 &lt; 2&nbsp;&#65;</p>')

        assert events[0] == ("open", "p", {"title": "a & b"})
        assert events[1] == ("text", "1 < 2\u00a0A")

    def test_valueless_and_duplicate_attributes(self):
        events = _events('<td nowrap align="left" align="right">x</td>')

        assert events[0] == ("open", "td", {"nowrap": "", "align": "left"})

    def test_self_closing_only_opens(self):
        """Test that '<br/>' and '<div/>' emit only an open event."""
        events = _events("<br/><div/>")

        assert events == [("open", "br", {}), ("open", "div", {})]

    def test_style_text_not_forwarded(self):
        events = _events("<div><style>p { color: red }</style>x</div>")

        assert ("text", "p { color: red }") not in events
        assert ("open", "style", {}) in events
        assert ("close", "style") in events
        assert ("text", "x") in events

    def test_self_closing_style_text_not_forwarded(self):
        """Test that "<style/>" also hides the text up to the closing tag."""
        events = _events("<div><style/>p{color:red}</style><p>t</p></div>")

        assert ("text", "p{color:red}") not in events
        assert ("open", "style", {}) in events
        assert ("close", "style") in events
        assert ("text", "t") in events

    def test_mismatched_close_forwarded_raw(self):
        """Test that end tags are passed on without balancing."""
        events = _events("<div></span></div>")

        assert events == [("open", "div", {}), ("close", "span"), ("close", "div")]

    def test_comments_and_doctype_ignored(self):
        events = _events("<!DOCTYPE html><!-- note --><p>t</p>")

        assert events == [("open", "p", {}), ("text", "t"), ("close", "p")]

    def test_tokenizer_tracks_style_state(self):
        tokenizer = MarkupTokenizer(RecordingSink())
        tokenizer.feed("<style>")

        assert tokenizer.in_style is True
