"""
HTML tokenizer - delivers open/text/close events from raw markup.

Wraps the standard library ``html.parser.HTMLParser``:
- tag and attribute names arrive lower-cased
- character references are decoded before text and attribute values are delivered
- events are passed on raw, without implied end tags or end-tag balancing
"""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from typing import Dict, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class MarkupEventSink(Protocol):
    """Receiver of tokenizer events, e.g. ``TreeBuilder``."""

    def open(self, tag: str, attributes: Optional[Dict[str, str]] = None) -> object: ...

    def text(self, raw: str) -> object: ...

    def close(self, tag: str) -> object: ...


class MarkupTokenizer(HTMLParser):
    """HTML parser forwarding tags and text to an event sink."""

    def __init__(self, sink: MarkupEventSink):
        super().__init__(convert_charrefs=True)
        self.sink = sink
        self.in_style = False

    @staticmethod
    def _attributes(attrs: List[Tuple[str, Optional[str]]]) -> Dict[str, str]:
        attributes: Dict[str, str] = {}
        for name, value in attrs:
            # first occurrence of a repeated attribute wins
            if name not in attributes:
                attributes[name] = value if value is not None else ""
        return attributes

    def handle_starttag(self, tag: str, attrs: list) -> None:
        """Handle an opening tag."""
        if tag == "style":
            self.in_style = True
        self.sink.open(tag, self._attributes(attrs))

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        # HTML mode: "<div/>" opens the element, it does not close it
        if tag == "style":
            self.in_style = True
            self.set_cdata_mode(tag)
        self.sink.open(tag, self._attributes(attrs))

    def handle_endtag(self, tag: str) -> None:
        if tag == "style":
            self.in_style = False
        self.sink.close(tag)

    def handle_data(self, data: str) -> None:
        if self.in_style:
            return
        self.sink.text(data)


def tokenize(markup: str, sink: MarkupEventSink) -> bool:
    """
    Feed markup through the tokenizer into ``sink``.

    Args:
        markup: Raw markup
        sink: Event receiver

    Returns:
        True if the whole input was tokenized, False if tokenizing stopped early
    """
    tokenizer = MarkupTokenizer(sink)
    try:
        tokenizer.feed(markup)
        tokenizer.close()
        return True
    except Exception as e:
        logger.error(f"Failed to tokenize markup: {e}")
        return False
