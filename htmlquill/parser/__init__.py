"""
Parser module for markup and style sheet input.

This module contains the HTML tokenizer adapter and the style sheet
extractor and rule parser.
"""

from .stylesheet import StyleRule, combine_style_text, extract_style_blocks, parse_stylesheet
from .html_tokenizer import MarkupEventSink, MarkupTokenizer, tokenize

__all__ = [
    "StyleRule",
    "combine_style_text",
    "extract_style_blocks",
    "parse_stylesheet",
    "MarkupEventSink",
    "MarkupTokenizer",
    "tokenize",
]
