"""
Pytest configuration for htmlquill
"""

import pytest
import logging
import sys
from pathlib import Path

from htmlquill.parser.stylesheet import StyleRule
from htmlquill.styles.style_resolver import StyleResolver


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for file based tests."""
    return Path(tmp_path)


@pytest.fixture
def sample_rules():
    """Rules in document order: tag rule first, class rule second, id rule last."""
    return [
        StyleRule("p", {"color": "blue", "font-size": "14px"}),
        StyleRule(".note", {"color": "green", "margin": "6"}),
        StyleRule("#intro", {"text-align": "center"}),
    ]


@pytest.fixture
def resolver(sample_rules):
    return StyleResolver(sample_rules)


@pytest.fixture
def sample_html_file(temp_dir):
    path = temp_dir / "page.html"
    path.write_text(
        "<html><head><style>h1 { color: #112233 }</style></head>"
        "<body><h1>Title</h1><p class='note'>Body text</p></body></html>",
        encoding="utf-8",
    )
    return path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to every test without an explicit marker."""
    for item in items:
        if "integration" not in item.keywords and "unit" not in item.keywords:
            item.add_marker(pytest.mark.unit)
