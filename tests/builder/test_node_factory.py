"""
Tests for the node factory.
"""

import pytest

from htmlquill.builder.node_factory import (
    NODE_BUILDERS,
    TAG_KINDS,
    VOID_ELEMENTS,
    create_node,
    is_void_element,
    lookup_tag_kind,
)
from htmlquill.models.render_node import BreakNode, ContainerNode, ImageNode
from htmlquill.styles.defaults import get_user_agent_styles
from htmlquill.utils.enums import FontWeight, NodeKind, TagKind


@pytest.fixture
def base_styles():
    return get_user_agent_styles("div")


class TestTagTable:
    """Test cases for the tag kind table."""

    def test_every_tag_kind_has_a_builder(self):
        """Test that the dispatch covers the whole enumeration."""
        assert set(NODE_BUILDERS) == set(TagKind)

    def test_every_mapped_kind_is_known(self):
        assert set(TAG_KINDS.values()) <= set(TagKind)

    def test_void_elements(self):
        assert VOID_ELEMENTS == {"br", "img", "hr", "input"}
        assert is_void_element("img")
        assert not is_void_element("div")

    def test_unsupported_lookup(self):
        assert lookup_tag_kind("unknown") is None
        assert lookup_tag_kind("style") is None


class TestCreateNode:
    """Test cases for create_node."""

    def test_break(self, base_styles):
        node = create_node("br", {}, base_styles)

        assert isinstance(node, BreakNode)
        assert node.kind == NodeKind.BREAK

    def test_image(self, base_styles):
        node = create_node("img", {"src": "logo.png"}, base_styles)

        assert isinstance(node, ImageNode)
        assert node.src == "logo.png"

    def test_image_without_src(self, base_styles):
        assert create_node("img", {}, base_styles).src is None

    def test_table_attributes(self, base_styles):
        node = create_node("table", {"width": "100%", "cellpadding": "4"}, base_styles)

        assert node.kind == NodeKind.TABLE
        assert node.styles["width"] == "100%"
        assert node.styles["padding"] == 4.0
        assert node.children == []

    def test_table_unparsable_cellpadding(self, base_styles):
        node = create_node("table", {"cellpadding": "wide"}, base_styles)

        assert "padding" not in node.styles

    @pytest.mark.parametrize("tag", ["thead", "tbody"])
    def test_table_sections_are_blocks(self, tag, base_styles):
        assert create_node(tag, {}, base_styles).kind == NodeKind.BLOCK

    def test_row(self, base_styles):
        assert create_node("tr", {}, base_styles).kind == NodeKind.ROW

    @pytest.mark.parametrize("tag", ["td", "th"])
    def test_cell_attributes(self, tag, base_styles):
        node = create_node(tag, {"align": "center", "width": "50px"}, base_styles)

        assert node.kind == NodeKind.CELL
        assert node.styles["text_align"] == "center"
        assert node.styles["width"] == "50px"

    def test_empty_cell_attributes_ignored(self, base_styles):
        node = create_node("td", {"align": "", "width": ""}, base_styles)

        assert node.styles["text_align"] == "left"
        assert "width" not in node.styles

    @pytest.mark.parametrize("tag", ["h1", "h2", "h3", "h4", "h5", "h6", "p", "div", "span"])
    def test_blocks(self, tag, base_styles):
        node = create_node(tag, {}, base_styles)

        assert isinstance(node, ContainerNode)
        assert node.kind == NodeKind.BLOCK
        assert node.children == []

    @pytest.mark.parametrize("tag", ["strong", "b"])
    def test_strong_forces_bold(self, tag, base_styles):
        node = create_node(tag, {"style": "font-weight: normal"}, base_styles)

        assert node.styles["font_weight"] == FontWeight.BOLD

    @pytest.mark.parametrize("tag", ["em", "i"])
    def test_emphasis_adds_no_styling(self, tag, base_styles):
        node = create_node(tag, {}, base_styles)

        assert node.kind == NodeKind.BLOCK
        assert node.styles == base_styles

    @pytest.mark.parametrize("tag", ["unknown", "html", "body", "style", "hr", "input", "a"])
    def test_unsupported(self, tag, base_styles):
        assert create_node(tag, {}, base_styles) is None

    def test_styles_are_copied(self, base_styles):
        """Test that the factory never modifies the resolved styles it is given."""
        node = create_node("b", {}, base_styles)

        assert base_styles["font_weight"] == FontWeight.NORMAL
        assert node.styles is not base_styles
