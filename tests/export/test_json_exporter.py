"""
Tests for JSONExporter.
"""

import json

from htmlquill.api import convert
from htmlquill.export.json_exporter import JSONExporter


class TestJSONExporter:
    """Test cases for JSONExporter class."""

    def test_export_tree(self):
        nodes = convert("<p>Hello <b>world</b></p>")

        data = JSONExporter(nodes).export_tree()

        assert list(data) == ["nodes"]
        paragraph = data["nodes"][0]
        assert paragraph["type"] == "block"
        assert paragraph["children"][0]["text"] == "Hello "
        assert paragraph["children"][1]["styles"]["font_weight"] == "bold"

    def test_export_to_string(self):
        nodes = convert("<p>Zażółć</p>")

        output = JSONExporter(nodes, indent=None).export_to_string()

        assert "Zażółć" in output
        assert json.loads(output)["nodes"][0]["children"][0]["text"] == "Zażółć"

    def test_export_to_file(self, temp_dir):
        nodes = convert("<div><br></div>")
        output_path = temp_dir / "out" / "tree.json"

        assert JSONExporter(nodes).export(output_path) is True

        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert data["nodes"][0]["children"][0]["type"] == "break"

    def test_export_failure_reported(self, temp_dir):
        blocker = temp_dir / "file"
        blocker.write_text("x", encoding="utf-8")

        assert JSONExporter([]).export(blocker / "tree.json") is False

    def test_empty_forest(self):
        assert JSONExporter([]).export_tree() == {"nodes": []}
