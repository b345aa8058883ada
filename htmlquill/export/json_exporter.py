"""
JSON exporter for render node trees.

Handles JSON export of the node forest produced by ``convert``.
"""

import json
from typing import Any, Dict, Sequence, Union
from pathlib import Path
import logging

from ..models.render_node import RenderNode

logger = logging.getLogger(__name__)

class JSONExporter:
    """
    Exports a render node forest as JSON.
    """

    def __init__(self, nodes: Sequence[RenderNode], indent: int = 2, ensure_ascii: bool = False):
        """
        Initialize JSON exporter.

        Args:
            nodes: Root nodes to export
            indent: JSON indentation level
            ensure_ascii: Whether to ensure ASCII encoding
        """
        self.nodes = list(nodes)
        self.indent = indent
        self.ensure_ascii = ensure_ascii

        logger.debug("JSON exporter initialized")

    def export_tree(self) -> Dict[str, Any]:
        """Return the forest as a JSON-ready dictionary."""
        return {"nodes": [node.to_dict() for node in self.nodes]}

    def export_to_string(self) -> str:
        return json.dumps(self.export_tree(), indent=self.indent, ensure_ascii=self.ensure_ascii)

    def export(self, output_path: Union[str, Path]) -> bool:
        """
        Export the forest to a JSON file.

        Args:
            output_path: Output file path

        Returns:
            True if export successful, False otherwise
        """
        try:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(self.export_to_string())

            logger.info(f"Render tree exported to JSON: {output_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to export render tree to JSON: {e}")
            return False
