"""Export module for render node trees."""

from .json_exporter import JSONExporter

__all__ = ["JSONExporter"]
