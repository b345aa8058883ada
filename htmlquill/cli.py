"""
Command-line interface for htmlquill.

Usage:
    htmlquill convert page.html --css theme.css --output tree.json
    htmlquill tree page.html
    htmlquill version
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from .exceptions import HtmlQuillError
from .models.render_node import ContainerNode, ImageNode, RenderNode, TextNode
from .utils.rich_logger import LOG_LEVELS, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="htmlquill",
        description="htmlquill - convert HTML and CSS into styled render node trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  htmlquill convert page.html --output tree.json
  htmlquill convert page.html --css theme.css
  htmlquill tree page.html
  htmlquill version
        """,
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--log-level",
        choices=[level for level in LOG_LEVELS if level != "CRITICAL"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Use plain logging output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser("convert", help="Convert HTML to a JSON render tree")
    convert_parser.add_argument("input", help="Input HTML file")
    convert_parser.add_argument("--css", help="External style sheet file")
    convert_parser.add_argument(
        "-o", "--output",
        help="Output JSON file (default: stdout)"
    )
    convert_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )

    tree_parser = subparsers.add_parser("tree", help="Print the render tree")
    tree_parser.add_argument("input", help="Input HTML file")
    tree_parser.add_argument("--css", help="External style sheet file")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _check_input(path: Path, console: Console) -> bool:
    if not path.exists():
        console.print(f"Error: File not found: {path}", style="red", markup=False)
        return False
    return True


def cmd_convert(args, console: Console) -> int:
    """Handle convert command."""
    from .api import convert_file
    from .export import JSONExporter

    input_path = Path(args.input)
    if not _check_input(input_path, console):
        return 1

    nodes = convert_file(input_path, args.css)
    exporter = JSONExporter(nodes, indent=args.indent)

    if not args.output:
        print(exporter.export_to_string())
        return 0

    if not exporter.export(args.output):
        console.print(f"Error: Could not write {args.output}", style="red", markup=False)
        return 1

    console.print(f"Saved: {args.output} ({len(nodes)} root nodes)", markup=False)
    return 0


def _node_label(node: RenderNode) -> Text:
    label = Text(node.kind.value, style="bold cyan")
    if isinstance(node, TextNode):
        label.append(f" {node.text!r}", style="green")
    elif isinstance(node, ImageNode):
        label.append(f" src={node.src!r}", style="magenta")
    styles = ", ".join(f"{key}={getattr(value, 'value', value)}" for key, value in node.styles.items())
    label.append(f"  {{{styles}}}", style="dim")
    return label


def build_tree(nodes: Sequence[RenderNode], title: str = "document") -> Tree:
    """Build a rich tree showing the render node forest."""
    tree = Tree(Text(title, style="bold"))

    def add(branch: Tree, node: RenderNode) -> None:
        child_branch = branch.add(_node_label(node))
        if isinstance(node, ContainerNode):
            for child in node.children:
                add(child_branch, child)

    for node in nodes:
        add(tree, node)
    return tree


def cmd_tree(args, console: Console) -> int:
    """Handle tree command."""
    from .api import convert_file

    input_path = Path(args.input)
    if not _check_input(input_path, console):
        return 1

    nodes = convert_file(input_path, args.css)
    console.print(build_tree(nodes, title=input_path.name))
    return 0


def cmd_version(args=None, console: Optional[Console] = None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"htmlquill v{__version__}")
    print("HTML and CSS to styled render node trees")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        return cmd_version(args)

    setup_logging(args.log_level, use_rich=not args.no_rich)
    console = Console(stderr=True)

    try:
        if args.command == "convert":
            return cmd_convert(args, console)
        elif args.command == "tree":
            return cmd_tree(args, Console())
        elif args.command == "version":
            return cmd_version(args)
    except HtmlQuillError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
