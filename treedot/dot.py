"""Convert an indented parse-tree listing into Graphviz DOT."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

MAX_CHILDREN = 10
MAX_LABEL_LENGTH = 100

DEFAULT_INPUT = "parsetree.txt"
DEFAULT_OUTPUT = "parsetree.dot"


class TooManyChildrenError(ValueError):
    """Raised when a node would get more than MAX_CHILDREN children."""


@dataclass
class DotNode:
    """A node read from an indented listing."""

    label: str
    children: list[DotNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.label = self.label[: MAX_LABEL_LENGTH - 1]

    def add_child(self, child: DotNode) -> None:
        """Append *child*, refusing more than MAX_CHILDREN children."""
        if len(self.children) >= MAX_CHILDREN:
            raise TooManyChildrenError(
                f"maximum children limit reached for {self.label!r}"
            )
        self.children.append(child)


def parse_indented(lines: Iterable[str]) -> Optional[DotNode]:
    """Build a tree from lines whose leading spaces give their depth.

    The number of leading spaces is taken as the depth; a line at depth 0
    becomes the root. Returns None for empty input.
    """
    root: Optional[DotNode] = None
    stack: list[DotNode] = []
    for line in lines:
        label = line.lstrip(" ")
        level = len(line) - len(label)
        node = DotNode(label.rstrip("\n"))
        if level == 0:
            root = node
        else:
            del stack[level:]
            if not stack:
                raise ValueError(f"indented line without a parent: {line!r}")
            stack[-1].add_child(node)
        stack.append(node)
    return root


def dot_lines(node: Optional[DotNode]) -> Iterator[str]:
    """Yield the DOT statements for the node, its edges and its subtrees."""
    if node is None:
        return
    yield f'"{node.label}" [label="{node.label}"];'
    for child in node.children:
        yield f'"{node.label}" -> "{child.label}";'
        yield from dot_lines(child)


def to_dot(root: Optional[DotNode]) -> str:
    """Render the whole tree as a DOT digraph."""
    body = "".join(line + "\n" for line in dot_lines(root))
    return f"digraph ParseTree {{\n{body}}}\n"


def convert(input_path: str = DEFAULT_INPUT, output_path: str = DEFAULT_OUTPUT) -> None:
    """Read an indented listing from *input_path* and write DOT to *output_path*."""
    with open(input_path, encoding="utf-8") as source:
        root = parse_indented(source)
    with open(output_path, "w", encoding="utf-8") as target:
        target.write(to_dot(root))


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    parser = argparse.ArgumentParser(description="Convert a parse-tree listing to DOT.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    try:
        convert(args.input, args.output)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Parse tree in .dot format has been generated in {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())