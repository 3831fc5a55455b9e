"""Parse-tree nodes whose labels take the form ``TYPE`` or ``TYPE:VALUE``."""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass, field
from typing import IO, Iterator, Optional

INDENT = "  "
# Longest type name node_type() returns when the label carries a value.
TYPE_NAME_LIMIT = 127


@dataclass
class TreeNode:
    """A node of an abstract syntax tree.

    Children may contain ``None`` placeholders; they are skipped when the
    tree is printed or saved.
    """

    label: str
    children: list[Optional[TreeNode]] = field(default_factory=list)

    @property
    def value(self) -> Optional[str]:
        """The part of the label after the first colon, or None."""
        _, sep, rest = self.label.partition(":")
        return rest if sep else None

    @property
    def type_name(self) -> str:
        """The part of the label before the first colon, or the whole label."""
        head, sep, _ = self.label.partition(":")
        return head[:TYPE_NAME_LIMIT] if sep else self.label

    def is_type(self, type_name: str) -> bool:
        """Tell whether this node's type matches *type_name*.

        For labels with a value, *type_name* matches when it starts with the
        label's type portion.
        """
        head, sep, _ = self.label.partition(":")
        if sep:
            return type_name.startswith(head)
        return self.label == type_name

    def iter_lines(self, level: int = 0) -> Iterator[str]:
        """Yield the tree's lines, two spaces of indentation per level."""
        yield f"{INDENT * level}{self.label}"
        for child in self.children:
            if child is not None:
                yield from child.iter_lines(level + 1)

    def save(self, file: IO[str], level: int = 0) -> None:
        """Write the indented tree to *file*."""
        for line in self.iter_lines(level):
            file.write(line + "\n")

    def print(self, level: int = 0) -> None:
        """Write the indented tree to standard output."""
        self.save(sys.stdout, level)


def make_node(label: str, *args: Optional[TreeNode]) -> TreeNode:
    """Create a node with the given children."""
    if label is None:
        raise ValueError("make_node: null label passed")
    children = list(args)
    for index, child in enumerate(children):
        if child is None:
            warnings.warn(f"make_node: null child node at index {index}", stacklevel=2)
    return TreeNode(label, children)


def make_leaf(label: str) -> TreeNode:
    """Create a node without children."""
    if label is None:
        raise ValueError("make_leaf: null label passed")
    return TreeNode(label)


def make_leaf_str(label: str, value: str) -> TreeNode:
    """Create a leaf labelled ``label:value``."""
    if label is None or value is None:
        raise ValueError("make_leaf_str: null label or value passed")
    return make_leaf(f"{label}:{value}")


def make_leaf_type(type_name: str) -> TreeNode:
    """Create a leaf labelled ``TYPE:<type_name>``."""
    if type_name is None:
        raise ValueError("make_leaf_type: null type passed")
    return make_leaf_str("TYPE", type_name)


def node_value(node: Optional[TreeNode]) -> Optional[str]:
    """Return the value portion of a node's label, or None."""
    return None if node is None else node.value


def node_type(node: Optional[TreeNode]) -> Optional[str]:
    """Return the type portion of a node's label, or None for no node."""
    return None if node is None else node.type_name


def is_node_type(node: Optional[TreeNode], type_name: Optional[str]) -> bool:
    """Tell whether *node* has the type *type_name*."""
    if node is None or type_name is None:
        return False
    return node.is_type(type_name)


def print_tree(node: Optional[TreeNode], level: int = 0) -> None:
    """Print the tree rooted at *node* to standard output."""
    if node is not None:
        node.print(level)


def save_tree(node: Optional[TreeNode], file: Optional[IO[str]], level: int = 0) -> None:
    """Save the tree rooted at *node* to *file*."""
    if node is not None and file is not None:
        node.save(file, level)