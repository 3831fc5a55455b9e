# treedot

`treedot` has two modules.

- `treedot.tree` builds labelled parse trees of the kind a compiler front end produces. It can write a tree as indented text.
- `treedot.dot` reads indented text and turns it into a Graphviz DOT graph.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Building trees

A label has the form `TYPE` or `TYPE:VALUE`. The helpers in `treedot.tree` build a tree like this:

```python
from treedot.tree import make_node, make_leaf, make_leaf_str, make_leaf_type, save_tree

decl = make_node(
    "decl",
    make_leaf_type("int"),
    make_leaf_str("ID", "x"),
    make_leaf("SEMI"),
)

with open("parsetree.txt", "w") as fh:
    save_tree(decl, fh, 0)
```

The code above writes this to `parsetree.txt`, with two spaces of indentation per level:

```
decl
  TYPE:int
  ID:x
  SEMI
```

### Functions and classes

- `make_node(label, *children)` creates a `TreeNode` that has the given children. A `None` child produces a warning. It is kept in the tree and skipped when the tree is written out.
- `make_leaf(label)` creates a node with no children.
- `make_leaf_str(label, value)` creates a leaf labelled `label:value`.
- `make_leaf_type(name)` creates a leaf labelled `TYPE:name`.
- Passing `None` as a label, value or type name raises `ValueError`.

The following functions inspect a node. Each one also exists as a member of `TreeNode`:

| Function | Member | Result |
| --- | --- | --- |
| `node_type(node)` | `node.type_name` | The part of the label before the first colon, or the whole label when there is no colon. |
| `node_value(node)` | `node.value` | The part after the first colon, or `None` when there is no colon. |
| `is_node_type(node, name)` | `node.is_type(name)` | Whether the node's type matches. |

How `is_node_type` matches depends on the label:

- If the label has no colon, the whole label must equal `name`.
- If the label has a colon, `name` only has to start with the type portion.

The following write a tree out:

- `node.iter_lines(level)` yields the indented lines.
- `node.save(file, level)` and `save_tree(node, file, level)` write those lines to a file.
- `node.print(level)` and `print_tree(node, level)` write them to standard output.

## Converting to DOT

```
treedot [INPUT] [OUTPUT]
```

`INPUT` defaults to `parsetree.txt` and `OUTPUT` defaults to `parsetree.dot`. The command prints a confirmation line when it succeeds. If it cannot read or write a file, or if the input is malformed, it prints an error to standard error and exits with status 1. You can also run it as `python -m treedot.dot`.

From Python:

```python
from treedot.dot import convert, parse_indented, to_dot

convert("parsetree.txt", "parsetree.dot")

with open("parsetree.txt") as fh:
    root = parse_indented(fh)
print(to_dot(root))
```

### How the input is read

`parse_indented(lines)` builds a tree of `DotNode` objects. If the input is empty, it returns `None`.

Each line becomes one node, and every leading space counts as one level of depth. A line with no indentation becomes the root. For an indented line at depth *n*, the parser keeps only the first *n* nodes on its stack of open nodes. The last node it kept becomes the line's parent.

This rule is not the same as "two spaces per level". A file written by `save_tree` uses two spaces per level, so in such a file a sibling that follows another sibling gets attached under that earlier sibling instead of under their shared parent.

If an indented line has no open node to attach to, `parse_indented` raises `ValueError`.

Two limits apply to `DotNode`:

- A label is cut to 99 characters.
- A node holds at most ten children. `DotNode.add_child` raises `TooManyChildrenError` (a `ValueError`) for the eleventh.

### How the output is written

- `dot_lines(node)` yields one statement for each node and one for each edge.
- `to_dot(root)` wraps those statements in `digraph ParseTree { ... }`.

Each label is used as the node's identifier, so nodes that share a label become one node in the graph. Labels are written as they are, without escaping, so a label that contains `"` produces invalid DOT.

## What treedot does not do

- It does not lex or parse program source text. The trees have to be built by your own parser through `treedot.tree`.
- It does not produce token lists or intermediate code.
- It does not render images. To draw the graph, pass the `.dot` file to Graphviz, for example `dot -Tpng parsetree.dot -o parsetree.png`.