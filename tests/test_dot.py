import pytest

from treedot.dot import (
    MAX_CHILDREN,
    MAX_LABEL_LENGTH,
    DotNode,
    TooManyChildrenError,
    convert,
    dot_lines,
    main,
    parse_indented,
    to_dot,
)

LISTING = ["root\n", " a\n", "  b\n", " c\n"]


def test_parse_indented_structure():
    root = parse_indented(LISTING)
    assert root.label == "root"
    assert [child.label for child in root.children] == ["a", "c"]
    assert [child.label for child in root.children[0].children] == ["b"]
    assert root.children[1].children == []


def test_parse_empty_input():
    assert parse_indented([]) is None


def test_indented_first_line_rejected():
    with pytest.raises(ValueError):
        parse_indented([" orphan\n"])


def test_label_is_truncated():
    node = DotNode("x" * 300)
    assert len(node.label) == MAX_LABEL_LENGTH - 1


def test_add_child_limit():
    parent = DotNode("p")
    for index in range(MAX_CHILDREN):
        parent.add_child(DotNode(str(index)))
    with pytest.raises(TooManyChildrenError):
        parent.add_child(DotNode("extra"))
    assert len(parent.children) == MAX_CHILDREN


def test_too_many_children_while_parsing():
    lines = ["r\n"] + [f" c{i}\n" for i in range(MAX_CHILDREN + 1)]
    with pytest.raises(TooManyChildrenError):
        parse_indented(lines)


def test_dot_lines_order():
    root = parse_indented(LISTING)
    assert list(dot_lines(root)) == [
        '"root" [label="root"];',
        '"root" -> "a";',
        '"a" [label="a"];',
        '"a" -> "b";',
        '"b" [label="b"];',
        '"root" -> "c";',
        '"c" [label="c"];',
    ]


def test_to_dot_wraps_in_digraph():
    text = to_dot(DotNode("only"))
    assert text == 'digraph ParseTree {\n"only" [label="only"];\n}\n'


def test_to_dot_without_root():
    assert to_dot(None) == "digraph ParseTree {\n}\n"


def test_convert_round_trip(tmp_path):
    source = tmp_path / "parsetree.txt"
    target = tmp_path / "parsetree.dot"
    source.write_text("".join(LISTING), encoding="utf-8")
    convert(str(source), str(target))
    assert target.read_text(encoding="utf-8") == to_dot(parse_indented(LISTING))


def test_main_success(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.dot"
    source.write_text("root\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == to_dot(DotNode("root"))
    assert str(target) in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    status = main([str(tmp_path / "missing.txt"), str(tmp_path / "out.dot")])
    assert status == 1
    assert "Error" in capsys.readouterr().err
    assert not (tmp_path / "out.dot").exists()