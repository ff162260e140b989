import io

from bintree.node import Node
from bintree.render import print_tree, render


def _full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_full_tree()) == expected


def test_render_single_node():
    assert render(Node(7)) == "(007)\n"


def test_render_empty_tree():
    assert render(None) == ""


def test_render_line_count_and_labels():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    lines = render(root).splitlines()
    assert len(lines) == 3
    text = "\n".join(lines)
    for label in ("(098)", "(012)", "(402)", "(054)", "(128)"):
        assert text.count(label) == 1
    assert all(line == line.rstrip() for line in lines)


def test_render_label_rows_follow_depth():
    root = _full_tree()
    lines = render(root).splitlines()
    assert "(098)" in lines[0]
    assert "(012)" in lines[1] and "(402)" in lines[1]
    assert "(256)" in lines[2]


def test_print_tree_writes_render_output():
    root = _full_tree()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = Node(5)
    root.insert_left(3)
    print_tree(root)
    assert capsys.readouterr().out == render(root)


def test_print_tree_empty_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""