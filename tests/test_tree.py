import pytest

from meteorite.tree import Tree
from meteorite.tree_model import TreeItem


def sample_items():
    return [
        TreeItem("0", "root"),
        TreeItem("1", "a", parent_id="0"),
        TreeItem("2", "b", parent_id="0"),
        TreeItem("3", "a1", parent_id="1"),
    ]


def ids(tree):
    return [row.id for row in tree.visible_rows()]


def test_toggle_expands_internal_state():
    tree = Tree(sample_items())
    result = tree.toggle("0")
    assert result == frozenset({"0"})
    assert ids(tree) == ["0", "1", "2"]


def test_toggle_twice_collapses():
    tree = Tree(sample_items())
    tree.toggle("0")
    tree.toggle("0")
    assert ids(tree) == ["0"]


def test_toggle_leaf_changes_nothing():
    calls = []
    tree = Tree(sample_items(), on_toggle=calls.append)
    tree.toggle("0")
    before = tree.current_expanded
    assert tree.toggle("2") == before
    assert len(calls) == 1


def test_on_toggle_receives_full_set():
    calls = []
    tree = Tree(sample_items(), on_toggle=calls.append)
    tree.toggle("0")
    tree.toggle("1")
    assert calls == [frozenset({"0"}), frozenset({"0", "1"})]


def test_controlled_tree_keeps_external_set():
    calls = []
    tree = Tree(sample_items(), expanded={"0"}, on_toggle=calls.append)
    tree.toggle("1")
    assert calls == [frozenset({"0", "1"})]
    assert ids(tree) == ["0", "1", "2"]
    tree.expanded = calls[-1]
    assert ids(tree) == ["0", "1", "3", "2"]


def test_enter_toggles_and_selects():
    selected = []
    tree = Tree(sample_items(), on_select=selected.append)
    assert tree.key("0", "Enter") is True
    assert selected == ["0"]
    assert tree.current_expanded == frozenset({"0"})


def test_space_toggles_without_selecting():
    selected = []
    tree = Tree(sample_items(), on_select=selected.append)
    assert tree.key("0", " ") is True
    assert selected == []
    assert "0" in tree.current_expanded


def test_arrow_keys():
    tree = Tree(sample_items())
    assert tree.key("0", "ArrowLeft") is False
    assert tree.key("0", "ArrowRight") is True
    assert tree.key("0", "ArrowRight") is False
    assert tree.key("0", "ArrowLeft") is True
    assert tree.current_expanded == frozenset()


def test_unhandled_key():
    tree = Tree(sample_items())
    assert tree.key("0", "x") is False


def test_select_calls_handler():
    selected = []
    tree = Tree(sample_items(), on_select=selected.append)
    tree.select("0")
    assert selected == ["0"]


def test_hidden_node_raises_key_error():
    tree = Tree(sample_items())
    with pytest.raises(KeyError):
        tree.select("3")
    with pytest.raises(KeyError):
        tree.toggle("missing")


def test_render_chevrons_and_guides():
    tree = Tree(sample_items(), expanded={"0"})
    html = tree.render()
    assert html.startswith('<ul class="met-tree " role="tree">')
    assert "▾" in html
    assert "▸" in html
    assert "met-tree-guide-corner" in html
    assert "met-tree-guide-tee" in html
    assert 'aria-expanded="true"' in html


def test_render_without_guides():
    tree = Tree(sample_items(), expanded={"0"}, show_guides=False)
    assert "met-tree-guides" not in tree.render()


def test_render_escapes_labels():
    tree = Tree([TreeItem("x", "<b>")])
    html = tree.render()
    assert "&lt;b&gt;" in html
    assert "<b>" not in html


def test_render_leaf_toggle_and_icon():
    tree = Tree([TreeItem("x", "X", icon="*")])
    html = tree.render()
    assert "met-tree-toggle-leaf" in html
    assert '<span class="met-tree-icon">*</span>' in html