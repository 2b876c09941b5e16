from meteorite.tree_model import TreeItem, compute_visible_rows


def sample_items():
    return [
        TreeItem("0", "root"),
        TreeItem("1", "a", parent_id="0"),
        TreeItem("2", "b", parent_id="0"),
        TreeItem("3", "a1", parent_id="1"),
        TreeItem("4", "a2", parent_id="1"),
        TreeItem("5", "b1", parent_id="2"),
    ]


def test_all_collapsed_shows_only_roots():
    rows = compute_visible_rows(sample_items(), set())
    assert len(rows) == 1
    assert rows[0].id == "0"
    assert not rows[0].is_expanded


def test_expand_root():
    rows = compute_visible_rows(sample_items(), {"0"})
    assert [r.id for r in rows] == ["0", "1", "2"]
    assert rows[0].is_expanded
    assert rows[1].depth == 1


def test_nested_expand():
    rows = compute_visible_rows(sample_items(), {"0", "1"})
    assert [r.id for r in rows] == ["0", "1", "3", "4", "2"]
    assert rows[2].depth == 2


def test_last_sibling_flags():
    rows = compute_visible_rows(sample_items(), {"0", "1"})
    assert not rows[1].is_last_sibling
    assert rows[4].is_last_sibling
    assert rows[2].ancestors_last == (True, False)


def test_empty_items():
    assert compute_visible_rows([], set()) == []


def test_multiple_roots():
    items = [TreeItem("a", "Alpha"), TreeItem("b", "Beta")]
    rows = compute_visible_rows(items, set())
    assert len(rows) == 2
    assert not rows[0].is_last_sibling
    assert rows[1].is_last_sibling


def test_unknown_parent_is_treated_as_root():
    items = [TreeItem("a", "Alpha"), TreeItem("b", "Beta", parent_id="missing")]
    rows = compute_visible_rows(items, set())
    assert [r.id for r in rows] == ["a", "b"]
    assert all(r.depth == 0 for r in rows)


def test_expanded_child_of_collapsed_parent_stays_hidden():
    rows = compute_visible_rows(sample_items(), {"1"})
    assert [r.id for r in rows] == ["0"]


def test_has_children_and_labels_carried_over():
    rows = compute_visible_rows(sample_items(), {"0", "2"})
    by_id = {r.id: r for r in rows}
    assert by_id["2"].has_children
    assert by_id["5"].label == "b1"
    assert not by_id["5"].has_children
    assert by_id["5"].ancestors_last == (True, True)


def test_icon_carried_over():
    rows = compute_visible_rows([TreeItem("x", "X", icon="*")], set())
    assert rows[0].icon == "*"


def test_ancestors_length_matches_depth():
    rows = compute_visible_rows(sample_items(), {"0", "1", "2"})
    assert all(len(r.ancestors_last) == r.depth for r in rows)