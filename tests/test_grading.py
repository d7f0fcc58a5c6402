import io

import pytest

from treemapkit.grading import (
    CheckFailed,
    Section,
    Word,
    check_create,
    check_erase_leaf,
    check_erase_one_child,
    check_erase_two_children,
    check_first,
    check_insert,
    check_minimum,
    check_next_right_child,
    check_next_sequence,
    check_next_up_parent,
    check_search,
    check_upper_bound_found,
    check_upper_bound_missing,
    initialize_tree,
    lower_than_int,
    main,
    run,
)
from treemapkit.treemap import TreeNode


def _no_failures(lines):
    return all("[FAILED]" not in line for line in lines)


def test_lower_than_int():
    assert lower_than_int(10, 15)
    assert not lower_than_int(15, 10)
    assert not lower_than_int(5239, 5239)


def test_initialize_tree_shape():
    tree = initialize_tree()
    assert tree.root.pair.key == 5239
    assert tree.root.pair.value == Word(5239, "auto")
    assert tree.root.left.pair.key == 1273
    assert tree.root.right.pair.key == 8213
    assert tree.root.right.left.pair.value.word == "hoja"
    assert tree.root.right.left.parent is tree.root.right
    assert tree.root.left.parent is tree.root
    assert tree.root.parent is None


def test_initialize_tree_iterates_in_order():
    tree = initialize_tree()
    assert [pair.key for pair in tree] == [1273, 5239, 6980, 8213]


def test_check_create_passes():
    lines = check_create()
    assert "   [OK] root==NULL" in lines
    assert _no_failures(lines)


def test_check_search_passes():
    lines = check_search(initialize_tree())
    assert "   [OK] encuentra dato con clave 6980" in lines
    assert lines[-1] == "   [OK] retorna NULL: search(key=7010)"


def test_check_search_reports_missing_key_with_earlier_lines():
    tree = initialize_tree()
    tree.root.right = None
    with pytest.raises(CheckFailed) as info:
        check_search(tree)
    assert info.value.message == "no encuentra dato con clave 8213"
    assert "   [OK] encuentra dato con clave 5239" in info.value.lines


def test_check_insert_passes():
    lines = check_insert(initialize_tree())
    assert lines[0] == "   [OK] no inserta dato repetido"
    assert "   [ INFO ] insertando dato con clave 900" in lines
    assert _no_failures(lines)


def test_check_insert_detects_extra_child():
    tree = initialize_tree()
    child = TreeNode.create(1000, Word(1000, "extra"))
    tree.root.left.left = child
    child.parent = tree.root.left
    with pytest.raises(CheckFailed, match="se inserta dato repetido"):
        check_insert(tree)


def test_check_minimum_passes():
    lines = check_minimum()
    assert lines[-1] == "   [OK] minimum retorna el nodo con clave 100"


@pytest.mark.parametrize(
    "check",
    [check_erase_leaf, check_erase_one_child, check_erase_two_children],
)
def test_erase_checks_pass(check):
    lines = check()
    assert lines[-1] == "   [OK] dato eliminado correctamente"


def test_check_first_passes():
    lines = check_first(initialize_tree())
    assert "   [OK] first retorna nodo 1273" in lines
    assert lines[-1] == "   [OK] first retorna nodo 100"


def test_check_first_detects_wrong_first():
    tree = initialize_tree()
    tree.root.left = None
    with pytest.raises(CheckFailed, match="first no retorna nodo 1273"):
        check_first(tree)


def test_next_checks_pass():
    assert check_next_right_child()[-1] == "   [OK] next retorna nodo 2000"
    assert check_next_sequence()[-1] == "   [OK] next retorna NULL"
    assert check_next_up_parent()[-1] == "   [OK] next retorna nodo 5239"


def test_upper_bound_checks_pass():
    tree = initialize_tree()
    found = check_upper_bound_found(tree)
    assert found[-1] == "   [OK] upperbound de 6981 retorna 8213"
    missing = check_upper_bound_missing(tree)
    assert missing == ["   [OK] upperbound de 8214 retona NULL"]


def test_upper_bound_missing_detects_larger_key():
    tree = initialize_tree()
    tree.insert(9000, Word(9000, "extra"))
    with pytest.raises(CheckFailed) as info:
        check_upper_bound_missing(tree)
    assert info.value.lines == []


def test_run_all_reports_total():
    out = io.StringIO()
    total = run(None, out)
    text = out.getvalue()
    assert total == 70
    assert text.endswith("\ntotal_score: 70/70\n")
    assert "[FAILED]" not in text
    assert "SUCCESS" not in text


def test_run_create_section_stops_with_success():
    out = io.StringIO()
    score = run(0, out)
    text = out.getvalue()
    assert score == 5
    assert text.startswith("\nTest createTreeMap...\n   [ INFO ] inicializando el arbol...\n")
    assert text.endswith("SUCCESS\n")


def test_run_erase_step_runs_minimum_first():
    out = io.StringIO()
    score = run(3, out)
    text = out.getvalue()
    assert score == 5
    assert text.index("Test minimum") < text.index("Test removeNode")
    assert text.endswith("SUCCESS\n")
    assert "Test searchTreeMap" not in text


def test_run_minus_one_has_no_total_line():
    out = io.StringIO()
    assert run(-1, out) == 70
    assert "total_score" not in out.getvalue()


def test_run_unknown_id_only_runs_minimum():
    out = io.StringIO()
    assert run(12, out) == 0
    text = out.getvalue()
    assert text.startswith("\nTest minimum...\n")
    assert "partial_score" not in text


def test_section_is_a_record():
    section = Section("upperBound", 10, frozenset({10, 11}), True, ())
    assert section.title == "upperBound"
    assert 11 in section.test_ids


def test_main_with_test_id(capsys):
    assert main(["2"]) == 0
    text = capsys.readouterr().out
    assert "Test insertTreeMap" in text
    assert text.endswith("SUCCESS\n")


def test_main_non_numeric_argument_selects_zero(capsys):
    assert main(["abc"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("\nTest createTreeMap...")
    assert text.endswith("SUCCESS\n")