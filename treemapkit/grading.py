"""Scored self-check of the tree map against a small fixed tree."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, TextIO

from .treemap import Pair, TreeMap, TreeNode, minimum

Lines = List[str]
Check = Callable[[Optional[TreeMap]], Lines]


@dataclass
class Word:
    """A keyed word stored as a map value."""

    id: int
    word: str


class CheckFailed(Exception):
    """A check found the map misbehaving.

    ``lines`` holds the report lines produced before the failure.
    """

    def __init__(self, message: str, lines: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.lines = list(lines)


def _ok(message: str) -> str:
    return f"   [OK] {message}"


def _info(message: str) -> str:
    return f"   [ INFO ] {message}"


def _failed(message: str) -> str:
    return f"   [FAILED] {message}"


def lower_than_int(key1: int, key2: int) -> bool:
    """Order integer keys numerically."""
    return key1 < key2


def _add_child(parent: TreeNode, side: str, word: Word) -> TreeNode:
    node = TreeNode.create(word.id, word)
    if side == "left":
        parent.left = node
    else:
        parent.right = node
    node.parent = parent
    return node


def initialize_tree() -> TreeMap:
    """Build the fixed four-node tree the checks run against."""
    tree = TreeMap(lower_than_int)
    root = TreeNode.create(5239, Word(5239, "auto"))
    tree.root = root
    right = _add_child(root, "right", Word(8213, "rayo"))
    _add_child(right, "left", Word(6980, "hoja"))
    _add_child(root, "left", Word(1273, "reto"))
    return tree


def _initialized(lines: Lines) -> TreeMap:
    lines.append(_info("inicializando el arbol..."))
    return initialize_tree()


def _word_id(pair: Optional[Pair]) -> Optional[int]:
    return None if pair is None else pair.value.id


def _node_key(node: Optional[TreeNode]) -> Optional[int]:
    return None if node is None else node.pair.key


def check_create() -> Lines:
    """An empty map keeps its ordering and has no root."""
    lines: Lines = []
    tree = TreeMap(lower_than_int)
    lines.append(_ok("createTreeMap retorna un objeto"))
    if tree.root is not None:
        raise CheckFailed("root debe ser NULL", lines)
    lines.append(_ok("root==NULL"))
    if tree.lower_than is not lower_than_int or tree.lower_than(10, 15) != 1:
        raise CheckFailed("la funcion lower_than no fue guardada de forma correcta", lines)
    lines.append(_ok("Funcion de comparcion inicializada correctamente"))
    return lines


def _expect_found(
    tree: TreeMap,
    key: int,
    node_of: Callable[[], Optional[TreeNode]],
    current_error: str,
    lines: Lines,
) -> None:
    pair = tree.search(key)
    if _word_id(pair) != key:
        raise CheckFailed(f"no encuentra dato con clave {key}", lines)
    lines.append(_ok(f"encuentra dato con clave {key}"))
    if tree.current is not node_of():
        raise CheckFailed(current_error, lines)
    lines.append(_ok("current actualizado correctamente"))


def check_search(tree: TreeMap) -> Lines:
    """Search finds keys at each depth, moves the cursor, and misses absent keys."""
    lines: Lines = []
    _expect_found(tree, 5239, lambda: tree.root, "no actualiza current (5329)", lines)
    _expect_found(
        tree,
        8213,
        lambda: tree.root.right if tree.root else None,
        "no actualiza current correctamente (8213)",
        lines,
    )
    _expect_found(
        tree,
        6980,
        lambda: tree.root.right.left if tree.root and tree.root.right else None,
        "no actualiza current correctamente",
        lines,
    )
    key = 7010
    if tree.search(key) is not None:
        raise CheckFailed("retorna dato y clave no existe (7010)\n", lines)
    lines.append(_ok(f"retorna NULL: search(key={key})"))
    return lines


def check_insert(tree: TreeMap) -> Lines:
    """Duplicates are ignored; a new key lands in place with parent and cursor set."""
    lines: Lines = []
    duplicate = Word(1273, "repetido")
    tree.insert(duplicate.id, duplicate)
    left = tree.root.left if tree.root else None
    if left is None or left.left is not None or left.right is not None:
        raise CheckFailed("se inserta dato repetido", lines)
    lines.append(_ok("no inserta dato repetido"))

    fresh = _initialized(lines)
    word = Word(900, "maicol")
    lines.append(_info("insertando dato con clave 900"))
    fresh.insert(word.id, word)
    parent = fresh.root.left if fresh.root else None
    node = parent.left if parent else None
    if node is None or node.pair.value is not word:
        raise CheckFailed("dato insertado no se encuentra en root->left->left", lines)
    lines.append(_ok("dato insertado correctamente"))
    if node.pair.key != word.id:
        raise CheckFailed("clave de dato no se guarda correctamente", lines)
    if node.parent is not parent:
        raise CheckFailed("no se inicializa el padre del nuevo nodo", lines)
    if fresh.current is not node:
        raise CheckFailed("no se actualiza el current", lines)
    lines.append(_ok("current actualizado correctamente"))
    return lines


def check_minimum() -> Lines:
    """``minimum`` returns the leftmost node, also after a smaller key is added."""
    lines: Lines = []
    tree = _initialized(lines)
    node = minimum(tree.root)
    if node is None:
        raise CheckFailed("minimum(root) retorna NULL", lines)
    if node.pair.key != 1273:
        raise CheckFailed(
            f"minimum retorna nodo con clave {node.pair.key} (deberia retornar 1273)", lines
        )
    lines.append(_ok("minimum retorna el nodo con clave 1273"))

    if minimum(tree.root.left) is None:
        raise CheckFailed("minimum(root->left) retorn NULL (debería retornar 1273)", lines)

    lines.append(_info("agregando nodo con clave 100"))
    _add_child(tree.root.left, "left", Word(100, "first_word"))
    node = minimum(tree.root)
    if node is None or node.pair.key != 100:
        raise CheckFailed(
            f"minimum retorna nodo con clave {_node_key(node)} (deberia retornar 100)", lines
        )
    lines.append(_ok("minimum retorna el nodo con clave 100"))
    return lines


def check_erase_leaf() -> Lines:
    """Erasing a leaf unlinks it from its parent."""
    lines: Lines = []
    tree = _initialized(lines)
    lines.append(_info("eliminando dato con clave 1273 (nodo sin hijos)"))
    tree.erase(1273)
    if tree.root is None or tree.root.left is not None:
        raise CheckFailed(
            "el dato no se elimino correctamente: tree->root->left != NULL", lines
        )
    lines.append(_ok("dato eliminado correctamente"))
    return lines


def check_erase_one_child() -> Lines:
    """Erasing a node with one child lifts the child into its place."""
    lines: Lines = []
    tree = _initialized(lines)
    lines.append(_info("eliminando dato con clave 8213 (nodo con un hijo)"))
    tree.erase(8213)
    right = tree.root.right if tree.root else None
    if _node_key(right) != 6980:
        raise CheckFailed("el dato no se elimino correctamente root->right!=6980", lines)
    if right.parent is not tree.root:
        raise CheckFailed("falta actualizar el parent de nodo 6980", lines)
    lines.append(_ok("dato eliminado correctamente"))
    return lines


def check_erase_two_children() -> Lines:
    """Erasing a node with two children replaces it with its successor."""
    lines: Lines = []
    tree = _initialized(lines)
    lines.append(_info("eliminando dato con clave 5239 (nodo con dos hijos)"))
    tree.erase(5239)
    if _node_key(tree.root) != 6980:
        raise CheckFailed("el dato no se elimino correctamente root!=6980", lines)
    if _node_key(tree.root.right) != 8213:
        raise CheckFailed("el dato no se elimino correctamente root->right!=8213", lines)
    lines.append(_ok("dato eliminado correctamente"))
    return lines


def check_first(tree: TreeMap) -> Lines:
    """``first`` returns the lowest key, walking down several levels if needed."""
    lines: Lines = []
    pair = tree.first()
    if pair is None:
        raise CheckFailed("first retorna NULL", lines)
    if _word_id(pair) != 1273:
        raise CheckFailed("first no retorna nodo 1273", lines)
    lines.append(_ok("first retorna nodo 1273"))

    fresh = _initialized(lines)
    lines.append(_info("agregando nodo con clave 100"))
    _add_child(fresh.root.left, "left", Word(100, "first_word"))
    if _word_id(fresh.first()) != 100:
        raise CheckFailed("first no retorna nodo 100", lines)
    lines.append(_ok("first retorna nodo 100"))
    return lines


def check_next_right_child() -> Lines:
    """``next`` from a node with a right child goes into that subtree."""
    lines: Lines = []
    tree = _initialized(lines)
    lines.append(_info("agregando nodo con clave 2000"))
    _add_child(tree.root.left, "right", Word(2000, "next_word"))
    lines.append(_info("actualizando current -> nodo 1273"))
    tree.current = tree.root.left
    pair = tree.next()
    if pair is None:
        raise CheckFailed("next retorna NULL", lines)
    if _word_id(pair) != 2000:
        raise CheckFailed("next no retorna nodo 2000", lines)
    lines.append(_ok("next retorna nodo 2000"))
    return lines


def check_next_sequence() -> Lines:
    """``next`` from the root walks the remaining keys and then stops."""
    lines: Lines = []
    tree = _initialized(lines)
    lines.append(_info("actualizando current -> root"))
    tree.current = tree.root
    for expected in (6980, 8213):
        if _word_id(tree.next()) != expected:
            raise CheckFailed(f"next no retorna nodo {expected}", lines)
        lines.append(_ok(f"next retorna nodo {expected}"))
    if tree.next() is not None:
        raise CheckFailed("next != NULL", lines)
    lines.append(_ok("next retorna NULL"))
    return lines


def check_next_up_parent() -> Lines:
    """``next`` from a node without a right child climbs to an ancestor."""
    lines: Lines = []
    tree = _initialized(lines)
    lines.append(_info("agregando nodo con clave 2000"))
    added = _add_child(tree.root.left, "right", Word(2000, "next_word"))
    lines.append(_info("actualizando current -> nodo 2000"))
    tree.current = added
    if _word_id(tree.next()) != 5239:
        raise CheckFailed("next no retorna nodo 5239\n", lines)
    lines.append(_ok("next retorna nodo 5239"))
    return lines


def _expect_bound(tree: TreeMap, key: int, expected: int, tail: str, lines: Lines) -> None:
    pair = tree.upper_bound(key)
    if pair is None:
        raise CheckFailed(f"upperbound de {key} retorna NULL", lines)
    found = _word_id(pair)
    if found != expected:
        raise CheckFailed(f"upperbound de {key} retorna {found}{tail}", lines)
    lines.append(_ok(f"upperbound de {key} retorna {found}"))


def check_upper_bound_found(tree: TreeMap) -> Lines:
    """``upper_bound`` returns the key itself or the next larger one."""
    lines: Lines = []
    _expect_bound(tree, 6980, 6980, "", lines)
    _expect_bound(tree, 6979, 6980, "", lines)
    _expect_bound(tree, 6981, 8213, "\n", lines)
    return lines


def check_upper_bound_missing(tree: TreeMap) -> Lines:
    """``upper_bound`` past the largest key finds nothing."""
    lines: Lines = []
    key = 8214
    if tree.upper_bound(key) is not None:
        raise CheckFailed(f"upperbound de {key} retorna NULL", lines)
    lines.append(_ok("upperbound de 8214 retona NULL"))
    return lines


@dataclass(frozen=True)
class _Step:
    checks: Sequence[Check]
    points: int
    test_id: Optional[int]


@dataclass(frozen=True)
class Section:
    """A titled group of scored checks selected by test id."""

    title: str
    max_score: Optional[int]
    test_ids: Optional[frozenset]
    uses_tree: bool
    steps: Sequence[_Step]


def _without_tree(check: Callable[[], Lines]) -> Check:
    return lambda _tree: check()


SECTIONS = (
    Section("createTreeMap", 5, frozenset({0}), True,
            (_Step((_without_tree(check_create),), 5, 0),)),
    Section("searchTreeMap", 10, frozenset({1}), True,
            (_Step((check_search,), 10, 1),)),
    Section("insertTreeMap", 10, frozenset({2}), True,
            (_Step((check_insert,), 10, 2),)),
    Section("minimum", None, None, False,
            (_Step((_without_tree(check_minimum),), 0, None),)),
    Section("removeNode", 15, frozenset({3, 4, 5}), False, (
        _Step((_without_tree(check_erase_leaf),), 5, 3),
        _Step((_without_tree(check_erase_one_child),), 5, 4),
        _Step((_without_tree(check_erase_two_children),), 5, 5),
    )),
    Section("firstTreeMap", 5, frozenset({6}), True,
            (_Step((check_first,), 5, 6),)),
    Section("nextTreeMap", 15, frozenset({7, 8, 9}), False, (
        _Step((_without_tree(check_next_right_child),), 5, 7),
        _Step((_without_tree(check_next_sequence),), 5, 8),
        _Step((_without_tree(check_next_up_parent),), 5, 9),
    )),
    Section("upperBound", 10, frozenset({10, 11}), True, (
        _Step((check_upper_bound_found,), 5, 10),
        _Step((check_upper_bound_missing,), 5, 11),
    )),
)

TOTAL_SCORE = 70


def _write_lines(out: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        out.write(f"{line}\n")


def _run_section(
    section: Section, selected: int, out: TextIO
) -> tuple[int, bool]:
    tree: Optional[TreeMap] = None
    if section.uses_tree:
        out.write(f"{_info('inicializando el arbol...')}\n")
        tree = initialize_tree()
    score = 0
    for step in section.steps:
        for check in step.checks:
            try:
                _write_lines(out, check(tree))
            except CheckFailed as failure:
                _write_lines(out, failure.lines)
                out.write(f"{_failed(failure.message)}\n")
                return score, False
        score += step.points
        if step.test_id is not None and selected == step.test_id:
            return score, True
    return score, False


def run(test_id: Optional[int] = None, out: Optional[TextIO] = None) -> int:
    """Run the selected sections, write the report and return the score.

    ``test_id`` None or -1 runs every section; None also reports the total.
    A run stops with SUCCESS as soon as the step with ``test_id`` passes.
    """
    out = sys.stdout if out is None else out
    selected = -1 if test_id is None else test_id
    total = 0
    for section in SECTIONS:
        if (
            section.test_ids is not None
            and selected != -1
            and selected not in section.test_ids
        ):
            continue
        out.write(f"\nTest {section.title}...\n")
        score, succeeded = _run_section(section, selected, out)
        if succeeded:
            out.write("SUCCESS\n")
            return total + score
        if section.max_score is not None:
            out.write(f"   partial_score: {score}/{section.max_score}\n")
            total += score
    if test_id is None:
        out.write(f"\ntotal_score: {total}/{TOTAL_SCORE}\n")
    return total


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the checks; an optional first argument selects one test id."""
    args = list(sys.argv[1:] if argv is None else argv)
    test_id = _atoi(args[0]) if args else None
    run(test_id, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())