# treemapkit

An ordered map kept in a binary search tree. You supply the ordering as a
"lower than" function, and the map gives you insertion, lookup, removal,
in-order traversal and upper-bound search.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Using the map

```python
from treemapkit.treemap import TreeMap

tree = TreeMap(lambda a, b: a < b)
for word in ["saco", "cese", "case", "cosa"]:
    tree.insert(word, word.upper())

pair = tree.search("cosa")
print(pair.key, pair.value)        # cosa COSA

print(tree.upper_bound("cat").key) # cese: the smallest key not lower than "cat"

tree.erase("cese")

for pair in tree:
    print(pair.key, pair.value)    # in ascending key order
```

Entries are `Pair` objects with `key` and `value` attributes. Two keys count
as equal when neither is lower than the other (`TreeMap.is_equal`). Inserting
a key that is already present leaves the map unchanged, and `insert` ignores a
key or value of `None`. `search(None)` returns `None`.

The map keeps a cursor in its `current` attribute. `first()` moves it to the
smallest key and `next()` moves it one step forward; both return the `Pair` at
the cursor, or `None` when there is nothing there. `search`, `insert` and
`upper_bound` move the cursor to the node they land on; an `upper_bound` that
finds nothing leaves the cursor empty. Removing the node the cursor points at
clears the cursor. Iterating over the map with `for` does not move the cursor.

The tree is exposed as `TreeMap.root`, made of `TreeNode` objects with `pair`,
`left`, `right` and `parent`. `TreeNode.create(key, value)` builds a detached
node, `minimum(node)` returns the leftmost node below a given node, and
`TreeMap.remove_node(node)` unlinks a given node (a node with two children
takes over its successor's key and value).

## Commands

`treemapkit-demo` inserts nine fixed words and prints them in sorted order,
one per line:

```
treemapkit-demo
```

`treemapkit-grade` runs built-in checks of the map against a small fixed tree
and prints a report with a partial score per section and a total out of 70.
The report messages are in Spanish.

```
treemapkit-grade
treemapkit-grade 7
```

An optional number from 0 to 11 selects one check. Only the section holding
that check runs (the `minimum` check, which is not scored, always runs as
well), and the run prints `SUCCESS` and stops as soon as the selected check
passes; no total is printed. The same is available from Python as
`treemapkit.grading.run(test_id, out)`, which returns the score.

## Limits

The tree is not rebalanced, so sorted insertions make it as deep as it is
long. The map has no length, no bulk operations and no storage beyond memory.