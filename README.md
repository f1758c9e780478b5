# dsalgo

Classic data structures, search algorithms, sorting routines and two small
tic-tac-toe games, written in plain Python with no third-party dependencies.

## What is inside

### Graph search

- `dsalgo.graph.Graph(vertices)`: undirected adjacency-list graph on
  vertices `0 .. vertices - 1`. `add_edge(u, v)`, `bfs(start)` and
  `dfs(start)` return visiting orders; `depth_limited_search(node, goal,
  limit)` tells whether the goal lies within `limit` edges on a simple path;
  `iddfs(start, goal, max_depth)` returns the smallest depth at which the
  goal is found, or `None`.
- `dsalgo.matrix_bfs.LabelledGraph(labels)`: adjacency-matrix graph whose
  vertices carry labels. Edges are added by index with `add_edge(a, b)`,
  `bfs(start_label)` returns labels in breadth-first order, and
  `format_matrix()` renders the 0/1 matrix tab-separated.
- `dsalgo.astar.a_star(graph, heuristic, start, goal)`: A* over a mapping of
  node to `(neighbour, weight)` pairs; returns the path as a list and raises
  `PathNotFoundError` when the goal cannot be reached. `SAMPLE_GRAPH` and
  `SAMPLE_HEURISTIC` hold a small worked example.
- `dsalgo.aostar.ao_star(cost, heuristic, goals, start)`: AO*-style search
  over a square cost matrix (`INF` or `None` for no edge). Returns whether
  the start was solved and the list of `(node, lowest successor heuristic)`
  expansions.
- `dsalgo.dijkstra.WeightedDigraph(vertices)`: directed weighted graph;
  `shortest_distances(source)` returns a list of distances with `None` for
  unreachable vertices, and `format_distances` renders it as a table.
- `dsalgo.kruskal`: `kruskal(edges, vertices)` returns the spanning-forest
  `Edge`s in ascending weight order; the edge list can be built from a
  matrix with `matrix_edges` or from adjacency lists with `adjacency_edges`.

### Trees

- `dsalgo.bst.BinarySearchTree(values=())`: `insert`, `delete`, `mirror`,
  `level_order`, `height`, `leaves`, `inorder` and `in`.
- `dsalgo.avl.AVLTree`: self-balancing `insert`, with `inorder`,
  `preorder`, `height` and a sideways `render`.
- `dsalgo.threaded_tree.ThreadedBinaryTree`: in-order threaded search tree
  with `insert`, `inorder`, `preorder` and `postorder`; in- and pre-order
  follow the threads. Inserting a key twice raises `DuplicateKeyError`.
- `dsalgo.employee_tree.EmployeeTree`: `Employee(emp_id, name, salary)`
  records kept in order of id; `insert`, `search(emp_id)`, iteration in
  ascending id and `len()`. A record with an id already present is ignored.

### Linear structures

- `dsalgo.linked_list.DoublyLinkedList`: `push_front`, `push_back`,
  iteration in both directions and `len()`.
- `dsalgo.linked_queue.LinkedQueue`: `enqueue`, `dequeue`, `is_empty`;
  dequeuing an empty queue raises `IndexError`.
- `dsalgo.linked_stack.LinkedStack`: `push`, `pop`, `is_empty`; iteration
  runs from the top down, and popping an empty stack raises `IndexError`.
- `dsalgo.ring_deque.RingDeque(capacity=5)`: fixed-capacity double-ended
  queue with `push_front`, `push_back`, `pop_front`, `pop_back`,
  `is_empty` and `is_full`; pushing when full or popping when empty raises
  `IndexError`.
- `dsalgo.hashing.OpenAddressingTable(probing, size=10)`: fixed-size table
  with `Probing.LINEAR`, `Probing.DOUBLE` or `Probing.QUADRATIC`.
  `insert(key, value)` returns the slot used; negative keys raise
  `ValueError` and a key with no free probed slot raises `TableFullError`.
  `render()` lists every slot, showing `-1` for empty ones.

### Sorting and records

- `dsalgo.sorting`: `heap_sort`, `merge_sort` and `quick_sort`, each taking
  an optional `key` and returning a `SortResult` with the sorted `items` and
  the number of `swaps` counted.
- `dsalgo.records`: `Student` and `Employee` records, with
  `format_students` and `format_employees` producing tab-separated tables.

### Small problems

- `dsalgo.notation`: `infix_to_postfix` and `infix_to_prefix` for
  expressions with single-character operands and `+ - * / ^`; unbalanced
  parentheses raise `ValueError`.
- `dsalgo.stack_math`: `factorial(n)` and `fibonacci(n)` (the first `n`
  terms, always at least `0, 1`).
- `dsalgo.cryptarithm`: `solve()` returns the first digit assignment for
  EAT + THAT = APPLE as a letter-to-digit dict, or `None`;
  `is_valid_solution` checks one assignment.
- `dsalgo.swapped.find_swapped(values)`: returns the `(index, value)` pairs
  of the two misplaced elements of a nearly sorted sequence.
- `dsalgo.tictactoe`: a `Board` with `place`, `is_winner`, `is_full`,
  `empty_cells` and `render`, and `random_move` for a random opponent.
- `dsalgo.tictactoe_ai`: `evaluate`, `minimax`, `best_move` and a compact
  `render`.

## Example

```python
from dsalgo.graph import Graph
from dsalgo.notation import infix_to_postfix

g = Graph(5)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4)]:
    g.add_edge(u, v)

print(g.bfs(0))                       # [0, 1, 2, 3, 4]
print(g.dfs(0))                       # [0, 1, 3, 4, 2]
print(infix_to_postfix("a+b*(c-d)"))  # abcd-*+
```

## Playing tic-tac-toe

Two terminal games are installed as commands:

```
dsalgo-tictactoe [--seed N]   # against a computer that moves at random
dsalgo-tictactoe-ai           # against a computer that plays by minimax
```

Moves are entered as a row and a column, each from 0 to 2. In the random
game the computer moves first; `--seed` makes its moves repeatable. In the
minimax game you move first.

## What it does not do

Apart from the two games there are no commands: the data structures and
algorithms are used from Python code only, with no interactive menus, and
nothing is stored between runs.

## Running the tests

```
pip install -e ".[test]"
pytest
```