# coursekit

Small, self-contained exercises from an introductory programming course,
written as a Python library with no third-party dependencies.

## Modules

- `coursekit.basics`
  - `countdown(start)` – the integers from `start` down to 0.
  - `tip_total(bill)` – the bill with an 18% tip added.
  - `quadratic_roots(a, b, c)` – a tuple of the real roots: one, two (the
    `+sqrt` root first) or none.
  - `count_the(text)` – how many times `the` occurs in the first line of
    `text`.
  - `riemann(a, b, n, f=math.cos)` – left Riemann sum with `n` strips;
    `ValueError` if `n < 1`.
  - `gen_rand(a, b, rng)` and `sample_stats(a, b, n, seed)` – uniform samples
    on `[a, b]` and a `SampleStats` record of theoretical and sampled mean
    and variance.
  - `factorial(n)` (recursive, `ValueError` for `n < 1`) and
    `factorial_iter(n)` (1 for `n < 1`).
- `coursekit.arrays` – `reverse_array` (in place), `format_array`,
  `swap_rows` (`IndexError` for a row outside the matrix), `transpose` and
  `format_matrix`.
- `coursekit.search` – `linear_search`, `binary_search` and
  `binary_search_rec` over the inclusive index range `l..r`; each returns the
  index of the key or `None`. `format_range` renders that range.
- `coursekit.sorting` – in-place `bubble_sort`, `insert_sort` and
  `quick_sort(array, low=0, high=None)` with a last-element `partition`.
- `coursekit.nqueen` – `solve_queens(n)` returns the first solution board
  (rows of 0 and 1) or `None`; `solve(board, row, trace)` backtracks and can
  hand each placement and backtrack to a `trace` callable; `is_safe` and
  `format_board` are available on their own.
- `coursekit.wifi` – the `Wifi` record, `parse_wifi_line`, `read_wifi_file`,
  `count_lines`, `format_wifi_table`, `sort_by_strength` (quick sort by
  ascending signal strength) and `WifiList`, a linked list with
  `append`, `search_ssid`, iteration and `len`.
- `coursekit.linked` – `LinkedList` behind an empty head node (`append`,
  `prepend`, `search_id`, `insert_before`, `remove`, `remove_all`, `format`),
  `Stack` (`push`, `pop`, `format`) raising `StackUnderflowError` when
  popped empty, and the `Node` cell they share.
- `coursekit.bst` – `TreeNode`, `insert_node`, `bst_search`, `preorder`,
  `inorder`, `postorder` (as lists), `find_min`, `find_max`, `get_height`
  (-1 for an empty tree) and `format_tree`, which draws the tree sideways.
- `coursekit.vehicles` – `Vehicle`, `Airplane` and `Train` with `ride`,
  `load`, `take_crew`, `add_length` and `show_data`, and `City`, which holds
  up to 100 vehicles by default and raises `OverflowError` beyond that.
- `coursekit.people` – `Person` with `show_data`.
- `coursekit.points` – `Point`, moved by `shift(val)` or `point += val`,
  with `show_position`.

The `format_*` and `show_*` functions return strings; nothing is printed
except by the command below.

## Installation

```
pip install .
```

## Examples

```python
from coursekit.search import binary_search
from coursekit.sorting import quick_sort
from coursekit.nqueen import solve_queens
from coursekit.bst import insert_node, inorder

binary_search([11, 12, 22, 25, 34, 64], 0, 5, 25)   # 3
binary_search([11, 12, 22, 25, 34, 64], 0, 5, 99)   # None

data = [50, 80, 30, 90, 40, 10, 70]
quick_sort(data)                                    # [10, 30, 40, 50, 70, 80, 90]

solve_queens(4)
# [[0, 1, 0, 0], [0, 0, 0, 1], [1, 0, 0, 0], [0, 0, 1, 0]]

root = None
for value in (8, 3, 10, 1, 6, 9, 7, 2):
    root = insert_node(root, value)
inorder(root)                                       # [1, 2, 3, 6, 7, 8, 9, 10]
```

## Command line

```
coursekit-wifi [FILES ...] [--search SSID]
```

Each file is a whitespace-separated table whose first line is a header and
whose other lines read `SSID strength<c> channel bandwidth freq max_rate`,
where one character right after the strength is skipped, for example:

```
SSID Strength Channel Bandwidth Frequency MaxRate
CampusNet -45% 6 20 2.437 144.4
GuestNet -70% 11 20 2.462 72.2
```

With no files, `data.txt` is read. After each file the table of all networks
read so far is printed; with `--search` the first network of that name is
reported (`<SSID> is found` or `No match found.`); finally the table is
printed sorted by ascending signal strength. If a file cannot be opened the
command prints `Cannot open the file` and exits with status 1.

## What it does not do

The exercises take their inputs as function arguments; there are no
interactive prompts that read values from the keyboard. The only command is
`coursekit-wifi`.

## Running the tests

```
pip install .[test]
pytest
```