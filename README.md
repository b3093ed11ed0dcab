# contestsolver

Solvers for four contest problems. Each problem has a plain Python function and a
command. The command reads test cases from a file, or from standard input when no
file is given, and prints one answer per line. All input is whitespace-separated.
It starts with the number of test cases `T`. If the input ends too early, the
command raises `ValueError("unexpected end of input")`.

## Installation

```
pip install .
```

## Problems

### Booster race — `contestsolver.booster`

`min_booster(x, y, speeds)` takes these arguments:

- `x`: the track length.
- `y`: the largest booster.
- `speeds`: the racers' speeds. The last entry is your racer and the others are rivals.

A booster of `b` metres costs one time unit and skips `b` metres. The function
returns the smallest booster from `1` to `y` that makes you finish strictly first.
It returns `0` when you win without a booster, and `-1` when even `y` is not
enough. It raises `ValueError` if `speeds` is empty or holds a speed that is not
positive.

```
contestsolver-booster input.txt
contestsolver-booster < input.txt
```

Each case is `N X Y`, followed by `N` speeds.

### Ordered reversals — `contestsolver.reversals`

`min_flip_pattern(strings)` decides for each string whether to keep it (`0`) or
reverse it (`1`). After the flips, the strings must be strictly increasing. It
returns the lexicographically smallest pattern as a string of `0`s and `1`s. It
returns `None` when no pattern works. It raises `ValueError` for an empty list.

```
contestsolver-reversals < input.txt
```

Each case is `N` followed by `N` strings. An empty line is printed when no
pattern exists.

### Tree selection — `contestsolver.treedp`

`max_selection(values, parents)` solves a rooted tree. The tree is given by node
values and parent indices. Node numbers start at 1, and a parent of `0` marks the
root. The rules are:

- A selected node has no selected children.
- An unselected node with children needs at least one child selected.

The function returns the largest total value. `TreeDP(values, parents).solve()`
gives the same result. `TreeDP` raises `ValueError` in these cases:

- the two lists differ in length;
- a parent index is out of range;
- no node has parent `0`.

```
contestsolver-treedp < input.txt
```

Each case is `n`, then `n` values, then `n` parents.

### Mountain trails — `contestsolver.trails`

`count_routes(x, low, high, east, west)` counts routes made of distinct trails
that alternate between the east and west mountains. Each switch between mountains
adds `x`. A route counts only if its total length lies in `[low, high]`. The count
is taken modulo `MOD` (1 000 000 007). `count_routes` explores routes breadth
first. `count_routes_memo` gives the same count using a memoised depth-first
search over trails sorted by length.

```
contestsolver-trails < input.txt
contestsolver-trails --method bfs input.txt
```

`--method` is `memo` (the default) or `bfs`. Each case is `n m x C D`, then `n`
east lengths, then `m` west lengths.

## Example

```python
from contestsolver.booster import min_booster
from contestsolver.treedp import max_selection

min_booster(10, 5, [3, 2])      # -1
max_selection([5, 3], [0, 1])   # 5
```

## Running the tests

```
pip install .[test]
pytest
```