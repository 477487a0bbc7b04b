# contestkit

Plain-Python solvers for a set of competitive-programming problems. Each
function takes ordinary Python values (ints, lists, strings, grids given as
lists of equal-length strings) and returns the answer. Invalid input, such as
mismatched list lengths or an empty grid, raises `ValueError`. Where a problem
can have no answer, the function returns `None` instead of a sentinel number.

The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.modular`: `power_mod`, `mod_inverse`, `ncr_mod`, `mod_add`,
  `mod_sub`, `mod_mul`, `mod_div`, `lcm`, `smallest_prime_factors`
  (smallest prime factor of every integer below a limit), `primes_up_to`.
- `contestkit.numtheory`: `factorize` (returns `{prime: exponent}`),
  `exponents_divisible_by_count` (whether every prime's total exponent over
  the values is a multiple of how many values there are).
- `contestkit.sequences`: `gcd_sequence_fixable` (whether removing one
  element makes the adjacent-GCD sequence non-decreasing),
  `max_alternating_parity_sum` (largest subarray sum whose neighbours
  alternate in parity).
- `contestkit.expressions`: `min_expression_value` (smallest value of a digit
  string with `+`/`*` placed between all but one pair of neighbouring digits).
- `contestkit.components`: `DisjointSet` (union-find with `find`,
  `union_by_rank`, `union_by_size`, `size_of`), and
  `largest_component_after_fill` (largest `'#'` component after turning one
  whole row or column into `'#'`).
- `contestkit.graphs`: `shortest_paths_with_weights` (costs from vertex 1 to
  vertices 2..n where vertices and edges both carry weights; `None` for
  unreachable vertices).
- `contestkit.mst`: `spanning_tree_weight` (Prim's algorithm from vertex 0).
- `contestkit.counting`: `d_function_count`, `two_sets_ways` (both modulo
  1e9+7).
- `contestkit.combinatorics`: `jury_meeting_orders` (modulo 998244353),
  `digit_sum_multiples`.
- `contestkit.ratings`: `two_movies_rating`, `sofia_restorable`.
- `contestkit.arrays`: `dolce_vita_packs`, `move_it_cost`.
- `contestkit.palindromes`: `half_arrangement` (`None` when a letter other
  than `'i'` occurs an odd number of times).
- `contestkit.flooding`: `sinking_land` (land area recorded year by year as
  cells sink).
- `contestkit.search`: `final_boss_turns` (bisection over the turn count),
  `min_popcorn_stands` (fewest stands covering every flavour; `None` if
  impossible).
- `contestkit.geometry`: `manhattan_circle_centre` (1-based `(row, column)`,
  `None` when the grid holds no `'#'`).
- `contestkit.prefixes`: `good_prefix_count`.
- `contestkit.selection`: `narrowest_spread`, `souvenir_cost`.
- `contestkit.boxes`: `secret_box_max`.

## Examples

```python
from contestkit.modular import power_mod, ncr_mod
from contestkit.mst import spanning_tree_weight
from contestkit.components import DisjointSet
from contestkit.geometry import manhattan_circle_centre

power_mod(2, 10, 1_000_000_007)      # 1024
ncr_mod(5, 2, 1_000_000_007)         # 10

spanning_tree_weight(4, [(0, 1, 2), (0, 3, 4), (0, 2, 3)])  # 9

ds = DisjointSet(5)
ds.union_by_size(1, 2)               # True
ds.find(1) == ds.find(2)             # True
ds.size_of(2)                        # 2

manhattan_circle_centre(["..#..", ".###.", "..#.."])  # (2, 3)
```

## What it does not do

contestkit is a library only. It has no command-line program and does not
read problem input from standard input or print answers; parsing a judge's
input format and looping over test cases is left to the caller.