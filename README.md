# patsolve

A library of worked solutions to classic programming-contest practice
problems. Each problem is a plain Python function or class. It takes
ordinary Python values such as lists, tuples and strings and returns a
result. Invalid input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from patsolve.numeric import black_hole, count_pat, longest_consecutive_factors
from patsolve.rational import Rational, sum_rationals
from patsolve.text import earth_to_mars, mars_to_earth

print(black_hole(6767)[-1])                  # 7641 - 1467 = 6174
print(count_pat("APPAPT"))                   # 2
print(longest_consecutive_factors(630))      # [5, 6, 7]

print(Rational.parse("2/3") + Rational.parse("-4/2"))          # (-1 1/3)
print(sum_rationals(["2/5", "4/15", "1/30", "-2/60", "8/3"]))  # 3 1/3

print(earth_to_mars(29))                     # hel mar
print(mars_to_earth("elo nov"))              # 115
```

## Modules

### `patsolve.numeric`

- `compare_significant(digits, a, b)` checks whether two decimals agree in their first `digits` significant digits. It returns a string such as `YES 0.123*10^5` or `NO ... ...`.
- `sum_exceeds(a, b, c)` tells whether `a + b > c` under signed 64-bit overflow rules.
- `black_hole(number)` returns the Kaprekar steps until `0000` or `6174` appears.
- `expand_scientific(notation)` turns text such as `+1.23400E-03` into plain decimal notation.
- `count_pat(text)` counts `PAT` subsequences modulo 1000000007.
- `longest_consecutive_factors(n)` returns the longest run of consecutive factors of `n`.

### `patsolve.rational`

- `Rational(numerator, denominator=1)` is a reduced fraction. A zero denominator means infinity.
  - `Rational.parse("a/b")` reads a fraction from text.
  - It supports `+`, `-`, `*` and `/`.
  - `str()` gives the mixed form, with negatives in parentheses and infinity shown as `Inf`.
- `arithmetic_report(first, second)` returns the four lines for the sum, difference, product and quotient.
- `sum_rationals(fractions)` adds `a/b` strings and writes the total in mixed form.

### `patsolve.text`

- `decode_dating(first, second, third, fourth)` returns a string such as `THU 14:04`.
- `most_frequent_word(text)` returns the most frequent word and its count.
- `kuchiguse(lines)` returns the longest common suffix of the lines, or `nai` if there is none.
- `read_number_chinese(number)` spells a number in pinyin, for example `Fu yi Yi yi Qian ...`.
- `worn_out_keys(expected, typed)` returns the keys that failed to type.
- `check_beads(shop, wanted)` returns `Yes n` or `No n`.
- `earth_to_mars(number)` and `mars_to_earth(word)` convert between Earth numbers and Martian numbers.

### `patsolve.ranking`

- `Candidate` with `classify_candidates(candidates, low, high)` ranks people by virtue and talent.
- `students_in_range(students, low, high)` lists students whose grade lies within the bounds.
- `RankEntry` with `rank_contest(user_count, full_marks, submissions)` builds a contest ranklist. `str()` of an entry gives its printed line.
- `Applicant` with `admit_graduates(quotas, applicants)` assigns applicants to schools.

### `patsolve.trees`

- `AvlTree` supports `insert`, `root_key`, `height`, `len()`, `in` and in-order iteration.
- `avl_root(keys)` returns the root key after inserting the keys.
- `complete_bst_level_order(keys)` returns the level order of a complete search tree built from the keys.
- `postorder_from_stack_ops(operations)` rebuilds a tree from `Push k` and `Pop` operations and returns its postorder.
- `highest_supplier_price(parents, root_price, percentage)` returns the highest retail price and how many sell at it.
- `largest_generation(children)` returns the size and level of the largest generation.
- `fill_bst_level_order(children, keys)` places the keys into a fixed tree shape and returns the level order.
- `invert_tree(children)` returns the level order and inorder of the mirrored tree.

### `patsolve.sorting`

- `swap_sort_count(permutation)` counts the swaps with 0 needed to sort the permutation.
- `longest_perfect_subsequence(numbers, p)` returns the size of the largest subset whose maximum is at most `p` times its minimum.
- `identify_insertion_or_merge(original, partial)` and `identify_insertion_or_heap(original, partial)` name the sort that produced `partial` and return the next step.
- `pivot_candidates(numbers)` returns the elements that could have been a quicksort pivot.

### `patsolve.shortest_paths`

- `choose_gas_station(house_count, station_count, roads, service_range)` returns a `StationChoice`, or `None` if no station serves every house.
- `happiest_route(start, happiness, routes, destination="ROM")` returns a `RouteReport`.

### `patsolve.connectivity`

- `forward_counts(followings, max_level, queries)` counts how many users can forward a post.
- `stroke_volume(slices, threshold)` sums the volume of large connected regions in a 3D grid.
- `critical_cities(city_count, highways)` finds the cities whose loss costs most to repair.

### `patsolve.optimization`

- `pay_exact(coins, amount)` returns the coins that pay `amount` exactly, or `None` if that is impossible.
- `mooncake_profit(inventories, prices, demand)` returns the largest profit from selling `demand` tons.
- `max_project_profit(projects)` returns the largest profit from projects done one at a time.
- `max_flow(source, sink, edges)` returns the maximum flow over directed edges.

### `patsolve.records`

- `set_similarity(first, second)` returns the similarity of two sets as a percentage.
- `quadratic_probe(table_size, numbers)` returns the hash-table slot for each number, using quadratic probing.
- `ParkingRecord` with `parking_report(records, queries)` counts parked cars at each query time and finds the longest parking time.
- `ListNode` with `deduplicate_list(head, nodes)` removes nodes whose absolute value repeats. `str()` of a node gives its printed line.

## What it does not do

The package has no command-line program. It does not read problem input from standard input or print answers. Callers build the arguments in Python and format the results themselves. Some result types help with formatting through `str()`: `Rational`, `RankEntry`, `StationChoice`, `RouteReport` and `ListNode`.