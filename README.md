# algolab

Textbook algorithms in plain Python. Each one returns its answer and also a
count of the work it did, such as comparisons, loop iterations or recursive
calls. You can use the counts to compare algorithms on the same input.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents |
|---------------------|----------|
| `algolab.sorting`   | `bucket_sort`, `counting_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `randomized_quick_sort` and `radix_sort`. Each returns a `SortResult` with `values` and `comparisons`. |
| `algolab.activity`  | `greedy_activity_selector` and `recursive_activity_selector`. Both return 1-based activity numbers. |
| `algolab.subarray`  | `find_max_subarray` and `find_max_crossing_subarray`. Both return a `SubarrayResult` with `low`, `high`, `total` and `comparisons`. |
| `algolab.subsets`   | `sum_of_subsets`, a backtracking search that lists every subset adding up to a target. |
| `algolab.lcs`       | `lcs_bottom_up`, `lcs_top_down`, `lcs_divide_and_conquer` and `random_sequence`. The three LCS functions return an `LcsResult` with `length`, `sequence` and `comparisons`. |
| `algolab.chains`    | `matrix_chain_order`, which returns a `ChainOrder` with `cost`, `matrices`, `splits`, `comparisons` and `parenthesize()`. `matrix_chain_cost` returns `(cost, steps)`. |
| `algolab.strings`   | `naive_match`, `rabin_karp_match` and `kmp_match`, which return a `MatchResult` with `shifts`, `comparisons` and `preprocessing`. Also `compute_prefix`, `rabin_karp_preprocess` and `char_code`. |

## Input requirements

Some functions only accept certain inputs. They raise `ValueError` when the input does not fit.

- `bucket_sort` needs values in `[0, 1)`.
- `counting_sort` needs integers in `0..max_value`.
- `radix_sort` needs non-negative integers. It sorts on their lowest `digits` decimal digits.
- `sum_of_subsets` needs positive values in non-decreasing order.
- The activity selectors expect activities that are already ordered by finish time.
- `matrix_chain_order` and `matrix_chain_cost` need at least two positive dimensions.
- The matchers reject an empty pattern. The Rabin–Karp functions also need a positive modulus.

## Examples

Sort a list and count the comparisons:

```python
from algolab.sorting import heap_sort

result = heap_sort([5, 2, 9, 1])
print(result.values)       # [1, 2, 5, 9]
print(result.comparisons)  # steps counted while sifting
```

Pass an explicit random generator to randomized quicksort, so a run can be repeated:

```python
import random
from algolab.sorting import randomized_quick_sort

result = randomized_quick_sort([3, 1, 2], random.Random(42))
```

Select activities greedily:

```python
from algolab.activity import greedy_activity_selector

greedy_activity_selector([1, 3, 0, 5, 5, 8], [2, 4, 6, 7, 9, 9])
# [1, 2, 4, 6]
```

Find the maximum-sum subarray:

```python
from algolab.subarray import find_max_subarray

best = find_max_subarray([13, -3, -25, 20, -3, -16, -23, 18, 20, -7, 12, -5, -22, 15, -4, 7])
print(best.low, best.high, best.total)  # 7 10 43
```

List the subsets that reach a target sum:

```python
from algolab.subsets import sum_of_subsets

sum_of_subsets([1, 2, 3, 4], 5)  # [[1, 4], [2, 3]]
```

Find a longest common subsequence:

```python
from algolab.lcs import lcs_bottom_up

result = lcs_bottom_up("ABCBDAB", "BDCABA")
print(result.length, result.sequence)
```

Find the cheapest order for a matrix chain:

```python
from algolab.chains import matrix_chain_order

order = matrix_chain_order([30, 35, 15, 5, 10, 20, 25])
print(order.cost)            # 15125
print(order.parenthesize())  # ((A1(A2A3))((A4A5)A6))
```

Match strings with Knuth–Morris–Pratt:

```python
from algolab.strings import kmp_match

result = kmp_match("ABABCABABACABABCCABABCABAB", "ABABCABAB")
print(result.shifts, result.comparisons, result.preprocessing)
```

## What it does not do

algolab is a library only. It has no command-line program. It does not read input from files, and it does not write results or timing tables to files. If you want to benchmark the algorithms, generate the inputs and print the reports from your own code.