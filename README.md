# contestkit

This package collects well-known contest problems. Each one is solved as an
ordinary Python function that takes the problem's values as arguments and
returns the answer. When a problem has no answer for the given input, the
function returns `None` and does not print a sentinel such as `NO` or `-1`.
When an input breaks the problem's own constraints, the function raises
`ValueError`.

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

- `contestkit.hackerrank`: `compare_triplets`, `plus_minus`, `staircase`
- `contestkit.cses`: `bit_strings`, `coin_piles`, `gray_code`, `increasing_array`,
  `missing_number`, `number_spiral`, `palindrome_reorder`, `permutations`,
  `repetitions`, `trailing_zeros`, `two_knights`, `two_sets`, `weird_algorithm`
- `contestkit.codeforces`: `combination_lock`, `product_of_three_numbers`, `presents`,
  `song_query_lengths`, `dislike_of_threes`, `infinity_table`, `computer_game`,
  `split_into_groups`, `beautiful_matrix`, `uniforms`, `game_with_sticks`,
  `registration_system`
- `contestkit.codechef`: `check_consistency`
- `contestkit.linked`: `TreeNode`, `ListNode`, `level_order`, `has_cycle`,
  `remove_nth_from_end`
- `contestkit.arrays`: `max_area`, `min_taps`, `three_sum`, `three_sum_closest`,
  `trap`, `sort_colors`, `max_increase_keeping_skyline`, `restore_matrix`,
  `matrix_reshape`, `spiral_order`, `search_matrix`
- `contestkit.searching`: `MountainArray`, `find_in_mountain_array`,
  `search_rotated`, `range_bitwise_and`, `reverse_integer`
- `contestkit.strings`: `is_valid_parentheses`, `find_substring`,
  `length_of_longest_substring`, `zigzag_convert`
- `contestkit.backtracking`: `solve_sudoku`, `solve_n_queens`

Some of these functions work in place:

- `sort_colors` rearranges the list it is given.
- `solve_sudoku` fills the `"."` cells of the board it is given and returns
  whether it found a solution. If it finds none, the board is left unchanged.

`MountainArray` wraps a sequence and counts every `get` call in its `calls`
attribute. This lets you check how many reads `find_in_mountain_array` made.

## Example

```python
from contestkit.cses import gray_code, palindrome_reorder, two_sets, weird_algorithm
from contestkit.arrays import trap
from contestkit.strings import is_valid_parentheses

gray_code(2)                 # ['00', '01', '11', '10']
weird_algorithm(3)           # [3, 10, 5, 16, 8, 4, 2, 1]
palindrome_reorder("AAAACACBA")   # 'AAACBCAAA'
two_sets(7)                  # ([1, 2, 5, 6], [3, 4, 7])
two_sets(5)                  # None
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
is_valid_parentheses("([]{})")               # True
```

## What it does not do

This package is a library only. It installs no command, and it does not read
problem input from standard input or write formatted output. To solve a
problem, call its function with the parsed values and format the result
yourself.