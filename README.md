# algokit

A small library of algorithm solutions. Each one is a plain Python function or
class. It takes ordinary values such as lists, strings and ints, and it returns
ordinary values. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `algokit.strings` covers problems on single strings and digit strings:
  `add_spaces`, `is_circular_sentence`, `count_consistent_strings`,
  `make_fancy_string`, `min_changes`, `min_length`, `check_inclusion`,
  `rotate_string`, `minimum_steps`, `shortest_palindrome`, `take_characters`,
  `largest_number`, `longest_diverse_string` and `maximum_swap`.
- `algokit.sentences` covers word lists and path lists:
  `are_sentences_similar`, `uncommon_from_sentences` and `remove_subfolders`.
- `algokit.bits` covers bitwise problems: `longest_subarray`,
  `get_maximum_xor`, `min_end`, `min_bit_flips`, `minimum_subarray_length` and
  `xor_queries`.
- `algokit.arrays` covers array scans, two pointers and binary search:
  `min_patches`, `divide_players`, `longest_square_streak`, `min_subarray`,
  `maximum_beauty`, `maximum_subarray_sum`, `minimized_maximum`,
  `minimum_mountain_removals`, `array_rank_transform`,
  `find_length_of_shortest_subarray` and `lexical_order`.
- `algokit.heaps` covers greedy problems driven by priority queues:
  `find_maximized_capital`, `min_groups`, `max_k_elements` and
  `smallest_range`.
- `algokit.recursion` covers memoised recursive searches: `count_squares`,
  `max_moves`, `diff_ways_to_compute` and `min_extra_char`.
- `algokit.structures` holds small data structures:
  - `CustomStack`, a stack that ignores pushes beyond its `max_size`. Its
    `pop` returns -1 when the stack is empty.
  - `MyCalendar`, whose `book(start, end)` accepts half-open bookings that
    do not overlap an existing booking.
  - `ListNode`, a linked-list node with `from_values` and `to_list`.
  - `insert_greatest_common_divisors`.

Where there is no answer, some functions return -1. These are
`take_characters`, `divide_players`, `longest_square_streak`, `min_subarray` and
`minimum_subarray_length`.

Some inputs make no sense for a function, and those functions raise
`ValueError` instead:

- an empty sentence in `is_circular_sentence`
- an empty `skill` list in `divide_players`
- non-positive values in `longest_square_streak`
- empty `quantities` in `minimized_maximum`
- empty `nums` with `k > 0` in `max_k_elements`
- an empty list in `smallest_range`

## Examples

```python
from algokit.strings import largest_number, shortest_palindrome
from algokit.heaps import smallest_range
from algokit.structures import MyCalendar, ListNode, insert_greatest_common_divisors

largest_number([3, 30, 34, 5, 9])        # "9534330"
shortest_palindrome("abcd")               # "dcbabcd"
smallest_range([[1, 2, 3], [1, 2, 3]])    # [1, 1]

calendar = MyCalendar()
calendar.book(10, 20)                     # True
calendar.book(15, 25)                     # False

head = ListNode.from_values([18, 6, 10, 3])
insert_greatest_common_divisors(head).to_list()  # [18, 6, 6, 2, 10, 1, 3]
```

## What it does not do

This is a library only. It has no command-line interface. It does not read or
store data anywhere: every function works on the values passed to it.

## Running the tests

```
pip install ".[test]"
pytest
```