# problemset

Solutions to well-known algorithm exercises, written as plain Python
functions and a few small classes. The package uses only the standard
library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `problemset.misc` | `add_binary`, `binary_search`, `find_median_sorted_arrays`, `group_anagrams`, `is_palindrome`, `length_of_longest_substring`, `permute`, `plus_one`, `quick_pow`, `quick_pow_recursive`, `rotate`, `search_insert`, `sort_colors` |
| `problemset.linked_list` | `ListNode` (with `ListNode.from_values` and iteration over its values), `add_two_numbers` |
| `problemset.containers` | `MyQueue` (a queue built from two stacks), `MyStack` (a stack built from two queues) |
| `problemset.stack_queue` | `eval_rpn`, `remove_duplicates`, `max_sliding_window`, `max_sliding_window_timeout`, `top_k_frequent`, `is_valid` |
| `problemset.strings` | `reverse_string`, `partial_reverse` |
| `problemset.two_pointers` | `four_sum`, `remove_element`, `replace_number`, `reverse_words`, `three_sum`, `two_sum` |
| `problemset.heap` | `BinHeap`, a max-heap with `push`, `pop`, `peek`, `rebuild` and `len()` |
| `problemset.binary_tree` | `TreeNode`, `sample_tree`, `sample_tree2` |
| `problemset.depth` | `max_depth`, `max_depth_rec`, `min_depth`, `min_depth_rec` |
| `problemset.traversal` | `preorder_traversal`, `preorder_recursive`, `inorder_traversal`, `inorder_traversal_iteration`, `inorder_morris`, `postorder_traversal`, `postorder_recursive`, `postorder_two_stacks`, `postorder_stack` |
| `problemset.levels` | `level_order_traversal`, `level_order_traversal_bottom`, `right_side_view`, `average_of_levels`, `level_order_flat` |
| `problemset.tree_misc` | `invert_tree`, `invert_tree_rec`, `count_nodes_iter`, `count_nodes_rec`, `is_same_tree` |
| `problemset.path` | `binary_tree_paths`, `binary_tree_paths_rec` |
| `problemset.rebuild` | `build_tree`, `construct_maximum_binary_tree`, `merge_trees` |
| `problemset.symmetric` | `is_symmetric`, `is_symmetric_rec` |
| `problemset.bst` | `search_bst`, `is_valid_bst`, `get_minimum_difference`, `get_minimum_difference_rec`, `find_mode_force`, `lowest_common_ancestor`, `lowest_common_ancestor_bst`, `delete_node`, `trim_bst`, `sorted_array_to_bst`, `convert_bst_to_accumulated_sum`, `convert_to_greater_sum_tree`, `convert_to_gst_sub`, and the constant `NO_DIFFERENCE` |

## Examples

```python
from problemset.misc import add_binary, plus_one
from problemset.two_pointers import two_sum
from problemset.binary_tree import sample_tree
from problemset.traversal import inorder_traversal
from problemset.heap import BinHeap
from problemset.linked_list import ListNode, add_two_numbers

add_binary("1010", "1011")        # "10101"
plus_one([9, 9, 9])               # [1, 0, 0, 0]
two_sum([2, 7, 11, 15], 9)        # [0, 1]

inorder_traversal(sample_tree())  # [4, 2, 6, 5, 7, 1, 3, 9, 8]

heap = BinHeap([0, 2, 7, 8, 1, 2, 3, 4])
heap.push(10)
heap.pop()                        # 10

total = add_two_numbers(ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4]))
list(total)                       # [7, 0, 8]
```

## Behaviour worth knowing

- Functions that work in place change the object they are given:
  `rotate`, `sort_colors`, `remove_element` and `replace_number` change the
  list passed in; `invert_tree`, `merge_trees`, `delete_node`, `trim_bst` and
  the `convert_*` functions in `problemset.bst` change the tree passed in.
- Taking from an empty container raises `IndexError`: `MyQueue.pop`,
  `MyQueue.peek`, `MyStack.pop`, `MyStack.top`, `BinHeap.pop` and
  `BinHeap.peek`.
- `eval_rpn` divides with truncation toward zero and raises `ValueError`
  when an operator lacks operands.
- `is_valid` accepts only bracket characters and checks that every closing
  bracket matches the most recent open one; brackets still open at the end
  do not make the string invalid.
- `add_binary` raises `ValueError` on characters other than `0` and `1`;
  `find_median_sorted_arrays` raises it when both lists are empty; `rotate`
  raises it for an empty or non-square matrix.
- `top_k_frequent` breaks frequency ties in favour of the larger value.
- `get_minimum_difference_rec` returns `NO_DIFFERENCE` (2**31 - 1) for a tree
  with fewer than two nodes. `get_minimum_difference` measures the first
  value it visits against zero and stops as soon as it sees a difference of
  one.

## What it does not do

This is a library of functions only: it has no command-line program and
reads or writes no files.