# practicum

A collection of small algorithms and data structures, with four command-line
tools built on top of them.

## Installation

```
pip install .
```

## Library

- `practicum.fraction`: `FractionNumber`, which supports `+`, `-`, `*`, `/`
  and `==`. The result of each arithmetic operation is divided through by the
  greatest common divisor of its numerator and denominator. `str()` gives
  `numerator/denominator`. The module also provides `FractionCalculator`,
  with the static methods `summ`, `diff`, `mult`, `div` and `format`, and the
  helpers `gcd` and `lcm`.
- `practicum.radix_sort`: `get_sorted(values)` returns a sorted copy, and
  `make_sort(array)` sorts a list in place. `make_sort(None)` raises
  `ValueError`. Both use a byte-wise LSD radix sort on the low 32 bits of each
  value. Keys are compared as unsigned 32-bit numbers, so negative values are
  placed after non-negative ones.
- `practicum.lis`: `longest_increasing_subsequence(array)` returns the
  lexicographically smallest of the longest strictly increasing subsequences.
- `practicum.odd_even_merge`: `odd_even_merge_sort(array)` sorts a list in
  place using Batcher's odd–even merge network. `random_array(size)` returns a
  list of random integers from 0 to 9.
- `practicum.triangle`: the frozen dataclass `Point` and the class `Triangle`.
  `Triangle.contains(point)` tests whether a point lies inside the triangle or
  on its border.
- `practicum.priority_queue`: `PriorityQueue`, a max-priority queue with
  `put`, `top`, `pop`, `get`, `empty`, `clear`, `copy` and `len()`. It can be
  created empty or with one initial value. Calling `top`, `pop` or `get` on an
  empty queue raises `EmptyQueueError`.
- `practicum.quadratic`: `solve_quadratic(a, b, c)` returns the real roots as
  text, each with six decimals. Two roots are joined by `_`, and a double root
  is returned on its own. A negative discriminant gives `No solution`.
- `practicum.base64_codec`: `encode(text)` turns the UTF-8 bytes of a string
  into padded Base64. `decode(text)` reverses this and is lenient: characters
  outside the alphabet count as zero bits.
- `practicum.linked_list`: `LinkedList`, an ordered sequence with `front`,
  `back`, `push_back`, `pop_back`, `clear`, `swap`, `copy` and `take`. `take`
  moves all elements into a new list and leaves the original empty. The class
  also supports iteration, `len()` and `==`. Reading from or removing from an
  empty list raises `EmptyListError`, which is a subclass of `IndexError`.
- `practicum.stack`: `Stack`, a last-in, first-out stack built on
  `LinkedList`, with `push`, `pop`, `top`, `empty`, `clear` and `len()`.

```python
from practicum.fraction import FractionNumber
from practicum.lis import longest_increasing_subsequence

print(FractionNumber(24, 10) + FractionNumber(12, 20))     # 3/1
print(longest_increasing_subsequence([1, 4, 2, 5, 3, 6]))  # [1, 2, 3, 6]
```

## Commands

Find the longest increasing subsequence of a list of integers:

```
lis 1 4 2 5 3 6
```

Run a sequence of priority-queue operations. The operations are `put`,
`pop`, `top`, `get`, `size`, `empty` and `clear`:

```
priority-queue put 5 1 9 top get size
```

Solve the quadratic equation a·x² + b·x + c = 0:

```
quadratic 1 3 -4
```

Run a sequence of integer-stack operations. The operations are `s`, `e`, `t`,
`pop`, `push <values>` and `c`:

```
int-stack push 1 2 3 t pop s
```

Run `lis`, `priority-queue` or `int-stack` without arguments to see its help
text. `quadratic` shows its help text unless it is given exactly three
arguments.

## Tests

```
pip install .[test]
pytest
```