# kata

A collection of small, classic programming exercises as plain Python
functions, a command-line front end for a few of them, and a small
Russian roulette game played in the terminal. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module             | Contents                                                                 |
|--------------------|--------------------------------------------------------------------------|
| `kata.numbers`     | `gcd`, `lcm`, `multiplication_table`, `is_even`, `is_armstrong`, `electricity_bill`, `binary_to_decimal`, `decimal_to_binary`, `factorial`, `fibonacci`, `largest_of_three`, `is_leap_year`, `reverse_number`, `is_palindrome_number`, `sign_name`, `power`, `is_prime`, `primes_between`, `digit_sum`, `harmonic_sum` |
| `kata.calculator`  | `calculate` for the four arithmetic operators                            |
| `kata.patterns`    | `floyd_triangle`, `half_pyramid`                                         |
| `kata.arrays`      | `average`, `largest`, `total`, `binary_search`, `linear_search`, `bubble_sort`, `delete_at`, `insert_at`, `merge`, `reversed_list`, `swap`, `grow` |
| `kata.matrices`    | `diagonal_sum`, `multiply`, `add`, `transpose`, `format_matrix`          |
| `kata.text`        | `LetterCounts`, `count_letters`, `sort_characters`, `copy_string`, `string_length`, `is_palindrome_string`, `is_vowel` |
| `kata.roulette`    | `Player`, `Shot`, `Roulette`, `main`                                     |
| `kata.cli`         | `main`, behind the `kata` command                                        |

## Using the library

```python
from kata.numbers import gcd, is_leap_year, is_prime, decimal_to_binary
from kata.arrays import bubble_sort, binary_search
from kata.text import count_letters, is_vowel

gcd(12, 18)                       # 6
is_leap_year(2000)                # True
is_prime(7)                       # True
decimal_to_binary(10)             # '1010'
bubble_sort([5, 1, 4, 2])         # [1, 2, 4, 5]
binary_search([1, 3, 5, 7], 4)    # None
is_vowel("E")                     # True
count_letters("hello world")      # LetterCounts(vowels=3, consonants=7, spaces=1)
```

Functions that return sequences build new lists and leave their
arguments untouched. Invalid input is rejected with an exception:
`gcd` and `lcm` want positive integers, `factorial` and `power` refuse
negative values, `average` and `largest` refuse an empty sequence, and
`delete_at` and `insert_at` raise `IndexError` for an index out of range.

```python
from kata.calculator import calculate
from kata.matrices import transpose, format_matrix
from kata.patterns import floyd_triangle, half_pyramid

calculate("*", 6, 7)                       # 42.0
print(format_matrix(transpose([[1, 2, 3], [4, 5, 6]])))
floyd_triangle(3)                          # [[1], [2, 3], [4, 5, 6]]
half_pyramid(3)                            # ['*', '* *', '* * *']
```

`calculate` raises `ValueError` for an operator other than `+ - * /` and
`ZeroDivisionError` when dividing by zero.

## Command line

The `kata` command runs one exercise per subcommand:

```
kata table 7            # multiplication table of 7, from 1 to 10
kata calc / 10 4        # prints 2.50
kata floyd 4            # Floyd's triangle with 4 rows
kata sort 5 3 9 1       # Sorted list: 1 3 5 9
```

`kata calc` prints `Div by Zero` or `Invalid operator` and exits with
status 1 when the calculation cannot be done. `kata --help` lists the
subcommands.

## Roulette

```
kata-roulette
kata-roulette --seed 42
```

starts an interactive game against the computer on standard input.
From the menu, option 2 sets how many bullets to load (one to three; an
invalid count resets it to one), option 3 picks at random who shoots
first, and option 1 starts a round. On your turn press Enter to shoot;
each shot either clicks safely or ends the round with a bang. Input
that is not a number is ignored; any other number, or end of input,
leaves the game. `--seed` makes the game repeatable.

The game logic can be driven without the terminal:

```python
import random
from kata.roulette import Roulette

game = Roulette(bullets=2, rng=random.Random(1))
for shot in game.play():
    print(shot.player.name, shot.chamber, shot.fired)
```

`Roulette.play` loads the cylinder and yields `Shot` objects, alternating
players, until one fires; the firing shot's `winner` is the other player.