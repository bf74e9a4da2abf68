# practicekit

A set of small, self-contained programming exercises in one package. Each
module solves one problem, and most of them have a console command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

| Command                   | What it does                                                           |
|---------------------------|------------------------------------------------------------------------|
| `practicekit-dungeon`     | Text dungeon crawler: collect treasure, avoid monsters, escape.        |
| `practicekit-debug-menu`  | Menu for trying the functions in `overflow_problems` on typed numbers. |
| `practicekit-rover`       | Runs a file of rover commands against a stored chemical string.        |
| `practicekit-stack`       | Shows the calculator prompt (see below).                               |
| `practicekit-parks`       | Loads `park_data.txt` and `camper_data.txt` from a directory.          |
| `practicekit-grades`      | Reads `<category> <score>` lines and prints a grade summary.           |
| `practicekit-mountains`   | Counts mountain and valley numbers in a range read from input.         |
| `practicekit-linked-list` | Builds a small linked list, prints it and its average.                 |
| `practicekit-resistor`    | Fits a linear model to sample voltage/current data and predicts a value. |
| `practicekit-text`        | Menu of text exercises: word filter and password converter.            |
| `practicekit-guess`       | Guesses a number between 0 and 100 by halving the range.               |
| `practicekit-small`       | Swap without a temporary, an `add` check and summing two numbers from a file. |

`practicekit-parks` takes an optional directory argument (default: the
current directory). `practicekit-small` takes an optional file name
(default: `numFile.txt`) and sums the first two integers on its first line.
`practicekit-rover` takes the command file name as its argument, or reads it
from the first word of standard input.

### The dungeon

`practicekit-dungeon` takes the dungeon name and the number of levels as two
arguments, or reads them from standard input. It loads each level from a
file named `<name><level>.txt`. A level file holds the number of rows and
columns, the player's starting row and column, and then the map tiles,
separated by any whitespace:

```
 -   open floor            $   treasure
 @   amulet (doubles map)  M   monster
 +   pillar                ?   door to next level
 !   dungeon exit
```

The starting tile must be open floor; the player is shown there as `o`. Every
level needs at least one `?` or `!`. Move with `w`, `a`, `s`, `d`, stay with
`e` and quit with `q`. After each move, monsters in a straight line of sight
step one tile closer. The exit only opens once you carry at least one
treasure. Stepping on an amulet doubles the map, filling it with copies of
the current level.

### Rover commands

A rover command file is a sequence of whitespace-separated words. The first
letter of a command picks it: `P` prints the stored string, `C` clears it,
and `S` (set), `R` (read the character at a position), `J` (join), `T` (show
the string with a suffix, without storing it) and `F` (find) take the next
word as their argument.

## Using the modules

```python
from practicekit.overflow_problems import largest, boxes_needed, sum_between

largest(3, 9, 4)       # 9
boxes_needed(41)       # 3
sum_between(1, 10)     # 55
```

`sum_between` raises `ValueError` when `low > high` and `OverflowError` when
the sum leaves the signed 32-bit range; `product` raises `OverflowError` in
the same way.

```python
from practicekit.int_stack import IntStack

stack = IntStack()
stack.push(4)
stack.push(7)
stack.peek()           # 7
stack.pop()            # 7
len(stack)             # 1
```

`pop` and `peek` raise `IndexError` on an empty stack.

```python
from practicekit.mystring import MyString

text = MyString("abc")
text += MyString("def")
text.find(MyString("cd"), 0)   # 2
```

Other modules: `dungeon_logic` (level loading, moves and monsters),
`practice_problems` (palindromes, happy numbers, pair sums), `mountains`
(digit-pattern classification), `text_tools` (`trim`, `filter_word`,
`convert_password`), `state_parks` (`Database`, `StatePark`, `Passport`),
`grades` (`compute_summary`), `resistor` (`fit_coefficients`,
`predict_resistor`) and `linked_list` (`LinkedList`).

## What the package does not do

- `practicekit-stack` only prints the prompt and exits; it does not read or
  evaluate reverse-Polish expressions. `IntStack` is the stack alone.
- `practicekit-parks` loads the data and exits. There are no queries:
  nothing computes park revenue or a hiker's level.
- In `practicekit-text`, menu entries 1 (deobfuscate), 4 (word calculator)
  and 5 (palindrome counter) do nothing.