# advent2024

Solutions to a number of the Advent of Code 2024 puzzles, together with a
small command line runner that fetches puzzle inputs, runs solutions and keeps
a table of benchmark timings.

## Layout of puzzle data

The runner and the solutions work relative to the current directory:

- `data/inputs/NN.txt` – your personal puzzle input for day `NN`
- `data/examples/NN.txt` – the example input from the puzzle text
- `data/puzzles/NN.md` – the puzzle description
- `data/timings.json` – stored benchmark results
- `README.md` – a benchmark table is written between two
  `<!--- benchmarking table --->` markers

Days are written with two digits (`01` to `25`).

## Commands

`download` and `read` call the `aoc` command line client, which must be on
your `PATH`. If the environment variable `AOC_YEAR` is set, it is passed on to
`aoc` as `--year`.

Download the input to `data/inputs/NN.txt` and the description to
`data/puzzles/NN.md`:

    advent2024 download 1

Show the puzzle description in the terminal:

    advent2024 read 1

Run the solution of a day in a child Python interpreter. `--release` runs it
with `-O`; `--dhat` runs it with `-X tracemalloc` instead. `--submit N` submits
the answer of part `N` through `aoc` once it is computed:

    advent2024 solve 1
    advent2024 solve 1 --release
    advent2024 solve 1 --submit 2

Run every day that has a solution module (looked up as
`./advent2024/days/dayNN.py` under the current directory; other days print
"Not solved."):

    advent2024 all
    advent2024 all --release

Benchmark days. Each part is run repeatedly (at least 10 and at most 10,000
times, aiming at about one second) and the average time is reported. With a
day, only that day is run; with `--all`, every day; with neither, only days
that `data/timings.json` does not already hold both parts for. `--store` merges
the results into `data/timings.json` and rewrites the README benchmark table:

    advent2024 time
    advent2024 time 5
    advent2024 time --all --store

A single day can also be run directly, reading `data/inputs/NN.txt`:

    python -m advent2024.days.day01
    python -m advent2024.days.day01 --time

## Using the solutions from Python

Each day lives in `advent2024.days.dayNN` and exposes `part_one` and
`part_two`, which take the puzzle input as a string:

```python
from advent2024.days import day01
from advent2024.template.day import Day, read_file

text = read_file("examples", Day(1))
print(day01.part_one(text), day01.part_two(text))
```

Solutions exist for days 1 to 13, 15, 16, 17 and 19.

## What is not included

- There are no solutions for days 14, 18 and 20 to 25.
- For days 15, 16 and 19 only `part_one` computes an answer; `part_two`
  returns `None`. Day 15's `part_one` works on the double-width warehouse.
- Day 17's `part_two` searches from a fixed starting value with steps tuned to
  one particular program, so it is not a general solution.
- There is no command that creates files for a new day, and no `today`
  command; create the module and data files yourself.