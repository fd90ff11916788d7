"""Day handling, timing, benchmarking, README tables and ``aoc`` client helpers."""