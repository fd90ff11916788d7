"""Puzzle solutions, one module per solved day."""