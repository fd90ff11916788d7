"""Advent of Code 2024 solutions and a command line runner for them."""

__version__ = "0.1.0"