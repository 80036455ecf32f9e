"""Answers to short programming-contest puzzles as plain functions, with a small command line."""

__version__ = "0.1.0"

__all__ = ["arrays", "cli", "numbers", "strings"]