"""Classic algorithm drills: matrices, sorting, numbers, strings, searching, mazes, patterns and student records."""

__version__ = "0.1.0"