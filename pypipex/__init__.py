"""Run two commands joined by a pipe between an input file and an output file, with small string, character, memory and formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "path", "pipeline", "printf", "strings"]