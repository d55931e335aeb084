"""Minimal unit-test runner with a small C-style string, memory and printf toolkit."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "convert", "strings", "transform", "output", "printf", "runner", "suites"]