"""C string and memory routines, strtok-style tokenizing, printf-style formatting and scanf-style parsing."""

__version__ = "0.1.0"

__all__ = [
    "conversions",
    "extras",
    "formatting",
    "memory",
    "scanning",
    "strings",
    "tokenizer",
]