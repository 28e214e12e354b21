"""Hashing, random streams, containers, reference counting, sync primitives, tasks, file and UDP helpers."""

__version__ = "0.1.0"

__all__ = [
    "fileio",
    "hashing",
    "hashmap",
    "heap",
    "net",
    "rc",
    "rng",
    "stack",
    "storage",
    "sync",
    "tasks",
    "text",
    "tuples",
    "vec",
]