"""Evaluator helper modules for the VNM runtime."""

__all__ = [
    "common",
    "literals",
    "expr",
    "control",
    "blocks",
]
