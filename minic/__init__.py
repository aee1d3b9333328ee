"""Compiler building blocks for a small C subset: AST, DOT graph output, ARM32 emission and register allocation."""

__version__ = "1.0.1"

__all__ = ["attrs", "astnode", "graph", "platform_arm32", "iloc", "regalloc"]