"""Core pieces of a small Unix shell: builtins, pipeline execution, syntax checks and string helpers."""

__version__ = "0.1.0"
__all__ = ["builtins", "execution", "strutils", "syntax"]