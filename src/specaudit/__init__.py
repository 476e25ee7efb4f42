"""specaudit: ambiguity and cross-artifact consistency analysis for
spec-driven feature folders."""

__version__ = "0.1.0"
