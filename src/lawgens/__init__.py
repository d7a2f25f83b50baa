# src/lawgens/__init__.py
"""
lawgens: Hypothesis strategies for functional data types.

Composes Hypothesis primitives into generators for natural numbers,
non-empty containers, state transitions, validations and parallel/sequential
cause trees, for use by algebraic law test suites.
"""

__version__ = "0.3.0"
