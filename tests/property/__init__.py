# tests/property/__init__.py
"""Property-based tests for lawgens strategies.

Each module checks an invariant of the values a strategy produces, for
every example Hypothesis draws:
- test_par_seq_properties: leaf/branch counts and split bounds of cause trees
- test_natural_properties: range bounds, including while shrinking
- test_container_properties: non-emptiness and multiplicity bounds
- test_functional_properties: purity of state transitions, validation shape
"""
