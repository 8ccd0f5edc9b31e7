"""Engine layer — the type-directed binding core.

Walks record shapes, converts scalars, rebuilds sequences, and
aggregates field errors. Depends on the domain layer only.
"""
