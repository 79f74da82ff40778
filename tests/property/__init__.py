"""Property-based tests for fallible.

Hypothesis checks the Result laws (functor, monad, short-circuit and
equality/hash contracts) over arbitrary payloads.
"""
