"""Functional primitives for common_utils.

This package provides predicates, safe accessors and lazy sequence
combinators. Utilities are stateless and side-effect-free (apart from
advancing the iterators handed to them) so they can be composed into
pipelines, data last: ``to_list(take(3, map(f, seq)))``.
"""
