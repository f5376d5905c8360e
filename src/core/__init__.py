"""
Core sequence transformers, numerical algorithms, and value types.

This package contains the foundational building blocks of seqmath:
lazy sequence transformers and reductions (core.iterables), numerical
algorithms built on them (core.math), immutable value types (core.domain),
and small file/formatting helpers (core.misc).
"""
