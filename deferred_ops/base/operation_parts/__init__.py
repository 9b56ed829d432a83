"""One-class-per-file parts for deferred and running operations.

Prefer importing from `deferred_ops.base.operation` for the stable surface.
"""
