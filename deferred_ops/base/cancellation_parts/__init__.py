"""One-class-per-file parts for cancellation tokens.

Prefer importing from `deferred_ops.base.cancellation` for the stable surface.
"""
