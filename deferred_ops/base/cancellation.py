"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``deferred_ops.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts`` for organization.

Notes
-----
- ``CancellationToken`` carries a one-way "requested" flag with cross-thread
  visibility and optional parent/child composition.
- ``NoOpCancellationToken`` is the default bound when a caller opts out.
- ``WaitOutcome`` reports whether ``wait_until_requested`` resolved through a
  request or because the token was closed.
- Cancellation is not an error: no exception type is raised by these tokens.
"""

from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.noop_token import NoOpCancellationToken
from .cancellation_parts.wait_outcome import WaitOutcome

__all__ = ["CancellationToken", "NoOpCancellationToken", "WaitOutcome"]
