"""``deferrable`` decorator: plain work functions to deferred operations.

Decorating a function makes each call return a ``DeferredOperation`` instead
of doing anything. Two function shapes are accepted:

* a generator function yielding cumulative progress and returning its
  result; each ``yield`` is an atomic-unit boundary;
* a regular function returning an ``OperationWork`` object.

Example:

    @deferrable
    def copy_rows(rows, sink):
        copied = 0
        for row in rows:
            sink.append(row)
            copied += 1
            yield copied
        return copied

    handle = copy_rows(rows, sink).start_with(token)
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional, overload

from .deferred_operation import DeferredOperation, WorkFactory
from .generator_work import GeneratorWork


def _work_factory(func: Callable[..., Any], args: tuple, kwargs: dict) -> WorkFactory:
    if inspect.isgeneratorfunction(func):
        return lambda: GeneratorWork(func(*args, **kwargs))
    return functools.partial(func, *args, **kwargs)


@overload
def deferrable(func: Callable[..., Any]) -> Callable[..., DeferredOperation]: ...


@overload
def deferrable(
    *, name: Optional[str] = None
) -> Callable[[Callable[..., Any]], Callable[..., DeferredOperation]]: ...


def deferrable(func=None, *, name=None):
    """Wrap ``func`` so calling it yields a ``DeferredOperation``.

    ``name`` labels the operation in logs and counters; it defaults to the
    function's qualified name.
    """

    def decorate(fn: Callable[..., Any]) -> Callable[..., DeferredOperation]:
        op_name = name or fn.__qualname__

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> DeferredOperation:
            return DeferredOperation(_work_factory(fn, args, kwargs), name=op_name)

        return wrapper

    if func is not None:
        return decorate(func)
    return decorate


__all__ = ["deferrable"]
