"""Resolution mode for ``@use`` versus ``@import`` semantics.

The ``@use`` rule resolves paths slightly differently from ``@import``:
``@use`` never looks at import-only files (``*.import.scss`` and friends),
while ``@import`` prefers them. The mode lives in a context variable, so it is
scoped to the current thread or asyncio task and is restored when the scope
exits, even if the wrapped call raises.
"""

from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TypeVar

T = TypeVar("T")

_in_use_rule: ContextVar[bool] = ContextVar("sass_importer_in_use_rule", default=False)


def is_in_use_rule() -> bool:
    """Whether resolution currently uses ``@use`` semantics."""
    return _in_use_rule.get()


@contextmanager
def use_rule_scope() -> Iterator[None]:
    """Apply ``@use`` semantics for the duration of a ``with`` block."""
    token = _in_use_rule.set(True)
    try:
        yield
    finally:
        _in_use_rule.reset(token)


def in_use_rule(callback: Callable[[], T]) -> T:
    """Run ``callback`` with ``@use`` semantics and return its result."""
    with use_rule_scope():
        return callback()


async def in_use_rule_async(callback: Callable[[], Awaitable[T]]) -> T:
    """Like :func:`in_use_rule`, but awaits ``callback``.

    The flag stays set across suspension points of ``callback``. Other tasks
    see their own value, because each task runs in its own copy of the context.
    """
    token = _in_use_rule.set(True)
    try:
        return await callback()
    finally:
        _in_use_rule.reset(token)
