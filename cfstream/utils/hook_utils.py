"""
Hook Utilities

User hooks may be given as one callable, a sequence of callables, or
nothing. They are normalized once into a list of observers and then
notified in registration order.
"""

import logging
from typing import Any, Callable, List

from cfstream.models.options import Hook

logger = logging.getLogger(__name__)


def as_observers(hook: Hook) -> List[Callable[..., Any]]:
    """
    Normalize a hook option into zero or more observers.

    Non-callable entries are dropped.

    Example:
        as_observers(print)           # [print]
        as_observers([print, None])   # [print]
        as_observers(None)            # []
    """
    if hook is None:
        return []
    if callable(hook):
        return [hook]
    if isinstance(hook, (list, tuple)):
        return [fn for fn in hook if callable(fn)]
    return []


def notify(observers: List[Callable[..., Any]], *args: Any) -> None:
    """
    Call every observer with the same arguments, in order.

    An observer that raises is logged and does not stop the others.
    """
    for observer in observers:
        try:
            observer(*args)
        except Exception:
            logger.exception(
                f"Hook {getattr(observer, '__name__', observer)!r} raised",
            )
