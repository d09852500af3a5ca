"""Helpers for mapping code locations back to module identities."""

import inspect
from typing import Any, Callable, Iterator, Optional


def module_candidates(module_name: str) -> Iterator[str]:
    """Yield a dotted module name and then each parent package.

    >>> list(module_candidates("mymod.events.handlers"))
    ['mymod.events.handlers', 'mymod.events', 'mymod']
    """
    name = module_name
    while name:
        yield name
        name = name.rpartition(".")[0]


def bound_target_type(func: Any) -> Optional[type]:
    """Type of the object a callable is bound to, if any.

    Plain functions and static methods have no bound target. Builtins such as
    ``len`` report their module as ``__self__``; that resolves to
    ``ModuleType`` which never belongs to a mod.
    """
    target = getattr(func, "__self__", None)
    if target is None:
        return None
    if isinstance(target, type):
        # classmethod bound to the class itself
        return target
    return type(target)


def iter_stack_modules(start: Optional[Any] = None) -> Iterator[str]:
    """Yield the module name of each frame, innermost first.

    Yields nothing when the interpreter doesn't support frame introspection.
    """
    frame = start if start is not None else inspect.currentframe()
    try:
        while frame is not None:
            name = frame.f_globals.get("__name__")
            if name:
                yield name
            frame = frame.f_back
    finally:
        del frame


def first_match(values: Iterator[str], resolve: Callable[[str], Optional[str]]) -> Optional[str]:
    for value in values:
        result = resolve(value)
        if result is not None:
            return result
    return None
