"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for dynamically routing a single method
call to one of several registered implementations based on the value of a
named attribute on the receiver.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute from `self`
  and dispatches to the registered implementation that matches it.

Intended use-cases
------------------
- Selecting an element-kind specific backend (int32 / float32 / float64)
  without large if/elif chains.
- Keeping per-state behaviors isolated as separate functions for readability.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Implementations are called like bound methods: `sub_method(self, *args, **kwargs)`.
- The decorator returns the implementation unchanged, so several states can
  be registered for the same function by stacking decorators.
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Optional, Type, Any
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

MethodKey = namedtuple(
    "MethodKey",
    [
        "ClassName",
        "MethodName",
        "StateVal",
    ],
)
"""
Tuple-like key used to uniquely identify a control path.

Fields
------
ClassName : str
    The owning class name.
MethodName : str
    The base method name being templated.
StateVal : Hashable
    The state value that selects this implementation.
"""


def create_path_builder(
    state_attr: str,
) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Callable[[Callable[P, R], Any], None]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" used to register stateful control paths.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("dtype")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, np.dtype("int32"))
        def foo_int32(self, x: int) -> int:
            ...

    When `MyClass.foo(...)` is called, it dispatches on `self.dtype`.

    Parameters
    ----------
    state_attr : str
        Name of the attribute (or property) read from the receiver to select
        a control path.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[Callable[[Callable[P, R], Any], None]] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            installed wrapper via `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[Callable[[Callable, Any], None]]
            Called as `trap_exception(method, state)` when no control path
            matches. It is expected to raise; if it returns, the wrapper raises
            `NotImplementedError`.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering `sub_method` for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}")

        # The first registration captures the undecorated base method; later
        # registrations see the wrapper and unwrap it.
        base = getattr(method, "__wrapped__", method)
        smk = MethodKey(cls.__name__, base.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured state
            and install the dispatching wrapper on `cls`.
            """
            methods_map[smk] = sub_method

            @wraps(base)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the receiver's
                state attribute.
                """
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(type(self), repr(state_attr))
                    )
                cur = getattr(self, state_attr)
                try:
                    sm = methods_map.get(MethodKey(cls.__name__, base.__name__, cur))
                except TypeError:
                    sm = None
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if trap_exception is not None:
                    trap_exception(base, cur)
                raise NotImplementedError(
                    "Missing control path ({}={}) for {}".format(
                        state_attr, repr(cur), repr(base)
                    )
                )

            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
