from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._bindings import index_bindings
from ._errors import CyclicDependencyError, NoProviderError, display_name


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._bindings import Binding

    T = TypeVar("T")


class Injector:
    """Hierarchical DI container.

    - bindings are declared up front: classes, or ``bind(token).to_*()`` results
    - one cached instance per token per injector
    - child injectors see their parent's bindings; their own bindings shadow the parent's
    - ``get(Injector)`` returns the injector resolution runs on.
    """

    def __init__(self, declarations: Iterable[Any] = (), parent: Injector | None = None) -> None:
        self._bindings: dict[Any, Binding] = index_bindings(declarations)
        self._cache: dict[Any, object] = {}
        self._parent = parent
        self._lock = threading.RLock()
        logger.debug(
            "Created injector with %d binding(s)%s", len(self._bindings), " (child)" if parent is not None else ""
        )

    @property
    def parent(self) -> Injector | None:
        return self._parent

    @overload
    def get(self, token: type[T]) -> T: ...

    @overload
    def get(self, token: Any) -> Any: ...

    def get(self, token: Any) -> Any:
        """Resolve the token to an instance.

        - The ``Injector`` token resolves to this injector.
        - A cached instance is returned as is.
        - A token bound here is constructed (dependencies resolved on this injector) and cached here.
        - Anything else is looked up in the parent, which keeps ownership of the instance.

        Raises NoProviderError when nothing in the chain binds the token, and
        CyclicDependencyError when the token (transitively) depends on itself.
        """
        return self._lookup(token, (token,), ())

    def create_child(self, declarations: Iterable[Any] = ()) -> Injector:
        """Create an injector that prefers its own bindings and falls back to this one."""
        return Injector(declarations, parent=self)

    def _lookup(self, token: Any, path: tuple[Any, ...], building: tuple[tuple[Injector, Any], ...]) -> Any:
        # path: tokens requested so far, for messages. building: (injector, token) bindings under construction.
        if token is Injector:
            return self

        with self._lock:
            if token in self._cache:
                return self._cache[token]

            binding = self._bindings.get(token)
            if binding is not None:
                if (self, token) in building:
                    raise CyclicDependencyError(path)
                building = (*building, (self, token))
                args = [self._lookup(dep, (*path, dep), building) for dep in binding.dependencies]
                logger.debug("Instantiating %s (%s binding)", display_name(token), binding.kind.value)
                instance = binding.instantiate(args)
                self._cache[token] = instance
                return instance

        if self._parent is not None:
            logger.debug("No binding for %s, delegating to parent injector", display_name(token))
            return self._parent._lookup(token, path, building)  # noqa: SLF001

        raise NoProviderError(path)

    def __contains__(self, token: Any) -> bool:
        injector: Injector | None = self
        while injector is not None:
            if token is Injector or token in injector._bindings:  # noqa: SLF001
                return True
            injector = injector._parent  # noqa: SLF001
        return False

    def __repr__(self) -> str:
        names = ", ".join(display_name(t) for t in self._bindings)
        return f"Injector([{names}]{', child' if self._parent is not None else ''})"
