from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence


def display_name(token: Any) -> str:
    """Human readable name of a token: the class name for types, ``str()`` otherwise."""
    if isinstance(token, type):
        return token.__name__
    return str(token)


def _format_path(path: Sequence[Any]) -> str:
    return " -> ".join(display_name(t) for t in path)


class InjectorError(Exception):
    pass


class InvalidBindingError(InjectorError, TypeError):
    def __init__(self, declaration: Any, shown: Any = None) -> None:
        self.declaration = declaration
        super().__init__(f"Invalid binding {display_name(declaration if shown is None else shown)}")


class ResolutionError(InjectorError, RuntimeError):
    def __init__(self, msg: str, token: Any, path: Sequence[Any]) -> None:
        self.token = token
        self.path = tuple(path)
        super().__init__(msg)


class NoProviderError(ResolutionError):
    def __init__(self, path: Sequence[Any]) -> None:
        token = path[-1]
        msg = f"No provider for {display_name(token)}!"
        if len(path) > 1:
            msg = f"{msg} ({_format_path(path)})"
        super().__init__(msg, token, path)


class CyclicDependencyError(ResolutionError):
    def __init__(self, path: Sequence[Any]) -> None:
        msg = f"Cannot instantiate cyclic dependency! ({_format_path(path)})"
        super().__init__(msg, path[-1], path)
