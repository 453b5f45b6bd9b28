from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ._errors import InvalidBindingError
from ._reflection import constructor_dependencies


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


class BindingKind(Enum):
    CLASS = "class"
    VALUE = "value"
    FACTORY = "factory"


@dataclass(frozen=True)
class Binding:
    """How to produce the instance for ``token``.

    ``dependencies`` are resolved in order and passed positionally to ``provider``
    (a class for CLASS bindings, a callable for FACTORY bindings). VALUE bindings
    return ``provider`` itself and have no dependencies.
    """

    token: Any
    kind: BindingKind
    provider: Any
    dependencies: tuple[Any, ...] = ()

    def instantiate(self, args: Sequence[Any]) -> Any:
        if self.kind is BindingKind.VALUE:
            return self.provider
        return self.provider(*args)


class BindingBuilder:
    """Fluent helper turning a token into a :class:`Binding`.

    Example:
      bind(Engine).to_class(TurboEngine)
      bind("api-url").to_value("https://example.org")
      bind(Car).to_factory([Engine], lambda e: SportsCar(e))

    """

    def __init__(self, token: Any) -> None:
        self.token = token

    def to_class(self, cls: type) -> Binding:
        if not inspect.isclass(cls):
            raise InvalidBindingError(cls)
        return Binding(self.token, BindingKind.CLASS, cls, constructor_dependencies(cls))

    def to_value(self, value: Any) -> Binding:
        return Binding(self.token, BindingKind.VALUE, value)

    def to_factory(self, dependencies: Iterable[Any], factory: Callable[..., Any]) -> Binding:
        return Binding(self.token, BindingKind.FACTORY, factory, tuple(dependencies))

    def __repr__(self) -> str:
        return f"bind({self.token!r})"


def bind(token: Any) -> BindingBuilder:
    return BindingBuilder(token)


def normalize_binding(declaration: Any) -> Binding:
    """Turn one declaration (a class or a :class:`Binding`) into a Binding."""
    if isinstance(declaration, Binding):
        return declaration

    if inspect.isclass(declaration):
        return bind(declaration).to_class(declaration)

    if isinstance(declaration, BindingBuilder):
        # no provider kind was chosen
        raise InvalidBindingError(declaration, shown=declaration.token)

    raise InvalidBindingError(declaration)


def index_bindings(declarations: Iterable[Any]) -> dict[Any, Binding]:
    """Index declarations by token; later declarations replace earlier ones."""
    bindings: dict[Any, Binding] = {}
    for declaration in declarations:
        binding = normalize_binding(declaration)
        bindings[binding.token] = binding
    return bindings
