"""Hierarchical dependency injection container.

Declare how each token is provided, then ask the injector for instances. Constructor
dependencies are matched by parameter type (or an explicit ``Inject`` override),
instantiated recursively and cached once per injector.

Exports:
- `Injector`: the container; `get(token)` resolves, `create_child(...)` opens a nested scope
  whose bindings shadow the parent's.
- `bind`: starts a binding for a token (`to_class`, `to_value`, `to_factory`).
- `Inject`: `Annotated` marker overriding the token injected for a constructor parameter.
- Errors: `InvalidBindingError` for malformed declarations, `NoProviderError` and
  `CyclicDependencyError` (both `ResolutionError`) for failed lookups.
"""

from ._bindings import Binding, BindingBuilder, BindingKind, bind
from ._container import Injector
from ._errors import (
    CyclicDependencyError,
    InjectorError,
    InvalidBindingError,
    NoProviderError,
    ResolutionError,
    display_name,
)
from ._reflection import Inject


__all__ = [
    "Binding",
    "BindingBuilder",
    "BindingKind",
    "CyclicDependencyError",
    "Inject",
    "Injector",
    "InjectorError",
    "InvalidBindingError",
    "NoProviderError",
    "ResolutionError",
    "bind",
    "display_name",
]
