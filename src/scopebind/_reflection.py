from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints


logger = logging.getLogger(__name__)

_INJECTABLE_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True)
class Inject:
    """Override the token injected for a constructor parameter.

    Used as ``Annotated`` metadata, so the declared type stays visible to type checkers:

      class Car:
          def __init__(self, engine: Annotated[Engine, Inject(TurboEngine)]): ...
    """

    token: Any


def constructor_dependencies(cls: type) -> tuple[Any, ...]:
    """Dependency tokens of ``cls``'s constructor, in parameter order.

    Only positional parameters are injected. For each one the token is, in order of
    precedence: the ``Inject`` override, the annotated type, the parameter name.
    """
    try:
        sig = inspect.signature(cls)
    except ValueError:
        # builtins without a signature (e.g. some C types) take no injected arguments
        return ()

    hints = _get_init_type_hints(cls)
    return tuple(
        _parameter_token(name, hints.get(name, p.annotation))
        for name, p in sig.parameters.items()
        if p.kind in _INJECTABLE_KINDS
    )


def _parameter_token(name: str, ann: Any) -> Any:
    if ann is inspect.Parameter.empty:
        return name

    if get_origin(ann) is Annotated:
        base, *metadata = get_args(ann)
        override = next((m for m in metadata if isinstance(m, Inject)), None)
        return override.token if override is not None else base

    return ann


def _get_init_type_hints(cls: type) -> dict[str, Any]:
    try:
        init = inspect.getattr_static(cls, "__init__")
        hints = get_type_hints(init, include_extras=True)
    except TypeError:
        hints = {}
    except NameError as exc:
        logger.warning("'%s' name error retrieving %s (%s) type hints", exc.name, cls.__name__, cls.__qualname__)
        hints = {}

    return hints
