from typing import Annotated

import pytest

from scopebind import Inject, Injector, InvalidBindingError, NoProviderError, bind


class Engine: ...


class Dashboard: ...


class TurboEngine(Engine): ...


class Car:
    def __init__(self, engine: Engine):
        self.engine = engine


class CarWithDashboard:
    def __init__(self, engine: Engine, dashboard: Dashboard):
        self.engine = engine
        self.dashboard = dashboard


class SportsCar(Car):
    def __init__(self, engine: Engine):
        super().__init__(engine)


class CarWithInject:
    def __init__(self, engine: Annotated[Engine, Inject(TurboEngine)]):
        self.engine = engine


def test_instantiates_class_without_dependencies():
    injector = Injector([Engine])
    engine = injector.get(Engine)

    assert isinstance(engine, Engine)


def test_resolves_dependencies_from_type_annotations():
    injector = Injector([Engine, Car])
    car = injector.get(Car)

    assert isinstance(car, Car)
    assert isinstance(car.engine, Engine)


def test_resolves_dependencies_from_inject_annotation():
    injector = Injector([TurboEngine, Engine, CarWithInject])
    car = injector.get(CarWithInject)

    assert isinstance(car, CarWithInject)
    assert isinstance(car.engine, TurboEngine)


def test_caches_instances():
    injector = Injector([Engine])

    e1 = injector.get(Engine)
    e2 = injector.get(Engine)

    assert e1 is e2


def test_dependencies_are_shared_within_injector():
    injector = Injector([Engine, Car, CarWithDashboard, Dashboard])

    assert injector.get(Car).engine is injector.get(CarWithDashboard).engine
    assert injector.get(Car).engine is injector.get(Engine)


def test_binds_to_value():
    injector = Injector([bind(Engine).to_value("fake engine")])

    assert injector.get(Engine) == "fake engine"


def test_binds_to_factory():
    injector = Injector(
        [
            Engine,
            bind(Car).to_factory([Engine], lambda e: SportsCar(e)),
        ]
    )

    car = injector.get(Car)
    assert isinstance(car, SportsCar)
    assert isinstance(car.engine, Engine)


def test_binds_to_class():
    injector = Injector([Engine, bind(Car).to_class(SportsCar)])

    car = injector.get(Car)
    assert isinstance(car, SportsCar)
    assert car.engine is injector.get(Engine)


def test_uses_non_type_tokens():
    injector = Injector([bind("token").to_value("value")])

    assert injector.get("token") == "value"


def test_later_declaration_replaces_earlier_one():
    injector = Injector([bind("token").to_value(1), bind("token").to_value(2)])

    assert injector.get("token") == 2


def test_raises_on_invalid_bindings():
    with pytest.raises(InvalidBindingError, match="^Invalid binding blah$"):
        Injector(["blah"])

    with pytest.raises(InvalidBindingError, match="^Invalid binding blah$"):
        Injector([bind("blah")])


def test_provides_itself():
    injector = Injector()

    assert injector.get(Injector) is injector


def test_class_can_depend_on_injector():
    class NeedsInjector:
        def __init__(self, injector: Injector):
            self.injector = injector

    injector = Injector([NeedsInjector])

    assert injector.get(NeedsInjector).injector is injector


def test_raises_when_no_provider_defined():
    injector = Injector()

    with pytest.raises(NoProviderError) as ctx:
        injector.get("NonExisting")
    assert str(ctx.value) == "No provider for NonExisting!"


def test_shows_full_path_when_no_provider():
    injector = Injector([CarWithDashboard, Engine])

    with pytest.raises(NoProviderError) as ctx:
        injector.get(CarWithDashboard)
    assert str(ctx.value) == "No provider for Dashboard! (CarWithDashboard -> Dashboard)"
    assert ctx.value.token is Dashboard
    assert ctx.value.path == (CarWithDashboard, Dashboard)


def test_contains_reports_bound_tokens():
    injector = Injector([Engine])

    assert Engine in injector
    assert Injector in injector
    assert Car not in injector


def test_repr_lists_own_bindings():
    parent = Injector([Engine, bind("token").to_value(1)])

    assert repr(parent) == "Injector([Engine, token])"
    assert repr(parent.create_child([Car])) == "Injector([Car], child)"
