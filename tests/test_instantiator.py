import pytest

from core.errors import (
    ConstructionError,
    InstantiationError,
    NoDefaultConstructorError,
    TypeNotFoundError,
)
from services.instantiator import Instantiator
from tests.fixtures import beans


def test_instantiates_fresh_instances():
    instantiator = Instantiator()

    first = instantiator.instantiate("tests.fixtures.beans.Circle")
    second = instantiator.instantiate("tests.fixtures.beans.Circle")

    assert isinstance(first, beans.Circle)
    assert first is not second
    assert first.radius == 1.0  # Default argument used


def test_instantiates_nested_class():
    instance = Instantiator().instantiate("tests.fixtures.beans.Outer.Inner")
    assert isinstance(instance, beans.Outer.Inner)


def test_registry_is_consulted_first():
    instantiator = Instantiator(registry={"circle": beans.Square})

    assert isinstance(instantiator.instantiate("circle"), beans.Square)


@pytest.mark.parametrize(
    "implementation_id",
    [
        "tests.fixtures.beans.Hexagon",
        "no_such_package.module.Thing",
        "Circle",
        "tests..beans.Circle",
        "tests.fixtures.beans.NOT_A_CLASS",
    ],
)
def test_unknown_type_raises_type_not_found(implementation_id):
    with pytest.raises(TypeNotFoundError) as excinfo:
        Instantiator().instantiate(implementation_id)

    assert excinfo.value.implementation_id == implementation_id
    assert isinstance(excinfo.value, InstantiationError)


def test_module_import_failure_raises_type_not_found():
    with pytest.raises(TypeNotFoundError) as excinfo:
        Instantiator().instantiate("tests.fixtures.broken_module.Thing")

    assert isinstance(excinfo.value.__cause__, ModuleNotFoundError)


def test_registry_entry_must_be_a_class():
    with pytest.raises(TypeNotFoundError):
        Instantiator(registry={"circle": beans.Circle()}).instantiate("circle")


def test_constructor_with_required_arguments():
    with pytest.raises(NoDefaultConstructorError) as excinfo:
        Instantiator().instantiate("tests.fixtures.beans.NeedsArgs")

    assert "side" in str(excinfo.value)


def test_abstract_class_has_no_default_constructor():
    with pytest.raises(NoDefaultConstructorError):
        Instantiator().instantiate("tests.fixtures.beans.UnfinishedShape")


def test_constructor_failure_is_wrapped():
    with pytest.raises(ConstructionError) as excinfo:
        Instantiator().instantiate("tests.fixtures.beans.Exploding")

    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "boom" in str(excinfo.value)


def test_bare_builtin_names_match_builtin_capability_ids():
    from services.resolver import capability_id_for

    assert capability_id_for(dict) == "dict"
    assert Instantiator().instantiate("dict") == {}
    assert Instantiator().locate(capability_id_for(int)) is int
