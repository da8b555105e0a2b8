"""
Model class resolution shared by the schema providers.
"""

from __future__ import annotations

import importlib

from ..exceptions import UnknownModelError, UnsupportedModelError
from .types import ModelRef


def model_identifier(cls: type) -> str:
    """Dotted path of a class, e.g. "app.models.Product"."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _split_identifier(identifier: str) -> tuple[str, str]:
    """Split "pkg.mod.Cls" or "pkg.mod:Cls" into module and attribute path."""
    if ":" in identifier:
        module_name, _, attr = identifier.partition(":")
    else:
        module_name, _, attr = identifier.rpartition(".")
    return module_name, attr


def import_model(identifier: str) -> type:
    """
    Import a model class by its dotted path.

    Both "package.module.ClassName" and "package.module:ClassName" are
    accepted; the colon form allows nested classes ("module:Outer.Inner").

    Args:
        identifier: Dotted path of the class

    Returns:
        The imported class

    Raises:
        UnknownModelError: If the module or attribute does not exist, or the
            attribute is not a class
    """
    message = f"The model class '{identifier}' does not exist."
    module_name, attr = _split_identifier(identifier)
    # Relative module paths have no anchor package
    if not module_name or not attr or module_name.startswith("."):
        raise UnknownModelError(message)

    try:
        obj: object = importlib.import_module(module_name)
    except (ImportError, ValueError) as e:
        raise UnknownModelError(message, error=str(e)) from e

    for part in attr.split("."):
        if not hasattr(obj, part):
            raise UnknownModelError(message)
        obj = getattr(obj, part)

    if not isinstance(obj, type):
        raise UnknownModelError(message, kind=type(obj).__name__)
    return obj


def table_name_of(cls: type, identifier: str | None = None) -> str:
    """
    Get the backing table name of a model class.

    Declarative classes report it through `__tablename__`; classes mapped to
    a Table object expose it as `__table__.name`.

    Raises:
        UnsupportedModelError: If the class reports neither
    """
    name = getattr(cls, "__tablename__", None)
    if isinstance(name, str) and name:
        return name

    name = getattr(getattr(cls, "__table__", None), "name", None)
    if isinstance(name, str) and name:
        return name

    identifier = identifier or model_identifier(cls)
    raise UnsupportedModelError(
        f"The model class '{identifier}' must define a table name."
    )


def resolve_class(model: str | type) -> tuple[type, str]:
    """Get the class and its identifier from either form of model reference."""
    if isinstance(model, type):
        return model, model_identifier(model)
    return import_model(model), model


def model_ref(model: str | type) -> ModelRef:
    """Resolve a model reference to a ModelRef by importing it."""
    cls, identifier = resolve_class(model)
    return ModelRef(
        identifier=identifier,
        name=cls.__name__,
        table_name=table_name_of(cls, identifier),
    )
